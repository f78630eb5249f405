import pytest
from mysql.connector.errors import DatabaseError, OperationalError, PoolError

from database import DatabaseManager, PoolExhaustedError, TimedCursorWrapper

SETTINGS = {
    'DB_HOST': 'localhost',
    'DB_PORT': 3306,
    'DB_USER': 'tester',
    'DB_PASSWORD': '',
    'DB_NAME': 'sports_website_test',
    'DB_POOL_SIZE': 1,
    'DB_ACQUIRE_TIMEOUT': 0.05,
}


class StubCursor:
    def __init__(self):
        self.executed = []

    def execute(self, operation, params=None):
        self.executed.append((operation, params))

    def fetchone(self):
        return None


class StubConnection:
    def __init__(self):
        self.closed = False
        self.rolled_back = False

    def cursor(self, *args, **kwargs):
        return StubCursor()

    def rollback(self):
        self.rolled_back = True

    def is_connected(self):
        return not self.closed

    def close(self):
        self.closed = True


class StubPool:
    def __init__(self):
        self.handed_out = []

    def get_connection(self):
        connection = StubConnection()
        self.handed_out.append(connection)
        return connection


@pytest.fixture
def manager():
    manager = DatabaseManager(SETTINGS)
    manager.pool = StubPool()
    return manager


def test_connection_returned_after_block(manager):
    with manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        assert isinstance(cursor, TimedCursorWrapper)
        cursor.execute("SELECT 1")

    # the single slot was released, so a second borrow succeeds
    with manager.get_connection():
        pass

    assert [c.closed for c in manager.pool.handed_out] == [True, True]


def test_connection_released_and_rolled_back_on_error(manager):
    with pytest.raises(DatabaseError):
        with manager.get_connection():
            raise DatabaseError(msg='boom')

    first = manager.pool.handed_out[0]
    assert first.rolled_back is True
    assert first.closed is True

    with manager.get_connection():
        pass


def test_pool_exhausted_after_timeout(manager):
    with manager.get_connection():
        with pytest.raises(PoolExhaustedError):
            with manager.get_connection():
                pass

    assert len(manager.pool.handed_out) == 1


def test_early_return_releases_slot(manager):
    def lookup():
        with manager.get_connection() as conn:
            conn.cursor().execute("SELECT 1")
            return 'found'

    assert lookup() == 'found'
    assert lookup() == 'found'


def test_settings_mapping(manager):
    assert manager.config['database'] == 'sports_website_test'
    assert manager.config['autocommit'] is False
    assert manager.pool_size == 1
    assert manager.acquire_timeout == 0.05


class QueuePool:
    """Hands out a fixed set of connections; close() puts them back"""

    def __init__(self, size):
        self.idle = [PooledStubConnection(self) for _ in range(size)]

    def get_connection(self):
        if not self.idle:
            raise PoolError(msg='Failed getting connection; pool exhausted')
        return self.idle.pop()


class PooledStubConnection(StubConnection):
    def __init__(self, pool):
        super().__init__()
        self.pool = pool
        self.alive = True

    def is_connected(self):
        return self.alive

    def close(self):
        # a dead session fails its reset but still goes back to the pool
        self.pool.idle.append(self)
        if not self.alive:
            raise OperationalError(msg='Lost connection to MySQL server', errno=2013)


def test_dropped_connections_go_back_to_pool():
    manager = DatabaseManager(dict(SETTINGS, DB_POOL_SIZE=2))
    manager.pool = QueuePool(2)

    for _ in range(2):
        with pytest.raises(OperationalError):
            with manager.get_connection() as conn:
                conn.alive = False
                raise OperationalError(msg='Lost connection to MySQL server', errno=2013)

    assert len(manager.pool.idle) == 2

    with manager.get_connection() as conn:
        conn.alive = True
        conn.cursor().execute("SELECT 1")
