"""
Shared fixtures: an application wired to a scripted in-memory database.

FakeDatabaseManager keeps every real SQL mixin method, only the connection
is replaced. Statements are answered by rules matched on a fragment of the
(whitespace-normalized) SQL; the most recently added matching rule wins.
"""

import io
from collections import namedtuple
from contextlib import contextmanager

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from app import create_app
from database import DatabaseManager, PoolExhaustedError

Rule = namedtuple('Rule', ['fragment', 'result', 'error'])


def normalize_sql(sql):
    return ' '.join(sql.split())


def duplicate_entry(message='Duplicate entry'):
    return IntegrityError(msg=message, errno=errorcode.ER_DUP_ENTRY)


def image_file(name='picture.png', content=b'\x89PNG fake image', mimetype='image/png'):
    return (io.BytesIO(content), name, mimetype)


def pdf_file(name='notice.pdf', content=b'%PDF-1.4 fake', mimetype='application/pdf'):
    return (io.BytesIO(content), name, mimetype)


class FakeCursor:
    def __init__(self, db):
        self.db = db
        self.lastrowid = None
        self._rows = []

    def execute(self, operation, params=None):
        sql = normalize_sql(operation)
        self.db.executed.append((sql, params))

        rule = self.db.match(sql)
        if rule is not None and rule.error is not None:
            raise rule.error

        result = None
        if rule is not None:
            result = rule.result(params) if callable(rule.result) else rule.result

        if sql.startswith('INSERT'):
            self.lastrowid = self.db.next_id()

        if result is None:
            self._rows = []
        elif isinstance(result, list):
            self._rows = list(result)
        else:
            self._rows = [result]

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db):
        self.db = db

    def cursor(self, dictionary=False, **kwargs):
        return FakeCursor(self.db)

    def commit(self):
        self.db.commits += 1

    def rollback(self):
        self.db.rollbacks += 1


class FakeDatabaseManager(DatabaseManager):
    def __init__(self):
        self.rules = []
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.acquired = 0
        self.released = 0
        self.exhausted = False
        self.init_calls = 0
        self.init_error = None
        self._last_id = 100

    def on(self, fragment, result=None, error=None):
        self.rules.append(Rule(normalize_sql(fragment), result, error))
        return self

    def match(self, sql):
        for rule in reversed(self.rules):
            if rule.fragment in sql:
                return rule
        return None

    def next_id(self):
        self._last_id += 1
        return self._last_id

    def statements(self, prefix):
        """(sql, params) pairs whose SQL starts with prefix"""
        return [(sql, params) for sql, params in self.executed if sql.startswith(prefix)]

    @contextmanager
    def get_connection(self):
        if self.exhausted:
            raise PoolExhaustedError(msg="No database connection available within 1s; pool exhausted")

        self.acquired += 1
        connection = FakeConnection(self)
        try:
            yield connection
        except Exception:
            connection.rollback()
            raise
        finally:
            self.released += 1

    def init_database(self, force_recreate=False):
        self.init_calls += 1
        if self.init_error is not None:
            raise self.init_error


@pytest.fixture
def db():
    return FakeDatabaseManager()


@pytest.fixture
def app_overrides(tmp_path):
    return {
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
        'DATA_FOLDER': str(tmp_path / 'data'),
        'PUBLIC_BASE_URL': 'http://testserver:4002',
    }


@pytest.fixture
def app(db, app_overrides):
    return create_app('testing', db_manager=db, overrides=app_overrides)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upload_dir(app):
    return app.config['UPLOAD_FOLDER']
