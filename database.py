#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - database connection and bootstrap
"""

import mysql.connector
from mysql.connector import Error, pooling
from mysql.connector.errors import PoolError
from contextlib import contextmanager
import logging
import threading
import time

from flask import current_app

from models import DATABASE_SCHEMA
from db_modules import (
    ManagerDbMixin,
    SportDbMixin,
    TeamDbMixin,
    StudentDbMixin,
    CoachDbMixin,
    SelectionDbMixin,
    StudentLinkDbMixin,
    EventImageDbMixin,
    NoticeDbMixin,
)

logger = logging.getLogger(__name__)


class PoolExhaustedError(PoolError):
    """Raised when no pooled connection frees up within the acquire timeout"""


class TimedCursorWrapper:
    def __init__(self, cursor, slow_threshold_ms=50):
        self._cursor = cursor
        self._slow_threshold_ms = slow_threshold_ms

    def execute(self, operation, params=None):
        start = time.perf_counter()
        try:
            return self._cursor.execute(operation, params)
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            if duration_ms >= self._slow_threshold_ms:
                logger.warning(
                    "Slow query took %.1f ms: %s; params=%s",
                    duration_ms,
                    operation,
                    params,
                )

    def executemany(self, operation, seq_params):
        start = time.perf_counter()
        try:
            return self._cursor.executemany(operation, seq_params)
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            if duration_ms >= self._slow_threshold_ms:
                logger.warning(
                    "Slow query (executemany) took %.1f ms: %s; params_count=%d",
                    duration_ms,
                    operation,
                    len(seq_params) if seq_params is not None else 0,
                )

    def __getattr__(self, item):
        return getattr(self._cursor, item)


class DatabaseManager(
    ManagerDbMixin,
    SportDbMixin,
    TeamDbMixin,
    StudentDbMixin,
    CoachDbMixin,
    SelectionDbMixin,
    StudentLinkDbMixin,
    EventImageDbMixin,
    NoticeDbMixin,
):
    """Database manager

    Owns the connection pool for one application instance. Every request
    borrows exactly one connection through get_connection().
    """

    def __init__(self, settings):
        self.config = {
            'host': settings['DB_HOST'],
            'port': settings['DB_PORT'],
            'user': settings['DB_USER'],
            'password': settings['DB_PASSWORD'],
            'database': settings['DB_NAME'],
            'charset': 'utf8mb4',
            'collation': 'utf8mb4_unicode_ci',
            'autocommit': False,
            'raise_on_warnings': False,
            'connection_timeout': settings.get('DB_CONNECT_TIMEOUT', 10),
        }
        self.pool_name = settings.get('DB_POOL_NAME', 'sports_pool')
        self.pool_size = int(settings.get('DB_POOL_SIZE', 5))
        self.acquire_timeout = float(settings.get('DB_ACQUIRE_TIMEOUT', 30))
        self.slow_threshold_ms = settings.get('SLOW_QUERY_THRESHOLD_MS', 50)

        self.pool = None
        self._pool_lock = threading.Lock()
        # Bounds concurrent borrowers; callers past the bound queue here
        self._slots = threading.BoundedSemaphore(self.pool_size)

    def _get_connection_pool(self):
        """Create the pool on first use"""
        if self.pool is None:
            with self._pool_lock:
                if self.pool is None:
                    self.pool = pooling.MySQLConnectionPool(
                        pool_name=self.pool_name,
                        pool_size=self.pool_size,
                        pool_reset_session=True,
                        **self.config
                    )
                    logger.info("Database connection pool created, size: %d", self.pool_size)
        return self.pool

    @contextmanager
    def get_connection(self):
        """Borrow a pooled connection for the duration of the block"""
        if not self._slots.acquire(timeout=self.acquire_timeout):
            raise PoolExhaustedError(
                msg=f"No database connection available within {self.acquire_timeout:g}s; pool exhausted"
            )

        connection = None
        try:
            connection = self._get_connection_pool().get_connection()

            original_cursor = connection.cursor

            def timed_cursor(*args, **kwargs):
                base_cursor = original_cursor(*args, **kwargs)
                return TimedCursorWrapper(base_cursor, slow_threshold_ms=self.slow_threshold_ms)

            connection.cursor = timed_cursor

            yield connection
        except Exception as e:
            if isinstance(e, Error):
                logger.error("Database connection error: %s", e)
            if connection is not None:
                try:
                    connection.rollback()
                except Error as rollback_error:
                    logger.warning("Rollback failed: %s", rollback_error)
            raise
        finally:
            try:
                # close() is what hands a pooled connection back, even a dead one
                if connection is not None:
                    connection.close()
            except Error as close_error:
                logger.warning("Returning connection to pool failed: %s", close_error)
            finally:
                self._slots.release()

    def init_database(self, force_recreate=False):
        """Create the database and tables

        Args:
            force_recreate (bool): drop existing tables before creating them
        """
        try:
            temp_config = self.config.copy()
            temp_config.pop('database', None)

            with mysql.connector.connect(**temp_config) as connection:
                cursor = connection.cursor()
                try:
                    cursor.execute(
                        f"CREATE DATABASE IF NOT EXISTS {self.config['database']} "
                        f"CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
                    )
                except Error as e:
                    # 1007: database exists
                    if '1007' not in str(e):
                        logger.warning("Warning while creating database: %s", e)

            with self.get_connection() as connection:
                cursor = connection.cursor()

                if force_recreate:
                    logger.info("Force recreate: dropping existing tables...")
                    for table_name in reversed(list(DATABASE_SCHEMA.keys())):
                        try:
                            cursor.execute(f"DROP TABLE IF EXISTS {table_name}")
                            logger.info("Dropped table %s", table_name)
                        except Error as e:
                            logger.warning("Failed to drop table %s: %s", table_name, e)
                else:
                    self._migrate_database(cursor)

                for table_name, schema in DATABASE_SCHEMA.items():
                    try:
                        cursor.execute(schema)
                    except Error as e:
                        logger.error("Failed to create table %s: %s", table_name, e)
                        raise

                connection.commit()
                logger.info("Database tables initialized successfully")

        except Error as e:
            logger.error("Database initialization failed: %s", e)
            raise

    def _migrate_database(self, cursor):
        """Add columns introduced after the first release"""
        try:
            if self._table_exists(cursor, 'managers'):
                cursor.execute("SHOW COLUMNS FROM managers LIKE 'teamId'")
                if not cursor.fetchone():
                    cursor.execute("ALTER TABLE managers ADD COLUMN teamId INT DEFAULT NULL AFTER studentCount")
                    logger.info("Added teamId column to managers")

                cursor.execute("SHOW INDEX FROM managers WHERE Key_name = 'idx_team'")
                if not cursor.fetchall():
                    cursor.execute("ALTER TABLE managers ADD INDEX idx_team (teamId)")
                    logger.info("Added idx_team index to managers")

                if self._table_exists(cursor, 'teams'):
                    cursor.execute(
                        """
                        SELECT CONSTRAINT_NAME FROM information_schema.TABLE_CONSTRAINTS
                        WHERE TABLE_SCHEMA = DATABASE() AND TABLE_NAME = 'managers'
                          AND CONSTRAINT_NAME = 'fk_managers_team'
                        """
                    )
                    if not cursor.fetchall():
                        cursor.execute(
                            "ALTER TABLE managers ADD CONSTRAINT fk_managers_team "
                            "FOREIGN KEY (teamId) REFERENCES teams(id) ON DELETE SET NULL"
                        )
                        logger.info("Added fk_managers_team constraint to managers")

            if self._table_exists(cursor, 'students'):
                cursor.execute("SHOW COLUMNS FROM students LIKE 'linkToken'")
                if not cursor.fetchone():
                    cursor.execute("ALTER TABLE students ADD COLUMN linkToken VARCHAR(64) DEFAULT NULL AFTER managerId")
                    cursor.execute("ALTER TABLE students ADD INDEX idx_link_token (linkToken)")
                    logger.info("Added linkToken column to students")

        except Error as e:
            if "doesn't exist" in str(e):
                logger.info("Tables missing, they will be created next")
            else:
                logger.error("Database migration failed: %s", e)
                raise

    def _table_exists(self, cursor, table_name):
        """Check whether a table exists"""
        try:
            cursor.execute("SHOW TABLES LIKE %s", (table_name,))
            return cursor.fetchone() is not None
        except Error as e:
            logger.error("Error checking whether table %s exists: %s", table_name, e)
            return False


def get_db_manager():
    """Database manager bound to the current application"""
    return current_app.extensions['db_manager']


if __name__ == '__main__':
    from config import Config

    settings = {key: getattr(Config, key) for key in dir(Config) if key.isupper()}
    db_manager = DatabaseManager(settings)
    try:
        db_manager.init_database()
        print("Database initialized successfully")
    except Exception as e:
        print(f"Database initialization failed: {e}")
