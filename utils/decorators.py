#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - handler decorators
"""

from functools import wraps
import logging
import time

from flask import request
from mysql.connector import Error, errorcode
from werkzeug.exceptions import HTTPException

from utils.helpers import error_response
from utils.uploads import UploadError

logger = logging.getLogger(__name__)

CONNECTION_ERRNOS = {
    errorcode.CR_CONNECTION_ERROR,
    errorcode.CR_CONN_HOST_ERROR,
    errorcode.CR_UNKNOWN_HOST,
    errorcode.CR_SERVER_GONE_ERROR,
    errorcode.CR_SERVER_LOST,
}


def log_action(action_name):
    """Operation log decorator

    Args:
        action_name: human readable operation name
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            client = request.remote_addr

            start_time = time.perf_counter()
            logger.info(f"Client {client} started: {action_name}")

            try:
                result = f(*args, **kwargs)

                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.info(f"Client {client} finished: {action_name}, took {duration_ms:.1f} ms")

                return result

            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"Client {client} failed: {action_name}, took {duration_ms:.1f} ms, error: {str(e)}"
                )
                raise

        return decorated_function
    return decorator


def handle_db_errors(action, duplicate_message=None):
    """Turn exceptions escaping a handler into JSON error responses

    Args:
        action: what the handler does, used in the 500 message ("create sport")
        duplicate_message: 400 message for unique-key violations reported by the database
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except (HTTPException, UploadError):
                raise
            except Error as e:
                logger.exception(f"Database error while trying to {action}: {e}")

                if e.errno == errorcode.ER_DUP_ENTRY:
                    return error_response(duplicate_message or 'Duplicate entry', 400)
                if e.errno == errorcode.ER_NO_REFERENCED_ROW_2:
                    return error_response('Referenced record does not exist', 400, details=str(e))
                if e.errno == errorcode.ER_NO_SUCH_TABLE:
                    return error_response(
                        'Table not found. Please restart the server to initialize database tables.',
                        500,
                        details=str(e),
                    )
                if e.errno in CONNECTION_ERRNOS:
                    return error_response(
                        'Database connection failed. Please check database configuration.',
                        500,
                        details=str(e),
                    )
                return error_response(f'Failed to {action}', 500, details=str(e))
            except Exception as e:
                logger.exception(f"Unexpected error while trying to {action}: {e}")
                return error_response(f'Failed to {action}', 500, details=str(e))

        return decorated_function
    return decorator
