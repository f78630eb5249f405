from flask import jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response

from . import managers_bp


@managers_bp.route('/managers', methods=['GET'])
@handle_db_errors('fetch managers')
def api_get_managers():
    """All managers, newest first"""
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        managers = db_manager.fetch_managers(cursor)

    return jsonify(serialize_rows(managers))


@managers_bp.route('/managers/count', methods=['GET'])
@handle_db_errors('fetch manager count')
def api_get_manager_count():
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        count = db_manager.count_managers(cursor)

    return jsonify({'count': count})


@managers_bp.route('/managers/email/<path:email>', methods=['GET'])
@handle_db_errors('fetch manager')
def api_get_manager_by_email(email):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        manager = db_manager.fetch_manager_by_email(cursor, email.strip())

    if not manager:
        return error_response('Manager not found', 404)

    return jsonify(serialize_row(manager))
