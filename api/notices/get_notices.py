from flask import jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response

from . import notices_bp


@notices_bp.route('/notices', methods=['GET'])
@handle_db_errors('fetch notices')
def api_get_notices():
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        notices = db_manager.fetch_notices(cursor)

    return jsonify(serialize_rows(notices))


@notices_bp.route('/notices/<int:notice_id>', methods=['GET'])
@handle_db_errors('fetch notice')
def api_get_notice(notice_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        notice = db_manager.fetch_notice(cursor, notice_id)

    if not notice:
        return error_response('Notice not found', 404)

    return jsonify(serialize_row(notice))
