from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import handle_db_errors
from utils.helpers import error_response

from . import managers_bp


@managers_bp.route('/managers/<int:manager_id>', methods=['GET'])
@handle_db_errors('fetch manager')
def api_get_manager(manager_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        manager = db_manager.fetch_manager(cursor, manager_id)

    if not manager:
        return error_response('Manager not found', 404)

    return jsonify(serialize_row(manager))
