from flask import jsonify

from database import get_db_manager
from utils.decorators import log_action, handle_db_errors
from utils.helpers import error_response

from . import managers_bp


@managers_bp.route('/managers/<int:manager_id>', methods=['DELETE'])
@log_action('Delete manager')
@handle_db_errors('delete manager')
def api_delete_manager(manager_id):
    """Delete a manager together with their students, coaches, selections and links"""
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.manager_exists(cursor, manager_id):
            return error_response('Manager not found', 404)

        db_manager.delete_manager(cursor, manager_id)
        conn.commit()

    return jsonify({'success': True, 'message': 'Manager deleted successfully'})
