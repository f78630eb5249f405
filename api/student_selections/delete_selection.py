from flask import jsonify

from database import get_db_manager
from utils.decorators import log_action, handle_db_errors
from utils.helpers import error_response

from . import student_selections_bp


@student_selections_bp.route('/student-selections/<int:selection_id>', methods=['DELETE'])
@log_action('Delete student selection')
@handle_db_errors('delete student selection')
def api_delete_selection(selection_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.fetch_selection(cursor, selection_id):
            return error_response('Selection not found', 404)

        db_manager.delete_selection(cursor, selection_id)
        conn.commit()

    return jsonify({'success': True, 'message': 'Selection deleted successfully'})
