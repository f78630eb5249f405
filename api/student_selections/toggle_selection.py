from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, parse_positive_int

from . import student_selections_bp


@student_selections_bp.route('/student-selections/toggle', methods=['POST'])
@log_action('Toggle student selection')
@handle_db_errors('toggle student selection')
def api_toggle_selection():
    """Set the flag for a (student, manager) pair, creating the row if needed

    The write is a single INSERT ... ON DUPLICATE KEY UPDATE, so two
    concurrent toggles for a new pair cannot both insert.
    """
    data = get_request_data()
    student_id = parse_positive_int(data.get('studentId'))
    manager_id = parse_positive_int(data.get('managerId'))
    is_selected = data.get('isSelected')

    if student_id is None or manager_id is None or not isinstance(is_selected, bool):
        return error_response('Student ID, Manager ID, and isSelected (boolean) are required', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.student_exists(cursor, student_id):
            return error_response('Student not found', 404)
        if not db_manager.manager_exists(cursor, manager_id):
            return error_response('Manager not found', 404)

        db_manager.upsert_selection(cursor, student_id, manager_id, is_selected)
        conn.commit()

        selection = db_manager.fetch_selection_for_pair(cursor, student_id, manager_id)

    return jsonify({
        'success': True,
        'message': f"Student {'selected' if is_selected else 'deselected'} successfully",
        'selection': serialize_row(selection),
    })
