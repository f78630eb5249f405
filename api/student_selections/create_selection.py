from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, parse_positive_int, parse_bool

from . import student_selections_bp

DUPLICATE_MESSAGE = 'Selection already exists for this student and manager'


@student_selections_bp.route('/student-selections', methods=['POST'])
@log_action('Create student selection')
@handle_db_errors('create student selection', duplicate_message=DUPLICATE_MESSAGE)
def api_create_selection():
    data = get_request_data()
    student_id = parse_positive_int(data.get('studentId'))
    manager_id = parse_positive_int(data.get('managerId'))

    if student_id is None or manager_id is None:
        return error_response('Student ID and Manager ID are required', 400)

    is_selected = parse_bool(data.get('isSelected'))

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.student_exists(cursor, student_id):
            return error_response('Student not found', 404)
        if not db_manager.manager_exists(cursor, manager_id):
            return error_response('Manager not found', 404)

        if db_manager.fetch_selection_for_pair(cursor, student_id, manager_id):
            return error_response(DUPLICATE_MESSAGE, 400)

        selection_id = db_manager.insert_selection(cursor, student_id, manager_id, is_selected)
        conn.commit()

        selection = db_manager.fetch_selection(cursor, selection_id)

    return jsonify({'success': True, 'selection': serialize_row(selection)}), 201
