from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response

from . import students_bp
from .payload import read_student


@students_bp.route('/students', methods=['POST'])
@log_action('Create student')
@handle_db_errors('create student', duplicate_message='PRN/UID already exists')
def api_create_student():
    student, error = read_student(get_request_data())
    if error:
        return error_response(error, 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.manager_exists(cursor, student['managerId']):
            return error_response('Manager not found', 404)

        if db_manager.prn_uid_taken(cursor, student['prn_uid']):
            return error_response('PRN/UID already exists', 400)

        student_id = db_manager.insert_student(cursor, student)
        conn.commit()

        created = db_manager.fetch_student(cursor, student_id)

    return jsonify({'success': True, 'student': serialize_row(created)}), 201
