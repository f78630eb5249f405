from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response

from . import students_bp
from .payload import read_student


@students_bp.route('/students/<int:student_id>', methods=['PUT'])
@log_action('Update student')
@handle_db_errors('update student', duplicate_message='PRN/UID already exists')
def api_update_student(student_id):
    """The owning manager never changes; age is recomputed from birthDate"""
    student, error = read_student(get_request_data(), require_manager=False)
    if error:
        return error_response(error, 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.student_exists(cursor, student_id):
            return error_response('Student not found', 404)

        if db_manager.prn_uid_taken(cursor, student['prn_uid'], exclude_id=student_id):
            return error_response('PRN/UID already exists', 400)

        db_manager.update_student(cursor, student_id, student)
        conn.commit()

        updated = db_manager.fetch_student(cursor, student_id)

    return jsonify({'success': True, 'student': serialize_row(updated)})
