from flask import jsonify

from database import get_db_manager
from utils.decorators import log_action, handle_db_errors
from utils.helpers import error_response

from . import students_bp


@students_bp.route('/students/<int:student_id>', methods=['DELETE'])
@log_action('Delete student')
@handle_db_errors('delete student')
def api_delete_student(student_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.student_exists(cursor, student_id):
            return error_response('Student not found', 404)

        db_manager.delete_student(cursor, student_id)
        conn.commit()

    return jsonify({'success': True, 'message': 'Student deleted successfully'})
