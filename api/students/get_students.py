from flask import request, jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response, parse_positive_int

from . import students_bp


@students_bp.route('/students', methods=['GET'])
@handle_db_errors('fetch students')
def api_get_students():
    """All students, or one manager's with ?managerId="""
    manager_id = parse_positive_int(request.args.get('managerId'))

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        students = db_manager.fetch_students(cursor, manager_id)

    return jsonify(serialize_rows(students))


@students_bp.route('/students/<int:student_id>', methods=['GET'])
@handle_db_errors('fetch student')
def api_get_student(student_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        student = db_manager.fetch_student(cursor, student_id)

    if not student:
        return error_response('Student not found', 404)

    return jsonify(serialize_row(student))


@students_bp.route('/students-with-selections', methods=['GET'])
@handle_db_errors('fetch students with selections')
def api_get_students_with_selections():
    manager_id = parse_positive_int(request.args.get('managerId'))
    if manager_id is None:
        return error_response('Manager ID is required', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        students = db_manager.fetch_students_with_selections(cursor, manager_id)

    return jsonify(serialize_rows(students))
