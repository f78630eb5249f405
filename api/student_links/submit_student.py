from flask import jsonify

from api.students.payload import read_student
from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, clean_str

from . import student_links_bp


@student_links_bp.route('/student-links/submit', methods=['POST'])
@log_action('Submit student through link')
@handle_db_errors('register student', duplicate_message='PRN/UID already exists')
def api_submit_student():
    """Public: register a student under the link's manager"""
    data = get_request_data()
    token = clean_str(data.get('token'))
    if not token:
        return error_response('Token is required', 400)

    student, error = read_student(data, require_manager=False)
    if error:
        return error_response(error, 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        link = db_manager.fetch_active_link_by_token(cursor, token)
        if not link:
            return error_response('Invalid or inactive link', 404)

        if db_manager.prn_uid_taken(cursor, student['prn_uid']):
            return error_response('PRN/UID already exists', 400)

        student['managerId'] = link['managerId']
        student['linkToken'] = link['token']

        student_id = db_manager.insert_student(cursor, student)
        conn.commit()

        created = db_manager.fetch_student(cursor, student_id)

    return jsonify({'success': True, 'student': serialize_row(created)}), 201
