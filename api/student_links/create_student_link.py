from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, parse_positive_int

from . import student_links_bp


@student_links_bp.route('/student-links', methods=['POST'])
@log_action('Create student link')
@handle_db_errors('create student link')
def api_create_student_link():
    """Issue a new active registration link for a manager"""
    manager_id = parse_positive_int(get_request_data().get('managerId'))
    if manager_id is None:
        return error_response('Manager ID is required', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.manager_exists(cursor, manager_id):
            return error_response('Manager not found', 404)

        token = db_manager.generate_link_token(cursor)
        link_id = db_manager.insert_student_link(cursor, manager_id, token)
        conn.commit()

        link = db_manager.fetch_student_link(cursor, link_id)

    return jsonify({'success': True, 'link': serialize_row(link)}), 201
