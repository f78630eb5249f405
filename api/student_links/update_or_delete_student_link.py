from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, parse_bool

from . import student_links_bp


@student_links_bp.route('/student-links/<int:link_id>', methods=['PUT', 'DELETE'])
@log_action('Update or delete student link')
@handle_db_errors('update or delete student link')
def api_update_or_delete_student_link(link_id):
    """PUT {isActive} switches a link on or off; DELETE removes it"""
    db_manager = get_db_manager()

    if request.method == 'PUT':
        data = get_request_data()
        if 'isActive' not in data:
            return error_response('isActive is required', 400)
        is_active = parse_bool(data.get('isActive'))

    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.fetch_student_link(cursor, link_id):
            return error_response('Link not found', 404)

        if request.method == 'DELETE':
            db_manager.delete_student_link(cursor, link_id)
            conn.commit()
            return jsonify({'success': True, 'message': 'Link deleted successfully'})

        db_manager.set_student_link_active(cursor, link_id, is_active)
        conn.commit()

        link = db_manager.fetch_student_link(cursor, link_id)

    return jsonify({'success': True, 'link': serialize_row(link)})
