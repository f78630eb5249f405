from flask import request, jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response, parse_positive_int

from . import student_links_bp


@student_links_bp.route('/student-links', methods=['GET'])
@handle_db_errors('fetch student links')
def api_get_student_links():
    manager_id = parse_positive_int(request.args.get('managerId'))

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        links = db_manager.fetch_student_links(cursor, manager_id)

    return jsonify(serialize_rows(links))


@student_links_bp.route('/student-links/<int:link_id>', methods=['GET'])
@handle_db_errors('fetch student link')
def api_get_student_link(link_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        link = db_manager.fetch_student_link(cursor, link_id)

    if not link:
        return error_response('Link not found', 404)

    return jsonify(serialize_row(link))
