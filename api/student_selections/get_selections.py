from flask import request, jsonify

from database import get_db_manager
from models import serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response, parse_positive_int

from . import student_selections_bp


@student_selections_bp.route('/student-selections', methods=['GET'])
@handle_db_errors('fetch student selections')
def api_get_selections():
    """A manager's selections joined with the student's details"""
    manager_id = parse_positive_int(request.args.get('managerId'))
    if manager_id is None:
        return error_response('Manager ID is required', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        selections = db_manager.fetch_selections(cursor, manager_id)

    return jsonify(serialize_rows(selections))
