from flask import request, jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response, parse_positive_int

from . import coaches_bp


@coaches_bp.route('/coaches', methods=['GET'])
@handle_db_errors('fetch coaches')
def api_get_coaches():
    manager_id = parse_positive_int(request.args.get('managerId'))

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        coaches = db_manager.fetch_coaches(cursor, manager_id)

    return jsonify(serialize_rows(coaches))


@coaches_bp.route('/coaches/<int:coach_id>', methods=['GET'])
@handle_db_errors('fetch coach')
def api_get_coach(coach_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        coach = db_manager.fetch_coach(cursor, coach_id)

    if not coach:
        return error_response('Coach not found', 404)

    return jsonify(serialize_row(coach))
