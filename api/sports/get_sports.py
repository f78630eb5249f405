from flask import jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response

from . import sports_bp


@sports_bp.route('/sports', methods=['GET'])
@handle_db_errors('fetch sports')
def api_get_sports():
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        sports = db_manager.fetch_sports(cursor)

    return jsonify(serialize_rows(sports))


@sports_bp.route('/sports/<int:sport_id>', methods=['GET'])
@handle_db_errors('fetch sport')
def api_get_sport(sport_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        sport = db_manager.fetch_sport(cursor, sport_id)

    if not sport:
        return error_response('Sport not found', 404)

    return jsonify(serialize_row(sport))
