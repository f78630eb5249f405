from flask import jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response

from . import teams_bp


@teams_bp.route('/teams', methods=['GET'])
@handle_db_errors('fetch teams')
def api_get_teams():
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        teams = db_manager.fetch_teams(cursor)

    return jsonify(serialize_rows(teams))


@teams_bp.route('/teams/<int:team_id>', methods=['GET'])
@handle_db_errors('fetch team')
def api_get_team(team_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        team = db_manager.fetch_team(cursor, team_id)

    if not team:
        return error_response('Team not found', 404)

    return jsonify(serialize_row(team))
