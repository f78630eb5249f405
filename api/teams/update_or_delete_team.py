from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, parse_bool
from utils.uploads import get_upload_manager, has_file

from . import teams_bp
from .payload import read_team


@teams_bp.route('/teams/<int:team_id>', methods=['PUT', 'DELETE'])
@log_action('Update or delete team')
@handle_db_errors('update or delete team', duplicate_message='Team name already exists')
def api_update_or_delete_team(team_id):
    if request.method == 'DELETE':
        return _delete_team(team_id)
    return _update_team(team_id)


def _update_team(team_id):
    """A new logo replaces the old file once the update commits; removeLogo=true drops it"""
    data = get_request_data()
    team, error = read_team(data)
    logo = request.files.get('logo')

    with get_upload_manager().staging() as uploads:
        if error:
            return error_response(error, 400)

        db_manager = get_db_manager()
        with db_manager.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)

            existing = db_manager.fetch_team(cursor, team_id)
            if not existing:
                return error_response('Team not found', 404)

            if db_manager.team_name_taken(cursor, team['name'], exclude_id=team_id):
                return error_response('Team name already exists', 400)

            team['logoUrl'] = existing.get('logoUrl')
            team['logoFilename'] = existing.get('logoFilename')

            if has_file(logo):
                stored = uploads.store(logo, kind='image', prefix='team-logo')
                uploads.retire(existing.get('logoFilename'))
                team['logoUrl'] = stored.url
                team['logoFilename'] = stored.stored_name
            elif parse_bool(data.get('removeLogo')):
                uploads.retire(existing.get('logoFilename'))
                team['logoUrl'] = None
                team['logoFilename'] = None

            db_manager.update_team(cursor, team_id, team)
            conn.commit()
            uploads.commit()

            updated = db_manager.fetch_team(cursor, team_id)

    return jsonify({'success': True, 'team': serialize_row(updated)})


def _delete_team(team_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        team = db_manager.fetch_team(cursor, team_id)
        if not team:
            return error_response('Team not found', 404)

        get_upload_manager().delete(team.get('logoFilename'))

        db_manager.delete_team(cursor, team_id)
        conn.commit()

    return jsonify({'success': True, 'message': 'Team deleted successfully'})
