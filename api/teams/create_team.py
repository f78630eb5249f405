from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response
from utils.uploads import get_upload_manager, has_file

from . import teams_bp
from .payload import read_team


@teams_bp.route('/teams', methods=['POST'])
@log_action('Create team')
@handle_db_errors('create team', duplicate_message='Team name already exists')
def api_create_team():
    """Create a team, with an optional `logo` image (multipart)"""
    team, error = read_team(get_request_data())
    logo = request.files.get('logo')

    # a stored logo is removed again unless the insert commits
    with get_upload_manager().staging() as uploads:
        if error:
            return error_response(error, 400)

        if has_file(logo):
            stored = uploads.store(logo, kind='image', prefix='team-logo')
            team['logoUrl'] = stored.url
            team['logoFilename'] = stored.stored_name

        db_manager = get_db_manager()
        with db_manager.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)

            if db_manager.team_name_taken(cursor, team['name']):
                return error_response('Team name already exists', 400)

            team_id = db_manager.insert_team(cursor, team)
            conn.commit()
            uploads.commit()

            created = db_manager.fetch_team(cursor, team_id)

    return jsonify({'success': True, 'team': serialize_row(created)}), 201
