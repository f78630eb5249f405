from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response

from . import managers_bp
from .payload import read_manager


@managers_bp.route('/managers/<int:manager_id>', methods=['PUT'])
@log_action('Update manager')
@handle_db_errors('update manager', duplicate_message='Email already exists')
def api_update_manager(manager_id):
    manager, error = read_manager(get_request_data())
    if error:
        return error_response(error, 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        existing = db_manager.fetch_manager(cursor, manager_id)
        if not existing:
            return error_response('Manager not found', 404)

        if 'teamId' not in manager:
            manager['teamId'] = existing.get('teamId')
        elif manager['teamId'] is not None and not db_manager.team_exists(cursor, manager['teamId']):
            return error_response('Team not found', 404)

        if db_manager.manager_email_taken(cursor, manager['email'], exclude_id=manager_id):
            return error_response('Email already exists', 400)

        db_manager.update_manager(cursor, manager_id, manager)
        conn.commit()

        updated = db_manager.fetch_manager(cursor, manager_id)

    return jsonify({'success': True, 'manager': serialize_row(updated)})
