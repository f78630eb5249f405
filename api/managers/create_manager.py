from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response

from . import managers_bp
from .payload import read_manager


@managers_bp.route('/managers', methods=['POST'])
@log_action('Create manager')
@handle_db_errors('create manager', duplicate_message='Email already exists')
def api_create_manager():
    """Register a manager; the email must not be in use"""
    manager, error = read_manager(get_request_data())
    if error:
        return error_response(error, 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if manager.get('teamId') is not None and not db_manager.team_exists(cursor, manager['teamId']):
            return error_response('Team not found', 404)

        # Friendlier message; the unique key still decides under concurrency
        if db_manager.manager_email_taken(cursor, manager['email']):
            return error_response('Email already exists', 400)

        manager_id = db_manager.insert_manager(cursor, manager)
        conn.commit()

        created = db_manager.fetch_manager(cursor, manager_id)

    return jsonify({'success': True, 'manager': serialize_row(created)}), 201
