from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response

from . import coaches_bp
from .create_coach import read_coach


@coaches_bp.route('/coaches/<int:coach_id>', methods=['PUT', 'DELETE'])
@log_action('Update or delete coach')
@handle_db_errors('update or delete coach')
def api_update_or_delete_coach(coach_id):
    db_manager = get_db_manager()

    if request.method == 'DELETE':
        with db_manager.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)

            if not db_manager.coach_exists(cursor, coach_id):
                return error_response('Coach not found', 404)

            db_manager.delete_coach(cursor, coach_id)
            conn.commit()

        return jsonify({'success': True, 'message': 'Coach deleted successfully'})

    coach, error = read_coach(get_request_data())
    if error:
        return error_response(error, 400)

    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.coach_exists(cursor, coach_id):
            return error_response('Coach not found', 404)

        db_manager.update_coach(cursor, coach_id, coach)
        conn.commit()

        updated = db_manager.fetch_coach(cursor, coach_id)

    return jsonify({'success': True, 'coach': serialize_row(updated)})
