from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, clean_str

from . import sports_bp


@sports_bp.route('/sports/<int:sport_id>', methods=['PUT'])
@log_action('Update sport')
@handle_db_errors('update sport', duplicate_message='Sport name already exists')
def api_update_sport(sport_id):
    data = get_request_data()
    name = clean_str(data.get('name'))
    description = clean_str(data.get('description'))

    if not name:
        return error_response('Sport name is required', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.fetch_sport(cursor, sport_id):
            return error_response('Sport not found', 404)

        if db_manager.sport_name_taken(cursor, name, exclude_id=sport_id):
            return error_response('Sport name already exists', 400)

        db_manager.update_sport(cursor, sport_id, name, description)
        conn.commit()

        sport = db_manager.fetch_sport(cursor, sport_id)

    return jsonify({'success': True, 'sport': serialize_row(sport)})
