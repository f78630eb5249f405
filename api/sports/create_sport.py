from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, clean_str

from . import sports_bp


@sports_bp.route('/sports', methods=['POST'])
@log_action('Create sport')
@handle_db_errors('create sport', duplicate_message='Sport name already exists')
def api_create_sport():
    data = get_request_data()
    name = clean_str(data.get('name'))
    description = clean_str(data.get('description'))

    if not name:
        return error_response('Sport name is required', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if db_manager.sport_name_taken(cursor, name):
            return error_response('Sport name already exists', 400)

        sport_id = db_manager.insert_sport(cursor, name, description)
        conn.commit()

        sport = db_manager.fetch_sport(cursor, sport_id)

    return jsonify({'success': True, 'sport': serialize_row(sport)}), 201
