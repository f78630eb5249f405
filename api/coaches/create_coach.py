from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, clean_str, parse_positive_int, validate_email

from . import coaches_bp


def read_coach(data):
    """name and contact are required, email and specialization optional"""
    name = clean_str(data.get('name'))
    contact = clean_str(data.get('contact'))
    if not name or not contact:
        return None, 'Name and Contact are required'

    email = clean_str(data.get('email'))
    if email and not validate_email(email):
        return None, 'Invalid email format'

    return {
        'name': name,
        'contact': contact,
        'email': email,
        'specialization': clean_str(data.get('specialization')),
    }, None


@coaches_bp.route('/coaches', methods=['POST'])
@log_action('Create coach')
@handle_db_errors('create coach')
def api_create_coach():
    data = get_request_data()
    if not clean_str(data.get('name')) or not clean_str(data.get('contact')) or not clean_str(data.get('managerId')):
        return error_response('Name, Contact, and Manager ID are required', 400)

    coach, error = read_coach(data)
    if error:
        return error_response(error, 400)

    coach['managerId'] = parse_positive_int(data.get('managerId'))
    if coach['managerId'] is None:
        return error_response('Invalid manager ID', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.manager_exists(cursor, coach['managerId']):
            return error_response('Manager not found', 404)

        coach_id = db_manager.insert_coach(cursor, coach)
        conn.commit()

        created = db_manager.fetch_coach(cursor, coach_id)

    return jsonify({'success': True, 'coach': serialize_row(created)}), 201
