from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, clean_str

from . import managers_bp


@managers_bp.route('/managers/login', methods=['POST'])
@log_action('Manager login')
@handle_db_errors('log in')
def api_login_manager():
    """Email is the login id, the contact number the password"""
    data = get_request_data()
    email = clean_str(data.get('email'))
    contact = clean_str(data.get('contact'))

    if not email or not contact:
        return error_response('Email and contact are required', 400)

    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        manager = db_manager.fetch_manager_by_credentials(cursor, email, contact)

    # Same answer for unknown email and wrong contact
    if not manager:
        return error_response('Invalid email or contact number', 401)

    return jsonify({'success': True, 'manager': serialize_row(manager)})
