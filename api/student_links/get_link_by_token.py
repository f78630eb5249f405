from flask import jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import handle_db_errors
from utils.helpers import error_response

from . import student_links_bp


@student_links_bp.route('/student-links/token/<token>', methods=['GET'])
@handle_db_errors('fetch student link')
def api_get_link_by_token(token):
    """Public: what a registration page needs to show for a link"""
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        link = db_manager.fetch_active_link_by_token(cursor, token.strip())

    if not link:
        return error_response('Invalid or inactive link', 404)

    return jsonify(serialize_row(link))
