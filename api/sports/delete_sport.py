from flask import jsonify

from database import get_db_manager
from utils.decorators import log_action, handle_db_errors
from utils.helpers import error_response

from . import sports_bp


@sports_bp.route('/sports/<int:sport_id>', methods=['DELETE'])
@log_action('Delete sport')
@handle_db_errors('delete sport')
def api_delete_sport(sport_id):
    """Refused while any manager is assigned to the sport"""
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        if not db_manager.fetch_sport(cursor, sport_id):
            return error_response('Sport not found', 404)

        if db_manager.count_managers_using_sport(cursor, sport_id) > 0:
            return error_response('Cannot delete sport. It is being used by managers.', 400)

        db_manager.delete_sport(cursor, sport_id)
        conn.commit()

    return jsonify({'success': True, 'message': 'Sport deleted successfully'})
