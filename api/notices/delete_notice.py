from flask import jsonify

from database import get_db_manager
from utils.decorators import log_action, handle_db_errors
from utils.helpers import error_response
from utils.uploads import get_upload_manager

from . import notices_bp
from .payload import NOTICE_FILES


@notices_bp.route('/notices/<int:notice_id>', methods=['DELETE'])
@log_action('Delete notice')
@handle_db_errors('delete notice')
def api_delete_notice(notice_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        notice = db_manager.fetch_notice(cursor, notice_id)
        if not notice:
            return error_response('Notice not found', 404)

        upload_manager = get_upload_manager()
        for _, _, _, filename_column, _ in NOTICE_FILES.values():
            upload_manager.delete(notice.get(filename_column))

        db_manager.delete_notice(cursor, notice_id)
        conn.commit()

    return jsonify({'success': True, 'message': 'Notice deleted successfully'})
