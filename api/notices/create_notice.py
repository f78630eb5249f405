from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response
from utils.uploads import get_upload_manager, has_file

from . import notices_bp
from .payload import read_notice, NOTICE_FILES


@notices_bp.route('/notices', methods=['POST'])
@log_action('Create notice')
@handle_db_errors('create notice')
def api_create_notice():
    """Multipart: title, description, noticeDate plus optional `document` (PDF) and `scheduleImage`"""
    notice, error = read_notice(get_request_data())
    if error:
        return error_response(error, 400)

    with get_upload_manager().staging() as uploads:
        for field, (kind, prefix, url_column, filename_column, _) in NOTICE_FILES.items():
            file = request.files.get(field)
            if has_file(file):
                stored = uploads.store(file, kind=kind, prefix=prefix)
                notice[url_column] = stored.url
                notice[filename_column] = stored.stored_name

        db_manager = get_db_manager()
        with db_manager.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)

            notice_id = db_manager.insert_notice(cursor, notice)
            conn.commit()
            uploads.commit()

            created = db_manager.fetch_notice(cursor, notice_id)

    return jsonify({'success': True, 'notice': serialize_row(created)}), 201
