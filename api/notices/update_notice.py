from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, parse_bool
from utils.uploads import get_upload_manager, has_file

from . import notices_bp
from .payload import read_notice, NOTICE_FILES


@notices_bp.route('/notices/<int:notice_id>', methods=['PUT'])
@log_action('Update notice')
@handle_db_errors('update notice')
def api_update_notice(notice_id):
    """Either file can be replaced, or dropped with removeDocument / removeScheduleImage"""
    data = get_request_data()

    db_manager = get_db_manager()
    with get_upload_manager().staging() as uploads:
        with db_manager.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)

            existing = db_manager.fetch_notice(cursor, notice_id)
            if not existing:
                return error_response('Notice not found', 404)

            notice, error = read_notice(data, default_date=existing.get('noticeDate'))
            if error:
                return error_response(error, 400)

            for field, (kind, prefix, url_column, filename_column, remove_flag) in NOTICE_FILES.items():
                notice[url_column] = existing.get(url_column)
                notice[filename_column] = existing.get(filename_column)

                file = request.files.get(field)
                if has_file(file):
                    stored = uploads.store(file, kind=kind, prefix=prefix)
                    uploads.retire(existing.get(filename_column))
                    notice[url_column] = stored.url
                    notice[filename_column] = stored.stored_name
                elif parse_bool(data.get(remove_flag)):
                    uploads.retire(existing.get(filename_column))
                    notice[url_column] = None
                    notice[filename_column] = None

            db_manager.update_notice(cursor, notice_id, notice)
            conn.commit()
            uploads.commit()

            updated = db_manager.fetch_notice(cursor, notice_id)

    return jsonify({'success': True, 'notice': serialize_row(updated)})
