from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response
from utils.uploads import get_upload_manager, has_file

from . import event_images_bp
from .payload import read_event_image


@event_images_bp.route('/event-images/<int:image_id>', methods=['PUT'])
@log_action('Update event image')
@handle_db_errors('update event image')
def api_update_event_image(image_id):
    """Metadata update; an `image` file replaces the stored picture"""
    data = get_request_data()
    file = request.files.get('image')

    db_manager = get_db_manager()
    with get_upload_manager().staging() as uploads:
        with db_manager.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)

            existing = db_manager.fetch_event_image(cursor, image_id)
            if not existing:
                return error_response('Image not found', 404)

            image, error = read_event_image(data, default_order=existing.get('displayOrder') or 0)
            if error:
                return error_response(error, 400)

            image['imageUrl'] = existing['imageUrl']
            image['filename'] = existing.get('filename')

            if has_file(file):
                stored = uploads.store(file, kind='image', prefix='event')
                uploads.retire(existing.get('filename'))
                image['imageUrl'] = stored.url
                image['filename'] = stored.stored_name

            db_manager.update_event_image(cursor, image_id, image)
            conn.commit()
            uploads.commit()

            updated = db_manager.fetch_event_image(cursor, image_id)

    return jsonify({'success': True, 'image': serialize_row(updated)})
