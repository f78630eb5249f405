from flask import request, jsonify

from database import get_db_manager
from models import serialize_row
from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response
from utils.uploads import get_upload_manager, has_file

from . import event_images_bp
from .payload import read_event_image


@event_images_bp.route('/event-images', methods=['POST'])
@log_action('Upload event image')
@handle_db_errors('upload event image')
def api_create_event_image():
    image, error = read_event_image(get_request_data())
    if error:
        return error_response(error, 400)

    file = request.files.get('image')
    if not has_file(file):
        return error_response('No file uploaded', 400)

    with get_upload_manager().staging() as uploads:
        stored = uploads.store(file, kind='image', prefix='event')
        image['imageUrl'] = stored.url
        image['filename'] = stored.stored_name

        db_manager = get_db_manager()
        with db_manager.get_connection() as conn:
            cursor = conn.cursor(dictionary=True)

            image_id = db_manager.insert_event_image(cursor, image)
            conn.commit()
            uploads.commit()

            created = db_manager.fetch_event_image(cursor, image_id)

    return jsonify({'success': True, 'image': serialize_row(created)}), 201
