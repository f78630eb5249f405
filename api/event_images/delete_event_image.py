from flask import jsonify

from database import get_db_manager
from utils.decorators import log_action, handle_db_errors
from utils.helpers import error_response
from utils.uploads import get_upload_manager

from . import event_images_bp


@event_images_bp.route('/event-images/<int:image_id>', methods=['DELETE'])
@log_action('Delete event image')
@handle_db_errors('delete event image')
def api_delete_event_image(image_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)

        image = db_manager.fetch_event_image(cursor, image_id)
        if not image:
            return error_response('Image not found', 404)

        get_upload_manager().delete(image.get('filename'))

        db_manager.delete_event_image(cursor, image_id)
        conn.commit()

    return jsonify({'success': True, 'message': 'Image deleted successfully'})
