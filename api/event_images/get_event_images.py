from flask import jsonify

from database import get_db_manager
from models import serialize_row, serialize_rows
from utils.decorators import handle_db_errors
from utils.helpers import error_response

from . import event_images_bp


@event_images_bp.route('/event-images', methods=['GET'])
@handle_db_errors('fetch event images')
def api_get_event_images():
    """Gallery order: displayOrder first, newest first within the same position"""
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        images = db_manager.fetch_event_images(cursor)

    return jsonify(serialize_rows(images))


@event_images_bp.route('/event-images/<int:image_id>', methods=['GET'])
@handle_db_errors('fetch event image')
def api_get_event_image(image_id):
    db_manager = get_db_manager()
    with db_manager.get_connection() as conn:
        cursor = conn.cursor(dictionary=True)
        image = db_manager.fetch_event_image(cursor, image_id)

    if not image:
        return error_response('Image not found', 404)

    return jsonify(serialize_row(image))
