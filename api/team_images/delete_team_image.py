from flask import jsonify

from utils.decorators import log_action, handle_db_errors
from utils.helpers import error_response
from utils.uploads import get_upload_manager

from . import team_images_bp, get_team_image_store


@team_images_bp.route('/team-images/<image_id>', methods=['DELETE'])
@log_action('Delete team image')
@handle_db_errors('delete image')
def api_delete_team_image(image_id):
    store = get_team_image_store()
    if not store.exists():
        return error_response('Team images not found', 404)

    image = store.get(image_id)
    if not image:
        return error_response('Image not found', 404)

    get_upload_manager().delete(image.get('filename'))
    store.remove(image_id)

    return jsonify({'success': True, 'message': 'Image deleted successfully'})
