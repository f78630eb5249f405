from flask import request, jsonify

from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, clean_str
from utils.uploads import get_upload_manager, has_file

from . import team_images_bp, get_team_image_store


@team_images_bp.route('/team-images/<image_id>', methods=['PUT'])
@log_action('Update team image')
@handle_db_errors('update image')
def api_update_team_image(image_id):
    """A new `image` file replaces the stored one; otherwise an explicit imageUrl is taken as is"""
    store = get_team_image_store()
    if not store.exists():
        return error_response('Team images not found', 404)

    existing = store.get(image_id)
    if not existing:
        return error_response('Image not found', 404)

    data = get_request_data()
    changes = {
        'teamName': clean_str(data.get('teamName')) or existing.get('teamName'),
        'sport': clean_str(data.get('sport')) or existing.get('sport'),
    }

    file = request.files.get('image')
    with get_upload_manager().staging() as uploads:
        if has_file(file):
            stored = uploads.store(file, kind='image', prefix='team')
            uploads.retire(existing.get('filename'))
            changes['imageUrl'] = stored.url
            changes['filename'] = stored.stored_name
        elif clean_str(data.get('imageUrl')):
            changes['imageUrl'] = clean_str(data.get('imageUrl'))

        image = store.update(image_id, changes)
        if image is None:
            return error_response('Image not found', 404)
        uploads.commit()

    return jsonify({'success': True, 'image': image})
