from flask import request, jsonify

from utils.decorators import log_action, handle_db_errors
from utils.helpers import get_request_data, error_response, clean_str
from utils.uploads import get_upload_manager, has_file

from . import team_images_bp, get_team_image_store


@team_images_bp.route('/team-images/upload', methods=['POST'])
@log_action('Upload team image')
@handle_db_errors('upload image')
def api_upload_team_image():
    file = request.files.get('image')
    if not has_file(file):
        return error_response('No file uploaded', 400)

    data = get_request_data()
    team_name = clean_str(data.get('teamName'))
    sport = clean_str(data.get('sport'))

    with get_upload_manager().staging() as uploads:
        stored = uploads.store(file, kind='image', prefix='team')

        # the stored file is dropped again when staging exits uncommitted
        if not team_name or not sport:
            return error_response('Team name and sport are required', 400)

        # the store assigns the id
        image = get_team_image_store().add({
            'imageUrl': stored.url,
            'teamName': team_name,
            'sport': sport,
            'filename': stored.stored_name,
        })
        uploads.commit()

    return jsonify({'success': True, 'image': image}), 201
