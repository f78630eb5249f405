from flask import jsonify

from utils.decorators import handle_db_errors

from . import team_images_bp, get_team_image_store


@team_images_bp.route('/team-images', methods=['GET'])
@handle_db_errors('fetch team images')
def api_get_team_images():
    return jsonify(get_team_image_store().all())
