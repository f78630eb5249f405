from flask import Blueprint, current_app

team_images_bp = Blueprint('team_images', __name__)


def get_team_image_store():
    """JSON record store holding the gallery metadata"""
    return current_app.extensions['team_image_store']


from . import (
    get_team_images,
    upload_team_image,
    update_team_image,
    delete_team_image,
)

__all__ = ['team_images_bp', 'get_team_image_store']
