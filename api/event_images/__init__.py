from flask import Blueprint

event_images_bp = Blueprint('event_images', __name__)

from . import (
    get_event_images,
    create_event_image,
    update_event_image,
    delete_event_image,
)

__all__ = ['event_images_bp']
