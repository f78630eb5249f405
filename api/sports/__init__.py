from flask import Blueprint

sports_bp = Blueprint('sports', __name__)

from . import (
    get_sports,
    create_sport,
    update_sport,
    delete_sport,
)

__all__ = ['sports_bp']
