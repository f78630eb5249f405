from flask import Blueprint

notices_bp = Blueprint('notices', __name__)

from . import (
    get_notices,
    create_notice,
    update_notice,
    delete_notice,
)

__all__ = ['notices_bp']
