from flask import Blueprint

coaches_bp = Blueprint('coaches', __name__)

from . import (
    get_coaches,
    create_coach,
    update_or_delete_coach,
)

__all__ = ['coaches_bp']
