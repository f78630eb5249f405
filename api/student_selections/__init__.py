from flask import Blueprint

student_selections_bp = Blueprint('student_selections', __name__)

from . import (
    get_selections,
    create_selection,
    toggle_selection,
    delete_selection,
)

__all__ = ['student_selections_bp']
