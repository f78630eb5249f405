from flask import Blueprint

student_links_bp = Blueprint('student_links', __name__)

from . import (
    get_student_links,
    create_student_link,
    get_link_by_token,
    submit_student,
    update_or_delete_student_link,
)

__all__ = ['student_links_bp']
