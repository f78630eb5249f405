from flask import Blueprint

students_bp = Blueprint('students', __name__)

from . import (
    get_students,
    create_student,
    update_student,
    delete_student,
)

__all__ = ['students_bp']
