from flask import Blueprint

managers_bp = Blueprint('managers', __name__)

# Each route lives in its own module in this package
from . import (
    get_managers,
    get_manager,
    create_manager,
    update_manager,
    delete_manager,
    login_manager,
)

__all__ = ['managers_bp']
