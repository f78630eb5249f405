from flask import Blueprint

teams_bp = Blueprint('teams', __name__)

# Only the Blueprint lives here; the route modules below attach to teams_bp
from . import (
    get_teams,
    create_team,
    update_or_delete_team,
)

__all__ = ['teams_bp']
