"""Database domain mixins package."""

from .db_managers import ManagerDbMixin
from .db_sports import SportDbMixin
from .db_teams import TeamDbMixin
from .db_students import StudentDbMixin
from .db_coaches import CoachDbMixin
from .db_selections import SelectionDbMixin
from .db_student_links import StudentLinkDbMixin
from .db_event_images import EventImageDbMixin
from .db_notices import NoticeDbMixin

__all__ = [
    "ManagerDbMixin",
    "SportDbMixin",
    "TeamDbMixin",
    "StudentDbMixin",
    "CoachDbMixin",
    "SelectionDbMixin",
    "StudentLinkDbMixin",
    "EventImageDbMixin",
    "NoticeDbMixin",
]
