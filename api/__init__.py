#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - API blueprints
"""

from .managers import managers_bp
from .sports import sports_bp
from .teams import teams_bp
from .students import students_bp
from .coaches import coaches_bp
from .student_selections import student_selections_bp
from .student_links import student_links_bp
from .event_images import event_images_bp
from .notices import notices_bp
from .team_images import team_images_bp

# All blueprints, registered under /api
__all__ = [
    'managers_bp',
    'sports_bp',
    'teams_bp',
    'students_bp',
    'coaches_bp',
    'student_selections_bp',
    'student_links_bp',
    'event_images_bp',
    'notices_bp',
    'team_images_bp',
]
