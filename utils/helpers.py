#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - helper functions
"""

import re
from datetime import date, datetime

from flask import request, jsonify

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
DATE_PATTERN = re.compile(
    r'^\d{4}-\d{2}-\d{2}'
    r'(T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})?)?$'
)

TRUE_VALUES = {'true', '1', 'yes', 'on'}


def get_request_data():
    """Body as a dict, from JSON or from url-encoded/multipart form fields"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def error_response(message, status=400, **extra):
    """JSON error body with its status code"""
    body = {'success': False, 'error': message}
    body.update(extra)
    return jsonify(body), status


def clean_str(value):
    """Trimmed string, or None when the value is missing or blank"""
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    value = value.strip()
    return value or None


def missing_fields(data, *fields):
    """Names of required fields that are absent or empty"""
    return [field for field in fields if not clean_str(data.get(field))]


def validate_email(email):
    """Check the email format"""
    if not email:
        return False
    return EMAIL_PATTERN.match(email) is not None


def parse_int(value, default=None):
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def parse_positive_int(value):
    """Positive integer or None"""
    number = parse_int(value)
    if number is None or number <= 0:
        return None
    return number


def parse_bool(value):
    """Form flag such as removeLogo=true"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def parse_date(value):
    """Parse YYYY-MM-DD or an ISO datetime (its time part is ignored)"""
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    date_str = str(value).strip()
    if not DATE_PATTERN.match(date_str):
        return None
    try:
        return datetime.strptime(date_str[:10], '%Y-%m-%d').date()
    except ValueError:
        return None


def calculate_age(birth_date, today=None):
    """Age in whole years on the given day"""
    if not birth_date:
        return None

    today = today or date.today()
    if isinstance(birth_date, datetime):
        birth_date = birth_date.date()

    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1

    return age
