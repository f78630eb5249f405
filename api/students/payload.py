"""
Student body validation, shared with the public link submission
"""

from datetime import date

from utils.helpers import (
    clean_str,
    missing_fields,
    parse_date,
    parse_positive_int,
    validate_email,
    calculate_age,
)

CREATE_FIELDS = ('name', 'prn_uid', 'contact', 'birthDate', 'managerId')
UPDATE_FIELDS = ('name', 'prn_uid', 'contact', 'birthDate')


def read_student(data, require_manager=True, today=None):
    """Validate a student body and compute the age

    Args:
        data: request body
        require_manager: managerId must be present (create) or is ignored
            (update, link submission)
        today: reference day for the age, defaults to today

    Returns:
        (student dict, None) or (None, error message)
    """
    if require_manager:
        if missing_fields(data, *CREATE_FIELDS):
            return None, 'Name, PRN/UID, Contact, Birth Date, and Manager ID are required'
    elif missing_fields(data, *UPDATE_FIELDS):
        return None, 'Name, PRN/UID, Contact, and Birth Date are required'

    today = today or date.today()

    birth_date = parse_date(data.get('birthDate'))
    if birth_date is None:
        return None, 'Invalid birth date. Use YYYY-MM-DD'
    if birth_date > today:
        return None, 'Birth date cannot be in the future'

    email = clean_str(data.get('email'))
    if email and not validate_email(email):
        return None, 'Invalid email format'

    student = {
        'name': clean_str(data.get('name')),
        'prn_uid': clean_str(data.get('prn_uid')),
        'contact': clean_str(data.get('contact')),
        'email': email,
        'address': clean_str(data.get('address')),
        'birthDate': birth_date,
        'age': calculate_age(birth_date, today=today),
    }

    if require_manager:
        manager_id = parse_positive_int(data.get('managerId'))
        if manager_id is None:
            return None, 'Invalid manager ID'
        student['managerId'] = manager_id

    return student, None
