from utils.helpers import clean_str, missing_fields, parse_positive_int, validate_email

REQUIRED_FIELDS = ('name', 'department', 'sport', 'contact', 'email', 'studentCount')


def read_manager(data):
    """Validate a manager body

    Returns:
        (manager dict, None) or (None, error message)
    """
    if missing_fields(data, *REQUIRED_FIELDS):
        return None, 'All fields are required'

    email = clean_str(data.get('email'))
    if not validate_email(email):
        return None, 'Invalid email format'

    student_count = parse_positive_int(data.get('studentCount'))
    if student_count is None:
        return None, 'Student count must be a positive number'

    manager = {
        'name': clean_str(data.get('name')),
        'department': clean_str(data.get('department')),
        'sport': clean_str(data.get('sport')),
        'contact': clean_str(data.get('contact')),
        'email': email,
        'studentCount': student_count,
    }

    # teamId is optional; an explicit null/empty value detaches the team
    if 'teamId' in data:
        raw_team_id = data.get('teamId')
        if raw_team_id in (None, ''):
            manager['teamId'] = None
        else:
            team_id = parse_positive_int(raw_team_id)
            if team_id is None:
                return None, 'Invalid team ID'
            manager['teamId'] = team_id

    return manager, None
