from utils.helpers import clean_str


def read_team(data):
    """name and department are required, color is optional"""
    name = clean_str(data.get('name'))
    department = clean_str(data.get('department'))

    if not name or not department:
        return None, 'Team name and department are required'

    return {
        'name': name,
        'department': department,
        'color': clean_str(data.get('color')),
    }, None
