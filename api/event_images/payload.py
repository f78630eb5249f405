from utils.helpers import clean_str, parse_int


def read_event_image(data, default_order=0):
    """title/description are optional, displayOrder an integer"""
    raw_order = data.get('displayOrder')
    if raw_order is None or raw_order == '':
        display_order = default_order
    else:
        display_order = parse_int(raw_order)
        if display_order is None:
            return None, 'Display order must be a number'

    return {
        'title': clean_str(data.get('title')),
        'description': clean_str(data.get('description')),
        'displayOrder': display_order,
    }, None
