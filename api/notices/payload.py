from datetime import date

from utils.helpers import clean_str, parse_date

# form field -> (upload kind, stored name prefix, url column, filename column, remove flag)
NOTICE_FILES = {
    'document': ('document', 'notice-doc', 'documentUrl', 'documentFilename', 'removeDocument'),
    'scheduleImage': ('image', 'notice-schedule', 'scheduleImageUrl', 'scheduleImageFilename',
                      'removeScheduleImage'),
}


def read_notice(data, default_date=None):
    title = clean_str(data.get('title'))
    description = clean_str(data.get('description'))
    if not title or not description:
        return None, 'Title and description are required'

    raw_date = clean_str(data.get('noticeDate'))
    if raw_date:
        notice_date = parse_date(raw_date)
        if notice_date is None:
            return None, 'Invalid notice date. Use YYYY-MM-DD'
    else:
        notice_date = default_date or date.today()

    return {
        'title': title,
        'description': description,
        'noticeDate': notice_date,
    }, None
