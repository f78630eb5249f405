import os
from datetime import date

from conftest import image_file, pdf_file

NOTICE_ROW = {
    'id': 4,
    'title': 'Trials',
    'description': 'Cricket trials on Monday',
    'documentUrl': 'http://testserver:4002/uploads/notice-doc-1-1.pdf',
    'documentFilename': 'notice-doc-1-1.pdf',
    'scheduleImageUrl': 'http://testserver:4002/uploads/notice-schedule-1-1.png',
    'scheduleImageFilename': 'notice-schedule-1-1.png',
    'noticeDate': date(2024, 7, 1),
}


def stored_notice(upload_dir):
    for name in ('notice-doc-1-1.pdf', 'notice-schedule-1-1.png'):
        with open(os.path.join(upload_dir, name), 'wb') as f:
            f.write(b'old')
    return NOTICE_ROW


def test_list_notices_order(client, db):
    db.on('FROM notices ORDER BY', [NOTICE_ROW])

    body = client.get('/api/notices').get_json()

    assert 'ORDER BY noticeDate DESC, createdAt DESC' in db.executed[0][0]
    assert body[0]['noticeDate'] == '2024-07-01'
    assert 'documentFilename' not in body[0]


def test_create_notice_with_both_files(client, db, upload_dir):
    db.on('FROM notices WHERE id = %s', NOTICE_ROW)

    response = client.post(
        '/api/notices',
        data={
            'title': 'Trials',
            'description': 'Cricket trials on Monday',
            'document': pdf_file(),
            'scheduleImage': image_file('schedule.png'),
        },
        content_type='multipart/form-data',
    )

    assert response.status_code == 201
    stored = sorted(os.listdir(upload_dir))
    assert len(stored) == 2
    assert stored[0].startswith('notice-doc-') and stored[0].endswith('.pdf')
    assert stored[1].startswith('notice-schedule-')

    [(_, params)] = db.statements('INSERT INTO notices')
    assert params[3] == stored[0]
    assert params[5] == stored[1]
    assert params[6] == date.today()


def test_create_notice_without_files(client, db):
    response = client.post('/api/notices', json={
        'title': 'Trials', 'description': 'Monday', 'noticeDate': '2024-07-01',
    })

    assert response.status_code == 201
    params = db.statements('INSERT INTO notices')[0][1]
    assert params[2:6] == (None, None, None, None)
    assert params[6] == date(2024, 7, 1)


def test_create_notice_requires_title_and_description(client, db, upload_dir):
    response = client.post(
        '/api/notices',
        data={'title': 'Trials', 'document': pdf_file()},
        content_type='multipart/form-data',
    )

    assert response.status_code == 400
    assert os.listdir(upload_dir) == []
    assert db.executed == []


def test_bad_notice_date(client):
    response = client.post('/api/notices', json={'title': 'T', 'description': 'D', 'noticeDate': 'Monday'})

    assert response.status_code == 400


def test_rejected_second_file_discards_first(client, db, upload_dir):
    response = client.post(
        '/api/notices',
        data={
            'title': 'Trials',
            'description': 'Monday',
            'document': pdf_file(),
            'scheduleImage': image_file('schedule.txt', mimetype='text/plain'),
        },
        content_type='multipart/form-data',
    )

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Only image files are allowed!'
    assert os.listdir(upload_dir) == []
    assert db.executed == []


def test_document_must_be_pdf(client, upload_dir):
    response = client.post(
        '/api/notices',
        data={'title': 'Trials', 'description': 'Monday', 'document': image_file()},
        content_type='multipart/form-data',
    )

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Only PDF files are allowed!'


def test_update_remove_document_and_replace_schedule(client, db, upload_dir):
    db.on('FROM notices WHERE id = %s', stored_notice(upload_dir))

    response = client.put(
        '/api/notices/4',
        data={
            'title': 'Trials',
            'description': 'Moved to Tuesday',
            'removeDocument': 'true',
            'scheduleImage': image_file('new.png'),
        },
        content_type='multipart/form-data',
    )

    assert response.status_code == 200
    [stored] = os.listdir(upload_dir)
    assert stored.startswith('notice-schedule-') and stored != 'notice-schedule-1-1.png'

    params = db.statements('UPDATE notices')[0][1]
    assert params[1] == 'Moved to Tuesday'
    assert params[2:4] == (None, None)
    assert params[5] == stored
    assert params[6] == date(2024, 7, 1)


def test_update_missing_notice(client):
    response = client.put('/api/notices/4', json={'title': 'T', 'description': 'D'})

    assert response.status_code == 404


def test_delete_notice_removes_both_files(client, db, upload_dir):
    db.on('FROM notices WHERE id = %s', stored_notice(upload_dir))

    response = client.delete('/api/notices/4')

    assert response.status_code == 200
    assert os.listdir(upload_dir) == []
    assert len(db.statements('DELETE FROM notices')) == 1
