import re
from datetime import date

LINK_ROW = {'id': 3, 'managerId': 4, 'token': 'a' * 48, 'isActive': 1}

ACTIVE_LINK = dict(LINK_ROW, managerName='Ravi Kumar', department='Computer Science', sport='Cricket')

SUBMISSION = {
    'token': 'a' * 48,
    'name': 'Asha Patil',
    'prn_uid': 'PRN-2024-01',
    'contact': '9000000001',
    'birthDate': '2001-03-04',
}


def test_create_link(client, db):
    db.on('SELECT id FROM managers WHERE id = %s', {'id': 4})
    db.on('FROM student_links WHERE id = %s', LINK_ROW)

    response = client.post('/api/student-links', json={'managerId': 4})

    assert response.status_code == 201
    body = response.get_json()
    assert body['success'] is True
    assert body['link']['isActive'] is True

    [(_, params)] = db.statements('INSERT INTO student_links')
    assert params[0] == 4
    assert re.match(r'^[0-9a-f]{48}$', params[1])


def test_create_link_draws_new_token_on_collision(client, db):
    seen = []

    def token_lookup(params):
        seen.append(params[0])
        return {'id': 1} if len(seen) == 1 else None

    db.on('SELECT id FROM managers WHERE id = %s', {'id': 4})
    db.on('SELECT id FROM student_links WHERE token = %s', token_lookup)

    client.post('/api/student-links', json={'managerId': 4})

    assert len(seen) == 2
    assert db.statements('INSERT INTO student_links')[0][1][1] == seen[1]


def test_create_link_requires_manager(client):
    response = client.post('/api/student-links', json={})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Manager ID is required'


def test_list_links(client, db):
    db.on('FROM student_links WHERE managerId = %s', [LINK_ROW])

    assert client.get('/api/student-links?managerId=4').get_json()[0]['isActive'] is True


def test_token_lookup(client, db):
    db.on('sl.isActive = TRUE', ACTIVE_LINK)

    response = client.get('/api/student-links/token/' + 'a' * 48)

    assert response.status_code == 200
    body = response.get_json()
    assert body['managerName'] == 'Ravi Kumar'
    assert body['sport'] == 'Cricket'


def test_inactive_or_unknown_token(client):
    response = client.get('/api/student-links/token/nope')

    assert response.status_code == 404


def test_submit_registers_student_under_link_manager(client, db):
    db.on('sl.isActive = TRUE', ACTIVE_LINK)
    db.on('FROM students WHERE id = %s', {'id': 30, 'name': 'Asha Patil', 'managerId': 4, 'linkToken': 'a' * 48})

    response = client.post('/api/student-links/submit', json=dict(SUBMISSION, managerId=99))

    assert response.status_code == 201
    assert response.get_json()['student']['id'] == 30

    [(_, params)] = db.statements('INSERT INTO students')
    today = date.today()
    expected_age = today.year - 2001 - ((today.month, today.day) < (3, 4))
    assert params[6] == expected_age
    assert params[7] == 4
    assert params[8] == 'a' * 48


def test_submit_requires_token(client, db):
    payload = dict(SUBMISSION)
    del payload['token']

    response = client.post('/api/student-links/submit', json=payload)

    assert response.status_code == 400
    assert db.executed == []


def test_submit_validates_before_lookup(client, db):
    response = client.post('/api/student-links/submit', json={'token': 'a' * 48, 'name': 'Asha'})

    assert response.status_code == 400
    assert db.executed == []


def test_submit_with_inactive_link(client, db):
    response = client.post('/api/student-links/submit', json=SUBMISSION)

    assert response.status_code == 404
    assert db.statements('INSERT') == []


def test_submit_duplicate_prn(client, db):
    db.on('sl.isActive = TRUE', ACTIVE_LINK)
    db.on('SELECT id FROM students WHERE prn_uid = %s', {'id': 1})

    response = client.post('/api/student-links/submit', json=SUBMISSION)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'PRN/UID already exists'


def test_deactivate_link(client, db):
    db.on('FROM student_links WHERE id = %s', LINK_ROW)

    response = client.put('/api/student-links/3', json={'isActive': False})

    assert response.status_code == 200
    assert db.statements('UPDATE student_links') == [
        ('UPDATE student_links SET isActive = %s WHERE id = %s', (False, 3)),
    ]


def test_update_link_requires_flag(client, db):
    response = client.put('/api/student-links/3', json={})

    assert response.status_code == 400
    assert db.acquired == 0


def test_delete_link(client, db):
    db.on('FROM student_links WHERE id = %s', LINK_ROW)

    assert client.delete('/api/student-links/3').status_code == 200
    assert db.statements('DELETE FROM student_links') == [('DELETE FROM student_links WHERE id = %s', (3,))]


def test_delete_missing_link(client):
    assert client.delete('/api/student-links/3').status_code == 404
