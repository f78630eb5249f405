from mysql.connector.errors import DatabaseError

COACH_ROW = {
    'id': 6,
    'name': 'Meera Shah',
    'contact': '9111111111',
    'email': 'meera@school.edu',
    'specialization': 'Athletics',
    'managerId': 4,
}


def test_list_coaches(client, db):
    db.on('FROM coaches WHERE managerId = %s', [COACH_ROW])

    assert client.get('/api/coaches?managerId=4').get_json() == [COACH_ROW]


def test_create_coach(client, db):
    db.on('SELECT id FROM managers WHERE id = %s', {'id': 4})
    db.on('FROM coaches WHERE id = %s', COACH_ROW)

    response = client.post('/api/coaches', json={
        'name': 'Meera Shah',
        'contact': '9111111111',
        'email': 'meera@school.edu',
        'specialization': 'Athletics',
        'managerId': '4',
    })

    assert response.status_code == 201
    assert response.get_json()['coach'] == COACH_ROW
    assert db.statements('INSERT INTO coaches')[0][1] == (
        'Meera Shah', '9111111111', 'meera@school.edu', 'Athletics', 4)


def test_create_coach_required_fields(client, db):
    response = client.post('/api/coaches', json={'name': 'Meera Shah'})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Name, Contact, and Manager ID are required'
    assert db.executed == []


def test_create_coach_unknown_manager(client):
    response = client.post('/api/coaches', json={'name': 'Meera', 'contact': '9', 'managerId': 4})

    assert response.status_code == 404


def test_update_coach(client, db):
    db.on('FROM coaches WHERE id = %s', COACH_ROW)

    response = client.put('/api/coaches/6', json={'name': 'Meera S', 'contact': '9111111111'})

    assert response.status_code == 200
    assert db.statements('UPDATE coaches')[0][1] == ('Meera S', '9111111111', None, None, 6)


def test_update_coach_required_fields(client):
    response = client.put('/api/coaches/6', json={'name': 'Meera S'})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Name and Contact are required'


def test_delete_coach(client, db):
    db.on('SELECT id FROM coaches WHERE id = %s', {'id': 6})

    assert client.delete('/api/coaches/6').status_code == 200
    assert client.delete('/api/coaches/7').status_code == 200
    assert len(db.statements('DELETE FROM coaches')) == 2


def test_delete_coach_failure_names_both_actions(client, db):
    db.on('SELECT id FROM coaches WHERE id = %s', {'id': 6})
    db.on('DELETE FROM coaches', error=DatabaseError(msg='lock wait timeout'))

    response = client.delete('/api/coaches/6')

    assert response.status_code == 500
    assert response.get_json()['error'] == 'Failed to update or delete coach'
    assert db.rollbacks == 1


def test_delete_missing_coach(client, db):
    response = client.delete('/api/coaches/6')

    assert response.status_code == 404
    assert db.statements('DELETE') == []
