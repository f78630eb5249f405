import io
import os

from mysql.connector.errors import InterfaceError

from app import create_app


def test_health(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok', 'message': 'Server is running'}


def test_unknown_api_route(client):
    response = client.get('/api/does-not-exist')

    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'error': 'Route not found: GET /api/does-not-exist'}


def test_unsupported_method_on_api_route_is_not_found(client):
    response = client.patch('/api/managers')

    assert response.status_code == 404
    assert response.get_json()['error'] == 'Route not found: PATCH /api/managers'


def test_cors_headers_for_allowed_origin(client):
    response = client.get('/api/health', headers={'Origin': 'http://localhost:3000'})

    assert response.headers['Access-Control-Allow-Origin'] == 'http://localhost:3000'
    assert response.headers['Access-Control-Allow-Credentials'] == 'true'


def test_cors_restricted_origins(db, app_overrides):
    app_overrides['CORS_ORIGINS'] = ['http://localhost:3000']
    client = create_app('testing', db_manager=db, overrides=app_overrides).test_client()

    response = client.get('/api/health', headers={'Origin': 'http://evil.example'})
    assert 'Access-Control-Allow-Origin' not in response.headers


def test_cors_default_ignores_unlisted_origin(client):
    response = client.get('/api/health', headers={'Origin': 'https://evil.example'})

    assert 'Access-Control-Allow-Origin' not in response.headers
    assert 'Access-Control-Allow-Credentials' not in response.headers


def test_cors_wildcard_without_credentials(db, app_overrides):
    app_overrides['CORS_ORIGINS'] = ['*']
    client = create_app('testing', db_manager=db, overrides=app_overrides).test_client()

    response = client.get('/api/health', headers={'Origin': 'https://elsewhere.example'})
    assert response.headers['Access-Control-Allow-Origin'] == '*'
    assert 'Access-Control-Allow-Credentials' not in response.headers


def test_preflight(client):
    response = client.open(
        '/api/managers',
        method='OPTIONS',
        headers={'Origin': 'http://localhost:3001', 'Access-Control-Request-Method': 'POST'},
    )

    assert response.status_code == 200
    assert 'POST' in response.headers['Access-Control-Allow-Methods']
    assert response.headers['Access-Control-Allow-Origin'] == 'http://localhost:3001'


def test_oversized_request_is_rejected(db, app_overrides):
    app_overrides['MAX_CONTENT_LENGTH'] = 1024
    app = create_app('testing', db_manager=db, overrides=app_overrides)
    client = app.test_client()

    response = client.post(
        '/api/event-images',
        data={'image': (io.BytesIO(b'x' * 4096), 'big.png', 'image/png')},
        content_type='multipart/form-data',
    )

    assert response.status_code == 400
    assert response.get_json()['error'].startswith('File too large')
    assert os.listdir(app.config['UPLOAD_FOLDER']) == []
    assert db.executed == []


def test_uploaded_files_are_served(app, client, upload_dir):
    with open(os.path.join(upload_dir, 'event-1-2.png'), 'wb') as f:
        f.write(b'png-bytes')

    response = client.get('/uploads/event-1-2.png')

    assert response.status_code == 200
    assert response.data == b'png-bytes'
    response.close()

    assert client.get('/uploads/missing.png').status_code == 404


def test_database_initialized_on_startup(db, app_overrides):
    app_overrides['DB_INIT_ON_STARTUP'] = True
    create_app('testing', db_manager=db, overrides=app_overrides)

    assert db.init_calls == 1


def test_startup_survives_database_init_failure(db, app_overrides):
    app_overrides['DB_INIT_ON_STARTUP'] = True
    db.init_error = InterfaceError(msg='Can\'t connect to MySQL server')

    app = create_app('testing', db_manager=db, overrides=app_overrides)

    assert app.test_client().get('/api/health').status_code == 200


def test_pool_exhaustion_surfaces_as_500(client, db):
    db.exhausted = True

    response = client.get('/api/managers')

    assert response.status_code == 500
    body = response.get_json()
    assert body['error'] == 'Failed to fetch managers'
    assert 'pool exhausted' in body['details']
