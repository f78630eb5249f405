from flask import Flask, request, jsonify, send_from_directory, g
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from werkzeug.middleware.proxy_fix import ProxyFix
import os
import sys
import time
import logging
from dotenv import load_dotenv

load_dotenv()

from config import config as config_map
from database import DatabaseManager
from utils.uploads import UploadManager, UploadError, format_size
from utils.json_store import JsonRecordStore
from utils.helpers import error_response
from api import (
    managers_bp,
    sports_bp,
    teams_bp,
    students_bp,
    coaches_bp,
    student_selections_bp,
    student_links_bp,
    event_images_bp,
    notices_bp,
    team_images_bp,
)

logger = logging.getLogger(__name__)

TEAM_IMAGES_FILE = 'team-images.json'


def create_app(config_name=None, db_manager=None, overrides=None):
    """Application factory

    Args:
        config_name: key of the config map, defaults to APP_ENV
        db_manager: ready-made DatabaseManager (tests pass a fake one)
        overrides: settings applied on top of the selected config
    """
    app = Flask(__name__)
    env_name = (config_name or os.environ.get('APP_ENV', 'default')).lower()
    config_class = config_map.get(env_name, config_map['default'])
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)
    config_class.init_app(app)

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.extensions['upload_manager'] = UploadManager.from_config(app.config)
    app.extensions['team_image_store'] = JsonRecordStore(
        os.path.join(app.config['DATA_FOLDER'], TEAM_IMAGES_FILE)
    )

    if db_manager is None:
        db_manager = DatabaseManager(app.config)
    app.extensions['db_manager'] = db_manager

    # Create missing tables once at startup; a failure is logged and requests
    # then fail on first use of the missing table
    if app.config.get('DB_INIT_ON_STARTUP'):
        try:
            db_manager.init_database(force_recreate=False)
            app.logger.info("Database initialized")
        except Exception as e:
            app.logger.error(f"Database initialization failed: {e}")

    @app.before_request
    def start_request_timer():
        g.request_start_time = time.perf_counter()

    @app.before_request
    def answer_preflight():
        if request.method == 'OPTIONS':
            return app.make_default_options_response()

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get('Origin')
        allowed = app.config.get('CORS_ORIGINS') or []
        if not origin:
            return response

        if origin in allowed:
            response.headers['Access-Control-Allow-Origin'] = origin
            response.headers['Access-Control-Allow-Credentials'] = 'true'
            response.headers.add('Vary', 'Origin')
        elif '*' in allowed:
            # a wildcard never carries credentials
            response.headers['Access-Control-Allow-Origin'] = '*'
        else:
            return response

        response.headers['Access-Control-Allow-Methods'] = app.config['CORS_ALLOW_METHODS']
        response.headers['Access-Control-Allow-Headers'] = app.config['CORS_ALLOW_HEADERS']
        return response

    @app.after_request
    def log_request_time(response):
        start_time = getattr(g, 'request_start_time', None)
        if start_time is not None:
            duration_ms = (time.perf_counter() - start_time) * 1000
            app.logger.info(
                "Request %s %s took %.2fms, status %d",
                request.method,
                request.path,
                duration_ms,
                response.status_code,
            )
        return response

    @app.route('/api/health')
    def health():
        return jsonify({'status': 'ok', 'message': 'Server is running'})

    @app.route('/uploads/<path:filename>')
    def uploaded_file(filename):
        return send_from_directory(app.config['UPLOAD_FOLDER'], filename)

    for blueprint in (
        managers_bp,
        sports_bp,
        teams_bp,
        students_bp,
        coaches_bp,
        student_selections_bp,
        student_links_bp,
        event_images_bp,
        notices_bp,
        team_images_bp,
    ):
        app.register_blueprint(blueprint, url_prefix='/api')

    register_error_handlers(app)

    return app


def register_error_handlers(app):
    def route_not_found():
        app.logger.info("404 - Route not found: %s %s", request.method, request.path)
        return error_response(f'Route not found: {request.method} {request.path}', 404)

    @app.errorhandler(404)
    def not_found_error(error):
        if request.path.startswith('/api/'):
            return route_not_found()
        return error_response('Not found', 404)

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        # an unknown method on a known path is still an unknown API route
        if request.path.startswith('/api/'):
            return route_not_found()
        return error_response('Method not allowed', 405)

    @app.errorhandler(RequestEntityTooLarge)
    def request_too_large_error(error):
        limit = app.config.get('MAX_CONTENT_LENGTH')
        return error_response(f'File too large. Maximum size is {format_size(limit)}.', 400)

    @app.errorhandler(UploadError)
    def upload_error(error):
        return error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def http_error(error):
        return error_response(error.description, error.code)

    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.exception(f"Unhandled error: {error}")
        return error_response(str(error) or 'Internal server error', 500)


if __name__ == '__main__':
    app = create_app()
    try:
        app.logger.info("Uploads directory: %s", app.config['UPLOAD_FOLDER'])
        app.run(
            host=app.config.get('HOST', '0.0.0.0'),
            port=app.config.get('PORT', 4002),
            debug=app.config.get('DEBUG', False),
            threaded=True,
        )
    except KeyboardInterrupt:
        sys.exit(0)
