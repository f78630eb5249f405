#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - configuration
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_list(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(',') if item.strip()]


class Config:
    """Application configuration"""

    # Server
    HOST = os.environ.get('HOST') or '0.0.0.0'
    PORT = int(os.environ.get('PORT') or 4002)
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'
    # Externally visible host, baked into stored upload URLs
    SERVER_HOST = os.environ.get('SERVER_HOST') or 'localhost'
    PUBLIC_BASE_URL = os.environ.get('PUBLIC_BASE_URL')

    # Database
    DB_HOST = os.environ.get('DB_HOST') or 'localhost'
    DB_PORT = int(os.environ.get('DB_PORT') or 3306)
    DB_USER = os.environ.get('DB_USER') or 'root'
    DB_PASSWORD = os.environ.get('DB_PASSWORD') or ''
    DB_NAME = os.environ.get('DB_NAME') or 'sports_website'
    DB_CONNECT_TIMEOUT = int(os.environ.get('DB_CONNECT_TIMEOUT') or 10)
    DB_INIT_ON_STARTUP = os.environ.get('DB_INIT_ON_STARTUP', 'true').lower() in ['true', 'on', '1']
    # Connection pool
    DB_POOL_NAME = os.environ.get('DB_POOL_NAME') or 'sports_pool'
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE') or 5)
    DB_ACQUIRE_TIMEOUT = float(os.environ.get('DB_ACQUIRE_TIMEOUT') or 30)
    SLOW_QUERY_THRESHOLD_MS = int(os.environ.get('SLOW_QUERY_THRESHOLD_MS') or 50)

    # Uploads
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(BASE_DIR, 'uploads')
    DATA_FOLDER = os.environ.get('DATA_FOLDER') or os.path.join(BASE_DIR, 'data')
    UPLOAD_URL_PREFIX = '/uploads'
    MAX_IMAGE_SIZE = 5 * 1024 * 1024  # 5MB
    MAX_DOCUMENT_SIZE = 10 * 1024 * 1024  # 10MB
    # Whole-request limit; a notice carries a document plus a schedule image
    MAX_CONTENT_LENGTH = MAX_IMAGE_SIZE + MAX_DOCUMENT_SIZE + 1024 * 1024

    # CORS
    CORS_ORIGINS = _env_list('CORS_ORIGINS', ['http://localhost:3000', 'http://localhost:3001'])
    CORS_ALLOW_METHODS = 'GET, POST, PUT, DELETE, OPTIONS'
    CORS_ALLOW_HEADERS = 'Content-Type, Authorization'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    LOG_FILE = os.environ.get('LOG_FILE')

    @staticmethod
    def init_app(app):
        """Prepare folders and logging for an application instance"""
        import logging

        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
        os.makedirs(app.config['DATA_FOLDER'], exist_ok=True)

        handlers = [logging.StreamHandler()]
        if app.config.get('LOG_FILE'):
            handlers.append(logging.FileHandler(app.config['LOG_FILE'], encoding='utf-8'))
        logging.basicConfig(
            level=getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers
        )


class DevelopmentConfig(Config):
    """Development settings"""
    DEBUG = True


class ProductionConfig(Config):
    """Production settings"""
    DEBUG = False
    LOG_FILE = os.environ.get('LOG_FILE') or 'sports_backend.log'


class TestingConfig(Config):
    """Test settings"""
    TESTING = True
    DB_NAME = 'sports_website_test'
    DB_INIT_ON_STARTUP = False
    DB_ACQUIRE_TIMEOUT = 1
    LOG_FILE = None


# Config map
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
