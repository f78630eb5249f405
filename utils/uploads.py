#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
School Sports Management - upload storage

Files land in the upload folder under generated names and are served back
under /uploads. Handlers write files through an UploadBatch so that a file
never outlives a database write that did not complete.
"""

import logging
import os
import secrets
import time
from collections import namedtuple

from flask import current_app
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

MB = 1024 * 1024

FILE_KINDS = {
    'image': {
        'extensions': {'jpeg', 'jpg', 'png', 'gif', 'webp'},
        'mimetypes': {'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp'},
        'size_key': 'MAX_IMAGE_SIZE',
        'type_message': 'Only image files are allowed!',
    },
    'document': {
        'extensions': {'pdf'},
        'mimetypes': {'application/pdf'},
        'size_key': 'MAX_DOCUMENT_SIZE',
        'type_message': 'Only PDF files are allowed!',
    },
}

DEFAULT_MAX_SIZES = {
    'MAX_IMAGE_SIZE': 5 * MB,
    'MAX_DOCUMENT_SIZE': 10 * MB,
}

StoredFile = namedtuple('StoredFile', ['stored_name', 'url', 'path'])


class UploadError(Exception):
    """Rejected or failed upload"""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def format_size(num_bytes):
    return f"{num_bytes / MB:g}MB"


def has_file(file):
    return file is not None and bool(file.filename)


class UploadManager:
    """Disk storage for uploaded images and documents"""

    def __init__(self, upload_folder, base_url, url_prefix='/uploads', max_sizes=None):
        self.upload_folder = upload_folder
        self.base_url = base_url.rstrip('/')
        self.url_prefix = '/' + url_prefix.strip('/')
        self.max_sizes = dict(DEFAULT_MAX_SIZES)
        self.max_sizes.update(max_sizes or {})
        os.makedirs(self.upload_folder, exist_ok=True)

    @classmethod
    def from_config(cls, config):
        base_url = config.get('PUBLIC_BASE_URL') or f"http://{config['SERVER_HOST']}:{config['PORT']}"
        return cls(
            upload_folder=config['UPLOAD_FOLDER'],
            base_url=base_url,
            url_prefix=config.get('UPLOAD_URL_PREFIX', '/uploads'),
            max_sizes={key: config[key] for key in DEFAULT_MAX_SIZES if key in config},
        )

    def build_url(self, stored_name):
        return f"{self.base_url}{self.url_prefix}/{stored_name}"

    def path_for(self, stored_name):
        # only ever a bare name inside the upload folder
        return os.path.join(self.upload_folder, os.path.basename(stored_name))

    @staticmethod
    def generate_filename(prefix, extension):
        """<prefix>-<epoch millis>-<random><.ext>"""
        unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}"
        return f"{prefix}-{unique_suffix}.{extension}"

    def validate(self, file, kind, max_size=None):
        """Check extension, declared mime type and size; returns the extension"""
        rules = FILE_KINDS[kind]

        filename = secure_filename(file.filename or '')
        extension = filename.rsplit('.', 1)[1].lower() if '.' in filename else ''
        mimetype = (file.mimetype or '').lower()

        if extension not in rules['extensions'] or mimetype not in rules['mimetypes']:
            raise UploadError(rules['type_message'])

        limit = max_size or self.max_sizes[rules['size_key']]
        stream = file.stream
        stream.seek(0, os.SEEK_END)
        size = stream.tell()
        stream.seek(0)
        if size > limit:
            raise UploadError(f'File too large. Maximum size is {format_size(limit)}.')

        return extension

    def store(self, file, kind='image', prefix='upload', max_size=None):
        """Validate and write an uploaded file

        Returns:
            StoredFile with the generated name, its public URL and disk path
        """
        if not has_file(file):
            raise UploadError('No file uploaded')

        extension = self.validate(file, kind, max_size=max_size)
        stored_name = self.generate_filename(prefix, extension)
        path = self.path_for(stored_name)

        try:
            file.save(path)
        except OSError as e:
            logger.error("Failed to save upload %s: %s", stored_name, e)
            self.delete(stored_name)
            raise UploadError(f'Failed to save file: {e}', status_code=500)

        logger.info("Stored upload %s", stored_name)
        return StoredFile(stored_name, self.build_url(stored_name), path)

    def delete(self, stored_name):
        """Remove a stored file; missing files are ignored"""
        if not stored_name:
            return False

        path = self.path_for(stored_name)
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Failed to delete upload %s: %s", stored_name, e)
            return False

        logger.info("Deleted upload %s", stored_name)
        return True

    def staging(self):
        return UploadBatch(self)


class UploadBatch:
    """Files written while handling one request

    Everything stored through the batch is deleted when the block exits,
    unless commit() was called once the database write went through.
    Files being replaced are passed to retire() and only deleted on commit.
    """

    def __init__(self, manager):
        self.manager = manager
        self.stored = []
        self.retired = []
        self.committed = False

    def store(self, file, kind='image', prefix='upload', max_size=None):
        stored = self.manager.store(file, kind=kind, prefix=prefix, max_size=max_size)
        self.stored.append(stored.stored_name)
        return stored

    def retire(self, stored_name):
        if stored_name:
            self.retired.append(stored_name)

    def commit(self):
        self.committed = True
        for stored_name in self.retired:
            self.manager.delete(stored_name)
        self.retired = []

    def discard(self):
        for stored_name in self.stored:
            self.manager.delete(stored_name)
        self.stored = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self.committed:
            if self.stored:
                logger.info("Discarding %d uncommitted upload(s)", len(self.stored))
            self.discard()
        return False


def get_upload_manager():
    """Upload manager bound to the current application"""
    return current_app.extensions['upload_manager']
