import io
import os
import re

import pytest
from werkzeug.datastructures import FileStorage

from utils.uploads import UploadManager, UploadError, format_size


def make_file(name='photo.png', content=b'image-bytes', mimetype='image/png'):
    return FileStorage(stream=io.BytesIO(content), filename=name, content_type=mimetype)


@pytest.fixture
def manager(tmp_path):
    return UploadManager(str(tmp_path / 'uploads'), 'http://host:4002')


def stored_files(manager):
    return sorted(os.listdir(manager.upload_folder))


def test_store_generates_prefixed_name(manager):
    stored = manager.store(make_file(), kind='image', prefix='event')

    assert re.match(r'^event-\d+-\d+\.png$', stored.stored_name)
    assert stored.url == f'http://host:4002/uploads/{stored.stored_name}'
    with open(stored.path, 'rb') as f:
        assert f.read() == b'image-bytes'


def test_store_requires_file(manager):
    with pytest.raises(UploadError) as exc_info:
        manager.store(None)
    assert exc_info.value.message == 'No file uploaded'


@pytest.mark.parametrize('name, mimetype', [
    ('notes.txt', 'text/plain'),
    ('photo.png', 'text/plain'),
    ('photo.exe', 'image/png'),
])
def test_store_rejects_disallowed_types(manager, name, mimetype):
    with pytest.raises(UploadError) as exc_info:
        manager.store(make_file(name=name, mimetype=mimetype), kind='image')

    assert exc_info.value.message == 'Only image files are allowed!'
    assert stored_files(manager) == []


def test_document_kind_accepts_pdf_only(manager):
    stored = manager.store(make_file('plan.pdf', mimetype='application/pdf'), kind='document', prefix='notice-doc')
    assert stored.stored_name.startswith('notice-doc-')

    with pytest.raises(UploadError) as exc_info:
        manager.store(make_file(), kind='document')
    assert exc_info.value.message == 'Only PDF files are allowed!'


def test_store_rejects_oversized_file_before_writing(tmp_path):
    manager = UploadManager(str(tmp_path), 'http://host:4002', max_sizes={'MAX_IMAGE_SIZE': 4})

    with pytest.raises(UploadError) as exc_info:
        manager.store(make_file(content=b'12345'), kind='image')

    assert exc_info.value.message.startswith('File too large. Maximum size is')
    assert os.listdir(str(tmp_path)) == []


def test_format_size():
    assert format_size(5 * 1024 * 1024) == '5MB'


def test_delete_is_idempotent_and_confined(manager, tmp_path):
    stored = manager.store(make_file())
    outside = tmp_path / 'keep.txt'
    outside.write_text('x')

    assert manager.delete(stored.stored_name) is True
    assert manager.delete(stored.stored_name) is False
    assert manager.delete('../keep.txt') is False
    assert manager.delete(None) is False
    assert outside.exists()


def test_batch_discards_uncommitted_files(manager):
    with manager.staging() as batch:
        batch.store(make_file())
        batch.store(make_file())
        assert len(stored_files(manager)) == 2

    assert stored_files(manager) == []


def test_batch_discards_files_when_block_raises(manager):
    with pytest.raises(RuntimeError):
        with manager.staging() as batch:
            batch.store(make_file())
            raise RuntimeError('database write failed')

    assert stored_files(manager) == []


def test_batch_commit_keeps_new_and_deletes_retired(manager):
    old = manager.store(make_file(), prefix='old')

    with manager.staging() as batch:
        new = batch.store(make_file(), prefix='new')
        batch.retire(old.stored_name)
        assert old.stored_name in stored_files(manager)
        batch.commit()

    assert stored_files(manager) == [new.stored_name]


def test_retired_file_survives_failed_block(manager):
    old = manager.store(make_file(), prefix='old')

    with manager.staging() as batch:
        batch.store(make_file(), prefix='new')
        batch.retire(old.stored_name)

    assert stored_files(manager) == [old.stored_name]


def test_from_config_defaults_to_server_host(tmp_path):
    config = {
        'UPLOAD_FOLDER': str(tmp_path / 'files'),
        'SERVER_HOST': '10.0.0.5',
        'PORT': 4002,
        'MAX_IMAGE_SIZE': 1024,
    }
    manager = UploadManager.from_config(config)

    assert manager.build_url('a.png') == 'http://10.0.0.5:4002/uploads/a.png'
    assert manager.max_sizes['MAX_IMAGE_SIZE'] == 1024
    assert os.path.isdir(str(tmp_path / 'files'))
