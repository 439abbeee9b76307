import threading

import pytest
from app import create_app
from common.db import db
from common.errors import StoreError
from models import User, Folder, File, FileVersion, Share
from services.version_service import VersionService


def _seed():
    owner = User(email="owner@example.com", password_hash="x")
    reader = User(email="reader@example.com", password_hash="x")
    db.session.add_all([owner, reader])
    db.session.flush()
    folder = Folder(name="Docs", owner_id=owner.id)
    db.session.add(folder)
    db.session.flush()
    file = File(name="a.txt", mime_type="text/plain", folder_id=folder.id, owner_id=owner.id)
    db.session.add(file)
    db.session.flush()
    db.session.add(Share(file_id=file.id, sharer_id=owner.id, sharee_id=reader.id, permission="read"))
    db.session.commit()
    return owner.id, reader.id, file.id


@pytest.fixture
def seeded(test_app):
    with test_app.app_context():
        yield _seed()


def test_numbers_are_sequential_without_gaps(seeded):
    owner, _, file_id = seeded
    for i in range(5):
        VersionService.create_version(file_id, f"rev {i}".encode(), owner)
    numbers = [v.version_number for v in VersionService.list_versions(file_id, owner)]
    assert numbers == [1, 2, 3, 4, 5]


def test_file_tracks_latest_version(seeded):
    owner, _, file_id = seeded
    VersionService.create_version(file_id, b"12345", owner)
    VersionService.create_version(file_id, b"123", owner)
    record = db.session.get(File, file_id)
    assert record.latest_version == 2
    assert record.size == 3


def test_latest_and_specific_version(seeded):
    owner, reader, file_id = seeded
    first = VersionService.create_version(file_id, b"hello", owner)
    VersionService.create_version(file_id, b"world", owner)

    latest = VersionService.get_latest(file_id, reader)
    assert latest.content == b"world"
    assert latest.version_number == 2
    assert latest.file_name == "a.txt"
    assert VersionService.get_version(file_id, first.id, reader).content == b"hello"


def test_no_versions(seeded):
    owner, _, file_id = seeded
    assert VersionService.list_versions(file_id, owner) == []
    with pytest.raises(StoreError, match="not found"):
        VersionService.get_latest(file_id, owner)


def test_reader_cannot_create_version(seeded):
    _, reader, file_id = seeded
    with pytest.raises(StoreError, match="not found"):
        VersionService.create_version(file_id, b"nope", reader)
    assert FileVersion.query.count() == 0
    assert db.session.get(File, file_id).latest_version == 0


def test_missing_file(seeded):
    owner, _, _ = seeded
    with pytest.raises(StoreError, match="not found"):
        VersionService.create_version(424242, b"x", owner)


def test_checksum_and_size_recorded(seeded):
    owner, _, file_id = seeded
    version = VersionService.create_version(file_id, b"hello", owner)
    assert version.checksum == "5d41402abc4b2a76b9719d911017c592"
    assert version.size == 5


def test_compression_can_be_disabled(test_app, seeded):
    owner, _, file_id = seeded
    test_app.config["ENABLE_COMPRESSION"] = False
    payload = b"z" * 4096
    version = VersionService.create_version(file_id, payload, owner)
    assert version.compressed is False
    assert version.content == payload


def test_concurrent_uploads_get_distinct_numbers(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'race.db'}",
        "SQLALCHEMY_ENGINE_OPTIONS": {"connect_args": {"timeout": 30}},
        "JWT_SECRET_KEY": "test-secret-key-at-least-32-bytes-long",
    })
    with app.app_context():
        owner, _, file_id = _seed()

    workers = 8
    barrier = threading.Barrier(workers)
    numbers, errors = [], []

    def worker(i):
        with app.app_context():
            barrier.wait()
            try:
                version = VersionService.create_version(file_id, f"writer {i}".encode(), owner)
                numbers.append(version.version_number)
            except Exception as e:  # surfaced by the assertion below
                errors.append(e)
            finally:
                db.session.remove()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert sorted(numbers) == list(range(1, workers + 1))
    with app.app_context():
        assert db.session.get(File, file_id).latest_version == workers
        db.engine.dispose()
