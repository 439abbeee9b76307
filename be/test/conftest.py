import io
import uuid
import pytest
from app import create_app
from common.db import db


@pytest.fixture
def test_app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "JWT_SECRET_KEY": "test-secret-key-at-least-32-bytes-long",
        "UPLOAD_TMP_DIR": str(tmp_path / "staging"),
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(test_app):
    return test_app.test_client()


@pytest.fixture
def make_user(client):
    """注册并登录一个用户，返回 (email, headers)"""
    def _make(email=None, password="pw123456"):
        email = email or f"user_{uuid.uuid4().hex[:6]}@example.com"
        res = client.post("/api/register", json={"email": email, "password": password})
        assert res.status_code == 201, res.get_json()
        res = client.post("/api/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.get_json()
        return email, {"Authorization": f"Bearer {res.get_json()['token']}"}
    return _make


@pytest.fixture
def auth_headers(make_user):
    return make_user()[1]


@pytest.fixture
def make_folder(client):
    def _make(headers, name="Docs", parent_id=None):
        body = {"name": name}
        if parent_id is not None:
            body["parentId"] = parent_id
        res = client.post("/api/folders", headers=headers, json=body)
        assert res.status_code == 201, res.get_json()
        return res.get_json()["id"]
    return _make


@pytest.fixture
def make_file(client, make_folder):
    def _make(headers, name="notes.txt", mime_type="text/plain", folder_id=None):
        folder_id = folder_id or make_folder(headers)
        res = client.post(f"/api/folders/{folder_id}/files", headers=headers,
                          json={"name": name, "type": mime_type})
        assert res.status_code == 201, res.get_json()
        return res.get_json()["id"]
    return _make


@pytest.fixture
def upload(client):
    def _upload(headers, file_id, data, filename="blob.bin"):
        return client.post(f"/api/files/{file_id}/upload", headers=headers,
                           data={"content": (io.BytesIO(data), filename)},
                           content_type="multipart/form-data")
    return _upload
