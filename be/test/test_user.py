import uuid


def _email():
    return f"user_{uuid.uuid4().hex[:6]}@example.com"


def test_register(client):
    res = client.post("/api/register", json={"email": _email(), "password": "123456"})
    assert res.status_code == 201
    assert isinstance(res.get_json()["userId"], int)


def test_register_missing_fields(client):
    res = client.post("/api/register", json={"email": _email()})
    assert res.status_code == 400
    assert "message" in res.get_json()


def test_register_invalid_email(client):
    res = client.post("/api/register", json={"email": "not-an-email", "password": "123456"})
    assert res.status_code == 400


def test_register_short_password(client):
    res = client.post("/api/register", json={"email": _email(), "password": "123"})
    assert res.status_code == 400


def test_register_duplicate_email(client):
    email = _email()
    client.post("/api/register", json={"email": email, "password": "123456"})
    res = client.post("/api/register", json={"email": email.upper(), "password": "654321"})
    assert res.status_code == 409
    assert res.get_json() == {"message": "Email is already in use"}


def test_login(client):
    email = _email()
    client.post("/api/register", json={"email": email, "password": "123456"})
    res = client.post("/api/login", json={"email": email, "password": "123456"})
    assert res.status_code == 200
    assert "token" in res.get_json()


def test_login_bad_credentials(client):
    email = _email()
    client.post("/api/register", json={"email": email, "password": "123456"})
    res = client.post("/api/login", json={"email": email, "password": "wrong-pw"})
    assert res.status_code == 401
    res = client.post("/api/login", json={"email": _email(), "password": "123456"})
    assert res.status_code == 401


def test_profile(client, make_user):
    email, headers = make_user()
    res = client.get("/api/profile", headers=headers)
    assert res.status_code == 200
    assert res.get_json()["email"] == email


def test_missing_token(client):
    res = client.get("/api/profile")
    assert res.status_code == 401
    assert res.get_json() == {"message": "Authentication required"}


def test_garbage_token(client):
    res = client.get("/api/folders", headers={"Authorization": "Bearer not.a.jwt"})
    assert res.status_code == 401
    assert "message" in res.get_json()


def test_change_password(client, make_user):
    email, headers = make_user(password="123456")
    res = client.post("/api/change_password", headers=headers, json={
        "oldPassword": "123456",
        "newPassword": "654321"
    })
    assert res.status_code == 200

    res = client.post("/api/login", json={"email": email, "password": "123456"})
    assert res.status_code == 401
    res = client.post("/api/login", json={"email": email, "password": "654321"})
    assert res.status_code == 200


def test_change_password_wrong_old(client, make_user):
    _, headers = make_user(password="123456")
    res = client.post("/api/change_password", headers=headers, json={
        "oldPassword": "nope-nope",
        "newPassword": "654321"
    })
    assert res.status_code == 400


def test_register_body_must_be_object(client):
    for body in (["a@b.co", "pw123456"], "a@b.co", 42):
        res = client.post("/api/register", json=body)
        assert res.status_code == 400
        assert res.get_json() == {"message": "Request body must be a JSON object"}
    res = client.post("/api/login", json=["a@b.co", "pw123456"])
    assert res.status_code == 400


def test_change_password_body_must_be_object(client, auth_headers):
    res = client.post("/api/change_password", headers=auth_headers, json=["old", "new"])
    assert res.status_code == 400


def test_register_rejects_malformed_addresses(client):
    for email in ("alice@", "@x.com", "alice@@x.com", "alice x@x.com", "alice@x"):
        res = client.post("/api/register", json={"email": email, "password": "123456"})
        assert res.status_code == 400, email
