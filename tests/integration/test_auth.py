def test_register_returns_public_profile(client):
    r = client.post(
        "/api/auth/register",
        json={"username": "  owner ", "password": "secret123", "email": "owner@example.com"},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Admin registered successfully"
    assert body["data"]["username"] == "owner"
    assert set(body["data"]) == {"id", "username", "email"}


def test_register_duplicate_username_or_email(client, admin_credentials):
    assert client.post("/api/auth/register", json=admin_credentials).status_code == 201

    same_email = {**admin_credentials, "username": "someone-else"}
    r = client.post("/api/auth/register", json=same_email)
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Username or email already exists"}

    same_username = {**admin_credentials, "email": "other@example.com"}
    assert client.post("/api/auth/register", json=same_username).status_code == 400


def test_register_validation(client):
    r = client.post("/api/auth/register", json={"username": "ab", "password": "123", "email": "nope"})
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert [e["field"] for e in body["errors"]] == ["username", "password", "email"]


def test_login_returns_token_and_user(client, admin_credentials):
    client.post("/api/auth/register", json=admin_credentials)
    r = client.post("/api/auth/login", json={"username": "admin", "password": "secret123"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["token"]
    assert data["user"] == {"id": data["user"]["id"], "username": "admin", "email": "admin@example.com"}


def test_login_does_not_reveal_which_part_was_wrong(client, admin_credentials):
    client.post("/api/auth/register", json=admin_credentials)
    wrong_password = client.post("/api/auth/login", json={"username": "admin", "password": "bad-password"})
    unknown_user = client.post("/api/auth/login", json={"username": "ghost", "password": "secret123"})
    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"success": False, "message": "Invalid credentials"}


def test_login_requires_fields(client):
    r = client.post("/api/auth/login", json={"username": "  "})
    assert r.status_code == 400
    assert r.json()["errors"] == [
        {"field": "username", "message": "Username is required"},
        {"field": "password", "message": "Password is required"},
    ]


def test_protected_routes_require_token(client):
    r = client.get("/api/groups")
    assert r.status_code == 401
    assert r.json() == {"success": False, "message": "Access token required"}

    r = client.get("/api/groups", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid or expired token"
