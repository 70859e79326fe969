import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.finance.infrastructure.persistence.repositories import PaymentRepository
from src.main import create_app


def test_unknown_route(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Route not found"}


def test_validation_envelope(client, auth_headers):
    r = client.post("/api/groups", json={}, headers=auth_headers)
    assert r.status_code == 400
    body = r.json()
    assert set(body) == {"success", "message", "errors"}
    assert body["message"] == "Validation failed"
    assert all(set(e) == {"field", "message"} for e in body["errors"])


def test_non_integer_path_id_is_a_validation_error(client, auth_headers):
    r = client.get("/api/groups/abc", headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "group_id"


@pytest.mark.parametrize(
    "path",
    ["/api/groups/99999999999999999999", "/api/expenses/0", "/api/students?group_id=99999999999999999999"],
)
def test_ids_outside_column_range_are_validation_errors(client, auth_headers, path):
    r = client.get(path, headers=auth_headers)
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Validation failed"
    assert body["errors"][0]["field"] in {"group_id", "expense_id"}


def test_unauthorized_envelope(client):
    r = client.get("/api/dashboard/stats")
    assert r.status_code == 401
    assert set(r.json()) == {"success", "message"}


@pytest.mark.parametrize("env,exposed", [("dev", True), ("prod", False)])
def test_server_error_envelope(tmp_path, env, exposed):
    url = f"sqlite+aiosqlite:///{tmp_path / 'boom.db'}"
    app = create_app(Settings(DATABASE_URL=url, TEST_DATABASE_URL=url, TESTING=True, ENV=env))

    @app.get("/api/boom")
    async def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/boom")
    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["message"] == "Server error"
    assert ("error" in body) is exposed
    if exposed:
        assert body["error"] == "kaboom"


@pytest.mark.parametrize("env,exposed", [("dev", True), ("prod", False)])
def test_internal_domain_error_uses_server_error_envelope(tmp_path, monkeypatch, env, exposed):
    url = f"sqlite+aiosqlite:///{tmp_path / 'lost.db'}"
    app = create_app(
        Settings(DATABASE_URL=url, TEST_DATABASE_URL=url, TESTING=True, DB_AUTO_CREATE=True, ENV=env)
    )

    async def lost(self, payment_id):
        return None

    with TestClient(app) as c:
        c.post("/api/auth/register", json={"username": "admin", "password": "secret123", "email": "a@example.com"})
        token = c.post("/api/auth/login", json={"username": "admin", "password": "secret123"}).json()["data"]["token"]
        headers = {"Authorization": f"Bearer {token}"}
        group = c.post("/api/groups", json={"name": "G", "monthly_fee": 10}, headers=headers).json()["data"]
        student = c.post(
            "/api/students",
            json={"group_id": group["id"], "full_name": "S", "join_date": "2024-01-01"},
            headers=headers,
        ).json()["data"]

        monkeypatch.setattr(PaymentRepository, "get_detail", lost)
        r = c.post(
            "/api/payments",
            json={
                "student_id": student["id"],
                "amount": 10,
                "payment_month": "2024-03",
                "payment_date": "2024-03-05",
                "payment_method": "cash",
            },
            headers=headers,
        )
    assert r.status_code == 500
    body = r.json()
    assert body["message"] == "Server error"
    assert ("error" in body) is exposed
    if exposed:
        assert body["error"] == "Payment 1 missing after commit"
