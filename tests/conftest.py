from datetime import date
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.dependencies import get_today
from src.main import create_app

TEST_SECRET = "test-secret-that-is-long-enough-for-hs256-signing"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path) -> Settings:
    url = f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    return Settings(
        DATABASE_URL=url,
        TEST_DATABASE_URL=url,
        TESTING=True,
        DB_AUTO_CREATE=True,
        JWT_SECRET=TEST_SECRET,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Context manager runs the lifespan (engine + tables)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def freeze_today(app) -> Callable[[date], None]:
    """Pin the clock used for "current month" decisions."""
    def _freeze(day: date) -> None:
        app.dependency_overrides[get_today] = lambda: (lambda: day)
    return _freeze


@pytest.fixture
def admin_credentials() -> Dict[str, str]:
    return {"username": "admin", "password": "secret123", "email": "admin@example.com"}


@pytest.fixture
def auth_headers(client, admin_credentials) -> Dict[str, str]:
    r = client.post("/api/auth/register", json=admin_credentials)
    assert r.status_code == 201, r.text
    r = client.post(
        "/api/auth/login",
        json={"username": admin_credentials["username"], "password": admin_credentials["password"]},
    )
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['data']['token']}"}


# --- factory helpers -----------------------------------------------------------------


@pytest.fixture
def create_group(client, auth_headers) -> Callable[..., Dict[str, Any]]:
    def _create(**overrides: Any) -> Dict[str, Any]:
        payload = {"name": "Math A", "teacher_name": "Ms. Karimova", "monthly_fee": 300000}
        payload.update(overrides)
        r = client.post("/api/groups", json=payload, headers=auth_headers)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _create


@pytest.fixture
def create_student(client, auth_headers, create_group) -> Callable[..., Dict[str, Any]]:
    def _create(**overrides: Any) -> Dict[str, Any]:
        if "group_id" not in overrides:
            overrides["group_id"] = create_group()["id"]
        payload = {"full_name": "Ali Valiyev", "join_date": "2024-01-15", "phone_number": "+998901234567"}
        payload.update(overrides)
        r = client.post("/api/students", json=payload, headers=auth_headers)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _create


@pytest.fixture
def create_payment(client, auth_headers) -> Callable[..., Dict[str, Any]]:
    def _create(student_id: int, payment_month: str, **overrides: Any) -> Dict[str, Any]:
        payload = {
            "student_id": student_id,
            "amount": 300000,
            "payment_month": payment_month,
            "payment_date": f"{payment_month}-05",
            "payment_method": "cash",
        }
        payload.update(overrides)
        r = client.post("/api/payments", json=payload, headers=auth_headers)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _create


@pytest.fixture
def get_student(client, auth_headers) -> Callable[[int], Dict[str, Any]]:
    def _get(student_id: int) -> Dict[str, Any]:
        r = client.get(f"/api/students/{student_id}", headers=auth_headers)
        assert r.status_code == 200, r.text
        return r.json()["data"]
    return _get
