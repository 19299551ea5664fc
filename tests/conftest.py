from __future__ import annotations

from datetime import datetime, timezone

import pytest

from clinic_attendance.main import create_app
from clinic_attendance.staff.memory_staff_repository import InMemoryStaffRepository
from clinic_attendance.staff.seed import DEMO_PASSWORD, build_demo_staff


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def demo_staff():
    # Hashing is slow; build the seed once per test session.
    return build_demo_staff()


@pytest.fixture
def app(monkeypatch, demo_staff):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"TESTING": True}, staff_repo=InMemoryStaffRepository(demo_staff))


@pytest.fixture
def container(app):
    return app.extensions["clinic_attendance"]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_token(client):
    def _login(staff_id: str = "STAFF001", password: str = DEMO_PASSWORD) -> str:
        resp = client.post("/api/auth/login", json={"staffId": staff_id, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()["token"]

    return _login
