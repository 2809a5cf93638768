from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so `import app.*` works in tests.
ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

# Settings are read once at import time, so point them at SQLite first.
_DB_DIR = tempfile.mkdtemp(prefix="career_portal_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["SESSION_SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""

from fastapi.testclient import TestClient  # noqa: E402

from app.db.database import engine  # noqa: E402
from app.db.init_db import ensure_admin  # noqa: E402
from app.db.schema import create_tables, drop_tables  # noqa: E402
from app.main import app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture(autouse=True)
def fresh_db():
    drop_tables(engine)
    create_tables(engine)
    yield


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def register(client: TestClient, email: str = "student@example.com", name: str = "Sam Student", **extra):
    payload = {"email": email, "password": "secret123", "name": name, "year_level": 2}
    payload.update(extra)
    r = client.post("/api/auth/register", json=payload)
    assert r.status_code == 201, r.text
    return r.json()["user"]


@pytest.fixture
def student_client() -> TestClient:
    c = TestClient(app)
    register(c)
    return c


@pytest.fixture
def other_student_client() -> TestClient:
    c = TestClient(app)
    register(c, email="other@example.com", name="Olive Other")
    return c


@pytest.fixture
def admin_client() -> TestClient:
    ensure_admin(ADMIN_EMAIL, ADMIN_PASSWORD, "Ada Admin")
    c = TestClient(app)
    r = c.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    return c


@pytest.fixture
def opportunity(admin_client) -> dict:
    r = admin_client.post("/api/opportunities", json={
        "title": "Backend Intern",
        "company": "Acme",
        "description": "Build APIs",
        "type": "internship",
        "location": "Manila",
        "required_skills": ["Python", "SQL"],
    })
    assert r.status_code == 201, r.text
    return r.json()
