# tests/conftest.py

from __future__ import annotations

import os

# Must be set before the app modules read their configuration.
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FILE"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.repository import TaskRepository, UserRepository  # noqa: E402
from core.security import PasswordHasher, TokenIssuer  # noqa: E402
from core.services import AuthService, TaskService, UserService  # noqa: E402
from database import SessionLocal, engine  # noqa: E402
from main import app  # noqa: E402
from models import Base  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_schema() -> None:
    """Every test starts from empty tables on the shared in-memory database."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture()
def issuer() -> TokenIssuer:
    return TokenIssuer("unit-test-key", expire_minutes=5)


@pytest.fixture()
def user_service(db, hasher) -> UserService:
    return UserService(UserRepository(db), hasher)


@pytest.fixture()
def auth_service(user_service, issuer) -> AuthService:
    return AuthService(user_service, issuer)


@pytest.fixture()
def task_service(db) -> TaskService:
    return TaskService(TaskRepository(db))


@pytest.fixture()
def alice(user_service):
    return user_service.create_user("alice", "password123")


@pytest.fixture()
def bob(user_service):
    return user_service.create_user("bob", "password456")


@pytest.fixture()
def client():
    """
    TestClient against the real app. Unhandled errors come back as responses
    so the 500 envelope can be checked.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def register(client):
    """Registers a user through the API and returns its bearer headers."""

    def _register(username: str = "testuser", password: str = "password123") -> dict[str, str]:
        res = client.post("/api/auth/register", json={"username": username, "password": password})
        assert res.status_code == 201, res.text
        token = res.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture()
def auth_headers(register) -> dict[str, str]:
    return register()
