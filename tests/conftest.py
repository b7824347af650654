"""Pytest fixtures for testing."""
from collections.abc import Generator
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from todoapp.config import Settings
from todoapp.main import create_app
from todoapp.resources.service import ResourceService
from todoapp.schemas.records import ReminderRecord, TodoRecord
from todoapp.schemas.user import UserPublic
from todoapp.stores.memory import InMemoryRecordStore, InMemoryUserStore

SECRET = "test-secret"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "password"


class TickingClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self) -> None:
        self.now = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def alice() -> UserPublic:
    return UserPublic(id="alice-id", email="alice@example.com", name="Alice", role="user")


@pytest.fixture
def bob() -> UserPublic:
    return UserPublic(id="bob-id", email="bob@example.com", name="Bob", role="user")


@pytest.fixture
def admin() -> UserPublic:
    return UserPublic(id="admin-id", email=ADMIN_EMAIL, name="Admin User", role="admin")


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def todo_service() -> ResourceService[TodoRecord]:
    return ResourceService(InMemoryRecordStore(), TodoRecord, "todo", clock=TickingClock())


@pytest.fixture
def reminder_service() -> ResourceService[ReminderRecord]:
    return ResourceService(InMemoryRecordStore(), ReminderRecord, "reminder", clock=TickingClock())


def make_settings(**overrides) -> Settings:
    values = {
        "APP_ENV": "dev",
        "SECRET_KEY": SECRET,
        "DATABASE_URL": "sqlite://",
        "ADMIN_EMAIL": ADMIN_EMAIL,
        "ADMIN_PASSWORD": ADMIN_PASSWORD,
        "RATE_LIMIT_MAX_CALLS": 1000,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Client against a fresh in-memory database with a seeded admin."""
    with TestClient(create_app(make_settings())) as test_client:
        yield test_client


def register(client: TestClient, email: str, name: str, password: str = "secret123") -> dict[str, str]:
    """Register an account and return its Authorization header."""
    response = client.post("/auth/register", json={"email": email, "password": password, "name": name})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


def login(client: TestClient, email: str, password: str) -> dict[str, str]:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def alice_headers(client: TestClient) -> dict[str, str]:
    return register(client, "alice@example.com", "Alice")


@pytest.fixture
def bob_headers(client: TestClient) -> dict[str, str]:
    return register(client, "bob@example.com", "Bob")


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    return login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
