"""
Shared fixtures.

API tests run against a fresh in-memory store per test; SQL store
tests use a throwaway SQLite file.
"""
import pytest
from fastapi.testclient import TestClient

from volleycoach.core.config import Settings
from volleycoach.main import create_app
from volleycoach.store import MemoryStore, SqlStore


@pytest.fixture
def test_settings():
    return Settings(
        ENVIRONMENT="development",
        STORAGE_BACKEND="memory",
        DATABASE_URL="",
        LOG_FORMAT="console",
    )


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
async def sql_store(tmp_path):
    store = SqlStore(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await store.init()
    yield store
    await store.close()


@pytest.fixture
def client(test_settings, memory_store):
    app = create_app(test_settings, store=memory_store)
    with TestClient(app) as test_client:
        yield test_client


def register(client, email="setter@example.com", name="Sam Setter", password="secret123"):
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def auth(client):
    """Registered user id and bearer headers."""
    body = register(client)
    return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
def register_user(client):
    """Register another user; returns the auth response body."""
    def _register(email, name="Other Athlete", password="secret123"):
        return register(client, email=email, name=name, password=password)
    return _register
