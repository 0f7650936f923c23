"""Shared fixtures for the Wellness Tracker tests.

Each test gets its own empty store and an application built around it
with ``create_app``; demo data is off unless a test asks for it.
"""
import pytest

from wellness_tracker import create_app
from wellness_tracker.store import WellnessStore

TEST_CONFIG = {
    "TESTING": True,
    "SEED_DEMO_DATA": False,
    "JWT_SECRET_KEY": "test-secret-key-with-enough-bytes-for-hs256",
}


@pytest.fixture
def store() -> WellnessStore:
    return WellnessStore()


@pytest.fixture
def app(store):
    return create_app(TEST_CONFIG, store=store)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def user(store):
    return store.create_user("alice", "alice-password", "Alice")


def login(client, username: str, password: str) -> dict:
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.get_json()
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture
def auth_headers(client, user) -> dict:
    return login(client, "alice", "alice-password")
