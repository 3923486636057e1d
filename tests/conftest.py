import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from auth.dependencies import TOKEN_HEADER
from core.db import get_db
from main import app

JOHN = {"name": "John", "email": "john@john.com", "password": "jonhspwd"}
JAMES = {"name": "James", "email": "james@james.com", "password": "james123"}


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("JWT_SECRET", "test-secret")


@pytest.fixture
def database():
    # A fresh in-memory store per test.
    return AsyncMongoMockClient()["recipes_test"]


@pytest.fixture
def client(database):
    app.dependency_overrides[get_db] = lambda: database
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


def register(client, user):
    res = client.post("/api/auth/register", json=user)
    assert res.status_code == 200, res.text
    return res.json()["token"]


def auth_headers(token):
    return {TOKEN_HEADER: token}


@pytest.fixture
def john_token(client):
    return register(client, JOHN)


@pytest.fixture
def james_token(client):
    return register(client, JAMES)
