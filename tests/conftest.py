import os

# Must be set before studyhive.server.config is imported.
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ.pop("DATABASE_URL", None)

import pytest
from fastapi.testclient import TestClient

from studyhive.server.core.store import memory_store
from studyhive.server.main import create_app

from tests.helpers import auth_headers, register


@pytest.fixture
def store():
    return memory_store()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def user_a(client):
    return register(client, "ada@example.com", "Ada")


@pytest.fixture
def user_b(client):
    return register(client, "brian@example.com", "Brian")


@pytest.fixture
def headers_a(user_a):
    return auth_headers(user_a["token"])


@pytest.fixture
def headers_b(user_b):
    return auth_headers(user_b["token"])
