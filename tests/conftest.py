# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from credvault.core.config import Settings
from credvault.main import create_app


STRONG_PASSWORD = "Str0ng!Pass"


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "BCRYPT_ROUNDS": 4,
        "RATE_LIMIT_ENABLED": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session(app):
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def signup(client):
    """Post a signup with sensible defaults; override any field."""

    def _signup(**fields):
        payload = {"username": "alice", "email": "a@x.com", "password": STRONG_PASSWORD}
        payload.update(fields)
        return client.post("/signup", json=payload)

    return _signup
