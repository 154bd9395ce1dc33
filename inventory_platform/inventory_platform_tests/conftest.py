"""
Shared fixtures: every test gets its own SQLite file database.
"""
import pytest
from fastapi.testclient import TestClient

from inventory_platform.inventory_platform.inventory_service.accounts import AccountService
from inventory_platform.inventory_platform.inventory_service.auth import PasswordHasher, TokenService
from inventory_platform.inventory_platform.inventory_service.config import Settings
from inventory_platform.inventory_platform.inventory_service.db import Database
from inventory_platform.inventory_platform.inventory_service.main import create_app

TEST_SECRET = "test-secret-for-inventory-service-0123456789"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        JWT_SECRET=TEST_SECRET,
        PASSWORD_ROUNDS=1000,
    )


@pytest.fixture
def database(settings):
    db = Database(settings)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    """Create a database session for testing."""
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def hasher(settings):
    return PasswordHasher(scheme=settings.PASSWORD_SCHEME, rounds=settings.PASSWORD_ROUNDS)


@pytest.fixture
def tokens(settings):
    return TokenService(settings.JWT_SECRET, expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


@pytest.fixture
def account_service(hasher, tokens):
    return AccountService(hasher, tokens)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    """Register and log in a user, returning a ready-to-use Authorization header."""
    credentials = {"username": "owner", "password": "Secret123!"}
    assert client.post("/register", json=credentials).status_code == 201
    login = client.post("/login", json=credentials)
    assert login.status_code == 200
    return {"Authorization": f"Bearer {login.json()['access_token']}"}
