"""
Shared fixtures: in-memory SQLite database, users with roles, API client
"""
import os

# Settings are read at import time
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mailtext.main import app
from mailtext.core.database import Base, get_db
from mailtext.core.security import create_access_token, get_password_hash
from mailtext.models.user import User

PASSWORD = "correct horse battery staple"
PASSWORD_HASH = get_password_hash(PASSWORD)

# Test database (in-memory SQLite shared by the app and the tests)
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


def _create_user(db_session, username, **roles):
    user = User(username=username, email=f"{username}@example.com", password_hash=PASSWORD_HASH, **roles)
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def admin(db_session):
    return _create_user(db_session, "admin", admin=True)


@pytest.fixture
def moderator(db_session):
    return _create_user(db_session, "moderator", moderator=True)


@pytest.fixture
def user(db_session):
    return _create_user(db_session, "regular")


def auth_headers(user):
    token = create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def headers_for():
    """Bearer token headers for a user"""
    return auth_headers


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def client():
    """Create test client"""
    return TestClient(app)
