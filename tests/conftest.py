"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Upload storage in a temporary directory
- Users and auth headers
"""

import os
import tempfile

# Keep the app's own engine and upload dir away from real resources
os.environ.setdefault("SQLALCHEMY_DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="alumni-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.core.storage import LocalStorage, get_storage
from app.models.user import User, UserRole
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "uploads"))


@pytest.fixture
def client(db_session, storage):
    """
    FastAPI test client with overridden database and storage dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_user(db_session, username: str, password: str = "Password123!", role: UserRole = UserRole.USER) -> User:
    """Helper to insert a user account"""
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=get_password_hash(password),
        role=role.value,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    """Helper to build a bearer header for a user"""
    token = create_access_token(user_id=str(user.id), username=user.username, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(db_session):
    return create_user(db_session, "admin", password="AdminPass123!", role=UserRole.ADMIN)


@pytest.fixture
def regular_user(db_session):
    return create_user(db_session, "alice", password="AlicePass123!")


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def user_headers(regular_user):
    return auth_headers(regular_user)


@pytest.fixture
def other_user(db_session):
    return create_user(db_session, "bob", password="BobPass123!")


@pytest.fixture
def other_headers(other_user):
    return auth_headers(other_user)


@pytest.fixture
def sample_alumni_data():
    """Sample alumni data for testing"""
    return {
        "student_number": "434221001",
        "name": "Budi Santoso",
        "department": "Teknik Informatika",
        "cohort_year": 2018,
        "graduation_year": 2022,
        "email": "budi.santoso@example.com",
        "phone": "081234567890",
        "address": "Jl. Merdeka No. 1, Surabaya",
    }


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "legacy_id": 17,
        "alumni_id": 3,
        "company": "PT Teknologi Nusantara",
        "position": "Backend Engineer",
        "industry": "Technology",
        "location": "Jakarta",
        "salary_range": "10-15 juta",
        "start_date": "2023-03-01",
        "status": "aktif",
        "description": "Builds and maintains internal APIs",
    }
