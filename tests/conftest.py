"""
Test configuration for the clinic gate.
"""
import os

# Settings are read at import time, so configure them before importing the app
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ACCESS_TOKEN_EXPIRE"] = "7d"

import itertools
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from clinic_gate.database import Base, get_db
from clinic_gate.main import app
from clinic_gate.auth.models import User, UserRole
from clinic_gate.doctors.models import Doctor
from clinic_gate.core.security import create_access_token

# In-memory database shared by every connection of the test engine
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

_sequence = itertools.count(1)


@pytest.fixture(scope="function")
def db():
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


@pytest.fixture(scope="function")
def client(db):
    """
    Create a test client with a test database session.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}


@pytest.fixture
def make_user(db):
    """
    Factory creating accounts: ``make_user(role=UserRole.ADMIN, is_active=True)``.
    """
    def _make_user(role: UserRole = UserRole.PATIENT, is_active: bool = True) -> User:
        n = next(_sequence)
        user = User(
            email=f"user{n}@example.com",
            full_name=f"Test User {n}",
            password_hash="unused-hash",
            role=role,
            is_active=is_active,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_doctor(db):
    """
    Factory creating a doctor profile for an account.
    """
    def _make_doctor(user: User, is_verified: bool = True) -> Doctor:
        doctor = Doctor(
            user_id=user.id,
            license_number=f"LIC-{next(_sequence)}",
            specialization="Cardiologist",
            experience=10,
            is_verified=is_verified,
        )
        db.add(doctor)
        db.commit()
        db.refresh(doctor)
        return doctor
    return _make_doctor


@pytest.fixture
def auth_header():
    """
    Build an Authorization header carrying a fresh token for an account.
    """
    def _auth_header(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}
    return _auth_header
