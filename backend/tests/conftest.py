"""
Pytest fixtures for the career portal API tests.
Uses in-memory SQLite, mocks Redis, provides one account per role and cookie-carrying clients.
"""
import os
from datetime import datetime, timedelta

import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["REDIS_URL"] = ""
os.environ["BCRYPT_ROUNDS"] = "4"

from backend.app.db.base import Base
from backend.main import app
from backend.app.core.dependencies import get_db
from backend.app.core.security import get_password_hash
from backend.app.models.admin import Admin
from backend.app.models.employer import Employer
from backend.app.models.enums import JobStatus
from backend.app.models.event import Event
from backend.app.models.job import Job
from backend.app.models.student import Student
from backend.app.models.university import University

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import backend.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal
# main.py imports engine directly; patch so startup uses our engine
import backend.main as main_module
main_module.engine = engine

PASSWORD = "testpass123"


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Anonymous TestClient (no identity cookie)."""
    return TestClient(app)


def client_with_cookies(**cookies) -> TestClient:
    c = TestClient(app)
    for name, value in cookies.items():
        c.cookies.set(name, value)
    return c


@pytest.fixture
def cookie_client(db_session):
    """Factory: cookie_client(studentId=...) -> TestClient carrying those cookies"""
    return client_with_cookies


@pytest.fixture
def university(db_session):
    uni = University(name="Test University", location="Pune", is_partner=True, is_visible=True)
    db_session.add(uni)
    db_session.commit()
    db_session.refresh(uni)
    return uni


@pytest.fixture
def make_student(db_session):
    """Factory: make_student(email=..., **overrides) -> Student"""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "name": f"Student {counter['n']}",
            "email": f"student{counter['n']}@example.com",
            "password": get_password_hash(PASSWORD),
            "college": "Test College",
            "degree": "B.Tech",
            "year": 3,
            "interests": ["Data Science"],
        }
        data.update(overrides)
        student = Student(**data)
        db_session.add(student)
        db_session.commit()
        db_session.refresh(student)
        return student

    return _make


@pytest.fixture
def student(make_student):
    return make_student(email="student@example.com")


@pytest.fixture
def make_employer(db_session):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "name": f"Employer {counter['n']}",
            "email": f"employer{counter['n']}@example.com",
            "password": get_password_hash(PASSWORD),
            "company": "Acme",
            "designation": "HR",
        }
        data.update(overrides)
        employer = Employer(**data)
        db_session.add(employer)
        db_session.commit()
        db_session.refresh(employer)
        return employer

    return _make


@pytest.fixture
def employer(make_employer):
    return make_employer(email="employer@example.com")


@pytest.fixture
def admin(db_session):
    admin = Admin(
        name="Admin",
        email="admin@example.com",
        password=get_password_hash(PASSWORD),
        role="ADMIN",
    )
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture
def make_job(db_session):
    """Factory: make_job(employer, **overrides) -> Job (APPROVED unless overridden)"""

    def _make(employer, **overrides):
        data = {
            "title": "Data Intern",
            "description": "Work on data pipelines",
            "type": "Internship",
            "location": "Bangalore",
            "stipend": "10000",
            "duration": "3 months",
            "apply_link": "https://example.com/apply",
            "status": JobStatus.APPROVED.value,
        }
        data.update(overrides)
        job = Job(employer_id=employer.id, **data)
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make


@pytest.fixture
def make_event(db_session):
    """Factory: make_event(**overrides) -> Event (a week in the future unless overridden)"""

    def _make(**overrides):
        data = {
            "title": "Resume Workshop",
            "description": "Bring your CV",
            "event_type": "WORKSHOP",
            "date": datetime.utcnow() + timedelta(days=7),
            "location": "Online",
        }
        data.update(overrides)
        event = Event(**data)
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        return event

    return _make


@pytest.fixture
def student_client(student):
    return client_with_cookies(studentId=student.id)


@pytest.fixture
def employer_client(employer):
    return client_with_cookies(employerId=employer.id)


@pytest.fixture
def admin_client(admin):
    return client_with_cookies(adminId=admin.id)


@pytest.fixture(autouse=True)
def mock_redis():
    """Mock Redis cache: get returns None (cache miss), set no-op. Skip connect/close."""
    with patch("backend.app.utils.cache.get", new_callable=AsyncMock, return_value=None), \
         patch("backend.app.utils.cache.set", new_callable=AsyncMock), \
         patch("backend.app.utils.cache.close", new_callable=AsyncMock), \
         patch("backend.app.utils.cache.connect", new_callable=AsyncMock):
        yield
