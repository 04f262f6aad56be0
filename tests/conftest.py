# /tests/conftest.py

import os

# Settings are read at import time, so the environment must be in place first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portal.core.security import create_access_token
from portal.db.base import Base
from portal.db.database import get_db
from portal.db.models.user_model import UserRole
from portal.main import app
from portal.models.user_model import UserCreate
from portal.services import user_service
from portal.services.database_service import DatabaseService


@pytest.fixture
def db_session():
    """A fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(db_session):
    """Test client whose requests all share the test session."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def catalogue(db):
    """
    One program with two majors; each major has one section. Two courses.
    """
    program = db.add_program({"code": "BSC", "name": "Bachelor of Science"})
    cs = db.add_major({"name": "Computer Science", "program_id": program.id})
    math = db.add_major({"name": "Mathematics", "program_id": program.id})
    cs_a = db.add_section({"name": "CS-A", "semester": 1, "major_id": cs.id})
    math_a = db.add_section({"name": "MATH-A", "semester": 1, "major_id": math.id})
    algo = db.add_course({"code": "CS101", "name": "Algorithms", "credit_hours": 3})
    calc = db.add_course({"code": "MA101", "name": "Calculus", "credit_hours": 4})
    return {
        "program": program.id,
        "cs": cs.id,
        "math": math.id,
        "cs_a": cs_a.id,
        "math_a": math_a.id,
        "algo": algo.id,
        "calc": calc.id,
    }


def _make_user(db, session, name, email, role):
    user = user_service.create_user(db, UserCreate(name=name, email=email, password="password123"))
    if role != UserRole.STUDENT:
        # Self-registration cannot create admins; promote directly.
        user.role = role
        session.commit()
    return user


@pytest.fixture
def auth_headers():
    """Builds the Authorization header for a user."""
    def _headers(user) -> dict:
        token = create_access_token(subject=user.id, role=user.role.value)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def admin(db, db_session):
    return _make_user(db, db_session, "Grace Admin", "admin@example.edu", UserRole.ADMIN)


@pytest.fixture
def instructor(db, db_session):
    return _make_user(db, db_session, "Ada Instructor", "ada@example.edu", UserRole.INSTRUCTOR)


@pytest.fixture
def other_instructor(db, db_session):
    return _make_user(db, db_session, "Alan Instructor", "alan@example.edu", UserRole.INSTRUCTOR)


@pytest.fixture
def student_user(db, db_session):
    return _make_user(db, db_session, "Sam Student", "sam@example.edu", UserRole.STUDENT)
