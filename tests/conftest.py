"""
Pytest Configuration and Shared Fixtures.

Every test runs against its own in-memory SQLite database.
"""

import os

# Settings are read at import time; point them at SQLite before anything loads them.
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from config.database import get_db, init_db
from models.employee import Employee
from repositories.employee_repository import EmployeeRepository
from services.employee_service import EmployeeService


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Iterator[Session]:
    """A database session closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session) -> EmployeeRepository:
    return EmployeeRepository(db_session)


@pytest.fixture
def employee_service(db_session) -> EmployeeService:
    return EmployeeService(db_session)


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """Factory for transient Employee instances with sensible defaults."""

    def _create(**overrides) -> Employee:
        fields = {
            "name": "Ann Smith",
            "email": "ann.smith@example.com",
            "job_title": "Software Engineer",
            "phone": "+1 555 0100",
            "image_url": "https://example.com/avatars/ann.png",
        }
        fields.update(overrides)
        return Employee(**fields)

    return _create


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest.fixture
def client(session_factory) -> Iterator[TestClient]:
    """TestClient whose requests use sessions from the test engine."""

    def override_get_db() -> Iterator[Session]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
