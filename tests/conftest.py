# tests/conftest.py
import pytest
from datetime import datetime
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from registrar.core.database import create_session_factory
from registrar.models import Base
from registrar.schemas.course import CourseSchema
from registrar.schemas.enrollment import EnrollmentSchema
from registrar.schemas.student import StudentSchema
from registrar.stores.course import CourseStore
from registrar.stores.enrollment import EnrollmentStore
from registrar.stores.student import StudentStore


@pytest.fixture
def engine():
    """SQLite in memory, shared by every session of the test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)

@pytest.fixture
def student_store(session_factory):
    return StudentStore(session_factory)

@pytest.fixture
def course_store(session_factory):
    return CourseStore(session_factory)

@pytest.fixture
def enrollment_store(session_factory):
    return EnrollmentStore(session_factory)

@pytest.fixture
def db_error():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))

@pytest.fixture
def mock_db_session():
    """Mock DB session with chained query calls"""
    session = MagicMock(spec=Session)
    session.query.return_value.filter.return_value = session.query.return_value
    session.query.return_value.join.return_value = session.query.return_value
    session.query.return_value.order_by.return_value = session.query.return_value
    return session

@pytest.fixture
def mock_session_factory(mock_db_session):
    return MagicMock(return_value=mock_db_session)

@pytest.fixture
def failing_session_factory(mock_db_session, db_error):
    """Every statement fails as if the database went away"""
    mock_db_session.query.side_effect = db_error
    mock_db_session.flush.side_effect = db_error
    mock_db_session.commit.side_effect = db_error
    return MagicMock(return_value=mock_db_session)

@pytest.fixture
def enrollment_date():
    return datetime(2025, 3, 1, 9, 0)

@pytest.fixture
def ana():
    return StudentSchema(full_name="Ana", national_id="111", email="a@x.com", phone="555")

@pytest.fixture
def math_course():
    return CourseSchema(name="Math", area="Science", credit_hours=40)

@pytest.fixture
def make_enrollment(enrollment_date):
    def _make(student_id, course_id, status="active"):
        return EnrollmentSchema(
            student_id=student_id,
            course_id=course_id,
            enrollment_date=enrollment_date,
            status=status,
        )
    return _make
