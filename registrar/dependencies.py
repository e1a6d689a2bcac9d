from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from registrar.core.database import get_session_factory
from registrar.stores.course import CourseStore
from registrar.stores.enrollment import EnrollmentStore
from registrar.stores.student import StudentStore


def get_student_store(
    session_factory: sessionmaker = Depends(get_session_factory)
) -> StudentStore:
    return StudentStore(session_factory)

def get_course_store(
    session_factory: sessionmaker = Depends(get_session_factory)
) -> CourseStore:
    return CourseStore(session_factory)

def get_enrollment_store(
    session_factory: sessionmaker = Depends(get_session_factory)
) -> EnrollmentStore:
    return EnrollmentStore(session_factory)
