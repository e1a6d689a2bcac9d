from typing import List, Optional
import logging

from sqlalchemy.orm import sessionmaker

from registrar.core.exceptions import DataAccessError, ValidationError
from registrar.models.academic import Student, Enrollment
from registrar.schemas.student import StudentSchema
from registrar.stores.base import BaseStore
from registrar.stores.cascade import disable_enrollments

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("full_name", "national_id", "email", "phone")


def validate_student(student: StudentSchema) -> None:
    if not student.id or student.id < 0:
        raise ValidationError("Invalid student id", "id")
    for field in REQUIRED_FIELDS:
        if not (getattr(student, field) or "").strip():
            raise ValidationError("Missing required student data", field)


class StudentStore(BaseStore[Student, StudentSchema]):
    def __init__(self, session_factory: sessionmaker):
        super().__init__(Student, StudentSchema, session_factory)

    def list(self) -> Optional[List[StudentSchema]]:
        """Active students, or None when the database could not be read"""
        try:
            return self._list_active()
        except DataAccessError:
            return None

    def create(self, student: StudentSchema) -> bool:
        try:
            new_id = self._insert(student.model_dump(include=set(REQUIRED_FIELDS)))
        except DataAccessError:
            return False
        if not new_id:
            logger.error("Student insert returned no id")
            return False
        student.id = new_id
        logger.info(f"Student created. ID: {new_id}")
        return True

    def update(self, student: StudentSchema) -> bool:
        try:
            validate_student(student)
        except ValidationError as e:
            logger.warning(f"Student update rejected: {e.message}")
            return False
        try:
            affected = self._update_by_id(
                student.id,
                student.model_dump(include=set(REQUIRED_FIELDS)),
            )
        except DataAccessError:
            return False
        return affected != 0

    def remove(self, id: int) -> bool:
        """Soft delete a student after disabling its enrollments.

        Only the student update decides the result; how many enrollments the
        cascade touched is not reported.
        """
        try:
            with self.session() as db:
                disable_enrollments(db, Enrollment.student_id, id)
                affected = (
                    db.query(Student)
                    .filter(Student.id == id, Student.active.is_(True))
                    .update({Student.active: False}, synchronize_session=False)
                )
        except DataAccessError:
            return False
        return affected != 0
