from typing import List, Optional
import logging

from sqlalchemy.orm import sessionmaker

from registrar.core.exceptions import DataAccessError, ValidationError
from registrar.models.academic import Course, Enrollment
from registrar.schemas.course import CourseSchema
from registrar.stores.base import BaseStore
from registrar.stores.cascade import disable_enrollments

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = {"name", "area", "credit_hours"}


def validate_course(course: CourseSchema) -> None:
    if not course.id or course.id < 0:
        raise ValidationError("Invalid course id", "id")
    if not course.name.strip():
        raise ValidationError("Missing required course data", "name")
    if not course.area.strip():
        raise ValidationError("Missing required course data", "area")
    if course.credit_hours is None or course.credit_hours < 0:
        raise ValidationError("Credit hours must be non-negative", "credit_hours")


class CourseStore(BaseStore[Course, CourseSchema]):
    def __init__(self, session_factory: sessionmaker):
        super().__init__(Course, CourseSchema, session_factory)

    def list(self) -> Optional[List[CourseSchema]]:
        try:
            return self._list_active()
        except DataAccessError:
            return None

    def create(self, course: CourseSchema) -> bool:
        try:
            new_id = self._insert(course.model_dump(include=MUTABLE_FIELDS))
        except DataAccessError:
            return False
        if not new_id:
            logger.error("Course insert returned no id")
            return False
        course.id = new_id
        logger.info(f"Course created. ID: {new_id}")
        return True

    def update(self, course: CourseSchema) -> bool:
        try:
            validate_course(course)
        except ValidationError as e:
            logger.warning(f"Course update rejected: {e.message}")
            return False
        try:
            affected = self._update_by_id(course.id, course.model_dump(include=MUTABLE_FIELDS))
        except DataAccessError:
            return False
        return affected != 0

    def remove(self, id: int) -> bool:
        """Disable the course's enrollments, then the course itself."""
        try:
            with self.session() as db:
                disable_enrollments(db, Enrollment.course_id, id)
                affected = (
                    db.query(Course)
                    .filter(Course.id == id, Course.active.is_(True))
                    .update({Course.active: False}, synchronize_session=False)
                )
        except DataAccessError:
            return False
        return affected != 0
