from typing import Dict, Iterable, List, Optional
import logging

from sqlalchemy.orm import sessionmaker

from registrar.core.exceptions import DataAccessError, ValidationError
from registrar.models.academic import Course, Enrollment, Student, ENROLLMENT_DISABLED_STATUS
from registrar.schemas.course import CourseSummary
from registrar.schemas.enrollment import EnrollmentSchema, EnrollmentView
from registrar.stores.base import BaseStore

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = {"student_id", "course_id", "enrollment_date", "status"}


def validate_enrollment(enrollment: EnrollmentSchema) -> None:
    if not enrollment.id or enrollment.id < 0:
        raise ValidationError("Invalid enrollment id", "id")
    if enrollment.student_id <= 0:
        raise ValidationError("Invalid student reference", "student_id")
    if enrollment.course_id <= 0:
        raise ValidationError("Invalid course reference", "course_id")
    if not enrollment.status.strip():
        raise ValidationError("Missing enrollment status", "status")


def group_enrollment_rows(rows: Iterable) -> List[EnrollmentView]:
    """Fold joined (enrollment, course) rows into one view per enrollment.

    Views are keyed by enrollment id, so rows for the same enrollment need not
    be adjacent. Views and their courses keep first-seen order.
    """
    views: Dict[int, EnrollmentView] = {}
    for row in rows:
        view = views.get(row.enrollment_id)
        if view is None:
            view = EnrollmentView(
                enrollment_id=row.enrollment_id,
                student_id=row.student_id,
                student_name=row.student_name,
                enrollment_date=row.enrollment_date,
                status=row.status,
            )
            views[row.enrollment_id] = view
        view.courses.append(
            CourseSummary(id=row.course_id, name=row.course_name, area=row.course_area)
        )
    return list(views.values())


class EnrollmentStore(BaseStore[Enrollment, EnrollmentSchema]):
    def __init__(self, session_factory: sessionmaker):
        super().__init__(Enrollment, EnrollmentSchema, session_factory)

    def create(self, enrollment: EnrollmentSchema) -> bool:
        # student/course existence is left to the foreign keys
        try:
            new_id = self._insert(enrollment.model_dump(include=MUTABLE_FIELDS))
        except DataAccessError:
            return False
        if not new_id:
            logger.error("Enrollment insert returned no id")
            return False
        enrollment.id = new_id
        logger.info(f"Enrollment created. ID: {new_id}")
        return True

    def update(self, enrollment: EnrollmentSchema) -> bool:
        try:
            validate_enrollment(enrollment)
        except ValidationError as e:
            logger.warning(f"Enrollment update rejected: {e.message}")
            return False
        try:
            affected = self._update_by_id(
                enrollment.id, enrollment.model_dump(include=MUTABLE_FIELDS)
            )
        except DataAccessError:
            return False
        if affected:
            logger.info(f"Enrollment updated. ID: {enrollment.id}")
        return affected != 0

    def remove(self, id: int) -> bool:
        """Disable a single enrollment, matched by its own id."""
        try:
            with self.session() as db:
                affected = (
                    db.query(Enrollment)
                    .filter(Enrollment.id == id, Enrollment.status != ENROLLMENT_DISABLED_STATUS)
                    .update({Enrollment.status: ENROLLMENT_DISABLED_STATUS}, synchronize_session=False)
                )
        except DataAccessError:
            return False
        return affected != 0

    def list_joined(self) -> Optional[List[EnrollmentView]]:
        """Live enrollments joined with their student and course.

        Returns None when no enrollment matches and an empty list when the
        database could not be read.
        """
        try:
            with self.session() as db:
                rows = (
                    db.query(
                        Enrollment.id.label("enrollment_id"),
                        Enrollment.student_id,
                        Enrollment.enrollment_date,
                        Enrollment.status,
                        Student.full_name.label("student_name"),
                        Course.id.label("course_id"),
                        Course.name.label("course_name"),
                        Course.area.label("course_area"),
                    )
                    .join(Student, Enrollment.student_id == Student.id)
                    .join(Course, Enrollment.course_id == Course.id)
                    .filter(Enrollment.status != ENROLLMENT_DISABLED_STATUS)
                    .order_by(Enrollment.id, Course.id)
                    .all()
                )
        except DataAccessError:
            return []

        if not rows:
            return None
        return group_enrollment_rows(rows)
