"""Soft-delete propagation from a student or course to its enrollments."""
import logging
from sqlalchemy.orm import Session

from registrar.models.academic import Enrollment, ENROLLMENT_DISABLED_STATUS

logger = logging.getLogger(__name__)


def disable_enrollments(db: Session, column, parent_id: int) -> int:
    """Mark every live enrollment whose ``column`` equals ``parent_id`` as disabled.

    Runs inside the caller's session so the parent update that follows is
    committed with it. Returns the number of enrollments touched.
    """
    affected = (
        db.query(Enrollment)
        .filter(column == parent_id, Enrollment.status != ENROLLMENT_DISABLED_STATUS)
        .update({Enrollment.status: ENROLLMENT_DISABLED_STATUS}, synchronize_session=False)
    )
    logger.debug(f"Disabled {affected} enrollment(s) where {column.key}={parent_id}")
    return affected
