from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from registrar.schemas.course import CourseSummary


class EnrollmentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = 0
    student_id: int
    course_id: int
    enrollment_date: datetime
    status: str = "active"


class EnrollmentView(BaseModel):
    """One enrollment joined with its student and the courses it points at."""
    enrollment_id: int
    student_id: int
    student_name: Optional[str] = None
    enrollment_date: datetime
    status: str
    courses: List[CourseSummary] = Field(default_factory=list)
