from pydantic import BaseModel, ConfigDict


class CourseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = 0
    name: str
    area: str
    credit_hours: float
    active: bool = True


class CourseSummary(BaseModel):
    """Course attributes nested inside an enrollment view"""
    id: int
    name: str
    area: str
