from sqlalchemy import Column, String, Integer, Boolean, DECIMAL, TIMESTAMP, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, expression

from registrar.models.base import BaseModel

# Status written by every soft delete of an enrollment
ENROLLMENT_DISABLED_STATUS = "inactive"


class Student(BaseModel):
    __tablename__ = "students"

    full_name = Column(String(255), nullable=False)
    national_id = Column(String(20), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=False)
    active = Column(Boolean, nullable=False, default=True, server_default=expression.true())

    enrollments = relationship("Enrollment", back_populates="student")


class Course(BaseModel):
    __tablename__ = "courses"

    name = Column(String(255), nullable=False)
    area = Column(String(255), nullable=False)
    credit_hours = Column(DECIMAL(6, 2, asdecimal=False), nullable=False)
    active = Column(Boolean, nullable=False, default=True, server_default=expression.true())

    __table_args__ = (
        CheckConstraint('credit_hours >= 0', name='courses_credit_hours_check'),
    )

    enrollments = relationship("Enrollment", back_populates="course")


class Enrollment(BaseModel):
    __tablename__ = "enrollments"

    student_id = Column(Integer, ForeignKey("students.id", ondelete="RESTRICT"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="RESTRICT"), nullable=False, index=True)

    enrollment_date = Column(TIMESTAMP(timezone=True), nullable=False, default=func.now())
    status = Column(String(50), nullable=False, default="active")

    student = relationship("Student", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")
