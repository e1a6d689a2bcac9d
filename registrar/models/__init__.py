from .base import Base
from .academic import Student, Course, Enrollment, ENROLLMENT_DISABLED_STATUS
