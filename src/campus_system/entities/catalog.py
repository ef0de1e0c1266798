from __future__ import annotations

from ..resources.definition import Resource
from .attendance import ATTENDANCE
from .courses import COURSE
from .departments import DEPARTMENT
from .enrollments import ENROLLMENT
from .faculty import FACULTY
from .grades import GRADE
from .leaves import LEAVE
from .schedules import SCHEDULE
from .students import STUDENT
from .subjects import SUBJECT

ALL_RESOURCES: tuple[Resource, ...] = (
    ATTENDANCE,
    COURSE,
    DEPARTMENT,
    ENROLLMENT,
    FACULTY,
    GRADE,
    LEAVE,
    SCHEDULE,
    STUDENT,
    SUBJECT,
)
