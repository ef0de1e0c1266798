from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance outcome recorded for a day."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    EXCUSED = "Excused"


class LeaveType(str, Enum):
    SICK = "Sick"
    VACATION = "Vacation"
    EMERGENCY = "Emergency"
    OTHER = "Other"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    APPROVED = "Approved"
    PENDING = "Pending"
    REJECTED = "Rejected"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class StudentStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    GRADUATED = "Graduated"
    DROPPED = "Dropped"


class CivilStatus(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"
