from __future__ import annotations

from datetime import datetime, timezone

from pydantic import Field, field_validator

from ..common.validators import CampusSchema
from ..resources.definition import Resource


class EnrollmentPayload(CampusSchema):
    """Links a student to a course.

    Student_ID and Course_ID are not checked against the other collections.
    """

    Enrollment_ID: int
    Student_ID: int
    Course_ID: int
    EnrollmentDate: datetime = Field(..., description="ISO-8601 timestamp of the enrollment, kept as naive UTC")

    error_messages = {
        "Enrollment_ID": {"required": "Enrollment_ID is required", "number": "Enrollment_ID must be a number"},
        "Student_ID": {"required": "Student_ID is required", "number": "Student_ID must be a number"},
        "Course_ID": {"required": "Course_ID is required", "number": "Course_ID must be a number"},
        "EnrollmentDate": {
            "required": "EnrollmentDate is required",
            "date": "EnrollmentDate must be a valid date",
        },
    }

    @field_validator("EnrollmentDate")
    @classmethod
    def _as_naive_utc(cls, value: datetime) -> datetime:
        # DATETIME columns have no offset.
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)


ENROLLMENT = Resource(
    name="enrollment",
    label="Enrollment",
    table="enrollments",
    schema=EnrollmentPayload,
    hidden_fields=("password",),
)
