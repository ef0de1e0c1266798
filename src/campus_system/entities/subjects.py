from __future__ import annotations

from pydantic import Field

from ..common.validators import CampusSchema
from ..resources.definition import Resource


class SubjectPayload(CampusSchema):
    Subject_ID: int
    SubjectName: str = Field(..., min_length=1, max_length=100)
    SubjectDescription: str = Field(..., min_length=1, max_length=500)
    Course_ID: int

    error_messages = {
        "Subject_ID": {"required": "Subject ID is required", "number": "Subject ID must be a number"},
        "SubjectName": {
            "required": "Subject Name is required",
            "max_length": "Subject Name cannot exceed 100 characters",
        },
        "SubjectDescription": {
            "required": "Subject Description is required",
            "max_length": "Subject Description cannot exceed 500 characters",
        },
        "Course_ID": {"required": "Course ID is required", "number": "Course ID must be a number"},
    }


SUBJECT = Resource(
    name="subject",
    label="Subject",
    table="subjects",
    schema=SubjectPayload,
    hidden_fields=("password",),
)
