from __future__ import annotations

from pydantic import Field

from ..common.validators import CampusSchema, EmailText
from ..core.enums import Gender
from ..resources.definition import Resource


class FacultyPayload(CampusSchema):
    Faculty_ID: int
    First_Name: str = Field(..., min_length=1, max_length=50)
    Last_Name: str = Field(..., min_length=1, max_length=50)
    Gender: Gender
    Age: int = Field(..., gt=0)
    Email: EmailText
    Contact: str = Field(..., min_length=1)
    Faculty_Role: str = Field(..., min_length=1)
    Department_ID: int
    Leave_ID: int
    Attendance_ID: int
    Student_Grade: str = Field(..., min_length=1)

    error_messages = {
        "Faculty_ID": {"required": "Faculty ID is required"},
        "First_Name": {
            "required": "First name is required",
            "max_length": "First name cannot exceed 50 characters",
        },
        "Last_Name": {
            "required": "Last name is required",
            "max_length": "Last name cannot exceed 50 characters",
        },
        "Gender": {"required": "Gender is required", "choice": "Gender must be Male, Female, or Other"},
        "Age": {
            "required": "Age is required",
            "number": "Age must be a number",
            "integer": "Age must be an integer",
            "positive": "Age must be a positive number",
        },
        "Email": {"required": "Email is required", "format": "Please provide a valid email address"},
        "Contact": {"required": "Contact is required"},
        "Faculty_Role": {"required": "Faculty role is required"},
        "Department_ID": {"required": "Department ID is required"},
        "Leave_ID": {"required": "Leave ID is required"},
        "Attendance_ID": {"required": "Attendance ID is required"},
        "Student_Grade": {"required": "Student Grade is required"},
    }


FACULTY = Resource(
    name="faculty",
    label="Faculty",
    table="faculty",
    schema=FacultyPayload,
    hidden_fields=("password",),
)
