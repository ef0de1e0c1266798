from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator

from ..common.validators import CampusSchema, EmailText
from ..core.enums import CivilStatus, Gender, StudentStatus
from ..resources.definition import Resource


class StudentPayload(CampusSchema):
    """Student profile.

    Course_ID, Subject_ID and Enrollment_ID are plain numbers; nothing checks
    that the referenced records exist.
    """

    Student_ID: int
    StudentStatus: StudentStatus
    YearLevel: int = Field(..., ge=1, le=6)
    FirstName: str = Field(..., min_length=1, max_length=50)
    LastName: str = Field(..., min_length=1, max_length=50)
    MiddleName: Optional[str] = Field(None, max_length=50)
    Address: str = Field(..., min_length=1, max_length=255)
    Email: EmailText
    Phone: str = Field(..., min_length=1, max_length=20)
    DateOfBirth: date
    PlaceOfBirth: str = Field(..., min_length=1, max_length=100)
    Sex: Gender
    Religion: str = Field(..., min_length=1, max_length=50)
    Nationality: str = Field(..., min_length=1, max_length=50)
    CivilStatus: CivilStatus
    Occupation: Optional[str] = Field(None, max_length=100)
    WorkAddress: Optional[str] = Field(None, max_length=255)
    Course_ID: int
    Subject_ID: int
    Enrollment_ID: int

    error_messages = {
        "Student_ID": {"required": "Student ID is required", "number": "Student ID must be a number"},
        "StudentStatus": {
            "required": "Student Status is required",
            "choice": "Student Status must be one of the following: Active, Inactive, Graduated, Dropped",
        },
        "YearLevel": {
            "required": "Year Level is required",
            "number": "Year Level must be a number",
            "range": "Year Level must be between 1 and 6",
        },
        "FirstName": {"required": "First name is required", "max_length": "First name cannot exceed 50 characters"},
        "LastName": {"required": "Last name is required", "max_length": "Last name cannot exceed 50 characters"},
        "MiddleName": {"max_length": "Middle name cannot exceed 50 characters"},
        "Address": {"required": "Address is required", "max_length": "Address cannot exceed 255 characters"},
        "Email": {"required": "Email is required", "format": "Please provide a valid email address"},
        "Phone": {"required": "Phone number is required", "string": "Phone number must be a valid number"},
        "DateOfBirth": {"required": "Date of Birth is required", "date": "Date of Birth must be a valid date"},
        "PlaceOfBirth": {
            "required": "Place of Birth is required",
            "max_length": "Place of Birth cannot exceed 100 characters",
        },
        "Sex": {"required": "Sex is required", "choice": "Sex must be one of the following: Male, Female, Other"},
        "Religion": {"required": "Religion is required", "max_length": "Religion cannot exceed 50 characters"},
        "Nationality": {
            "required": "Nationality is required",
            "max_length": "Nationality cannot exceed 50 characters",
        },
        "CivilStatus": {
            "required": "Civil Status is required",
            "choice": "Civil Status must be one of the following: Single, Married, Divorced, Widowed",
        },
        "Occupation": {"max_length": "Occupation cannot exceed 100 characters"},
        "WorkAddress": {"max_length": "Work Address cannot exceed 255 characters"},
        "Course_ID": {"required": "Course ID is required", "number": "Course ID must be a number"},
        "Subject_ID": {"required": "Subject ID is required", "number": "Subject ID must be a number"},
        "Enrollment_ID": {"required": "Enrollment ID is required", "number": "Enrollment ID must be a number"},
    }

    @field_validator("Phone", mode="before")
    @classmethod
    def _phone_as_text(cls, value: Any) -> Any:
        # Older clients send the phone number as a JSON number.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


STUDENT = Resource(
    name="student",
    label="Student",
    table="students",
    schema=StudentPayload,
    hidden_fields=("password",),
)
