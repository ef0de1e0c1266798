from __future__ import annotations

from pydantic import Field

from ..common.validators import CampusSchema
from ..resources.definition import Resource


class CoursePayload(CampusSchema):
    Course_ID: int
    Course_name: str = Field(..., min_length=1, max_length=100)
    Credits: int = Field(..., gt=0)
    Catalog_no: str = Field(..., min_length=1, max_length=50)
    Academic_yr: int = Field(..., gt=0)

    error_messages = {
        "Course_ID": {"required": "Course_ID is required", "number": "Course_ID must be a number"},
        "Course_name": {
            "required": "Course name is required",
            "max_length": "Course name cannot exceed 100 characters",
        },
        "Credits": {
            "required": "Credits are required",
            "number": "Credits must be a number",
            "positive": "Credits must be a positive number",
        },
        "Catalog_no": {
            "required": "Catalog number is required",
            "max_length": "Catalog number cannot exceed 50 characters",
        },
        "Academic_yr": {
            "required": "Academic year is required",
            "number": "Academic year must be a number",
            "positive": "Academic year must be a positive number",
        },
    }


COURSE = Resource(name="course", label="Course", table="courses", schema=CoursePayload)
