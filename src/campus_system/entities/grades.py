from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.validators import CampusSchema
from ..resources.definition import Resource


class GradePayload(CampusSchema):
    Grade_ID: int
    Student_ID: int
    Subj_desc: str = Field(..., min_length=1, max_length=200)
    Units: int = Field(..., gt=0)
    Credits: int = Field(..., gt=0)
    Remarks: Optional[str] = Field(None, max_length=500)

    error_messages = {
        "Grade_ID": {"required": "Grade_ID is required", "number": "Grade_ID must be a number"},
        "Student_ID": {"required": "Student_ID is required", "number": "Student_ID must be a number"},
        "Subj_desc": {"required": "Subject description is required", "string": "Subj_desc must be a string"},
        "Units": {
            "required": "Units are required",
            "number": "Units must be a number",
            "positive": "Units must be a positive number",
        },
        "Credits": {
            "required": "Credits are required",
            "number": "Credits must be a number",
            "positive": "Credits must be a positive number",
        },
        "Remarks": {"string": "Remarks must be a string"},
    }


GRADE = Resource(name="grade", label="Grade", table="grades", schema=GradePayload)
