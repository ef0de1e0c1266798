from __future__ import annotations

from pydantic import Field

from ..common.validators import CampusSchema
from ..resources.definition import Resource


class DepartmentPayload(CampusSchema):
    Department_ID: int
    Department_Name: str = Field(..., min_length=1, max_length=100)
    Department_Head: str = Field(..., min_length=1, max_length=50)

    error_messages = {
        "Department_ID": {"required": "Department ID is required"},
        "Department_Name": {
            "required": "Department name is required",
            "max_length": "Department name cannot exceed 100 characters",
        },
        "Department_Head": {
            "required": "Department head is required",
            "max_length": "Department head name cannot exceed 50 characters",
        },
    }


DEPARTMENT = Resource(name="department", label="Department", table="departments", schema=DepartmentPayload)
