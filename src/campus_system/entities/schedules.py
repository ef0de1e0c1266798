from __future__ import annotations

from pydantic import Field

from ..common.validators import CampusSchema
from ..resources.definition import Resource


class SchedulePayload(CampusSchema):
    Schedule_ID: int
    Course_ID: int
    Teacher: str = Field(..., min_length=1, max_length=100)
    Days: str = Field(..., min_length=1, max_length=50)
    Class_time: str = Field(..., min_length=1)
    Room: str = Field(..., min_length=1, max_length=100)
    Lecture: int = Field(..., gt=0, description="Lecture hours")
    Laboratory: int = Field(..., gt=0, description="Laboratory hours")
    Units: int = Field(..., gt=0)

    error_messages = {
        "Schedule_ID": {"required": "Schedule_ID is required", "number": "Schedule_ID must be a number"},
        "Course_ID": {"required": "Course_ID is required", "number": "Course_ID must be a number"},
        "Teacher": {"required": "Teacher is required", "string": "Teacher must be a string"},
        "Days": {"required": "Days are required", "string": "Days must be a string"},
        "Class_time": {"required": "Class_time is required", "string": "Class_time must be a string"},
        "Room": {"required": "Room is required", "string": "Room must be a string"},
        "Lecture": {
            "required": "Lecture hours are required",
            "number": "Lecture hours must be a number",
            "positive": "Lecture hours must be a positive number",
        },
        "Laboratory": {
            "required": "Laboratory hours are required",
            "number": "Laboratory hours must be a number",
            "positive": "Laboratory hours must be a positive number",
        },
        "Units": {
            "required": "Units are required",
            "number": "Units must be a number",
            "positive": "Units must be a positive number",
        },
    }


SCHEDULE = Resource(name="schedule", label="Schedule", table="schedules", schema=SchedulePayload)
