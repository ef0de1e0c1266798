from __future__ import annotations

from datetime import date

from pydantic import Field

from ..common.validators import CampusSchema
from ..core.enums import AttendanceStatus
from ..resources.definition import Resource


class AttendancePayload(CampusSchema):
    Attendance_ID: int = Field(..., description="Domain identifier of the attendance record")
    Date: date = Field(..., description="Day the attendance applies to (YYYY-MM-DD)")
    Status: AttendanceStatus

    error_messages = {
        "Attendance_ID": {"required": "Attendance ID is required", "number": "Attendance ID must be a number"},
        "Date": {"required": "Date is required", "date": "Please provide a valid date"},
        "Status": {
            "required": "Status is required",
            "choice": "Status must be either Present, Absent, Late or Excused",
        },
    }


ATTENDANCE = Resource(name="attendance", label="Attendance record", table="attendance", schema=AttendancePayload)
