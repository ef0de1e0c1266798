from __future__ import annotations

from datetime import date

from pydantic import Field

from ..common.validators import CampusSchema
from ..core.enums import LeaveStatus, LeaveType
from ..resources.definition import Resource


class LeavePayload(CampusSchema):
    Leave_ID: int
    Leave_Type: LeaveType
    Faculty_ID: int
    Date: date = Field(..., description="ISO date of the leave")
    Status: LeaveStatus

    error_messages = {
        "Leave_ID": {"required": "Leave ID is required"},
        "Leave_Type": {
            "required": "Leave type is required",
            "choice": "Leave type must be Sick, Vacation, Emergency, or Other",
        },
        "Faculty_ID": {"required": "Faculty ID is required"},
        "Date": {"required": "Date is required", "date": "Date must be a valid ISO date"},
        "Status": {"required": "Status is required", "choice": "Status must be Approved, Pending, or Rejected"},
    }


# Plural segment kept for existing API clients.
LEAVE = Resource(name="leaves", label="Leave", table="leaves", schema=LeavePayload)
