from __future__ import annotations

from typing import Optional

import pytest
from pydantic import Field

from campus_system.common.validators import CampusSchema, error_category, validate


class Room(CampusSchema):
    Room_ID: int
    Name: str = Field(..., min_length=1, max_length=10)
    Capacity: int = Field(..., gt=0)
    Note: Optional[str] = None

    error_messages = {
        "Room_ID": {"required": "Room ID is required"},
        "Capacity": {"positive": "Capacity must be a positive number"},
    }


def test_valid_payload_returns_typed_value():
    result = validate(Room, {"Room_ID": "3", "Name": "Lab A", "Capacity": 30})

    assert result.ok
    assert result.errors == ()
    assert result.value.Room_ID == 3
    assert result.value.to_record() == {"Room_ID": 3, "Name": "Lab A", "Capacity": 30, "Note": None}


def test_collects_every_violation_at_once():
    result = validate(Room, {"Name": "x" * 11, "Capacity": -1})

    assert not result.ok
    assert result.value is None
    assert {e.field for e in result.errors} == {"Room_ID", "Name", "Capacity"}
    messages = [e.message for e in result.errors]
    assert "Room ID is required" in messages
    assert "Capacity must be a positive number" in messages


def test_falls_back_to_generic_message_naming_the_field():
    result = validate(Room, {"Room_ID": 1, "Name": "", "Capacity": 2})

    assert [e.field for e in result.errors] == ["Name"]
    assert result.errors[0].message.startswith("Name: ")


def test_unknown_fields_are_rejected():
    result = validate(Room, {"Room_ID": 1, "Name": "A", "Capacity": 2, "password": "x"})

    assert [e.message for e in result.errors] == ["password is not allowed"]


@pytest.mark.parametrize("payload", [None, [], "text", 5])
def test_non_object_payload_is_a_single_error(payload):
    result = validate(Room, payload)

    assert [e.message for e in result.errors] == ["Request body must be a JSON object"]


@pytest.mark.parametrize(
    "error_type, category",
    [
        ("missing", "required"),
        ("int_parsing", "number"),
        ("int_from_float", "number"),
        ("date_from_datetime_parsing", "date"),
        ("datetime_parsing", "date"),
        ("enum", "choice"),
        ("string_too_long", "max_length"),
        ("string_type", "string"),
        ("greater_than", "positive"),
        ("less_than_equal", "range"),
        ("value_error", "format"),
        ("something_new", "something_new"),
    ],
)
def test_error_category(error_type, category):
    assert error_category(error_type) == category
