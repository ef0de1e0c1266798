from __future__ import annotations

import copy
import uuid
from datetime import datetime
from typing import Any, Mapping, Optional

import pytest

from campus_system.core.exceptions import PersistenceError
from campus_system.entities.catalog import ALL_RESOURCES
from campus_system.main import create_app

UNIQUE_FIELDS = {
    "attendance": ("Attendance_ID",),
    "course": ("Course_ID",),
    "department": ("Department_ID",),
    "enrollment": ("Enrollment_ID",),
    "faculty": ("Faculty_ID", "Email"),
    "grade": ("Grade_ID",),
    "leaves": ("Leave_ID",),
    "schedule": ("Schedule_ID",),
    "student": ("Student_ID",),
    "subject": ("Subject_ID",),
}

VALID_PAYLOADS: dict[str, dict[str, Any]] = {
    "attendance": {"Attendance_ID": 1, "Date": "2024-11-22", "Status": "Present"},
    "course": {
        "Course_ID": 101,
        "Course_name": "Introduction to Computer Science",
        "Credits": 3,
        "Catalog_no": "CS101",
        "Academic_yr": 2024,
    },
    "department": {"Department_ID": 7, "Department_Name": "Computer Studies", "Department_Head": "Dr. Reyes"},
    "enrollment": {"Enrollment_ID": 12345, "Student_ID": 67890, "Course_ID": 101, "EnrollmentDate": "2024-12-12T14:30:00"},
    "faculty": {
        "Faculty_ID": 11,
        "First_Name": "Maria",
        "Last_Name": "Santos",
        "Gender": "Female",
        "Age": 41,
        "Email": "maria.santos@campus.edu",
        "Contact": "09171234567",
        "Faculty_Role": "Professor",
        "Department_ID": 7,
        "Leave_ID": 3,
        "Attendance_ID": 1,
        "Student_Grade": "A",
    },
    "grade": {"Grade_ID": 5, "Student_ID": 2021001, "Subj_desc": "Data Structures", "Units": 3, "Credits": 3},
    "leaves": {"Leave_ID": 9, "Leave_Type": "Sick", "Faculty_ID": 11, "Date": "2024-10-01", "Status": "Pending"},
    "schedule": {
        "Schedule_ID": 4,
        "Course_ID": 101,
        "Teacher": "Maria Santos",
        "Days": "MWF",
        "Class_time": "08:00-09:30",
        "Room": "Room 204",
        "Lecture": 2,
        "Laboratory": 1,
        "Units": 3,
    },
    "student": {
        "Student_ID": 2021001,
        "StudentStatus": "Active",
        "YearLevel": 2,
        "FirstName": "Juan",
        "LastName": "Dela Cruz",
        "Address": "123 Mabini St, Manila",
        "Email": "juan.delacruz@campus.edu",
        "Phone": "09981234567",
        "DateOfBirth": "2003-05-14",
        "PlaceOfBirth": "Manila",
        "Sex": "Male",
        "Religion": "Catholic",
        "Nationality": "Filipino",
        "CivilStatus": "Single",
        "Course_ID": 101,
        "Subject_ID": 55,
        "Enrollment_ID": 12345,
    },
    "subject": {
        "Subject_ID": 55,
        "SubjectName": "Data Structures",
        "SubjectDescription": "Lists, trees, graphs and their algorithms.",
        "Course_ID": 101,
    },
}


class InMemoryRecords:
    """Dict-backed RecordRepository with opaque string ids and unique keys."""

    def __init__(self, unique_fields: tuple[str, ...] = ()):
        self._rows: dict[str, dict[str, Any]] = {}
        self._unique_fields = unique_fields
        self.calls: list[str] = []
        self.fail_with: Optional[Exception] = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _check_unique(self, record: Mapping[str, Any], *, skip_id: Optional[str] = None):
        for field in self._unique_fields:
            for rid, row in self._rows.items():
                if rid != skip_id and row.get(field) == record.get(field):
                    raise PersistenceError(f"Duplicate entry '{record.get(field)}' for key '{field}'")

    def create(self, record):
        self.calls.append("create")
        self._check()
        self._check_unique(record)
        now = datetime(2024, 11, 22, 8, 0, 0)
        rid = uuid.uuid4().hex
        self._rows[rid] = {"id": rid, **copy.deepcopy(dict(record)), "created_at": now, "updated_at": now}
        return copy.deepcopy(self._rows[rid])

    def find_all(self):
        self.calls.append("find_all")
        self._check()
        return [copy.deepcopy(r) for r in self._rows.values()]

    def find_by_id(self, record_id):
        self.calls.append("find_by_id")
        self._check()
        row = self._rows.get(record_id)
        return copy.deepcopy(row) if row else None

    def update_by_id(self, record_id, record):
        self.calls.append("update_by_id")
        self._check()
        row = self._rows.get(record_id)
        if row is None:
            return None
        self._check_unique(record, skip_id=record_id)
        self._rows[record_id] = {
            "id": record_id,
            **copy.deepcopy(dict(record)),
            "created_at": row["created_at"],
            "updated_at": datetime(2024, 11, 23, 9, 0, 0),
        }
        return copy.deepcopy(self._rows[record_id])

    def delete_by_id(self, record_id):
        self.calls.append("delete_by_id")
        self._check()
        return self._rows.pop(record_id, None)


@pytest.fixture
def make_records():
    def factory(name: str = "") -> InMemoryRecords:
        return InMemoryRecords(UNIQUE_FIELDS.get(name, ()))

    return factory


@pytest.fixture
def valid_payloads():
    return copy.deepcopy(VALID_PAYLOADS)


@pytest.fixture
def repositories(make_records):
    return {r.name: make_records(r.name) for r in ALL_RESOURCES}


@pytest.fixture
def app(repositories):
    return create_app("campus_system.settings.testing", repositories=repositories)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    token = app.extensions["campus_container"].authenticator.issue("registrar", role="admin")
    return {"Authorization": f"Bearer {token}"}
