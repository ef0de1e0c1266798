"""Campus Information System API.

Every academic entity (students, faculty, courses, ...) is served by the same
generic resource stack: a pydantic schema, a record repository, a service and
a thin Flask controller layer.
"""
