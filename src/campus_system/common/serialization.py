from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from flask.json.provider import DefaultJSONProvider


def _to_json(o: Any) -> Any:
    # Flask's default renders dates as HTTP dates; the API speaks ISO-8601.
    if isinstance(o, date):
        return o.isoformat()
    if isinstance(o, Enum):
        return o.value
    return DefaultJSONProvider.default(o)


class CampusJSONProvider(DefaultJSONProvider):
    default = staticmethod(_to_json)
    sort_keys = False
