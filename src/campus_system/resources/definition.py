from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import CampusSchema
from ..core.constants import API_PREFIX


@dataclass(frozen=True)
class Resource:
    """Static description of one CRUD entity.

    ``name`` is the URL segment under ``/api`` and the endpoint prefix,
    ``label`` is used in client-facing messages and ``table`` is the store
    collection. ``hidden_fields`` never leave the service layer.
    """

    name: str
    label: str
    table: str
    schema: type[CampusSchema]
    hidden_fields: tuple[str, ...] = ()

    @property
    def path(self) -> str:
        return f"{API_PREFIX}/{self.name}"

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self.schema.model_fields)

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    @property
    def deleted_message(self) -> str:
        return f"{self.label} deleted successfully"
