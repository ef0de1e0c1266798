from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

Record = dict[str, Any]


class RecordRepository(Protocol):
    """Persistence interface for one entity collection.

    Services only see this interface, never a concrete store. Lookups by an
    id that does not exist return ``None``; store failures raise :class:`~campus_system.core.exceptions.PersistenceError`.
    """

    def create(self, record: Mapping[str, Any]) -> Record:
        raise NotImplementedError

    def find_all(self) -> Sequence[Record]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[Record]:
        raise NotImplementedError

    def update_by_id(self, record_id: str, record: Mapping[str, Any]) -> Optional[Record]:
        """Replace every field of the record and return its new state."""

        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> Optional[Record]:
        """Remove the record and return what was deleted."""

        raise NotImplementedError
