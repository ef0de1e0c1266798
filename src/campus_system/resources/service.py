from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import ValidationResult, validate
from ..core.exceptions import NotFoundError, ValidationError
from .definition import Resource
from .repository import Record, RecordRepository

logger = logging.getLogger(__name__)


class ResourceService:
    """The five CRUD operations for one entity, written once for all of them."""

    def __init__(self, resource: Resource, records: RecordRepository):
        self._resource = resource
        self._records = records

    @property
    def resource(self) -> Resource:
        return self._resource

    def _public(self, record: Mapping[str, Any]) -> Record:
        hidden = self._resource.hidden_fields
        return {k: v for k, v in record.items() if k not in hidden}

    def _require(self, record: Record | None) -> Record:
        if record is None:
            raise NotFoundError(self._resource.not_found_message)
        return self._public(record)

    def _validated(self, payload: Any) -> dict[str, Any]:
        result = self.validate(payload)
        if not result.ok:
            raise ValidationError(result.errors)
        return result.value.to_record()

    def validate(self, payload: Any) -> ValidationResult:
        return validate(self._resource.schema, payload)

    def create(self, payload: Any) -> Record:
        created = self._records.create(self._validated(payload))
        logger.info("Created %s id=%s", self._resource.name, created.get("id"))
        return self._public(created)

    def list(self) -> list[Record]:
        return [self._public(r) for r in self._records.find_all()]

    def get(self, record_id: str) -> Record:
        return self._require(self._records.find_by_id(record_id))

    def update(self, record_id: str, payload: Any) -> Record:
        record = self._validated(payload)
        updated = self._require(self._records.update_by_id(record_id, record))
        logger.info("Updated %s id=%s", self._resource.name, record_id)
        return updated

    def delete(self, record_id: str) -> Record:
        deleted = self._require(self._records.delete_by_id(record_id))
        logger.info("Deleted %s id=%s", self._resource.name, record_id)
        return deleted
