from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..common.validators import FieldError


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a payload violates one or more field constraints.

    Carries every violation, never just the first one.
    """

    def __init__(self, errors: Sequence["FieldError"]):
        self.errors = list(errors)
        super().__init__("; ".join(e.message for e in self.errors))

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


class NotFoundError(DomainError):
    """Raised when a record id has no matching document."""


class PersistenceError(DomainError):
    """Raised when the record store rejects or fails an operation."""


class AuthenticationError(DomainError):
    """Raised when a request carries no valid bearer token."""
