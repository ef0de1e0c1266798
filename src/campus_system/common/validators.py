from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Mapping, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    # Stored exactly as submitted; only the format is checked.
    return value


EmailText = Annotated[str, AfterValidator(_check_email)]


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Either a typed payload or the full list of field errors, never both."""

    value: Optional["CampusSchema"] = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


_NUMERIC_TYPES = (int, float, Optional[int], Optional[float])


class CampusSchema(BaseModel):
    """Base for every entity payload.

    Subclasses declare their fields with pydantic constraints and may override
    ``error_messages``: ``{field: {category: message}}``. Categories are the
    ones produced by :func:`error_category`.
    """

    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    error_messages: ClassVar[dict[str, dict[str, str]]] = {}

    @field_validator("*", mode="before")
    @classmethod
    def _no_booleans_for_numbers(cls, value: Any, info: ValidationInfo) -> Any:
        # Numeric strings still convert; true/false never count as numbers.
        if isinstance(value, bool) and cls.model_fields[info.field_name].annotation in _NUMERIC_TYPES:
            raise PydanticCustomError("int_type", "Input should be a valid number")
        return value

    def to_record(self) -> dict[str, Any]:
        # Every declared field is written, so a PUT replaces optional fields too.
        return self.model_dump()


_CATEGORIES = {
    "missing": "required",
    "extra_forbidden": "unknown",
    "enum": "choice",
    "literal_error": "choice",
    "string_too_long": "max_length",
    "string_too_short": "empty",
    "greater_than": "positive",
    "greater_than_equal": "range",
    "less_than_equal": "range",
    "value_error": "format",
    "string_pattern_mismatch": "format",
    "int_from_float": "integer",
}

# Used when a schema has no message for the narrower category.
_FALLBACK_CATEGORIES = {"integer": "number"}


def error_category(error_type: str) -> str:
    """Collapse a pydantic error type into one of our message categories."""
    if error_type in _CATEGORIES:
        return _CATEGORIES[error_type]
    if error_type.startswith(("int_", "float_", "decimal_")):
        return "number"
    if error_type.startswith(("date", "time")):
        return "date"
    if error_type.startswith("string_"):
        return "string"
    return error_type


def _default_message(field: str, category: str, detail: str) -> str:
    if category == "required":
        return f"{field} is required"
    if category == "unknown":
        return f"{field} is not allowed"
    return f"{field}: {detail}"


def _to_field_error(schema: type[CampusSchema], error: Mapping[str, Any]) -> FieldError:
    field = ".".join(str(part) for part in error.get("loc", ())) or "body"
    category = error_category(str(error.get("type", "")))
    messages = schema.error_messages.get(field, {})
    custom = messages.get(category) or messages.get(_FALLBACK_CATEGORIES.get(category, ""))
    return FieldError(field=field, message=custom or _default_message(field, category, str(error.get("msg", ""))))


def validate(schema: type[CampusSchema], payload: Any) -> ValidationResult:
    """Validate an untyped payload against ``schema``.

    Collects every violation instead of stopping at the first one. Never raises.
    """
    if not isinstance(payload, Mapping):
        return ValidationResult(errors=(FieldError(field="body", message="Request body must be a JSON object"),))

    try:
        value = schema.model_validate(dict(payload))
    except PydanticValidationError as exc:
        return ValidationResult(errors=tuple(_to_field_error(schema, e) for e in exc.errors()))

    return ValidationResult(value=value)
