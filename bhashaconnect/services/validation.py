"""Payload validation for listing resources.

Each resource declares its fields as a tuple of constraint records. A single
function, :func:`validate_payload`, checks a raw JSON body against them and
returns every violation at once instead of stopping at the first one, so the API
can report all invalid fields in one response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError


_URL_ADAPTER = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


@dataclass(frozen=True)
class TextField:
    name: str
    min_length: int | None = None
    max_length: int | None = None
    required: bool = True


@dataclass(frozen=True)
class ChoiceField:
    name: str
    choices: tuple[str, ...]
    required: bool = True


@dataclass(frozen=True)
class UrlField:
    name: str
    required: bool = True


@dataclass(frozen=True)
class BooleanField:
    name: str
    default: bool = True


FieldConstraint = TextField | ChoiceField | UrlField | BooleanField


@dataclass(frozen=True)
class ResourceConstraints:
    resource: str
    fields: tuple[FieldConstraint, ...]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)


@dataclass
class ValidationResult:
    values: dict[str, Any] = field(default_factory=dict)
    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]


def _quoted(name: str) -> str:
    return f'"{name}"'


def _check_text(rule: TextField, raw: Any) -> tuple[Any, str | None]:
    if not isinstance(raw, str):
        return None, f"{_quoted(rule.name)} must be a string"
    if not raw.strip():
        return None, f"{_quoted(rule.name)} is not allowed to be empty"
    value = raw
    if rule.min_length is not None and len(value) < rule.min_length:
        return None, f"{_quoted(rule.name)} length must be at least {rule.min_length} characters long"
    if rule.max_length is not None and len(value) > rule.max_length:
        return None, f"{_quoted(rule.name)} length must be less than or equal to {rule.max_length} characters long"
    return value, None


def _check_choice(rule: ChoiceField, raw: Any) -> tuple[Any, str | None]:
    if not isinstance(raw, str) or raw not in rule.choices:
        return None, f"{_quoted(rule.name)} must be one of [{', '.join(rule.choices)}]"
    return raw, None


def _check_url(rule: UrlField, raw: Any) -> tuple[Any, str | None]:
    if not isinstance(raw, str) or not raw.strip():
        return None, f"{_quoted(rule.name)} must be a valid uri"
    value = raw.strip()
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return None, f"{_quoted(rule.name)} must be a valid uri"
    return value, None


def _check_boolean(rule: BooleanField, raw: Any) -> tuple[Any, str | None]:
    if isinstance(raw, bool):
        return raw, None
    # Query strings and form-encoded clients send booleans as text.
    if isinstance(raw, str) and raw.strip().lower() in {"true", "false"}:
        return raw.strip().lower() == "true", None
    return None, f"{_quoted(rule.name)} must be a boolean"


def _check(rule: FieldConstraint, raw: Any) -> tuple[Any, str | None]:
    if isinstance(rule, TextField):
        return _check_text(rule, raw)
    if isinstance(rule, ChoiceField):
        return _check_choice(rule, raw)
    if isinstance(rule, UrlField):
        return _check_url(rule, raw)
    return _check_boolean(rule, raw)


def validate_payload(payload: Any, constraints: ResourceConstraints) -> ValidationResult:
    """Check ``payload`` against ``constraints``.

    Returns a :class:`ValidationResult` whose ``values`` hold a complete record
    (absent optional fields are ``None``, booleans take their default) and whose
    ``violations`` list one entry per invalid field. Never raises for bad input.
    """

    result = ValidationResult()
    if not isinstance(payload, Mapping):
        result.violations.append(FieldViolation("body", f"{_quoted(constraints.resource)} must be of type object"))
        return result

    known = set(constraints.field_names)
    for key in payload:
        if key not in known:
            result.violations.append(FieldViolation(str(key), f"{_quoted(str(key))} is not allowed"))

    for rule in constraints.fields:
        raw = payload.get(rule.name)
        if raw is None:
            if isinstance(rule, BooleanField):
                result.values[rule.name] = rule.default
            elif rule.required:
                result.violations.append(FieldViolation(rule.name, f"{_quoted(rule.name)} is required"))
            else:
                result.values[rule.name] = None
            continue

        value, message = _check(rule, raw)
        if message is not None:
            result.violations.append(FieldViolation(rule.name, message))
        else:
            result.values[rule.name] = value

    return result

