"""Type-aware application of patch operations to single field values."""

from __future__ import annotations

import math
from datetime import date
from logging import getLogger
from typing import TYPE_CHECKING, Final

from ofdb_cli.domain.model import FieldKind

from .directive import (
    Append,
    Delete,
    DeleteAll,
    Replace,
    describe_operation,
    parse_directive,
    parse_directives,
)
from .errors import FieldPatchError, InvalidValueError, PatchError, UnsupportedOperationError

if TYPE_CHECKING:
    from .directive import PatchOperation

log = getLogger(__name__)

type FieldValue = str | float | date | list[str] | None

TEXT_SEPARATOR: Final[str] = " "

FIELD_KINDS: Final[dict[str, FieldKind]] = {
    "title": FieldKind.REQUIRED_TEXT,
    "description": FieldKind.REQUIRED_TEXT,
    "lat": FieldKind.NUMBER,
    "lng": FieldKind.NUMBER,
    "street": FieldKind.OPTIONAL_TEXT,
    "zip": FieldKind.OPTIONAL_TEXT,
    "city": FieldKind.OPTIONAL_TEXT,
    "country": FieldKind.OPTIONAL_TEXT,
    "state": FieldKind.OPTIONAL_TEXT,
    "contact_name": FieldKind.OPTIONAL_TEXT,
    "email": FieldKind.OPTIONAL_TEXT,
    "telephone": FieldKind.OPTIONAL_TEXT,
    "homepage": FieldKind.OPTIONAL_TEXT,
    "opening_hours": FieldKind.OPTIONAL_TEXT,
    "image_url": FieldKind.OPTIONAL_TEXT,
    "image_link_url": FieldKind.OPTIONAL_TEXT,
    "founded_on": FieldKind.OPTIONAL_DATE,
    "tags": FieldKind.TAGS,
    "categories": FieldKind.TAGS,
}

IMMUTABLE_FIELDS: Final[frozenset[str]] = frozenset({"created", "license", "ratings"})


def apply_directive(
    kind: FieldKind,
    field_name: str,
    value: FieldValue,
    directive: str | None,
) -> FieldValue:
    """Apply a raw directive to ``value`` and return the new value.

    ``None`` leaves the value unchanged. Any failure is raised as a
    ``FieldPatchError`` naming the field.
    """

    if directive is None:
        return value
    try:
        operations = (
            parse_directives(directive) if kind is FieldKind.TAGS else [parse_directive(directive)]
        )
        for operation in operations:
            value = apply_operation(kind, field_name, value, operation)
    except PatchError as exc:
        raise FieldPatchError(field_name, exc) from exc
    return value


def apply_operation(  # noqa: PLR0911
    kind: FieldKind,
    field_name: str,
    value: FieldValue,
    operation: PatchOperation,
) -> FieldValue:
    match kind, operation:
        case FieldKind.REQUIRED_TEXT, Replace(text):
            return text
        case FieldKind.REQUIRED_TEXT, Append(text):
            return _concat(_as_text(value), text)

        case FieldKind.OPTIONAL_TEXT, Replace(text):
            return text
        case FieldKind.OPTIONAL_TEXT, Append(text):
            current = _as_text(value)
            return _concat(current, text) if current is not None else text
        case FieldKind.OPTIONAL_TEXT | FieldKind.OPTIONAL_DATE, DeleteAll():
            return None

        case FieldKind.OPTIONAL_DATE, Replace(text):
            return _parse_date(text)

        case FieldKind.NUMBER, Replace(text):
            return _parse_float(text)

        case FieldKind.TAGS, Append(text):
            return [*_as_list(value), text]
        case FieldKind.TAGS, Delete(text):
            return [tag for tag in _as_list(value) if tag != text]
        case FieldKind.TAGS, DeleteAll():
            log.warning("Refusing to remove all entries of '%s' at once; skipped", field_name)
            return value

        case _:
            raise UnsupportedOperationError(describe_operation(operation), kind)


def _concat(current: str | None, text: str) -> str:
    if not current:
        return text
    return f"{current}{TEXT_SEPARATOR}{text}"


def _as_text(value: FieldValue) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise InvalidValueError(f"Expected text, found {type(value).__name__}")


def _as_list(value: FieldValue) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise InvalidValueError(f"Expected a list, found {type(value).__name__}")


def _parse_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidValueError(f"Invalid date '{text}' (expected YYYY-MM-DD)") from exc


def _parse_float(text: str) -> float:
    try:
        number = float(text)
    except ValueError as exc:
        raise InvalidValueError(f"Invalid number '{text}'") from exc
    if not math.isfinite(number):
        raise InvalidValueError(f"Invalid number '{text}' (must be finite)")
    return number
