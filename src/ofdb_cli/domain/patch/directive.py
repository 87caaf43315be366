"""Parser for textual patch directives.

A directive is a field value prefixed with a two-character operator:

- ``++text`` appends ``text``
- ``==text`` replaces the value with ``text``
- ``--text`` deletes the list element ``text``
- ``--`` clears the field
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import EmptyPayloadError, NoOperatorError

DELETE_MARKER: Final[str] = "--"
APPEND_MARKER: Final[str] = "++"
REPLACE_MARKER: Final[str] = "=="

LIST_SEPARATOR: Final[str] = ","


@dataclass(frozen=True, slots=True)
class Append:
    text: str


@dataclass(frozen=True, slots=True)
class Replace:
    text: str


@dataclass(frozen=True, slots=True)
class Delete:
    text: str


@dataclass(frozen=True, slots=True)
class DeleteAll:
    pass


type PatchOperation = Append | Replace | Delete | DeleteAll


def parse_directive(directive: str) -> PatchOperation:
    """Parse a single directive into an operation.

    Raises ``EmptyPayloadError`` for an append or replace without a value and
    ``NoOperatorError`` when the trimmed text has no operator prefix.
    """

    text = directive.strip()
    if text.startswith(DELETE_MARKER):
        remainder = text[len(DELETE_MARKER) :].strip()
        return Delete(remainder) if remainder else DeleteAll()
    if text.startswith(APPEND_MARKER):
        return Append(_payload(text, APPEND_MARKER, directive))
    if text.startswith(REPLACE_MARKER):
        return Replace(_payload(text, REPLACE_MARKER, directive))
    raise NoOperatorError(directive)


def parse_directives(directive: str) -> list[PatchOperation]:
    """Parse a comma separated list of directives (used for tag lists)."""

    return [
        parse_directive(token) for token in directive.split(LIST_SEPARATOR) if token.strip()
    ]


def describe_operation(operation: PatchOperation) -> str:
    match operation:
        case Append():
            return "append"
        case Replace():
            return "replace"
        case Delete():
            return "delete"
        case DeleteAll():
            return "delete all"


def _payload(text: str, marker: str, directive: str) -> str:
    payload = text[len(marker) :].strip()
    if not payload:
        raise EmptyPayloadError(directive)
    return payload
