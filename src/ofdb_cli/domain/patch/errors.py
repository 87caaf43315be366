"""Errors raised while parsing and applying patch directives."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ofdb_cli.domain.model import FieldKind


class PatchError(Exception):
    """Base class for patch failures."""


class DirectiveParseError(PatchError):
    """The directive text does not follow the ``++``/``==``/``--`` grammar."""

    def __init__(self, message: str, *, directive: str) -> None:
        super().__init__(message)
        self.directive = directive


class EmptyPayloadError(DirectiveParseError):
    def __init__(self, directive: str) -> None:
        super().__init__(f"Missing value after operator in '{directive}'", directive=directive)


class NoOperatorError(DirectiveParseError):
    def __init__(self, directive: str) -> None:
        super().__init__(
            f"Missing operator ('++', '==' or '--') in '{directive}'",
            directive=directive,
        )


class UnsupportedOperationError(PatchError):
    """The operation is not allowed for the kind of field."""

    def __init__(self, operation: str, kind: FieldKind) -> None:
        super().__init__(f"{operation} is not supported for {kind.value.replace('_', ' ')} fields")
        self.operation = operation
        self.kind = kind


class InvalidValueError(PatchError):
    """The payload cannot be converted to the field's type."""


class FieldPatchError(PatchError):
    """A patch failure attributed to one field."""

    def __init__(self, field_name: str, cause: PatchError) -> None:
        super().__init__(f"{field_name}: {cause}")
        self.field_name = field_name
        self.cause = cause


class VersionConflictError(PatchError):
    """The supplied version is not the successor of the current one."""

    def __init__(self, *, current: int, supplied: int) -> None:
        super().__init__(
            f"Version conflict: expected version {current + 1} (current {current}), "
            f"got {supplied}"
        )
        self.current = current
        self.supplied = supplied
