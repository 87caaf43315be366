"""Record patch engine: directive parsing and field-wise application."""

from __future__ import annotations

from .apply import PlacePatch, apply_place_patch, check_version
from .directive import (
    Append,
    Delete,
    DeleteAll,
    PatchOperation,
    Replace,
    parse_directive,
    parse_directives,
)
from .errors import (
    DirectiveParseError,
    EmptyPayloadError,
    FieldPatchError,
    InvalidValueError,
    NoOperatorError,
    PatchError,
    UnsupportedOperationError,
    VersionConflictError,
)
from .fields import FIELD_KINDS, IMMUTABLE_FIELDS, apply_directive, apply_operation

__all__ = [
    "FIELD_KINDS",
    "IMMUTABLE_FIELDS",
    "Append",
    "Delete",
    "DeleteAll",
    "DirectiveParseError",
    "EmptyPayloadError",
    "FieldPatchError",
    "InvalidValueError",
    "NoOperatorError",
    "PatchError",
    "PatchOperation",
    "PlacePatch",
    "Replace",
    "UnsupportedOperationError",
    "VersionConflictError",
    "apply_directive",
    "apply_operation",
    "apply_place_patch",
    "check_version",
    "parse_directive",
    "parse_directives",
]
