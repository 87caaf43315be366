"""Public domain model surface."""

from __future__ import annotations

from ofdb_cli.domain.model.enums import FieldKind, ReviewStatus
from ofdb_cli.domain.model.place import (
    Address,
    Coordinates,
    CustomLink,
    DuplicateCandidate,
    NewPlace,
    Place,
    PlaceId,
    simple_id,
)
from ofdb_cli.domain.model.review import Review

__all__ = [
    "Address",
    "Coordinates",
    "CustomLink",
    "DuplicateCandidate",
    "FieldKind",
    "NewPlace",
    "Place",
    "PlaceId",
    "Review",
    "ReviewStatus",
    "simple_id",
]
