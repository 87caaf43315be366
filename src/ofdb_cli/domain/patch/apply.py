"""Apply a patch request to a versioned place."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from ofdb_cli.domain.errors import PatchRequestError

from .errors import FieldPatchError, VersionConflictError
from .fields import FIELD_KINDS, IMMUTABLE_FIELDS, apply_directive

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ofdb_cli.domain.model import Place, PlaceId

    from .fields import FieldValue

log = getLogger(__name__)


@dataclass(slots=True)
class PlacePatch:
    """Directives for one place, keyed by field name.

    ``version`` is the version the place will have after the update, i.e. the
    current version plus one.
    """

    id: PlaceId
    version: int
    directives: dict[str, str] = field(default_factory=dict[str, str])


def check_version(place: Place, supplied: int) -> None:
    if supplied != place.version + 1:
        raise VersionConflictError(current=place.version, supplied=supplied)


def apply_place_patch(place: Place, patch: PlacePatch) -> Place:
    """Apply every directive of ``patch`` to ``place``.

    The place is only modified if the version matches and every directive
    applies cleanly; otherwise ``PatchRequestError`` is raised and the place
    keeps all of its previous values.
    """

    try:
        check_version(place, patch.version)
    except VersionConflictError as exc:
        raise PatchRequestError(str(exc), causes=(exc,)) from exc

    changes = _evaluate_directives(place, patch.directives)
    for field_name, value in changes.items():
        setattr(place, field_name, value)
    place.version = patch.version
    return place


def _evaluate_directives(place: Place, directives: Mapping[str, str]) -> dict[str, FieldValue]:
    changes: dict[str, FieldValue] = {}
    errors: list[FieldPatchError] = []
    for field_name, directive in directives.items():
        if field_name in IMMUTABLE_FIELDS:
            log.warning(
                "Ignoring directive for read-only field '%s' of place %s", field_name, place.id
            )
            continue
        kind = FIELD_KINDS.get(field_name)
        if kind is None:
            log.warning(
                "Ignoring directive for unknown field '%s' of place %s", field_name, place.id
            )
            continue
        try:
            changes[field_name] = apply_directive(
                kind, field_name, getattr(place, field_name), directive
            )
        except FieldPatchError as exc:
            errors.append(exc)

    if errors:
        raise PatchRequestError("; ".join(str(error) for error in errors), causes=errors)
    return changes
