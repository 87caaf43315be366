"""JSON place lists in the catalog wire format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from .errors import describe_validation_error
from .ofdb.schema import EntrySchema, NewPlaceSchema
from .ofdb.translator import translate_entry, translate_new_place

if TYPE_CHECKING:
    from typing import TextIO

    from ofdb_cli.domain.model import NewPlace, Place

_NEW_PLACES = TypeAdapter(list[NewPlaceSchema])
_ENTRIES = TypeAdapter(list[EntrySchema])


class JsonSourceError(ValueError):
    """The JSON file is not a list of places."""


def read_new_places_json(handle: TextIO) -> list[NewPlace]:
    try:
        schemas = _NEW_PLACES.validate_json(handle.read())
    except ValidationError as exc:
        raise JsonSourceError(describe_validation_error(exc)) from exc
    return [translate_new_place(schema) for schema in schemas]


def read_places_json(handle: TextIO) -> list[Place]:
    try:
        schemas = _ENTRIES.validate_json(handle.read())
    except ValidationError as exc:
        raise JsonSourceError(describe_validation_error(exc)) from exc
    return [translate_entry(schema) for schema in schemas]
