"""Read CSV files into per-row results."""

from __future__ import annotations

import csv
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ofdb_cli.adapters.errors import describe_validation_error
from ofdb_cli.domain.errors import RecordError
from ofdb_cli.domain.report import CsvRecordResult

from .schema import NewPlaceRow, PatchRow, PlaceRow, ReviewRow
from .translator import (
    translate_new_place_row,
    translate_patch_row,
    translate_place_row,
    translate_review_row,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path
    from typing import TextIO

    from pydantic import BaseModel

    from ofdb_cli.domain.model import Place, PlaceId, Review
    from ofdb_cli.domain.patch import PlacePatch
    from ofdb_cli.domain.validation import PlaceDraft

log = getLogger(__name__)


class CsvSourceError(ValueError):
    """The CSV source as a whole is unusable (e.g. required columns are missing)."""


def open_source(path: Path) -> TextIO:
    """Open a UTF-8 CSV file; undecodable bytes fail their row instead of the batch."""

    return path.open(newline="", encoding="utf-8", errors="surrogateescape")


def _has_undecodable_bytes(value: str) -> bool:
    # surrogateescape maps every invalid byte to a lone surrogate
    return any("\udc80" <= char <= "\udcff" for char in value)


def _printable(value: str) -> str:
    if not _has_undecodable_bytes(value):
        return value
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _snapshot(row: dict[str | None, object]) -> dict[str, str]:
    return {
        _printable(key): _printable(str(value))
        for key, value in row.items()
        if key is not None and value is not None
    }


def _undecodable_columns(row: dict[str | None, object]) -> list[str]:
    return [
        _printable(str(key))
        for key, value in row.items()
        if isinstance(value, str) and _has_undecodable_bytes(value)
    ]


def _required_columns(model: type[BaseModel]) -> set[str]:
    return {
        info.alias or name for name, info in model.model_fields.items() if info.is_required()
    }


def _iter_rows[TRow: BaseModel](
    handle: TextIO,
    model: type[TRow],
) -> Iterator[tuple[int, dict[str, str] | None, TRow | RecordError]]:
    reader = csv.DictReader(handle)
    header = reader.fieldnames
    if header is None:
        return
    missing = _required_columns(model) - set(header)
    if missing:
        raise CsvSourceError(f"Missing CSV columns: {', '.join(sorted(missing))}")

    record_nr = 0
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            yield record_nr, None, RecordError(str(exc))
            record_nr += 1
            continue
        snapshot = _snapshot(row)
        undecodable = _undecodable_columns(row)
        if undecodable:
            yield (
                record_nr,
                snapshot,
                RecordError(f"invalid UTF-8 in column(s) {', '.join(undecodable)}"),
            )
            record_nr += 1
            continue
        try:
            yield record_nr, snapshot, model.model_validate(row)
        except ValidationError as exc:
            yield record_nr, snapshot, RecordError(describe_validation_error(exc))
        record_nr += 1


def _read[TRow: BaseModel, T](
    handle: TextIO,
    model: type[TRow],
    translate: Callable[[TRow], T],
) -> list[CsvRecordResult[T]]:
    log.info("Read %s records from CSV", model.__name__)
    results: list[CsvRecordResult[T]] = []
    for record_nr, snapshot, parsed in _iter_rows(handle, model):
        if isinstance(parsed, RecordError):
            log.warning("Record %d: %s", record_nr, parsed)
            results.append(CsvRecordResult(record_nr, error=parsed, record=snapshot))
            continue
        results.append(CsvRecordResult(record_nr, value=translate(parsed), record=snapshot))
    return results


def read_new_places(handle: TextIO) -> list[CsvRecordResult[PlaceDraft]]:
    return _read(handle, NewPlaceRow, translate_new_place_row)


def read_places(handle: TextIO) -> list[CsvRecordResult[Place]]:
    return _read(handle, PlaceRow, translate_place_row)


def read_place_patches(handle: TextIO) -> list[CsvRecordResult[PlacePatch]]:
    return _read(handle, PatchRow, translate_patch_row)


def read_reviews(handle: TextIO) -> list[CsvRecordResult[tuple[PlaceId, Review]]]:
    return _read(handle, ReviewRow, translate_review_row)
