"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import contextmanager
from logging import getLogger
from typing import TYPE_CHECKING

from ofdb_cli.adapters.csv import (
    open_source,
    read_new_places,
    read_place_patches,
    read_places,
    read_reviews,
)
from ofdb_cli.adapters.json_source import read_new_places_json, read_places_json
from ofdb_cli.adapters.ofdb import OfdbClient
from ofdb_cli.adapters.opencage import OpenCageGeocoder
from ofdb_cli.config import get_catalog_config, get_geocoding_config
from ofdb_cli.domain.report import CsvImportFailureReport, Report, build_report
from ofdb_cli.domain.submission import (
    import_new_places,
    patch_places,
    submit_patched_places,
    update_places,
)
from ofdb_cli.domain.submission import review_places as submit_reviews
from ofdb_cli.domain.validation import validate_new_places

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

    from ofdb_cli.domain.model import NewPlace, Place, PlaceId
    from ofdb_cli.domain.ports import GeoCoder, PlaceCatalog
    from ofdb_cli.domain.report import CsvRecordResult, ReviewReport

log = getLogger(__name__)


class UnsupportedSourceError(ValueError):
    """Raised for input files that are neither CSV nor JSON."""


def _source_format(path: Path, *, allowed: tuple[str, ...] = ("csv", "json")) -> str:
    suffix = path.suffix.lower().lstrip(".")
    if suffix not in allowed:
        raise UnsupportedSourceError(
            f"Unsupported file type '{path.suffix}' (expected {', '.join(allowed)})"
        )
    return suffix


@contextmanager
def _catalog_session(
    catalog: PlaceCatalog | None,
    api_url: str | None,
) -> Iterator[PlaceCatalog]:
    if catalog is not None:
        yield catalog
        return
    config = get_catalog_config(api_url=api_url)
    log.info("Using catalog API at %s", config.api_url)
    with OfdbClient(config=config) as client:
        if config.credentials is not None:
            client.login(config.credentials)
        yield client


@contextmanager
def _geocoder_session(geocoder: GeoCoder | None) -> Iterator[GeoCoder]:
    if geocoder is not None:
        yield geocoder
        return
    with OpenCageGeocoder(config=get_geocoding_config()) as opencage:
        yield opencage


def _successes[T](results: Sequence[CsvRecordResult[T]]) -> list[tuple[str | None, T]]:
    return [
        (str(result.record_nr), result.value) for result in results if result.value is not None
    ]


def _numbered[T](items: Sequence[T]) -> list[tuple[str | None, T]]:
    return [(str(index), item) for index, item in enumerate(items)]


def _log_summary(action: str, report: Report[NewPlace] | Report[Place]) -> None:
    summary = report.summary()
    log.info(
        "Finished %s: successes=%s, duplicates=%s, failures=%s, "
        "csv_successes=%s, csv_failures=%s",
        action,
        summary.successes,
        summary.duplicates,
        summary.failures,
        summary.csv_import_successes,
        summary.csv_import_failures,
    )


def import_places(
    path: Path,
    *,
    catalog: PlaceCatalog | None = None,
    geocoder: GeoCoder | None = None,
    api_url: str | None = None,
) -> Report[NewPlace]:
    """Create new places from a CSV or JSON file."""

    source_format = _source_format(path)
    log.info("Starting import from %s", path)
    if source_format == "csv":
        with open_source(path) as handle, _geocoder_session(geocoder) as effective_geocoder:
            csv_results = validate_new_places(read_new_places(handle), effective_geocoder)
        places = _successes(csv_results)
    else:
        csv_results = []
        with path.open(encoding="utf-8") as handle:
            places = _numbered(read_new_places_json(handle))

    log.debug("Read %d valid places", len(places))
    with _catalog_session(catalog, api_url) as effective_catalog:
        submissions = import_new_places(effective_catalog, places)

    report = build_report(csv_results, submissions)
    _log_summary("import", report)
    return report


def update_places_from_file(
    path: Path,
    *,
    catalog: PlaceCatalog | None = None,
    api_url: str | None = None,
) -> Report[Place]:
    """Overwrite existing places with the full records of a CSV or JSON file."""

    source_format = _source_format(path)
    log.info("Starting update from %s", path)
    if source_format == "csv":
        with open_source(path) as handle:
            csv_results = read_places(handle)
        places = _successes(csv_results)
    else:
        csv_results = []
        with path.open(encoding="utf-8") as handle:
            places = _numbered(read_places_json(handle))

    with _catalog_session(catalog, api_url) as effective_catalog:
        submissions = update_places(effective_catalog, places)

    report = build_report(csv_results, submissions)
    _log_summary("update", report)
    return report


def patch_places_from_file(
    path: Path,
    *,
    catalog: PlaceCatalog | None = None,
    api_url: str | None = None,
) -> Report[Place]:
    """Apply the patch directives of a CSV file to the current catalog places."""

    _source_format(path, allowed=("csv",))
    log.info("Starting patch from %s", path)
    with open_source(path) as handle:
        patches = read_place_patches(handle)

    with _catalog_session(catalog, api_url) as effective_catalog:
        csv_results = patch_places(effective_catalog, patches)
        submissions = submit_patched_places(effective_catalog, _successes(csv_results))

    report = build_report(csv_results, submissions)
    _log_summary("patch", report)
    return report


def review_places_from_file(
    path: Path,
    *,
    catalog: PlaceCatalog | None = None,
    api_url: str | None = None,
) -> ReviewReport:
    """Send the review decisions of a CSV file, batched by decision."""

    _source_format(path, allowed=("csv",))
    log.info("Starting review from %s", path)
    with open_source(path) as handle:
        csv_results = read_reviews(handle)

    with _catalog_session(catalog, api_url) as effective_catalog:
        report = submit_reviews(
            effective_catalog, [review for _, review in _successes(csv_results)]
        )

    report.csv_import_failures.extend(
        CsvImportFailureReport(result.record_nr, str(result.error), result.record)
        for result in csv_results
        if result.error is not None
    )
    log.info(
        "Finished review: reviewed=%s, failures=%s, csv_failures=%s",
        sum(len(group.ids) for group in report.reviewed),
        len(report.failures),
        len(report.csv_import_failures),
    )
    return report


def read_catalog_places(
    ids: Sequence[PlaceId],
    *,
    catalog: PlaceCatalog | None = None,
    api_url: str | None = None,
) -> list[Place]:
    with _catalog_session(catalog, api_url) as effective_catalog:
        return effective_catalog.read_places(ids)
