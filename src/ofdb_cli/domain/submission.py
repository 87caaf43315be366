"""Sequential submission of validated places to the catalog."""

from __future__ import annotations

import copy
from logging import getLogger
from typing import TYPE_CHECKING

from ofdb_cli.domain.errors import (
    CatalogError,
    DuplicatesError,
    OtherSubmissionError,
    PatchRequestError,
)
from ofdb_cli.domain.model import simple_id
from ofdb_cli.domain.patch import apply_place_patch
from ofdb_cli.domain.report import (
    CsvRecordResult,
    ReviewFailureReport,
    ReviewGroupReport,
    ReviewReport,
    SubmissionResult,
)
from ofdb_cli.domain.review import group_reviews

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ofdb_cli.domain.model import NewPlace, Place, PlaceId, Review
    from ofdb_cli.domain.patch import PlacePatch
    from ofdb_cli.domain.ports import PlaceCatalog

log = getLogger(__name__)

type Numbered[T] = tuple[str | None, T]


def import_new_places(
    catalog: PlaceCatalog,
    places: Iterable[Numbered[NewPlace]],
) -> list[SubmissionResult[NewPlace]]:
    """Create every place that has no likely duplicate in the catalog."""

    return [_import_new_place(catalog, import_id, place) for import_id, place in places]


def _import_new_place(
    catalog: PlaceCatalog,
    import_id: str | None,
    place: NewPlace,
) -> SubmissionResult[NewPlace]:
    try:
        duplicates = catalog.search_duplicates(place)
        if duplicates:
            log.warning("Found %d possible duplicates for '%s':", len(duplicates), place.title)
            for candidate in duplicates:
                log.warning(" - %s (id: %s)", candidate.title, candidate.id)
            return SubmissionResult(place, import_id, error=DuplicatesError(duplicates))
        place_id = catalog.create_place(place)
    except CatalogError as exc:
        log.warning("Could not import '%s': %s", place.title, exc)
        return SubmissionResult(place, import_id, error=OtherSubmissionError(exc.message))
    log.debug("Successfully imported '%s' with ID=%s", place.title, place_id)
    return SubmissionResult(place, import_id, place_id=place_id)


def update_places(
    catalog: PlaceCatalog,
    places: Iterable[Numbered[Place]],
) -> list[SubmissionResult[Place]]:
    """Submit full places read from a source, bumping each version by one."""

    results: list[SubmissionResult[Place]] = []
    for import_id, place in places:
        next_version = copy.deepcopy(place)
        next_version.version += 1
        results.append(_submit_update(catalog, import_id, next_version))
    return results


def submit_patched_places(
    catalog: PlaceCatalog,
    places: Iterable[Numbered[Place]],
) -> list[SubmissionResult[Place]]:
    """Submit places that already carry the version supplied by their patch."""

    return [_submit_update(catalog, import_id, place) for import_id, place in places]


def _submit_update(
    catalog: PlaceCatalog,
    import_id: str | None,
    place: Place,
) -> SubmissionResult[Place]:
    try:
        place_id = catalog.update_place(place.id, place)
    except CatalogError as exc:
        log.warning("Could not update '%s': %s", place.title, exc)
        return SubmissionResult(
            place, import_id, error=OtherSubmissionError(exc.message, action="update")
        )
    if place_id != place.id:
        log.warning("Catalog answered update of %s with ID=%s", place.id, place_id)
    log.debug("Successfully updated '%s' with ID=%s", place.title, place_id)
    return SubmissionResult(place, import_id, place_id=place_id)


def patch_places(
    catalog: PlaceCatalog,
    patches: Iterable[CsvRecordResult[PlacePatch]],
) -> list[CsvRecordResult[Place]]:
    """Fetch the current version of every patched place and apply its directives.

    Rows that already failed to parse are passed through unchanged.
    """

    results: list[CsvRecordResult[Place]] = []
    for result in patches:
        if result.value is None:
            results.append(
                CsvRecordResult(result.record_nr, error=result.error, record=result.record)
            )
            continue
        try:
            place = _patch_place(catalog, result.value)
        except PatchRequestError as exc:
            log.warning("Could not patch place %s: %s", result.value.id, exc.detail)
            results.append(CsvRecordResult(result.record_nr, error=exc, record=result.record))
        else:
            results.append(CsvRecordResult(result.record_nr, value=place, record=result.record))
    return results


def _patch_place(catalog: PlaceCatalog, patch: PlacePatch) -> Place:
    try:
        places = catalog.read_places([patch.id])
    except CatalogError as exc:
        raise PatchRequestError(f"Could not read place {patch.id}: {exc.message}") from exc
    wanted = simple_id(patch.id)
    current = next((place for place in places if simple_id(place.id) == wanted), None)
    if current is None:
        raise PatchRequestError(f"Place {patch.id} not found")
    return apply_place_patch(current, patch)


def review_places(
    catalog: PlaceCatalog,
    reviews: Iterable[tuple[PlaceId, Review]],
) -> ReviewReport:
    """Send one review request per distinct decision."""

    report = ReviewReport()
    for review, ids in group_reviews(reviews):
        sorted_ids = sorted(ids)
        try:
            catalog.review_places(sorted_ids, review)
        except CatalogError as exc:
            log.warning("Could not review %d places as %s: %s", len(ids), review.status, exc)
            report.failures.append(ReviewFailureReport(review, sorted_ids, exc.message))
            continue
        log.info("Reviewed %d places as %s", len(ids), review.status)
        report.reviewed.append(ReviewGroupReport(review, sorted_ids))
    return report
