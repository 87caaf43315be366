from __future__ import annotations

import pytest

from ofdb_cli.domain.errors import (
    DuplicatesError,
    NoGeoCoordinatesError,
    OtherSubmissionError,
    RecordError,
)
from ofdb_cli.domain.model import DuplicateCandidate, NewPlace
from ofdb_cli.domain.report import (
    CsvRecordResult,
    Report,
    SubmissionResult,
    build_report,
)


def _new_place(title: str) -> NewPlace:
    return NewPlace(title=title, description="d", lat=1.0, lng=2.0, license="CC0-1.0")


def test_csv_record_result_requires_exactly_one_outcome() -> None:
    with pytest.raises(ValueError, match="exactly one"):
        CsvRecordResult(0)
    with pytest.raises(ValueError, match="exactly one"):
        CsvRecordResult(0, value=_new_place("a"), error=RecordError("x"))


def test_submission_result_requires_exactly_one_outcome() -> None:
    with pytest.raises(ValueError, match="exactly one"):
        SubmissionResult(_new_place("a"))
    with pytest.raises(ValueError, match="exactly one"):
        SubmissionResult(_new_place("a"), place_id="id", error=OtherSubmissionError("x"))


def test_build_report_classifies_every_outcome_once() -> None:
    candidate = DuplicateCandidate(id="dup", title="Existing")
    csv_results = [
        CsvRecordResult(0, value=_new_place("ok")),
        CsvRecordResult(1, error=RecordError("lat: invalid"), record={"lat": "north"}),
        CsvRecordResult(2, error=NoGeoCoordinatesError()),
        CsvRecordResult(3, value=_new_place("dup")),
        CsvRecordResult(4, value=_new_place("broken")),
    ]
    submissions = [
        SubmissionResult(_new_place("ok"), "0", place_id="new-id"),
        SubmissionResult(_new_place("dup"), "3", error=DuplicatesError([candidate])),
        SubmissionResult(_new_place("broken"), "4", error=OtherSubmissionError("boom")),
    ]

    report = build_report(csv_results, submissions)

    summary = report.summary()
    assert (summary.successes, summary.duplicates, summary.failures) == (1, 1, 1)
    assert (summary.csv_import_successes, summary.csv_import_failures) == (3, 2)
    assert report.successes[0].id == "new-id"
    assert report.successes[0].import_id == "0"
    assert report.duplicates[0].duplicates == [candidate]
    assert report.failures[0].error == "Could not import place: boom"
    assert report.csv_import_failures[0].record == {"lat": "north"}
    assert report.csv_import_failures[1].error == (
        "Invalid address or geo coordinates: Unable to find geo coordinates"
    )


def test_duplicates_never_count_as_failures() -> None:
    report: Report[NewPlace] = Report()
    report.add_submission_result(
        SubmissionResult(_new_place("dup"), error=DuplicatesError([]))
    )

    assert len(report.duplicates) == 1
    assert report.failures == []


def test_build_report_preserves_input_order() -> None:
    submissions = [
        SubmissionResult(_new_place(title), str(index), place_id=f"id-{index}")
        for index, title in enumerate(["c", "a", "b"])
    ]

    report = build_report(submission_results=submissions)

    assert [entry.place.title for entry in report.successes] == ["c", "a", "b"]


def test_empty_report() -> None:
    summary = build_report().summary()

    assert summary.successes == summary.failures == summary.csv_import_failures == 0
