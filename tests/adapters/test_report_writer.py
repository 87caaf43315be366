from __future__ import annotations

import json
from datetime import date
from typing import TYPE_CHECKING

import pytest

from ofdb_cli.adapters.report_writer import dump_report, write_report
from ofdb_cli.domain.errors import DuplicatesError, RecordError
from ofdb_cli.domain.model import DuplicateCandidate, NewPlace, Review, ReviewStatus
from ofdb_cli.domain.report import (
    CsvRecordResult,
    ReviewGroupReport,
    ReviewReport,
    SubmissionResult,
    build_report,
)

if TYPE_CHECKING:
    from pathlib import Path


def _report() -> object:
    place = NewPlace(
        title="Cafe",
        description="Coffee",
        lat=1.0,
        lng=2.0,
        license="CC0-1.0",
        founded_on=date(2020, 1, 2),
    )
    return build_report(
        [
            CsvRecordResult(0, value=place),
            CsvRecordResult(1, error=RecordError("lat: invalid"), record={"lat": "x"}),
        ],
        [
            SubmissionResult(
                place, "0", error=DuplicatesError([DuplicateCandidate(id="d", title="Cafe")])
            )
        ],
    )


def test_dump_report_serializes_every_bucket() -> None:
    document = json.loads(dump_report(_report()))

    assert set(document) == {
        "duplicates",
        "failures",
        "successes",
        "csv_import_successes",
        "csv_import_failures",
    }
    duplicate = document["duplicates"][0]
    assert duplicate["import_id"] == "0"
    assert duplicate["place"]["founded_on"] == "2020-01-02"
    assert duplicate["duplicates"][0]["id"] == "d"
    assert document["csv_import_failures"] == [
        {"record_nr": 1, "error": "Could not read CSV record: lat: invalid", "record": {"lat": "x"}}
    ]


def test_dump_review_report() -> None:
    report = ReviewReport(reviewed=[ReviewGroupReport(Review(ReviewStatus.CONFIRMED), ["a"])])

    document = json.loads(dump_report(report))

    assert document["reviewed"] == [
        {"review": {"status": "confirmed", "comment": None}, "ids": ["a"]}
    ]


def test_write_report_to_file(tmp_path: Path) -> None:
    target = tmp_path / "report.json"

    write_report(_report(), target)

    assert json.loads(target.read_text())["failures"] == []


def test_write_report_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    write_report([])

    assert capsys.readouterr().out == "[]\n"
