"""Per-record outcomes and the report that classifies them.

Two stages produce outcomes:

- the CSV stage reads and validates rows (``CsvRecordResult``)
- the network stage submits validated places (``SubmissionResult``)

Both end up in one ``Report`` but never in the same bucket, so a malformed row
can be told apart from a well-formed row that the catalog rejected.
"""

# pyright: reportUnknownVariableType=false

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ofdb_cli.domain.errors import DuplicatesError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ofdb_cli.domain.errors import CsvImportError, SubmissionError
    from ofdb_cli.domain.model import DuplicateCandidate, PlaceId, Review


@dataclass(slots=True)
class CsvRecordResult[T]:
    """Outcome of reading and validating one source row."""

    record_nr: int
    value: T | None = None
    error: CsvImportError | None = None
    record: dict[str, str] | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("CsvRecordResult requires exactly one of value or error")


@dataclass(slots=True)
class SubmissionResult[T]:
    """Outcome of submitting one place to the catalog."""

    place: T
    import_id: str | None = None
    place_id: PlaceId | None = None
    error: SubmissionError | None = None

    def __post_init__(self) -> None:
        if (self.place_id is None) == (self.error is None):
            raise ValueError("SubmissionResult requires exactly one of place_id or error")


@dataclass(slots=True)
class DuplicateReport[T]:
    place: T
    import_id: str | None
    duplicates: list[DuplicateCandidate]


@dataclass(slots=True)
class FailureReport[T]:
    place: T
    import_id: str | None
    error: str


@dataclass(slots=True)
class SuccessReport[T]:
    place: T
    import_id: str | None
    id: PlaceId


@dataclass(slots=True)
class CsvImportSuccessReport[T]:
    record_nr: int
    place: T


@dataclass(slots=True)
class CsvImportFailureReport:
    record_nr: int
    error: str
    record: dict[str, str] | None = None


@dataclass(slots=True)
class ReportSummary:
    duplicates: int
    failures: int
    successes: int
    csv_import_successes: int
    csv_import_failures: int


@dataclass(slots=True)
class Report[T]:
    duplicates: list[DuplicateReport[T]] = field(default_factory=list)
    failures: list[FailureReport[T]] = field(default_factory=list)
    successes: list[SuccessReport[T]] = field(default_factory=list)
    csv_import_successes: list[CsvImportSuccessReport[T]] = field(default_factory=list)
    csv_import_failures: list[CsvImportFailureReport] = field(default_factory=list)

    def add_csv_result(self, result: CsvRecordResult[T]) -> None:
        if result.error is not None:
            self.csv_import_failures.append(
                CsvImportFailureReport(
                    record_nr=result.record_nr,
                    error=str(result.error),
                    record=result.record,
                )
            )
        elif result.value is not None:
            self.csv_import_successes.append(
                CsvImportSuccessReport(record_nr=result.record_nr, place=result.value)
            )

    def add_submission_result(self, result: SubmissionResult[T]) -> None:
        error = result.error
        if isinstance(error, DuplicatesError):
            self.duplicates.append(
                DuplicateReport(
                    place=result.place,
                    import_id=result.import_id,
                    duplicates=list(error.candidates),
                )
            )
        elif error is not None:
            self.failures.append(
                FailureReport(place=result.place, import_id=result.import_id, error=str(error))
            )
        elif result.place_id is not None:
            self.successes.append(
                SuccessReport(place=result.place, import_id=result.import_id, id=result.place_id)
            )

    def summary(self) -> ReportSummary:
        return ReportSummary(
            duplicates=len(self.duplicates),
            failures=len(self.failures),
            successes=len(self.successes),
            csv_import_successes=len(self.csv_import_successes),
            csv_import_failures=len(self.csv_import_failures),
        )


def build_report[T](
    csv_results: Iterable[CsvRecordResult[T]] = (),
    submission_results: Iterable[SubmissionResult[T]] = (),
) -> Report[T]:
    """Classify the outcomes of both stages into one report."""

    report: Report[T] = Report()
    for csv_result in csv_results:
        report.add_csv_result(csv_result)
    for submission_result in submission_results:
        report.add_submission_result(submission_result)
    return report


@dataclass(slots=True)
class ReviewGroupReport:
    review: Review
    ids: list[PlaceId]


@dataclass(slots=True)
class ReviewFailureReport:
    review: Review
    ids: list[PlaceId]
    error: str


@dataclass(slots=True)
class ReviewReport:
    reviewed: list[ReviewGroupReport] = field(default_factory=list)
    failures: list[ReviewFailureReport] = field(default_factory=list)
    csv_import_failures: list[CsvImportFailureReport] = field(default_factory=list)
