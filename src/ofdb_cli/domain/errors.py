"""Per-record error taxonomy.

Every error defined here is caught at the record boundary and turned into a
report entry; none of them aborts a batch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ofdb_cli.domain.model import DuplicateCandidate
    from ofdb_cli.domain.patch.errors import PatchError


class CsvImportError(Exception):
    """Base class for failures of the CSV stage."""

    prefix = "Invalid CSV record"

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.prefix}: {detail}")
        self.detail = detail


class RecordError(CsvImportError):
    """A row that cannot be deserialized into the expected schema."""

    prefix = "Could not read CSV record"


class AddressOrGeoCoordinatesError(CsvImportError):
    prefix = "Invalid address or geo coordinates"


class NoGeoCoordinatesError(AddressOrGeoCoordinatesError):
    def __init__(self, detail: str = "Unable to find geo coordinates") -> None:
        super().__init__(detail)


class MissingAddressOrCoordinatesError(AddressOrGeoCoordinatesError):
    def __init__(
        self,
        detail: str = "An address or geo coordinates (lat/lng) are required",
    ) -> None:
        super().__init__(detail)


class PatchRequestError(CsvImportError):
    """A patch row that cannot be turned into a valid update request."""

    prefix = "Invalid patch request"

    def __init__(self, detail: str, *, causes: Sequence[PatchError] = ()) -> None:
        super().__init__(detail)
        self.causes = tuple(causes)


class SubmissionError(Exception):
    """Base class for failures of the network stage."""


class DuplicatesError(SubmissionError):
    """The catalog already holds places that look like the submitted one."""

    def __init__(self, candidates: Sequence[DuplicateCandidate]) -> None:
        super().__init__("Found possible duplicates")
        self.candidates = list(candidates)


class OtherSubmissionError(SubmissionError):
    """Any remote rejection or transport failure."""

    def __init__(self, message: str, *, action: str = "import") -> None:
        super().__init__(f"Could not {action} place: {message}")
        self.message = message


class CatalogError(Exception):
    """Raised by catalog adapters for remote rejections and transport failures."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
