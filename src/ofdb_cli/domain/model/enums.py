"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ReviewStatus(StrEnum):
    ARCHIVED = "archived"
    CONFIRMED = "confirmed"
    CREATED = "created"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value: str) -> ReviewStatus:
        """Parse a status name case-insensitively."""

        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            allowed = "|".join(status.value for status in cls)
            raise ValueError(f"Invalid review status '{value}' (expected {allowed})") from None


class FieldKind(StrEnum):
    """Closed set of patchable field kinds."""

    REQUIRED_TEXT = "required_text"
    OPTIONAL_TEXT = "optional_text"
    OPTIONAL_DATE = "optional_date"
    NUMBER = "number"
    TAGS = "tags"
