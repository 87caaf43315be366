"""CSV sources for places, patches and reviews."""

from __future__ import annotations

from .reader import (
    CsvSourceError,
    open_source,
    read_new_places,
    read_place_patches,
    read_places,
    read_reviews,
)

__all__ = [
    "CsvSourceError",
    "open_source",
    "read_new_places",
    "read_place_patches",
    "read_places",
    "read_reviews",
]
