"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import PlaceCatalog
from .geocoding import GeoCoder

__all__ = ["GeoCoder", "PlaceCatalog"]
