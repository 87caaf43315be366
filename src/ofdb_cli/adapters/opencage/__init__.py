"""OpenCage geocoding adapter."""

from __future__ import annotations

from .client import OpenCageGeocoder, format_address

__all__ = ["OpenCageGeocoder", "format_address"]
