"""OpenFairDB catalog adapter."""

from __future__ import annotations

from .client import OfdbClient

__all__ = ["OfdbClient"]
