"""Review decisions applied to catalog places."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import ReviewStatus


@dataclass(frozen=True, slots=True)
class Review:
    """Review decision; equal decisions hash alike so they can be batched."""

    status: ReviewStatus
    comment: str | None = None
