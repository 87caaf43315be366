"""Batch review decisions so equal decisions are sent once."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ofdb_cli.domain.model import PlaceId, Review


def group_reviews(reviews: Iterable[tuple[PlaceId, Review]]) -> list[tuple[Review, set[PlaceId]]]:
    """Group place ids by review decision.

    ``Review`` compares and hashes by status and comment, so it keys the
    groups directly. The order of the returned groups is not defined.
    """

    groups: dict[Review, set[PlaceId]] = {}
    for place_id, review in reviews:
        groups.setdefault(review, set()).add(place_id)
    return list(groups.items())
