"""Fakes for the catalog and geocoder ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from ofdb_cli.domain.errors import CatalogError
from ofdb_cli.domain.model import Place, simple_id

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ofdb_cli.domain.model import (
        Address,
        Coordinates,
        DuplicateCandidate,
        NewPlace,
        PlaceId,
        Review,
    )


@dataclass
class FakeCatalog:
    """In-memory catalog recording every call.

    ``rejections`` maps a place title, place id or review status to the message
    of the ``CatalogError`` raised for it.
    """

    places: dict[PlaceId, Place] = field(default_factory=dict)
    duplicates: dict[str, list[DuplicateCandidate]] = field(default_factory=dict)
    rejections: dict[str, str] = field(default_factory=dict)
    created: list[NewPlace] = field(default_factory=list)
    updated: list[tuple[PlaceId, Place]] = field(default_factory=list)
    reviews: list[tuple[list[PlaceId], Review]] = field(default_factory=list)
    read_requests: list[list[PlaceId]] = field(default_factory=list)

    def create_place(self, place: NewPlace) -> PlaceId:
        self._check(place.title)
        self.created.append(place)
        return f"new-{len(self.created)}"

    def read_places(self, ids: Sequence[PlaceId]) -> list[Place]:
        self.read_requests.append(list(ids))
        for place_id in ids:
            self._check(place_id)
        # the catalog answers with simple form ids
        found = (self.places.get(simple_id(place_id)) for place_id in ids)
        return [place for place in found if place is not None]

    def update_place(self, place_id: PlaceId, place: Place) -> PlaceId:
        self._check(place.title)
        self.updated.append((place_id, place))
        return place_id

    def search_duplicates(self, place: NewPlace) -> list[DuplicateCandidate]:
        return list(self.duplicates.get(place.title, []))

    def review_places(self, ids: Sequence[PlaceId], review: Review) -> None:
        self._check(review.status.value)
        self.reviews.append((list(ids), review))

    def _check(self, key: str) -> None:
        message = self.rejections.get(key)
        if message is not None:
            raise CatalogError(message, status_code=400)


@dataclass
class FakeGeoCoder:
    """Resolves addresses by city name."""

    coordinates: dict[str, Coordinates] = field(default_factory=dict)
    calls: list[Address] = field(default_factory=list)

    def resolve(self, address: Address) -> Coordinates | None:
        self.calls.append(address)
        if address.city is None:
            return None
        return self.coordinates.get(address.city)


def make_place(**overrides: object) -> Place:
    values: dict[str, object] = {
        "id": "0a8f6c3e2d1b4a5f9e8d7c6b5a493827",
        "created": 1_600_000_000,
        "version": 3,
        "title": "Unverpackt Laden",
        "description": "Zero waste grocery store",
        "lat": 48.7758,
        "lng": 9.1829,
        "street": "Marktplatz 1",
        "zip": "70173",
        "city": "Stuttgart",
        "country": "Germany",
        "homepage": "https://example.org",
        "founded_on": date(2019, 5, 1),
        "categories": ["2cd00bebec0c48ba9db761da48678134"],
        "tags": ["foo", "bar"],
        "ratings": ["r1"],
        "license": "CC0-1.0",
    }
    values.update(overrides)
    return Place(**values)  # pyright: ignore[reportArgumentType]
