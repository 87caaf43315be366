"""Place entities as exchanged with the catalog service."""

# switch off type warnings because of default_factory=list
# pyright: reportUnknownVariableType=false

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from datetime import date

type PlaceId = str
type Coordinates = tuple[float, float]


def simple_id(place_id: PlaceId) -> str:
    """Return the dash-less form of a UUID id; other ids are returned unchanged."""

    try:
        return UUID(place_id).hex
    except ValueError:
        return place_id


@dataclass(slots=True)
class Address:
    street: str | None = None
    zip: str | None = None
    city: str | None = None
    country: str | None = None
    state: str | None = None

    def is_empty(self) -> bool:
        return not any(
            part is not None and part.strip()
            for part in (self.street, self.zip, self.city, self.country, self.state)
        )


@dataclass(slots=True)
class CustomLink:
    url: str
    title: str | None = None
    description: str | None = None


@dataclass(slots=True, kw_only=True)
class NewPlace:
    """Creation request for a place that does not exist in the catalog yet."""

    title: str
    description: str
    lat: float
    lng: float
    license: str
    street: str | None = None
    zip: str | None = None
    city: str | None = None
    country: str | None = None
    state: str | None = None
    contact_name: str | None = None
    email: str | None = None
    telephone: str | None = None
    homepage: str | None = None
    opening_hours: str | None = None
    founded_on: date | None = None
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    image_url: str | None = None
    image_link_url: str | None = None
    links: list[CustomLink] = field(default_factory=list)

    @property
    def address(self) -> Address:
        return Address(
            street=self.street,
            zip=self.zip,
            city=self.city,
            country=self.country,
            state=self.state,
        )


@dataclass(slots=True, kw_only=True)
class Place:
    """A versioned catalog entry.

    ``version`` increases by one with every accepted update. ``created``,
    ``license`` and ``ratings`` are owned by the catalog and never patched.
    """

    id: PlaceId
    created: int
    version: int
    title: str
    description: str
    lat: float
    lng: float
    street: str | None = None
    zip: str | None = None
    city: str | None = None
    country: str | None = None
    state: str | None = None
    contact_name: str | None = None
    email: str | None = None
    telephone: str | None = None
    homepage: str | None = None
    opening_hours: str | None = None
    founded_on: date | None = None
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    ratings: list[str] = field(default_factory=list)
    license: str | None = None
    image_url: str | None = None
    image_link_url: str | None = None
    links: list[CustomLink] = field(default_factory=list)

    @property
    def address(self) -> Address:
        return Address(
            street=self.street,
            zip=self.zip,
            city=self.city,
            country=self.country,
            state=self.state,
        )


@dataclass(slots=True, kw_only=True)
class DuplicateCandidate:
    """Existing catalog place that looks like a new one."""

    id: PlaceId
    title: str
    description: str = ""
    lat: float | None = None
    lng: float | None = None
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    status: str | None = None
