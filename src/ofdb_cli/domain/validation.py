"""Turn parsed place rows into validated creation requests."""

# pyright: reportUnknownVariableType=false

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from ofdb_cli.domain.errors import (
    AddressOrGeoCoordinatesError,
    MissingAddressOrCoordinatesError,
    NoGeoCoordinatesError,
)
from ofdb_cli.domain.model import Address, NewPlace
from ofdb_cli.domain.report import CsvRecordResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from ofdb_cli.domain.model import Coordinates, CustomLink
    from ofdb_cli.domain.ports import GeoCoder

log = getLogger(__name__)

TAG_SEPARATOR: Final[str] = ","


@dataclass(slots=True, kw_only=True)
class PlaceDraft:
    """A new place as read from a source row, before address checks.

    ``tags`` and ``categories`` hold the comma joined source text.
    """

    title: str
    description: str
    license: str
    lat: float | None = None
    lng: float | None = None
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
    tags: str = ""
    categories: str = ""
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

    @property
    def coordinates(self) -> Coordinates | None:
        if self.lat is None or self.lng is None:
            return None
        return (self.lat, self.lng)


def split_tags(text: str) -> list[str]:
    """Split comma joined tags exactly as written; tags are not trimmed."""

    if not text:
        return []
    return text.split(TAG_SEPARATOR)


def check_address_and_coordinates(
    geocoder: GeoCoder,
    address: Address,
    coordinates: Coordinates | None,
) -> tuple[Address, Coordinates]:
    """Make sure a place can be located, geocoding the address if needed."""

    if coordinates is not None:
        if address.is_empty():
            # TODO: reverse geocode the coordinates to fill in the address
            log.warning("Accepting place at %s without address", coordinates)
        return address, coordinates

    if address.is_empty():
        raise MissingAddressOrCoordinatesError()

    log.info("Try to resolve lat/lng from address (%s)", address)
    resolved = geocoder.resolve(address)
    if resolved is None:
        raise NoGeoCoordinatesError()
    return address, resolved


def normalize_new_place(draft: PlaceDraft, geocoder: GeoCoder) -> NewPlace:
    """Validate ``draft`` and build the creation request for it."""

    log.info("Check address and geo location for entry '%s' (%s)", draft.title, draft.city)
    address, (lat, lng) = check_address_and_coordinates(
        geocoder, draft.address, draft.coordinates
    )
    return NewPlace(
        title=draft.title,
        description=draft.description,
        lat=lat,
        lng=lng,
        license=draft.license,
        street=address.street,
        zip=address.zip,
        city=address.city,
        country=address.country,
        state=address.state,
        contact_name=draft.contact_name,
        email=draft.email,
        telephone=draft.telephone,
        homepage=draft.homepage,
        opening_hours=draft.opening_hours,
        founded_on=draft.founded_on,
        categories=split_tags(draft.categories),
        tags=split_tags(draft.tags),
        image_url=draft.image_url,
        image_link_url=draft.image_link_url,
        links=list(draft.links),
    )


def validate_new_places(
    drafts: Iterable[CsvRecordResult[PlaceDraft]],
    geocoder: GeoCoder,
) -> list[CsvRecordResult[NewPlace]]:
    """Run the address checks for every successfully read row.

    Rows that already failed to parse are passed through unchanged.
    """

    results: list[CsvRecordResult[NewPlace]] = []
    for draft in drafts:
        if draft.value is None:
            results.append(CsvRecordResult(draft.record_nr, error=draft.error, record=draft.record))
            continue
        try:
            place = normalize_new_place(draft.value, geocoder)
        except AddressOrGeoCoordinatesError as exc:
            log.warning("Record %d ('%s'): %s", draft.record_nr, draft.value.title, exc)
            results.append(CsvRecordResult(draft.record_nr, error=exc, record=draft.record))
        else:
            results.append(CsvRecordResult(draft.record_nr, value=place, record=draft.record))
    return results
