"""Translate between OpenFairDB payloads and domain places."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ofdb_cli.domain.model import CustomLink, DuplicateCandidate, NewPlace, Place

from .schema import (
    CustomLinkSchema,
    EntrySchema,
    NewPlaceSchema,
    PlaceSearchResultSchema,
    ReviewSchema,
    UpdatePlaceSchema,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ofdb_cli.domain.model import Review

type JsonPayload = dict[str, Any]

_SHARED_FIELDS = (
    "title",
    "description",
    "lat",
    "lng",
    "street",
    "zip",
    "city",
    "country",
    "state",
    "contact_name",
    "email",
    "telephone",
    "homepage",
    "opening_hours",
    "founded_on",
    "image_url",
    "image_link_url",
)


def _links_from_schema(links: Sequence[CustomLinkSchema]) -> list[CustomLink]:
    return [
        CustomLink(url=link.url, title=link.title, description=link.description) for link in links
    ]


def _links_to_schema(links: Sequence[CustomLink]) -> list[CustomLinkSchema]:
    return [
        CustomLinkSchema(url=link.url, title=link.title, description=link.description)
        for link in links
    ]


def _shared_values(source: object) -> dict[str, Any]:
    return {name: getattr(source, name) for name in _SHARED_FIELDS}


def translate_entry(entry: EntrySchema) -> Place:
    return Place(
        id=entry.id,
        created=entry.created,
        version=entry.version,
        categories=list(entry.categories),
        tags=list(entry.tags),
        ratings=list(entry.ratings),
        license=entry.license,
        links=_links_from_schema(entry.custom_links),
        **_shared_values(entry),
    )


def translate_new_place(schema: NewPlaceSchema) -> NewPlace:
    return NewPlace(
        license=schema.license,
        categories=list(schema.categories),
        tags=list(schema.tags),
        links=_links_from_schema(schema.links),
        **_shared_values(schema),
    )


def translate_search_result(result: PlaceSearchResultSchema) -> DuplicateCandidate:
    return DuplicateCandidate(
        id=result.id,
        title=result.title,
        description=result.description,
        lat=result.lat,
        lng=result.lng,
        categories=list(result.categories),
        tags=list(result.tags),
        status=result.status,
    )


def new_place_payload(place: NewPlace) -> JsonPayload:
    schema = NewPlaceSchema(
        license=place.license,
        categories=list(place.categories),
        tags=list(place.tags),
        links=_links_to_schema(place.links),
        **_shared_values(place),
    )
    return schema.model_dump(mode="json")


def update_place_payload(place: Place) -> JsonPayload:
    schema = UpdatePlaceSchema(
        version=place.version,
        categories=list(place.categories),
        tags=list(place.tags),
        links=_links_to_schema(place.links),
        **_shared_values(place),
    )
    return schema.model_dump(mode="json")


def review_payload(review: Review) -> JsonPayload:
    return ReviewSchema(status=review.status.value, comment=review.comment).model_dump(mode="json")
