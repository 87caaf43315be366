"""Translate CSV rows into domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ofdb_cli.domain.model import CustomLink, Place, Review
from ofdb_cli.domain.patch import PlacePatch
from ofdb_cli.domain.validation import PlaceDraft, split_tags

if TYPE_CHECKING:
    from ofdb_cli.domain.model import PlaceId

    from .schema import CustomLinkRow, NewPlaceRow, PatchRow, PlaceRow, ReviewRow


def _links(rows: list[CustomLinkRow]) -> list[CustomLink]:
    return [CustomLink(url=row.url, title=row.title, description=row.description) for row in rows]


def translate_new_place_row(row: NewPlaceRow) -> PlaceDraft:
    return PlaceDraft(
        title=row.title,
        description=row.description,
        license=row.license,
        lat=row.lat,
        lng=row.lng,
        street=row.street,
        zip=row.zip,
        city=row.city,
        country=row.country,
        state=row.state,
        contact_name=row.contact_name,
        email=row.contact_email,
        telephone=row.contact_phone,
        homepage=row.homepage,
        opening_hours=row.opening_hours,
        founded_on=row.founded_on,
        tags=row.tags,
        categories=row.categories,
        image_url=row.image_url,
        image_link_url=row.image_link_url,
        links=_links(row.links),
    )


def translate_place_row(row: PlaceRow) -> Place:
    return Place(
        id=row.id,
        created=row.created,
        version=row.version,
        title=row.title,
        description=row.description,
        lat=row.lat,
        lng=row.lng,
        street=row.street,
        zip=row.zip,
        city=row.city,
        country=row.country,
        state=row.state,
        contact_name=row.contact_name,
        email=row.contact_email,
        telephone=row.contact_phone,
        homepage=row.homepage,
        opening_hours=row.opening_hours,
        founded_on=row.founded_on,
        categories=split_tags(row.categories),
        tags=split_tags(row.tags),
        ratings=split_tags(row.ratings),
        license=row.license,
        image_url=row.image_url,
        image_link_url=row.image_link_url,
        links=_links(row.links),
    )


def translate_patch_row(row: PatchRow) -> PlacePatch:
    return PlacePatch(id=row.id, version=row.version, directives=row.directives())


def translate_review_row(row: ReviewRow) -> tuple[PlaceId, Review]:
    return row.id, Review(status=row.status, comment=row.comment)
