"""OpenFairDB JSON API schemas."""

from __future__ import annotations

import logging
from datetime import date  # noqa: TC003
from typing import ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class OfdbBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "OpenFairDB %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class CustomLinkSchema(OfdbBaseModel):
    url: str
    title: str | None = None
    description: str | None = None


class PlaceFieldsSchema(OfdbBaseModel):
    """Editable fields shared by new places, updates and entries."""

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
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    image_url: str | None = None
    image_link_url: str | None = None


class NewPlaceSchema(PlaceFieldsSchema):
    license: str
    links: list[CustomLinkSchema] = Field(default_factory=list)


class UpdatePlaceSchema(PlaceFieldsSchema):
    version: int
    links: list[CustomLinkSchema] = Field(default_factory=list)


class EntrySchema(PlaceFieldsSchema):
    id: str
    created: int
    version: int
    ratings: list[str] = Field(default_factory=list)
    license: str | None = None
    custom_links: list[CustomLinkSchema] = Field(
        default_factory=list,
        validation_alias=AliasChoices("custom", "links", "custom_links"),
        serialization_alias="custom",
    )


class PlaceSearchResultSchema(OfdbBaseModel):
    id: str
    title: str
    description: str = ""
    lat: float | None = None
    lng: float | None = None
    status: str | None = None
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    ratings: dict[str, float] | None = None


class ReviewSchema(OfdbBaseModel):
    status: str
    comment: str | None = None


class CredentialsSchema(OfdbBaseModel):
    email: str
    password: str


class ErrorSchema(OfdbBaseModel):
    http_status: int | None = None
    message: str
