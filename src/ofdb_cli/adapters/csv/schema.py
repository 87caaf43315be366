"""Row schemas for the supported CSV files.

All schemas are header driven: column order does not matter, unknown
columns are ignored and empty cells count as missing values.
"""

from __future__ import annotations

import re
from datetime import date  # noqa: TC003
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ofdb_cli.domain.model import ReviewStatus

CUSTOM_LINK_COLUMN: Final[re.Pattern[str]] = re.compile(
    r"^custom_link_(?P<part>url|title|description)_(?P<index>\d+)$"
)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _present_cells(data: dict[Any, Any]) -> dict[str, Any]:
    # csv.DictReader stores surplus fields under the None key
    if data.get(None):
        raise ValueError("row has more fields than the header")
    return {key: value for key, value in data.items() if key is not None and not _is_blank(value)}


def collect_custom_links(cells: dict[str, Any]) -> list[dict[str, str]]:
    """Fold ``custom_link_{url,title,description}_{i}`` columns into an ordered list."""

    by_index: dict[int, dict[str, str]] = {}
    for key in list(cells):
        match = CUSTOM_LINK_COLUMN.match(key)
        if match is None:
            continue
        value = cells.pop(key)
        by_index.setdefault(int(match["index"]), {})[match["part"]] = value
    links: list[dict[str, str]] = []
    for index in sorted(by_index):
        link = by_index[index]
        if "url" not in link:
            raise ValueError(f"custom link {index} has a title or description but no url")
        links.append(link)
    return links


class CsvRowModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_empty_cells(cls, data: Any) -> Any:  # noqa: ANN401
        if not isinstance(data, dict):
            return data
        return cls.prepare_cells(_present_cells(data))

    @classmethod
    def prepare_cells(cls, cells: dict[str, Any]) -> dict[str, Any]:
        return cells


class CustomLinkRow(BaseModel):
    url: str
    title: str | None = None
    description: str | None = None


class NewPlaceRow(CsvRowModel):
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
    contact_email: str | None = None
    contact_phone: str | None = None
    opening_hours: str | None = None
    founded_on: date | None = None
    tags: str = ""
    categories: str = ""
    homepage: str | None = None
    image_url: str | None = None
    image_link_url: str | None = None
    links: list[CustomLinkRow] = Field(default_factory=list)

    @classmethod
    def prepare_cells(cls, cells: dict[str, Any]) -> dict[str, Any]:
        links = collect_custom_links(cells)
        if links:
            cells["links"] = links
        return cells


class PlaceRow(NewPlaceRow):
    id: str
    created: int
    version: int
    lat: float
    lng: float
    license: str | None = None  # pyright: ignore[reportIncompatibleVariableOverride]
    ratings: str = ""


class PatchRow(CsvRowModel):
    """Patch file row: ``id`` and ``version`` are literals, the rest directives."""

    id: str
    version: int
    title: str | None = None
    description: str | None = None
    lat: str | None = None
    lng: str | None = None
    street: str | None = None
    zip: str | None = None
    city: str | None = None
    country: str | None = None
    state: str | None = None
    contact_name: str | None = None
    email: str | None = Field(default=None, alias="contact_email")
    telephone: str | None = Field(default=None, alias="contact_phone")
    homepage: str | None = None
    opening_hours: str | None = None
    founded_on: str | None = None
    tags: str | None = None
    categories: str | None = None
    image_url: str | None = None
    image_link_url: str | None = None
    created: str | None = None
    license: str | None = None
    ratings: str | None = None

    def directives(self) -> dict[str, str]:
        return self.model_dump(exclude={"id", "version"}, exclude_none=True)


class ReviewRow(CsvRowModel):
    id: str
    status: ReviewStatus
    comment: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value: Any) -> Any:  # noqa: ANN401
        if isinstance(value, str):
            return ReviewStatus.parse(value)
        return value
