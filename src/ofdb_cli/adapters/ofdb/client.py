"""OpenFairDB API client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError

from ofdb_cli.adapters.http_client import build_http_client
from ofdb_cli.domain.errors import CatalogError
from ofdb_cli.domain.model import simple_id

from .schema import CredentialsSchema, EntrySchema, ErrorSchema, PlaceSearchResultSchema
from .translator import (
    new_place_payload,
    review_payload,
    translate_entry,
    translate_search_result,
    update_place_payload,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from ofdb_cli.adapters.http_client import ClientFactory
    from ofdb_cli.config.catalog import CatalogConfig, Credentials
    from ofdb_cli.domain.model import DuplicateCandidate, NewPlace, Place, PlaceId, Review

log = getLogger(__name__)

_ENTRIES = TypeAdapter(list[EntrySchema])
_SEARCH_RESULTS = TypeAdapter(list[PlaceSearchResultSchema])
_PLACE_ID = TypeAdapter(str)


def _joined_ids(ids: Sequence[PlaceId]) -> str:
    return ",".join(simple_id(place_id) for place_id in ids)


class OfdbClient:
    """Blocking client for the OpenFairDB JSON API.

    One underlying HTTP session is kept open so that the cookie set by
    ``login`` authenticates the following requests.
    """

    def __init__(
        self,
        *,
        config: CatalogConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._client = (client_factory or build_http_client)(config.http)

    def __enter__(self) -> OfdbClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def login(self, credentials: Credentials) -> None:
        log.info("Try to login with '%s'", credentials.email)
        payload = CredentialsSchema(email=credentials.email, password=credentials.password)
        self._request(
            "POST",
            "login",
            json=payload.model_dump(mode="json"),
            headers={"Access-Control-Allow-Credentials": "true"},
        )

    def create_place(self, place: NewPlace) -> PlaceId:
        response = self._request("POST", "entries", json=new_place_payload(place))
        return self._parse(_PLACE_ID, response)

    def update_place(self, place_id: PlaceId, place: Place) -> PlaceId:
        response = self._request(
            "PUT", f"entries/{simple_id(place_id)}", json=update_place_payload(place)
        )
        return self._parse(_PLACE_ID, response)

    def read_places(self, ids: Sequence[PlaceId]) -> list[Place]:
        log.debug("Read %d places", len(ids))
        if not ids:
            return []
        response = self._request("GET", f"entries/{_joined_ids(ids)}")
        return [translate_entry(entry) for entry in self._parse(_ENTRIES, response)]

    def search_duplicates(self, place: NewPlace) -> list[DuplicateCandidate]:
        response = self._request("POST", "search/duplicates", json=new_place_payload(place))
        return [
            translate_search_result(result) for result in self._parse(_SEARCH_RESULTS, response)
        ]

    def review_places(self, ids: Sequence[PlaceId], review: Review) -> None:
        path = f"places/{_joined_ids(ids)}/review"
        log.debug("Send review %s to %s", review, path)
        self._request("POST", path, json=review_payload(review))

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,  # noqa: ANN401
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            raise CatalogError(f"{method} {path} failed: {exc}") from exc
        if response.is_success:
            return response
        raise CatalogError(_error_message(response), status_code=response.status_code)

    @staticmethod
    def _parse[T](adapter: TypeAdapter[T], response: httpx.Response) -> T:
        try:
            return adapter.validate_json(response.content)
        except ValidationError as exc:
            raise CatalogError(
                f"Unexpected OpenFairDB response payload: {exc.error_count()} validation errors",
                status_code=response.status_code,
            ) from exc


def _error_message(response: httpx.Response) -> str:
    try:
        return ErrorSchema.model_validate_json(response.content).message
    except ValidationError:
        text = response.text.strip()
        return text or f"HTTP {response.status_code}"
