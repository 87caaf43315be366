"""OpenCage geocoder."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from ofdb_cli.adapters.http_client import build_http_client

from .schema import OpenCageResponse

if TYPE_CHECKING:
    from types import TracebackType

    from ofdb_cli.adapters.http_client import ClientFactory
    from ofdb_cli.config.geocoding import GeocodingConfig
    from ofdb_cli.domain.model import Address, Coordinates

log = getLogger(__name__)


def format_address(address: Address) -> str:
    """Render an address as a single query line, skipping blank parts."""

    locality = " ".join(
        part.strip() for part in (address.zip, address.city) if part and part.strip()
    )
    parts = (address.street, locality, address.state, address.country)
    return ", ".join(part.strip() for part in parts if part and part.strip())


class OpenCageGeocoder:
    """Resolve addresses with the OpenCage forward geocoding API.

    Without an API key every lookup fails, which makes rows without
    coordinates fail validation instead of aborting the batch.
    """

    def __init__(
        self,
        *,
        config: GeocodingConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._api_key = config.api_key
        self._client: httpx.Client | None = None
        if self._api_key is None:
            log.warning("No OpenCage API key provided")
        else:
            self._client = (client_factory or build_http_client)(config.http)

    def __enter__(self) -> OpenCageGeocoder:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    def resolve(self, address: Address) -> Coordinates | None:
        if self._client is None or self._api_key is None:
            return None
        query = format_address(address)
        if not query:
            return None
        params = {"q": query, "key": self._api_key, "limit": "1", "no_annotations": "1"}
        try:
            response = self._client.get("json", params=params)
            response.raise_for_status()
            payload = OpenCageResponse.model_validate_json(response.content)
        except httpx.HTTPError as exc:
            log.warning("Geocoding '%s' failed: %s", query, exc)
            return None
        except ValidationError as exc:
            log.warning("Unexpected OpenCage response for '%s': %s", query, exc)
            return None
        if not payload.results:
            log.debug("No geocoding results for '%s'", query)
            return None
        geometry = payload.results[0].geometry
        return (geometry.lat, geometry.lng)
