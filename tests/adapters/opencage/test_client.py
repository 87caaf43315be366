from __future__ import annotations

import httpx
import pytest

from ofdb_cli.adapters.http_client import build_http_client
from ofdb_cli.adapters.opencage import OpenCageGeocoder, format_address
from ofdb_cli.config import GeocodingConfig, HttpClientConfig
from ofdb_cli.config.geocoding import OPENCAGE_BASE_URL
from ofdb_cli.domain.model import Address

ADDRESS = Address(street="Marktplatz 1", zip="70173", city="Stuttgart", country="Germany")


def _geocoder(
    transport: httpx.MockTransport | None = None, *, api_key: str | None = "secret"
) -> OpenCageGeocoder:
    config = GeocodingConfig(
        api_key=api_key, http=HttpClientConfig(name="opencage", base_url=OPENCAGE_BASE_URL)
    )

    def factory(http: HttpClientConfig) -> httpx.Client:
        if transport is None:
            raise AssertionError("no client expected")
        return build_http_client(http, transport=transport)

    return OpenCageGeocoder(config=config, client_factory=factory)


def test_format_address_skips_blank_parts() -> None:
    assert format_address(ADDRESS) == "Marktplatz 1, 70173 Stuttgart, Germany"
    assert format_address(Address(city="Berlin", state=" ")) == "Berlin"
    assert format_address(Address()) == ""


def test_resolve_returns_first_result() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={
                "results": [
                    {"geometry": {"lat": 48.7758, "lng": 9.1829}, "confidence": 9},
                    {"geometry": {"lat": 0.0, "lng": 0.0}},
                ],
                "status": {"code": 200, "message": "OK"},
                "total_results": 2,
            },
        )

    with _geocoder(httpx.MockTransport(handler)) as geocoder:
        assert geocoder.resolve(ADDRESS) == (48.7758, 9.1829)

    params = requests[0].url.params
    assert requests[0].url.path == "/geocode/v1/json"
    assert params["q"] == "Marktplatz 1, 70173 Stuttgart, Germany"
    assert params["key"] == "secret"
    assert params["limit"] == "1"
    assert params["no_annotations"] == "1"


def test_resolve_without_results() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"results": [], "total_results": 0})

    with _geocoder(httpx.MockTransport(handler)) as geocoder:
        assert geocoder.resolve(ADDRESS) is None


def test_resolve_logs_http_errors(caplog: pytest.LogCaptureFixture) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"status": {"code": 401, "message": "invalid key"}})

    with caplog.at_level("WARNING"), _geocoder(httpx.MockTransport(handler)) as geocoder:
        assert geocoder.resolve(ADDRESS) is None

    assert "Geocoding 'Marktplatz 1, 70173 Stuttgart, Germany' failed" in caplog.text


def test_resolve_without_api_key(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        geocoder = _geocoder(api_key=None)

    assert geocoder.resolve(ADDRESS) is None
    assert "No OpenCage API key provided" in caplog.text
    geocoder.close()
