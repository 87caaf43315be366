"""OpenCage geocoding configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import float_env_var, optional_env_var
from .http import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig

OPENCAGE_BASE_URL = "https://api.opencagedata.com/geocode/v1/"


@dataclass(frozen=True, slots=True)
class GeocodingConfig:
    api_key: str | None
    http: HttpClientConfig


def get_geocoding_config() -> GeocodingConfig:
    return GeocodingConfig(
        api_key=optional_env_var("OPENCAGE_API_KEY"),
        http=HttpClientConfig(
            name="opencage",
            base_url=OPENCAGE_BASE_URL,
            timeout_seconds=float_env_var("OFDB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        ),
    )
