"""OpenFairDB catalog configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import float_env_var, optional_env_var
from .errors import ConfigurationError
from .http import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig

DEFAULT_OFDB_API_URL = "https://dev.ofdb.io/v0"


@dataclass(frozen=True, slots=True)
class Credentials:
    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Holds the catalog API location and optional login credentials."""

    http: HttpClientConfig
    credentials: Credentials | None = None

    @property
    def api_url(self) -> str:
        return self.http.base_url or DEFAULT_OFDB_API_URL


def get_catalog_config(*, api_url: str | None = None) -> CatalogConfig:
    base_url = api_url or optional_env_var("OFDB_API_URL", DEFAULT_OFDB_API_URL)
    email = optional_env_var("OFDB_EMAIL")
    password = optional_env_var("OFDB_PASSWORD")
    if (email is None) != (password is None):
        raise ConfigurationError("OFDB_EMAIL and OFDB_PASSWORD must be set together")
    credentials = (
        Credentials(email=email, password=password)
        if email is not None and password is not None
        else None
    )
    return CatalogConfig(
        http=HttpClientConfig(
            name="ofdb",
            base_url=(base_url or DEFAULT_OFDB_API_URL).rstrip("/") + "/",
            timeout_seconds=float_env_var("OFDB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        ),
        credentials=credentials,
    )
