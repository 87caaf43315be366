"""Application configuration helpers."""

from __future__ import annotations

from .catalog import DEFAULT_OFDB_API_URL, CatalogConfig, Credentials, get_catalog_config
from .env import float_env_var, optional_env_var
from .errors import ConfigurationError
from .geocoding import GeocodingConfig, get_geocoding_config
from .http import HttpClientConfig
from .logging import configure_logging

__all__ = [
    "DEFAULT_OFDB_API_URL",
    "CatalogConfig",
    "ConfigurationError",
    "Credentials",
    "GeocodingConfig",
    "HttpClientConfig",
    "configure_logging",
    "float_env_var",
    "get_catalog_config",
    "get_geocoding_config",
    "optional_env_var",
]
