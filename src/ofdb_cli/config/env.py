"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env_var(name: str, default: str | None = None) -> str | None:
    """Return a stripped environment variable, treating blank values as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def float_env_var(name: str, default: float) -> float:
    value = optional_env_var(name)
    if value is None:
        return default
    try:
        number = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got '{value}'") from exc
    if number <= 0:
        raise ConfigurationError(f"{name} must be positive, got '{value}'")
    return number
