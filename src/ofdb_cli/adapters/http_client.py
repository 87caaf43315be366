"""Factory for the synchronous httpx clients used by the adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable

    from httpx._types import HeaderTypes, TimeoutTypes

    from ofdb_cli.config.http import HttpClientConfig

type ClientFactory = Callable[[HttpClientConfig], httpx.Client]


class ClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    transport: httpx.BaseTransport


def build_http_client(
    config: HttpClientConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a client for ``config``; cookies persist for the client's lifetime."""

    client_kwargs: ClientOptions = {"timeout": config.timeout_seconds}
    if config.base_url is not None:
        client_kwargs["base_url"] = config.base_url
    if config.default_headers is not None:
        client_kwargs["headers"] = dict(config.default_headers)
    if transport is not None:
        client_kwargs["transport"] = transport
    return httpx.Client(**client_kwargs)
