from __future__ import annotations

import httpx

from json_http.domain.config import TransportConfig


def build_transport(config: TransportConfig) -> httpx.AsyncClient:
    """
    Build an `httpx.AsyncClient` from config.

    The caller owns the returned client and is responsible for closing it
    (`await client.aclose()` or `async with`).
    """
    return httpx.AsyncClient(
        base_url=config.base_url,
        timeout=config.timeout,
        follow_redirects=config.follow_redirects,
        verify=config.verify,
        headers=config.headers,
    )
