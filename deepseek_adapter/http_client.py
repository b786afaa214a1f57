"""
HTTP client construction for provider adapters.

Builds a pooled ``httpx.AsyncClient`` with default headers baked in. The
client makes a single attempt per request; callers decide whether to retry.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel


class HttpConfig(BaseModel):
    """Configuration for the shared HTTP client."""

    timeout: float = 30.0
    max_keepalive_connections: int = 20
    max_connections: int = 100
    keepalive_expiry: float = 30.0


def create_http_client(
    base_url: str,
    headers: dict[str, str] | None = None,
    config: HttpConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the async HTTP client used by an adapter.

    Args:
        base_url: Base URL for all requests
        headers: Default headers to include with all requests
        config: HTTP configuration settings
        transport: Optional transport override (e.g. ``httpx.MockTransport``)

    Returns:
        Configured httpx.AsyncClient
    """
    config = config or HttpConfig()

    return httpx.AsyncClient(
        base_url=base_url.rstrip("/"),
        timeout=httpx.Timeout(config.timeout),
        headers=headers or {},
        # Connection pooling for better performance
        limits=httpx.Limits(
            max_keepalive_connections=config.max_keepalive_connections,
            max_connections=config.max_connections,
            keepalive_expiry=config.keepalive_expiry,
        ),
        transport=transport,
    )


def create_http_config_from_dict(config_dict: dict[str, Any]) -> HttpConfig:
    """
    Create HttpConfig from a dictionary (e.g., from YAML config).

    Args:
        config_dict: Dictionary containing an optional ``http`` section

    Returns:
        HttpConfig instance with validated settings
    """
    http_config = config_dict.get("http") or {}

    return HttpConfig(
        timeout=http_config.get("timeout", 30.0),
        max_keepalive_connections=http_config.get("max_keepalive_connections", 20),
        max_connections=http_config.get("max_connections", 100),
        keepalive_expiry=http_config.get("keepalive_expiry", 30.0),
    )
