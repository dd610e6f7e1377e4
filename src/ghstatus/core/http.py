"""HTTP client with connection pooling for ghstatus."""

from contextlib import asynccontextmanager

import httpx

from ghstatus.config.settings import Settings
from ghstatus.config.settings import get_config
from ghstatus.errors.network import classify_network_error

# Global HTTP client
_client: httpx.AsyncClient | None = None


def get_timeout_config(config: Settings | None = None) -> httpx.Timeout:
    """Get timeout configuration from settings."""
    config = config or get_config()
    return httpx.Timeout(config.timeout, connect=config.connect_timeout)


@asynccontextmanager
async def get_http_client(config: Settings | None = None):
    """Get or create the shared HTTP client.

    Usage:
        async with get_http_client() as client:
            response = await client.get(...)
    """
    global _client

    if _client is None:
        limits = httpx.Limits(
            max_connections=10,
            max_keepalive_connections=2,
        )
        _client = httpx.AsyncClient(
            timeout=get_timeout_config(config),
            limits=limits,
            follow_redirects=True,
        )

    try:
        yield _client
    finally:
        # Don't close - both fetches share it
        pass


async def cleanup() -> None:
    """Close the HTTP client.

    Should be called once the run is over.
    """
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def fetch_url(url: str, config: Settings | None = None) -> bytes:
    """GET a URL and return the response body.

    Raises:
        NetworkError: if the request fails or the status is not 2xx
    """
    try:
        async with get_http_client(config) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.content
    except httpx.HTTPError as e:
        raise classify_network_error(e, url) from e
