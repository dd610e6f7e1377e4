"""Fetchers for the two githubstatus.com feeds."""
from __future__ import annotations

from typing import TypeVar

import msgspec

from ghstatus.config.settings import Settings
from ghstatus.config.settings import get_config
from ghstatus.core.http import fetch_url
from ghstatus.errors.types import DecodeError
from ghstatus.models import ComponentsResponse
from ghstatus.models import IncidentsResponse

T = TypeVar("T")


def decode_response(content: bytes, struct_type: type[T], url: str | None = None) -> T:
    """Decode a response body into ``struct_type``.

    Raises:
        DecodeError: if the body is not JSON or does not match ``struct_type``
    """
    try:
        return msgspec.json.decode(content, type=struct_type)
    except msgspec.ValidationError as e:
        raise DecodeError(
            f"Unexpected response shape: {e}",
            url=url,
            remediation="The status API format may have changed.",
        ) from e
    except msgspec.DecodeError as e:
        raise DecodeError(
            f"Invalid JSON in response: {e}",
            url=url,
            remediation="The status page may be returning an error page. Try again later.",
        ) from e


async def fetch_components(config: Settings | None = None) -> ComponentsResponse:
    """Fetch every component and its status.

    Raises:
        NetworkError: if the endpoint cannot be reached
        DecodeError: if the body cannot be decoded
    """
    config = config or get_config()
    content = await fetch_url(config.components_url, config)
    return decode_response(content, ComponentsResponse, config.components_url)


async def fetch_incidents(config: Settings | None = None) -> IncidentsResponse:
    """Fetch incidents that are not yet resolved.

    Raises:
        NetworkError: if the endpoint cannot be reached
        DecodeError: if the body cannot be decoded
    """
    config = config or get_config()
    content = await fetch_url(config.incidents_url, config)
    return decode_response(content, IncidentsResponse, config.incidents_url)
