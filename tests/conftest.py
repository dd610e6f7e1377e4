"""Pytest configuration and shared fixtures for ghstatus tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Generator

import httpx
import msgspec
import pytest

import ghstatus.core.http
from ghstatus.config.settings import Settings
from ghstatus.models import ComponentsResponse, IncidentsResponse, UMBRELLA_COMPONENT_ID

COMPONENTS_URL = "https://status.test/api/v2/components.json"
INCIDENTS_URL = "https://status.test/api/v2/incidents/unresolved.json"


@pytest.fixture(autouse=True)
def reset_http_client() -> Generator[None, None, None]:
    """Start and end every test without a shared HTTP client."""
    ghstatus.core.http._client = None
    yield
    ghstatus.core.http._client = None


@pytest.fixture
def utc_now() -> datetime:
    """Fixed UTC datetime for consistent testing."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at fake endpoints."""
    return Settings(components_url=COMPONENTS_URL, incidents_url=INCIDENTS_URL)


@pytest.fixture
def sample_page() -> dict:
    """Statuspage.io page metadata."""
    return {
        "id": "kctbh9vrtdwd",
        "name": "GitHub",
        "url": "https://www.githubstatus.com",
        "updated_at": "2024-01-01T12:00:00Z",
    }


@pytest.fixture
def sample_components_payload(sample_page: dict) -> dict:
    """Components feed with the umbrella entry first."""
    return {
        "page": sample_page,
        "components": [
            {
                "id": UMBRELLA_COMPONENT_ID,
                "name": "Visit www.githubstatus.com for more information",
                "status": "operational",
                "created_at": "2017-01-31T20:01:46.638Z",
                "updated_at": "2024-01-01T11:00:00.000Z",
                "position": 1,
                "description": None,
                "showcase": False,
                "start_date": None,
                "group_id": None,
                "page_id": "kctbh9vrtdwd",
                "group": False,
                "only_show_if_degraded": False,
            },
            {
                "id": "8l4ygp009s5s",
                "name": "Git Operations",
                "status": "operational",
                "created_at": "2017-01-31T20:05:05.370Z",
                "updated_at": "2024-01-01T11:00:00.000Z",
                "position": 2,
                "description": "Performance of git clones, pulls, pushes, and associated operations",
                "showcase": False,
                "start_date": None,
                "group_id": None,
                "page_id": "kctbh9vrtdwd",
                "group": False,
                "only_show_if_degraded": False,
            },
            {
                "id": "br0l2tvcx85d",
                "name": "Actions",
                "status": "degraded_performance",
                "created_at": "2019-11-13T18:02:19.432Z",
                "updated_at": "2024-01-01T11:55:00.000Z",
                "position": 3,
                "description": "Workflows, Compute and Orchestration for GitHub Actions",
                "showcase": False,
                "start_date": "2019-11-13",
                "group_id": None,
                "page_id": "kctbh9vrtdwd",
                "group": False,
                "only_show_if_degraded": False,
            },
        ],
    }


@pytest.fixture
def sample_incident() -> dict:
    """One unresolved incident with two updates, newest first."""
    return {
        "id": "p2t3x8qk1c9m",
        "name": "DB issue",
        "status": "investigating",
        "impact": "critical",
        "shortlink": "https://git.io/x",
        "created_at": "2024-01-01T11:30:00.000Z",
        "updated_at": "2024-01-01T12:00:00Z",
        "incident_updates": [
            {
                "id": "u2",
                "incident_id": "p2t3x8qk1c9m",
                "body": "We are looking into it",
                "status": "investigating",
                "created_at": "2024-01-01T12:00:00.000Z",
                "updated_at": "2024-01-01T12:00:00.000Z",
                "display_at": "2024-01-01T12:00:00.000Z",
            },
            {
                "id": "u1",
                "incident_id": "p2t3x8qk1c9m",
                "body": "We are investigating reports of degraded performance",
                "status": "investigating",
                "created_at": "2024-01-01T11:30:00.000Z",
                "updated_at": "2024-01-01T11:30:00.000Z",
                "display_at": "2024-01-01T11:30:00.000Z",
            },
        ],
    }


@pytest.fixture
def sample_incidents_payload(sample_page: dict, sample_incident: dict) -> dict:
    """Incidents feed with one open incident."""
    return {"page": sample_page, "incidents": [sample_incident]}


@pytest.fixture
def empty_incidents_payload(sample_page: dict) -> dict:
    """Incidents feed with nothing open."""
    return {"page": sample_page, "incidents": []}


@pytest.fixture
def sample_components(sample_components_payload: dict) -> ComponentsResponse:
    """Decoded components feed."""
    return msgspec.json.decode(
        msgspec.json.encode(sample_components_payload), type=ComponentsResponse
    )


@pytest.fixture
def sample_incidents(sample_incidents_payload: dict) -> IncidentsResponse:
    """Decoded incidents feed."""
    return msgspec.json.decode(
        msgspec.json.encode(sample_incidents_payload), type=IncidentsResponse
    )


@pytest.fixture
def empty_incidents(empty_incidents_payload: dict) -> IncidentsResponse:
    """Decoded incidents feed with no incidents."""
    return msgspec.json.decode(
        msgspec.json.encode(empty_incidents_payload), type=IncidentsResponse
    )


@pytest.fixture
def install_transport() -> Callable[[Callable], httpx.AsyncClient]:
    """Route the shared HTTP client through an httpx.MockTransport handler."""

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        ghstatus.core.http._client = client
        return client

    return install
