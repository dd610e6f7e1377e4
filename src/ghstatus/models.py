"""Data models for ghstatus.

Typed views of the two Statuspage.io feeds published at githubstatus.com.
Field names follow the JSON keys so responses decode straight into these
structs with ``msgspec.json.decode``. Descriptive fields accept JSON null
and lists may be null, which reads the same as an empty list.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

import msgspec

# Catch-all "GitHub" entry summarising every other component
UMBRELLA_COMPONENT_ID = "0l2p9nhqnxpd"


class StatusLevel(StrEnum):
    """Severity levels shared by component statuses and incident impacts."""

    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    PARTIAL_OUTAGE = "partial_outage"
    MAJOR_OUTAGE = "major_outage"
    UNKNOWN = "unknown"


class Page(msgspec.Struct, frozen=True):
    """Status page metadata returned alongside both feeds."""

    id: str
    name: str
    url: str
    updated_at: datetime


class Component(msgspec.Struct, frozen=True):
    """A monitored subsystem and its current status."""

    id: str
    name: str
    status: str  # e.g. "operational", "degraded_performance"
    description: str | None = None
    group: bool = False
    group_id: str | None = None
    only_show_if_degraded: bool = False
    page_id: str | None = None
    position: int = 0
    showcase: bool = False
    created_at: str | None = None
    updated_at: str | None = None
    start_date: str | None = None

    @property
    def is_umbrella(self) -> bool:
        """Return True for the overall-status entry."""
        return self.id == UMBRELLA_COMPONENT_ID


class Update(msgspec.Struct, frozen=True):
    """A single timestamped post on an incident."""

    id: str | None = None
    incident_id: str | None = None
    body: str | None = None
    status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    display_at: str | None = None


class Incident(msgspec.Struct, frozen=True):
    """An unresolved incident with its updates, newest first."""

    id: str
    name: str
    status: str
    impact: str  # "none", "minor", "major" or "critical"
    updated_at: datetime
    shortlink: str | None = None
    created_at: str | None = None
    updates: list[Update] | None = msgspec.field(
        default_factory=list, name="incident_updates"
    )

    @property
    def latest_update(self) -> Update | None:
        """Return the most recent update, or None if nothing was posted."""
        if not self.updates:
            return None
        return self.updates[0]


class ComponentsResponse(msgspec.Struct, frozen=True):
    """Body of ``/api/v2/components.json``."""

    page: Page
    components: list[Component] | None = msgspec.field(default_factory=list)

    def visible_components(self) -> list[Component]:
        """Components to list, in response order, without the umbrella entry."""
        return [c for c in self.components or () if not c.is_umbrella]


class IncidentsResponse(msgspec.Struct, frozen=True):
    """Body of ``/api/v2/incidents/unresolved.json``."""

    page: Page
    incidents: list[Incident] | None = msgspec.field(default_factory=list)
