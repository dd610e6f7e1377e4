"""Glyphs for Statuspage.io status and impact values."""

from __future__ import annotations

from ghstatus.models import StatusLevel

# Statuspage.io uses indicator names for incident impact and page status,
# and status names for components. Both map onto the same levels.
_LEVELS: dict[str, StatusLevel] = {
    "none": StatusLevel.OPERATIONAL,
    "operational": StatusLevel.OPERATIONAL,
    "minor": StatusLevel.DEGRADED,
    "degraded_performance": StatusLevel.DEGRADED,
    "major": StatusLevel.PARTIAL_OUTAGE,
    "partial_outage": StatusLevel.PARTIAL_OUTAGE,
    "critical": StatusLevel.MAJOR_OUTAGE,
    "major_outage": StatusLevel.MAJOR_OUTAGE,
}

ICONS: dict[StatusLevel, str] = {
    StatusLevel.OPERATIONAL: "✅",
    StatusLevel.DEGRADED: "🟡",
    StatusLevel.PARTIAL_OUTAGE: "🟠",
    StatusLevel.MAJOR_OUTAGE: "🔴",
    StatusLevel.UNKNOWN: "❔",
}


def to_level(status: str | None) -> StatusLevel:
    """Convert a status or impact string to a StatusLevel (case-insensitive)."""
    if not status:
        return StatusLevel.UNKNOWN
    return _LEVELS.get(status.lower(), StatusLevel.UNKNOWN)


def to_icon(status: str | None) -> str:
    """Get the glyph for a status or impact string."""
    return ICONS[to_level(status)]
