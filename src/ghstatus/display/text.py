"""Plain-text summary of component health and open incidents."""

from __future__ import annotations

from datetime import UTC
from datetime import datetime
from datetime import timedelta

from rich.console import Console
from rich.console import Group
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ghstatus.display.icons import to_icon
from ghstatus.models import ComponentsResponse
from ghstatus.models import Incident
from ghstatus.models import IncidentsResponse

NO_UPDATES_PLACEHOLDER = "(no updates)"

# Wide enough that long update bodies are never wrapped or cropped
RENDER_WIDTH = 10_000


def format_timestamp(dt: datetime) -> str:
    """Format a timestamp as ``02 Jan 06 15:04 MST``.

    UTC timestamps get ``UTC``. Zones without an abbreviation get their
    numeric offset, e.g. ``-0500``. Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)

    offset = dt.utcoffset()
    name = dt.tzname()
    if offset == timedelta(0) and (not name or name.startswith("UTC")):
        zone = "UTC"
    elif name and not name.startswith("UTC"):
        zone = name
    else:
        zone = dt.strftime("%z")

    return f"{dt.strftime('%d %b %y %H:%M')} {zone}"


def _grid() -> Table:
    """Two-column grid: labels padded to the widest label plus one space."""
    grid = Table.grid(padding=(0, 1, 0, 0))
    grid.add_column(min_width=3, no_wrap=True)  # At least 4 wide with the gap
    grid.add_column()
    return grid


def _incident_grid(incident: Incident) -> Table:
    latest = incident.latest_update
    details = (latest.body or "") if latest is not None else NO_UPDATES_PLACEHOLDER

    grid = _grid()
    for label, value in (
        ("Name:", incident.name),
        ("Impact:", f"{to_icon(incident.impact)} {incident.impact}"),
        ("Status:", incident.status),
        ("Details:", details),
        ("Link:", incident.shortlink or ""),
        ("Last Updated:", format_timestamp(incident.updated_at)),
    ):
        grid.add_row(Text(label), Text(value))
    return grid


def build_summary(
    components: ComponentsResponse,
    incidents: IncidentsResponse,
) -> Group:
    """Lay out both feeds as a group of text lines and grids."""
    updated = format_timestamp(components.page.updated_at)
    renderables: list[RenderableType] = [Text(f"=== Components as of {updated} ===")]

    visible = components.visible_components()
    if visible:
        grid = _grid()
        for component in visible:
            grid.add_row(Text(component.name), Text(to_icon(component.status)))
        renderables.append(grid)

    if incidents.incidents:
        renderables.append(Text())
        renderables.append(Text("=== Incidents ==="))
        for index, incident in enumerate(incidents.incidents):
            # Blank line between consecutive incidents
            if index:
                renderables.append(Text())
            renderables.append(_incident_grid(incident))

    return Group(*renderables)


def render_summary(
    components: ComponentsResponse,
    incidents: IncidentsResponse,
) -> str:
    """Render both feeds as aligned text, ending with a newline."""
    console = Console(width=RENDER_WIDTH, color_system=None, emoji=False, highlight=False)
    with console.capture() as capture:
        console.print(build_summary(components, incidents))

    # Grid rows are padded out to the full table width
    lines = [line.rstrip() for line in capture.get().splitlines()]
    return "\n".join(lines) + "\n"


def print_summary(
    console: Console,
    components: ComponentsResponse,
    incidents: IncidentsResponse,
) -> None:
    """Write the rendered summary to the console in one go."""
    console.print(
        render_summary(components, incidents),
        end="",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
