"""ghstatus: Show GitHub's current component health and open incidents."""

from __future__ import annotations

__version__ = "0.1.0"

from ghstatus.models import Component
from ghstatus.models import ComponentsResponse
from ghstatus.models import Incident
from ghstatus.models import IncidentsResponse
from ghstatus.models import Page
from ghstatus.models import StatusLevel
from ghstatus.models import Update

__all__ = [
    "__version__",
    "Page",
    "Component",
    "Update",
    "Incident",
    "ComponentsResponse",
    "IncidentsResponse",
    "StatusLevel",
]


def main() -> None:
    """Entry point for the ghstatus CLI."""
    from ghstatus.cli.app import run_app

    run_app()
