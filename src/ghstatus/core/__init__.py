"""Fetching and orchestration for ghstatus."""

from ghstatus.core.fetch import fetch_components
from ghstatus.core.fetch import fetch_incidents
from ghstatus.core.orchestrator import fetch_summary

__all__ = ["fetch_components", "fetch_incidents", "fetch_summary"]
