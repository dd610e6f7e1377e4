"""CLI for ghstatus."""
from __future__ import annotations

from ghstatus.cli.app import ExitCode
from ghstatus.cli.app import app
from ghstatus.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
