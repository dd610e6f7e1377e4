"""Text output for ghstatus."""

from ghstatus.display.icons import to_icon
from ghstatus.display.icons import to_level
from ghstatus.display.text import build_summary
from ghstatus.display.text import format_timestamp
from ghstatus.display.text import print_summary
from ghstatus.display.text import render_summary

__all__ = [
    "to_icon",
    "to_level",
    "format_timestamp",
    "build_summary",
    "render_summary",
    "print_summary",
]
