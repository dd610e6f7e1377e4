"""Configuration for ghstatus."""

from ghstatus.config.settings import (
    COMPONENTS_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
    INCIDENTS_URL,
    Settings,
    get_config,
)

__all__ = [
    "COMPONENTS_URL",
    "INCIDENTS_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
    "Settings",
    "get_config",
]
