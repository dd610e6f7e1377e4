"""Settings for ghstatus."""

import msgspec

# Default values
COMPONENTS_URL = "https://www.githubstatus.com/api/v2/components.json"
INCIDENTS_URL = "https://www.githubstatus.com/api/v2/incidents/unresolved.json"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0


class Settings(msgspec.Struct, frozen=True):
    """Endpoints and HTTP timeouts used for a run."""

    components_url: str = COMPONENTS_URL
    incidents_url: str = INCIDENTS_URL
    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT


# Config state storage
_config: Settings | None = None


def get_config() -> Settings:
    """Get the current settings (singleton)."""
    global _config
    if _config is None:
        _config = Settings()
    return _config
