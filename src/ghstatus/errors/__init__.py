"""Error handling for ghstatus."""

from ghstatus.errors.network import (
    classify_http_status_error,
    classify_network_error,
)
from ghstatus.errors.types import (
    DecodeError,
    ErrorCategory,
    GhStatusError,
    NetworkError,
)

__all__ = [
    # Core types
    "ErrorCategory",
    "GhStatusError",
    "NetworkError",
    "DecodeError",
    # Classification functions
    "classify_network_error",
    "classify_http_status_error",
]
