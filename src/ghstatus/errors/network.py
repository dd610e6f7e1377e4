"""Network error classification utilities.

This module turns httpx exceptions into ``NetworkError`` instances with a
readable message and a remediation hint.
"""

from __future__ import annotations

import httpx

from ghstatus.errors.types import NetworkError


def classify_network_error(error: Exception, url: str | None = None) -> NetworkError:
    """Classify network-related errors into structured errors.

    Args:
        error: Network exception to classify
        url: Endpoint that was being fetched

    Returns:
        NetworkError with appropriate message and remediation
    """
    if isinstance(error, httpx.ConnectTimeout):
        return NetworkError(
            "Connection timed out",
            url=url,
            remediation="Check your internet connection and try again.",
        )

    if isinstance(error, httpx.ReadTimeout):
        return NetworkError(
            "Request timed out waiting for response",
            url=url,
            remediation="githubstatus.com may be slow. Try again in a moment.",
        )

    if isinstance(error, httpx.TimeoutException):
        return NetworkError(
            "Request timed out",
            url=url,
            remediation="Check your internet connection and try again.",
        )

    if isinstance(error, httpx.ConnectError):
        message = str(error).lower()
        if "connection refused" in message:
            return NetworkError(
                "Connection refused by server",
                url=url,
                remediation="The status page may be unreachable. Try again later.",
            )
        elif "name or service not known" in message or "nodename" in message or "dns" in message:
            return NetworkError(
                "Could not resolve server address",
                url=url,
                remediation="Check your internet connection and DNS settings.",
            )
        else:
            return NetworkError(
                "Failed to connect to server",
                url=url,
                remediation="Check your internet connection and try again.",
            )

    if isinstance(error, httpx.HTTPStatusError):
        return classify_http_status_error(error, url)

    # Fallback for any other transport failure
    return NetworkError(
        f"Network error: {error}",
        url=url,
        remediation="Check your internet connection and try again.",
    )


def classify_http_status_error(
    error: httpx.HTTPStatusError, url: str | None = None
) -> NetworkError:
    """Classify a non-2xx response into a structured error."""
    status = error.response.status_code
    reason = error.response.reason_phrase or "error"

    remediation = None
    if status == 404:
        remediation = "The status API may have moved."
    elif status == 429:
        remediation = "Rate limited. Wait a few minutes before trying again."
    elif status >= 500:
        remediation = "githubstatus.com is having trouble. Try again later."

    return NetworkError(
        f"HTTP {status}: {reason}",
        url=url,
        remediation=remediation,
        details={"status_code": status},
    )

