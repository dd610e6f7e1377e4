"""Error types and classifications."""

from __future__ import annotations

from enum import StrEnum


class ErrorCategory(StrEnum):
    """Error categories for handling decisions."""

    NETWORK = "network"
    PARSE = "parse"


class GhStatusError(Exception):
    """Structured error with category and remediation.

    Every failure while fetching or decoding a feed is raised as a subclass
    of this; the CLI turns it into a diagnostic and a non-zero exit.
    """

    category: ErrorCategory

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        remediation: str | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message


class NetworkError(GhStatusError):
    """The request could not be completed or the server refused it."""

    category = ErrorCategory.NETWORK


class DecodeError(GhStatusError):
    """The response body is not the JSON shape we expect."""

    category = ErrorCategory.PARSE
