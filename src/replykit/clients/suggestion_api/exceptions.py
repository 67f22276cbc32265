"""Suggestion service client exceptions.

These exceptions are caught by the orchestrator, which replaces the failed
result with locally generated suggestions.
"""

from __future__ import annotations


class SuggestionApiError(Exception):
    """Base exception for suggestion service client errors."""


class SuggestionApiUnavailableError(SuggestionApiError):
    """Raised when the suggestion service cannot be reached.

    Covers DNS failures, refused connections and dropped sockets.
    """


class SuggestionApiTimeoutError(SuggestionApiUnavailableError):
    """Raised when a request exceeds the configured timeout."""


class SuggestionApiResponseError(SuggestionApiError):
    """Raised when the suggestion service returns a non-2xx response.

    ``code`` carries the service's machine-readable error code when the
    body was a well-formed error payload.
    """

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        super().__init__(message)


class SuggestionApiParseError(SuggestionApiError):
    """Raised when a successful response body does not match the expected schema."""
