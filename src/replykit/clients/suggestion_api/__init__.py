"""Remote reply/rewrite suggestion service client package."""

from replykit.clients.suggestion_api.client import SuggestionApiClient
from replykit.clients.suggestion_api.exceptions import (
    SuggestionApiError,
    SuggestionApiParseError,
    SuggestionApiResponseError,
    SuggestionApiTimeoutError,
    SuggestionApiUnavailableError,
)
from replykit.clients.suggestion_api.protocol import SuggestionClientProtocol


__all__ = [
    "SuggestionApiClient",
    "SuggestionApiError",
    "SuggestionApiParseError",
    "SuggestionApiResponseError",
    "SuggestionApiTimeoutError",
    "SuggestionApiUnavailableError",
    "SuggestionClientProtocol",
]
