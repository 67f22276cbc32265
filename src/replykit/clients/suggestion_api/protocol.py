"""Suggestion client protocol definition.

Lets the orchestrator work against the HTTP client or any test double.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from replykit.schemas.enums import LanguageMode, ToneType


@runtime_checkable
class SuggestionClientProtocol(Protocol):
    """Interface of a remote reply/rewrite suggestion source."""

    def configure(self, api_key: str | None, base_url: str | None = None) -> None:
        """Replace credentials and/or base URL for subsequent requests."""
        ...

    async def shutdown(self) -> None:
        """Release client resources."""
        ...

    async def get_replies(
        self,
        context: str,
        tone: ToneType,
        language_mode: LanguageMode,
        count: int = 3,
    ) -> list[str]:
        """Fetch reply suggestions.

        Raises:
            SuggestionApiUnavailableError: Service unreachable.
            SuggestionApiTimeoutError: Request timed out.
            SuggestionApiResponseError: Service returned an error response.
            SuggestionApiParseError: Body did not match the reply schema.
        """
        ...

    async def get_rewrites(
        self,
        text: str,
        tone: ToneType,
        language_mode: LanguageMode,
        count: int = 3,
    ) -> list[str]:
        """Fetch rewrites of ``text``. Raises like ``get_replies``."""
        ...
