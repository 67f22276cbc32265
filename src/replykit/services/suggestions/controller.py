"""Toolbar actions that turn editor text into suggestion requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from replykit.language import detect
from replykit.observability.logging import get_logger
from replykit.services.suggestions.constants import (
    EMPTY_REPLY_CONTEXT_PLACEHOLDER,
    EMPTY_REWRITE_CONTEXT_PLACEHOLDER,
)


if TYPE_CHECKING:
    from collections.abc import Callable

    from replykit.core.config import Settings
    from replykit.schemas.enums import ToneType
    from replykit.services.suggestions.sequencer import InFlightJob
    from replykit.services.suggestions.service import SuggestionOrchestrator


logger = get_logger(__name__)


def _is_blank(text: str) -> bool:
    return not text or text.isspace()


class SuggestionController:
    """Handles the "AI Reply", "Rewrite" and tone buttons of the toolbar.

    The text worked on is the composing text when there is any, otherwise the
    text before the cursor selection.
    """

    def __init__(
        self,
        orchestrator: SuggestionOrchestrator,
        commit_text: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            orchestrator: Orchestrator that generates and publishes suggestions.
            commit_text: Host callback inserting an accepted suggestion.
        """
        self._orchestrator = orchestrator
        self._commit_text = commit_text
        self.state = orchestrator.state

    def apply_settings(self, settings: Settings) -> None:
        """Push the current preferences into the orchestrator."""
        self._orchestrator.configure(
            use_fallback=settings.suggestions.use_fallback,
            api_key=settings.suggestion_api_key,
            base_url=settings.suggestions.base_url,
        )

    def select_tone(self, tone: ToneType) -> None:
        self.state.set_tone(tone)

    def request_replies(
        self,
        composing_text: str,
        text_before_selection: str,
    ) -> InFlightJob | None:
        """Ask for replies to the current input.

        Returns:
            The generation job, or None when there was no text and a
            placeholder was shown instead.
        """
        text = text_before_selection if _is_blank(composing_text) else composing_text
        if _is_blank(text):
            self.state.set_suggestions(EMPTY_REPLY_CONTEXT_PLACEHOLDER)
            return None

        mode = detect(text)
        self.state.detected_language_mode.set(mode)
        return self._orchestrator.generate_replies(
            text, mode, self.state.current_tone.value
        )

    def request_rewrites(
        self,
        composing_text: str,
        text_before_selection: str,
    ) -> InFlightJob | None:
        """Ask for rewrites of the current input. Returns like ``request_replies``."""
        text = text_before_selection if _is_blank(composing_text) else composing_text
        if _is_blank(text):
            self.state.set_suggestions(EMPTY_REWRITE_CONTEXT_PLACEHOLDER)
            return None

        mode = detect(text)
        self.state.detected_language_mode.set(mode)
        return self._orchestrator.generate_rewrites(
            text, mode, self.state.current_tone.value
        )

    def accept_suggestion(self, suggestion: str) -> None:
        """Commit a tapped suggestion and clear the strip."""
        if self._commit_text is not None:
            self._commit_text(suggestion)
        else:
            logger.debug("No commit callback registered, suggestion dropped")
        self.state.clear_suggestions()
