"""Reply and rewrite suggestion orchestration."""

from replykit.services.suggestions.controller import SuggestionController
from replykit.services.suggestions.fallback import fallback_replies, fallback_rewrites
from replykit.services.suggestions.sequencer import InFlightJob, RequestSequencer
from replykit.services.suggestions.service import SuggestionOrchestrator
from replykit.services.suggestions.state import ObservableValue, SuggestionState


__all__ = [
    "InFlightJob",
    "ObservableValue",
    "RequestSequencer",
    "SuggestionController",
    "SuggestionOrchestrator",
    "SuggestionState",
    "fallback_replies",
    "fallback_rewrites",
]
