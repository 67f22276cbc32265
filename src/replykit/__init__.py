"""Reply and rewrite suggestions for a software keyboard.

Detects the language being typed, fetches suggestions from a remote service
or a local generator, caches them and delivers only the latest result.
"""

from replykit.language import detect, detect_from_current_input
from replykit.schemas.enums import LanguageMode, SuggestionKind, ToneType
from replykit.services.suggestions import (
    InFlightJob,
    SuggestionController,
    SuggestionOrchestrator,
    SuggestionState,
)


__version__ = "0.1.0"

__all__ = [
    "InFlightJob",
    "LanguageMode",
    "SuggestionController",
    "SuggestionKind",
    "SuggestionOrchestrator",
    "SuggestionState",
    "ToneType",
    "__version__",
    "detect",
    "detect_from_current_input",
]
