"""Constants for suggestion generation.

Contains:
- Canned replies for every language mode and tone
- Placeholder triples shown when there is no text to work with
- Rewrite template limits
"""

from __future__ import annotations

from typing import Final

from replykit.schemas.enums import LanguageMode, ToneType


# =============================================================================
# Local Reply Suggestions
# =============================================================================

FALLBACK_REPLIES: Final[dict[LanguageMode, dict[ToneType, tuple[str, str, str]]]] = {
    LanguageMode.NATIVE_SCRIPT: {
        ToneType.CASUAL: ("సరే", "అవును", "తర్వాత చెప్తా"),
        ToneType.FRIENDLY: ("సరే, బాగుంది!", "అవును, చేద్దాం!", "తప్పకుండా!"),
        ToneType.PROFESSIONAL: ("అలాగే చేస్తాను", "ధన్యవాదాలు", "తెలియజేస్తాను"),
    },
    LanguageMode.ENGLISH: {
        ToneType.CASUAL: ("Ok", "Sure", "Sounds good"),
        ToneType.FRIENDLY: ("Sure, let's do it!", "Sounds great!", "Absolutely!"),
        ToneType.PROFESSIONAL: (
            "Certainly",
            "I will look into it",
            "Thank you for letting me know",
        ),
    },
    LanguageMode.ROMANIZED_MIX: {
        ToneType.CASUAL: ("Ok ra", "Sare", "Cheptha"),
        ToneType.FRIENDLY: ("Sare, bagundi!", "Done ra!", "Definitely chesthanu!"),
        ToneType.PROFESSIONAL: ("Okay, I will do", "Sure, will update", "Thanks cheppinanduku"),
    },
}


# =============================================================================
# Placeholders
# =============================================================================

BLANK_REWRITE_PLACEHOLDER: Final[tuple[str, str, str]] = (
    "Type something to rewrite",
    "Enter text first",
    "No text to rewrite",
)

EMPTY_REPLY_CONTEXT_PLACEHOLDER: Final[tuple[str, str, str]] = (
    "Type something first",
    "No text to reply to",
    "Enter text",
)

EMPTY_REWRITE_CONTEXT_PLACEHOLDER: Final[tuple[str, str, str]] = (
    "Type something first",
    "No text to rewrite",
    "Enter text",
)


# =============================================================================
# Rewrite Templates
# =============================================================================

CASUAL_REWRITE_MAX_CHARS: Final[int] = 20
