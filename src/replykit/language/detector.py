"""Heuristic language-mode detection for in-progress keyboard text.

Classification runs in priority order and the first rule that fires wins:

1. Blank text is ENGLISH.
2. Any character in the native script block is NATIVE_SCRIPT.
3. Any strong romanized marker (whole word, case-insensitive) is
   ROMANIZED_MIX.
4. At least ``WEAK_MARKER_THRESHOLD`` weak marker hits is ROMANIZED_MIX.
5. Everything else is ENGLISH.

All functions are pure and hold no state, so they are safe to call from any
thread.
"""

from __future__ import annotations

import re
from typing import Final

from replykit.language.constants import (
    NATIVE_SCRIPT_END,
    NATIVE_SCRIPT_START,
    STRONG_ROMANIZED_MARKERS,
    WEAK_MARKER_THRESHOLD,
    WEAK_ROMANIZED_MARKERS,
)
from replykit.schemas.enums import LanguageMode


def _word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


_NATIVE_SCRIPT_PATTERN: Final = re.compile(f"[{NATIVE_SCRIPT_START}-{NATIVE_SCRIPT_END}]")
_STRONG_PATTERN: Final = _word_pattern(STRONG_ROMANIZED_MARKERS)
_WEAK_PATTERN: Final = _word_pattern(WEAK_ROMANIZED_MARKERS)


def has_native_script(text: str) -> bool:
    """Return True if any character falls in the native script block."""
    return _NATIVE_SCRIPT_PATTERN.search(text) is not None


def count_weak_markers(text: str) -> int:
    """Count non-overlapping whole-word weak marker hits."""
    return sum(1 for _ in _WEAK_PATTERN.finditer(text))


def detect(text: str) -> LanguageMode:
    """Classify a text span.

    Args:
        text: Text typed so far.

    Returns:
        The detected language mode; ENGLISH for blank input.
    """
    if not text or text.isspace():
        return LanguageMode.ENGLISH

    if has_native_script(text):
        return LanguageMode.NATIVE_SCRIPT

    if _STRONG_PATTERN.search(text):
        return LanguageMode.ROMANIZED_MIX

    if count_weak_markers(text) >= WEAK_MARKER_THRESHOLD:
        return LanguageMode.ROMANIZED_MIX

    return LanguageMode.ENGLISH


def detect_from_current_input(current_word: str, full_text: str) -> LanguageMode:
    """Classify using the full field text, or the current word if it is blank."""
    text = full_text if full_text and not full_text.isspace() else current_word
    return detect(text)
