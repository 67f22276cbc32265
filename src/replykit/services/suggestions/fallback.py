"""Deterministic local suggestion generator.

Used when the keyboard is configured to stay offline and whenever the remote
service fails. Every function returns exactly three strings.
"""

from __future__ import annotations

from replykit.schemas.enums import LanguageMode, ToneType
from replykit.services.suggestions.constants import (
    BLANK_REWRITE_PLACEHOLDER,
    CASUAL_REWRITE_MAX_CHARS,
    FALLBACK_REPLIES,
)


def fallback_replies(language_mode: LanguageMode, tone: ToneType) -> list[str]:
    """Canned replies for a language mode and tone."""
    return list(FALLBACK_REPLIES[language_mode][tone])


def _shorten(text: str) -> str:
    head = text[:CASUAL_REWRITE_MAX_CHARS].strip()
    return head + "..." if len(text) > CASUAL_REWRITE_MAX_CHARS else head


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _native_script_rewrites(text: str, tone: ToneType) -> list[str]:
    if tone is ToneType.CASUAL:
        return [f"{text} (short)", text, text]
    if tone is ToneType.FRIENDLY:
        return [f"{text}!", f"{text} :)", text]
    return [text, text, text]


def _english_rewrites(text: str, tone: ToneType) -> list[str]:
    if tone is ToneType.CASUAL:
        return [_shorten(text), text, text.lower()]
    if tone is ToneType.FRIENDLY:
        return [f"{text}!", f"Hey, {text}", text]
    return [
        f"Please note: {text}",
        f"I would like to inform you: {text}",
        _capitalize_first(text),
    ]


def _romanized_mix_rewrites(text: str, tone: ToneType) -> list[str]:
    if tone is ToneType.CASUAL:
        return [f"{text} ra", text, text.lower()]
    if tone is ToneType.FRIENDLY:
        return [f"{text}!", f"Hey {text}", text]
    return [text, f"Please {text}", text]


def fallback_rewrites(text: str, language_mode: LanguageMode, tone: ToneType) -> list[str]:
    """Templated rewrites of ``text``.

    Blank input yields the fixed "type something" placeholder triple.
    """
    if not text or text.isspace():
        return list(BLANK_REWRITE_PLACEHOLDER)

    if language_mode is LanguageMode.NATIVE_SCRIPT:
        return _native_script_rewrites(text, tone)
    if language_mode is LanguageMode.ROMANIZED_MIX:
        return _romanized_mix_rewrites(text, tone)
    return _english_rewrites(text, tone)
