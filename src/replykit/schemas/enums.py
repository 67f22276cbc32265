"""Enumeration types shared by the detector, the API client and the orchestrator.

Member values are the lowercase tokens sent to the remote suggestion service.
"""

from __future__ import annotations

from enum import StrEnum


class LanguageMode(StrEnum):
    """Dominant language, script or dialect of a span of typed text."""

    ENGLISH = "english"
    NATIVE_SCRIPT = "telugu"
    ROMANIZED_MIX = "teluglish"

    @property
    def display_name(self) -> str:
        """Label shown in the keyboard toolbar."""
        return _LANGUAGE_DISPLAY_NAMES[self]


class ToneType(StrEnum):
    """Stylistic register requested for generated text."""

    CASUAL = "casual"
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"

    @property
    def display_name(self) -> str:
        """Label shown in the tone selector."""
        return self.value.capitalize()


class SuggestionKind(StrEnum):
    """The two independent generation modes."""

    REPLY = "reply"
    REWRITE = "rewrite"


_LANGUAGE_DISPLAY_NAMES: dict[LanguageMode, str] = {
    LanguageMode.ENGLISH: "English",
    LanguageMode.NATIVE_SCRIPT: "Telugu",
    LanguageMode.ROMANIZED_MIX: "Teluglish",
}
