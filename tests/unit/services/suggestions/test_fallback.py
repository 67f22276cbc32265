"""Unit tests for local fallback suggestions."""

from __future__ import annotations

import pytest

from replykit.schemas.enums import LanguageMode, ToneType
from replykit.services.suggestions import fallback_replies, fallback_rewrites
from replykit.services.suggestions.constants import BLANK_REWRITE_PLACEHOLDER


pytestmark = pytest.mark.unit


class TestFallbackReplies:
    """Tests for fallback_replies()."""

    @pytest.mark.parametrize("mode", list(LanguageMode))
    @pytest.mark.parametrize("tone", list(ToneType))
    def test_three_non_empty_replies(self, mode: LanguageMode, tone: ToneType) -> None:
        """Should return exactly three non-empty replies for every combination."""
        replies = fallback_replies(mode, tone)

        assert len(replies) == 3
        assert all(replies)

    def test_english_casual(self) -> None:
        """Should return the canned English casual replies."""
        assert fallback_replies(LanguageMode.ENGLISH, ToneType.CASUAL) == [
            "Ok",
            "Sure",
            "Sounds good",
        ]

    def test_romanized_casual(self) -> None:
        """Should return the canned Teluglish casual replies."""
        assert fallback_replies(LanguageMode.ROMANIZED_MIX, ToneType.CASUAL) == [
            "Ok ra",
            "Sare",
            "Cheptha",
        ]

    def test_returns_fresh_list(self) -> None:
        """Should not expose the shared table."""
        first = fallback_replies(LanguageMode.ENGLISH, ToneType.FRIENDLY)
        first.clear()

        assert len(fallback_replies(LanguageMode.ENGLISH, ToneType.FRIENDLY)) == 3


class TestFallbackRewrites:
    """Tests for fallback_rewrites()."""

    @pytest.mark.parametrize("text", ["", "  ", "\n"])
    def test_blank_text_placeholder(self, text: str) -> None:
        """Should return the placeholder triple for blank text."""
        result = fallback_rewrites(text, LanguageMode.ENGLISH, ToneType.PROFESSIONAL)

        assert result == list(BLANK_REWRITE_PLACEHOLDER)
        assert result == ["Type something to rewrite", "Enter text first", "No text to rewrite"]

    def test_english_professional(self) -> None:
        """Should wrap text in formal templates and capitalize it."""
        assert fallback_rewrites("on my way", LanguageMode.ENGLISH, ToneType.PROFESSIONAL) == [
            "Please note: on my way",
            "I would like to inform you: on my way",
            "On my way",
        ]

    def test_english_friendly(self) -> None:
        """Should add friendly decorations."""
        assert fallback_rewrites("on my way", LanguageMode.ENGLISH, ToneType.FRIENDLY) == [
            "on my way!",
            "Hey, on my way",
            "on my way",
        ]

    def test_english_casual_short_text(self) -> None:
        """Should keep short text intact and lowercase the last variant."""
        assert fallback_rewrites("On My Way", LanguageMode.ENGLISH, ToneType.CASUAL) == [
            "On My Way",
            "On My Way",
            "on my way",
        ]

    def test_english_casual_truncates_long_text(self) -> None:
        """Should shorten text longer than twenty characters."""
        text = "I will be there in about ten minutes"

        result = fallback_rewrites(text, LanguageMode.ENGLISH, ToneType.CASUAL)

        assert result[0] == "I will be there in a..."
        assert result[1] == text

    def test_romanized_casual(self) -> None:
        """Should append 'ra' in the casual Teluglish variant."""
        assert fallback_rewrites("Vasthunna", LanguageMode.ROMANIZED_MIX, ToneType.CASUAL) == [
            "Vasthunna ra",
            "Vasthunna",
            "vasthunna",
        ]

    def test_romanized_professional(self) -> None:
        """Should prefix 'Please' in one professional variant."""
        result = fallback_rewrites("call cheyyi", LanguageMode.ROMANIZED_MIX, ToneType.PROFESSIONAL)

        assert result == ["call cheyyi", "Please call cheyyi", "call cheyyi"]

    def test_native_script_friendly(self) -> None:
        """Should decorate native script text without transliterating it."""
        text = "సరే"

        result = fallback_rewrites(text, LanguageMode.NATIVE_SCRIPT, ToneType.FRIENDLY)

        assert result == [f"{text}!", f"{text} :)", text]

    @pytest.mark.parametrize("mode", list(LanguageMode))
    @pytest.mark.parametrize("tone", list(ToneType))
    def test_always_three(self, mode: LanguageMode, tone: ToneType) -> None:
        """Should always return three rewrites."""
        assert len(fallback_rewrites("hello there", mode, tone)) == 3
