"""Cache key construction for generated suggestions."""

from __future__ import annotations

import hashlib
import unicodedata

from replykit.schemas.enums import LanguageMode, SuggestionKind, ToneType


def normalize_text(text: str) -> str:
    """Normalize text to Unicode NFC.

    Whitespace and case are preserved because rewrites echo the typed text.
    """
    return unicodedata.normalize("NFC", text)


def suggestion_cache_key(
    kind: SuggestionKind,
    text: str,
    language_mode: LanguageMode,
    tone: ToneType,
) -> str:
    """Build the cache key for a generation request.

    The key is the kind tag followed by the hex SHA-256 of
    ``"{text}:{MODE}:{TONE}"``, so equal requests always share a key.

    Example:
        key = suggestion_cache_key(SuggestionKind.REPLY, "hi", mode, tone)
        # Returns: "reply:9f86d0..."
    """
    payload = f"{normalize_text(text)}:{language_mode.name}:{tone.name}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    return f"{kind.value}:{digest}"
