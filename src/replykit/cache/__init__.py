"""In-memory suggestion caching.

This module provides:
- A bounded, TTL-based LRU cache, one instance per suggestion kind
- Deterministic cache key construction
"""

from replykit.cache.keys import normalize_text, suggestion_cache_key
from replykit.cache.suggestion_cache import (
    DEFAULT_CAPACITY,
    DEFAULT_TTL_SECONDS,
    SuggestionCache,
)


__all__ = [
    "DEFAULT_CAPACITY",
    "DEFAULT_TTL_SECONDS",
    "SuggestionCache",
    "normalize_text",
    "suggestion_cache_key",
]
