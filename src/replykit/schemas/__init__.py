"""Shared enums and schema base classes."""

from replykit.schemas.base import DownstreamRequest, DownstreamResponse
from replykit.schemas.enums import LanguageMode, SuggestionKind, ToneType


__all__ = [
    "DownstreamRequest",
    "DownstreamResponse",
    "LanguageMode",
    "SuggestionKind",
    "ToneType",
]
