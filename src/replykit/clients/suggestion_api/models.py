"""Request/response models for the suggestion service."""

from __future__ import annotations

from pydantic import Field

from replykit.schemas.base import DownstreamRequest, DownstreamResponse


class ReplyRequest(DownstreamRequest):
    """Request body for ``POST /reply``."""

    context: str = Field(..., description="Text the user is replying to or typing")
    tone: str = Field(..., description="Tone token, e.g. 'casual'")
    language_mode: str = Field(..., description="Language token, e.g. 'teluglish'")
    count: int = Field(default=3, ge=1, description="Number of suggestions wanted")


class ReplyResponse(DownstreamResponse):
    """Response from ``POST /reply``."""

    suggestions: list[str] = Field(..., description="Suggested replies")
    language_used: str | None = Field(
        default=None,
        description="Language the service actually generated in",
    )


class RewriteRequest(DownstreamRequest):
    """Request body for ``POST /rewrite``."""

    text: str = Field(..., description="Text to rewrite")
    tone: str = Field(..., description="Tone token, e.g. 'professional'")
    language_mode: str = Field(..., description="Language token, e.g. 'english'")
    count: int = Field(default=3, ge=1, description="Number of rewrites wanted")


class RewriteResponse(DownstreamResponse):
    """Response from ``POST /rewrite``."""

    rewrites: list[str] = Field(..., description="Rewritten variants")
    language_used: str | None = Field(default=None)


class ErrorResponse(DownstreamResponse):
    """Error body returned with non-2xx responses."""

    error: str
    code: str | None = None
