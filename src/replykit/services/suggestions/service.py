"""Suggestion orchestrator for keyboard reply and rewrite generation.

Provides methods for:
- Reply and rewrite generation with per-kind in-memory caching
- Remote generation with transparent fallback to local suggestions
- Last-request-wins delivery to the observable suggestion state
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from replykit.cache import SuggestionCache, suggestion_cache_key
from replykit.clients.suggestion_api import SuggestionApiClient, SuggestionApiError
from replykit.observability.logging import bind_context, get_logger
from replykit.schemas.enums import LanguageMode, SuggestionKind, ToneType
from replykit.services.suggestions.fallback import fallback_replies, fallback_rewrites
from replykit.services.suggestions.sequencer import InFlightJob, RequestSequencer
from replykit.services.suggestions.state import SuggestionState


if TYPE_CHECKING:
    from collections.abc import Callable

    from replykit.clients.suggestion_api import SuggestionClientProtocol
    from replykit.core.config import Settings

    ResultCallback = Callable[[list[str]], None]


logger = get_logger(__name__)


class SuggestionOrchestrator:
    """Answers "generate replies/rewrites" requests from the keyboard.

    Orchestrates:
    1. Cache lookups (one cache per suggestion kind)
    2. Cancellation of the previous in-flight request
    3. Remote generation, or local fallback when configured or on failure
    4. Delivery to ``SuggestionState`` and the caller's callback, only if the
       request is still the latest one

    Replies and rewrites share one sequencer because they feed the same
    suggestion strip: a new rewrite supersedes a pending reply and vice versa.
    Cache hits take a fresh id too, so a hit supersedes any pending request.

    Delivery side effects, in order: cache write, loading cleared, suggestions
    published, ``on_result`` invoked. A superseded or cancelled request has no
    side effects at all.

    The ``generate_*`` methods must be called from the thread running the
    event loop.
    """

    def __init__(
        self,
        client: SuggestionClientProtocol | None = None,
        state: SuggestionState | None = None,
        *,
        use_fallback: bool = True,
        count: int = 3,
        reply_cache: SuggestionCache | None = None,
        rewrite_cache: SuggestionCache | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            client: Remote suggestion client (an HTTP client is built if None).
            state: Observable state to publish into (a fresh one if None).
            use_fallback: Serve local suggestions instead of calling the client.
            count: Number of suggestions requested from the service.
            reply_cache: Cache for replies (default capacity and TTL if None).
            rewrite_cache: Cache for rewrites (default capacity and TTL if None).

        Raises:
            ValueError: If ``count`` is below one.
        """
        if count < 1:
            msg = f"count must be at least 1, got {count}"
            raise ValueError(msg)

        self._client = client if client is not None else SuggestionApiClient()
        self.state = state if state is not None else SuggestionState()
        self._use_fallback = use_fallback
        self.count = count
        self._caches: dict[SuggestionKind, SuggestionCache] = {
            SuggestionKind.REPLY: reply_cache or SuggestionCache("reply"),
            SuggestionKind.REWRITE: rewrite_cache or SuggestionCache("rewrite"),
        }
        self._sequencer = RequestSequencer()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        state: SuggestionState | None = None,
    ) -> SuggestionOrchestrator:
        """Build an orchestrator, its HTTP client and caches from settings."""
        return cls(
            client=SuggestionApiClient.from_settings(settings),
            state=state,
            use_fallback=settings.suggestions.use_fallback,
            count=settings.suggestions.count,
            reply_cache=SuggestionCache(
                "reply",
                capacity=settings.cache.capacity,
                ttl=settings.cache.ttl_seconds,
            ),
            rewrite_cache=SuggestionCache(
                "rewrite",
                capacity=settings.cache.capacity,
                ttl=settings.cache.ttl_seconds,
            ),
        )

    @property
    def use_fallback(self) -> bool:
        return self._use_fallback

    @property
    def reply_cache(self) -> SuggestionCache:
        return self._caches[SuggestionKind.REPLY]

    @property
    def rewrite_cache(self) -> SuggestionCache:
        return self._caches[SuggestionKind.REWRITE]

    @property
    def sequencer(self) -> RequestSequencer:
        return self._sequencer

    def configure(
        self,
        use_fallback: bool,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> None:
        """Apply changed preferences to subsequent requests.

        In-flight requests keep the mode they were dispatched with.
        """
        self._use_fallback = use_fallback
        self._client.configure(api_key, base_url)
        logger.info(
            "Suggestion orchestrator configured",
            use_fallback=use_fallback,
            has_api_key=bool(api_key),
        )

    def generate_replies(
        self,
        text: str,
        language_mode: LanguageMode,
        tone: ToneType,
        on_result: ResultCallback | None = None,
    ) -> InFlightJob:
        """Generate reply suggestions for ``text``.

        Returns:
            Handle resolving to the delivered replies, or None if superseded.
        """
        return self._generate(SuggestionKind.REPLY, text, language_mode, tone, on_result)

    def generate_rewrites(
        self,
        text: str,
        language_mode: LanguageMode,
        tone: ToneType,
        on_result: ResultCallback | None = None,
    ) -> InFlightJob:
        """Generate rewrites of ``text``.

        Returns:
            Handle resolving to the delivered rewrites, or None if superseded.
        """
        return self._generate(SuggestionKind.REWRITE, text, language_mode, tone, on_result)

    def cancel_current_request(self) -> None:
        """Cancel the in-flight request and clear the loading flag.

        Suggestions already delivered stay on screen.
        """
        self._sequencer.cancel_current()
        self.state.set_loading(False)

    def clear_cache(self) -> None:
        """Drop every cached reply and rewrite."""
        for cache in self._caches.values():
            cache.invalidate_all()
        logger.info("Suggestion caches cleared")

    async def aclose(self) -> None:
        """Cancel pending work and release the remote client."""
        self._sequencer.cancel_current()
        await self._client.shutdown()

    def _generate(
        self,
        kind: SuggestionKind,
        text: str,
        language_mode: LanguageMode,
        tone: ToneType,
        on_result: ResultCallback | None,
    ) -> InFlightJob:
        request_id = self._sequencer.begin()
        self.state.set_loading(True)

        cache_key = suggestion_cache_key(kind, text, language_mode, tone)
        cached = self._caches[kind].get(cache_key)
        if cached is not None:
            logger.debug("Cache hit", kind=kind.value, request_id=request_id)
            self._deliver(cached, on_result)
            return InFlightJob.delivered(request_id, cached)

        logger.debug("Cache miss", kind=kind.value, request_id=request_id)
        task = asyncio.get_running_loop().create_task(
            self._run(
                request_id,
                kind,
                cache_key,
                text,
                language_mode,
                tone,
                on_result,
                use_fallback=self._use_fallback,
            ),
            name=f"suggestions-{kind.value}-{request_id}",
        )
        job = InFlightJob(request_id, task)
        self._sequencer.attach(job)
        return job

    async def _run(
        self,
        request_id: int,
        kind: SuggestionKind,
        cache_key: str,
        text: str,
        language_mode: LanguageMode,
        tone: ToneType,
        on_result: ResultCallback | None,
        *,
        use_fallback: bool,
    ) -> list[str] | None:
        # Task-local: each task runs in its own copy of the context
        bind_context(request_id=request_id, kind=kind.value)
        suggestions = await self._fetch(kind, text, language_mode, tone, use_fallback=use_fallback)

        if not self._sequencer.is_latest(request_id):
            logger.debug("Discarding superseded suggestions")
            return None

        self._caches[kind].put(cache_key, suggestions)
        self._deliver(suggestions, on_result)
        return suggestions

    async def _fetch(
        self,
        kind: SuggestionKind,
        text: str,
        language_mode: LanguageMode,
        tone: ToneType,
        *,
        use_fallback: bool,
    ) -> list[str]:
        """Get suggestions from the service, or locally on any service failure."""
        if use_fallback:
            # Keep local generation a cancellable suspension point
            await asyncio.sleep(0)
            return self._local_suggestions(kind, text, language_mode, tone)

        try:
            if kind is SuggestionKind.REPLY:
                return await self._client.get_replies(text, tone, language_mode, self.count)
            return await self._client.get_rewrites(text, tone, language_mode, self.count)
        except SuggestionApiError as e:
            logger.warning(
                "Suggestion service failed, using local suggestions",
                error_type=type(e).__name__,
                error=str(e),
            )
            return self._local_suggestions(kind, text, language_mode, tone)
        except Exception:
            logger.exception("Unexpected suggestion client failure, using local suggestions")
            return self._local_suggestions(kind, text, language_mode, tone)

    @staticmethod
    def _local_suggestions(
        kind: SuggestionKind,
        text: str,
        language_mode: LanguageMode,
        tone: ToneType,
    ) -> list[str]:
        if kind is SuggestionKind.REPLY:
            return fallback_replies(language_mode, tone)
        return fallback_rewrites(text, language_mode, tone)

    def _deliver(self, suggestions: list[str], on_result: ResultCallback | None) -> None:
        self.state.set_loading(False)
        self.state.set_suggestions(suggestions)
        if on_result is None:
            return
        try:
            on_result(list(suggestions))
        except Exception:
            logger.exception("Suggestion result callback failed")
