"""Shared test fixtures for the replykit test suite.

Provides a controllable clock for cache expiry tests and a scriptable fake
suggestion client whose calls block until the test releases them.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from replykit.cache import SuggestionCache
from replykit.core.config import get_settings
from replykit.schemas.enums import LanguageMode, ToneType
from replykit.services.suggestions import SuggestionOrchestrator, SuggestionState


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class PendingCall:
    """One call made to ``FakeSuggestionClient``."""

    kind: str
    text: str
    tone: ToneType
    language_mode: LanguageMode
    count: int
    release: asyncio.Event = field(default_factory=asyncio.Event)
    result: list[str] | None = None
    error: Exception | None = None
    cancelled: bool = False

    def succeed(self, result: list[str]) -> None:
        self.result = result
        self.release.set()

    def fail(self, error: Exception) -> None:
        self.error = error
        self.release.set()


class FakeSuggestionClient:
    """Suggestion client double.

    By default every call blocks until the test resolves it through
    ``calls[i].succeed(...)`` or ``calls[i].fail(...)``. With ``auto_result``
    set, calls return immediately.
    """

    def __init__(self, auto_result: list[str] | None = None) -> None:
        self.auto_result = auto_result
        self.calls: list[PendingCall] = []
        self.api_key: str | None = None
        self.base_url: str | None = None
        self.shutdown_called = False

    def configure(self, api_key: str | None, base_url: str | None = None) -> None:
        self.api_key = api_key
        self.base_url = base_url

    async def shutdown(self) -> None:
        self.shutdown_called = True

    async def _call(self, call: PendingCall) -> list[str]:
        self.calls.append(call)
        if self.auto_result is not None:
            return list(self.auto_result)
        try:
            await call.release.wait()
        except asyncio.CancelledError:
            call.cancelled = True
            raise
        if call.error is not None:
            raise call.error
        assert call.result is not None
        return call.result

    async def get_replies(
        self,
        context: str,
        tone: ToneType,
        language_mode: LanguageMode,
        count: int = 3,
    ) -> list[str]:
        return await self._call(PendingCall("reply", context, tone, language_mode, count))

    async def get_rewrites(
        self,
        text: str,
        tone: ToneType,
        language_mode: LanguageMode,
        count: int = 3,
    ) -> list[str]:
        return await self._call(PendingCall("rewrite", text, tone, language_mode, count))


async def drain(rounds: int = 5) -> None:
    """Let scheduled tasks run until they block again."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Controllable clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def fake_client() -> FakeSuggestionClient:
    """Blocking fake suggestion client."""
    return FakeSuggestionClient()


@pytest.fixture
def suggestion_state() -> SuggestionState:
    """Fresh observable suggestion state."""
    return SuggestionState()


@pytest.fixture
def orchestrator(
    fake_client: FakeSuggestionClient,
    suggestion_state: SuggestionState,
    fake_clock: FakeClock,
) -> SuggestionOrchestrator:
    """Orchestrator in remote mode wired to the fake client."""
    return SuggestionOrchestrator(
        client=fake_client,
        state=suggestion_state,
        use_fallback=False,
        reply_cache=SuggestionCache("reply", clock=fake_clock),
        rewrite_cache=SuggestionCache("rewrite", clock=fake_clock),
    )


@pytest.fixture
def fallback_orchestrator(suggestion_state: SuggestionState) -> SuggestionOrchestrator:
    """Orchestrator in local fallback mode."""
    return SuggestionOrchestrator(
        client=FakeSuggestionClient(),
        state=suggestion_state,
        use_fallback=True,
    )


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Ensure each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
