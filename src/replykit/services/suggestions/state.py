"""Observable suggestion state read by the keyboard UI.

The orchestrator is the only writer of the loading flag and the suggestion
list; the UI subscribes and renders. Values are confined to the event loop
thread: listeners run synchronously inside the setter.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Generic, TypeVar

from replykit.language import detect
from replykit.observability.logging import get_logger
from replykit.schemas.enums import LanguageMode, ToneType


if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Iterable


logger = get_logger(__name__)

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """A value that pushes every change to its subscribers."""

    def __init__(self, name: str, initial: T) -> None:
        self.name = name
        self._value = initial
        self._listeners: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> bool:
        """Store ``value`` and notify subscribers. Returns False if unchanged."""
        if value == self._value:
            return False
        self._value = value
        for listener in list(self._listeners):
            self._notify(listener, value)
        return True

    def _notify(self, listener: Callable[[T], None], value: T) -> None:
        try:
            listener(value)
        except Exception:
            logger.exception("State listener failed", state=self.name)

    def subscribe(
        self,
        listener: Callable[[T], None],
        *,
        emit_current: bool = True,
    ) -> Callable[[], None]:
        """Register ``listener`` and return a function that unregisters it.

        Args:
            listener: Called with each new value.
            emit_current: Also call it immediately with the current value.
        """
        self._listeners.append(listener)
        if emit_current:
            self._notify(listener, self._value)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def watch(self) -> AsyncIterator[T]:
        """Yield the current value, then every change, until the consumer stops."""
        queue: asyncio.Queue[T] = asyncio.Queue()
        unsubscribe = self.subscribe(queue.put_nowait)
        try:
            while True:
                yield await queue.get()
        finally:
            unsubscribe()

    def __repr__(self) -> str:
        return f"<ObservableValue {self.name}={self._value!r}>"


class SuggestionState:
    """Everything the suggestion strip and toolbar render.

    Attributes:
        current_tone: Tone picked in the tone selector.
        detected_language_mode: Mode shown in the toolbar badge.
        is_loading: True while a generation request is pending.
        suggestions: Suggestions currently offered.
        suggestions_visible: Whether the suggestion strip is shown.
    """

    def __init__(self) -> None:
        self.current_tone: ObservableValue[ToneType] = ObservableValue(
            "current_tone", ToneType.CASUAL
        )
        self.detected_language_mode: ObservableValue[LanguageMode] = ObservableValue(
            "detected_language_mode", LanguageMode.ENGLISH
        )
        self.is_loading: ObservableValue[bool] = ObservableValue("is_loading", False)
        self.suggestions: ObservableValue[tuple[str, ...]] = ObservableValue(
            "suggestions", ()
        )
        self.suggestions_visible: ObservableValue[bool] = ObservableValue(
            "suggestions_visible", False
        )

    def set_tone(self, tone: ToneType) -> None:
        self.current_tone.set(tone)

    def update_detected_language(self, text: str) -> LanguageMode:
        """Detect the language of ``text`` and publish it."""
        mode = detect(text)
        self.detected_language_mode.set(mode)
        return mode

    def set_loading(self, loading: bool) -> None:
        self.is_loading.set(loading)

    def set_suggestions(self, suggestions: Iterable[str]) -> None:
        """Publish suggestions; the strip is visible when there are any."""
        items = tuple(suggestions)
        self.suggestions.set(items)
        self.suggestions_visible.set(bool(items))

    def clear_suggestions(self) -> None:
        self.suggestions.set(())
        self.suggestions_visible.set(False)

    def hide_suggestions(self) -> None:
        """Hide the strip but keep the suggestions for later."""
        self.suggestions_visible.set(False)
