"""Request sequencing for last-request-wins delivery.

Every generation request gets an id from a monotonically increasing counter.
A result may only be delivered while its id is still the last one issued; a
newer request makes every older one stale, whether or not cancelling the older
job actually stopped its work in time.
"""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING, Any

from replykit.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Generator


logger = get_logger(__name__)


class InFlightJob:
    """Handle to exactly one generation request.

    Awaiting the job yields the delivered suggestions, or None when the
    request was superseded or cancelled. ``cancel`` never raises and may be
    called any number of times.
    """

    def __init__(
        self,
        request_id: int,
        task: asyncio.Task[list[str] | None] | None = None,
        result: list[str] | None = None,
    ) -> None:
        """Initialize the handle.

        Args:
            request_id: Id issued by the sequencer for this request.
            task: Running fetch task, or None for an already delivered result.
            result: Result of a request delivered synchronously (cache hit).
        """
        self.request_id = request_id
        self._task = task
        self._result = result

    @classmethod
    def delivered(cls, request_id: int, result: list[str]) -> InFlightJob:
        """A job whose result was delivered without scheduling any work."""
        return cls(request_id, task=None, result=result)

    def cancel(self) -> None:
        """Request cancellation of the underlying work."""
        if self._task is not None and not self._task.done():
            self._task.cancel()

    def done(self) -> bool:
        return self._task is None or self._task.done()

    def cancelled(self) -> bool:
        return self._task is not None and self._task.cancelled()

    async def result(self) -> list[str] | None:
        """Wait for the job to finish and return what it delivered."""
        if self._task is None:
            return self._result
        await asyncio.wait({self._task})
        if self._task.cancelled():
            return None
        return self._task.result()

    def __await__(self) -> Generator[Any, None, list[str] | None]:
        return self.result().__await__()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled() else "done" if self.done() else "pending"
        return f"<InFlightJob id={self.request_id} {state}>"


class RequestSequencer:
    """Issues request ids and tracks the single in-flight job.

    The counter is only read and written under a lock and the critical
    sections never await, so overlapping ``begin`` calls can never both be
    judged the latest request. Job cancellation must happen on the event loop
    thread that owns the job's task.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_issued_id = 0
        self._current_job: InFlightJob | None = None

    @property
    def last_issued_id(self) -> int:
        with self._lock:
            return self._last_issued_id

    @property
    def current_job(self) -> InFlightJob | None:
        with self._lock:
            return self._current_job

    def begin(self) -> int:
        """Cancel the in-flight job and issue the id for a new request."""
        with self._lock:
            previous, self._current_job = self._current_job, None
            self._last_issued_id += 1
            request_id = self._last_issued_id
        if previous is not None and not previous.done():
            logger.debug(
                "Cancelling superseded request",
                request_id=previous.request_id,
                superseded_by=request_id,
            )
        if previous is not None:
            previous.cancel()
        return request_id

    def attach(self, job: InFlightJob) -> None:
        """Record ``job`` as in flight if its request is still the latest."""
        with self._lock:
            if job.request_id == self._last_issued_id:
                self._current_job = job
                return
        job.cancel()

    def is_latest(self, request_id: int) -> bool:
        """True if no request has been issued after ``request_id``."""
        with self._lock:
            return request_id == self._last_issued_id

    def cancel_current(self) -> None:
        """Cancel the in-flight job, if any. Safe to call when idle."""
        with self._lock:
            job, self._current_job = self._current_job, None
        if job is not None:
            job.cancel()
