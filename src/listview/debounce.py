"""Debounced commit of search terms.

The debouncer separates the *raw* term (updated on every keystroke) from the
*committed* term (the one filtering actually uses). Each update cancels the
pending commit and schedules a new one; only the most recently scheduled
callback may commit. A generation counter backs this up for schedulers whose
cancellation can race with an already-dispatched callback (``threading``).

Timers come from a :class:`Scheduler`, keeping the debouncer independent of
any UI lifecycle:

 - ``ThreadingScheduler``  - ``threading.Timer`` for headless hosts
 - ``ManualScheduler``     - virtual clock advanced explicitly (tests, replay)
 - ``admin_gui.qt_scheduler.QtScheduler`` - single-shot ``QTimer``
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable, List, Optional, Protocol

from .search_filter import SearchState

_logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 300

__all__ = [
    "Cancellable",
    "DEFAULT_DEBOUNCE_MS",
    "ManualScheduler",
    "Scheduler",
    "SearchDebouncer",
    "ThreadingScheduler",
]


class Cancellable(Protocol):
    def cancel(self) -> None: ...  # pragma: no cover - structural


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Cancellable:
        ...  # pragma: no cover - structural


class ThreadingScheduler:
    """Runs callbacks on ``threading.Timer`` daemon threads."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Cancellable:
        timer = threading.Timer(max(delay_ms, 0) / 1000.0, callback)
        timer.daemon = True
        timer.start()
        return timer


@dataclass(order=True)
class _ManualTimer:
    due_ms: int
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic scheduler driven by :meth:`advance`.

    Callbacks due at the same instant fire in scheduling order.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: List[_ManualTimer] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Cancellable:
        timer = _ManualTimer(self.now_ms + max(delay_ms, 0), next(self._seq), callback)
        heapq.heappush(self._queue, timer)
        return timer

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward, firing due callbacks; returns how many fired."""
        target = self.now_ms + max(delta_ms, 0)
        fired = 0
        while self._queue and self._queue[0].due_ms <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now_ms = timer.due_ms
            timer.callback()
            fired += 1
        self.now_ms = target
        return fired

    @property
    def pending_count(self) -> int:
        return sum(1 for timer in self._queue if not timer.cancelled)


class SearchDebouncer:
    """Tracks raw / committed search terms with a quiet-period commit.

    Parameters
    ----------
    scheduler:
        Source of cancellable delayed callbacks.
    debounce_ms:
        Quiet period; values <= 0 commit synchronously.
    on_commit:
        Invoked with the newly committed term. Failures are logged and
        swallowed so a broken listener cannot wedge the search box.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        on_commit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._scheduler = scheduler
        self._debounce_ms = int(debounce_ms)
        self._on_commit = on_commit
        self._lock = RLock()
        self._raw = ""
        self._committed = ""
        self._pending: Optional[Cancellable] = None
        self._generation = 0
        self._disposed = False

    # Introspection ----------------------------------------------------
    @property
    def state(self) -> SearchState:
        with self._lock:
            return SearchState(
                raw_term=self._raw,
                committed_term=self._committed,
                is_pending=self._pending is not None,
            )

    @property
    def raw_term(self) -> str:
        return self._raw

    @property
    def committed_term(self) -> str:
        return self._committed

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    # Public API -------------------------------------------------------
    def update(self, term: str) -> None:
        """Record a keystroke: set the raw term and restart the quiet period."""
        if self._disposed:
            return
        with self._lock:
            self._raw = term
        if self._debounce_ms <= 0:
            self._cancel_pending()
            self._commit(term)
            return
        self.schedule_commit(term)

    def schedule_commit(self, term: str) -> Callable[[], None]:
        """Schedule ``term`` for commit, replacing any pending commit.

        Returns a cancel function for this specific scheduled commit.
        """
        with self._lock:
            if self._disposed:
                return lambda: None
            self._cancel_pending()
            self._generation += 1
            generation = self._generation
            self._pending = self._scheduler.call_later(
                self._debounce_ms, lambda: self._fire(generation, term)
            )

        def cancel() -> None:
            with self._lock:
                if self._generation == generation:
                    self._cancel_pending()

        return cancel

    def flush(self) -> None:
        """Commit the raw term now if a commit is pending."""
        with self._lock:
            if self._pending is None or self._disposed:
                return
            self._cancel_pending()
            term = self._raw
        self._commit(term)

    def clear(self) -> None:
        """Reset raw and committed terms, dropping any pending commit."""
        with self._lock:
            self._cancel_pending()
            self._raw = ""
            had_term = self._committed != ""
        if had_term:
            self._commit("")

    def dispose(self) -> None:
        with self._lock:
            self._cancel_pending()
            self._disposed = True

    # Internal ---------------------------------------------------------
    def _cancel_pending(self) -> None:
        with self._lock:
            handle = self._pending
            self._pending = None
            # invalidates callbacks already dispatched by the host loop
            self._generation += 1
        if handle is None:
            return
        try:
            handle.cancel()
        except Exception:  # pragma: no cover - host timer already torn down
            _logger.debug("debounce timer cancel failed", exc_info=True)

    def _fire(self, generation: int, term: str) -> None:
        with self._lock:
            if self._disposed or generation != self._generation:
                return
            self._pending = None
        self._commit(term)

    def _commit(self, term: str) -> None:
        with self._lock:
            if self._disposed:
                return
            self._committed = term
        _logger.debug("search term committed: %r", term)
        if self._on_commit is None:
            return
        try:
            self._on_commit(term)
        except Exception:
            _logger.exception("search commit listener failed")
