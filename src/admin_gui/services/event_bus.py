"""Synchronous event bus for admin table state changes.

Producers (``TableView`` instances, controllers) publish named events; the
pager widgets, result counters and audit panels subscribe. There is no Qt
dependency here so the bus can be exercised headless.

Behaviour:
 - Handlers run in subscription order on the publishing thread
 - A failing handler is recorded in ``errors`` and does not stop the others
 - ``once`` subscriptions are dropped after their first successful call
 - Optional tracing keeps a small ring buffer of recent event summaries
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Deque, Dict, List, Protocol, Tuple

from listview.table_view import (
    EVENT_DATASET_CHANGED,
    EVENT_PAGE_CHANGED,
    EVENT_PAGE_SIZE_CHANGED,
    EVENT_SEARCH_COMMITTED,
    EVENT_SORT_CHANGED,
)

__all__ = [
    "AdminEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class AdminEvent(str, Enum):
    DATASET_CHANGED = EVENT_DATASET_CHANGED
    SEARCH_COMMITTED = EVENT_SEARCH_COMMITTED
    SORT_CHANGED = EVENT_SORT_CHANGED
    PAGE_CHANGED = EVENT_PAGE_CHANGED
    PAGE_SIZE_CHANGED = EVENT_PAGE_SIZE_CHANGED


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: "str | AdminEvent") -> str:
    return name.value if isinstance(name, AdminEvent) else name


class EventBus:
    DEFAULT_TRACE_CAPACITY = 50

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[Tuple[Event, BaseException]] = []
        self._tracing = False
        self._traces: Deque[Tuple[str, float, str]] = deque(maxlen=self.DEFAULT_TRACE_CAPACITY)

    def subscribe(
        self, name: "str | AdminEvent", handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        sub = Subscription(event=_key(name), handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(sub.event, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event, [])
            self._subs[sub.event] = [s for s in bucket if s is not sub]
            if not self._subs[sub.event]:
                del self._subs[sub.event]
        sub.active = False

    def publish(self, name: "str | AdminEvent", payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        # handlers may (un)subscribe while we dispatch, so iterate a copy
        with self._lock:
            subs = list(self._subs.get(key, ()))
            if self._tracing:
                text = "-" if payload is None else str(payload)
                self._traces.append((key, evt.timestamp, text[:37] + "..." if len(text) > 40 else text))
        finished: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
            else:
                if sub.once:
                    finished.append(sub)
        for sub in finished:
            self.unsubscribe(sub)
        return evt

    def subscriber_count(self, name: "str | AdminEvent") -> int:
        with self._lock:
            return len(self._subs.get(_key(name), ()))

    @property
    def errors(self) -> List[Tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # Tracing ----------------------------------------------------------
    def enable_tracing(self, enabled: bool = True) -> None:
        with self._lock:
            self._tracing = enabled

    def recent_traces(self) -> List[Tuple[str, float, str]]:
        with self._lock:
            return list(self._traces)
