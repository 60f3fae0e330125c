"""QTimer-backed scheduler for the search debouncer.

Every ``call_later`` creates its own single-shot ``QTimer`` parented to the
scheduler's owner, so destroying the owning widget also stops any timer that
has not fired yet.
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer

__all__ = ["QtScheduler", "QtTimerHandle"]


class QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer: Optional[QTimer] = timer

    def cancel(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()


class QtScheduler:
    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(int(delay_ms), 0))
        handle = QtTimerHandle(timer)

        def _fire() -> None:
            handle.cancel()
            callback()

        timer.timeout.connect(_fire)  # type: ignore
        timer.start()
        return handle
