"""Application bootstrap for the admin GUI.

``create_app(headless=True)`` registers the core services without touching
Qt, which is how the test-suite and scripted exports start the application.
PyQt6 is imported lazily so headless callers never pay for it.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .services.event_bus import EventBus
from .services.service_locator import ServiceLocator, services
from .services.settings_service import ListViewSettings

_logger = logging.getLogger(__name__)

__all__ = ["AppContext", "create_app"]


@dataclass
class AppContext:
    """References created during bootstrap.

    Attributes
    ----------
    qt_app: The QApplication instance (None when headless)
    headless: Whether Qt initialization was skipped
    services: Global service locator after registration
    settings: Active list view settings
    duration_s: Elapsed bootstrap time in seconds
    """

    qt_app: Optional[Any]
    headless: bool
    services: ServiceLocator
    settings: ListViewSettings
    duration_s: float
    metadata: dict[str, Any] = field(default_factory=dict)


def create_app(
    *, headless: bool = False, environ: Mapping[str, str] | None = None
) -> AppContext:
    started = time.perf_counter()
    settings = ListViewSettings.from_env(environ)
    ListViewSettings.instance = settings
    services.register("event_bus", EventBus(), allow_override=True)
    services.register("settings", settings, allow_override=True)

    qt_app = None
    if not headless:
        from PyQt6.QtWidgets import QApplication

        qt_app = QApplication.instance() or QApplication(sys.argv)
    duration = time.perf_counter() - started
    _logger.info("admin gui bootstrap complete headless=%s in %.3fs", headless, duration)
    return AppContext(
        qt_app=qt_app,
        headless=headless,
        services=services,
        settings=settings,
        duration_s=duration,
        metadata={"settings": settings.as_dict()},
    )
