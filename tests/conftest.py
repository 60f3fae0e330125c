# Minimal conftest providing a fallback 'qtbot' fixture if pytest-qt is not installed.
# Controller tests only need an application instance and a way to spin the
# event loop for debounce timers; pytest-qt's fixture wins when present.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    try:
        from PyQt6.QtCore import QEventLoop, QTimer
        from PyQt6.QtWidgets import QApplication
    except ImportError:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        app = QApplication.instance() or QApplication(sys.argv)  # type: ignore  # noqa: F841

        class Bot:
            def wait(self, ms):  # mimic pytest-qt API subset
                loop = QEventLoop()
                QTimer.singleShot(ms, loop.quit)
                loop.exec()

        return Bot()


@pytest.fixture
def isolated_services():
    from admin_gui.services.service_locator import services

    saved = {key: services.get(key) for key in services.list_keys()}
    services.clear()
    yield services
    services.clear()
    for key, value in saved.items():
        services.register(key, value)
