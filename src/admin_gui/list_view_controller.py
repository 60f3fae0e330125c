"""Qt controller exposing a ``TableView`` to widgets.

The controller owns the headless ``TableView`` and re-emits its state as Qt
signals: ``viewChanged`` carries the latest ``TableSnapshot`` after every
state change (including debounced search commits fired by the event loop),
``searchPendingChanged`` toggles while a search term waits for its quiet
period. Pager buttons, the page-size combo box and the search field connect
directly to the slots. When a column layout is supplied, sort requests for
columns not marked sortable are ignored.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from listview.field_path import FieldSpec
from listview.search_filter import SearchOptions
from listview.table_view import TableSnapshot, TableView

from .models import TableColumn
from .qt_scheduler import QtScheduler
from .services.event_bus import EventBus
from .services.service_locator import services
from .services.settings_service import ListViewSettings

_logger = logging.getLogger(__name__)

__all__ = ["ListViewController"]


class ListViewController(QObject):
    viewChanged = pyqtSignal(object)
    searchPendingChanged = pyqtSignal(bool)

    def __init__(
        self,
        data: Sequence[Any] = (),
        search_fields: Sequence[FieldSpec] = (),
        *,
        settings: ListViewSettings | None = None,
        exact_match: bool = False,
        columns: Sequence[TableColumn] = (),
        event_bus: EventBus | None = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        cfg = settings or ListViewSettings.instance
        bus = event_bus if event_bus is not None else services.try_get("event_bus")
        self._pending = False
        self._table: TableView[Any] = TableView(
            data,
            search_fields,
            options=SearchOptions(
                case_sensitive=cfg.search_case_sensitive,
                exact_match=exact_match,
                debounce_ms=cfg.search_debounce_ms,
            ),
            page_size=cfg.default_page_size,
            max_visible_pages=cfg.max_visible_pages,
            scheduler=QtScheduler(self),
            event_bus=bus,
            on_change=self._on_table_changed,
        )
        self._page_size_options = tuple(cfg.page_size_options)
        self._columns = tuple(columns)

    # Accessors ----------------------------------------------------------
    @property
    def table(self) -> TableView[Any]:
        return self._table

    @property
    def page_size_options(self) -> tuple[int, ...]:
        return self._page_size_options

    @property
    def columns(self) -> tuple[TableColumn, ...]:
        return self._columns

    def is_sortable(self, key: str) -> bool:
        """Without a column layout every key is sortable."""
        if not self._columns:
            return True
        return any(col.key == key and col.sortable for col in self._columns)

    def snapshot(self) -> TableSnapshot[Any]:
        return self._table.snapshot()

    # Slots --------------------------------------------------------------
    def setData(self, data: Sequence[Any], reset: bool = False) -> None:
        self._table.set_data(data, reset=reset)

    def setSearchTerm(self, term: str) -> None:
        self._table.set_search_term(term)
        self._emit_view()

    def clearSearch(self) -> None:
        self._table.clear_search()
        self._emit_view()

    def requestSort(self, key: str) -> None:
        if not self.is_sortable(key):
            _logger.debug("ignoring sort request for non-sortable column %s", key)
            return
        self._table.request_sort(key)

    def clearSort(self) -> None:
        self._table.clear_sort()

    def goToPage(self, page: int) -> int:
        return self._table.go_to_page(page)

    def goToFirst(self) -> None:
        self._table.go_to_first()

    def goToLast(self) -> None:
        self._table.go_to_last()

    def goToNext(self) -> None:
        self._table.go_to_next()

    def goToPrevious(self) -> None:
        self._table.go_to_previous()

    def changePageSize(self, size: Any) -> None:
        self._table.change_page_size(size)

    def dispose(self) -> None:
        self._table.dispose()
        self._set_pending(False)

    # Internal -----------------------------------------------------------
    def _on_table_changed(self, reason: str) -> None:
        _logger.debug("list view changed: %s", reason)
        self._emit_view()

    def _emit_view(self) -> None:
        snap = self._table.snapshot()
        self._set_pending(snap.is_searching)
        self.viewChanged.emit(snap)

    def _set_pending(self, pending: bool) -> None:
        if pending == self._pending:
            return
        self._pending = pending
        self.searchPendingChanged.emit(pending)
