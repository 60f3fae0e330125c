"""Filter -> Sort -> Paginate composition for a single table.

``TableView`` owns the per-view state (search, sort, pagination) for one
dataset and renders :class:`TableSnapshot` objects on demand. The pipeline
order is fixed: the dataset is filtered by the committed search term, the
filtered rows are sorted, and the sorted rows are paginated. Filter + sort
results are cached until the dataset, committed term or sort state changes.

State transitions optionally publish events on an event bus (any object with
``publish(name, payload)``) and call an ``on_change(reason)`` hook so a host
such as the Qt controller can re-render after asynchronous search commits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from .debounce import Scheduler, SearchDebouncer, ThreadingScheduler
from .field_path import FieldSpec
from .paginator import (
    DEFAULT_MAX_VISIBLE_PAGES,
    DEFAULT_PAGE_SIZE,
    PaginationState,
    change_page_size_and_total,
    create_pagination,
    go_to_first,
    go_to_last,
    go_to_next,
    go_to_page,
    go_to_previous,
    items_info,
    paginate,
    with_total_items,
)
from .search_filter import SearchOptions, SearchState, filter_items
from .sorter import UNSORTED, SortState, apply_sort
from .sorter import request_sort as _next_sort_state

_logger = logging.getLogger(__name__)

T = TypeVar("T")

EVENT_DATASET_CHANGED = "dataset_changed"
EVENT_SEARCH_COMMITTED = "search_committed"
EVENT_SORT_CHANGED = "sort_changed"
EVENT_PAGE_CHANGED = "page_changed"
EVENT_PAGE_SIZE_CHANGED = "page_size_changed"

__all__ = [
    "EVENT_DATASET_CHANGED",
    "EVENT_PAGE_CHANGED",
    "EVENT_PAGE_SIZE_CHANGED",
    "EVENT_SEARCH_COMMITTED",
    "EVENT_SORT_CHANGED",
    "TableSnapshot",
    "TableView",
]


@dataclass(frozen=True)
class TableSnapshot(Generic[T]):
    """Render-ready slice plus pager / result-count metadata."""

    rows: List[T]
    current_page: int
    total_pages: int
    page_size: int
    match_count: int
    is_searching: bool
    can_go_to_next: bool
    can_go_to_previous: bool
    visible_pages: List[int]
    items_info: Tuple[int, int, int]
    sort_state: SortState
    search_state: SearchState = field(default_factory=SearchState)


class TableView(Generic[T]):
    def __init__(
        self,
        data: Sequence[T] = (),
        search_fields: Sequence[FieldSpec] = (),
        *,
        options: SearchOptions = SearchOptions(),
        page_size: Any = DEFAULT_PAGE_SIZE,
        max_visible_pages: int = DEFAULT_MAX_VISIBLE_PAGES,
        sort_state: SortState = UNSORTED,
        scheduler: Optional[Scheduler] = None,
        event_bus: Any | None = None,
        on_change: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._lock = RLock()
        self._data: Sequence[T] = data
        self._fields: Tuple[FieldSpec, ...] = tuple(search_fields)
        self._options = options
        self._max_visible = max_visible_pages
        self._default_page_size = page_size
        self._sort = sort_state
        self._pagination = create_pagination(len(data), page_size)
        self._event_bus = event_bus
        self._on_change = on_change
        self._rows: Optional[Sequence[T]] = None
        self._debouncer = SearchDebouncer(
            scheduler or ThreadingScheduler(),
            options.debounce_ms,
            on_commit=self._on_search_committed,
        )

    # Accessors ----------------------------------------------------------
    @property
    def sort_state(self) -> SortState:
        return self._sort

    @property
    def pagination(self) -> PaginationState:
        with self._lock:
            self._sync_total()
            return self._pagination

    @property
    def search_state(self) -> SearchState:
        return self._debouncer.state

    @property
    def search_fields(self) -> Tuple[FieldSpec, ...]:
        return self._fields

    @property
    def options(self) -> SearchOptions:
        return self._options

    # Dataset ------------------------------------------------------------
    def set_data(self, data: Sequence[T], *, reset: bool = False) -> None:
        """Swap in a fresh dataset snapshot.

        With ``reset`` the view returns to page 1, unsorted, with an empty
        search; otherwise the current page is only re-clamped.
        """
        with self._lock:
            self._data = data
            self._rows = None
            if reset:
                self._debouncer.clear()
                self._sort = UNSORTED
                self._pagination = create_pagination(len(data), self._default_page_size)
            self._sync_total()
            payload = {"count": len(data), "reset": reset}
        self._notify(EVENT_DATASET_CHANGED, payload)

    # Search -------------------------------------------------------------
    def set_search_term(self, term: str) -> None:
        self._debouncer.update(term)

    def flush_search(self) -> None:
        self._debouncer.flush()

    def clear_search(self) -> None:
        self._debouncer.clear()

    def _on_search_committed(self, term: str) -> None:
        with self._lock:
            self._rows = None
            self._sync_total()
            match_count = len(self._ensure_rows())
        self._notify(EVENT_SEARCH_COMMITTED, {"term": term, "match_count": match_count})

    # Sorting ------------------------------------------------------------
    def request_sort(self, key: str) -> SortState:
        with self._lock:
            self._sort = _next_sort_state(self._sort, key)
            self._rows = None
            state = self._sort
        self._notify(EVENT_SORT_CHANGED, {"key": state.key, "order": state.order.value})
        return state

    def clear_sort(self) -> None:
        with self._lock:
            if self._sort == UNSORTED:
                return
            self._sort = UNSORTED
            self._rows = None
        self._notify(EVENT_SORT_CHANGED, {"key": None, "order": None})

    # Pagination ---------------------------------------------------------
    def _navigate(self, step: Callable[[PaginationState], PaginationState]) -> int:
        with self._lock:
            self._sync_total()
            before = self._pagination.current_page
            self._pagination = step(self._pagination)
            page = self._pagination.current_page
        if page != before:
            self._notify(EVENT_PAGE_CHANGED, {"page": page})
        return page

    def go_to_page(self, page: Any) -> int:
        """Navigate to ``page`` (clamped) and return the page now shown."""
        return self._navigate(lambda state: go_to_page(state, page))

    def go_to_first(self) -> int:
        return self._navigate(go_to_first)

    def go_to_last(self) -> int:
        return self._navigate(go_to_last)

    def go_to_next(self) -> int:
        return self._navigate(go_to_next)

    def go_to_previous(self) -> int:
        return self._navigate(go_to_previous)

    def change_page_size(self, page_size: Any) -> int:
        with self._lock:
            total = len(self._ensure_rows())
            # page-size repositioning first, pending item-count change second
            self._pagination = change_page_size_and_total(self._pagination, page_size, total)
            state = self._pagination
        self._notify(
            EVENT_PAGE_SIZE_CHANGED, {"page_size": state.page_size, "page": state.current_page}
        )
        return state.current_page

    # Rendering ----------------------------------------------------------
    def snapshot(self) -> TableSnapshot[T]:
        with self._lock:
            rows = self._ensure_rows()
            page = paginate(rows, self._pagination)
            self._pagination = page.state
            state = page.state
            search = self._debouncer.state
            return TableSnapshot(
                rows=page.items,
                current_page=state.current_page,
                total_pages=state.total_pages,
                page_size=state.page_size,
                match_count=len(rows),
                is_searching=search.is_pending,
                can_go_to_next=state.can_go_to_next,
                can_go_to_previous=state.can_go_to_previous,
                visible_pages=state.visible_pages(self._max_visible),
                items_info=items_info(state),
                sort_state=self._sort,
                search_state=search,
            )

    def dispose(self) -> None:
        """Cancel any pending search commit; later timer callbacks are ignored."""
        self._debouncer.dispose()
        self._on_change = None

    # Internal -----------------------------------------------------------
    def _ensure_rows(self) -> Sequence[T]:
        if self._rows is None:
            filtered = filter_items(
                self._data, self._fields, self._debouncer.committed_term, self._options
            )
            self._rows = apply_sort(filtered, self._sort)
        return self._rows

    def _sync_total(self) -> None:
        self._pagination = with_total_items(self._pagination, len(self._ensure_rows()))

    def _notify(self, name: str, payload: Any) -> None:
        _logger.debug("table view %s %s", name, payload)
        if self._event_bus is not None:
            try:
                self._event_bus.publish(name, payload)
            except Exception:  # pragma: no cover - bus implementations isolate handlers
                _logger.exception("table view event publish failed: %s", name)
        if self._on_change is not None:
            try:
                self._on_change(name)
            except Exception:
                _logger.exception("table view change hook failed: %s", name)
