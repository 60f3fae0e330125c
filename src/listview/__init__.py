"""Headless list-view engine shared by the admin tables.

The engine is split into small, independently testable pieces:

 - ``field_path``  - dotted path resolution into records
 - ``comparator``  - total-order comparison used by the sorter
 - ``search_filter`` - term matching and highlight spans
 - ``sorter``      - sort state transitions and stable ordering
 - ``paginator``   - clamped page windows and navigation
 - ``debounce``    - cancellable delayed commit of search terms
 - ``table_view``  - Filter -> Sort -> Paginate composition

No Qt import happens in this package; the GUI layer binds it to widgets.
"""

from .comparator import SortOrder, compare_values
from .debounce import ManualScheduler, SearchDebouncer, ThreadingScheduler
from .field_path import ABSENT, FieldAccessor, accessor_for, is_absent, resolve_path
from .paginator import (
    PaginationState,
    create_pagination,
    items_info,
    paginate,
)
from .search_filter import MatchMode, SearchOptions, SearchState, Span, filter_items, highlight_spans
from .sorter import UNSORTED, SortState, apply_sort, request_sort, sort_items
from .table_view import TableSnapshot, TableView

__all__ = [
    "ABSENT",
    "FieldAccessor",
    "ManualScheduler",
    "MatchMode",
    "PaginationState",
    "SearchDebouncer",
    "SearchOptions",
    "SearchState",
    "SortOrder",
    "SortState",
    "Span",
    "TableSnapshot",
    "TableView",
    "ThreadingScheduler",
    "UNSORTED",
    "accessor_for",
    "apply_sort",
    "compare_values",
    "create_pagination",
    "filter_items",
    "highlight_spans",
    "is_absent",
    "items_info",
    "paginate",
    "request_sort",
    "resolve_path",
    "sort_items",
]
