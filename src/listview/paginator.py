"""Windowed pagination state.

``PaginationState`` is an immutable value; every navigation operation returns
a new state. The constructor itself enforces the clamping invariant, so a
state can never expose ``current_page`` outside ``[1, max(total_pages, 1)]``
and ``start_index`` / ``end_index`` are always safe to read.

Page size changes keep the first row of the previous page visible::

    new_page = ceil(((old_page - 1) * old_page_size + 1) / new_page_size)

When the page size and the item count change together, the page-size
repositioning runs first and the item-count re-clamp second.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Generic, List, Sequence, Tuple, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
DEFAULT_MAX_VISIBLE_PAGES = 5

__all__ = [
    "DEFAULT_MAX_VISIBLE_PAGES",
    "DEFAULT_PAGE_SIZE",
    "PageResult",
    "PaginationState",
    "change_page_size",
    "change_page_size_and_total",
    "coerce_page_size",
    "create_pagination",
    "go_to_first",
    "go_to_last",
    "go_to_next",
    "go_to_page",
    "go_to_previous",
    "items_info",
    "paginate",
    "with_total_items",
]


def coerce_page_size(value: Any) -> int:
    """Return a usable page size; anything not an integer >= 1 becomes 1."""
    size: int | None = None
    if isinstance(value, bool):
        size = None
    elif isinstance(value, int):
        size = value
    elif isinstance(value, float) and value.is_integer():
        size = int(value)
    elif isinstance(value, str) and value.strip().lstrip("-").isdigit():
        size = int(value.strip())
    if size is None or size < 1:
        _logger.warning("invalid page size %r coerced to 1", value)
        return 1
    return size


def _coerce_page(value: Any) -> int:
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return 1
        if math.isinf(value):
            return 1 if value < 0 else 2**31
        return int(value)
    return 1


def _total_pages(total_items: int, page_size: int) -> int:
    if total_items <= 0:
        return 0
    return -(-total_items // page_size)


@dataclass(frozen=True)
class PaginationState:
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0

    def __post_init__(self) -> None:
        size = coerce_page_size(self.page_size)
        total = max(0, int(self.total_items))
        last = max(_total_pages(total, size), 1)
        page = min(max(_coerce_page(self.current_page), 1), last)
        object.__setattr__(self, "page_size", size)
        object.__setattr__(self, "total_items", total)
        object.__setattr__(self, "current_page", page)

    @property
    def total_pages(self) -> int:
        return _total_pages(self.total_items, self.page_size)

    @property
    def start_index(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def end_index(self) -> int:
        return min(self.start_index + self.page_size, self.total_items)

    @property
    def can_go_to_previous(self) -> bool:
        return self.current_page > 1

    @property
    def can_go_to_next(self) -> bool:
        return self.current_page < self.total_pages

    def visible_pages(self, max_visible: int = DEFAULT_MAX_VISIBLE_PAGES) -> List[int]:
        """Page numbers for pager buttons, centered on the current page.

        The window is shifted at either edge so it never leaves
        ``[1, total_pages]`` and holds ``min(total_pages, max_visible)`` pages.
        """
        width = min(self.total_pages, max(1, int(max_visible)))
        if width == 0:
            return []
        start = self.current_page - max(1, int(max_visible)) // 2
        start = max(1, min(start, self.total_pages - width + 1))
        return list(range(start, start + width))


@dataclass(frozen=True)
class PageResult(Generic[T]):
    items: List[T]
    state: PaginationState


def create_pagination(
    total_items: int = 0, page_size: Any = DEFAULT_PAGE_SIZE, initial_page: int = 1
) -> PaginationState:
    return PaginationState(current_page=initial_page, page_size=page_size, total_items=total_items)


def go_to_page(state: PaginationState, page: Any) -> PaginationState:
    """Clamp ``page`` into range; the returned state reports the page actually used."""
    new_state = replace(state, current_page=page)
    if new_state.current_page != _coerce_page(page):
        _logger.debug("page %r clamped to %d", page, new_state.current_page)
    return new_state


def go_to_first(state: PaginationState) -> PaginationState:
    return replace(state, current_page=1)


def go_to_last(state: PaginationState) -> PaginationState:
    return replace(state, current_page=max(state.total_pages, 1))


def go_to_next(state: PaginationState) -> PaginationState:
    if not state.can_go_to_next:
        return state
    return replace(state, current_page=state.current_page + 1)


def go_to_previous(state: PaginationState) -> PaginationState:
    if not state.can_go_to_previous:
        return state
    return replace(state, current_page=state.current_page - 1)


def _repositioned_page(state: PaginationState, new_size: int) -> int:
    first_item = (state.current_page - 1) * state.page_size + 1
    return -(-first_item // new_size)


def change_page_size(state: PaginationState, page_size: Any) -> PaginationState:
    size = coerce_page_size(page_size)
    return PaginationState(
        current_page=_repositioned_page(state, size),
        page_size=size,
        total_items=state.total_items,
    )


def with_total_items(state: PaginationState, total_items: int) -> PaginationState:
    if total_items == state.total_items:
        return state
    return replace(state, total_items=total_items)


def change_page_size_and_total(
    state: PaginationState, page_size: Any, total_items: int
) -> PaginationState:
    """Apply a page-size change and an item-count change from the same update."""
    size = coerce_page_size(page_size)
    # reposition against the old item count, then re-clamp to the new one
    page = _repositioned_page(state, size)
    return PaginationState(current_page=page, page_size=size, total_items=total_items)


def paginate(collection: Sequence[T], state: PaginationState) -> PageResult[T]:
    """Slice ``collection`` for the current page, re-clamping to its length first."""
    effective = with_total_items(state, len(collection))
    items = list(collection[effective.start_index : effective.end_index])
    return PageResult(items=items, state=effective)


def items_info(state: PaginationState) -> Tuple[int, int, int]:
    """One-based ``(start, end, total)`` for "showing X-Y of Z" labels."""
    start = 0 if state.total_items == 0 else state.start_index + 1
    return start, state.end_index, state.total_items
