"""Sort state transitions and stable record ordering.

Sorting always produces a new list; the input sequence is never reordered in
place. Python's ``sorted`` is stable, so rows whose keys compare equal keep
the order they had in the (already filtered) input for both directions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence, Tuple, TypeVar

from .comparator import SortOrder, compare_values, normalize_order
from .field_path import FieldSpec, accessor_for

_logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "SortState",
    "UNSORTED",
    "apply_sort",
    "clear_sort",
    "is_sorted_by",
    "request_sort",
    "sort_by_keys",
    "sort_items",
    "sort_order_for",
]


@dataclass(frozen=True)
class SortState:
    key: Optional[str] = None
    order: SortOrder = SortOrder.ASC

    @property
    def is_sorted(self) -> bool:
        return self.key is not None


UNSORTED = SortState()


def request_sort(state: SortState, key: str) -> SortState:
    """Toggle direction for the active key, otherwise start ascending on ``key``."""
    if state.key == key:
        new_state = SortState(key=key, order=state.order.flipped())
    else:
        new_state = SortState(key=key, order=SortOrder.ASC)
    _logger.debug("sort requested key=%s order=%s", key, new_state.order.value)
    return new_state


def clear_sort() -> SortState:
    return UNSORTED


def sort_order_for(state: SortState, key: str) -> Optional[SortOrder]:
    return state.order if state.key == key else None


def is_sorted_by(state: SortState, key: str) -> bool:
    return state.key == key


def sort_items(
    collection: Sequence[T], key: FieldSpec, order: "SortOrder | str" = SortOrder.ASC
) -> List[T]:
    accessor = accessor_for(key)
    direction = normalize_order(order)
    # resolve once per row rather than once per comparison
    decorated = [(accessor.resolve(item), item) for item in collection]

    def _cmp(left: Tuple[Any, T], right: Tuple[Any, T]) -> int:
        return compare_values(left[0], right[0], direction)

    decorated.sort(key=cmp_to_key(_cmp))
    return [item for _, item in decorated]


def sort_by_keys(
    collection: Sequence[T], keys: Sequence[Tuple[FieldSpec, "SortOrder | str"]]
) -> List[T]:
    """Stable multi-column sort; ``keys`` is ordered from highest priority down."""
    resolved = [(accessor_for(spec), normalize_order(order)) for spec, order in keys]
    if not resolved:
        return list(collection)
    decorated = [
        ([accessor.resolve(item) for accessor, _ in resolved], item) for item in collection
    ]

    def _cmp(left: Tuple[List[Any], T], right: Tuple[List[Any], T]) -> int:
        for index, (_, order) in enumerate(resolved):
            result = compare_values(left[0][index], right[0][index], order)
            if result:
                return result
        return 0

    decorated.sort(key=cmp_to_key(_cmp))
    return [item for _, item in decorated]


def apply_sort(collection: Sequence[T], state: SortState) -> Sequence[T]:
    """Sort per ``state``; the unsorted state hands back ``collection`` itself."""
    if state.key is None:
        return collection
    return sort_items(collection, state.key, state.order)
