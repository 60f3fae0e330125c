"""Total-order value comparison for table sorting.

Rules, applied in order:

 1. both values absent -> equal
 2. one absent -> absent is the smaller value (so it leads ascending lists
    and trails descending ones)
 3. both dates/datetimes -> compared by instant
 4. both numeric -> compared numerically
 5. otherwise -> case-folded string comparison

The direction is applied last by negating the result, which keeps every rule
symmetric between ``asc`` and ``desc``.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any

from .field_path import is_absent

__all__ = ["SortOrder", "compare_values", "normalize_order"]

_EPOCH = datetime(1970, 1, 1)


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


def normalize_order(order: "SortOrder | str") -> SortOrder:
    if isinstance(order, SortOrder):
        return order
    return SortOrder.DESC if str(order).lower() == SortOrder.DESC.value else SortOrder.ASC


def _missing(value: Any) -> bool:
    if is_absent(value):
        return True
    # NaN has no position in a numeric order; treat it like a missing value
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def _is_temporal(value: Any) -> bool:
    return isinstance(value, (date, datetime))


def _instant(value: "date | datetime") -> float:
    # naive datetimes are read as UTC so they stay comparable with aware ones
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return (value - _EPOCH).total_seconds()
    return (datetime.combine(value, time.min) - _EPOCH).total_seconds()


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Real, Decimal))


def _sign(diff: Any) -> int:
    return (diff > 0) - (diff < 0)


def compare_values(a: Any, b: Any, order: "SortOrder | str" = SortOrder.ASC) -> int:
    """Return -1, 0 or 1 placing ``a`` relative to ``b`` for ``order``."""
    direction = -1 if normalize_order(order) is SortOrder.DESC else 1
    a_missing = _missing(a)
    b_missing = _missing(b)
    if a_missing and b_missing:
        return 0
    if a_missing:
        return -direction
    if b_missing:
        return direction
    if _is_temporal(a) and _is_temporal(b):
        return direction * _sign(_instant(a) - _instant(b))
    if _is_numeric(a) and _is_numeric(b):
        if isinstance(a, Decimal) != isinstance(b, Decimal):
            a, b = float(a), float(b)
        return direction * _sign(a - b)
    a_text = str(a).lower()
    b_text = str(b).lower()
    if a_text < b_text:
        return -direction
    if a_text > b_text:
        return direction
    return 0
