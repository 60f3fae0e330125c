"""Dotted field path resolution.

A field path such as ``"lease.unit.code"`` is walked one segment at a time.
Mappings are indexed by key, sequences by integer segment and every other
object by attribute. The walk stops with :data:`ABSENT` as soon as a segment
is missing or the current value cannot be descended into (``None`` or a
scalar such as a string, number or date).

Callers that already know how to extract a value may pass a plain callable
instead of a path; :func:`accessor_for` normalizes both forms into a
:class:`FieldAccessor`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from functools import lru_cache
from typing import Any, Callable, Mapping, Sequence, Tuple, Union

__all__ = [
    "ABSENT",
    "FieldAccessor",
    "FieldSpec",
    "accessor_for",
    "is_absent",
    "resolve_path",
]


class _Absent:
    """Sentinel type for a value that could not be resolved."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

_SCALARS = (str, bytes, bytearray, int, float, Decimal, bool, date, datetime)


def is_absent(value: Any) -> bool:
    """True for failed resolution and explicit ``None``."""
    return value is ABSENT or value is None


def _step(value: Any, segment: str) -> Any:
    if value is None or value is ABSENT or isinstance(value, _SCALARS):
        return ABSENT
    if isinstance(value, Mapping):
        return value.get(segment, ABSENT)
    if isinstance(value, Sequence):
        if segment.lstrip("-").isdigit():
            try:
                return value[int(segment)]
            except IndexError:
                return ABSENT
        # named tuples and similar records address fields by attribute
    return getattr(value, segment, ABSENT)


def resolve_path(record: Any, path: str) -> Any:
    """Resolve ``path`` against ``record`` returning the value or ``ABSENT``."""
    return _path_accessor(path).resolve(record)


@dataclass(frozen=True)
class FieldAccessor:
    """Typed accessor ``record -> value | ABSENT``.

    ``name`` is the identity used by sort state comparisons; for path based
    accessors it is the path itself.
    """

    name: str
    getter: Callable[[Any], Any]

    def resolve(self, record: Any) -> Any:
        value = self.getter(record)
        return ABSENT if value is None else value

    def __call__(self, record: Any) -> Any:
        return self.resolve(record)


def _path_getter(segments: Tuple[str, ...]) -> Callable[[Any], Any]:
    def getter(record: Any) -> Any:
        value = record
        for segment in segments:
            value = _step(value, segment)
            if value is ABSENT:
                return ABSENT
        return value

    return getter


@lru_cache(maxsize=256)
def _path_accessor(path: str) -> FieldAccessor:
    segments = tuple(part for part in path.split(".") if part)
    return FieldAccessor(name=path, getter=_path_getter(segments))


FieldSpec = Union[str, FieldAccessor, Callable[[Any], Any]]


def accessor_for(field: FieldSpec) -> FieldAccessor:
    """Normalize a path string, accessor or callable into a ``FieldAccessor``."""
    if isinstance(field, FieldAccessor):
        return field
    if isinstance(field, str):
        return _path_accessor(field)
    if callable(field):
        name = getattr(field, "__name__", None) or repr(field)
        return FieldAccessor(name=name, getter=field)
    raise TypeError(f"Unsupported field specification: {field!r}")
