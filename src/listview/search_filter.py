"""Search filtering over record collections.

An item matches when ANY of the configured fields resolves to a present value
whose string form satisfies the match mode against the term. Case folding is
applied to both sides unless ``case_sensitive`` is set.

A blank (empty or whitespace-only) term disables filtering entirely and the
original collection object is returned as-is, so callers can cheaply detect
the no-op with an identity check.

Highlighting is a separate concern: :func:`highlight_spans` splits display
text into matched / unmatched spans for any rendering target and never takes
part in the match decision.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Sequence, Tuple, TypeVar

from .field_path import FieldAccessor, FieldSpec, accessor_for, is_absent

T = TypeVar("T")

__all__ = [
    "MatchMode",
    "SearchOptions",
    "SearchState",
    "Span",
    "filter_items",
    "highlight_spans",
    "is_blank",
    "matches",
]


class MatchMode(str, Enum):
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    EXACT = "exact"


@dataclass(frozen=True)
class SearchOptions:
    case_sensitive: bool = False
    exact_match: bool = False
    debounce_ms: int = 300
    mode: MatchMode = MatchMode.CONTAINS

    @property
    def effective_mode(self) -> MatchMode:
        return MatchMode.EXACT if self.exact_match else self.mode


@dataclass(frozen=True)
class SearchState:
    """Raw vs committed search term.

    ``is_pending`` is True exactly while a debounce window is open for a raw
    term that has not been committed yet.
    """

    raw_term: str = ""
    committed_term: str = ""
    is_pending: bool = False


@dataclass(frozen=True)
class Span:
    text: str
    matched: bool


def is_blank(term: str | None) -> bool:
    return term is None or not term.strip()


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()


def _value_matches(value: Any, needle: str, mode: MatchMode, case_sensitive: bool) -> bool:
    if is_absent(value):
        return False
    haystack = _fold(str(value), case_sensitive)
    if mode is MatchMode.EXACT:
        return haystack == needle
    if mode is MatchMode.STARTS_WITH:
        return haystack.startswith(needle)
    if mode is MatchMode.ENDS_WITH:
        return haystack.endswith(needle)
    return needle in haystack


def matches(
    item: Any,
    accessors: Iterable[FieldAccessor],
    term: str,
    options: SearchOptions = SearchOptions(),
) -> bool:
    """Match decision for a single item against a non-blank ``term``."""
    needle = _fold(term, options.case_sensitive)
    mode = options.effective_mode
    return any(
        _value_matches(accessor.resolve(item), needle, mode, options.case_sensitive)
        for accessor in accessors
    )


def filter_items(
    collection: Sequence[T],
    fields: Sequence[FieldSpec],
    term: str,
    options: SearchOptions = SearchOptions(),
) -> Sequence[T]:
    if is_blank(term):
        return collection
    accessors = [accessor_for(field) for field in fields]
    return [item for item in collection if matches(item, accessors, term, options)]


def highlight_spans(text: str, term: str, case_sensitive: bool = False) -> Tuple[Span, ...]:
    """Split ``text`` into ordered spans flagging occurrences of ``term``.

    Concatenating the span texts always reproduces ``text``. Occurrences are
    found left to right without overlap.
    """
    if not text:
        return ()
    if is_blank(term):
        return (Span(text, False),)
    flags = 0 if case_sensitive else re.IGNORECASE
    spans: List[Span] = []
    cursor = 0
    for found in re.finditer(re.escape(term), text, flags):
        if found.start() > cursor:
            spans.append(Span(text[cursor : found.start()], False))
        spans.append(Span(found.group(0), True))
        cursor = found.end()
    if cursor < len(text):
        spans.append(Span(text[cursor:], False))
    return tuple(spans)
