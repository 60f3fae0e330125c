import pytest

from listview.search_filter import (
    MatchMode,
    SearchOptions,
    Span,
    filter_items,
    highlight_spans,
)
from factories import make_residents


NAMES = [{"name": "João"}, {"name": "Maria"}, {"name": "Jorge"}]


def test_case_insensitive_substring_preserves_order():
    result = filter_items(NAMES, ["name"], "jo")
    assert [r["name"] for r in result] == ["João", "Jorge"]


def test_case_sensitive_option():
    result = filter_items(NAMES, ["name"], "jo", SearchOptions(case_sensitive=True))
    assert result == []
    result = filter_items(NAMES, ["name"], "Jo", SearchOptions(case_sensitive=True))
    assert len(result) == 2


def test_exact_match_option():
    opts = SearchOptions(exact_match=True)
    assert filter_items(NAMES, ["name"], "maria", opts) == [{"name": "Maria"}]
    assert filter_items(NAMES, ["name"], "mari", opts) == []


@pytest.mark.parametrize(
    "mode,term,expected",
    [
        (MatchMode.STARTS_WITH, "jo", ["João", "Jorge"]),
        (MatchMode.ENDS_WITH, "ge", ["Jorge"]),
        (MatchMode.CONTAINS, "r", ["Maria", "Jorge"]),
        (MatchMode.EXACT, "jorge", ["Jorge"]),
    ],
)
def test_match_modes(mode, term, expected):
    result = filter_items(NAMES, ["name"], term, SearchOptions(mode=mode))
    assert [r["name"] for r in result] == expected


@pytest.mark.parametrize("term", ["", "   ", "\t"])
def test_blank_term_is_identity(term):
    assert filter_items(NAMES, ["name"], term) is NAMES


def test_any_field_matches_and_absent_never_matches():
    rows = [
        {"name": "Ana", "unit": {"code": "10A"}},
        {"name": "Bruno", "unit": None},
        {"name": "Carla"},
        {"name": None, "unit": {"code": "3B"}},
    ]
    assert filter_items(rows, ["name", "unit.code"], "10a") == [rows[0]]
    assert filter_items(rows, ["unit.code"], "b") == [rows[3]]
    assert filter_items(rows, ["missing"], "a") == []


def test_non_string_values_match_on_string_form():
    rows = [{"amount": 1250.5}, {"amount": 80}]
    assert filter_items(rows, ["amount"], "125") == [rows[0]]


def test_filter_is_subset_and_idempotent():
    residents = make_residents(40)
    first = filter_items(residents, ["name", "unit.code"], "an")
    assert len(first) <= len(residents)
    assert all(any(item is r for r in residents) for item in first)
    second = filter_items(first, ["name", "unit.code"], "an")
    assert second == first
    assert all(a is b for a, b in zip(first, second))


def test_filter_returns_new_list():
    result = filter_items(NAMES, ["name"], "a")
    assert result is not NAMES
    assert NAMES == [{"name": "João"}, {"name": "Maria"}, {"name": "Jorge"}]


def test_highlight_spans_case_insensitive():
    spans = highlight_spans("Jorge and jo", "jo")
    assert spans == (Span("Jo", True), Span("rge and ", False), Span("jo", True))
    assert "".join(s.text for s in spans) == "Jorge and jo"


def test_highlight_spans_case_sensitive_and_special_chars():
    assert highlight_spans("a.b a.b", ".", case_sensitive=True) == (
        Span("a", False),
        Span(".", True),
        Span("b a", False),
        Span(".", True),
        Span("b", False),
    )
    assert highlight_spans("Jorge", "jo", case_sensitive=True) == (Span("Jorge", False),)


def test_highlight_blank_term_and_empty_text():
    assert highlight_spans("Maria", " ") == (Span("Maria", False),)
    assert highlight_spans("", "a") == ()
