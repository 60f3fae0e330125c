from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from listview.comparator import SortOrder, compare_values
from listview.field_path import ABSENT


def test_both_absent_equal():
    assert compare_values(None, None) == 0
    assert compare_values(ABSENT, None, "desc") == 0


def test_absent_first_ascending_last_descending():
    assert compare_values(None, 5, SortOrder.ASC) < 0
    assert compare_values(5, None, SortOrder.ASC) > 0
    assert compare_values(None, 5, SortOrder.DESC) > 0
    assert compare_values(5, None, SortOrder.DESC) < 0


def test_numeric_comparison_not_lexicographic():
    assert compare_values(10, 9) > 0
    assert compare_values(2.5, 10) < 0
    assert compare_values(Decimal("1.10"), 1.2) < 0
    assert compare_values(10, 9, "desc") < 0


def test_dates_compare_by_instant():
    early = date(2025, 1, 1)
    late = date(2025, 3, 1)
    assert compare_values(early, late) < 0
    assert compare_values(early, late, "desc") > 0
    midday = datetime(2025, 1, 1, 12)
    assert compare_values(early, midday) < 0


def test_aware_datetimes_compare_by_instant():
    utc = datetime(2025, 1, 1, 12, tzinfo=timezone.utc)
    brt = datetime(2025, 1, 1, 10, tzinfo=timezone(timedelta(hours=-3)))  # 13:00 UTC
    assert compare_values(utc, brt) < 0


def test_strings_case_insensitive():
    assert compare_values("ana", "Bruno") < 0
    assert compare_values("ANA", "ana") == 0
    assert compare_values("ana", "Bruno", "desc") > 0


def test_mixed_types_fall_back_to_strings():
    # "10" < "9" lexicographically
    assert compare_values(10, "9") < 0
    # booleans are not numbers
    assert compare_values(True, 0) > 0


def test_nan_sorts_like_absent():
    assert compare_values(float("nan"), 1) < 0
    assert compare_values(float("nan"), None) == 0
    assert compare_values(Decimal("NaN"), Decimal("5")) < 0
    assert compare_values(Decimal("5"), Decimal("NaN"), "desc") < 0
    assert compare_values(Decimal("NaN"), float("nan")) == 0


def test_flipped_order():
    assert SortOrder.ASC.flipped() is SortOrder.DESC
    assert SortOrder.DESC.flipped() is SortOrder.ASC
