from datetime import date, datetime

import pytest

from admin_gui.formatters import (
    format_currency,
    format_date,
    format_datetime,
    status_to_label,
    truncate_text,
)


@pytest.mark.parametrize(
    "value,expected",
    [(0, "R$ 0,00"), (1234.5, "R$ 1.234,50"), (1_000_000, "R$ 1.000.000,00"), (-12.3, "-R$ 12,30")],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_dates():
    assert format_date(date(2025, 3, 7)) == "07/03/2025"
    assert format_date("2025-03-07") == "07/03/2025"
    assert format_datetime(datetime(2025, 3, 7, 14, 5)) == "07/03/2025 14:05"
    assert format_datetime("2025-03-07T14:05:00Z") == "07/03/2025 14:05"


def test_status_labels():
    assert status_to_label("PAID") == "Pago"
    assert status_to_label("PENDING") == "Pendente"
    assert status_to_label("OVERDUE") == "Atrasado"
    assert status_to_label("CANCELLED") == "CANCELLED"


def test_truncate_text():
    assert truncate_text("curto") == "curto"
    assert truncate_text("texto muito longo") == "texto muit..."
    assert truncate_text("abcdef", 3) == "abc..."
