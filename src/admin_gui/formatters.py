"""Display formatting for admin table cells (pt-BR conventions)."""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

__all__ = [
    "format_currency",
    "format_date",
    "format_datetime",
    "status_to_label",
    "truncate_text",
]

_STATUS_LABELS = {
    "PAID": "Pago",
    "PENDING": "Pendente",
    "OVERDUE": "Atrasado",
}

DateLike = Union[date, datetime, str]


def format_currency(value: float) -> str:
    """``1234.5`` -> ``"R$ 1.234,50"``."""
    text = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}R$ {text}"


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_date(value: DateLike, fmt: str = "%d/%m/%Y") -> str:
    return _as_datetime(value).strftime(fmt)


def format_datetime(value: DateLike) -> str:
    return format_date(value, "%d/%m/%Y %H:%M")


def status_to_label(status: str) -> str:
    return _STATUS_LABELS.get(status, status)


def truncate_text(text: str, max_length: int = 10) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
