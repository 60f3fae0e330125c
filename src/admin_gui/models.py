"""Record types and column layouts for the admin tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple


@dataclass
class UnitEntry:
    unit_id: str
    code: str  # normalized, e.g. "10A"
    floor: int
    monthly_rent: float
    status: str = "AVAILABLE"
    area: Optional[float] = None


@dataclass
class ResidentEntry:
    resident_id: str
    name: str
    email: str
    cpf: str
    phone: str = ""
    status: str = "ACTIVE"
    unit: Optional[UnitEntry] = None  # None while the resident has no lease
    created_at: Optional[datetime] = None


@dataclass
class PaymentEntry:
    payment_id: str
    resident_name: str
    amount: float
    payment_method: str
    status: str = "PENDING"
    payment_date: Optional[date] = None
    due_date: Optional[date] = None


@dataclass(frozen=True)
class TableColumn:
    key: str  # field path into the record
    header: str
    sortable: bool = True


RESIDENT_COLUMNS: Tuple[TableColumn, ...] = (
    TableColumn("name", "Nome"),
    TableColumn("email", "E-mail"),
    TableColumn("cpf", "CPF", sortable=False),
    TableColumn("unit.code", "Unidade"),
    TableColumn("status", "Status"),
)
RESIDENT_SEARCH_FIELDS: Tuple[str, ...] = ("name", "email", "cpf", "unit.code")

UNIT_COLUMNS: Tuple[TableColumn, ...] = (
    TableColumn("code", "Unidade"),
    TableColumn("floor", "Andar"),
    TableColumn("monthly_rent", "Aluguel"),
    TableColumn("status", "Status"),
)
UNIT_SEARCH_FIELDS: Tuple[str, ...] = ("code", "status")

PAYMENT_COLUMNS: Tuple[TableColumn, ...] = (
    TableColumn("payment_id", "ID do Pagamento"),
    TableColumn("resident_name", "Morador"),
    TableColumn("amount", "Valor Pago"),
    TableColumn("payment_date", "Data de Pagamento"),
    TableColumn("payment_method", "Forma de Pagamento"),
    TableColumn("status", "Status"),
)
PAYMENT_SEARCH_FIELDS: Tuple[str, ...] = ("resident_name", "payment_method", "status")
