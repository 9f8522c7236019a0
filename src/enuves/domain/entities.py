"""Domain model entities for enuves.

These are pure data classes representing business concepts, independent of
database schema. Services and the statement pipeline only ever see these,
never the ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Nature(str, Enum):
    """Direction of a category; decides its code band and ledger side."""

    SAIDA = "Saída"
    ENTRADA = "Entrada"
    TRANSFERENCIA = "Transferência"

    @property
    def code_band(self) -> tuple[int, int]:
        """Inclusive (min, max) range of category codes for this nature."""
        if self is Nature.ENTRADA:
            return (800000, 899999)
        if self is Nature.SAIDA:
            return (900000, 999999)
        return (700000, 799999)

    @property
    def sign(self) -> int:
        """Sign a stored magnitude takes when exported.

        Saída is an outflow. Entrada and Transferência are booked as inflows.
        """
        return -1 if self is Nature.SAIDA else 1


@dataclass(frozen=True)
class Company:
    """Client company owning directories and transactions."""

    id: int
    name: str
    cnpj: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Chart-of-accounts category a statement line can be classified into."""

    id: int
    company_id: int
    code: str
    description: str
    integration_code: Optional[str]
    nature: Nature
    created_at: datetime


@dataclass(frozen=True)
class Account:
    """Counterpart account (bank, cash, supplier) matched from statement suffixes."""

    id: int
    company_id: int
    code: str
    description: str
    integration_code: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Persisted ledger transaction. ``value`` is always a magnitude."""

    id: int
    company_id: int
    category_id: int
    account_id: Optional[int]
    date: date
    description: str
    original_description: Optional[str]
    value: Decimal
    created_at: datetime


@dataclass(frozen=True)
class TransactionDetail:
    """Transaction joined with the category and account metadata it references."""

    transaction: Transaction
    category_name: Optional[str]
    category_code: Optional[str]
    category_integration_code: Optional[str]
    category_nature: Optional[Nature]
    account_name: Optional[str]
    account_code: Optional[str]
    account_integration_code: Optional[str]

    @property
    def signed_value(self) -> Decimal:
        """Stored magnitude with the direction implied by the category nature."""
        value = abs(self.transaction.value)
        if self.category_nature is None:
            return value
        return value * self.category_nature.sign


@dataclass(frozen=True)
class TransactionFilters:
    """Exact-match and range predicates for listing and exporting transactions."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category_id: Optional[int] = None
    account_id: Optional[int] = None
    description: Optional[str] = None
    min_value: Optional[Decimal] = None
    max_value: Optional[Decimal] = None
