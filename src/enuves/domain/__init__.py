"""Domain layer for the enuves application.

Services live in their own modules (``enuves.domain.category`` and so on) and
are imported from there; this package only re-exports the plain entities.
"""

from enuves.domain.entities import (
    Company,
    Category,
    Account,
    Transaction,
    TransactionDetail,
    TransactionFilters,
    Nature,
)

__all__ = [
    "Company",
    "Category",
    "Account",
    "Transaction",
    "TransactionDetail",
    "TransactionFilters",
    "Nature",
]
