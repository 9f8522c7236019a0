"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal

import structlog

from enuves.database.base import Database
from enuves.domain.entities import (
    Transaction as TransactionEntity,
    TransactionDetail,
    TransactionFilters,
)
from enuves.domain.errors import (
    DELETE_TRANSACTION_FAILED,
    DESCRIPTION_REQUIRED,
    UPDATE_TRANSACTION_FAILED,
    NotFoundError,
    PersistenceError,
    ValidationError,
    account_not_found,
    category_not_found,
    transaction_not_found,
)

logger = structlog.get_logger()


class TransactionService:
    """Service for listing and maintaining saved transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_transactions(
        self, company_id: int, filters: Optional[TransactionFilters] = None
    ) -> list[TransactionDetail]:
        """List a company's transactions, newest first.

        Args:
            company_id: Owning company
            filters: Optional date/category/account/description/value predicates

        Returns:
            Transactions joined with their category and account metadata
        """
        return self.db.list_transaction_details(company_id, filters=filters)

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID."""
        return self.db.get_transaction(transaction_id)

    def update_transaction(
        self,
        transaction_id: int,
        date: date,
        category_id: int,
        description: str,
        value: Decimal,
        account_id: Optional[int] = None,
    ) -> None:
        """Replace the editable fields of a transaction.

        The value is stored as a magnitude; its direction comes from the
        category's nature.

        Raises:
            NotFoundError: If the transaction doesn't exist, or the category or
                account doesn't exist in the transaction's company
            ValidationError: If the description is blank
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        description = (description or "").strip()
        if not description:
            raise ValidationError(DESCRIPTION_REQUIRED)

        category = self.db.get_category(category_id)
        if category is None or category.company_id != txn.company_id:
            raise NotFoundError(category_not_found(category_id))

        if account_id is not None:
            account = self.db.get_account(account_id)
            if account is None or account.company_id != txn.company_id:
                raise NotFoundError(account_not_found(account_id))

        try:
            self.db.update_transaction(
                transaction_id,
                date=date,
                category_id=category_id,
                account_id=account_id,
                description=description,
                value=abs(Decimal(value)),
            )
        except PersistenceError as e:
            logger.exception("transaction_update_failed", transaction_id=transaction_id)
            raise PersistenceError(UPDATE_TRANSACTION_FAILED) from e

    def delete_transaction(self, transaction_id: int) -> None:
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        try:
            self.db.delete_transaction(transaction_id)
        except PersistenceError as e:
            logger.exception("transaction_delete_failed", transaction_id=transaction_id)
            raise PersistenceError(DELETE_TRANSACTION_FAILED) from e
