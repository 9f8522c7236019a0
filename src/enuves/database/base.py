"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from enuves.domain.entities import (
    Company,
    Category,
    Account,
    Transaction,
    TransactionDetail,
    TransactionFilters,
)


class Database(ABC):
    """Abstract database interface for enuves.

    Write operations either commit completely or roll back and raise a
    ``ConflictError`` (unique constraint violation) or ``PersistenceError``.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Company operations
    @abstractmethod
    def create_company(self, name: str, cnpj: Optional[str] = None) -> int:
        """Create a company. Returns company ID."""
        pass

    @abstractmethod
    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        pass

    @abstractmethod
    def list_companies(self) -> list[Company]:
        """List all companies ordered by name."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self,
        company_id: int,
        code: str,
        description: str,
        nature: str,
        integration_code: Optional[str] = None,
    ) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def create_categories(self, company_id: int, rows: list[tuple[str, str, str]]) -> int:
        """Insert (code, description, nature) rows in one transaction. Returns count."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def list_categories(self, company_id: int) -> list[Category]:
        """List a company's categories ordered by code ascending."""
        pass

    @abstractmethod
    def get_max_category_code(self, company_id: int, min_code: int, max_code: int) -> Optional[int]:
        """Highest numeric category code within [min_code, max_code], or None."""
        pass

    @abstractmethod
    def update_category(self, category_id: int, description: str, integration_code: Optional[str]) -> None:
        """Update a category's description and integration code."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category."""
        pass

    @abstractmethod
    def get_category_transaction_count(self, category_id: int) -> int:
        """Count transactions referencing a category."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self, company_id: int, code: str, description: str, integration_code: Optional[str] = None
    ) -> int:
        """Create an account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self, company_id: int) -> list[Account]:
        """List a company's accounts ordered by numeric code ascending."""
        pass

    @abstractmethod
    def get_max_account_code(self, company_id: int) -> Optional[int]:
        """Highest numeric account code of a company, or None."""
        pass

    @abstractmethod
    def update_account(self, account_id: int, description: str, integration_code: Optional[str]) -> None:
        """Update an account's description and integration code."""
        pass

    @abstractmethod
    def delete_account(self, account_id: int) -> None:
        """Delete an account, clearing it from the transactions that reference it."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transactions(self, company_id: int, rows: list[dict]) -> list[int]:
        """Insert transactions in one database transaction. Returns the new IDs.

        Each row carries category_id, account_id, date, description,
        original_description and value.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        date: date,
        category_id: int,
        account_id: Optional[int],
        description: str,
        value: Decimal,
    ) -> None:
        """Replace the editable fields of a transaction."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transaction_details(
        self,
        company_id: int,
        filters: Optional[TransactionFilters] = None,
        ascending: bool = False,
    ) -> list[TransactionDetail]:
        """List transactions joined with category/account metadata.

        Args:
            company_id: Owning company
            filters: Optional date/category/account/description/value predicates
            ascending: Order by date ascending instead of newest first
        """
        pass
