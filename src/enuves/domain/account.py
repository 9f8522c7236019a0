"""Account domain service."""

from typing import Optional

import structlog

from enuves.database.base import Database
from enuves.domain.entities import Account as AccountEntity
from enuves.domain.errors import (
    CREATE_ACCOUNT_FAILED,
    DELETE_ACCOUNT_FAILED,
    UPDATE_ACCOUNT_FAILED,
    ConflictError,
    NotFoundError,
    PersistenceError,
    account_code_race,
    account_not_found,
    company_not_found,
)
from enuves.domain.validators import (
    ACCOUNT_DESCRIPTION_MAX,
    normalize_integration_code,
    validate_description,
)

logger = structlog.get_logger()


class AccountService:
    """Service for managing a company's accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_accounts(self, company_id: int) -> list[AccountEntity]:
        """List a company's accounts ordered by code."""
        return self.db.list_accounts(company_id)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID."""
        return self.db.get_account(account_id)

    def next_code(self, company_id: int) -> str:
        """Return the next sequential account code, starting at 1."""
        current = self.db.get_max_account_code(company_id)
        return str(1 if current is None else current + 1)

    def create_account(
        self, company_id: int, description: str, integration_code: Optional[str] = None
    ) -> int:
        """Create an account with the next sequential code.

        Returns:
            Account ID

        Raises:
            ValidationError: On blank or over-long input
            NotFoundError: If the company doesn't exist
            ConflictError: If the allocated code was taken concurrently
        """
        description = validate_description(description, ACCOUNT_DESCRIPTION_MAX)
        integration_code = normalize_integration_code(integration_code)
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))

        code = self.next_code(company_id)
        try:
            account_id = self.db.create_account(
                company_id=company_id,
                code=code,
                description=description,
                integration_code=integration_code,
            )
        except ConflictError as e:
            raise ConflictError(account_code_race()) from e
        except PersistenceError as e:
            logger.exception("account_create_failed", company_id=company_id, code=code)
            raise PersistenceError(CREATE_ACCOUNT_FAILED) from e

        logger.info("account_created", company_id=company_id, account_id=account_id, code=code)
        return account_id

    def update_account(
        self, account_id: int, description: str, integration_code: Optional[str] = None
    ) -> None:
        """Update an account's description and integration code."""
        description = validate_description(description, ACCOUNT_DESCRIPTION_MAX)
        integration_code = normalize_integration_code(integration_code)
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        try:
            self.db.update_account(account_id, description, integration_code)
        except PersistenceError as e:
            logger.exception("account_update_failed", account_id=account_id)
            raise PersistenceError(UPDATE_ACCOUNT_FAILED) from e

    def delete_account(self, account_id: int) -> None:
        """Delete an account. Transactions that used it keep their category and lose the account."""
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        try:
            self.db.delete_account(account_id)
        except PersistenceError as e:
            logger.exception("account_delete_failed", account_id=account_id)
            raise PersistenceError(DELETE_ACCOUNT_FAILED) from e
