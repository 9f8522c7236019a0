"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the statement pipeline and the
exporter never depend on ORM rows.
"""

from enuves.domain import entities as domain
from enuves.database.models import (
    Company as ORMCompany,
    Category as ORMCategory,
    Account as ORMAccount,
    Transaction as ORMTransaction,
)


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        name=orm_company.name,
        cnpj=orm_company.cnpj,
        created_at=orm_company.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        company_id=orm_category.company_id,
        code=orm_category.code,
        description=orm_category.description,
        integration_code=orm_category.integration_code,
        nature=domain.Nature(orm_category.nature),
        created_at=orm_category.created_at,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        company_id=orm_account.company_id,
        code=orm_account.code,
        description=orm_account.description,
        integration_code=orm_account.integration_code,
        created_at=orm_account.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        company_id=orm_transaction.company_id,
        category_id=orm_transaction.category_id,
        account_id=orm_transaction.account_id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        original_description=orm_transaction.original_description,
        value=orm_transaction.value,
        created_at=orm_transaction.created_at,
    )


def transaction_detail_to_domain(
    orm_transaction: ORMTransaction,
    orm_category: ORMCategory | None,
    orm_account: ORMAccount | None,
) -> domain.TransactionDetail:
    """Convert a transaction row and its joined category/account rows to a detail entity."""
    return domain.TransactionDetail(
        transaction=transaction_to_domain(orm_transaction),
        category_name=orm_category.description if orm_category else None,
        category_code=orm_category.code if orm_category else None,
        category_integration_code=orm_category.integration_code if orm_category else None,
        category_nature=domain.Nature(orm_category.nature) if orm_category else None,
        account_name=orm_account.description if orm_account else None,
        account_code=orm_account.code if orm_account else None,
        account_integration_code=orm_account.integration_code if orm_account else None,
    )
