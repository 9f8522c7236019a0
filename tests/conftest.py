"""Shared pytest fixtures for enuves tests."""

import tempfile
import os
from pathlib import Path
import pytest
import structlog

from enuves.database.factories import create_sqlite_database
from enuves.domain.account import AccountService
from enuves.domain.category import CategoryService
from enuves.domain.company import CompanyService
from enuves.domain.entities import Nature
from enuves.domain.transaction import TransactionService


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_company(company_service):
    """Create a sample company for testing."""
    company_id = company_service.create_company(name="Igreja Teste", cnpj="12.345.678/0001-90")
    return company_service.get_company(company_id)


@pytest.fixture
def sample_categories(category_service, sample_company):
    """Create categories of both natures and return their IDs by description."""
    category_ids = {}
    for description, nature, integration_code in [
        ("Energia", Nature.SAIDA, "4100"),
        ("Energia Elétrica", Nature.SAIDA, "4101"),
        ("Dízimo", Nature.ENTRADA, "3100"),
        ("Oferta", Nature.ENTRADA, "3200"),
    ]:
        category_ids[description] = category_service.create_category(
            company_id=sample_company.id,
            description=description,
            nature=nature,
            integration_code=integration_code,
        )
    return category_ids


@pytest.fixture
def sample_accounts(account_service, sample_company):
    """Create accounts and return their IDs by description."""
    return {
        description: account_service.create_account(
            company_id=sample_company.id, description=description, integration_code=code
        )
        for description, code in [("Banco do Brasil", "1101"), ("Caixa", "1102")]
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
