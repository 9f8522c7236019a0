"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from enuves.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Company as ORMCompany,
    Transaction as ORMTransaction,
)
from enuves.database.mappers import (
    account_to_domain,
    category_to_domain,
    company_to_domain,
    transaction_detail_to_domain,
    transaction_to_domain,
)
from enuves.domain.entities import Account, Category, Company, Nature, Transaction

NOW = datetime.now(UTC)


def _orm_category(**overrides) -> ORMCategory:
    fields = dict(
        id=3,
        company_id=1,
        code="900001",
        description="Energia Elétrica",
        integration_code="4101",
        nature="Saída",
        created_at=NOW,
    )
    fields.update(overrides)
    return ORMCategory(**fields)


def _orm_transaction(**overrides) -> ORMTransaction:
    fields = dict(
        id=9,
        company_id=1,
        category_id=3,
        account_id=2,
        date=date(2024, 3, 10),
        description="Conta de luz",
        original_description="PAGAMENTO ENERGIA",
        value=Decimal("89.90"),
        created_at=NOW,
    )
    fields.update(overrides)
    return ORMTransaction(**fields)


def test_company_to_domain():
    company = company_to_domain(ORMCompany(id=1, name="Padaria Sol", cnpj=None, created_at=NOW))

    assert isinstance(company, Company)
    assert company.name == "Padaria Sol"
    assert company.created_at == NOW


def test_category_to_domain_converts_nature():
    category = category_to_domain(_orm_category())

    assert isinstance(category, Category)
    assert category.nature is Nature.SAIDA
    assert category.code == "900001"
    assert category.integration_code == "4101"


def test_account_to_domain():
    account = account_to_domain(
        ORMAccount(id=2, company_id=1, code="1", description="Caixa", integration_code=None, created_at=NOW)
    )

    assert isinstance(account, Account)
    assert account.code == "1"
    assert account.integration_code is None


def test_transaction_to_domain():
    txn = transaction_to_domain(_orm_transaction())

    assert isinstance(txn, Transaction)
    assert txn.value == Decimal("89.90")
    assert txn.original_description == "PAGAMENTO ENERGIA"


class TestTransactionDetailMapper:
    """Tests for the joined transaction detail mapper."""

    def test_detail_carries_directory_metadata(self):
        account = ORMAccount(id=2, company_id=1, code="1", description="Caixa", integration_code="1102", created_at=NOW)

        detail = transaction_detail_to_domain(_orm_transaction(), _orm_category(), account)

        assert detail.category_name == "Energia Elétrica"
        assert detail.category_nature is Nature.SAIDA
        assert detail.account_integration_code == "1102"
        assert detail.signed_value == Decimal("-89.90")

    def test_detail_without_account(self):
        detail = transaction_detail_to_domain(
            _orm_transaction(account_id=None), _orm_category(nature="Entrada"), None
        )

        assert detail.account_name is None
        assert detail.account_integration_code is None
        assert detail.signed_value == Decimal("89.90")

    def test_detail_without_category_keeps_magnitude(self):
        detail = transaction_detail_to_domain(_orm_transaction(), None, None)

        assert detail.category_name is None
        assert detail.category_nature is None
        assert detail.signed_value == Decimal("89.90")
