"""Tests for domain entities."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from enuves.domain.entities import (
    Category,
    Nature,
    Transaction,
    TransactionDetail,
    TransactionFilters,
)


class TestNature:
    """Tests for category natures."""

    @pytest.mark.parametrize(
        "nature, band",
        [
            (Nature.ENTRADA, (800000, 899999)),
            (Nature.SAIDA, (900000, 999999)),
            (Nature.TRANSFERENCIA, (700000, 799999)),
        ],
    )
    def test_code_bands(self, nature, band):
        assert nature.code_band == band

    def test_only_outflows_are_negative(self):
        assert Nature.SAIDA.sign == -1
        assert Nature.ENTRADA.sign == 1
        assert Nature.TRANSFERENCIA.sign == 1

    def test_values_match_stored_text(self):
        assert Nature("Saída") is Nature.SAIDA
        assert Nature.TRANSFERENCIA.value == "Transferência"


class TestCategory:
    def test_category_is_frozen(self):
        category = Category(
            id=1,
            company_id=1,
            code="800000",
            description="Dízimo",
            integration_code=None,
            nature=Nature.ENTRADA,
            created_at=datetime.now(),
        )

        with pytest.raises(AttributeError):
            category.code = "800001"


class TestTransactionDetail:
    def _detail(self, value: str, nature):
        txn = Transaction(
            id=1,
            company_id=1,
            category_id=1,
            account_id=None,
            date=date(2024, 3, 10),
            description="x",
            original_description="x",
            value=Decimal(value),
            created_at=datetime.now(),
        )
        return TransactionDetail(
            transaction=txn,
            category_name="c",
            category_code="900000",
            category_integration_code=None,
            category_nature=nature,
            account_name=None,
            account_code=None,
            account_integration_code=None,
        )

    def test_signed_value_follows_nature(self):
        assert self._detail("10.00", Nature.SAIDA).signed_value == Decimal("-10.00")
        assert self._detail("10.00", Nature.ENTRADA).signed_value == Decimal("10.00")

    def test_signed_value_ignores_stored_sign(self):
        assert self._detail("-10.00", Nature.ENTRADA).signed_value == Decimal("10.00")


def test_filters_default_to_no_predicates():
    filters = TransactionFilters()

    assert filters == TransactionFilters(
        start_date=None,
        end_date=None,
        category_id=None,
        account_id=None,
        description=None,
        min_value=None,
        max_value=None,
    )
