"""Tests for the category service and commands."""

from datetime import date
from decimal import Decimal

import pytest
from enuves.cli.main import cli
from enuves.domain.category import DEFAULT_CATEGORIES
from enuves.domain.entities import Nature
from enuves.domain.errors import ConflictError, DependencyError, NotFoundError, ValidationError


def _add_transaction(db, company_id, category_id):
    db.create_transactions(
        company_id,
        [
            {
                "category_id": category_id,
                "date": date(2024, 3, 10),
                "description": "Pagamento",
                "value": Decimal("10.00"),
            }
        ],
    )


class TestCategoryCodes:
    def test_first_code_is_band_minimum(self, category_service, sample_company):
        """Test each nature starts at the bottom of its band."""
        assert category_service.next_code(sample_company.id, Nature.ENTRADA) == "800000"
        assert category_service.next_code(sample_company.id, Nature.SAIDA) == "900000"
        assert category_service.next_code(sample_company.id, Nature.TRANSFERENCIA) == "700000"

    def test_next_code_follows_highest_code(self, category_service, temp_db, sample_company):
        """Test allocation continues after the highest code in the band."""
        temp_db.create_category(sample_company.id, "800005", "Entradas antigas", "Entrada")

        assert category_service.next_code(sample_company.id, "Entrada") == "800006"
        assert category_service.next_code(sample_company.id, "Saída") == "900000"

    def test_exhausted_band(self, category_service, temp_db, sample_company):
        """Test a full band refuses new categories."""
        temp_db.create_category(sample_company.id, "899999", "Topo", "Entrada")

        with pytest.raises(ValidationError, match="Limite de códigos atingido para a natureza Entrada."):
            category_service.next_code(sample_company.id, Nature.ENTRADA)
        with pytest.raises(ValidationError):
            category_service.create_category(sample_company.id, "Mais uma", Nature.ENTRADA)

    def test_codes_are_per_company(self, category_service, company_service, sample_categories):
        """Test another company's codes don't affect allocation."""
        other_id = company_service.create_company("Outra")

        assert category_service.next_code(other_id, Nature.SAIDA) == "900000"


class TestCategoryService:
    def test_create_assigns_sequential_codes(self, category_service, sample_company):
        """Test creating categories of one nature."""
        first = category_service.create_category(sample_company.id, "Luz", Nature.SAIDA, "4101")
        second = category_service.create_category(sample_company.id, "Água", "Saída")

        assert category_service.get_category(first).code == "900000"
        assert category_service.get_category(first).integration_code == "4101"
        assert category_service.get_category(second).code == "900001"
        assert category_service.get_category(second).integration_code is None

    def test_create_validates_input(self, category_service, sample_company):
        """Test blank, long and unknown values are rejected."""
        with pytest.raises(ValidationError):
            category_service.create_category(sample_company.id, "   ", Nature.SAIDA)
        with pytest.raises(ValidationError):
            category_service.create_category(sample_company.id, "x" * 51, Nature.SAIDA)
        with pytest.raises(ValidationError):
            category_service.create_category(sample_company.id, "Luz", Nature.SAIDA, "9" * 21)
        with pytest.raises(ValidationError):
            category_service.create_category(sample_company.id, "Luz", "Despesa")

    def test_create_for_unknown_company(self, category_service):
        """Test creating a category for a missing company."""
        with pytest.raises(NotFoundError):
            category_service.create_category(999, "Luz", Nature.SAIDA)

    def test_code_race_is_reported(self, category_service, sample_company, monkeypatch):
        """Test a concurrently taken code surfaces as a conflict."""
        category_service.create_category(sample_company.id, "Luz", Nature.SAIDA)
        monkeypatch.setattr(category_service, "next_code", lambda company_id, nature: "900000")

        with pytest.raises(ConflictError, match="Já existe uma categoria com este código."):
            category_service.create_category(sample_company.id, "Água", Nature.SAIDA)

    def test_list_is_ordered_by_code(self, category_service, sample_categories, sample_company):
        """Test categories list by code."""
        codes = [c.code for c in category_service.list_categories(sample_company.id)]

        assert codes == sorted(codes)
        assert codes[0] == "800000"

    def test_update_keeps_code_and_nature(self, category_service, sample_categories):
        """Test updating description and clearing the integration code."""
        category_id = sample_categories["Oferta"]

        category_service.update_category(category_id, "Ofertas", "  ")

        updated = category_service.get_category(category_id)
        assert updated.description == "Ofertas"
        assert updated.integration_code is None
        assert updated.code == "800001"
        assert updated.nature is Nature.ENTRADA

    def test_update_missing_category(self, category_service):
        """Test updating a missing category."""
        with pytest.raises(NotFoundError):
            category_service.update_category(42, "Nada")

    def test_delete_unused_category(self, category_service, sample_categories):
        """Test deleting a category without transactions."""
        category_service.delete_category(sample_categories["Oferta"])

        assert category_service.get_category(sample_categories["Oferta"]) is None

    def test_delete_blocked_by_transactions(self, category_service, temp_db, sample_company, sample_categories):
        """Test a category with transactions can't be deleted."""
        _add_transaction(temp_db, sample_company.id, sample_categories["Dízimo"])

        with pytest.raises(DependencyError):
            category_service.delete_category(sample_categories["Dízimo"])
        assert category_service.get_category(sample_categories["Dízimo"]) is not None


class TestSeedCategories:
    def test_seed_outflow_defaults(self, category_service, sample_company):
        """Test seeding the built-in outflow categories."""
        count = category_service.seed_default_categories(sample_company.id, Nature.SAIDA)

        categories = category_service.list_categories(sample_company.id)
        assert count == len(DEFAULT_CATEGORIES[Nature.SAIDA]) == 49
        assert [c.code for c in categories] == [str(900000 + i) for i in range(49)]
        assert all(c.nature is Nature.SAIDA for c in categories)

    def test_seed_skips_existing_descriptions(self, category_service, sample_company, sample_categories):
        """Test seeding twice and around existing categories."""
        first = category_service.seed_default_categories(sample_company.id, Nature.SAIDA)
        second = category_service.seed_default_categories(sample_company.id, Nature.SAIDA)

        assert first == 48  # "Dízimo" already exists
        assert second == 0

    def test_seed_with_empty_default_list(self, category_service, sample_company):
        """Test natures without defaults insert nothing."""
        assert category_service.seed_default_categories(sample_company.id, Nature.ENTRADA) == 0


def test_category_create_command(cli_runner, temp_db, sample_company):
    """Test creating a category from the CLI."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "category", "create", "Energia Elétrica",
            "--company", "Igreja Teste",
            "--nature", "Saída",
            "--integration-code", "4101",
        ],
    )

    assert result.exit_code == 0
    assert "Created category 'Energia Elétrica' with code 900000" in result.output


def test_category_create_command_case_insensitive_nature(cli_runner, temp_db, sample_company):
    """Test nature choices ignore case."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "create", "Dízimo", "--company", str(sample_company.id), "--nature", "entrada"],
    )

    assert result.exit_code == 0
    assert "with code 800000" in result.output


def test_category_list_command(cli_runner, temp_db, sample_company, sample_categories):
    """Test listing categories."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "list", "--company", str(sample_company.id)]
    )

    assert result.exit_code == 0
    assert "Energia Elétrica" in result.output
    assert "800000" in result.output


def test_category_list_unknown_company(cli_runner, temp_db):
    """Test listing categories of a missing company."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "list", "--company", "Nenhuma"]
    )

    assert result.exit_code == 1
    assert "Error: Empresa 'Nenhuma' não encontrada" in result.output


def test_category_next_code_command(cli_runner, temp_db, sample_company, sample_categories):
    """Test showing the next code."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "next-code", "--company", "1", "--nature", "Saída"],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "900002"


def test_category_seed_command(cli_runner, temp_db, sample_company):
    """Test seeding default categories from the CLI."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "seed", "--company", str(sample_company.id)]
    )

    assert result.exit_code == 0
    assert "Created 49 categories" in result.output


def test_category_update_command(cli_runner, temp_db, sample_categories):
    """Test updating only the integration code."""
    category_id = sample_categories["Oferta"]
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "update", str(category_id), "--integration-code", "3999"],
    )

    assert result.exit_code == 0
    temp_db.disconnect()
    updated = temp_db.get_category(category_id)
    assert updated.integration_code == "3999"
    assert updated.description == "Oferta"


def test_category_delete_command_blocked(cli_runner, temp_db, sample_company, sample_categories):
    """Test deleting a category that has transactions."""
    _add_transaction(temp_db, sample_company.id, sample_categories["Dízimo"])

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "delete", str(sample_categories["Dízimo"]), "--yes"],
    )

    assert result.exit_code == 1
    assert "Não é possível excluir a categoria" in result.output


def test_category_delete_command_cancelled(cli_runner, temp_db, sample_categories):
    """Test declining the confirmation keeps the category."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "delete", str(sample_categories["Oferta"])],
        input="n\n",
    )

    assert result.exit_code == 0
    assert "Deletion cancelled." in result.output
