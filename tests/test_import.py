"""Tests for the statement import command."""

import json

import pytest
from enuves.cli.main import cli


@pytest.fixture
def statement_pdf(tmp_path, fixtures_dir, monkeypatch):
    """A PDF path whose extracted text is the tabular fixture statement."""
    text = (fixtures_dir / "tabular_statement.txt").read_text(encoding="utf-8")
    monkeypatch.setattr("enuves.domain.statement_import.extract_text", lambda pdf_bytes: text)
    pdf_path = tmp_path / "extrato.pdf"
    pdf_path.write_bytes(b"%PDF-1.4\n")
    return pdf_path


def test_import_preview(cli_runner, temp_db, sample_company, sample_categories, sample_accounts, statement_pdf):
    """Test previewing a statement without saving."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", str(statement_pdf), "--company", "Igreja Teste"],
    )

    assert result.exit_code == 0
    assert "Layout: tabular" in result.output
    assert "Ready to import: 2" in result.output
    assert "Ignored: 2" in result.output
    assert "[Categoria não identificada] 12/03/2024 SAQUE -50.00 CAIXA" in result.output
    assert "[Conta não identificada] 13/03/2024 OFERTA 30.00 OUTRO BANCO" in result.output
    assert "Saved" not in result.output


def test_import_json(cli_runner, temp_db, sample_company, sample_categories, sample_accounts, statement_pdf):
    """Test the JSON preview shape."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", str(statement_pdf), "--company", "1", "--json"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["layout"] == "tabular"
    assert payload["success"][0] == {
        "date": "2024-03-10",
        "description": "PAGAMENTO ENERGIA ELÉTRICA",
        "original_description": "PAGAMENTO ENERGIA ELÉTRICA",
        "value": 150.0,
        "signed_value": -150.0,
        "category_id": sample_categories["Energia Elétrica"],
        "account_id": sample_accounts["Banco do Brasil"],
        "category_name": "Energia Elétrica",
        "account_name": "Banco do Brasil",
    }
    assert [line["reason"] for line in payload["ignored"]] == [
        "Categoria não identificada",
        "Conta não identificada",
    ]


def test_import_save(cli_runner, temp_db, transaction_service, sample_company, sample_categories, sample_accounts, statement_pdf):
    """Test saving the ready transactions."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "import", str(statement_pdf), "--company", "1", "--save"],
    )

    assert result.exit_code == 0
    assert "Saved 2 transactions" in result.output
    temp_db.disconnect()
    descriptions = {d.transaction.description for d in transaction_service.list_transactions(sample_company.id)}
    assert descriptions == {"PAGAMENTO ENERGIA ELÉTRICA", "DÍZIMO JOAO DA SILVA"}


def test_import_legacy_statement(cli_runner, temp_db, sample_company, sample_categories, fixtures_dir, tmp_path, monkeypatch):
    text = (fixtures_dir / "legacy_statement.txt").read_text(encoding="utf-8")
    monkeypatch.setattr("enuves.domain.statement_import.extract_text", lambda pdf_bytes: text)
    pdf_path = tmp_path / "antigo.pdf"
    pdf_path.write_bytes(b"%PDF-1.4\n")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(pdf_path), "--company", "1"]
    )

    assert result.exit_code == 0
    assert "Layout: legacy" in result.output
    assert "Ready to import: 2" in result.output
    assert "1.234,56" in result.output


def test_import_invalid_pdf(cli_runner, temp_db, sample_company, tmp_path):
    """Test an unreadable document is reported, not raised."""
    pdf_path = tmp_path / "broken.pdf"
    pdf_path.write_bytes(b"definitely not a pdf")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(pdf_path), "--company", "1"]
    )

    assert result.exit_code == 1
    assert "Error: Erro ao processar o arquivo PDF:" in result.output


def test_import_unknown_company(cli_runner, temp_db, statement_pdf):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "import", str(statement_pdf), "--company", "Nenhuma"]
    )

    assert result.exit_code == 1
    assert "Empresa 'Nenhuma' não encontrada" in result.output
