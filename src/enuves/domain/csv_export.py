"""Ledger CSV export domain service."""

import re
from decimal import Decimal
from typing import Any, Optional

import structlog

from enuves.database.base import Database
from enuves.domain.entities import TransactionDetail, TransactionFilters
from enuves.domain.errors import EXPORT_FAILED, company_not_found, export_blocked
from enuves.utils.amount_parser import format_brl

logger = structlog.get_logger()

CSV_HEADER = "DATA;DÉBITO;CRÉDITO;HISTÓRICO;DESCRIÇÃO; VALOR"
HISTORICO_CODE = "0"
MISSING_NAME = "Sem nome"

_FIELD_BREAKERS = re.compile(r";|\r\n|\n|\r")


def find_missing_integration_codes(details: list[TransactionDetail]) -> list[str]:
    """Return distinct labels of categories and accounts lacking an integration code.

    Labels keep first-seen order: "Categoria: <name>" or "Conta: <name>".
    """
    missing: list[str] = []
    for detail in details:
        labels = []
        if not detail.category_integration_code:
            labels.append(f"Categoria: {detail.category_name or MISSING_NAME}")
        if detail.transaction.account_id is not None and not detail.account_integration_code:
            labels.append(f"Conta: {detail.account_name or MISSING_NAME}")
        for label in labels:
            if label not in missing:
                missing.append(label)
    return missing


def debit_credit(detail: TransactionDetail) -> tuple[str, str]:
    """Pick the (debit, credit) integration codes from the signed value.

    Inflows debit the account and credit the category; outflows the reverse.
    """
    category_code = detail.category_integration_code or ""
    account_code = detail.account_integration_code or ""
    if detail.signed_value > 0:
        return account_code, category_code
    return category_code, account_code


def export_description(detail: TransactionDetail) -> str:
    category = detail.category_name or ""
    description = detail.transaction.description or ""
    if category == description:
        text = category
    else:
        text = f"{category} {description}".strip()
    return _FIELD_BREAKERS.sub(" ", text)


def render_row(detail: TransactionDetail) -> str:
    debit, credit = debit_credit(detail)
    value = format_brl(abs(Decimal(detail.signed_value)))
    return (
        f"{detail.transaction.date:%d/%m/%Y};{debit};{credit};{HISTORICO_CODE};"
        f"{export_description(detail)}; {value}"
    )


def render_csv(details: list[TransactionDetail]) -> str:
    """Render the header and one row per transaction, newline separated."""
    return "\n".join([CSV_HEADER] + [render_row(detail) for detail in details])


class CSVExportService:
    """Service for exporting transactions as a ledger CSV for the ERP."""

    def __init__(self, db: Database):
        """Initialize CSV export service.

        Args:
            db: Database instance
        """
        self.db = db

    def export_csv(
        self, company_id: int, filters: Optional[TransactionFilters] = None
    ) -> dict[str, Any]:
        """Export the filtered transactions of a company, oldest first.

        The export is all-or-nothing: if any category or account in the
        selection lacks an integration code, nothing is rendered.

        Returns:
            ``{"csv": text}`` or ``{"error": message}``
        """
        try:
            if self.db.get_company(company_id) is None:
                return {"error": company_not_found(company_id)}

            details = self.db.list_transaction_details(company_id, filters=filters, ascending=True)
            missing = find_missing_integration_codes(details)
            if missing:
                logger.info("export_blocked", company_id=company_id, missing=len(missing))
                return {"error": export_blocked(missing)}

            csv_text = render_csv(details)
        except Exception:
            logger.exception("export_failed", company_id=company_id)
            return {"error": EXPORT_FAILED}

        logger.info("export_rendered", company_id=company_id, rows=len(details))
        return {"csv": csv_text}
