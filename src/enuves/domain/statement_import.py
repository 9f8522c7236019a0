"""Bank statement import domain service."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

import structlog

from enuves.database.base import Database
from enuves.domain.errors import (
    CATEGORY_REQUIRED,
    SAVE_TRANSACTIONS_FAILED,
    ValidationError,
    account_not_found,
    category_not_found,
    company_not_found,
    invalid_candidate,
    pdf_processing_failed,
)
from enuves.parsing.assembler import ParsedCandidate, assemble_statement
from enuves.utils.pdf_text import extract_text

logger = structlog.get_logger()


class StatementImportService:
    """Service for turning statement PDFs into transactions.

    Parsing produces a preview that nothing is saved from; the caller reviews
    it and hands the confirmed candidates to ``save_transactions``. Both
    operations report failures in the returned mapping instead of raising.
    """

    def __init__(self, db: Database):
        """Initialize statement import service.

        Args:
            db: Database instance
        """
        self.db = db

    def parse_text(self, company_id: int, text: str) -> dict[str, Any]:
        """Parse extracted statement text against the company's directories.

        Returns:
            Dict with:
            - layout: detected layout name
            - success: list of ParsedCandidate ready to save
            - ignored: list of IgnoredLine with the reason each was set aside
            or a dict with a single ``error`` message.
        """
        try:
            if self.db.get_company(company_id) is None:
                return {"error": company_not_found(company_id)}
            categories = self.db.list_categories(company_id)
            accounts = self.db.list_accounts(company_id)
            preview = assemble_statement(text, categories, accounts)
        except Exception as e:
            logger.exception("statement_parse_failed", company_id=company_id)
            return {"error": pdf_processing_failed(str(e))}

        return {
            "layout": preview.layout.value,
            "success": preview.success,
            "ignored": preview.ignored,
        }

    def parse_pdf(self, company_id: int, pdf_bytes: bytes) -> dict[str, Any]:
        """Extract the text of a statement PDF and parse it.

        An unreadable document yields an ``error`` and no partial results.
        """
        try:
            text = extract_text(pdf_bytes)
        except Exception as e:
            logger.exception("pdf_extraction_failed", company_id=company_id, size=len(pdf_bytes))
            return {"error": pdf_processing_failed(str(e))}
        return self.parse_text(company_id, text)

    def save_transactions(
        self, company_id: int, candidates: Iterable[ParsedCandidate | Mapping[str, Any]]
    ) -> dict[str, Any]:
        """Persist confirmed candidates in a single database transaction.

        Values are stored as magnitudes. Either every candidate is saved or
        none is.

        Returns:
            ``{"success": True, "count": n}`` or ``{"error": message}``
        """
        try:
            rows = [_candidate_row(candidate) for candidate in candidates]
        except ValidationError as e:
            return {"error": str(e)}
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            logger.warning("transaction_candidate_invalid", company_id=company_id, error=repr(e))
            return {"error": invalid_candidate(repr(e))}

        if not rows:
            return {"success": True, "count": 0}

        try:
            if self.db.get_company(company_id) is None:
                return {"error": company_not_found(company_id)}

            category_ids = {c.id for c in self.db.list_categories(company_id)}
            account_ids = {a.id for a in self.db.list_accounts(company_id)}
            for row in rows:
                if row["category_id"] not in category_ids:
                    return {"error": category_not_found(row["category_id"])}
                if row["account_id"] is not None and row["account_id"] not in account_ids:
                    return {"error": account_not_found(row["account_id"])}

            ids = self.db.create_transactions(company_id, rows)
        except Exception:
            logger.exception("transactions_save_failed", company_id=company_id, count=len(rows))
            return {"error": SAVE_TRANSACTIONS_FAILED}

        logger.info("transactions_saved", company_id=company_id, count=len(ids))
        return {"success": True, "count": len(ids)}


def _candidate_row(candidate: ParsedCandidate | Mapping[str, Any]) -> dict[str, Any]:
    """Normalize a candidate into the row shape the database layer inserts."""
    if isinstance(candidate, ParsedCandidate):
        fields = {
            "category_id": candidate.category_id,
            "account_id": candidate.account_id,
            "date": candidate.date,
            "description": candidate.description,
            "original_description": candidate.original_description,
            "value": candidate.value,
        }
    else:
        fields = dict(candidate)

    if fields.get("category_id") is None:
        raise ValidationError(CATEGORY_REQUIRED)

    txn_date = fields["date"]
    if isinstance(txn_date, str):
        txn_date = date.fromisoformat(txn_date)

    description = fields["description"]
    account_id = fields.get("account_id")
    return {
        "category_id": int(fields["category_id"]),
        "account_id": int(account_id) if account_id is not None else None,
        "date": txn_date,
        "description": description,
        "original_description": fields.get("original_description") or description,
        "value": abs(Decimal(str(fields["value"]))),
    }
