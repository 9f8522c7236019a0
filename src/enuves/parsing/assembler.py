"""Turns parsed and classified statement lines into a reviewable preview."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

import structlog

from enuves.domain.entities import Account, Category
from enuves.parsing.classifier import StatementClassifier
from enuves.parsing.layout import Layout, detect_layout
from enuves.parsing.reassembler import iter_records
from enuves.parsing.record_parser import (
    IgnoredLine,
    ParsedRecord,
    parse_legacy_line,
    parse_tabular_record,
)

logger = structlog.get_logger()

REASON_NOTHING_MATCHED = "Categoria e Conta não identificadas"
REASON_NO_CATEGORY = "Categoria não identificada"
REASON_NO_ACCOUNT = "Conta não identificada"


@dataclass(frozen=True)
class ParsedCandidate:
    """A fully classified statement line, ready to be saved as a transaction.

    ``value`` is the magnitude that gets persisted; ``signed_value`` keeps the
    direction found in the statement.
    """

    date: date
    description: str
    original_description: str
    value: Decimal
    signed_value: Decimal
    category_id: int
    account_id: Optional[int] = None
    category_name: Optional[str] = None
    account_name: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "description": self.description,
            "original_description": self.original_description,
            "value": float(self.value),
            "signed_value": float(self.signed_value),
            "category_id": self.category_id,
            "account_id": self.account_id,
            "category_name": self.category_name,
            "account_name": self.account_name,
        }


@dataclass
class StatementPreview:
    """Every input record, partitioned into ready candidates and ignored lines."""

    layout: Layout
    success: list[ParsedCandidate] = field(default_factory=list)
    ignored: list[IgnoredLine] = field(default_factory=list)

    def add(self, outcome: ParsedCandidate | IgnoredLine) -> None:
        if isinstance(outcome, IgnoredLine):
            self.ignored.append(outcome)
        else:
            self.success.append(outcome)

    def as_dict(self) -> dict:
        return {
            "layout": self.layout.value,
            "success": [candidate.as_dict() for candidate in self.success],
            "ignored": [line.as_dict() for line in self.ignored],
        }


def _missing_reason(category_id: Optional[int], account_id: Optional[int]) -> str:
    if category_id is None and account_id is None:
        return REASON_NOTHING_MATCHED
    if category_id is None:
        return REASON_NO_CATEGORY
    return REASON_NO_ACCOUNT


def assemble_record(
    record: ParsedRecord, classifier: StatementClassifier, layout: Layout
) -> ParsedCandidate | IgnoredLine:
    """Classify a parsed record and decide whether it is ready to save.

    Tabular records need both a category and an account. Legacy records have
    no account column and only need a category.
    """
    suffix = record.suffix if layout is Layout.TABULAR else None
    classification = classifier.classify(record.description, suffix)
    category_id = classification.category_id
    account_id = classification.account_id

    if layout is Layout.TABULAR:
        ready = category_id is not None and account_id is not None
    else:
        ready = category_id is not None

    if not ready:
        reason = _missing_reason(category_id, account_id) if layout is Layout.TABULAR else REASON_NO_CATEGORY
        return IgnoredLine(line=record.line, reason=reason, date=record.date, value=record.value)

    return ParsedCandidate(
        date=record.date,
        description=record.description,
        original_description=record.description,
        value=record.value,
        signed_value=record.signed_value,
        category_id=category_id,
        account_id=account_id,
        category_name=classifier.category_name(category_id),
        account_name=classifier.account_name(account_id),
    )


def assemble_statement(
    text: str, categories: Iterable[Category], accounts: Iterable[Account]
) -> StatementPreview:
    """Run layout detection, parsing and classification over extracted statement text."""
    layout = detect_layout(text)
    classifier = StatementClassifier(categories, accounts)
    preview = StatementPreview(layout=layout)
    logger.info("statement_layout_detected", layout=layout.value)

    if layout is Layout.TABULAR:
        for logical_record in iter_records(text):
            parsed = parse_tabular_record(logical_record)
            if isinstance(parsed, IgnoredLine):
                preview.add(parsed)
            else:
                preview.add(assemble_record(parsed, classifier, layout))
    else:
        for line in text.split("\n"):
            parsed = parse_legacy_line(line)
            if parsed is None:
                continue
            if isinstance(parsed, IgnoredLine):
                preview.add(parsed)
            else:
                preview.add(assemble_record(parsed, classifier, layout))

    logger.info(
        "statement_assembled",
        layout=layout.value,
        ready=len(preview.success),
        ignored=len(preview.ignored),
    )
    return preview
