"""Per-layout extraction of date, value and description from statement text."""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from enuves.parsing.reassembler import LogicalRecord
from enuves.utils.amount_parser import parse_comma_decimal, parse_dot_decimal
from enuves.utils.date_parser import parse_statement_date

REASON_TABULAR_NO_VALUE = "Valor não encontrado (Novo Layout)"
REASON_NO_VALUE = "Valor não encontrado"
REASON_NO_DATE = "Data não encontrada"
REASON_INVALID_DATE = "Data inválida"
REASON_EMPTY_DESCRIPTION = "Descrição vazia"

EMPTY_DESCRIPTION_PLACEHOLDER = "Sem descrição"

# Standalone dot-decimal number; "(8/72)" and similar never match
TABULAR_VALUE_RE = re.compile(r"(?:^|\s)(-?\d+(?:\.\d{1,2})?)(?=\s|$)")

LEGACY_DATE_RE = re.compile(r"(\d{2})/(\d{2})/(\d{4})")
LEGACY_VALUE_RE = re.compile(r"(?:R\$\s*)?(-?\s*\d{1,3}(?:\.\d{3})*,\d{2})")
# Undated legacy lines up to this length (table borders, page numbers) are skipped silently
LEGACY_MIN_REPORTED_LENGTH = 10

_WHITESPACE_RE = re.compile(r"\s+")
_TABULAR_EDGE_RE = re.compile(r"^[\s\-:]+|[\s\-:]+$")
_NON_ALNUM_EDGE_RE = re.compile(r"^[\W_]+|[\W_]+$")


@dataclass(frozen=True)
class ParsedRecord:
    """A statement line with its date, signed value and description recovered.

    ``suffix`` is the text after the value in the tabular layout (the
    counterpart account name) and None in the legacy layout.
    """

    line: str
    date: date
    signed_value: Decimal
    description: str
    suffix: Optional[str] = None

    @property
    def value(self) -> Decimal:
        return abs(self.signed_value)


@dataclass(frozen=True)
class IgnoredLine:
    """Input the pipeline could not resolve, reported back instead of dropped."""

    line: str
    reason: str
    date: Optional[date] = None
    value: Optional[Decimal] = None

    def as_dict(self) -> dict:
        return {
            "line": self.line,
            "reason": self.reason,
            "date": self.date.isoformat() if self.date else None,
            "value": float(self.value) if self.value is not None else None,
        }


def _clean_tabular_description(text: str) -> str:
    text = _WHITESPACE_RE.sub(" ", text).strip()
    text = _TABULAR_EDGE_RE.sub("", text)
    return text or EMPTY_DESCRIPTION_PLACEHOLDER


def parse_tabular_record(record: LogicalRecord) -> ParsedRecord | IgnoredLine:
    """Parse one reassembled tabular record.

    The first standalone number after the date is the value. Text before it
    is the description and text after it is the account suffix. An empty
    description becomes "Sem descrição" rather than an ignored line.
    """
    try:
        record_date = parse_statement_date(record.date_text)
    except ValueError:
        return IgnoredLine(line=record.raw_text, reason=REASON_INVALID_DATE)

    remainder = record.raw_text[len(record.date_text):].strip()
    match = TABULAR_VALUE_RE.search(remainder)
    if match is None:
        return IgnoredLine(line=record.raw_text, reason=REASON_TABULAR_NO_VALUE, date=record_date)

    return ParsedRecord(
        line=record.raw_text,
        date=record_date,
        signed_value=parse_dot_decimal(match.group(1)),
        description=_clean_tabular_description(remainder[: match.start(1)]),
        suffix=remainder[match.end(1):].strip(),
    )


def parse_legacy_line(line: str) -> ParsedRecord | IgnoredLine | None:
    """Parse one line of a legacy (comma-decimal) statement.

    Returns None for lines that are skipped without being reported: blank
    lines and short undated fragments.
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    date_match = LEGACY_DATE_RE.search(trimmed)
    if date_match is None:
        if len(trimmed) > LEGACY_MIN_REPORTED_LENGTH:
            return IgnoredLine(line=trimmed, reason=REASON_NO_DATE)
        return None

    date_text = date_match.group(0)
    try:
        record_date = parse_statement_date(date_text)
    except ValueError:
        return IgnoredLine(line=trimmed, reason=REASON_INVALID_DATE)

    value_match = LEGACY_VALUE_RE.search(trimmed)
    if value_match is None:
        return IgnoredLine(line=trimmed, reason=REASON_NO_VALUE, date=record_date)

    signed_value = parse_comma_decimal(value_match.group(1))

    description = trimmed.replace(date_text, "", 1).replace(value_match.group(0), "", 1)
    description = _WHITESPACE_RE.sub(" ", description).replace("R$", "", 1).strip()
    description = _NON_ALNUM_EDGE_RE.sub("", description)

    if not description:
        return IgnoredLine(
            line=trimmed,
            reason=REASON_EMPTY_DESCRIPTION,
            date=record_date,
            value=abs(signed_value),
        )

    return ParsedRecord(
        line=trimmed,
        date=record_date,
        signed_value=signed_value,
        description=description,
    )
