"""Line repair and record grouping for tabular statements.

PDF text extraction breaks dates and values across lines. The repairs below
rejoin them, then lines are grouped into one logical record per transaction,
anchored on a leading DD/MM/YYYY date.
"""

import re
from dataclasses import dataclass
from typing import Iterator

# Ordered (pattern, replacement) pairs. The value rule for "<digits>.<digit>\n<digit>"
# must run before the "<digits>.\n<digits>" rule.
LINE_REPAIRS: list[tuple[re.Pattern[str], str]] = [
    # "25/01/2" + "026" -> "25/01/2026"
    (re.compile(r"(\d{2}/\d{2}/\d)\n(\d{3})"), r"\1\2"),
    # "-619.1" + "3" -> "-619.13"
    (re.compile(r"(\d+\.\d)\n(\d)"), r"\1\2"),
    # "-3260." + "66" -> "-3260.66"
    (re.compile(r"(\d+\.)\n(\d+)"), r"\1\2"),
]

PAGE_MARKERS = ("-- 1 of", "-- 2 of", "-- 3 of", "-- 4 of")
HEADER_RE = re.compile(r"^Data\s+Descrição")
RECORD_DATE_RE = re.compile(r"^(\d{2}/\d{2}/\d{4})")


@dataclass(frozen=True)
class LogicalRecord:
    """One transaction's worth of text: its date token and the joined raw lines."""

    date_text: str
    raw_text: str


def repair_text(text: str) -> str:
    """Apply every line repair once, in order.

    A second pass is a no-op on extracted statement text, but not on arbitrary
    input: a chain such as "1.\n2.\n3" is only partly joined by one pass.
    """
    for pattern, replacement in LINE_REPAIRS:
        text = pattern.sub(replacement, text)
    return text


def is_noise_line(line: str) -> bool:
    """Blank lines, pagination markers and the column header carry no record data."""
    if not line.strip():
        return True
    if any(marker in line for marker in PAGE_MARKERS):
        return True
    return HEADER_RE.match(line) is not None


def iter_records(text: str) -> Iterator[LogicalRecord]:
    """Repair the text and yield logical records in statement order.

    Lines before the first dated line have no record to attach to and are
    dropped.
    """
    date_text = None
    parts: list[str] = []

    for line in repair_text(text).split("\n"):
        if is_noise_line(line):
            continue

        match = RECORD_DATE_RE.match(line)
        if match:
            if date_text is not None:
                yield LogicalRecord(date_text=date_text, raw_text=" ".join(parts))
            date_text = match.group(1)
            parts = [line]
        elif date_text is not None:
            parts.append(line)

    if date_text is not None:
        yield LogicalRecord(date_text=date_text, raw_text=" ".join(parts))
