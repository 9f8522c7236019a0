"""Bank statement parsing pipeline: layout detection, line repair, parsing, classification."""

from enuves.parsing.layout import Layout, detect_layout
from enuves.parsing.reassembler import LINE_REPAIRS, LogicalRecord, iter_records, repair_text
from enuves.parsing.record_parser import (
    IgnoredLine,
    ParsedRecord,
    parse_legacy_line,
    parse_tabular_record,
)
from enuves.parsing.classifier import Classification, StatementClassifier, classify
from enuves.parsing.assembler import ParsedCandidate, StatementPreview, assemble_statement

__all__ = [
    "Layout",
    "detect_layout",
    "LINE_REPAIRS",
    "LogicalRecord",
    "iter_records",
    "repair_text",
    "IgnoredLine",
    "ParsedRecord",
    "parse_legacy_line",
    "parse_tabular_record",
    "Classification",
    "StatementClassifier",
    "classify",
    "ParsedCandidate",
    "StatementPreview",
    "assemble_statement",
]
