"""Statement layout detection."""

from enum import Enum


class Layout(str, Enum):
    """The two statement export formats the parser understands."""

    TABULAR = "tabular"
    LEGACY = "legacy"


TABULAR_HEADER = "Data \tDescrição"


def detect_layout(text: str) -> Layout:
    """Classify extracted statement text by the header words of the tabular export.

    A legacy statement whose body happens to contain both "Data" and
    "Descrição" is classified as tabular; that is a known limitation of the
    heuristic.
    """
    if ("Data" in text and "Descrição" in text) or TABULAR_HEADER in text:
        return Layout.TABULAR
    return Layout.LEGACY
