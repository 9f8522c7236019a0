"""PDF text extraction."""

import io

import pdfplumber
import structlog

logger = structlog.get_logger()


def extract_text(pdf_bytes: bytes) -> str:
    """Extract the text of every page, joined by newlines.

    Raises whatever pdfplumber raises for unreadable documents.
    """
    pages = []
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")

    text = "\n".join(pages)
    logger.info("pdf_text_extracted", pages=len(pages), chars=len(text))
    return text
