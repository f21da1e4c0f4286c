"""
Module: extraction.pdf

Purpose:
    PDF text extraction. Rebuilds reading-order lines from positioned
    text spans and hands one normalized string to the parser.

Key Functions:
    - extract_pdf_text(): Text of a PDF file
    - extract_pdf_text_from_bytes(): Text of an in-memory PDF
    - page_lines(): Reading-order lines of one page

Dependencies:
    - fitz (PyMuPDF): PDF access and span positions

Used By:
    - mcq_reviewer.cli: parse/quiz commands on .pdf input

Algorithm:
    1. For each page, collect every text span with its baseline origin
    2. Bucket spans by rounded baseline y (ExtractionConfig.row_precision)
    3. Order buckets top to bottom, spans left to right, join with spaces
    4. Normalize each line, drop empty ones
    5. Add one blank line after each page
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import fitz

from mcq_reviewer.parsing.normalizer import normalize_text
from .config import ExtractionConfig

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when a PDF cannot be opened or read."""


def extract_pdf_text(
    pdf_path: Path,
    *,
    config: Optional[ExtractionConfig] = None,
) -> str:
    """
    Extract text from a PDF file.

    Args:
        pdf_path: Path to PDF file.
        config: Optional extraction configuration.

    Returns:
        Normalized text, pages separated by blank lines.

    Raises:
        FileNotFoundError: If pdf_path doesn't exist.
        ExtractionError: If the PDF can't be opened or has no pages.

    Example:
        >>> text = extract_pdf_text(Path("quiz.pdf"))
        >>> questions = parse_mcq_text(text)
    """
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    try:
        doc = fitz.open(pdf_path)
    except (RuntimeError, ValueError) as e:
        raise ExtractionError(f"PDF read failed: {pdf_path.name}: {e}") from e

    with doc:
        text = _document_text(doc, config or ExtractionConfig())
    logger.info(f"Extracted {len(text)} characters from {pdf_path.name}")
    return text


def extract_pdf_text_from_bytes(
    data: bytes,
    *,
    config: Optional[ExtractionConfig] = None,
) -> str:
    """
    Extract text from an in-memory PDF (e.g. an upload).

    Raises:
        ExtractionError: If the data is not a readable PDF or has no pages.
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise ExtractionError(f"PDF read failed: {e}") from e

    with doc:
        return _document_text(doc, config or ExtractionConfig())


def _document_text(doc: fitz.Document, config: ExtractionConfig) -> str:
    """Collect lines from every page of an open document."""
    if doc.page_count == 0:
        raise ExtractionError("Document has no pages")

    page_count = doc.page_count
    if config.max_pages is not None:
        page_count = min(page_count, config.max_pages)

    all_lines: List[str] = []
    for page_idx in range(page_count):
        try:
            all_lines.extend(page_lines(doc[page_idx], config))
        except (RuntimeError, ValueError) as e:
            raise ExtractionError(f"Failed to read page {page_idx + 1}: {e}") from e
        all_lines.append("")

    logger.debug(f"Read {page_count} page(s), {len(all_lines)} line(s)")
    return normalize_text("\n".join(all_lines))


def page_lines(page: fitz.Page, config: Optional[ExtractionConfig] = None) -> List[str]:
    """
    Rebuild the lines of one page in reading order.

    Args:
        page: PyMuPDF page.
        config: Row grouping settings.

    Returns:
        Non-empty normalized lines, top to bottom.
    """
    config = config or ExtractionConfig()
    rows: Dict[float, List[Tuple[float, str]]] = {}

    data = page.get_text("dict")
    for block in data.get("blocks", []):
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text", "")
                if not text:
                    continue
                x, y = span.get("origin", span["bbox"][:2])
                y_key = round(y / config.row_precision) * config.row_precision
                rows.setdefault(y_key, []).append((x, text))

    lines: List[str] = []
    for y_key in sorted(rows):
        parts = [text for _, text in sorted(rows[y_key], key=lambda item: item[0])]
        line = normalize_text(" ".join(parts))
        if line:
            lines.append(line)
    return lines
