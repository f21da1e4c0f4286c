"""
Module: extraction

Purpose:
    Document text extraction for the parser. Produces the ordered lines of
    a PDF (blank line between pages) as one string.

Key Functions:
    - extract_pdf_text(): Path → text
    - extract_pdf_text_from_bytes(): bytes → text

Key Classes:
    - ExtractionConfig: Row grouping settings
    - ExtractionError: "extraction failed"; never reaches the parser

Dependencies:
    - fitz (PyMuPDF)
"""

from .config import ExtractionConfig
from .pdf import ExtractionError, extract_pdf_text, extract_pdf_text_from_bytes, page_lines

__all__ = [
    "ExtractionConfig",
    "ExtractionError",
    "extract_pdf_text",
    "extract_pdf_text_from_bytes",
    "page_lines",
]
