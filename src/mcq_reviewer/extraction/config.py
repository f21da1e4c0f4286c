"""
Module: extraction.config

Purpose:
    Configuration dataclass for PDF text extraction.

Key Classes:
    - ExtractionConfig: Row grouping and page limit settings

Used By:
    - extraction.pdf
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for turning PDF pages into lines of text.

    Attributes:
        row_precision: Baseline y-values (PDF points) are rounded to the
            nearest multiple of this; spans sharing a rounded baseline form
            one line. Defaults to 0.5.
        max_pages: Only read the first N pages. None reads all.

    Invariants:
        - row_precision > 0
        - max_pages is None or max_pages >= 1
    """
    row_precision: float = 0.5
    max_pages: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.row_precision <= 0:
            raise ValueError(f"row_precision must be positive: {self.row_precision}")
        if self.max_pages is not None and self.max_pages < 1:
            raise ValueError(f"max_pages must be at least 1: {self.max_pages}")
