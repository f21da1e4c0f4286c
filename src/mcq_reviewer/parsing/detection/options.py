"""
Module: parsing.detection.options

Purpose:
    Option label detection - finds "A)", "B.", "C:", "D -" markers at line
    starts inside a question block and slices out the stem and each
    option's text.

Key Functions:
    - extract_options(): Stem and options for one QuestionBlock

Used By:
    - parsing.assembler
"""

from __future__ import annotations

import logging
import re
from typing import List

from mcq_reviewer.core.models.blocks import QuestionBlock
from mcq_reviewer.core.models.questions import Option, OptionExtraction

logger = logging.getLogger(__name__)

OPTION_MARKER_PATTERN = re.compile(r"^[ \t]*([A-D])[ \t]*[).:-]\s+", re.MULTILINE)

# A block needs at least this many markers before it is sliced at all
MIN_OPTION_MARKERS = 2


def extract_options(block: QuestionBlock) -> OptionExtraction:
    """
    Split a question block into its stem and options.

    Each option runs from just after its marker to the next marker (or the
    end of the body), trimmed. Options whose text is empty are skipped.
    Duplicate letters are all kept, in order; every physical marker is one
    option.

    Args:
        block: Question block to scan.

    Returns:
        OptionExtraction. With fewer than two markers the result has an
        empty question and no options, which the assembler drops.

    Example:
        >>> block = QuestionBlock(1, "Sum?\\nA) 3\\nB) 4\\nC) 5")
        >>> [o.key for o in extract_options(block).options]
        ['A', 'B', 'C']
    """
    body = block.body
    markers = list(OPTION_MARKER_PATTERN.finditer(body))
    if len(markers) < MIN_OPTION_MARKERS:
        logger.debug(f"Q{block.number}: only {len(markers)} option marker(s)")
        return OptionExtraction(question="", options=())

    question = body[:markers[0].start()].strip()

    options: List[Option] = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(body)
        text = body[marker.end():end].strip()
        if not text:
            continue
        options.append(Option(key=marker.group(1).upper(), text=text))

    return OptionExtraction(question=question, options=tuple(options))
