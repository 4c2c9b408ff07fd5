"""
Module: segmenter.splitting

Purpose:
    Split a document into units at boundary lines without consuming the
    boundary. Each unit after the first starts with its boundary text
    ("Question 2\\n..."), and whatever precedes the first boundary is kept
    as a preamble unit.

Key Functions:
    - split_at_boundary(): Lookahead split on a boundary pattern
    - split_sections(): Split on "---" / "###" separator lines

Key Constants:
    - QUESTION_BOUNDARY: "Question N", "প্রশ্ন N", "Q. N", "সৃজনশীল প্রশ্ন N"
"""

from __future__ import annotations

import re
from typing import List, Union

from .normalize import nfc

_DIGITS = "0-9০-৯"

QUESTION_BOUNDARY = re.compile(
    rf"^[ \t]*(?:Question|প্রশ্ন|Q\.?|সৃজনশীল\s+প্রশ্ন)[ \t]*[{_DIGITS}]+",
    re.IGNORECASE | re.MULTILINE,
)

SECTION_SEPARATOR = re.compile(r"^[ \t]*(?:-{3,}|#{3})[ \t]*$", re.MULTILINE)


def split_at_boundary(
    text: str,
    boundary: Union[str, re.Pattern] = QUESTION_BOUNDARY,
) -> List[str]:
    """
    Split text at every boundary match, keeping the boundary in the unit
    it opens.

    Args:
        text: Document text (NFC-normalized before matching).
        boundary: Compiled pattern, or a pattern string which is compiled
            with re.MULTILINE so "^" anchors at line starts.

    Returns:
        Units in document order. Concatenating them gives back the
        normalized text; an empty preamble is the only thing dropped.

    Example:
        >>> split_at_boundary("Header\\nQuestion 1\\nContent 1\\nQuestion 2\\nContent 2")
        ['Header\\n', 'Question 1\\nContent 1\\n', 'Question 2\\nContent 2']
    """
    if isinstance(boundary, str):
        boundary = re.compile(boundary, re.MULTILINE)

    text = nfc(text)
    starts = [m.start() for m in boundary.finditer(text) if m.start() > 0]
    cuts = [0] + sorted(set(starts)) + [len(text)]

    units = [text[begin:end] for begin, end in zip(cuts, cuts[1:])]
    return [unit for unit in units if unit]


def split_sections(text: str) -> List[str]:
    """
    Split text on separator lines ("---", "----", "###").

    Separator lines themselves are dropped, as are sections that are
    blank after splitting.
    """
    sections = SECTION_SEPARATOR.split(text)
    return [section for section in sections if section.strip()]
