"""
Module: segmenter.detection.marks

Purpose:
    Trailing mark detection - finds the "(4)" / "[4]" / "(৪)" allocation at
    the end of a part line and splits it off the part text.

Key Functions:
    - extract_trailing_marks(): Split "text (N)" into ("text", N)
    - parse_number(): Convert Western or Bengali digit strings to int

Used By:
    - segmenter.rules: Part label extraction
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

BENGALI_DIGITS = "০১২৩৪৫৬৭৮৯"
_DIGIT_TABLE = str.maketrans(BENGALI_DIGITS, "0123456789")

_DIGIT_CLASS = "0-9০-৯"

BRACKETED_MARK_PATTERN = re.compile(
    rf"\s*(?:\(\s*([{_DIGIT_CLASS}]+)\s*\)|\[\s*([{_DIGIT_CLASS}]+)\s*\])\s*$"
)
BARE_MARK_PATTERN = re.compile(rf"\s+([{_DIGIT_CLASS}]+)\s*$")


def parse_number(text: str) -> int:
    """
    Convert a string of Western or Bengali digits to an int.

    Example:
        >>> parse_number("১২")
        12

    Raises:
        ValueError: If text contains anything other than digits
    """
    ascii_digits = text.strip().translate(_DIGIT_TABLE)
    if not ascii_digits.isascii() or not ascii_digits.isdigit():
        raise ValueError(f"Not a number: {text!r}")
    return int(ascii_digits)


def extract_trailing_marks(
    text: str,
    *,
    allow_bare: bool = False,
) -> Tuple[str, Optional[int]]:
    """
    Split a trailing mark allocation off a part's text.

    Args:
        text: Part text, e.g. "Explain with ray diagram. (4)"
        allow_bare: Also accept a bare trailing number ("প্রশ্ন? ২").
            Off by default because ordinary prompts often end in numbers.

    Returns:
        (body, marks) - body with the allocation removed and trailing
        whitespace stripped; marks is None when no allocation was found.

    Example:
        >>> extract_trailing_marks("What is dye? (1)")
        ('What is dye?', 1)
        >>> extract_trailing_marks("What is dye?")
        ('What is dye?', None)
    """
    match = BRACKETED_MARK_PATTERN.search(text)
    if match is None and allow_bare:
        match = BARE_MARK_PATTERN.search(text)
    if match is None:
        return text.rstrip(), None

    digits = next(group for group in match.groups() if group)
    return text[:match.start()].rstrip(), parse_number(digits)
