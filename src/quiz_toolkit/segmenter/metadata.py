"""
Module: segmenter.metadata

Purpose:
    Recognize metadata and header lines that precede quiz questions:
    "[Subject: Physics]", "[বিষয়: বাংলাদেশ ও বিশ্বপরিচয়]", "Board: D.B.-24",
    "Question 3", "প্রশ্ন ১৬".

Key Functions:
    - parse_metadata_line(): (field, value) for a metadata line, else None
    - is_question_header(): True for short "Question N" style headers
    - is_question_number_line(): "3. ..." / "৩. ..." MCQ question starts
    - strip_question_number(): Drop the leading "3." from such a line
    - parse_section_header(): "উদ্দীপক:" / "প্রশ্ন:" CQ section headers
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from .normalize import nfc, normalize_line
from .splitting import QUESTION_BOUNDARY

# Header lines longer than this are sentences that happen to start with "Question"
MAX_HEADER_LENGTH = 50

# Keys are NFC-normalized below, so "বিষয়" with U+09DF or with
# U+09AF U+09BC maps to the same entry.
_FIELD_KEYS: Dict[str, str] = {
    "subject": "subject",
    "topic": "subject",
    "বিষয়": "subject",
    "chapter": "chapter",
    "অধ্যায়": "chapter",
    "lesson": "lesson",
    "পাঠ": "lesson",
    "board": "board",
    "বোর্ড": "board",
}
FIELD_KEYS: Dict[str, str] = {nfc(k): v for k, v in _FIELD_KEYS.items()}

_KEY_ALTERNATION = "|".join(
    re.escape(k) for k in sorted(FIELD_KEYS, key=len, reverse=True)
)

METADATA_PATTERN = re.compile(
    rf"^\[?\s*({_KEY_ALTERNATION})\**\s*[:ঃ]\**\s*([^\]]*?)\s*\]?$",
    re.IGNORECASE,
)

QUESTION_NUMBER_PATTERN = re.compile(r"^[0-9০-৯]+[.।]\**\s*")

# CQ section headers: stimulus ("উদ্দীপক:") and question list ("প্রশ্ন:")
SECTION_HEADER_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = (
    ("stimulus", re.compile(r"^উদ্দীপক\s*[:ঃ]\s*(.*)$")),
    ("question", re.compile(r"^প্রশ্ন\s*[:ঃ]\s*(.*)$")),
)


def parse_metadata_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Parse a metadata line.

    Args:
        line: Raw line, optionally wrapped in brackets and markdown emphasis

    Returns:
        (field, value) with field one of "subject", "chapter", "lesson",
        "board"; None when the line is not metadata.

    Example:
        >>> parse_metadata_line("**[Board: D.B.-23]**")
        ('board', 'D.B.-23')
    """
    normalized = normalize_line(line)
    match = METADATA_PATTERN.match(normalized)
    if match is None:
        return None
    field = FIELD_KEYS.get(match.group(1).lower())
    if field is None:
        return None
    return field, match.group(2).strip()


def is_question_header(line: str) -> bool:
    """True for a short standalone header such as "Question 3" or "প্রশ্ন ১৬"."""
    normalized = normalize_line(line)
    return (
        len(normalized) < MAX_HEADER_LENGTH
        and QUESTION_BOUNDARY.match(normalized) is not None
    )


def is_question_number_line(line: str) -> bool:
    """True for numbered MCQ question lines ("55. What is ...", "৩. ...")."""
    return QUESTION_NUMBER_PATTERN.match(normalize_line(line)) is not None


def strip_question_number(line: str) -> str:
    return QUESTION_NUMBER_PATTERN.sub("", normalize_line(line), count=1).strip()


def parse_section_header(line: str) -> Optional[Tuple[str, str]]:
    """
    Recognize a CQ section header.

    Returns:
        ("stimulus" | "question", inline text after the separator), or None

    Example:
        >>> parse_section_header("উদ্দীপক:")
        ('stimulus', '')
    """
    normalized = normalize_line(line)
    for section, pattern in SECTION_HEADER_PATTERNS:
        match = pattern.match(normalized)
        if match is not None:
            return section, match.group(1).strip()
    return None
