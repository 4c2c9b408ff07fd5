"""
Module: segmenter.normalize

Purpose:
    Text normalization applied before any pattern test. Bengali text that
    looks identical on screen may arrive precomposed or decomposed (e.g.
    "য়" as U+09DF or as U+09AF U+09BC), so every comparison happens on
    NFC text.

Key Functions:
    - nfc(): Canonical composition
    - normalize_line(): NFC + zero-width removal + edge emphasis removal + trim
    - normalize_text(): NFC + zero-width removal for whole documents
"""

from __future__ import annotations

import re
import unicodedata

ZERO_WIDTH_PATTERN = re.compile("[\u200b\ufeff]")
# Markdown emphasis wrapping the whole line ("**Answer:**"); asterisks inside
# the text (2 * 3, 4**2) are content
EDGE_EMPHASIS_PATTERN = re.compile(r"^\*+\s*|\s*\*+$")


def nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def normalize_text(text: str) -> str:
    """NFC-normalize a document and drop zero-width characters."""
    return ZERO_WIDTH_PATTERN.sub("", nfc(text))


def normalize_line(text: str, *, strip_emphasis: bool = True) -> str:
    """
    Prepare one line for classification.

    Args:
        text: Raw line
        strip_emphasis: Remove markdown asterisks at the start and end of
            the line ("**ব্যাখ্যা:**" -> "ব্যাখ্যা:"). Markers followed by
            emphasis ("**Answer:** b") are handled by the rule patterns.

    Returns:
        Normalized, trimmed line

    Example:
        >>> normalize_line("  **Answer:**\\u200b ")
        'Answer:'
    """
    line = normalize_text(text)
    if strip_emphasis:
        line = EDGE_EMPHASIS_PATTERN.sub("", line.strip())
    return line.strip()
