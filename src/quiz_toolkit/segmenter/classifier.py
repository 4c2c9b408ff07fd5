"""
Module: segmenter.classifier

Purpose:
    Line classifier - maps one line of raw Bengali/English quiz text to a
    ClassifiedLine. A total, pure function: every line gets exactly one
    role, PLAIN_TEXT is the fallback, and nothing is raised for odd input.

    A non-PLAIN_TEXT result means the line matched a pattern, not that its
    content was verified; callers needing stricter checks layer them on top.

Key Functions:
    - classify_line(): Classify a single line
    - classify_lines(): Classify an iterable of lines
    - classify_text(): Split a document on line breaks and classify each line

Dependencies:
    - segmenter.rules: Ordered rule table
    - segmenter.normalize: NFC normalization

Used By:
    - segmenter.assembly: Groups classified lines into questions
    - scripts/segment_text.py: Command line output
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from quiz_toolkit.core.models.lines import ClassifiedLine, LineRole

from .config import DEFAULT_CONFIG, SegmenterConfig
from .normalize import normalize_line
from .rules import DEFAULT_RULES, Rule, compile_patterns

logger = logging.getLogger(__name__)


def classify_line(
    text: str,
    config: Optional[SegmenterConfig] = None,
    *,
    rules: Sequence[Rule] = DEFAULT_RULES,
) -> ClassifiedLine:
    """
    Classify one line of quiz text.

    The line is NFC-normalized (and emphasis/zero-width characters removed)
    before any rule runs, so precomposed and decomposed spellings of the
    same Bengali text classify identically. Rules are tried in order and
    the first match wins.

    Args:
        text: One line of text; may be empty.
        config: Classifier settings. Defaults to DEFAULT_CONFIG.
        rules: Ordered rule table. Defaults to DEFAULT_RULES.

    Returns:
        ClassifiedLine whose raw_text is the unmodified input.

    Example:
        >>> classify_line("Explanation: The lens forms a virtual image.").body
        'The lens forms a virtual image.'
        >>> classify_line("d. Explain with ray diagram. (4)").marks
        4
    """
    config = config or DEFAULT_CONFIG
    line = normalize_line(text, strip_emphasis=config.strip_emphasis)

    if line:
        patterns = compile_patterns(config)
        for rule in rules:
            match = rule.extract(line, patterns)
            if match is None:
                continue
            logger.debug(f"Line {line[:40]!r} matched rule {rule.name}")
            return ClassifiedLine(
                raw_text=text,
                role=rule.role,
                body=match.body,
                part_letter=match.part_letter,
                marks=match.marks,
            )

    return ClassifiedLine(raw_text=text, role=LineRole.PLAIN_TEXT, body=line)


def classify_lines(
    lines: Iterable[str],
    config: Optional[SegmenterConfig] = None,
) -> List[ClassifiedLine]:
    """Classify each line independently, preserving order."""
    return [classify_line(line, config) for line in lines]


def classify_text(
    text: str,
    config: Optional[SegmenterConfig] = None,
) -> List[ClassifiedLine]:
    """
    Classify every line of a document.

    Args:
        text: Whole document; split on any line boundary.
        config: Classifier settings.

    Returns:
        One ClassifiedLine per line, in document order.
    """
    return classify_lines(text.splitlines(), config)
