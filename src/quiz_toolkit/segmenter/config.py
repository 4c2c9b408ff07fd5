"""
Module: segmenter.config

Purpose:
    Configuration dataclass for the line classifier. Holds the keyword
    vocabularies and enumerator set used by the classification rules.

Key Classes:
    - SegmenterConfig: Immutable classifier settings

Key Constants:
    - DEFAULT_CONFIG: Settings used when callers pass no config

Used By:
    - segmenter.rules: Builds compiled patterns from a config
    - segmenter.classifier / segmenter.assembly: Accept an optional config
"""

from dataclasses import dataclass
from typing import Tuple

from quiz_toolkit.common.labels import PART_ENUMERATORS


@dataclass(frozen=True)
class SegmenterConfig:
    """
    Configuration for line classification.

    Frozen (and therefore hashable) so compiled patterns can be cached
    per config.

    Attributes:
        image_tokens: Words marking an image placeholder (case-insensitive)
        explanation_keywords: Prefixes of an explanation marker
        answer_keywords: Prefixes of an answer marker
        part_enumerators: Characters accepted as part labels
        part_delimiters: Characters accepted after a part label
        separators: Characters accepted after a marker keyword
        strip_emphasis: Remove markdown "*" / "**" before matching (default True)
        allow_bare_marks: Accept "text 4" as 4 marks, not only "text (4)" (default False)
    """
    image_tokens: Tuple[str, ...] = ("picture", "image", "ছবি", "চিত্র")
    explanation_keywords: Tuple[str, ...] = ("explanation", "explain", "exp", "ব্যাখ্যা", "bekkha")
    answer_keywords: Tuple[str, ...] = ("answer", "ans", "correct", "উত্তর", "সঠিক")
    part_enumerators: Tuple[str, ...] = PART_ENUMERATORS
    part_delimiters: Tuple[str, ...] = (".", ")", "।")
    separators: Tuple[str, ...] = (":", "=", "ঃ")  # ঃ (visarga) doubles as a colon
    strip_emphasis: bool = True
    allow_bare_marks: bool = False


DEFAULT_CONFIG = SegmenterConfig()
