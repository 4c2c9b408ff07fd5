"""
Module: segmenter.rules

Purpose:
    The ordered rule table behind the line classifier. Each rule pairs a
    role with an extractor; the classifier walks DEFAULT_RULES top to
    bottom and the first extractor that returns a match decides the role.
    Rule precedence is therefore the order of the tuple below:

        1. image placeholder
        2. explanation marker
        3. answer marker
        4. part label

Key Classes:
    - Rule: (name, role, extractor) triple
    - RuleMatch: Payload returned by an extractor
    - CompiledPatterns: Regexes built from a SegmenterConfig

Key Functions:
    - compile_patterns(): Build (and cache) patterns for a config

Dependencies:
    - re (std), functools (std)
    - segmenter.detection.marks: Trailing mark extraction

Used By:
    - segmenter.classifier
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional, Tuple

from quiz_toolkit.core.models.lines import LineRole

from .config import SegmenterConfig
from .detection.marks import extract_trailing_marks
from .normalize import nfc


@dataclass(frozen=True)
class RuleMatch:
    """What an extractor pulled out of a line."""
    body: str
    part_letter: Optional[str] = None
    marks: Optional[int] = None


@dataclass(frozen=True)
class CompiledPatterns:
    """Patterns and vocabularies derived from one SegmenterConfig."""
    image_tokens: Tuple[str, ...]
    explanation: re.Pattern
    answer: re.Pattern
    answer_bare: re.Pattern
    part_label: re.Pattern
    allow_bare_marks: bool


Extractor = Callable[[str, CompiledPatterns], Optional[RuleMatch]]


@dataclass(frozen=True)
class Rule:
    name: str
    role: LineRole
    extract: Extractor


# ─────────────────────────────────────────────────────────────────────────────
# Pattern Compilation
# ─────────────────────────────────────────────────────────────────────────────

def _alternation(words: Tuple[str, ...]) -> str:
    # Longest first so "explanation" is tried before "exp"
    ordered = sorted({nfc(w) for w in words}, key=len, reverse=True)
    return "|".join(re.escape(w) for w in ordered)


# Emphasis closing right after a marker keyword or label ("**Answer:** b", "**a.** x")
_EMPHASIS = r"\*{0,2}"


def _char_class(chars: Tuple[str, ...]) -> str:
    return "[" + "".join(re.escape(nfc(c)) for c in chars) + "]"


@lru_cache(maxsize=16)
def compile_patterns(config: SegmenterConfig) -> CompiledPatterns:
    """
    Compile the classifier patterns for a config.

    Keywords and enumerators are NFC-normalized here so they compare equal
    to normalized input regardless of how the config was written.
    """
    separators = _char_class(config.separators)
    explanation = _alternation(config.explanation_keywords)
    answer = _alternation(config.answer_keywords)

    return CompiledPatterns(
        image_tokens=tuple(nfc(t).lower() for t in config.image_tokens),
        explanation=re.compile(
            rf"^(?:{explanation}){_EMPHASIS}\s*{separators}{_EMPHASIS}\s*(.*)$", re.IGNORECASE | re.DOTALL
        ),
        answer=re.compile(
            rf"^(?:{answer}){_EMPHASIS}\s*{separators}{_EMPHASIS}\s*(.*)$", re.IGNORECASE | re.DOTALL
        ),
        answer_bare=re.compile(rf"^(?:{answer})$", re.IGNORECASE),
        part_label=re.compile(
            rf"^({_char_class(config.part_enumerators)})"
            rf"{_char_class(config.part_delimiters)}{_EMPHASIS}\s+(\S.*)$",
            re.DOTALL,
        ),
        allow_bare_marks=config.allow_bare_marks,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Extractors
# ─────────────────────────────────────────────────────────────────────────────

def match_image_placeholder(line: str, patterns: CompiledPatterns) -> Optional[RuleMatch]:
    """
    "[There is a picture]", "[ছবি আছে]", or a bare "image" / "ছবি" line.

    Body is the bracketed text, or empty for a bare token.
    """
    lowered = line.lower()
    if line.startswith("[") and line.endswith("]"):
        if any(token in lowered for token in patterns.image_tokens):
            return RuleMatch(body=line[1:-1].strip())
        return None
    if lowered in patterns.image_tokens:
        return RuleMatch(body="")
    return None


def match_explanation_marker(line: str, patterns: CompiledPatterns) -> Optional[RuleMatch]:
    """"Explanation: ...", "ব্যাখ্যা:", "Bekkha = ..."."""
    match = patterns.explanation.match(line)
    if match is None:
        return None
    return RuleMatch(body=match.group(1).strip())


def match_answer_marker(line: str, patterns: CompiledPatterns) -> Optional[RuleMatch]:
    """"Answer:", "উত্তর: ...", "Correct: c", or a lone "Answer" line."""
    match = patterns.answer.match(line)
    if match is not None:
        return RuleMatch(body=match.group(1).strip())
    if patterns.answer_bare.match(line):
        return RuleMatch(body="")
    return None


def match_part_label(line: str, patterns: CompiledPatterns) -> Optional[RuleMatch]:
    """
    "a. What is dye? (1)" -> letter "a", marks 1, body "What is dye?".

    Marks are optional; the body keeps everything else after the label.
    """
    match = patterns.part_label.match(line)
    if match is None:
        return None
    body, marks = extract_trailing_marks(match.group(2), allow_bare=patterns.allow_bare_marks)
    return RuleMatch(body=body, part_letter=match.group(1), marks=marks)


DEFAULT_RULES: Tuple[Rule, ...] = (
    Rule("image_placeholder", LineRole.IMAGE_PLACEHOLDER, match_image_placeholder),
    Rule("explanation_marker", LineRole.EXPLANATION_MARKER, match_explanation_marker),
    Rule("answer_marker", LineRole.ANSWER_MARKER, match_answer_marker),
    Rule("part_label", LineRole.PART_LABEL, match_part_label),
)
