"""
Module: common.labels

Purpose:
    Part-label enumerator sets. Each script's acceptable label characters
    are listed explicitly, in ordinal order, rather than written as a raw
    code-point range (a range such as "a"-"ઘ" silently spans unrelated
    scripts).

Key Constants:
    - LATIN_ENUMERATORS: a ... z
    - BENGALI_ENUMERATORS: ক খ গ ঘ ঙ চ ছ জ ঝ ঞ (consonant order)
    - PART_ENUMERATORS: Both sets combined (classifier default)

Key Functions:
    - to_latin(): Map an enumerator to the Latin letter at the same position
    - enumerator_index(): Ordinal position of an enumerator (0-based)

Used By:
    - segmenter.config: Default enumerator set
    - segmenter.assembly: Canonical part letters / option labels
    - core.models.lines: ClassifiedLine.latin_letter
"""

from __future__ import annotations

from typing import Optional, Tuple

LATIN_ENUMERATORS: Tuple[str, ...] = tuple("abcdefghijklmnopqrstuvwxyz")

# Quiz papers letter parts ক, খ, গ, ঘ; the list continues in alphabet order
BENGALI_ENUMERATORS: Tuple[str, ...] = (
    "\u0995",  # ক
    "\u0996",  # খ
    "\u0997",  # গ
    "\u0998",  # ঘ
    "\u0999",  # ঙ
    "\u099A",  # চ
    "\u099B",  # ছ
    "\u099C",  # জ
    "\u099D",  # ঝ
    "\u099E",  # ঞ
)

PART_ENUMERATORS: Tuple[str, ...] = LATIN_ENUMERATORS + BENGALI_ENUMERATORS

_SCRIPTS = (LATIN_ENUMERATORS, BENGALI_ENUMERATORS)


def enumerator_index(letter: str) -> Optional[int]:
    """
    Ordinal position of a label character within its script.

    Example:
        >>> enumerator_index("গ")
        2
        >>> enumerator_index("?") is None
        True
    """
    for script in _SCRIPTS:
        if letter in script:
            return script.index(letter)
    return None


def to_latin(letter: str) -> str:
    """
    Map a part enumerator to its Latin equivalent.

    Latin letters are lower-cased; Bengali enumerators map by position
    (ক -> a, খ -> b, ...). Characters outside the known sets are returned
    unchanged.

    Example:
        >>> to_latin("ঘ")
        'd'
    """
    lowered = letter.lower()
    if lowered in LATIN_ENUMERATORS:
        return lowered
    index = enumerator_index(letter)
    if index is None:
        return letter
    return LATIN_ENUMERATORS[index]
