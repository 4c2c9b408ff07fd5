"""Common tables shared by the core models and the segmenter."""

from __future__ import annotations

from .labels import (
    BENGALI_ENUMERATORS,
    LATIN_ENUMERATORS,
    PART_ENUMERATORS,
    enumerator_index,
    to_latin,
)

__all__ = [
    "BENGALI_ENUMERATORS",
    "LATIN_ENUMERATORS",
    "PART_ENUMERATORS",
    "enumerator_index",
    "to_latin",
]
