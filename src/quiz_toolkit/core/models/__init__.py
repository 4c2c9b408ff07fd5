"""
Core Models Package

Immutable, validated data models shared by the segmenter and the
serialization layer.

All models in this package are frozen dataclasses, so a classified line
or an assembled question can be passed around freely without being
mutated along the way.
"""

from .lines import ClassifiedLine, LineRole
from .questions import (
    CqPart,
    CqQuestion,
    McqOption,
    McqQuestion,
    Question,
    QuestionMetadata,
    question_from_dict,
)

__all__ = [
    "ClassifiedLine",
    "LineRole",
    "CqPart",
    "CqQuestion",
    "McqOption",
    "McqQuestion",
    "Question",
    "QuestionMetadata",
    "question_from_dict",
]
