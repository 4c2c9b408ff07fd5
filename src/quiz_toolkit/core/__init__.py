"""
Quiz Toolkit Core Package

Shared data models, schema validation and serialization helpers.

- models: ClassifiedLine and the MCQ/CQ question records
- schemas: Validation of question dictionaries (basic and JSON Schema)
- utils: JSON / JSONL serialization
"""

from .models import ClassifiedLine, LineRole, CqQuestion, McqQuestion, QuestionMetadata

__all__ = [
    "ClassifiedLine",
    "LineRole",
    "CqQuestion",
    "McqQuestion",
    "QuestionMetadata",
]
