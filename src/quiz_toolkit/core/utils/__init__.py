"""
Utils Package

Serialization helpers for questions and classified lines.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_lines,
    load_questions_jsonl,
    save_questions_jsonl,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_lines",
    "load_questions_jsonl",
    "save_questions_jsonl",
]
