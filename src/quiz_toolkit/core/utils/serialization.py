"""
Serialization Utilities

Provides to/from JSON utilities for the question models and classified
lines.

- ``serialize_*`` / ``deserialize_*`` functions wrap the models'
  ``to_dict()`` / ``from_dict()`` methods
- Validation runs before deserialization so bad records fail with a
  field path instead of a KeyError
- JSONL helpers write one record per line, UTF-8, without ASCII escaping
  so Bengali text stays readable
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.lines import ClassifiedLine
from ..models.questions import Question, question_from_dict
from ..schemas.validator import validate_question, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize an MCQ or CQ question to a dictionary.

    The output can be written to JSON and will pass schema validation.

    Note:
        CQ total marks are NOT included - they are always calculated on load.
    """
    return question.to_dict()


def deserialize_question(data: dict[str, Any], *, validate: bool = True) -> Question:
    """
    Deserialize a question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building the model

    Returns:
        McqQuestion or CqQuestion, depending on data["type"]

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be turned into a model
    """
    if validate:
        validate_question(data, strict=False)
    return question_from_dict(data)


def serialize_lines(lines: Iterable[ClassifiedLine]) -> list[dict[str, Any]]:
    """Serialize classified lines to a list of dictionaries."""
    return [line.to_dict() for line in lines]


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_jsonl(path: Path, *, validate: bool = True) -> list[Question]:
    """
    Load questions from a JSONL file.

    Args:
        path: Path to a .jsonl file with one question per line
        validate: Whether to validate each question

    Returns:
        List of question models in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any line is not valid JSON or not a valid question
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    questions = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                data = json.loads(line)
                questions.append(deserialize_question(data, validate=validate))
            except (json.JSONDecodeError, ValidationError, ValueError, KeyError) as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e}",
                    path=str(path),
                    errors=[str(e)],
                )

    return questions


def save_questions_jsonl(questions: Iterable[Question], path: Path) -> None:
    """
    Save questions to a JSONL file, creating parent directories.

    Args:
        questions: Question models to save
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        for question in questions:
            f.write(json.dumps(serialize_question(question), ensure_ascii=False))
            f.write("\n")
