"""
Schema Validation Utilities

Validates question dictionaries before they are turned into models.

Two levels:
- Basic checks (always): required fields, type tag, per-variant fields,
  option/part structure and mark values. Fail fast with a path to the
  offending field.
- Strict checks (``strict=True``): full JSON Schema validation against
  ``question.schema.json`` via the jsonschema library.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


QUESTION_TYPES = ("mcq", "cq")

_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a question dictionary in document-store shape.

    Args:
        data: Question dictionary (as produced by ``to_dict()``)
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Question must be a JSON object", path="")

    kind = data.get("type")
    if kind not in QUESTION_TYPES:
        raise ValidationError(
            f"Invalid question type: {kind!r} (expected one of {QUESTION_TYPES})",
            path="type",
        )

    tags = data.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValidationError("tags must be a list of strings", path="tags")

    if "isQuizzable" in data and not isinstance(data["isQuizzable"], bool):
        raise ValidationError("isQuizzable must be a boolean", path="isQuizzable")

    if kind == "mcq":
        _validate_mcq(data)
    else:
        _validate_cq(data)

    if strict:
        schema = _load_schema("question")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            )


def _validate_mcq(data: dict[str, Any]) -> None:
    """Validate MCQ-only fields and reject CQ fields."""
    if "parts" in data:
        raise ValidationError("MCQ questions cannot carry parts", path="parts")

    options = data.get("options")
    if not isinstance(options, list) or not options:
        raise ValidationError("MCQ questions need a non-empty options list", path="options")

    labels = []
    for i, option in enumerate(options):
        path = f"options[{i}]"
        if not isinstance(option, dict):
            raise ValidationError("option must be an object", path=path)
        missing = [f for f in ("label", "text") if f not in option]
        if missing:
            raise ValidationError(
                f"Option missing required fields: {missing}",
                path=path,
                errors=[f"Missing field: {f}" for f in missing],
            )
        labels.append(option["label"])

    if len(labels) != len(set(labels)):
        raise ValidationError(f"Duplicate option labels: {labels}", path="options")

    answer = data.get("correctAnswer", "")
    if answer and answer not in labels:
        raise ValidationError(
            f"correctAnswer {answer!r} does not match any option label",
            path="correctAnswer",
        )


def _validate_cq(data: dict[str, Any]) -> None:
    """Validate CQ-only fields and reject MCQ fields."""
    for field_name in ("options", "correctAnswer"):
        if field_name in data:
            raise ValidationError(f"CQ questions cannot carry {field_name}", path=field_name)

    parts = data.get("parts")
    if not isinstance(parts, list) or not parts:
        raise ValidationError("CQ questions need a non-empty parts list", path="parts")

    letters = []
    for i, part in enumerate(parts):
        _validate_part(part, f"parts[{i}]")
        letters.append(part["letter"])

    if len(letters) != len(set(letters)):
        raise ValidationError(f"Duplicate part letters: {letters}", path="parts")


def _validate_part(data: Any, path: str) -> None:
    """Validate one CQ part."""
    if not isinstance(data, dict):
        raise ValidationError("part must be an object", path=path)

    required = ["letter", "text", "marks", "answer"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Part missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    marks = data["marks"]
    if isinstance(marks, bool) or not isinstance(marks, int) or marks < 0:
        raise ValidationError(
            f"Invalid marks: {marks} (must be non-negative integer)",
            path=f"{path}.marks",
        )
