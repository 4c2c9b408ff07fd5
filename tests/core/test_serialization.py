"""
Unit Tests for Serialization Utilities

Tests for question (de)serialization and the JSONL helpers.
"""

import json

import pytest

from quiz_toolkit.core.models.lines import ClassifiedLine, LineRole
from quiz_toolkit.core.models.questions import (
    CqPart,
    CqQuestion,
    McqOption,
    McqQuestion,
    QuestionMetadata,
)
from quiz_toolkit.core.schemas.validator import ValidationError
from quiz_toolkit.core.utils.serialization import (
    deserialize_question,
    load_questions_jsonl,
    save_questions_jsonl,
    serialize_lines,
    serialize_question,
)


@pytest.fixture
def questions():
    cq = CqQuestion(
        QuestionMetadata(subject="পদার্থবিজ্ঞান", board="ঢা.বো.-২৪"),
        "একটি উত্তল লেন্স",
        (CqPart("a", "লেন্স কী?", 1, "স্বচ্ছ মাধ্যম"), CqPart("b", "ব্যাখ্যা করো।", 2)),
    )
    mcq = McqQuestion(
        QuestionMetadata(subject="Chemistry"),
        "Which gas?",
        (McqOption("a", "Oxygen"), McqOption("b", "Nitrogen")),
        "b",
    )
    return [cq, mcq]


class TestSerializeQuestion:
    """Tests for serialize_question / deserialize_question."""

    def test_deserialize_when_serialized_then_equal(self, questions):
        for q in questions:
            assert deserialize_question(serialize_question(q)) == q

    def test_deserialize_when_invalid_then_raises_validation_error(self):
        with pytest.raises(ValidationError):
            deserialize_question({"type": "cq", "parts": []})

    def test_deserialize_when_validation_skipped_then_model_checks_apply(self):
        data = {"type": "cq", "parts": [
            {"letter": "a", "text": "x", "marks": -2, "answer": ""},
        ]}
        with pytest.raises(ValueError, match="cannot be negative"):
            deserialize_question(data, validate=False)


class TestSerializeLines:
    """Tests for serialize_lines."""

    def test_serialize_lines_when_called_then_one_dict_per_line(self):
        lines = [
            ClassifiedLine("Answer:", LineRole.ANSWER_MARKER, ""),
            ClassifiedLine("a. x (1)", LineRole.PART_LABEL, "x", part_letter="a", marks=1),
        ]
        out = serialize_lines(lines)
        assert [d["role"] for d in out] == ["answer_marker", "part_label"]
        assert out[1]["marks"] == 1


class TestJsonl:
    """Tests for JSONL save/load."""

    def test_save_then_load_when_bengali_then_preserved(self, tmp_path, questions):
        path = tmp_path / "out" / "questions.jsonl"
        save_questions_jsonl(questions, path)

        raw = path.read_text(encoding="utf-8")
        assert "পদার্থবিজ্ঞান" in raw  # not ASCII-escaped
        assert load_questions_jsonl(path) == questions

    def test_load_when_file_missing_then_raises_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_questions_jsonl(tmp_path / "missing.jsonl")

    def test_load_when_blank_lines_then_skipped(self, tmp_path, questions):
        path = tmp_path / "q.jsonl"
        rows = [json.dumps(serialize_question(q)) for q in questions]
        path.write_text(rows[0] + "\n\n" + rows[1] + "\n", encoding="utf-8")
        assert len(load_questions_jsonl(path)) == 2

    def test_load_when_bad_json_then_error_names_line(self, tmp_path, questions):
        path = tmp_path / "q.jsonl"
        path.write_text(json.dumps(serialize_question(questions[0])) + "\n{not json\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="line 2"):
            load_questions_jsonl(path)

    def test_load_when_invalid_record_then_error_names_line(self, tmp_path):
        path = tmp_path / "q.jsonl"
        path.write_text(json.dumps({"type": "mcq", "options": []}) + "\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="line 1"):
            load_questions_jsonl(path)
