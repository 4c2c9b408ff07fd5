"""
Unit Tests for Schema Validation

Tests for the validator module.
"""

import pytest

from quiz_toolkit.core.schemas.validator import (
    validate_question,
    ValidationError,
    QUESTION_TYPES,
)


class TestValidateQuestion:
    """Tests for validate_question function."""

    @pytest.fixture
    def valid_cq_data(self) -> dict:
        return {
            "type": "cq",
            "subject": "Physics",
            "chapter": "Light",
            "lesson": "",
            "board": "D.B.-24",
            "isQuizzable": True,
            "tags": [],
            "questionText": "A bar is placed in front of a convex lens.",
            "parts": [
                {"letter": "a", "text": "What is a lens?", "marks": 1, "answer": ""},
                {"letter": "b", "text": "Explain.", "marks": 2, "answer": "Because."},
            ],
        }

    @pytest.fixture
    def valid_mcq_data(self) -> dict:
        return {
            "type": "mcq",
            "subject": "Chemistry",
            "chapter": "",
            "lesson": "",
            "board": "",
            "isQuizzable": True,
            "tags": ["gas"],
            "question": "Which gas?",
            "options": [{"label": "a", "text": "Oxygen"}, {"label": "b", "text": "Nitrogen"}],
            "correctAnswer": "b",
        }

    def test_question_types(self):
        assert QUESTION_TYPES == ("mcq", "cq")

    def test_validate_when_valid_cq_then_no_error(self, valid_cq_data):
        validate_question(valid_cq_data)
        validate_question(valid_cq_data, strict=True)

    def test_validate_when_valid_mcq_then_no_error(self, valid_mcq_data):
        validate_question(valid_mcq_data)
        validate_question(valid_mcq_data, strict=True)

    def test_validate_when_not_a_dict_then_raises_error(self):
        with pytest.raises(ValidationError, match="JSON object"):
            validate_question(["cq"])

    def test_validate_when_unknown_type_then_raises_error(self, valid_cq_data):
        valid_cq_data["type"] = "essay"
        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_cq_data)
        assert exc_info.value.path == "type"

    def test_validate_when_mcq_has_parts_then_raises_error(self, valid_mcq_data, valid_cq_data):
        valid_mcq_data["parts"] = valid_cq_data["parts"]
        with pytest.raises(ValidationError, match="cannot carry parts"):
            validate_question(valid_mcq_data)

    def test_validate_when_cq_has_options_then_raises_error(self, valid_cq_data, valid_mcq_data):
        valid_cq_data["options"] = valid_mcq_data["options"]
        with pytest.raises(ValidationError, match="cannot carry options"):
            validate_question(valid_cq_data)

    def test_validate_when_mcq_without_options_then_raises_error(self, valid_mcq_data):
        valid_mcq_data["options"] = []
        with pytest.raises(ValidationError, match="non-empty options"):
            validate_question(valid_mcq_data)

    def test_validate_when_option_missing_text_then_lists_field(self, valid_mcq_data):
        valid_mcq_data["options"][1] = {"label": "b"}
        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_mcq_data)
        assert exc_info.value.path == "options[1]"
        assert "Missing field: text" in exc_info.value.errors

    def test_validate_when_answer_not_an_option_then_raises_error(self, valid_mcq_data):
        valid_mcq_data["correctAnswer"] = "e"
        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_mcq_data)
        assert exc_info.value.path == "correctAnswer"

    def test_validate_when_negative_marks_then_raises_error(self, valid_cq_data):
        valid_cq_data["parts"][0]["marks"] = -1
        with pytest.raises(ValidationError) as exc_info:
            validate_question(valid_cq_data)
        assert exc_info.value.path == "parts[0].marks"

    def test_validate_when_bool_marks_then_raises_error(self, valid_cq_data):
        valid_cq_data["parts"][0]["marks"] = True
        with pytest.raises(ValidationError, match="Invalid marks"):
            validate_question(valid_cq_data)

    def test_validate_when_part_missing_answer_then_raises_error(self, valid_cq_data):
        del valid_cq_data["parts"][1]["answer"]
        with pytest.raises(ValidationError, match="Part missing required fields"):
            validate_question(valid_cq_data)

    def test_validate_when_duplicate_letters_then_raises_error(self, valid_cq_data):
        valid_cq_data["parts"][1]["letter"] = "a"
        with pytest.raises(ValidationError, match="Duplicate part letters"):
            validate_question(valid_cq_data)

    def test_validate_when_tags_not_list_then_raises_error(self, valid_cq_data):
        valid_cq_data["tags"] = "light"
        with pytest.raises(ValidationError, match="tags must be a list"):
            validate_question(valid_cq_data)

    def test_validate_when_quizzable_not_bool_then_raises_error(self, valid_cq_data):
        valid_cq_data["isQuizzable"] = "yes"
        with pytest.raises(ValidationError, match="isQuizzable"):
            validate_question(valid_cq_data)

    def test_validate_strict_when_wrong_field_type_then_raises_error(self, valid_cq_data):
        valid_cq_data["subject"] = 42
        validate_question(valid_cq_data)  # basic checks do not look at subject
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_question(valid_cq_data, strict=True)
