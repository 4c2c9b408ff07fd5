"""
Module: questions

Purpose:
    Provides the Question record shapes consumed by the document store:
    a tagged union of McqQuestion and CqQuestion. Each variant carries only
    its own fields, so an MCQ record can never hold CQ parts and vice versa.

Key Classes:
    - QuestionMetadata: Shared subject/chapter/lesson/board/tags block
    - McqOption, McqQuestion: Multiple-choice question
    - CqPart, CqQuestion: Constructed-response ("creative") question

Key Functions:
    - question_from_dict(): Deserialize either variant by its "type" tag

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - segmenter.assembly: Builds questions from classified lines
    - core.utils.serialization: JSONL load/save
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class QuestionMetadata:
    """
    Classification fields shared by both question types.

    Attributes:
        subject: Subject name, e.g. "Physics" or "পদার্থবিজ্ঞান"
        chapter: Chapter name
        lesson: Lesson name
        board: Exam board / source, e.g. "D.B.-24"
        is_quizzable: Whether the question may be served in quizzes
        tags: Free-form tags
    """

    subject: str = ""
    chapter: str = ""
    lesson: str = ""
    board: str = ""
    is_quizzable: bool = True
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "chapter": self.chapter,
            "lesson": self.lesson,
            "board": self.board,
            "isQuizzable": self.is_quizzable,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> QuestionMetadata:
        return cls(
            subject=data.get("subject") or "",
            chapter=data.get("chapter") or "",
            lesson=data.get("lesson") or "",
            board=data.get("board") or "",
            is_quizzable=data.get("isQuizzable", True),
            tags=tuple(data.get("tags", [])),
        )

    def merged_with(self, fallback: QuestionMetadata) -> QuestionMetadata:
        """Fill empty fields from ``fallback`` (metadata inheritance)."""
        return QuestionMetadata(
            subject=self.subject or fallback.subject,
            chapter=self.chapter or fallback.chapter,
            lesson=self.lesson or fallback.lesson,
            board=self.board or fallback.board,
            is_quizzable=self.is_quizzable,
            tags=self.tags or fallback.tags,
        )


# ─────────────────────────────────────────────────────────────────────────────
# MCQ
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class McqOption:
    """One answer option, labelled with a Latin letter."""

    label: str
    text: str
    image: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Option label cannot be empty")

    def to_dict(self) -> dict:
        d = {"label": self.label, "text": self.text}
        if self.image:
            d["image"] = self.image
        return d

    @classmethod
    def from_dict(cls, data: dict) -> McqOption:
        return cls(label=data["label"], text=data["text"], image=data.get("image"))


@dataclass(frozen=True)
class McqQuestion:
    """
    Multiple-choice question (immutable).

    Attributes:
        metadata: Shared classification fields
        question: Question stem
        options: Answer options in document order
        correct_answer: Label of the correct option ("" when unknown)
        explanation: Worked explanation, may be empty
        image: Question-level image reference

    Invariants:
        - Option labels are unique
        - correct_answer, when set, names one of the options

    Example:
        >>> q = McqQuestion(QuestionMetadata(subject="Chemistry"), "Which gas?",
        ...                 (McqOption("a", "O2"), McqOption("b", "N2")), "b")
        >>> q.correct_option.text
        'N2'
    """

    TYPE: ClassVar[str] = "mcq"

    metadata: QuestionMetadata
    question: str
    options: Tuple[McqOption, ...]
    correct_answer: str = ""
    explanation: str = ""
    image: Optional[str] = None

    def __post_init__(self) -> None:
        labels = [o.label for o in self.options]
        if len(labels) != len(set(labels)):
            raise ValueError(f"Duplicate option labels: {labels}")
        if self.correct_answer and self.correct_answer not in labels:
            raise ValueError(
                f"correct_answer {self.correct_answer!r} is not one of the options {labels}"
            )

    @property
    def correct_option(self) -> Optional[McqOption]:
        for option in self.options:
            if option.label == self.correct_answer:
                return option
        return None

    def to_dict(self) -> dict:
        d = {"type": self.TYPE, **self.metadata.to_dict()}
        d["question"] = self.question
        d["options"] = [o.to_dict() for o in self.options]
        d["correctAnswer"] = self.correct_answer
        if self.explanation:
            d["explanation"] = self.explanation
        if self.image:
            d["image"] = self.image
        return d

    @classmethod
    def from_dict(cls, data: dict) -> McqQuestion:
        return cls(
            metadata=QuestionMetadata.from_dict(data),
            question=data.get("question", ""),
            options=tuple(McqOption.from_dict(o) for o in data.get("options", [])),
            correct_answer=data.get("correctAnswer") or "",
            explanation=data.get("explanation") or "",
            image=data.get("image"),
        )

    def __repr__(self) -> str:
        return f"McqQuestion(options={len(self.options)}, subject={self.metadata.subject!r})"


# ─────────────────────────────────────────────────────────────────────────────
# CQ
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class CqPart:
    """
    One lettered part of a constructed-response question.

    Attributes:
        letter: Latin part letter ("a", "b", ...)
        text: Part prompt without its mark annotation
        marks: Mark value (0 when the source gave none)
        answer: Model answer, may be empty
        image: Optional image reference
    """

    letter: str
    text: str
    marks: int = 0
    answer: str = ""
    image: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.letter:
            raise ValueError("Part letter cannot be empty")
        if self.marks < 0:
            raise ValueError(f"Marks cannot be negative: {self.marks}")

    def to_dict(self) -> dict:
        d = {
            "letter": self.letter,
            "text": self.text,
            "marks": self.marks,
            "answer": self.answer,
        }
        if self.image:
            d["image"] = self.image
        return d

    @classmethod
    def from_dict(cls, data: dict) -> CqPart:
        return cls(
            letter=data["letter"],
            text=data["text"],
            marks=data.get("marks", 0),
            answer=data.get("answer") or "",
            image=data.get("image"),
        )


@dataclass(frozen=True)
class CqQuestion:
    """
    Constructed-response question: a stem followed by lettered parts.

    Attributes:
        metadata: Shared classification fields
        question_text: Stem / stimulus text
        parts: Parts in document order
        image: Question-level image reference

    Invariants:
        - Part letters are unique
        - total_marks is always calculated from parts, never stored
    """

    TYPE: ClassVar[str] = "cq"

    metadata: QuestionMetadata
    question_text: str
    parts: Tuple[CqPart, ...]
    image: Optional[str] = None

    def __post_init__(self) -> None:
        letters = [p.letter for p in self.parts]
        if len(letters) != len(set(letters)):
            raise ValueError(f"Duplicate part letters: {letters}")

    @property
    def total_marks(self) -> int:
        return sum(p.marks for p in self.parts)

    def get_part(self, letter: str) -> Optional[CqPart]:
        for part in self.parts:
            if part.letter == letter:
                return part
        return None

    def to_dict(self) -> dict:
        d = {"type": self.TYPE, **self.metadata.to_dict()}
        d["questionText"] = self.question_text
        d["parts"] = [p.to_dict() for p in self.parts]
        if self.image:
            d["image"] = self.image
        return d

    @classmethod
    def from_dict(cls, data: dict) -> CqQuestion:
        return cls(
            metadata=QuestionMetadata.from_dict(data),
            question_text=data.get("questionText", ""),
            parts=tuple(CqPart.from_dict(p) for p in data.get("parts", [])),
            image=data.get("image"),
        )

    def __repr__(self) -> str:
        return (
            f"CqQuestion(parts={len(self.parts)}, marks={self.total_marks}, "
            f"subject={self.metadata.subject!r})"
        )


Question = Union[McqQuestion, CqQuestion]

_QUESTION_TYPES = {
    McqQuestion.TYPE: McqQuestion,
    CqQuestion.TYPE: CqQuestion,
}


def question_from_dict(data: dict) -> Question:
    """
    Deserialize a question, picking the variant from its "type" tag.

    Raises:
        ValueError: If the type tag is missing or unknown
    """
    kind = data.get("type")
    cls = _QUESTION_TYPES.get(kind)
    if cls is None:
        raise ValueError(f"Unknown question type: {kind!r}")
    return cls.from_dict(data)
