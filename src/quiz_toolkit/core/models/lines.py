"""
Module: lines

Purpose:
    Provides the ClassifiedLine dataclass - the immutable result of
    classifying one line of raw quiz text into a structural role.

Key Classes:
    - LineRole: The five structural roles a line can take
    - ClassifiedLine: Role plus extracted payload (letter, marks, body)

Dependencies:
    - dataclasses (std)
    - enum (std)
    - common.labels: Enumerator to Latin mapping

Used By:
    - segmenter.classifier: Produces ClassifiedLine instances
    - segmenter.assembly: Groups classified lines into questions
    - core.utils.serialization: Line output for scripts
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from quiz_toolkit.common.labels import to_latin


class LineRole(str, Enum):
    """Structural role of a single line."""
    PART_LABEL = "part_label"                  # "a. ...", "ক. ..."
    IMAGE_PLACEHOLDER = "image_placeholder"    # "[There is a picture]", "ছবি"
    EXPLANATION_MARKER = "explanation_marker"  # "Explanation: ...", "ব্যাখ্যা:"
    ANSWER_MARKER = "answer_marker"            # "Answer:", "উত্তর: ..."
    PLAIN_TEXT = "plain_text"                  # Everything else

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """
    One line of quiz text tagged with its structural role.

    Attributes:
        raw_text: The input line exactly as given (not normalized)
        role: Structural role assigned by the classifier
        body: Text remaining after the recognized marker is stripped
        part_letter: Enumerator character, only for PART_LABEL
        marks: Trailing mark value, only for PART_LABEL lines that carry one

    Invariants:
        - part_letter is set if and only if role is PART_LABEL
        - marks is only set for PART_LABEL and is never negative

    Example:
        >>> line = ClassifiedLine("a. What is dye? (1)", LineRole.PART_LABEL,
        ...                       "What is dye?", part_letter="a", marks=1)
        >>> line.latin_letter
        'a'
    """

    raw_text: str
    role: LineRole
    body: str = ""
    part_letter: Optional[str] = None
    marks: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate role-dependent fields on construction."""
        if self.role == LineRole.PART_LABEL:
            if not self.part_letter or len(self.part_letter) != 1:
                raise ValueError(
                    f"Part label lines need a single-character part_letter: {self.part_letter!r}"
                )
        else:
            if self.part_letter is not None:
                raise ValueError(f"part_letter is only allowed on part labels, not {self.role}")
            if self.marks is not None:
                raise ValueError(f"marks are only allowed on part labels, not {self.role}")

        if self.marks is not None and self.marks < 0:
            raise ValueError(f"Marks cannot be negative: {self.marks}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_part_label(self) -> bool:
        return self.role == LineRole.PART_LABEL

    @property
    def latin_letter(self) -> Optional[str]:
        """
        Part letter mapped to its Latin equivalent ("ক" -> "a").

        Returns:
            Latin letter, or None for lines that are not part labels
        """
        if self.part_letter is None:
            return None
        return to_latin(self.part_letter)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to a JSON-ready dictionary (unset fields omitted)."""
        d = {
            "raw_text": self.raw_text,
            "role": str(self.role),
            "body": self.body,
        }
        if self.part_letter is not None:
            d["part_letter"] = self.part_letter
        if self.marks is not None:
            d["marks"] = self.marks
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ClassifiedLine:
        return cls(
            raw_text=data["raw_text"],
            role=LineRole(data["role"]),
            body=data.get("body", ""),
            part_letter=data.get("part_letter"),
            marks=data.get("marks"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        extra = ""
        if self.part_letter is not None:
            extra += f", letter={self.part_letter!r}"
        if self.marks is not None:
            extra += f", marks={self.marks}"
        return f"ClassifiedLine({self.role.value}, body={self.body!r}{extra})"
