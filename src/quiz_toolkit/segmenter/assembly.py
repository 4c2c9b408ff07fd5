"""
Module: segmenter.assembly

Purpose:
    Group classified lines into complete question records. The classifier
    stays stateless; all cross-line state (which question is open, whether
    we are in the answer section, which part an answer line belongs to)
    lives in the small draft objects here.

Key Functions:
    - assemble_cq(): Text -> list[CqQuestion]
    - assemble_mcq(): Text -> list[McqQuestion]

Document layout understood by assemble_cq:

    [Subject: Physics]            metadata (inherited by later questions)
    Question 1                    header, starts a new question
    A bar is placed ...           stem
    [There is a picture]          image placeholder
    a. What is dye? (1)           part with marks
    Answer:                       switches to the answer section
    a. Dye is ...                 answer for part a
    continuation line             appended to the current answer
    ---                           separator, starts a new question

Bengali board papers may instead use section headers:

    উদ্দীপক:                      stimulus; "> " quote markers are dropped
    প্রশ্ন:                        part list follows
    · answer text                 fills the next part without an answer

Dependencies:
    - segmenter.classifier: Per-line roles
    - segmenter.metadata: Metadata / header recognition
    - segmenter.rules: Part label pattern for option text
    - segmenter.splitting: Section splitting
    - core.models.questions: Output records
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from quiz_toolkit.core.models.lines import ClassifiedLine, LineRole
from quiz_toolkit.core.models.questions import (
    CqPart,
    CqQuestion,
    McqOption,
    McqQuestion,
    QuestionMetadata,
)

from .classifier import classify_line
from .config import DEFAULT_CONFIG, SegmenterConfig
from quiz_toolkit.common.labels import LATIN_ENUMERATORS, to_latin
from .detection.marks import parse_number
from .metadata import (
    is_question_header,
    is_question_number_line,
    parse_metadata_line,
    parse_section_header,
    strip_question_number,
)
from .normalize import normalize_line, normalize_text
from .rules import compile_patterns
from .splitting import split_sections

logger = logging.getLogger(__name__)

QUESTION_SET_PATTERN = re.compile(r"^(?:Question\s+Set|প্রশ্ন\s*সেট)\s*[0-9০-৯]+$", re.IGNORECASE)
NUMBERED_OPTION_PATTERN = re.compile(r"^([0-9০-৯]+)[.)।]\**\s+(.+)$")
DIGITS_PATTERN = re.compile(r"[0-9০-৯]+")
BLOCKQUOTE_PATTERN = re.compile(r"^>\s*")
# Middle dot and bullet open "· answer" lines in the answer section
BULLET_MARKERS = ("·", "•")


def _metadata_from_fields(fields: Dict[str, str]) -> QuestionMetadata:
    return QuestionMetadata(
        subject=fields.get("subject", ""),
        chapter=fields.get("chapter", ""),
        lesson=fields.get("lesson", ""),
        board=fields.get("board", ""),
    )


def _label_remainder(text: str, config: SegmenterConfig) -> str:
    """Everything after the part label, trailing marks included."""
    line = normalize_line(text, strip_emphasis=config.strip_emphasis)
    match = compile_patterns(config).part_label.match(line)
    return match.group(2).strip() if match else ""


def _append(existing: str, addition: str, sep: str) -> str:
    if not addition:
        return existing
    return f"{existing}{sep}{addition}" if existing else addition


# ─────────────────────────────────────────────────────────────────────────────
# CQ Assembly
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class _PartDraft:
    letter: str
    text: str
    marks: int
    answer: str = ""
    image: Optional[str] = None


@dataclass
class _CqDraft:
    fields: Dict[str, str] = field(default_factory=dict)
    stem_lines: List[str] = field(default_factory=list)
    parts: List[_PartDraft] = field(default_factory=list)
    image: Optional[str] = None
    in_stimulus: bool = False
    in_answer: bool = False
    bullet_answers: bool = False
    answer_part: Optional[_PartDraft] = None

    @property
    def has_content(self) -> bool:
        return bool(self.parts) or self.in_answer

    def find_part(self, letter: str) -> Optional[_PartDraft]:
        for part in self.parts:
            if part.letter == letter:
                return part
        return None

    def add_stem_line(self, text: str) -> None:
        text = BLOCKQUOTE_PATTERN.sub("", text)
        if text:
            self.stem_lines.append(text)

    def start_section(self, section: str, inline: str) -> None:
        """Enter the stimulus or question section of a Bengali-format CQ."""
        self.in_stimulus = section == "stimulus"
        self.in_answer = False
        self.add_stem_line(inline)

    # Question section ───────────────────────────────────────────────────────

    def add_stimulus_line(self, line: ClassifiedLine, text: str) -> None:
        """Every stimulus line belongs to the stem, labels included."""
        if line.role == LineRole.IMAGE_PLACEHOLDER:
            self.image = text
        else:
            self.add_stem_line(text)

    def add_question_line(self, line: ClassifiedLine) -> None:
        if line.role == LineRole.PART_LABEL:
            letter = line.latin_letter
            if self.find_part(letter) is not None:
                # A repeated letter without an "Answer:" marker starts the answers
                logger.debug(f"Repeated part {letter!r}, treating as answer section")
                self.in_answer = True
                self.add_answer_line(line)
                return
            self.parts.append(_PartDraft(letter, line.body, line.marks or 0))
        elif line.role == LineRole.IMAGE_PLACEHOLDER:
            placeholder = normalize_line(line.raw_text)
            if self.parts:
                self.parts[-1].image = placeholder
            else:
                self.image = placeholder
        elif self.parts:
            self.parts[-1].text = _append(self.parts[-1].text, line.body, " ")
        else:
            self.add_stem_line(line.body)

    # Answer section ─────────────────────────────────────────────────────────

    def add_bullet_answer(self, text: str) -> None:
        """Fill the next part that has no answer yet."""
        self.bullet_answers = True
        part = next((p for p in self.parts if not p.answer), None)
        if part is None:
            logger.debug(f"Bullet answer with no open part: {text[:40]!r}")
            return
        part.answer = text
        self.answer_part = part

    def add_answer_line(self, line: ClassifiedLine) -> None:
        if line.role == LineRole.PART_LABEL:
            part = self.find_part(line.latin_letter)
            if part is not None:
                part.answer = line.body
                self.answer_part = part
                return
        if line.role == LineRole.IMAGE_PLACEHOLDER:
            return
        if line.role == LineRole.PLAIN_TEXT and line.body[:1] in BULLET_MARKERS:
            self.add_bullet_answer(line.body[1:].strip())
            return

        target = self.answer_part or (self.parts[-1] if self.parts else None)
        if target is None:
            logger.debug(f"Answer text with no part to attach to: {line.body[:40]!r}")
            return
        # Bullet answers wrap onto following lines; lettered answers keep line breaks
        sep = " " if self.bullet_answers else "\n"
        target.answer = _append(target.answer, line.body, sep)
        self.answer_part = target

    def build(self, metadata: QuestionMetadata) -> Optional[CqQuestion]:
        parts = tuple(
            CqPart(p.letter, p.text, p.marks, p.answer, p.image)
            for p in self.parts
            if p.text.strip()
        )
        if not parts:
            return None
        return CqQuestion(
            metadata=metadata,
            question_text="\n".join(self.stem_lines).strip(),
            parts=parts,
            image=self.image,
        )


def assemble_cq(
    text: str,
    config: Optional[SegmenterConfig] = None,
) -> List[CqQuestion]:
    """
    Assemble constructed-response questions from raw text.

    Metadata carries over from one question to the next until overridden.
    Questions without any parts are skipped.

    Args:
        text: Raw document text (Bengali and/or English)
        config: Classifier settings

    Returns:
        CqQuestion records in document order

    Example:
        >>> qs = assemble_cq("Question 1\\nStem\\na. Define lens. (1)\\nAnswer:\\na. A lens is ...")
        >>> qs[0].parts[0].answer
        'A lens is ...'
    """
    config = config or DEFAULT_CONFIG
    questions: List[CqQuestion] = []
    inherited = QuestionMetadata()

    def finish(draft: _CqDraft) -> None:
        nonlocal inherited
        metadata = _metadata_from_fields(draft.fields).merged_with(inherited)
        inherited = metadata
        question = draft.build(metadata)
        if question is None:
            if draft.stem_lines:
                logger.debug(f"Skipped question without parts: {draft.stem_lines[0][:40]!r}")
            return
        questions.append(question)
        logger.debug(f"Question saved: {question!r}")

    for section in split_sections(normalize_text(text)):
        draft = _CqDraft()
        for raw in section.splitlines():
            line_text = normalize_line(raw, strip_emphasis=config.strip_emphasis)
            if not line_text:
                continue
            # Only short header lines start a question; a stem sentence
            # beginning "Question 2 of ..." stays in the stem
            if is_question_header(raw):
                finish(draft)
                draft = _CqDraft()
                continue

            meta = parse_metadata_line(raw)
            if meta is not None:
                if draft.has_content:
                    finish(draft)
                    draft = _CqDraft()
                draft.fields[meta[0]] = meta[1]
                continue

            header = parse_section_header(raw)
            if header is not None:
                draft.start_section(*header)
                continue

            line = classify_line(raw, config)
            if line.role == LineRole.ANSWER_MARKER:
                draft.in_stimulus = False
                draft.in_answer = True
                if line.body:
                    draft.add_answer_line(classify_line(line.body, config))
            elif draft.in_answer:
                draft.add_answer_line(line)
            elif draft.in_stimulus:
                draft.add_stimulus_line(line, line_text)
            else:
                draft.add_question_line(line)
        finish(draft)

    logger.info(f"Assembled {len(questions)} CQ question(s)")
    return questions


# ─────────────────────────────────────────────────────────────────────────────
# MCQ Assembly
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class _McqDraft:
    fields: Dict[str, str] = field(default_factory=dict)
    stem_lines: List[str] = field(default_factory=list)
    options: List[McqOption] = field(default_factory=list)
    correct: str = ""
    explanation_lines: List[str] = field(default_factory=list)
    in_explanation: bool = False
    image: Optional[str] = None

    @property
    def has_question(self) -> bool:
        return bool(self.stem_lines)

    def accepts_numbered_option(self, number: int) -> bool:
        """Numbered options ("1. Nylon") follow the stem and count up from 1."""
        return (
            self.has_question
            and not self.correct
            and not self.in_explanation
            and number == len(self.options) + 1
            and number <= len(LATIN_ENUMERATORS)
        )

    def add_option(self, label: str, text: str) -> None:
        if any(o.label == label for o in self.options):
            logger.debug(f"Duplicate option {label!r} ignored")
            return
        self.options.append(McqOption(label, text))

    def resolve_answer(self, body: str) -> str:
        """Map "গ", "c", "3" or "c) Nylon" to an option label."""
        token = body.split()[0].rstrip(".)।") if body.split() else ""
        if not token:
            return ""
        if DIGITS_PATTERN.fullmatch(token):
            index = parse_number(token) - 1
            if 0 <= index < len(LATIN_ENUMERATORS):
                return LATIN_ENUMERATORS[index]
            return ""
        return to_latin(token[0]) if len(token) == 1 else ""

    def build(self, metadata: QuestionMetadata) -> Optional[McqQuestion]:
        if not self.stem_lines or not self.options:
            return None
        labels = {o.label for o in self.options}
        correct = self.correct
        if correct and correct not in labels:
            logger.warning(f"Correct answer {correct!r} matches no option; left empty")
            correct = ""
        return McqQuestion(
            metadata=metadata,
            question=" ".join(self.stem_lines).strip(),
            options=tuple(self.options),
            correct_answer=correct,
            explanation="\n".join(self.explanation_lines).strip(),
            image=self.image,
        )


def assemble_mcq(
    text: str,
    config: Optional[SegmenterConfig] = None,
) -> List[McqQuestion]:
    """
    Assemble multiple-choice questions from raw text.

    A numbered line ("3." / "৩.") opens a question, lettered lines
    ("a)" / "ক)") or counting numbered lines ("1." after the stem) become
    options, "Correct:" / "সঠিক:" sets the answer and "Explanation:" /
    "ব্যাখ্যা:" starts the explanation.

    Args:
        text: Raw document text
        config: Classifier settings

    Returns:
        McqQuestion records that have both a stem and options
    """
    config = config or DEFAULT_CONFIG
    questions: List[McqQuestion] = []
    inherited = QuestionMetadata()

    def finish(draft: _McqDraft) -> None:
        nonlocal inherited
        metadata = _metadata_from_fields(draft.fields).merged_with(inherited)
        inherited = metadata
        question = draft.build(metadata)
        if question is None:
            if draft.stem_lines:
                logger.debug(f"Skipped MCQ without options: {draft.stem_lines[0][:40]!r}")
            return
        questions.append(question)

    for section in split_sections(normalize_text(text)):
        draft = _McqDraft()
        for raw in section.splitlines():
            line_text = normalize_line(raw, strip_emphasis=config.strip_emphasis)
            if not line_text or QUESTION_SET_PATTERN.match(line_text):
                continue

            meta = parse_metadata_line(raw)
            if meta is not None:
                if draft.options:
                    finish(draft)
                    draft = _McqDraft()
                draft.fields[meta[0]] = meta[1]
                continue

            numbered = NUMBERED_OPTION_PATTERN.match(line_text)
            if numbered and draft.accepts_numbered_option(parse_number(numbered.group(1))):
                label = LATIN_ENUMERATORS[len(draft.options)]
                draft.add_option(label, numbered.group(2).strip())
                continue

            if is_question_number_line(raw):
                if draft.has_question:
                    finish(draft)
                    draft = _McqDraft()
                draft.stem_lines.append(strip_question_number(raw))
                continue

            line = classify_line(raw, config)
            if line.role == LineRole.PART_LABEL and draft.has_question and not draft.in_explanation:
                draft.add_option(line.latin_letter, _label_remainder(line_text, config))
            elif line.role == LineRole.ANSWER_MARKER:
                draft.correct = draft.resolve_answer(line.body)
                draft.in_explanation = False
            elif line.role == LineRole.EXPLANATION_MARKER:
                draft.in_explanation = True
                if line.body:
                    draft.explanation_lines.append(line.body)
            elif line.role == LineRole.IMAGE_PLACEHOLDER:
                draft.image = line_text
            elif draft.in_explanation:
                draft.explanation_lines.append(line.body)
            elif draft.has_question and not draft.options:
                draft.stem_lines.append(line.body)
            else:
                logger.debug(f"Unplaced MCQ line: {line_text[:40]!r}")
        finish(draft)

    logger.info(f"Assembled {len(questions)} MCQ question(s)")
    return questions
