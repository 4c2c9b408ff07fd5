"""
Module: segmenter

Purpose:
    Line segmentation for bilingual (Bengali/English) quiz text. Classifies
    each line by role, splits documents at question boundaries and groups
    the classified lines into MCQ and CQ question records.

Key Functions:
    - classify_line(): Role of a single line
    - classify_text(): Roles of every line in a document
    - split_at_boundary(): Lookahead split that keeps the preamble
    - assemble_cq() / assemble_mcq(): Build question records
    - read_lines(): Load .txt / .md / .pdf sources

Key Classes:
    - SegmenterConfig: Keyword and enumerator settings

Dependencies:
    - fitz (PyMuPDF): PDF input
    - quiz_toolkit.core.models: Output records

Used By:
    - scripts/segment_text.py: Command line entry point
"""

from .assembly import assemble_cq, assemble_mcq
from .classifier import classify_line, classify_lines, classify_text
from .config import DEFAULT_CONFIG, SegmenterConfig
from .normalize import normalize_line
from .reader import read_lines
from .splitting import QUESTION_BOUNDARY, split_at_boundary, split_sections

__all__ = [
    "assemble_cq",
    "assemble_mcq",
    "classify_line",
    "classify_lines",
    "classify_text",
    "DEFAULT_CONFIG",
    "SegmenterConfig",
    "normalize_line",
    "read_lines",
    "QUESTION_BOUNDARY",
    "split_at_boundary",
    "split_sections",
]
