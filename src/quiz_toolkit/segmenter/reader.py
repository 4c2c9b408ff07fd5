"""
Module: segmenter.reader

Purpose:
    Load source documents as lines of text. Plain text and markdown are
    read as UTF-8; PDFs go through PyMuPDF page by page.

Key Functions:
    - read_lines(): Path -> list of lines
    - extract_pdf_lines(): Lines from an open fitz.Document

Dependencies:
    - fitz (PyMuPDF): PDF text extraction

Used By:
    - scripts/segment_text.py
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".md")
PDF_SUFFIX = ".pdf"


def extract_pdf_lines(doc: fitz.Document) -> List[str]:
    """
    Extract text lines from every page of an open PDF.

    Pages whose text cannot be extracted are logged and skipped.

    Args:
        doc: Open PyMuPDF document.

    Returns:
        Lines in page order, trailing whitespace removed.
    """
    lines: List[str] = []
    for page_index, page in enumerate(doc):
        try:
            text = page.get_text("text") or ""
        except (RuntimeError, ValueError) as e:
            logger.warning(f"Failed to extract text from page {page_index + 1}: {e}")
            continue
        lines.extend(line.rstrip() for line in text.splitlines())
    return lines


def read_lines(path: Path | str) -> List[str]:
    """
    Read a source document into lines.

    Args:
        path: .txt, .md or .pdf file.

    Returns:
        Lines of the document in order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the suffix is not supported.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input not found: {path}")

    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8").splitlines()
    if suffix == PDF_SUFFIX:
        with fitz.open(str(path)) as doc:
            lines = extract_pdf_lines(doc)
        logger.info(f"Read {len(lines)} line(s) from {path.name}")
        return lines

    raise ValueError(
        f"Unsupported input type {path.suffix!r}; expected one of "
        f"{', '.join(TEXT_SUFFIXES + (PDF_SUFFIX,))}"
    )
