#!/usr/bin/env python3
"""Segment quiz text into classified lines or question records.

Reads a .txt, .md or .pdf source and writes JSON Lines: one classified line
per row (--mode lines), or one assembled question per row (--mode cq / mcq).

Usage:
    python scripts/segment_text.py INPUT [--mode lines|cq|mcq] [--output PATH]
        [--allow-bare-marks] [--verbose]
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

# Add src to path so we can import quiz_toolkit
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from quiz_toolkit.core.utils.serialization import serialize_lines, serialize_question
from quiz_toolkit.segmenter import (
    DEFAULT_CONFIG,
    assemble_cq,
    assemble_mcq,
    classify_lines,
    read_lines,
)

logger = logging.getLogger("segment_text")

MODES = ("lines", "cq", "mcq")


def build_records(lines: List[str], mode: str, allow_bare_marks: bool) -> List[dict]:
    """Turn source lines into JSON-ready dictionaries for the chosen mode."""
    config = replace(DEFAULT_CONFIG, allow_bare_marks=allow_bare_marks)
    if mode == "lines":
        return serialize_lines(classify_lines(lines, config))

    text = "\n".join(lines)
    assemble = assemble_cq if mode == "cq" else assemble_mcq
    return [serialize_question(q) for q in assemble(text, config)]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Segment Bengali/English quiz text")
    parser.add_argument("input", type=Path, help="Source document (.txt, .md or .pdf)")
    parser.add_argument("--mode", "-m", choices=MODES, default="lines", help="Output granularity")
    parser.add_argument("--output", "-o", type=Path, help="JSONL output file (default: stdout)")
    parser.add_argument("--allow-bare-marks", action="store_true", help="Accept a bare trailing number as marks")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s',
    )

    try:
        lines = read_lines(args.input)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

    records = build_records(lines, args.mode, args.allow_bare_marks)
    rows = [json.dumps(record, ensure_ascii=False) for record in records]

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text("".join(row + "\n" for row in rows), encoding="utf-8")
        logger.info(f"Wrote {len(rows)} record(s) to {args.output}")
    else:
        for row in rows:
            print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())
