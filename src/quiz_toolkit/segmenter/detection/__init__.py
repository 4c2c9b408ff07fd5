"""
Detection Package

Character-level recognizers shared by the classification rules.

- marks: Trailing "(N)" / "[N]" marks with ASCII or Bengali digits

Part enumerator tables live in quiz_toolkit.common.labels.
"""

from .marks import BENGALI_DIGITS, extract_trailing_marks, parse_number

__all__ = [
    "BENGALI_DIGITS",
    "extract_trailing_marks",
    "parse_number",
]
