"""Spreadsheet column letter encoding (A..Z, AA..AZ, BA..)."""

import re

_LETTERS_RE = re.compile(r"^[A-Za-z]+$")


def column_letter_to_index(column: str) -> int:
    """Convert column letter(s) to 0-based index. A=0, B=1, ..., Z=25, AA=26, etc."""
    if not column or not _LETTERS_RE.match(column):
        raise ValueError(f"Invalid column letter: {column!r}")
    result = 0
    for char in column.upper():
        result = result * 26 + (ord(char) - ord("A") + 1)
    return result - 1


def index_to_column_letter(index: int) -> str:
    """Convert 0-based index to column letter(s)."""
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")
    result = ""
    index += 1
    while index > 0:
        index -= 1
        result = chr(ord("A") + (index % 26)) + result
        index //= 26
    return result


def is_column_letter(value: str) -> bool:
    return bool(value) and _LETTERS_RE.match(value) is not None
