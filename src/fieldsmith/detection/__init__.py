"""Header row detection."""

from .models import Grid, HeaderRowScore
from .header import (
    DEFAULT_SCAN_ROWS,
    HEADER_MATCH_CONFIDENCE,
    GENERIC_HEADER_PATTERNS,
    is_generic_header,
    score_header_row,
    score_header_rows,
    pick_header_row,
    detect_header_row,
)

__all__ = [
    "Grid",
    "HeaderRowScore",
    "DEFAULT_SCAN_ROWS",
    "HEADER_MATCH_CONFIDENCE",
    "GENERIC_HEADER_PATTERNS",
    "is_generic_header",
    "score_header_row",
    "score_header_rows",
    "pick_header_row",
    "detect_header_row",
]
