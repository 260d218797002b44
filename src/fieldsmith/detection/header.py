"""Header row detection for sheets with decoy and instruction rows.

Rows near the top of a sheet are scored as header candidates. Label text
alone is easy to fool, so matches on strict-format fields (asset tags,
serial numbers) are corroborated by looking a few rows down the same
column for a value in the expected format.
"""

import logging
import re
from typing import Optional, Sequence

from ..matching import find_best_field_match
from ..registry import is_strong_field, validate_strong_field_data
from .models import Grid, HeaderRowScore

logger = logging.getLogger(__name__)

DEFAULT_SCAN_ROWS = 5
HEADER_MATCH_CONFIDENCE = 0.4
MAX_LOOK_AHEAD = 5

# Scoring terms
GENERIC_HEADER_PENALTY = 2.0
EXCELLENT_MATCH_THRESHOLD = 0.9
EXCELLENT_MATCH_BONUS = 0.5
UNVALIDATED_STRONG_PENALTY = 1.0
MULTI_MATCH_BONUS = 0.3
VALIDATED_STRONG_BONUS = 1.2
NO_STRONG_VALIDATED_PENALTY = 2.0

# Placeholder labels, instruction sentences and sheet titles
GENERIC_HEADER_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"^column\s*\d+$", re.IGNORECASE),
    re.compile(r"^field\s*\d+$", re.IGNORECASE),
    re.compile(r"^[a-z]+\s*\d+$", re.IGNORECASE),
    re.compile(r"selects?\s+from\s+drop[-\s]?down", re.IGNORECASE),
    re.compile(r"this\s+field\s+prefills?", re.IGNORECASE),
    re.compile(r"^untitled", re.IGNORECASE),
    re.compile(r"^sheet\s*\d*", re.IGNORECASE),
    re.compile(r"^inventory$", re.IGNORECASE),
)


def is_generic_header(text: str) -> bool:
    """Return True if the cell looks like a placeholder or instruction."""
    return any(pattern.search(text) for pattern in GENERIC_HEADER_PATTERNS)


def _cell(row: Optional[Sequence[Optional[str]]], index: int) -> str:
    if not row or index >= len(row):
        return ""
    value = row[index]
    if not isinstance(value, str):
        return ""
    return value.strip()


def _has_validated_data_below(
    grid: Grid,
    row_index: int,
    column_index: int,
    field_key: str,
    max_look_ahead: int = MAX_LOOK_AHEAD,
) -> bool:
    """Look down the column for a value in the field's strict format."""
    depth = min(max_look_ahead, len(grid) - row_index - 1)
    for offset in range(1, depth + 1):
        value = _cell(grid[row_index + offset], column_index)
        if value and validate_strong_field_data(field_key, value):
            return True
    return False


def score_header_row(
    grid: Grid,
    row_index: int,
    minimum_confidence: float = HEADER_MATCH_CONFIDENCE,
) -> HeaderRowScore:
    """Score a single row of the grid as a header candidate."""
    row = grid[row_index] or []
    score = HeaderRowScore(row_index=row_index)
    content_cells = 0

    for cell_index in range(len(row)):
        clean_value = _cell(row, cell_index)
        if not clean_value:
            continue
        content_cells += 1

        # Decoys are penalized and never count as field evidence
        if is_generic_header(clean_value):
            score.penalty_score += GENERIC_HEADER_PENALTY
            score.generic_cells += 1
            continue

        match = find_best_field_match(clean_value, minimum_confidence)
        if match is None:
            continue

        score.match_score += match.confidence
        score.field_matches += 1
        score.matched_fields.append(match.field.key)
        if match.confidence >= EXCELLENT_MATCH_THRESHOLD:
            score.match_score += EXCELLENT_MATCH_BONUS

        field_key = match.field.key
        if not is_strong_field(field_key):
            continue

        score.strong_field_matches += 1
        if _has_validated_data_below(grid, row_index, cell_index, field_key):
            score.strong_validated_matches += 1
        else:
            score.penalty_score += UNVALIDATED_STRONG_PENALTY

    final_score = score.match_score - score.penalty_score
    if score.field_matches >= 2:
        final_score += score.field_matches * MULTI_MATCH_BONUS
    if score.strong_validated_matches >= 1:
        final_score += score.strong_validated_matches * VALIDATED_STRONG_BONUS
    if score.strong_field_matches > 0 and score.strong_validated_matches == 0:
        final_score -= NO_STRONG_VALIDATED_PENALTY

    score.final_score = final_score
    score.normalized_score = final_score / content_cells if content_cells else final_score
    return score


def score_header_rows(
    grid: Grid,
    max_rows_to_scan: int = DEFAULT_SCAN_ROWS,
    minimum_confidence: float = HEADER_MATCH_CONFIDENCE,
) -> list[HeaderRowScore]:
    """Score every row in the scan window."""
    rows_to_check = min(max_rows_to_scan, len(grid))
    return [
        score_header_row(grid, row_index, minimum_confidence)
        for row_index in range(rows_to_check)
    ]


def detect_header_row(
    grid: Grid,
    max_rows_to_scan: int = DEFAULT_SCAN_ROWS,
    minimum_confidence: float = HEADER_MATCH_CONFIDENCE,
) -> int:
    """
    Pick the row most likely to hold column labels.

    Always returns an index; 0 when the grid is empty or no row scores
    above the floor. Ties go to the earlier row.

    Args:
        grid: Top rows of the sheet
        max_rows_to_scan: Size of the scan window
        minimum_confidence: Field match floor for header cells

    Returns:
        0-based row index within the grid
    """
    return pick_header_row(score_header_rows(grid, max_rows_to_scan, minimum_confidence))


def pick_header_row(row_scores: Sequence[HeaderRowScore]) -> int:
    """Highest normalized score wins; the first row wins ties, row 0 by default."""
    best_row_index = 0
    best_score = -1.0

    for row_score in row_scores:
        if row_score.normalized_score > best_score:
            best_score = row_score.normalized_score
            best_row_index = row_score.row_index

    logger.debug(f"Detected header row {best_row_index} (score {best_score:.3f})")
    return best_row_index
