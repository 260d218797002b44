"""Assign requested canonical fields to header columns."""

import logging
from typing import Optional, Sequence

from ..matching import DEFAULT_MIN_CONFIDENCE, find_best_field_match
from ..registry import FIELDS_BY_KEY
from .columns import index_to_column_letter
from .models import (
    AmbiguousMatch,
    AutoMappingResult,
    ColumnCandidate,
    FieldColumnMapping,
)

logger = logging.getLogger(__name__)


def auto_map_fields_to_columns(
    selected_field_keys: Sequence[str],
    header_row: Sequence[Optional[str]],
    start_column_index: int = 0,
    minimum_confidence: float = DEFAULT_MIN_CONFIDENCE,
) -> AutoMappingResult:
    """
    Map each requested field to the header column that names it.

    Fields are processed in request order. A column committed to one field
    is never offered to a later one. A header cell qualifies for a field
    only when that field is the cell's best registry match, so lookalike
    fields are left unmatched rather than merged.

    Args:
        selected_field_keys: Canonical keys to map, in priority order
        header_row: Header cell texts, left to right
        start_column_index: Sheet column of the first header cell
        minimum_confidence: Match floor for a header cell

    Returns:
        AutoMappingResult partitioning the requested keys into mapped,
        unmatched and ambiguous
    """
    result = AutoMappingResult()
    used_columns: set[int] = set()

    for field_key in selected_field_keys:
        if field_key not in FIELDS_BY_KEY:
            result.unmatched_fields.append(field_key)
            continue

        candidates: list[ColumnCandidate] = []
        for position, header_text in enumerate(header_row):
            if position in used_columns or not header_text:
                continue

            match = find_best_field_match(header_text, minimum_confidence)
            if match is None or match.field.key != field_key:
                continue

            column_index = position + start_column_index
            candidates.append(
                ColumnCandidate(
                    column_index=column_index,
                    column_letter=index_to_column_letter(column_index),
                    confidence=match.confidence,
                    match_type=match.match_type,
                )
            )

        if not candidates:
            result.unmatched_fields.append(field_key)
        elif len(candidates) == 1:
            chosen = candidates[0]
            result.mappings.append(
                FieldColumnMapping(
                    field_key=field_key,
                    column_index=chosen.column_index,
                    column_letter=chosen.column_letter,
                    confidence=chosen.confidence,
                    match_type=chosen.match_type,
                )
            )
            used_columns.add(chosen.column_index - start_column_index)
        else:
            logger.debug(
                f"Field '{field_key}' matches {len(candidates)} columns: "
                f"{', '.join(c.column_letter for c in candidates)}"
            )
            result.ambiguous_matches.append(
                AmbiguousMatch(field_key=field_key, possible_columns=candidates)
            )

    return result
