"""Apply an external choice to an ambiguous auto-mapping result."""

import logging

from .models import (
    AmbiguousMatch,
    AutoMappingResult,
    DisambiguationError,
    FieldColumnMapping,
)

logger = logging.getLogger(__name__)


def resolve_ambiguous_match(
    result: AutoMappingResult,
    field_key: str,
    column_index: int,
) -> AutoMappingResult:
    """
    Commit one of an ambiguous field's candidate columns.

    The input result is left untouched. The chosen column is withdrawn from
    the other ambiguous fields; a field left with no candidates becomes
    unmatched, one left with a single candidate stays ambiguous for the
    caller to confirm.

    Args:
        result: Result from auto_map_fields_to_columns
        field_key: The ambiguous field being resolved
        column_index: Sheet column index chosen for it

    Returns:
        A new AutoMappingResult with the field moved into mappings

    Raises:
        DisambiguationError: If the field is not ambiguous, the column is
            not one of its candidates, or the column is already mapped
    """
    ambiguous = result.get_ambiguous(field_key)
    if ambiguous is None:
        raise DisambiguationError(f"Field '{field_key}' has no pending ambiguous match")

    selected = next(
        (c for c in ambiguous.possible_columns if c.column_index == column_index),
        None,
    )
    if selected is None:
        valid = ", ".join(str(c.column_index) for c in ambiguous.possible_columns)
        raise DisambiguationError(
            f"Column {column_index} is not a candidate for '{field_key}'. "
            f"Must be one of: {valid}"
        )

    for existing in result.mappings:
        if existing.column_index == column_index:
            raise DisambiguationError(
                f"Column {selected.column_letter} is already mapped to '{existing.field_key}'"
            )

    mappings = [m.model_copy() for m in result.mappings]
    mappings.append(
        FieldColumnMapping(
            field_key=field_key,
            column_index=selected.column_index,
            column_letter=selected.column_letter,
            confidence=selected.confidence,
            match_type=selected.match_type,
        )
    )

    unmatched_fields = list(result.unmatched_fields)
    ambiguous_matches: list[AmbiguousMatch] = []
    for other in result.ambiguous_matches:
        if other.field_key == field_key:
            continue
        remaining = [c for c in other.possible_columns if c.column_index != column_index]
        if remaining:
            ambiguous_matches.append(
                AmbiguousMatch(field_key=other.field_key, possible_columns=remaining)
            )
        else:
            unmatched_fields.append(other.field_key)

    logger.info(
        f"Resolved ambiguous field '{field_key}' to column {selected.column_letter}"
    )

    return AutoMappingResult(
        mappings=mappings,
        unmatched_fields=unmatched_fields,
        ambiguous_matches=ambiguous_matches,
    )
