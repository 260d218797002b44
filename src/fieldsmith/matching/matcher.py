"""Match free-form header text against the canonical field registry."""

import logging
from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..registry import CANONICAL_FIELDS, CanonicalField
from .similarity import calculate_similarity, normalize_text

logger = logging.getLogger(__name__)

# Default floor for auto-mapping. Header scanning passes a looser value.
DEFAULT_MIN_CONFIDENCE = 0.7


class MatchType(str, Enum):
    """How a header was matched to a field."""

    EXACT = "exact"  # Display name, post-normalization
    ALIAS = "alias"  # Alias, post-normalization
    FUZZY = "fuzzy"  # Alias, by similarity above the floor


class FieldMatch(BaseModel):
    """Best registry match for one header string."""

    model_config = ConfigDict(frozen=True)

    field: CanonicalField
    confidence: float = Field(ge=0.0, le=1.0)
    match_type: MatchType
    matched_alias: Optional[str] = None


def find_best_field_match(
    header_text: Optional[str],
    minimum_confidence: float = DEFAULT_MIN_CONFIDENCE,
    fields: Sequence[CanonicalField] = CANONICAL_FIELDS,
) -> Optional[FieldMatch]:
    """
    Find the canonical field a header most likely refers to.

    An exact display-name hit anywhere in the registry wins outright.
    Otherwise every alias is scored and the strictly best one at or above
    ``minimum_confidence`` is kept, so ties go to the earlier field.

    Args:
        header_text: Raw header cell text
        minimum_confidence: Lowest similarity accepted as a match
        fields: Registry to search (defaults to the built-in catalog)

    Returns:
        FieldMatch, or None if nothing clears the floor
    """
    normalized_header = normalize_text(header_text)

    for field in fields:
        if normalized_header == normalize_text(field.display_name):
            return FieldMatch(field=field, confidence=1.0, match_type=MatchType.EXACT)

    best_match: Optional[FieldMatch] = None
    for field in fields:
        for alias in field.aliases:
            similarity = calculate_similarity(header_text, alias)
            if similarity < minimum_confidence:
                continue
            if best_match is None or similarity > best_match.confidence:
                best_match = FieldMatch(
                    field=field,
                    confidence=similarity,
                    match_type=MatchType.ALIAS if similarity == 1.0 else MatchType.FUZZY,
                    matched_alias=alias,
                )

    return best_match


def search_fields(
    query: Optional[str],
    fields: Sequence[CanonicalField] = CANONICAL_FIELDS,
) -> list[CanonicalField]:
    """Substring search over normalized display names and aliases."""
    if not query or not query.strip():
        return list(fields)

    normalized_query = normalize_text(query)
    return [
        field
        for field in fields
        if normalized_query in normalize_text(field.display_name)
        or any(normalized_query in normalize_text(alias) for alias in field.aliases)
    ]
