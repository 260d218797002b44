"""Header text similarity and field matching."""

from .similarity import (
    normalize_text,
    jaro_similarity,
    jaro_winkler_similarity,
    calculate_similarity,
)
from .matcher import (
    DEFAULT_MIN_CONFIDENCE,
    MatchType,
    FieldMatch,
    find_best_field_match,
    search_fields,
)

__all__ = [
    "normalize_text",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "calculate_similarity",
    "DEFAULT_MIN_CONFIDENCE",
    "MatchType",
    "FieldMatch",
    "find_best_field_match",
    "search_fields",
]
