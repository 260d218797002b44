"""Column-to-field mapping: auto-mapping, disambiguation and header context."""

from .models import (
    ColumnCandidate,
    FieldColumnMapping,
    AmbiguousMatch,
    AutoMappingResult,
    SheetMapping,
    HeaderContext,
    DisambiguationError,
)
from .columns import column_letter_to_index, index_to_column_letter, is_column_letter
from .auto_mapper import auto_map_fields_to_columns
from .disambiguator import resolve_ambiguous_match
from .context import (
    normalize_field_name,
    are_field_names_equivalent,
    get_ordered_columns,
    rows_to_grid,
    detect_header_row_by_mapped_columns,
    compute_header_context,
    get_column_display_name,
    get_data_rows,
)

__all__ = [
    "ColumnCandidate",
    "FieldColumnMapping",
    "AmbiguousMatch",
    "AutoMappingResult",
    "SheetMapping",
    "HeaderContext",
    "DisambiguationError",
    "column_letter_to_index",
    "index_to_column_letter",
    "is_column_letter",
    "auto_map_fields_to_columns",
    "resolve_ambiguous_match",
    "normalize_field_name",
    "are_field_names_equivalent",
    "get_ordered_columns",
    "rows_to_grid",
    "detect_header_row_by_mapped_columns",
    "compute_header_context",
    "get_column_display_name",
    "get_data_rows",
]
