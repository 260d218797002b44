"""Header context for sheets whose column mappings are already persisted.

Rows here are dicts keyed by column letter, the shape the sheet reader
hands over. Results can be cached by the caller in a HeaderContext; this
module never invalidates anything.
"""

import logging
from typing import Optional, Sequence

from ..detection import DEFAULT_SCAN_ROWS, detect_header_row
from .columns import column_letter_to_index, is_column_letter
from .models import HeaderContext, SheetMapping

logger = logging.getLogger(__name__)

ROW_INDEX_KEY = "_rowIndex"
MAPPED_HEADER_SCAN_ROWS = 10
MIN_MAPPED_HEADER_COLUMNS = 3

SheetRow = dict[str, str]

# Renamed fields that must keep resolving to the same persisted mapping
FIELD_NAME_ALIASES: dict[str, list[str]] = {
    "Manager sign-off": ["Manager sign-off", "Assistant Manager sign-off"],
    "Assistant Manager sign-off": ["Manager sign-off", "Assistant Manager sign-off"],
}


def normalize_field_name(field_name: str) -> str:
    """Return the canonical spelling for a renamed field, else the trimmed input."""
    normalized = field_name.strip()
    for canonical, aliases in FIELD_NAME_ALIASES.items():
        if any(alias.lower() == normalized.lower() for alias in aliases):
            return canonical
    return normalized


def are_field_names_equivalent(name1: str, name2: str) -> bool:
    return normalize_field_name(name1).lower() == normalize_field_name(name2).lower()


def _column_sort_key(column: str) -> tuple[int, int, str]:
    if is_column_letter(column):
        return (0, column_letter_to_index(column), column)
    return (1, 0, column)


def get_ordered_columns(rows: Sequence[SheetRow]) -> list[str]:
    """Column letters of the first row in sheet order (A, B, ..., Z, AA)."""
    if not rows:
        return []
    columns = [key for key in rows[0].keys() if key != ROW_INDEX_KEY]
    return sorted(columns, key=_column_sort_key)


def rows_to_grid(rows: Sequence[SheetRow], ordered_columns: Sequence[str]) -> list[list[str]]:
    return [[row.get(column) or "" for column in ordered_columns] for row in rows]


def detect_header_row_by_mapped_columns(
    rows: Sequence[SheetRow],
    mappings: Sequence[SheetMapping],
    max_rows_to_scan: int = MAPPED_HEADER_SCAN_ROWS,
    min_mapped_columns: int = MIN_MAPPED_HEADER_COLUMNS,
    fallback_scan_rows: int = DEFAULT_SCAN_ROWS,
) -> int:
    """
    Locate the header row using the column letters of saved mappings.

    The header is the row (within the first ``max_rows_to_scan + 1``) with
    the most filled mapped columns. This survives header renames. When
    fewer than ``min_mapped_columns`` columns have content, the text-based
    detector decides instead.
    """
    if not rows or not mappings:
        return 0

    mapped_columns = [
        m.column_letter.strip().upper() for m in mappings if m.column_letter and m.column_letter.strip()
    ]
    if not mapped_columns:
        return 0

    best_row_index = 0
    best_filled_count = 0
    for row_index, row in enumerate(rows[: max_rows_to_scan + 1]):
        filled_count = sum(1 for column in mapped_columns if (row.get(column) or "").strip())
        if filled_count > best_filled_count:
            best_filled_count = filled_count
            best_row_index = row_index

    if best_filled_count >= min_mapped_columns:
        return best_row_index

    logger.debug(
        f"Only {best_filled_count} mapped columns filled, falling back to text detection"
    )
    grid = rows_to_grid(rows, get_ordered_columns(rows))
    return detect_header_row(grid, fallback_scan_rows)


def compute_header_context(
    rows: Sequence[SheetRow],
    mappings: Optional[Sequence[SheetMapping]] = None,
    max_rows_to_scan: int = DEFAULT_SCAN_ROWS,
) -> HeaderContext:
    """Build the per-sheet header context a caller can cache."""
    if not rows:
        return HeaderContext(ordered_columns=["A", "B", "C", "D"])

    ordered_columns = get_ordered_columns(rows)
    grid = rows_to_grid(rows, ordered_columns)

    if mappings:
        header_row_index = detect_header_row_by_mapped_columns(
            rows, mappings, fallback_scan_rows=max_rows_to_scan
        )
    else:
        header_row_index = detect_header_row(grid, max_rows_to_scan)

    return HeaderContext(
        ordered_columns=ordered_columns,
        grid=grid,
        header_row_index=header_row_index,
    )


def get_column_display_name(
    column: str,
    rows: Sequence[SheetRow],
    mappings: Sequence[SheetMapping],
    context: Optional[HeaderContext] = None,
) -> str:
    """
    Label for a column: header text, then mapped field name, then "Column N".

    When a context is supplied the answer is memoized in its
    ``display_name_cache``.
    """
    if context is not None and column in context.display_name_cache:
        return context.display_name_cache[column]

    display_name = ""
    if context is not None and context.header_row_index < len(rows):
        display_name = (rows[context.header_row_index].get(column) or "").strip()

    if not display_name:
        mapping = next((m for m in mappings if m.column_letter == column), None)
        if mapping is not None and mapping.field_name:
            display_name = mapping.field_name

    if not display_name:
        if is_column_letter(column):
            display_name = f"Column {column_letter_to_index(column) + 1}"
        else:
            display_name = column

    if context is not None:
        context.display_name_cache[column] = display_name

    return display_name


def get_data_rows(
    rows: Sequence[SheetRow],
    context: Optional[HeaderContext] = None,
    max_rows_to_scan: int = DEFAULT_SCAN_ROWS,
) -> list[SheetRow]:
    """Rows beneath the header; detects the header when no context is given."""
    if not rows:
        return []

    if context is not None:
        header_row_index = context.header_row_index
    else:
        grid = rows_to_grid(rows, get_ordered_columns(rows))
        header_row_index = detect_header_row(grid, max_rows_to_scan)

    return list(rows[header_row_index + 1 :])
