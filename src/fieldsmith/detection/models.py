"""Data models for header row detection."""

from typing import Optional, Sequence

from pydantic import BaseModel, Field

# Raw sheet window: rows of text cells, possibly ragged, cells may be missing.
Grid = Sequence[Sequence[Optional[str]]]


class HeaderRowScore(BaseModel):
    """Breakdown of how one row scored as a header candidate."""

    row_index: int
    match_score: float = 0.0
    penalty_score: float = 0.0
    generic_cells: int = 0
    field_matches: int = 0
    strong_field_matches: int = 0
    strong_validated_matches: int = 0
    matched_fields: list[str] = Field(default_factory=list)
    final_score: float = 0.0
    normalized_score: float = 0.0
