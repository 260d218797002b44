"""Data models for column-to-field mapping."""

from typing import Optional

from pydantic import BaseModel, Field

from ..matching import MatchType


class ColumnCandidate(BaseModel):
    """A column whose header qualifies for a requested field."""

    column_index: int  # 0-based, start offset applied
    column_letter: str
    confidence: float
    match_type: MatchType


class FieldColumnMapping(BaseModel):
    """A field committed to exactly one column."""

    field_key: str
    column_index: int
    column_letter: str
    confidence: float
    match_type: MatchType


class AmbiguousMatch(BaseModel):
    """A field with several qualifying columns, left for an external choice."""

    field_key: str
    possible_columns: list[ColumnCandidate]


class AutoMappingResult(BaseModel):
    """Outcome of auto-mapping; the three lists partition the requested keys."""

    mappings: list[FieldColumnMapping] = Field(default_factory=list)
    unmatched_fields: list[str] = Field(default_factory=list)
    ambiguous_matches: list[AmbiguousMatch] = Field(default_factory=list)

    def get_mapping(self, field_key: str) -> Optional[FieldColumnMapping]:
        """Return the committed mapping for a field, if any."""
        for mapping in self.mappings:
            if mapping.field_key == field_key:
                return mapping
        return None

    def get_ambiguous(self, field_key: str) -> Optional[AmbiguousMatch]:
        """Return the ambiguous entry for a field, if any."""
        for ambiguous in self.ambiguous_matches:
            if ambiguous.field_key == field_key:
                return ambiguous
        return None

    @property
    def is_complete(self) -> bool:
        """True when every requested field was mapped."""
        return not self.unmatched_fields and not self.ambiguous_matches


class SheetMapping(BaseModel):
    """A persisted column-to-field pairing supplied by the storage layer."""

    column_letter: str
    field_name: str
    order: int = 0
    field_key: Optional[str] = None


class HeaderContext(BaseModel):
    """Per-sheet header data a caller may cache between renders.

    Nothing here is invalidated automatically; rebuild it whenever the
    sheet rows or the mapping set change.
    """

    ordered_columns: list[str] = Field(default_factory=list)
    grid: list[list[str]] = Field(default_factory=list)
    header_row_index: int = 0
    display_name_cache: dict[str, str] = Field(default_factory=dict)


class DisambiguationError(ValueError):
    """Raised when a disambiguation choice does not fit the mapping result."""

    pass
