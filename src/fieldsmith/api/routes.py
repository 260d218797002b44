"""API routes for FieldSmith."""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..detection import pick_header_row, score_header_rows
from ..mapping import (
    AutoMappingResult,
    DisambiguationError,
    auto_map_fields_to_columns,
    resolve_ambiguous_match,
)
from ..matching import search_fields
from ..naming import generate_smart_name
from ..registry import (
    CANONICAL_FIELDS,
    UnknownFieldError,
    get_field,
    get_fields_by_category,
)

router = APIRouter()


class HeaderDetectRequest(BaseModel):
    """Request to find the header row of a sheet window."""

    rows: list[list[Optional[str]]]
    max_rows_to_scan: Optional[int] = Field(default=None, ge=1)
    minimum_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class AutoMapRequest(BaseModel):
    """Request to map canonical fields onto a header row."""

    field_keys: list[str]
    header_row: list[Optional[str]]
    start_column_index: int = Field(default=0, ge=0)
    minimum_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class ResolveAmbiguityRequest(BaseModel):
    """Request to commit one candidate column for an ambiguous field."""

    result: AutoMappingResult
    field_key: str
    column_index: int


class SmartNameRequest(BaseModel):
    """Request to synthesize a display name for one row."""

    row: dict[str, Optional[str]]
    field_columns: dict[str, str]  # field key -> column letter


def _field_payload(field) -> dict:
    return {
        "key": field.key,
        "display_name": field.display_name,
        "aliases": list(field.aliases),
        "category": field.category.value,
        "description": field.description,
    }


@router.get("/health")
async def health_check():
    """Health check endpoint with active thresholds."""
    from ..config import settings

    return {
        "status": "ok",
        "service": "fieldsmith",
        "config": {
            "header_scan_rows": settings.header_scan_rows,
            "header_match_confidence": settings.header_match_confidence,
            "auto_map_confidence": settings.auto_map_confidence,
            "field_count": len(CANONICAL_FIELDS),
        },
    }


@router.get("/fields")
async def list_fields(q: Optional[str] = None, grouped: bool = False):
    """List canonical fields, optionally filtered by a search query."""
    if grouped:
        return {
            "categories": {
                category: [_field_payload(f) for f in fields]
                for category, fields in get_fields_by_category().items()
            }
        }

    fields = search_fields(q)
    return {
        "count": len(fields),
        "fields": [_field_payload(f) for f in fields],
    }


@router.get("/fields/{key}")
async def get_field_by_key(key: str):
    """Get a single canonical field."""
    try:
        field = get_field(key)
    except UnknownFieldError:
        raise HTTPException(status_code=404, detail=f"Unknown field: {key}")
    return _field_payload(field)


@router.post("/headers/detect")
async def detect_header(request: HeaderDetectRequest):
    """
    Detect the header row of a sheet window.

    Returns the chosen row index and the per-row score breakdown.
    """
    from ..config import settings

    max_rows = request.max_rows_to_scan or settings.header_scan_rows
    confidence = (
        request.minimum_confidence
        if request.minimum_confidence is not None
        else settings.header_match_confidence
    )

    scores = score_header_rows(request.rows, max_rows, confidence)
    header_row_index = pick_header_row(scores)

    return {
        "header_row_index": header_row_index,
        "header_row": request.rows[header_row_index] if request.rows else [],
        "scores": [s.model_dump() for s in scores],
    }


@router.post("/mappings/auto", response_model=AutoMappingResult)
async def auto_map(request: AutoMapRequest):
    """Map requested fields onto header columns, reporting ambiguity."""
    from ..config import settings

    confidence = (
        request.minimum_confidence
        if request.minimum_confidence is not None
        else settings.auto_map_confidence
    )
    return auto_map_fields_to_columns(
        request.field_keys,
        request.header_row,
        start_column_index=request.start_column_index,
        minimum_confidence=confidence,
    )


@router.post("/mappings/resolve", response_model=AutoMappingResult)
async def resolve_mapping(request: ResolveAmbiguityRequest):
    """
    Apply the user's choice for an ambiguous field.

    The result comes back from /mappings/auto; column_index must be one of
    the field's candidate columns.
    """
    try:
        return resolve_ambiguous_match(request.result, request.field_key, request.column_index)
    except DisambiguationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/names/smart")
async def smart_name(request: SmartNameRequest):
    """Synthesize a descriptive name for one data row."""
    return {"name": generate_smart_name(request.row, request.field_columns)}
