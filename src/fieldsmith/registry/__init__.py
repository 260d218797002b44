"""Canonical field registry: catalog, categories and value validators."""

from .models import CanonicalField, FieldCategory, UnknownFieldError
from .catalog import (
    CANONICAL_FIELDS,
    FIELDS_BY_KEY,
    find_field,
    get_field,
    get_fields_by_category,
)
from .validators import (
    VALIDATORS,
    STRONG_FIELDS,
    validate_field_data,
    is_strong_field,
    validate_strong_field_data,
)

__all__ = [
    "CanonicalField",
    "FieldCategory",
    "UnknownFieldError",
    "CANONICAL_FIELDS",
    "FIELDS_BY_KEY",
    "find_field",
    "get_field",
    "get_fields_by_category",
    "VALIDATORS",
    "STRONG_FIELDS",
    "validate_field_data",
    "is_strong_field",
    "validate_strong_field_data",
]
