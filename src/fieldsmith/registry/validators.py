"""Value-format validators used to tell real data apart from header text."""

import re
from typing import Optional

# Patterns are part of the persisted mapping contract; do not loosen them.
VALIDATORS: dict[str, re.Pattern] = {
    "assetTag": re.compile(r"^[A]\d{6}$", re.ASCII),  # A012345
    "serialNumber": re.compile(r"^[A-Za-z0-9-]{5,}$", re.ASCII),
    "scannedSn": re.compile(r"^[A-Za-z0-9-]{5,}$", re.ASCII),
    "scannedAsset": re.compile(r"^[A]\d{6}$", re.ASCII),
    "productNumber": re.compile(r"^[A-Za-z0-9-]{3,}$", re.ASCII),
    "modelId": re.compile(r"^[A-Za-z0-9-\s]{2,}$", re.ASCII),
    "locationCode": re.compile(r"^[A-Z0-9]{2,}$", re.ASCII),
    "department": re.compile(r"^[A-Za-z\s]{2,}$", re.ASCII),
}

# Fields whose values follow a rigid format and can corroborate a header row.
STRONG_FIELDS: frozenset[str] = frozenset(
    {"assetTag", "scannedAsset", "serialNumber", "scannedSn", "productNumber"}
)


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def validate_field_data(field_key: str, value: Optional[str]) -> bool:
    """Check a value against the field's format.

    Empty values never validate. Fields without a validator accept any
    non-empty value.
    """
    cleaned = _clean(value)
    if not cleaned:
        return False

    validator = VALIDATORS.get(field_key)
    if validator is None:
        return True

    return validator.fullmatch(cleaned) is not None


def is_strong_field(field_key: str) -> bool:
    """Return True if the field has a strict validator and is in the strong set."""
    return field_key in STRONG_FIELDS and field_key in VALIDATORS


def validate_strong_field_data(field_key: str, value: Optional[str]) -> bool:
    """Strict check: only strong fields with a matching value pass."""
    cleaned = _clean(value)
    if not cleaned or not is_strong_field(field_key):
        return False

    return VALIDATORS[field_key].fullmatch(cleaned) is not None
