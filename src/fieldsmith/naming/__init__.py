"""Smart name synthesis for rows missing a descriptive name."""

from .smart_name import (
    UNKNOWN_DEVICE_NAME,
    generate_smart_name,
    infer_field_key,
    enhance_rows_with_smart_names,
)

__all__ = [
    "UNKNOWN_DEVICE_NAME",
    "generate_smart_name",
    "infer_field_key",
    "enhance_rows_with_smart_names",
]
