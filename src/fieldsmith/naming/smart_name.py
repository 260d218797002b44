"""Descriptive device names built from whatever identity fields a row has."""

import logging
import re
from typing import Mapping, Optional, Sequence

from ..mapping.models import HeaderContext, SheetMapping

logger = logging.getLogger(__name__)

UNKNOWN_DEVICE_NAME = "Unknown Device"

# Literal name fields tried when nothing could be composed
NAME_FALLBACK_FIELDS = ("name", "deviceName", "equipmentName")

# Header spellings treated as a model column when none is mapped
MODEL_ID_HEADERS = (
    "model id",
    "modelid",
    "model",
    "model number",
    "model no",
    "modelnumber",
    "product model",
    "device model",
    "equipment model",
)

# Names that look like a bare serial or tag get replaced
_BARE_IDENTIFIER_RE = re.compile(r"^[A-Z0-9]+$")
MIN_DESCRIPTIVE_NAME_LENGTH = 5

SheetRow = dict[str, str]


def generate_smart_name(
    row_data: Mapping[str, Optional[str]],
    field_columns: Mapping[str, str],
) -> str:
    """
    Compose a readable identity for one data row.

    Model and serial together always give "{model} - {serial}". Otherwise
    the name is built from model, manufacturer, product number, type and
    serial, with the asset tag as a last labelled resort.

    Args:
        row_data: Cell text keyed by column letter
        field_columns: Column letter keyed by canonical field key

    Returns:
        The composed name, or UNKNOWN_DEVICE_NAME
    """
    values: dict[str, str] = {}
    for field_key, column_letter in field_columns.items():
        value = row_data.get(column_letter)
        if value and value.strip():
            values[field_key] = value.strip()

    model_id = values.get("modelId")
    serial_number = values.get("serialNumber")

    if model_id and serial_number:
        return f"{model_id} - {serial_number}"

    components: list[str] = []
    if model_id:
        components.append(model_id)
    if "manufacturer" in values:
        components.append(values["manufacturer"])

    product_number = values.get("productNumber")
    if product_number and product_number != model_id:
        components.append(product_number)

    if "type" in values:
        components.append(values["type"])
    if not model_id and serial_number:
        components.append(serial_number)
    if not components and "assetTag" in values:
        components.append(f"Asset {values['assetTag']}")

    if components:
        return " ".join(components)

    for fallback in NAME_FALLBACK_FIELDS:
        if fallback in values:
            return values[fallback]

    return UNKNOWN_DEVICE_NAME


def infer_field_key(field_name: str) -> Optional[str]:
    """Map a persisted field display name to the key used for naming."""
    display_name = field_name.lower()

    if "model" in display_name:
        return "modelId"
    if "manufacturer" in display_name or "brand" in display_name:
        return "manufacturer"
    if "product" in display_name and "number" in display_name:
        return "productNumber"
    if "serial" in display_name and "number" in display_name:
        return "serialNumber"
    if "asset" in display_name and "tag" in display_name:
        return "assetTag"
    if "type" in display_name or "category" in display_name:
        return "type"
    if display_name == "name":
        return "name"
    return None


def _is_model_id_header(header_value: str) -> bool:
    normalized = re.sub(r"[^a-z0-9]", " ", header_value.lower()).strip()
    return any(
        normalized == header or f"{header} " in normalized or f" {header}" in normalized
        for header in MODEL_ID_HEADERS
    )


def _find_unmapped_model_column(
    data_rows: Sequence[SheetRow],
    mappings: Sequence[SheetMapping],
    context: HeaderContext,
) -> Optional[str]:
    """Find a model column the user did not map but that has data."""
    mapped_columns = {m.column_letter for m in mappings}
    header_row_index = context.header_row_index
    if header_row_index >= len(context.grid):
        return None
    header_cells = context.grid[header_row_index]

    for position, column_letter in enumerate(context.ordered_columns):
        if column_letter in mapped_columns:
            continue
        if not any(row.get(column_letter) for row in data_rows[:5]):
            continue
        header_value = header_cells[position] if position < len(header_cells) else ""
        if header_value and _is_model_id_header(header_value):
            return column_letter
    return None


def _needs_smart_name(current_name: str) -> bool:
    return (
        not current_name
        or _BARE_IDENTIFIER_RE.match(current_name) is not None
        or len(current_name) < MIN_DESCRIPTIVE_NAME_LENGTH
    )


def enhance_rows_with_smart_names(
    data_rows: Sequence[SheetRow],
    mappings: Sequence[SheetMapping],
    context: HeaderContext,
) -> list[SheetRow]:
    """
    Backfill the mapped name column with synthesized names.

    A name is replaced when it is empty, looks like a bare serial/tag, or is
    too short to be descriptive. Rows are copied, never modified in place.
    """
    if not data_rows or not mappings:
        return list(data_rows)

    name_mapping = next((m for m in mappings if "name" in m.field_name.lower()), None)
    if name_mapping is None:
        return list(data_rows)

    field_columns: dict[str, str] = {}
    for mapping in mappings:
        field_key = mapping.field_key or infer_field_key(mapping.field_name)
        if field_key and field_key not in field_columns:
            field_columns[field_key] = mapping.column_letter

    has_model_mapping = any(
        "model" in m.field_name.lower()
        and ("id" in m.field_name.lower() or m.field_name.lower() == "model")
        for m in mappings
    )
    if not has_model_mapping and "modelId" not in field_columns:
        model_column = _find_unmapped_model_column(data_rows, mappings, context)
        if model_column:
            logger.debug(f"Using unmapped column {model_column} as model for naming")
            field_columns["modelId"] = model_column

    enhanced_rows: list[SheetRow] = []
    for row in data_rows:
        enhanced = dict(row)
        current_name = row.get(name_mapping.column_letter) or ""
        if _needs_smart_name(current_name):
            smart_name = generate_smart_name(row, field_columns)
            if smart_name != UNKNOWN_DEVICE_NAME:
                enhanced[name_mapping.column_letter] = smart_name
        enhanced_rows.append(enhanced)

    return enhanced_rows
