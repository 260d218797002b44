"""Static catalog of canonical inventory fields."""

from typing import Optional

from .models import CanonicalField, FieldCategory, UnknownFieldError


def _field(
    key: str,
    display_name: str,
    aliases: list[str],
    category: FieldCategory,
    description: str,
) -> CanonicalField:
    return CanonicalField(
        key=key,
        display_name=display_name,
        aliases=tuple(aliases),
        category=category,
        description=description,
    )


# Order matters: matcher ties are broken by registry position.
CANONICAL_FIELDS: tuple[CanonicalField, ...] = (
    # Identification
    _field(
        "name",
        "Name",
        ["name", "item name", "device name", "equipment name", "product name"],
        FieldCategory.IDENTIFICATION,
        "Name or title of the inventory item",
    ),
    _field(
        "serialNumber",
        "Serial Number",
        ["serial number", "serial no", "sn", "serial #", "serial", "serial_number"],
        FieldCategory.IDENTIFICATION,
        "Manufacturer serial number",
    ),
    _field(
        "scannedSn",
        "Scanned Sn",
        [
            "scanned sn",
            "scanned serial",
            "scanned serial number",
            "scanned_sn",
            "scan sn",
            "scan serial",
            "scan serial number",
        ],
        FieldCategory.TRACKING,
        "Scanned serial number verification field",
    ),
    _field(
        "assetTag",
        "Asset Tag",
        ["asset tag", "asset #", "asset number", "tag", "inventory tag", "asset_tag"],
        FieldCategory.IDENTIFICATION,
        "Asset tag identifier",
    ),
    _field(
        "scannedAsset",
        "Scanned Asset",
        [
            "scanned asset",
            "scanned asset tag",
            "scanned tag",
            "scanned_asset",
            "scan asset",
            "scan asset tag",
            "scan tag",
        ],
        FieldCategory.TRACKING,
        "Scanned asset tag verification field",
    ),
    _field(
        "productNumber",
        "Product Number",
        ["product number", "product #", "product no", "part number", "model number", "product_number"],
        FieldCategory.TECHNICAL,
        "Manufacturer product/part number",
    ),
    _field(
        "modelId",
        "Model ID",
        ["model id", "model", "model name", "model_id"],
        FieldCategory.TECHNICAL,
        "Product model identifier",
    ),
    # Technical
    _field(
        "type",
        "Type",
        ["type", "device type", "equipment type", "category", "item type"],
        FieldCategory.TECHNICAL,
        "Type or category of equipment",
    ),
    _field(
        "manufacturer",
        "Manufacturer",
        ["manufacturer", "brand", "make", "vendor", "company"],
        FieldCategory.TECHNICAL,
        "Equipment manufacturer or brand",
    ),
    # Location
    _field(
        "location",
        "Location",
        ["location", "room", "building", "site"],
        FieldCategory.LOCATION,
        "Primary location of the equipment",
    ),
    _field(
        "locationCode",
        "Location Code",
        ["location code", "site code", "building code", "location_code"],
        FieldCategory.LOCATION,
        "Coded location identifier",
    ),
    _field(
        "borough",
        "Borough",
        ["borough", "district", "area", "region"],
        FieldCategory.LOCATION,
        "Borough or district of the site",
    ),
    _field(
        "physicalLocation",
        "Physical Location",
        ["physical location", "exact location", "specific location", "physical_location"],
        FieldCategory.LOCATION,
        "Detailed physical location description",
    ),
    # Assignment
    _field(
        "assignedTo",
        "Assigned To",
        ["assigned to", "assigned", "user", "owner", "assigned_to"],
        FieldCategory.ADMIN,
        "Person or department assigned to equipment",
    ),
    _field(
        "department",
        "Department",
        ["department", "dept", "division", "unit"],
        FieldCategory.ADMIN,
        "Department responsible for equipment",
    ),
    # Status and tracking
    _field(
        "status",
        "Status",
        ["status", "condition", "state", "current status"],
        FieldCategory.STATUS,
        "Current operational status",
    ),
    _field(
        "equipmentMove",
        "Equipment Move?",
        ["equipment move?", "equipment move", "move", "relocated", "equipment_move"],
        FieldCategory.STATUS,
        "Indicates if equipment has been moved",
    ),
    _field(
        "technician",
        "Technician",
        ["technician", "tech", "inspector", "checked by", "verified by"],
        FieldCategory.TRACKING,
        "Technician who performed the inventory check",
    ),
    _field(
        "managerSignoff",
        "Manager Sign-off",
        [
            "manager sign-off",
            "manager signoff",
            "assistant manager sign-off",
            "assistant manager signoff",
            "approved by",
            "supervisor",
            "manager_signoff",
        ],
        FieldCategory.TRACKING,
        "Manager approval and sign-off",
    ),
    _field(
        "lastVerifiedDate",
        "Last Verified Inventory Date",
        [
            "last verified inventory date",
            "last verified",
            "verification date",
            "last_verified_date",
            "date verified",
        ],
        FieldCategory.TRACKING,
        "Date when inventory was last verified",
    ),
    # Additional
    _field(
        "deviceName",
        "Device Name",
        ["device name", "computer name", "hostname", "device_name"],
        FieldCategory.IDENTIFICATION,
        "Device name or hostname",
    ),
    _field(
        "image",
        "Image",
        ["image", "photo", "picture", "attachment"],
        FieldCategory.TRACKING,
        "Equipment photo or image",
    ),
)

FIELDS_BY_KEY: dict[str, CanonicalField] = {field.key: field for field in CANONICAL_FIELDS}


def find_field(key: str) -> Optional[CanonicalField]:
    """Look up a field by key, returning None when it is not registered."""
    return FIELDS_BY_KEY.get(key)


def get_field(key: str) -> CanonicalField:
    """Look up a field by key.

    Raises:
        UnknownFieldError: If the key is not registered
    """
    field = FIELDS_BY_KEY.get(key)
    if field is None:
        raise UnknownFieldError(key)
    return field


def get_fields_by_category() -> dict[str, list[CanonicalField]]:
    """Group the catalog by category, keeping registry order within groups."""
    categories: dict[str, list[CanonicalField]] = {}
    for field in CANONICAL_FIELDS:
        categories.setdefault(field.category.value, []).append(field)
    return categories
