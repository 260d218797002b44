"""Data models for the canonical field registry."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldCategory(str, Enum):
    """Grouping used when presenting fields."""

    IDENTIFICATION = "identification"
    TRACKING = "tracking"
    LOCATION = "location"
    STATUS = "status"
    TECHNICAL = "technical"
    ADMIN = "admin"


class CanonicalField(BaseModel):
    """A stable field identity that may appear under many header spellings."""

    model_config = ConfigDict(frozen=True)

    key: str  # Stable identifier, survives display renames
    display_name: str
    aliases: tuple[str, ...] = Field(min_length=1)
    category: FieldCategory
    description: str = ""


class UnknownFieldError(KeyError):
    """Raised when a field key is not in the registry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown canonical field '{key}'")
