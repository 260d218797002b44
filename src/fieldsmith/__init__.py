"""FieldSmith - canonical field resolution for messy spreadsheet exports."""

__version__ = "0.1.0"
