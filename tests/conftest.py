"""Pytest configuration and shared fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fieldsmith.mapping import SheetMapping


@pytest.fixture
def decoy_grid() -> list[list[str]]:
    """Placeholder header row above the real header and one data row."""
    return [
        ["Column 1", "Column 2"],
        ["Serial Number", "Asset Tag"],
        ["SN-00912", "A048213"],
    ]


@pytest.fixture
def inventory_rows() -> list[dict[str, str]]:
    """Sheet rows keyed by column letter, with a title row above the header."""
    return [
        {"_rowIndex": "1", "A": "Branch Inventory 2024", "B": "", "C": "", "D": ""},
        {"_rowIndex": "2", "A": "Name", "B": "Model ID", "C": "Serial Number", "D": "Asset Tag"},
        {"_rowIndex": "3", "A": "", "B": "T490", "C": "SN-00912", "D": "A012345"},
        {"_rowIndex": "4", "A": "Reception Laptop", "B": "T480", "C": "SN-00913", "D": "A012346"},
        {"_rowIndex": "5", "A": "PC1", "B": "", "C": "", "D": "A012347"},
    ]


@pytest.fixture
def inventory_mappings() -> list[SheetMapping]:
    """Persisted mappings for the inventory_rows sheet."""
    return [
        SheetMapping(column_letter="A", field_name="Name", order=0),
        SheetMapping(column_letter="B", field_name="Model ID", order=1),
        SheetMapping(column_letter="C", field_name="Serial Number", order=2),
        SheetMapping(column_letter="D", field_name="Asset Tag", order=3),
    ]


@pytest.fixture
def test_client() -> TestClient:
    """Create a test client with only the API router mounted."""
    from fieldsmith.api.routes import router

    app = FastAPI()
    app.include_router(router, prefix="/api")

    return TestClient(app)
