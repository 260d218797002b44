"""Tests for API routes."""

from fieldsmith.config import settings
from fieldsmith.registry import CANONICAL_FIELDS


class TestFieldsEndpoint:
    """Test the /api/fields endpoint."""

    def test_list_all_fields(self, test_client):
        """Test listing the whole catalog in registry order."""
        response = test_client.get("/api/fields")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == len(CANONICAL_FIELDS)
        assert data["fields"][0]["key"] == "name"
        assert data["fields"][0]["category"] == "identification"
        assert "serial #" in data["fields"][1]["aliases"]

    def test_search_fields(self, test_client):
        """Test filtering fields by query."""
        response = test_client.get("/api/fields", params={"q": "sign-off"})

        data = response.json()
        assert data["count"] == 1
        assert data["fields"][0]["key"] == "managerSignoff"

    def test_grouped_fields(self, test_client):
        """Test grouping fields by category."""
        response = test_client.get("/api/fields", params={"grouped": "true"})

        categories = response.json()["categories"]
        assert [f["key"] for f in categories["location"]] == [
            "location",
            "locationCode",
            "borough",
            "physicalLocation",
        ]


    def test_get_field(self, test_client):
        """Test fetching one field by key."""
        response = test_client.get("/api/fields/assetTag")

        assert response.status_code == 200
        data = response.json()
        assert data["display_name"] == "Asset Tag"
        assert data["category"] == "identification"

    def test_get_unknown_field(self, test_client):
        """Test that unknown keys return 404."""
        response = test_client.get("/api/fields/warrantyExpiry")

        assert response.status_code == 404
        assert "warrantyExpiry" in response.json()["detail"]


class TestDetectEndpoint:
    """Test the /api/headers/detect endpoint."""

    def test_detect_decoy_header(self, test_client, decoy_grid):
        """Test that the real header is found below a placeholder row."""
        response = test_client.post("/api/headers/detect", json={"rows": decoy_grid})

        assert response.status_code == 200
        data = response.json()
        assert data["header_row_index"] == 1
        assert data["header_row"] == ["Serial Number", "Asset Tag"]
        assert [s["row_index"] for s in data["scores"]] == [0, 1, 2]
        assert data["scores"][1]["strong_validated_matches"] == 2

    def test_detect_respects_scan_window(self, test_client, decoy_grid):
        """Test that an explicit window limits the candidates."""
        response = test_client.post(
            "/api/headers/detect", json={"rows": decoy_grid, "max_rows_to_scan": 1}
        )

        data = response.json()
        assert data["header_row_index"] == 0
        assert len(data["scores"]) == 1

    def test_detect_uses_configured_window(self, test_client, decoy_grid, monkeypatch):
        """Test that the configured window applies when none is given."""
        monkeypatch.setattr(settings, "header_scan_rows", 1)

        response = test_client.post("/api/headers/detect", json={"rows": decoy_grid})

        assert len(response.json()["scores"]) == 1

    def test_detect_ragged_rows(self, test_client):
        """Test that short rows and null cells are accepted."""
        rows = [["Status", "Asset Tag"], ["Active"], [None, "A012345"]]

        response = test_client.post("/api/headers/detect", json={"rows": rows})

        assert response.status_code == 200
        assert response.json()["header_row_index"] == 0

    def test_detect_empty_rows(self, test_client):
        """Test that an empty window defaults to row 0."""
        response = test_client.post("/api/headers/detect", json={"rows": []})

        data = response.json()
        assert data["header_row_index"] == 0
        assert data["header_row"] == []

    def test_detect_rejects_invalid_window(self, test_client, decoy_grid):
        """Test validation of the scan window."""
        response = test_client.post(
            "/api/headers/detect", json={"rows": decoy_grid, "max_rows_to_scan": 0}
        )

        assert response.status_code == 422


class TestAutoMapEndpoint:
    """Test the /api/mappings/auto endpoint."""

    def test_auto_map_with_ambiguity(self, test_client):
        """Test that duplicate headers come back ambiguous."""
        response = test_client.post(
            "/api/mappings/auto",
            json={
                "field_keys": ["name", "serialNumber", "assetTag", "warrantyExpiry"],
                "header_row": ["Name", "Serial Number", "Asset Tag", "Serial Number"],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert {m["field_key"]: m["column_letter"] for m in data["mappings"]} == {
            "name": "A",
            "assetTag": "C",
        }
        assert data["unmatched_fields"] == ["warrantyExpiry"]
        assert data["ambiguous_matches"][0]["field_key"] == "serialNumber"
        assert [c["column_letter"] for c in data["ambiguous_matches"][0]["possible_columns"]] == [
            "B",
            "D",
        ]
        assert data["mappings"][0]["match_type"] == "exact"

    def test_auto_map_with_offset(self, test_client):
        """Test that the start column shifts letters."""
        response = test_client.post(
            "/api/mappings/auto",
            json={"field_keys": ["status"], "header_row": ["Status"], "start_column_index": 26},
        )

        assert response.json()["mappings"][0]["column_letter"] == "AA"

    def test_auto_map_custom_threshold(self, test_client):
        """Test that a request threshold overrides the configured one."""
        response = test_client.post(
            "/api/mappings/auto",
            json={
                "field_keys": ["serialNumber"],
                "header_row": ["Serial Numbr"],
                "minimum_confidence": 0.99,
            },
        )

        assert response.json()["unmatched_fields"] == ["serialNumber"]


class TestResolveEndpoint:
    """Test the /api/mappings/resolve endpoint."""

    def _ambiguous_result(self, test_client):
        response = test_client.post(
            "/api/mappings/auto",
            json={
                "field_keys": ["serialNumber"],
                "header_row": ["Serial Number", "Notes", "Serial Number"],
            },
        )
        return response.json()

    def test_resolve_choice(self, test_client):
        """Test committing a candidate column."""
        result = self._ambiguous_result(test_client)

        response = test_client.post(
            "/api/mappings/resolve",
            json={"result": result, "field_key": "serialNumber", "column_index": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["mappings"][0]["column_letter"] == "C"
        assert data["ambiguous_matches"] == []

    def test_resolve_invalid_choice(self, test_client):
        """Test that a non-candidate column is rejected with 400."""
        result = self._ambiguous_result(test_client)

        response = test_client.post(
            "/api/mappings/resolve",
            json={"result": result, "field_key": "serialNumber", "column_index": 1},
        )

        assert response.status_code == 400
        assert "not a candidate" in response.json()["detail"]


class TestSmartNameEndpoint:
    """Test the /api/names/smart endpoint."""

    def test_smart_name(self, test_client):
        """Test composing a name from model and serial."""
        response = test_client.post(
            "/api/names/smart",
            json={
                "row": {"A": "", "B": "T490", "C": "SN-00912"},
                "field_columns": {"modelId": "B", "serialNumber": "C"},
            },
        )

        assert response.status_code == 200
        assert response.json() == {"name": "T490 - SN-00912"}

    def test_smart_name_unknown(self, test_client):
        """Test the sentinel when nothing is usable."""
        response = test_client.post(
            "/api/names/smart", json={"row": {"A": None}, "field_columns": {"modelId": "A"}}
        )

        assert response.json() == {"name": "Unknown Device"}
