"""Tests for matching header text to canonical fields."""

from fieldsmith.matching import MatchType, find_best_field_match, search_fields
from fieldsmith.registry import CANONICAL_FIELDS, CanonicalField, FieldCategory


class TestFindBestFieldMatch:
    """Test the exact / alias / fuzzy match tiers."""

    def test_exact_display_name(self):
        """Display-name hits return confidence 1.0 and type exact."""
        match = find_best_field_match("Serial Number")

        assert match is not None
        assert match.field.key == "serialNumber"
        assert match.confidence == 1.0
        assert match.match_type == MatchType.EXACT
        assert match.matched_alias is None

    def test_exact_display_name_is_case_and_punctuation_insensitive(self):
        """Normalization applies before the display-name comparison."""
        match = find_best_field_match("  EQUIPMENT MOVE ")

        assert match.field.key == "equipmentMove"
        assert match.match_type == MatchType.EXACT

    def test_exact_display_name_beats_earlier_alias(self):
        """'Device Name' is an alias of name but the display name of deviceName."""
        match = find_best_field_match("Device Name")

        assert match.field.key == "deviceName"
        assert match.match_type == MatchType.EXACT

    def test_alias_match(self):
        """A perfect alias hit is reported as type alias with the alias text."""
        match = find_best_field_match("Brand")

        assert match.field.key == "manufacturer"
        assert match.confidence == 1.0
        assert match.match_type == MatchType.ALIAS
        assert match.matched_alias == "brand"

    def test_alias_tie_keeps_first_alias(self):
        """'Serial #' and 'serial' normalize alike; the first listed alias is kept."""
        match = find_best_field_match("Serial #")

        assert match.field.key == "serialNumber"
        assert match.matched_alias == "serial #"

    def test_fuzzy_match(self):
        """Misspelled headers match by similarity."""
        match = find_best_field_match("Serial Numbr")

        assert match.field.key == "serialNumber"
        assert match.match_type == MatchType.FUZZY
        assert 0.7 <= match.confidence < 1.0

    def test_no_match_returns_none(self):
        """Nothing above the floor gives None."""
        assert find_best_field_match("xyz") is None
        assert find_best_field_match("") is None
        assert find_best_field_match(None) is None

    def test_threshold_is_respected(self):
        """A fuzzy hit disappears when the floor is raised above it."""
        assert find_best_field_match("Serial Numbr", minimum_confidence=0.99) is None

    def test_looser_threshold_admits_more(self):
        """Header scanning uses a looser floor than auto-mapping."""
        assert find_best_field_match("Mfr", minimum_confidence=0.7) is None
        assert find_best_field_match("Mfr", minimum_confidence=0.4) is not None

    def test_tie_goes_to_earlier_field(self):
        """Equal scores keep the field that comes first in the registry."""
        fields = (
            CanonicalField(
                key="first",
                display_name="First",
                aliases=("shared",),
                category=FieldCategory.ADMIN,
            ),
            CanonicalField(
                key="second",
                display_name="Second",
                aliases=("shared",),
                category=FieldCategory.ADMIN,
            ),
        )

        match = find_best_field_match("Shared", fields=fields)

        assert match.field.key == "first"

    def test_confidence_within_bounds(self):
        """Confidence is always in [0, 1]."""
        for header in ["Asset #", "Tag No", "Locaton", "Assigned", "Dept."]:
            match = find_best_field_match(header, minimum_confidence=0.0)
            assert match is not None
            assert 0.0 <= match.confidence <= 1.0


class TestSearchFields:
    """Test catalog search."""

    def test_search_by_alias(self):
        """Searching 'serial' finds every serial-like field."""
        keys = [f.key for f in search_fields("serial")]

        assert "serialNumber" in keys
        assert "scannedSn" in keys
        assert "assetTag" not in keys

    def test_search_by_display_name(self):
        """Display names are searched too."""
        keys = [f.key for f in search_fields("Sign-off")]
        assert keys == ["managerSignoff"]

    def test_empty_query_returns_all(self):
        """A blank query returns the whole catalog."""
        assert len(search_fields("")) == len(CANONICAL_FIELDS)
        assert len(search_fields("   ")) == len(CANONICAL_FIELDS)
        assert len(search_fields(None)) == len(CANONICAL_FIELDS)

    def test_no_results(self):
        """Unknown terms find nothing."""
        assert search_fields("warranty") == []
