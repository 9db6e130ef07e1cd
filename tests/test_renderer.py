"""Tests for the result row renderer."""

from phonecheck.api_manager.base import ValidationResult
from phonecheck.core.renderer import NO_DATA_MESSAGE, capitalize_first, render


def rows_as_pairs(payload: dict, number: str = "+919876543210"):
    return [(r.label, r.value) for r in render(ValidationResult.from_payload(payload), number)]


class TestRender:
    """Row selection and ordering."""

    def test_country_and_type_only(self):
        """Country and type present: no optional extras and no fallback row."""
        pairs = rows_as_pairs({"valid": True, "country": {"name": "India"}, "type": "mobile"})
        assert pairs == [
            ("Validation Status", "Valid"),
            ("Phone Number", "+919876543210"),
            ("Country", "India"),
            ("Line Type", "Mobile"),
        ]

    def test_invalid_without_details_shows_fallback(self):
        pairs = rows_as_pairs({"valid": False})
        assert pairs == [
            ("Validation Status", "Invalid"),
            ("Phone Number", "+919876543210"),
            ("Additional Info", NO_DATA_MESSAGE),
        ]

    def test_full_response_order(self):
        payload = {
            "valid": True,
            "country": {"code": "US", "name": "United States", "prefix": "+1"},
            "location": "California",
            "carrier": "T-Mobile USA, Inc.",
            "type": "MOBILE",
            "format": {"international": "+14152007986", "local": "(415) 200-7986"},
        }
        labels = [label for label, _ in rows_as_pairs(payload, "+14152007986")]
        assert labels == [
            "Validation Status",
            "Phone Number",
            "Country",
            "Location",
            "Carrier",
            "Line Type",
            "International Format",
        ]

    def test_location_only_still_shows_fallback(self):
        """Location and format do not suppress the Additional Info row."""
        pairs = rows_as_pairs(
            {"valid": True, "location": "Bavaria", "format": {"international": "+49 89 123"}}
        )
        assert ("Location", "Bavaria") in pairs
        assert ("International Format", "+49 89 123") in pairs
        assert pairs[-1] == ("Additional Info", NO_DATA_MESSAGE)

    def test_nameless_country_suppresses_fallback(self):
        """A country block without a name adds no row but counts as present."""
        pairs = rows_as_pairs({"valid": True, "country": {"code": "IN"}})
        assert [label for label, _ in pairs] == ["Validation Status", "Phone Number"]

    def test_status_row_style(self):
        valid_rows = render(ValidationResult(valid=True), "+1")
        invalid_rows = render(ValidationResult(valid=False), "+1")
        assert valid_rows[0].style == "valid"
        assert invalid_rows[0].style == "invalid"
        assert valid_rows[1].style == ""

    def test_echoed_number_is_unchanged(self):
        pairs = rows_as_pairs({"valid": False}, "+44 (0)20 abc")
        assert pairs[1] == ("Phone Number", "+44 (0)20 abc")


def test_capitalize_first() -> None:
    assert capitalize_first("mobile") == "Mobile"
    assert capitalize_first("LANDLINE") == "Landline"
    assert capitalize_first("") == ""


def test_bare_country_string_suppresses_fallback() -> None:
    """A country given as a plain code still counts as country data."""
    pairs = rows_as_pairs({"valid": True, "country": "IN"})
    assert [label for label, _ in pairs] == ["Validation Status", "Phone Number"]


def test_numeric_type_is_rendered_as_text() -> None:
    pairs = rows_as_pairs({"valid": True, "type": 5, "location": 42})
    assert ("Line Type", "5") in pairs
    assert ("Location", "42") in pairs
