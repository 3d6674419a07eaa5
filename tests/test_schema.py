"""
Tests for snapshot payload validation.
"""

import pytest
from resumecheck.schema import (
    SnapshotValidationError,
    validate_snapshot_payload,
    validate_snapshot_strict,
)


class TestValidateSnapshotPayload:
    """Test basic validation function."""

    def test_valid_payload(self, previous_payload):
        """Valid payload should have no errors."""
        assert validate_snapshot_payload(previous_payload) == []

    def test_empty_and_null_fields_allowed(self):
        """Missing data is allowed; it is treated as no information."""
        assert validate_snapshot_payload({}) == []
        assert validate_snapshot_payload(
            {"clientNames": None, "jobTitles": [], "relevantDates": None}
        ) == []

    def test_non_list_field(self):
        errors = validate_snapshot_payload({"clientNames": "Acme"})
        assert len(errors) == 1
        assert "clientNames" in errors[0]

    def test_non_string_entries(self):
        errors = validate_snapshot_payload({"clientNames": ["Acme"], "relevantDates": [2020]})
        assert any("relevantDates" in err for err in errors)

    def test_not_an_object(self):
        assert validate_snapshot_payload(["Acme"]) != []


class TestValidateSnapshotStrict:
    """Test strict validation function."""

    def test_valid_payload_strict(self, previous_payload):
        is_valid, errors = validate_snapshot_strict(previous_payload)
        assert is_valid
        assert errors == []

    def test_requires_client_names(self):
        is_valid, errors = validate_snapshot_strict({"jobTitles": ["Dev"]})
        assert not is_valid
        assert any("clientNames" in err for err in errors)

    def test_blank_client_name(self):
        is_valid, errors = validate_snapshot_strict({"clientNames": ["Acme", "  "]})
        assert not is_valid

    def test_more_titles_than_employers(self):
        is_valid, errors = validate_snapshot_strict(
            {"clientNames": ["Acme"], "jobTitles": ["Dev", "Lead"]}
        )
        assert not is_valid
        assert any("jobTitles" in err for err in errors)

    def test_fewer_dates_than_employers_allowed(self):
        is_valid, _ = validate_snapshot_strict(
            {"clientNames": ["Acme", "Globex"], "relevantDates": ["2020"]}
        )
        assert is_valid

    def test_type_errors_reported_first(self):
        is_valid, errors = validate_snapshot_strict({"clientNames": "Acme"})
        assert not is_valid
        assert len(errors) == 1


class TestSnapshotValidationError:

    def test_carries_errors(self):
        err = SnapshotValidationError(["a", "b"])
        assert err.errors == ["a", "b"]
        assert str(err) == "a; b"
        with pytest.raises(ValueError):
            raise err
