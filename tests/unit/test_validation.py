"""
Unit tests for validation module.
"""

import pytest

from valuationdesk.core.models import CreateRequestPayload, PropertyType, RequestStatus
from valuationdesk.exceptions import ValidationError
from valuationdesk.utils.validation import is_valid, parse_payload, validate


class TestValidate:
    """Tests for validate function."""

    def test_valid_payload_has_no_errors(self, valid_payload):
        assert validate(valid_payload) == {}
        assert is_valid(valid_payload) is True

    @pytest.mark.parametrize("field,message", [
        ("propertyAddress", "Property address is required"),
        ("propertyType", "Property type is required"),
        ("stateId", "State is required"),
        ("purpose", "Purpose is required"),
    ])
    def test_missing_required_field_flags_only_that_field(self, valid_payload, field, message):
        del valid_payload[field]
        assert validate(valid_payload) == {field: message}

    @pytest.mark.parametrize("field", ["propertyAddress", "propertyType", "stateId", "purpose"])
    def test_empty_string_counts_as_missing(self, valid_payload, field):
        valid_payload[field] = ""
        assert list(validate(valid_payload)) == [field]

    def test_whitespace_only_address(self, valid_payload):
        valid_payload["propertyAddress"] = "   "
        assert validate(valid_payload) == {
            "propertyAddress": "Property address is required",
        }

    def test_whitespace_only_purpose(self, valid_payload):
        valid_payload["purpose"] = "\t\n "
        assert validate(valid_payload) == {"purpose": "Purpose is required"}

    @pytest.mark.parametrize("value", [12345, 1.5, ["12 Jalan Ampang"], {"line1": "x"}])
    def test_non_string_address_counts_as_missing(self, valid_payload, value):
        valid_payload["propertyAddress"] = value
        assert validate(valid_payload) == {
            "propertyAddress": "Property address is required",
        }

    @pytest.mark.parametrize("value", [42, True, ["Refinancing"]])
    def test_non_string_purpose_counts_as_missing(self, valid_payload, value):
        valid_payload["purpose"] = value
        assert validate(valid_payload) == {"purpose": "Purpose is required"}

    def test_address_over_500_characters(self):
        errors = validate({
            "propertyAddress": "a" * 501,
            "propertyType": "Residential",
            "stateId": "1",
            "purpose": "x",
            "estimatedValue": 100,
        })
        assert errors == {
            "propertyAddress": "Property address must not exceed 500 characters",
        }

    def test_address_of_exactly_500_characters(self, valid_payload):
        valid_payload["propertyAddress"] = "a" * 500
        assert validate(valid_payload) == {}

    def test_purpose_over_200_characters(self, valid_payload):
        valid_payload["purpose"] = "p" * 201
        assert validate(valid_payload) == {
            "purpose": "Purpose must not exceed 200 characters",
        }

    def test_purpose_of_exactly_200_characters(self, valid_payload):
        valid_payload["purpose"] = "p" * 200
        assert validate(valid_payload) == {}

    @pytest.mark.parametrize("value", [
        0, -5, None, "", "abc", True, float("nan"), float("inf"), "inf", "Infinity", "1e999",
    ])
    def test_estimated_value_not_positive(self, valid_payload, value):
        valid_payload["estimatedValue"] = value
        assert validate(valid_payload) == {
            "estimatedValue": "Estimated value must be greater than 0",
        }

    def test_estimated_value_missing(self, valid_payload):
        del valid_payload["estimatedValue"]
        assert "estimatedValue" in validate(valid_payload)

    def test_small_positive_estimated_value(self, valid_payload):
        valid_payload["estimatedValue"] = 0.01
        assert validate(valid_payload) == {}

    def test_numeric_string_estimated_value(self, valid_payload):
        valid_payload["estimatedValue"] = "750000"
        assert validate(valid_payload) == {}

    def test_unknown_property_type(self, valid_payload):
        valid_payload["propertyType"] = "Castle"
        assert validate(valid_payload) == {
            "propertyType": "Property type must be one of: Residential, Commercial, Industrial",
        }

    def test_status_is_optional(self, valid_payload):
        del valid_payload["status"]
        assert validate(valid_payload) == {}

    def test_unknown_status(self, valid_payload):
        valid_payload["status"] = "Archived"
        assert validate(valid_payload) == {
            "status": "Status must be one of: Draft, Submitted, Completed",
        }

    def test_multiple_errors_reported_together(self):
        errors = validate({})
        assert set(errors) == {
            "propertyAddress",
            "propertyType",
            "stateId",
            "purpose",
            "estimatedValue",
        }

    def test_does_not_modify_payload(self, valid_payload):
        before = dict(valid_payload)
        validate(valid_payload)
        assert valid_payload == before


class TestParsePayload:
    """Tests for parse_payload function."""

    def test_builds_typed_payload(self, valid_payload):
        payload = parse_payload(valid_payload)
        assert isinstance(payload, CreateRequestPayload)
        assert payload.property_type is PropertyType.RESIDENTIAL
        assert payload.status is RequestStatus.DRAFT
        assert payload.estimated_value == 500000

    def test_status_defaults_to_draft(self, valid_payload):
        del valid_payload["status"]
        assert parse_payload(valid_payload).status is RequestStatus.DRAFT

    def test_numeric_string_value_is_converted(self, valid_payload):
        valid_payload["estimatedValue"] = "1250.5"
        assert parse_payload(valid_payload).estimated_value == 1250.5

    def test_integer_state_id_becomes_string(self, valid_payload):
        valid_payload["stateId"] = 3
        assert parse_payload(valid_payload).state_id == "3"

    def test_invalid_payload_raises_with_field_errors(self, valid_payload):
        valid_payload["purpose"] = ""
        valid_payload["estimatedValue"] = -1

        with pytest.raises(ValidationError) as exc_info:
            parse_payload(valid_payload)

        assert exc_info.value.errors == {
            "purpose": "Purpose is required",
            "estimatedValue": "Estimated value must be greater than 0",
        }
        assert exc_info.value.fields == ["estimatedValue", "purpose"]
