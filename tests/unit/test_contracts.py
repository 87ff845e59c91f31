"""
Tests for JSON Schema Contract Validators

- Validity of the shipped schemas
- Valid and invalid contract dicts
- Encoding and decoding TimeValue / TimeSpan
- Zone resolution through the registry
"""

import json
import logging

import pytest
from jsonschema import Draft202012Validator, ValidationError

from caltime.core.contracts import (
    contract_validator,
    time_span_from_contract,
    time_span_to_contract,
    time_value_from_contract,
    time_value_to_contract,
    validate_time_span,
    validate_time_value,
)
from caltime.core.domain.time_span import TimeSpan
from caltime.core.domain.time_value import TimeValue
from caltime.core.domain.zone import UTC, ZoneRegistry, get_zone


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_time_value():
    return {
        "year": 2024,
        "month": 1,
        "day": 15,
        "hour": 12,
        "minute": 0,
        "second": 0,
        "is_date": False,
        "is_daylight": False,
        "tzid": "America/New_York",
    }


@pytest.fixture
def valid_time_span():
    return {"start": 1704067200, "end": 1704070800, "is_busy": True}


# =============================================================================
# SCHEMAS
# =============================================================================


class TestSchemas:
    def test_schemas_are_valid(self) -> None:
        for name in ("time_value", "time_span"):
            Draft202012Validator.check_schema(contract_validator(name).schema)

    def test_cached(self) -> None:
        assert contract_validator("time_value") is contract_validator("time_value")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            contract_validator("no_such_schema")


# =============================================================================
# VALIDATION
# =============================================================================


class TestTimeValueContract:
    def test_valid(self, valid_time_value) -> None:
        validate_time_value(valid_time_value)
        assert contract_validator("time_value").is_valid(valid_time_value)

    def test_floating_tzid_null(self, valid_time_value) -> None:
        valid_time_value["tzid"] = None
        validate_time_value(valid_time_value)

    def test_missing_field(self, valid_time_value) -> None:
        del valid_time_value["tzid"]
        with pytest.raises(ValidationError, match="tzid"):
            validate_time_value(valid_time_value)

    @pytest.mark.parametrize(
        "field,bad",
        [("month", 13), ("hour", 24), ("minute", -1), ("second", 60), ("year", 2024.5), ("tzid", "")],
    )
    def test_out_of_range(self, valid_time_value, field, bad) -> None:
        valid_time_value[field] = bad
        assert not contract_validator("time_value").is_valid(valid_time_value)

    def test_extra_field_rejected(self, valid_time_value) -> None:
        valid_time_value["offset"] = -18000
        errors = list(contract_validator("time_value").iter_errors(valid_time_value))
        assert len(errors) == 1


class TestTimeSpanContract:
    def test_valid(self, valid_time_span) -> None:
        validate_time_span(valid_time_span)
        assert contract_validator("time_span").is_valid(valid_time_span)

    def test_wrong_type(self, valid_time_span) -> None:
        valid_time_span["is_busy"] = "yes"
        with pytest.raises(ValidationError):
            validate_time_span(valid_time_span)


# =============================================================================
# ENCODE / DECODE
# =============================================================================


class TestTimeValueCodec:
    def test_encode(self) -> None:
        value = TimeValue.from_fields(2024, 1, 15, 12, 0, 0, zone=get_zone("America/New_York"))
        data = time_value_to_contract(value)

        assert data["tzid"] == "America/New_York"
        assert "zone" not in data
        validate_time_value(data)

    def test_decode(self, valid_time_value) -> None:
        value = time_value_from_contract(valid_time_value)
        assert (value.year, value.month, value.day, value.hour) == (2024, 1, 15, 12)
        assert value.get_zone() is get_zone("America/New_York")

    def test_decode_utc_and_floating(self, valid_time_value) -> None:
        valid_time_value["tzid"] = "UTC"
        assert time_value_from_contract(valid_time_value).is_utc

        valid_time_value["tzid"] = None
        assert time_value_from_contract(valid_time_value).is_floating

    def test_decode_with_own_registry(self, valid_time_value) -> None:
        registry = ZoneRegistry()
        value = time_value_from_contract(valid_time_value, registry)
        assert value.get_zone() is registry.get("America/New_York")

    def test_unknown_tzid_gives_null(self, valid_time_value, caplog) -> None:
        valid_time_value["tzid"] = "Mars/Olympus_Mons"
        with caplog.at_level(logging.WARNING):
            value = time_value_from_contract(valid_time_value)

        assert value.is_null()
        assert "Mars/Olympus_Mons" in caplog.text

    def test_invalid_dict_raises(self, valid_time_value) -> None:
        valid_time_value["month"] = 13
        with pytest.raises(ValidationError):
            time_value_from_contract(valid_time_value)

    def test_null_sentinel_survives(self) -> None:
        data = time_value_to_contract(TimeValue.null_date())
        assert time_value_from_contract(data) == TimeValue.null_date()

    def test_json_text(self) -> None:
        value = TimeValue.from_fields(2024, 7, 1, 8, 30, 0, zone=UTC)
        text = json.dumps(time_value_to_contract(value))
        assert time_value_from_contract(json.loads(text)) == value


class TestTimeSpanCodec:
    def test_encode_decode(self, valid_time_span) -> None:
        span = time_span_from_contract(valid_time_span)
        assert span == TimeSpan(start=1704067200, end=1704070800, is_busy=True)
        assert time_span_to_contract(span) == valid_time_span

    def test_reversed_span_decoded(self, valid_time_span) -> None:
        valid_time_span["start"], valid_time_span["end"] = valid_time_span["end"], valid_time_span["start"]
        span = time_span_from_contract(valid_time_span)
        assert span.is_reversed
        assert time_span_to_contract(span) == valid_time_span
