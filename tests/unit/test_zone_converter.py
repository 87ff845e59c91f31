"""
Tests for zones, the registry and ZoneConverter

Checks:
1. Registry resolution, caching and UTC aliases
2. DATE / floating / same-zone conversions keep fields
3. Offset arithmetic across day and year boundaries
4. DST state of converted values, including the repeated autumn hour
"""

import pytest

from caltime.core.domain.time_value import TimeValue
from caltime.core.domain.zone import (
    UTC,
    UnknownZoneError,
    ZoneOffset,
    ZoneRegistry,
    default_registry,
    get_zone,
)
from caltime.engine.comparator import compare
from caltime.engine.zone_converter import convert_to_zone, get_tzid, set_zone


@pytest.fixture
def registry():
    return ZoneRegistry()


@pytest.fixture
def new_york():
    return get_zone("America/New_York")


@pytest.fixture
def tokyo():
    return get_zone("Asia/Tokyo")


def fields(value: TimeValue):
    return (value.year, value.month, value.day, value.hour, value.minute, value.second)


# =============================================================================
# REGISTRY
# =============================================================================


class TestZoneRegistry:
    def test_same_instance_per_identifier(self, registry) -> None:
        """Zones compare by identity, so the registry hands out one object"""
        assert registry.get("Europe/Berlin") is registry.get("Europe/Berlin")

    def test_utc_aliases(self, registry) -> None:
        for tzid in ("UTC", "Z", "Etc/UTC"):
            assert registry.get(tzid) is UTC
        assert registry.utc is UTC

    def test_unknown_identifier(self, registry) -> None:
        assert registry.get("Mars/Olympus_Mons") is None
        assert registry.get("") is None
        assert registry.get(None) is None
        assert "Mars/Olympus_Mons" not in registry

    def test_require_raises(self, registry) -> None:
        with pytest.raises(UnknownZoneError):
            registry.require("Mars/Olympus_Mons")
        assert registry.require("Asia/Tokyo").tzid == "Asia/Tokyo"

    def test_default_registry_shortcut(self) -> None:
        assert get_zone("Asia/Tokyo") is default_registry().get("Asia/Tokyo")

    def test_offsets(self, new_york) -> None:
        assert new_york.offset_for_local(2024, 1, 15, 12, 0, 0) == ZoneOffset(-18000, False)
        assert new_york.offset_for_local(2024, 7, 1, 12, 0, 0) == ZoneOffset(-14400, True)
        assert UTC.offset_for_utc(1704067200) == ZoneOffset(0, False)

    def test_offset_outside_datetime_range(self, new_york) -> None:
        """Lookups far outside 1..9999 are clamped rather than failing"""
        assert new_york.offset_for_local(-500, 2, 29, 0, 0, 0).utc_offset_seconds < 0
        assert new_york.offset_for_utc(10**13).utc_offset_seconds < 0


# =============================================================================
# CONVERSION WITHOUT ARITHMETIC
# =============================================================================


class TestConvertWithoutShift:
    def test_date_is_relabelled(self, new_york) -> None:
        value = TimeValue.date(2024, 1, 7).set_zone(new_york)
        result = convert_to_zone(value, UTC)

        assert result.is_utc
        assert fields(result) == fields(value)
        assert result.is_date

    def test_floating_is_reinterpreted(self, tokyo) -> None:
        """Floating time is the same clock reading everywhere"""
        value = TimeValue.from_fields(2024, 1, 7, 9, 30, 0)
        result = convert_to_zone(value, tokyo)

        assert result.get_zone() is tokyo
        assert fields(result) == (2024, 1, 7, 9, 30, 0)

    def test_same_zone_is_noop(self, new_york) -> None:
        value = TimeValue.from_fields(2024, 1, 7, 9, 30, 0, zone=new_york)
        assert convert_to_zone(value, new_york) == value

    def test_floating_has_no_instant(self, new_york) -> None:
        """Relabelling keeps the clock reading, so the instant moves"""
        value = TimeValue.from_fields(2024, 1, 7, 9, 30, 0)
        result = convert_to_zone(value, new_york)

        assert fields(result) == fields(value)
        assert compare(value, result) != 0

    def test_to_floating(self, new_york) -> None:
        value = TimeValue.from_fields(2024, 1, 7, 9, 30, 0, zone=new_york)
        result = convert_to_zone(value, None)

        assert result.is_floating
        assert fields(result) == fields(value)

    def test_null_stays_null(self, tokyo) -> None:
        assert convert_to_zone(TimeValue.null_time(), tokyo).is_null()


# =============================================================================
# CONVERSION WITH OFFSETS
# =============================================================================


class TestConvertWithOffsets:
    def test_utc_to_new_york_winter(self, new_york) -> None:
        value = TimeValue.from_fields(2024, 1, 15, 17, 0, 0, zone=UTC)
        result = convert_to_zone(value, new_york)

        assert fields(result) == (2024, 1, 15, 12, 0, 0)
        assert result.get_zone() is new_york
        assert result.is_daylight is False

    def test_utc_to_new_york_summer(self, new_york) -> None:
        value = TimeValue.from_fields(2024, 7, 1, 16, 0, 0, zone=UTC)
        result = convert_to_zone(value, new_york)

        assert fields(result) == (2024, 7, 1, 12, 0, 0)
        assert result.is_daylight is True

    def test_crosses_year_boundary(self, new_york) -> None:
        value = TimeValue.from_fields(2024, 1, 1, 2, 0, 0, zone=UTC)
        assert fields(convert_to_zone(value, new_york)) == (2023, 12, 31, 21, 0, 0)

    def test_named_to_named(self, new_york, tokyo) -> None:
        # 2024-01-15 12:00 EST = 17:00 UTC = 2024-01-16 02:00 JST
        value = TimeValue.from_fields(2024, 1, 15, 12, 0, 0, zone=new_york)
        assert fields(convert_to_zone(value, tokyo)) == (2024, 1, 16, 2, 0, 0)

    def test_half_hour_offset(self) -> None:
        kolkata = get_zone("Asia/Kolkata")
        value = TimeValue.from_fields(2024, 1, 1, 0, 0, 0, zone=UTC)
        assert fields(convert_to_zone(value, kolkata)) == (2024, 1, 1, 5, 30, 0)

    def test_round_trip(self, new_york) -> None:
        value = TimeValue.from_fields(2024, 3, 15, 8, 45, 10, zone=UTC)
        back = convert_to_zone(convert_to_zone(value, new_york), UTC)
        assert fields(back) == fields(value)

    def test_repeated_autumn_hour(self, new_york) -> None:
        """01:30 happens twice on 2024-11-03; is_daylight tells them apart"""
        first = convert_to_zone(TimeValue.from_fields(2024, 11, 3, 5, 30, 0, zone=UTC), new_york)
        second = convert_to_zone(TimeValue.from_fields(2024, 11, 3, 6, 30, 0, zone=UTC), new_york)

        assert fields(first) == fields(second) == (2024, 11, 3, 1, 30, 0)
        assert first.is_daylight is True
        assert second.is_daylight is False

        assert fields(convert_to_zone(first, UTC)) == (2024, 11, 3, 5, 30, 0)
        assert fields(convert_to_zone(second, UTC)) == (2024, 11, 3, 6, 30, 0)

    def test_repeated_hour_without_dst_flag(self, new_york) -> None:
        """A value built from fields has is_daylight=False: the standard-time reading"""
        value = TimeValue.from_fields(2024, 11, 3, 1, 30, 0, zone=new_york)
        assert value.is_daylight is False
        assert fields(convert_to_zone(value, UTC)) == (2024, 11, 3, 6, 30, 0)

        summer = value.model_copy(update={"is_daylight": True})
        assert fields(convert_to_zone(summer, UTC)) == (2024, 11, 3, 5, 30, 0)

    def test_unnormalized_input(self, new_york) -> None:
        value = TimeValue.from_fields(2024, 1, 15, 16, 60, 0, zone=UTC)
        assert fields(convert_to_zone(value, new_york)) == (2024, 1, 15, 12, 0, 0)


class TestAccessors:
    def test_get_tzid(self, new_york) -> None:
        assert get_tzid(TimeValue.from_fields(2024, 1, 1, zone=new_york)) == "America/New_York"
        assert get_tzid(TimeValue.from_fields(2024, 1, 1, zone=UTC)) == "UTC"
        assert get_tzid(TimeValue.from_fields(2024, 1, 1)) is None

    def test_set_zone_function(self, tokyo) -> None:
        value = TimeValue.from_fields(2024, 1, 1, 9, 0, 0, zone=UTC)
        moved = set_zone(value, tokyo)
        assert moved.get_zone() is tokyo
        assert moved.hour == 9
