"""Tests for TimeData construction, validation, conversion and display."""

import math

import pytest

from gametime.constants import DEFAULT_CONSTANTS, SECONDS_PER_YEAR, TOLERANCE, UNITS
from gametime.errors import GameTimeError, RangeViolation
from gametime.timedata import ConversionResult, TimeData


def fields(value: TimeData) -> dict[str, float]:
    return {unit: getattr(value, unit) for unit in UNITS}


ZERO = {"second": 0.0, "minute": 0, "hour": 0, "day": 0, "month": 0, "year": 0}


def test_default_construction_is_all_minimums():
    """TimeData() sets every field to its minimum."""
    assert fields(TimeData()) == ZERO


def test_explicit_construction():
    """Six explicit values are stored as given."""
    value = TimeData(12.5, 30, 6, 15, 3, 250)

    assert fields(value) == {
        "second": 12.5,
        "minute": 30,
        "hour": 6,
        "day": 15,
        "month": 3,
        "year": 250,
    }
    assert isinstance(value.second, float)


@pytest.mark.parametrize("unit", UNITS)
def test_bounds_are_inclusive(unit: str):
    """Exactly the minimum or maximum is accepted for every field."""
    bounds = DEFAULT_CONSTANTS.bounds(unit)

    assert getattr(TimeData(**{unit: bounds.minimum}), unit) == bounds.minimum
    assert getattr(TimeData(**{unit: bounds.maximum}), unit) == bounds.maximum


@pytest.mark.parametrize("unit", UNITS)
def test_one_unit_outside_bounds_is_rejected(unit: str):
    """One unit past either bound raises RangeViolation for that field."""
    bounds = DEFAULT_CONSTANTS.bounds(unit)

    for bad in (bounds.minimum - 1, bounds.maximum + 1):
        with pytest.raises(RangeViolation) as info:
            TimeData(**{unit: bad})
        assert info.value.field == unit
        assert info.value.minimum == bounds.minimum
        assert info.value.maximum == bounds.maximum


def test_minute_61_cites_field_and_bound():
    """The error message names the field, the bounds and the value."""
    with pytest.raises(RangeViolation, match="minute must be between 0 and 60, got 61"):
        TimeData(0, 61, 0, 0, 0, 0)


def test_range_violation_is_a_value_error():
    """RangeViolation is catchable as ValueError and GameTimeError."""
    with pytest.raises(ValueError):
        TimeData(hour=25)
    with pytest.raises(GameTimeError):
        TimeData(hour=25)


def test_construction_fails_on_first_invalid_field():
    """Fields are validated second through year; the first bad one is reported."""
    with pytest.raises(RangeViolation) as info:
        TimeData(61.0, 61, 25, 31, 13, 1001)
    assert info.value.field == "second"

    with pytest.raises(RangeViolation) as info:
        TimeData(0.0, 0, 25, 31, 13, 1001)
    assert info.value.field == "hour"


def test_failed_set_leaves_value_unchanged():
    """A rejected assignment keeps the previous field value."""
    value = TimeData(1.5, 5, 6, 7, 8, 9)

    with pytest.raises(RangeViolation):
        value.minute = 61
    with pytest.raises(RangeViolation):
        value.second = -0.5
    with pytest.raises(RangeViolation):
        value.year = 1001

    assert fields(value) == {
        "second": 1.5,
        "minute": 5,
        "hour": 6,
        "day": 7,
        "month": 8,
        "year": 9,
    }


def test_setters_accept_valid_values():
    """In-range assignments replace the field."""
    value = TimeData()
    value.second = 59.25
    value.hour = 23
    value.year = 1000

    assert value.second == 59.25
    assert value.hour == 23
    assert value.year == 1000


def test_nan_second_is_rejected():
    """A NaN second is out of range."""
    with pytest.raises(RangeViolation):
        TimeData(second=math.nan)


def test_field_types_are_checked():
    """Fields reject values of the wrong type."""
    with pytest.raises(TypeError, match="minute must be an integer"):
        TimeData(minute=1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="hour must be an integer"):
        TimeData(hour=True)
    with pytest.raises(TypeError, match="second must be a real number"):
        TimeData(second="1")  # type: ignore[arg-type]


def test_from_absolute_time_zero():
    """Zero seconds decomposes to all zero fields."""
    assert fields(TimeData.from_absolute_time(0)) == ZERO


def test_sixty_seconds_roll_over_to_a_minute():
    """Sixty seconds becomes one minute."""
    assert fields(TimeData.from_absolute_time(60)) == {**ZERO, "minute": 1}


def test_one_year_and_one_second():
    """One year plus a second decomposes to year 1, second 1."""
    value = TimeData.from_absolute_time(60 * 60 * 24 * 30 * 12 + 1)

    assert fields(value) == {**ZERO, "second": 1.0, "year": 1}


def test_from_absolute_time_decomposes_every_unit():
    """Every unit is recovered from a combined absolute time."""
    absolute = 12.25 + 34 * 60 + 5 * 3600 + 6 * 86400 + 7 * 2592000 + 8 * SECONDS_PER_YEAR

    assert fields(TimeData.from_absolute_time(absolute)) == {
        "second": 12.25,
        "minute": 34,
        "hour": 5,
        "day": 6,
        "month": 7,
        "year": 8,
    }


def test_from_absolute_time_rejects_year_past_maximum():
    """Times beyond the last representable year raise instead of wrapping."""
    with pytest.raises(RangeViolation) as info:
        TimeData.from_absolute_time(1001 * SECONDS_PER_YEAR)
    assert info.value.field == "year"

    last = TimeData.from_absolute_time(1001 * SECONDS_PER_YEAR - 0.5)
    assert last.year == 1000


def test_from_absolute_time_rejects_negative_input():
    """Negative times raise RangeViolation for the year."""
    with pytest.raises(RangeViolation) as info:
        TimeData.from_absolute_time(-1)
    assert info.value.field == "year"


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_from_absolute_time_rejects_non_finite_input(bad: float):
    """NaN and infinite times raise ValueError."""
    with pytest.raises(ValueError, match="finite"):
        TimeData.from_absolute_time(bad)


@pytest.mark.parametrize("huge", [10**400, -(10**400)])
def test_from_absolute_time_rejects_ints_beyond_float_range(huge: int):
    """Integers too large for a float are a year range error."""
    with pytest.raises(RangeViolation) as info:
        TimeData.from_absolute_time(huge)
    assert info.value.field == "year"
    assert math.isinf(info.value.value)

    result = TimeData.try_from_absolute_time(huge)
    assert not result.success
    assert isinstance(result.error, RangeViolation)


@pytest.mark.parametrize(
    "absolute",
    [0, 0.001, 59.5, 60, 3599.999, 3661.25, 86400, 12345678.9, SECONDS_PER_YEAR + 1,
     1001 * SECONDS_PER_YEAR - 0.01],
)
def test_absolute_time_round_trip(absolute: float):
    """Absolute time survives a trip through TimeData."""
    value = TimeData.from_absolute_time(absolute)

    assert abs(TimeData.to_absolute_time(value) - absolute) < TOLERANCE
    assert abs(value.absolute_time - absolute) < TOLERANCE


@pytest.mark.parametrize(
    "value",
    [
        TimeData(),
        TimeData(30, 0, 0, 0, 0, 0),
        TimeData(59.9999, 59, 23, 29, 11, 999),
        TimeData(60.0, 60, 24, 30, 12, 999),
        TimeData(0.125, 1, 2, 3, 4, 5),
    ],
)
def test_structured_round_trip(value: TimeData):
    """TimeData survives a trip through absolute time."""
    assert TimeData.from_absolute_time(TimeData.to_absolute_time(value)) == value


def test_structured_round_trip_fails_when_last_year_carries():
    """Year 1000 with unrolled fields projects past the last representable year."""
    value = TimeData(0, 0, 0, 0, 12, 1000)

    with pytest.raises(
        RangeViolation, match="year must be between 0 and 1000, got 1001"
    ):
        TimeData.from_absolute_time(TimeData.to_absolute_time(value))



def test_to_absolute_time_sums_weighted_fields():
    """Each field contributes its unit's seconds."""
    value = TimeData(1.5, 2, 3, 4, 5, 6)

    assert TimeData.to_absolute_time(value) == (
        1.5 + 2 * 60 + 3 * 3600 + 4 * 86400 + 5 * 2592000 + 6 * 31104000
    )


def test_try_from_absolute_time_success():
    """A successful conversion carries the value."""
    result = TimeData.try_from_absolute_time(90)

    assert result.success
    assert result.error is None
    assert result.value == TimeData(30, 1)
    assert result.unwrap() == TimeData(30, 1)


def test_try_from_absolute_time_failure():
    """A failed conversion carries the error."""
    result = TimeData.try_from_absolute_time(2000 * SECONDS_PER_YEAR)

    assert not result.success
    assert result.value is None
    assert isinstance(result.error, RangeViolation)
    with pytest.raises(RangeViolation):
        result.unwrap()


def test_conversion_result_is_immutable():
    """ConversionResult fields cannot be reassigned."""
    result: ConversionResult[TimeData] = TimeData.try_from_absolute_time(0)

    with pytest.raises(AttributeError):
        result.success = False  # type: ignore[misc]


def test_replace_returns_validated_copy():
    """replace() validates the copy and leaves the original alone."""
    original = TimeData(1.0, 2, 3, 4, 5, 6)
    changed = original.replace(hour=20, year=7)

    assert fields(changed) == {
        "second": 1.0,
        "minute": 2,
        "hour": 20,
        "day": 4,
        "month": 5,
        "year": 7,
    }
    assert original.hour == 3

    with pytest.raises(RangeViolation):
        original.replace(hour=25)
    with pytest.raises(TypeError, match="unknown field\\(s\\): week"):
        original.replace(week=1)


def test_display_string():
    """str() uses the fixed-width YYYY-MM-DD HH:MM:SS.ss layout."""
    assert str(TimeData(30, 0, 0, 0, 0, 0)) == "0000-00-00 00:00:30.00"
    assert str(TimeData(5.5, 59, 23, 30, 12, 999)) == "0999-12-30 23:59:05.50"
    assert str(TimeData(7.125, 4, 3, 2, 1, 1000)) == "1000-01-02 03:04:07.12"
    assert str(TimeData(59.996)) == "0000-00-00 00:00:60.00"


def test_repr_lists_fields():
    """repr() shows all six fields by keyword."""
    assert repr(TimeData(30, 1)) == (
        "TimeData(second=30.0, minute=1, hour=0, day=0, month=0, year=0)"
    )
