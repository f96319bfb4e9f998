"""Calendar constants for gametime.

Unit bounds are inclusive on both ends. Seconds-per-unit values are derived
from the bound maxima, never set on their own.
"""

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from typing_extensions import override

Unit: TypeAlias = Literal["second", "minute", "hour", "day", "month", "year"]

UNITS: tuple[Unit, ...] = ("second", "minute", "hour", "day", "month", "year")


@dataclass(frozen=True, kw_only=True)
class UnitBounds:
    unit: Unit
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"{self.unit} minimum ({self.minimum}) must be <= "
                f"maximum ({self.maximum})"
            )

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    @override
    def __str__(self) -> str:
        return f"[{self.minimum:g}, {self.maximum:g}]"


@dataclass(frozen=True, kw_only=True)
class TimeConstants:
    """Per-unit bounds, seconds-per-unit multipliers and the equality tolerance.

    The multipliers are computed once from the bounds: each unit holds
    ``maximum`` of the unit below it.
    """

    second: UnitBounds = UnitBounds(unit="second", minimum=0.0, maximum=60.0)
    minute: UnitBounds = UnitBounds(unit="minute", minimum=0, maximum=60)
    hour: UnitBounds = UnitBounds(unit="hour", minimum=0, maximum=24)
    day: UnitBounds = UnitBounds(unit="day", minimum=0, maximum=30)
    month: UnitBounds = UnitBounds(unit="month", minimum=0, maximum=12)
    year: UnitBounds = UnitBounds(unit="year", minimum=0, maximum=1000)
    tolerance: float = 1e-3

    seconds_per_minute: int = field(init=False)
    seconds_per_hour: int = field(init=False)
    seconds_per_day: int = field(init=False)
    seconds_per_month: int = field(init=False)
    seconds_per_year: int = field(init=False)

    def __post_init__(self) -> None:
        per_minute = int(self.second.maximum)
        per_hour = per_minute * int(self.minute.maximum)
        per_day = per_hour * int(self.hour.maximum)
        per_month = per_day * int(self.day.maximum)
        per_year = per_month * int(self.month.maximum)
        # frozen dataclass: derived fields are written once here
        object.__setattr__(self, "seconds_per_minute", per_minute)
        object.__setattr__(self, "seconds_per_hour", per_hour)
        object.__setattr__(self, "seconds_per_day", per_day)
        object.__setattr__(self, "seconds_per_month", per_month)
        object.__setattr__(self, "seconds_per_year", per_year)

    def bounds(self, unit: str) -> UnitBounds:
        """Return the bounds for ``unit``, one of :data:`UNITS`."""
        if unit not in UNITS:
            valid = ", ".join(UNITS)
            raise KeyError(f"Unknown time unit '{unit}'. Valid units: {valid}")
        return getattr(self, unit)


DEFAULT_CONSTANTS = TimeConstants()

MIN_SECOND = DEFAULT_CONSTANTS.second.minimum
MAX_SECOND = DEFAULT_CONSTANTS.second.maximum
MIN_MINUTE = DEFAULT_CONSTANTS.minute.minimum
MAX_MINUTE = DEFAULT_CONSTANTS.minute.maximum
MIN_HOUR = DEFAULT_CONSTANTS.hour.minimum
MAX_HOUR = DEFAULT_CONSTANTS.hour.maximum
MIN_DAY = DEFAULT_CONSTANTS.day.minimum
MAX_DAY = DEFAULT_CONSTANTS.day.maximum
MIN_MONTH = DEFAULT_CONSTANTS.month.minimum
MAX_MONTH = DEFAULT_CONSTANTS.month.maximum
MIN_YEAR = DEFAULT_CONSTANTS.year.minimum
MAX_YEAR = DEFAULT_CONSTANTS.year.maximum

# Durations in seconds
SECONDS_PER_MINUTE = DEFAULT_CONSTANTS.seconds_per_minute
SECONDS_PER_HOUR = DEFAULT_CONSTANTS.seconds_per_hour
SECONDS_PER_DAY = DEFAULT_CONSTANTS.seconds_per_day
SECONDS_PER_MONTH = DEFAULT_CONSTANTS.seconds_per_month
SECONDS_PER_YEAR = DEFAULT_CONSTANTS.seconds_per_year

TOLERANCE = DEFAULT_CONSTANTS.tolerance
