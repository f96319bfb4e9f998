from .clock import ClockConfig, GameClock
from .constants import (
    DEFAULT_CONSTANTS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
    TOLERANCE,
    TimeConstants,
    UnitBounds,
)
from .errors import GameTimeError, InvalidOperation, RangeViolation
from .timedata import ConversionResult, TimeData

__all__ = [
    "TimeData",
    "ConversionResult",
    "TimeConstants",
    "UnitBounds",
    "DEFAULT_CONSTANTS",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_MONTH",
    "SECONDS_PER_YEAR",
    "TOLERANCE",
    "GameTimeError",
    "RangeViolation",
    "InvalidOperation",
    "GameClock",
    "ClockConfig",
]
