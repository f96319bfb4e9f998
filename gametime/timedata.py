"""Structured in-game time and its conversion to and from absolute seconds.

A :class:`TimeData` holds six fields (second through year). Every field is
validated against :data:`gametime.constants.DEFAULT_CONSTANTS` whenever it is
set, so a value can never hold an out-of-range field.

Equality is defined on the absolute-time projection with a tolerance of
:data:`~gametime.constants.TOLERANCE`. Ordering uses the raw projection
without tolerance, so two values within tolerance of each other can compare
``==`` and ``<`` at the same time.

Example:
    >>> t = TimeData.from_absolute_time(3661.5)
    >>> str(t)
    '0000-00-00 01:01:01.50'
    >>> t.absolute_time
    3661.5
"""

import math
import numbers
import operator
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar, cast

from typing_extensions import override

from gametime.constants import DEFAULT_CONSTANTS, UNITS
from gametime.errors import InvalidOperation, RangeViolation

T = TypeVar("T")

_C = DEFAULT_CONSTANTS


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """Outcome of a conversion that reports failure as a value.

    Attributes:
        success: True if the conversion produced a value
        value: The converted value if successful, None if failed
        error: The exception that occurred if failed, None if successful
    """

    success: bool
    value: T | None
    error: Exception | None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return cast(T, self.value)


class TimeData:
    __slots__ = ("_second", "_minute", "_hour", "_day", "_month", "_year")

    def __init__(
        self,
        second: float = _C.second.minimum,
        minute: int = _C.minute.minimum,
        hour: int = _C.hour.minimum,
        day: int = _C.day.minimum,
        month: int = _C.month.minimum,
        year: int = _C.year.minimum,
    ):
        self.second = second
        self.minute = minute
        self.hour = hour
        self.day = day
        self.month = month
        self.year = year

    # --- fields ---------------------------------------------------------

    @staticmethod
    def _checked_second(value: float) -> float:
        if not isinstance(value, numbers.Real) or isinstance(value, bool):
            raise TypeError(
                f"second must be a real number, got {type(value).__name__!r}"
            )
        bounds = _C.second
        if not bounds.contains(value):
            raise RangeViolation("second", value, bounds.minimum, bounds.maximum)
        return float(value)

    @staticmethod
    def _checked_int(unit: str, value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError(f"{unit} must be an integer, got 'bool'")
        try:
            number = operator.index(value)
        except TypeError:
            raise TypeError(
                f"{unit} must be an integer, got {type(value).__name__!r}"
            ) from None
        bounds = _C.bounds(unit)
        if not bounds.contains(number):
            raise RangeViolation(unit, number, bounds.minimum, bounds.maximum)
        return number

    @property
    def second(self) -> float:
        return self._second

    @second.setter
    def second(self, value: float) -> None:
        self._second = self._checked_second(value)

    @property
    def minute(self) -> int:
        return self._minute

    @minute.setter
    def minute(self, value: int) -> None:
        self._minute = self._checked_int("minute", value)

    @property
    def hour(self) -> int:
        return self._hour

    @hour.setter
    def hour(self, value: int) -> None:
        self._hour = self._checked_int("hour", value)

    @property
    def day(self) -> int:
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        self._day = self._checked_int("day", value)

    @property
    def month(self) -> int:
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        self._month = self._checked_int("month", value)

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self._year = self._checked_int("year", value)

    def replace(self, **changes: Any) -> "TimeData":
        """Return a copy with the given fields replaced.

        The copy is validated like a freshly constructed value; ``self`` is
        never modified.
        """
        unknown = set(changes) - set(UNITS)
        if unknown:
            raise TypeError(
                f"replace() got unknown field(s): {', '.join(sorted(unknown))}.\n"
                f"Valid fields: {', '.join(UNITS)}"
            )
        fields = {unit: getattr(self, unit) for unit in UNITS}
        fields.update(changes)
        return TimeData(**fields)

    # --- conversion -----------------------------------------------------

    @classmethod
    def from_absolute_time(cls, absolute_time: float) -> "TimeData":
        """Decompose ``absolute_time`` seconds into a :class:`TimeData`.

        Units are peeled off largest first. Every derived field is routed
        through the validating setters, so a time past the last representable
        year raises :class:`RangeViolation` instead of wrapping or clamping.

        Raises:
            RangeViolation: If a derived field falls outside its bounds
                (negative input, or a year above the maximum; integers too
                large for a float report a year of +/-inf)
            ValueError: If ``absolute_time`` is NaN or infinite
        """
        try:
            finite = math.isfinite(absolute_time)
        except OverflowError:
            # ints beyond float range lie far outside the year bounds
            bounds = _C.year
            raise RangeViolation(
                "year",
                math.inf if absolute_time > 0 else -math.inf,
                bounds.minimum,
                bounds.maximum,
            ) from None
        if not finite:
            raise ValueError(
                f"Absolute time must be a finite number of seconds, "
                f"got {absolute_time!r}"
            )

        remaining = float(absolute_time)
        year, remaining = divmod(remaining, _C.seconds_per_year)
        month, remaining = divmod(remaining, _C.seconds_per_month)
        day, remaining = divmod(remaining, _C.seconds_per_day)
        hour, remaining = divmod(remaining, _C.seconds_per_hour)
        minute, second = divmod(remaining, _C.seconds_per_minute)

        return cls(second, int(minute), int(hour), int(day), int(month), int(year))

    @classmethod
    def try_from_absolute_time(
        cls, absolute_time: float
    ) -> ConversionResult["TimeData"]:
        """Like :meth:`from_absolute_time`, but report failure in the result."""
        try:
            value = cls.from_absolute_time(absolute_time)
        except ValueError as exc:
            return ConversionResult(success=False, value=None, error=exc)
        return ConversionResult(success=True, value=value, error=None)

    @staticmethod
    def to_absolute_time(value: "TimeData") -> float:
        """Project ``value`` onto absolute seconds."""
        return (
            value.second
            + value.minute * _C.seconds_per_minute
            + value.hour * _C.seconds_per_hour
            + value.day * _C.seconds_per_day
            + value.month * _C.seconds_per_month
            + value.year * _C.seconds_per_year
        )

    @property
    def absolute_time(self) -> float:
        return TimeData.to_absolute_time(self)

    # --- comparison -----------------------------------------------------

    def equals(self, other: "TimeData") -> bool:
        """True if the projections differ by less than the tolerance."""
        return abs(self.absolute_time - other.absolute_time) < _C.tolerance

    def compare(self, other: "TimeData") -> Literal[-1, 0, 1]:
        """Three-way comparison: 0 when :meth:`equals`, else the scalar sign."""
        if self.equals(other):
            return 0
        return -1 if self.absolute_time < other.absolute_time else 1

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeData):
            return NotImplemented
        return self is other or self.equals(other)

    @override
    def __hash__(self) -> int:
        # Seconds are bucketed by tolerance; neighbours across a bucket edge
        # can be equal yet hash differently.
        return hash(
            (
                int(self.second / _C.tolerance),
                self.minute,
                self.hour,
                self.day,
                self.month,
                self.year,
            )
        )

    def __lt__(self, other: "TimeData") -> bool:
        if not isinstance(other, TimeData):
            return NotImplemented
        return self.absolute_time < other.absolute_time

    def __le__(self, other: "TimeData") -> bool:
        if not isinstance(other, TimeData):
            return NotImplemented
        return self.absolute_time <= other.absolute_time

    def __gt__(self, other: "TimeData") -> bool:
        if not isinstance(other, TimeData):
            return NotImplemented
        return self.absolute_time > other.absolute_time

    def __ge__(self, other: "TimeData") -> bool:
        if not isinstance(other, TimeData):
            return NotImplemented
        return self.absolute_time >= other.absolute_time

    # --- arithmetic -----------------------------------------------------

    def add(self, other: "TimeData") -> "TimeData":
        return TimeData.from_absolute_time(self.absolute_time + other.absolute_time)

    def subtract(self, other: "TimeData") -> "TimeData":
        if self < other:
            raise InvalidOperation(
                f"Cannot subtract a larger TimeData from a smaller one.\n"
                f"Got: {self} - {other}\n"
                f"Hint: Swap the operands to get the duration between them"
            )
        return TimeData.from_absolute_time(self.absolute_time - other.absolute_time)

    def __add__(self, other: "TimeData") -> "TimeData":
        if not isinstance(other, TimeData):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "TimeData") -> "TimeData":
        if not isinstance(other, TimeData):
            return NotImplemented
        return self.subtract(other)

    # --- display --------------------------------------------------------

    @override
    def __str__(self) -> str:
        """Fixed-width display form, ``YYYY-MM-DD HH:MM:SS.ss``.

        The second is rounded to two decimals, so 59.996 displays as ``60.00``.
        """
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:05.2f}"
        )

    @override
    def __repr__(self) -> str:
        return (
            f"TimeData(second={self.second!r}, minute={self.minute}, "
            f"hour={self.hour}, day={self.day}, month={self.month}, "
            f"year={self.year})"
        )
