"""Frame-driven game clock.

:class:`GameClock` owns the absolute-time accumulator. Each call to
:meth:`GameClock.tick` advances it by a real-world delta multiplied by the
clock's scale, unless the clock is paused. The structured calendar view is
derived on demand through :meth:`TimeData.from_absolute_time`.

A single process-wide clock can be registered with :func:`install` for entry
points that need one; library code should take a clock as an argument.
"""

import logging
import math
from dataclasses import dataclass

from gametime.timedata import ConversionResult, TimeData

logger = logging.getLogger(__name__)

MIN_SCALE = 0.0
MAX_SCALE = 144.0


@dataclass(frozen=True, kw_only=True)
class ClockConfig:
    scale: float = 1.0
    paused: bool = False

    def __post_init__(self) -> None:
        if not MIN_SCALE <= self.scale <= MAX_SCALE:
            raise ValueError(
                f"Clock scale must be between {MIN_SCALE:g} and {MAX_SCALE:g}, "
                f"got {self.scale!r}"
            )


def _check_start(start: float) -> None:
    if not (math.isfinite(start) and start >= 0):
        raise ValueError(f"Clock start must be a finite number >= 0, got {start!r}")


class GameClock:
    """Accumulates scaled, pausable in-game seconds."""

    def __init__(self, config: ClockConfig | None = None, start: float = 0.0):
        config = config or ClockConfig()
        _check_start(start)
        self._scale: float = config.scale
        self.paused: bool = config.paused
        self._absolute_time: float = float(start)

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        if math.isnan(value):
            raise ValueError("Clock scale must be a number, got nan")
        clamped = min(max(float(value), MIN_SCALE), MAX_SCALE)
        if clamped != value:
            logger.debug("Clamped clock scale %r to %g", value, clamped)
        self._scale = clamped

    @property
    def absolute_time(self) -> float:
        """Seconds of in-game time elapsed since the clock started."""
        return self._absolute_time

    @property
    def formatted_time(self) -> TimeData:
        """The current absolute time as a :class:`TimeData`.

        Raises:
            RangeViolation: If the clock has run past the last representable year
        """
        return TimeData.from_absolute_time(self._absolute_time)

    def try_formatted_time(self) -> ConversionResult[TimeData]:
        return TimeData.try_from_absolute_time(self._absolute_time)

    def tick(self, delta_seconds: float) -> float:
        """Advance the clock by ``delta_seconds`` of real time.

        Does nothing while paused. Returns the absolute time after the tick.
        """
        if not (math.isfinite(delta_seconds) and delta_seconds >= 0):
            raise ValueError(
                f"Tick delta must be a finite number >= 0, got {delta_seconds!r}.\n"
                f"Hint: Use reset() to move the clock backwards"
            )
        if not self.paused:
            # single assignment: readers never see a partial update
            self._absolute_time = self._absolute_time + delta_seconds * self._scale
        return self._absolute_time

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def reset(self, start: float = 0.0) -> None:
        _check_start(start)
        logger.debug("Resetting clock from %g to %g", self._absolute_time, start)
        self._absolute_time = float(start)


_INSTANCE: GameClock | None = None


def install(clock: GameClock) -> GameClock:
    """Register ``clock`` as the process-wide clock, once.

    If a clock is already installed it is kept and returned, and ``clock`` is
    discarded.
    """
    global _INSTANCE
    if _INSTANCE is None:
        _INSTANCE = clock
    elif _INSTANCE is not clock:
        logger.debug("A clock is already installed; discarding %r", clock)
    return _INSTANCE


def current() -> GameClock:
    """Return the installed clock."""
    if _INSTANCE is None:
        raise RuntimeError(
            "No game clock installed.\n"
            "Hint: Call gametime.clock.install(GameClock()) at startup"
        )
    return _INSTANCE


def uninstall() -> None:
    """Forget the installed clock (teardown hook for tests)."""
    global _INSTANCE
    _INSTANCE = None
