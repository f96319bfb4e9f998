"""Exceptions raised by gametime values."""


class GameTimeError(Exception):
    """Base class for gametime errors."""


class RangeViolation(GameTimeError, ValueError):
    """A time field was given a value outside its inclusive bounds."""

    def __init__(self, field: str, value: object, minimum: float, maximum: float):
        self.field: str = field
        self.value: object = value
        self.minimum: float = minimum
        self.maximum: float = maximum
        super().__init__(
            f"{field} must be between {minimum:g} and {maximum:g}, got {value!r}"
        )


class InvalidOperation(GameTimeError, ArithmeticError):
    """An arithmetic operation would produce a negative duration."""
