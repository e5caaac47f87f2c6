"""Closed option sets for identifier generation."""

from enum import Enum, IntEnum

from core.errors import InvalidBase, InvalidPrecision

DIGITS = "0123456789"
LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

MAX_LENGTH = 20


class Base(IntEnum):
    BASE36 = 36
    BASE62 = 62

    @property
    def alphabet(self):
        """Digit characters ordered by value."""
        return _ALPHABETS[self]


_ALPHABETS = {
    Base.BASE36: DIGITS + LOWER,
    Base.BASE62: DIGITS + LOWER + UPPER,
}


class Precision(Enum):
    SECONDS = "s"
    MILLISECONDS = "ms"

    @property
    def millis(self):
        """Milliseconds per timestamp unit."""
        return 1000 if self is Precision.SECONDS else 1


def resolve_base(value):
    """Coerce 36, 62 or a Base member to Base."""
    if isinstance(value, bool):
        raise InvalidBase("Base must be either 36 or 62", value=value)
    try:
        return Base(value)
    except ValueError:
        raise InvalidBase("Base must be either 36 or 62", value=value) from None


def resolve_precision(value):
    """Coerce "s", "ms", None or a Precision member to Precision."""
    if value is None:
        return Precision.SECONDS
    try:
        return Precision(value)
    except ValueError:
        raise InvalidPrecision('Precision must be "s" or "ms"', value=value) from None
