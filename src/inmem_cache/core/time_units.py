"""
Duration units and millisecond conversion.
Closed set of units; every helper is a pure function over fixed constants.
"""

from enum import Enum
from fractions import Fraction
from typing import Union

from .errors import UnknownUnit

Number = Union[int, float]


class TimeUnit(Enum):
    SECOND = 1000
    MINUTE = 60_000
    HOUR = 3_600_000
    DAY = 86_400_000

    @property
    def ms(self) -> int:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "TimeUnit":
        """Resolve a unit name such as "minute" or "HOUR"."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise UnknownUnit(name) from None


def milliseconds_per_unit(unit: TimeUnit) -> int:
    if not isinstance(unit, TimeUnit):
        raise UnknownUnit(unit)
    return unit.ms


def to_milliseconds(duration: Number, unit: TimeUnit) -> Number:
    # no rounding: 1.5 hours is exactly 5_400_000 ms
    return duration * milliseconds_per_unit(unit)


def convert(duration: Number, from_unit: TimeUnit, to_unit: TimeUnit) -> int:
    """Convert between units, truncating toward zero."""
    # exact arithmetic on the decimal text: 2.3 hours is 138 minutes, not 137
    exact = Fraction(str(duration)) * milliseconds_per_unit(from_unit)
    return int(exact / milliseconds_per_unit(to_unit))
