"""
lichta.engines.month_index
--------------------------
Lunation count k since the mean new moon nearest noon, 1900-01-01 UTC.

k is an integer quantity kept in the 32-bit signed range. Conversion from a
Julian Day truncates toward zero (not floor), which matters before 1900.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from lichta.core.errors import MonthIndexOverflowError

# JD of mid-day 1900-01-01 shifted onto the k = 0 lunation
JULIAN_DAY_NOON_JAN_1_1900 = 2415021.076998695
JULIAN_MOON_CYCLE = 29.530588853

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def _checked(value: int) -> int:
    if not (INT32_MIN <= value <= INT32_MAX):
        raise MonthIndexOverflowError(f"Julian month index {value} is outside the 32-bit signed range")
    return value


@dataclass(frozen=True, order=True)
class JulianMonthIndex:
    value: int

    def __post_init__(self):
        _checked(self.value)

    @classmethod
    def from_julian_day(cls, jd: float) -> "JulianMonthIndex":
        offset = jd - JULIAN_DAY_NOON_JAN_1_1900
        return cls.from_real(offset / JULIAN_MOON_CYCLE)

    @classmethod
    def from_real(cls, x: float) -> "JulianMonthIndex":
        """Truncate toward zero; NaN, infinities and values outside int32 overflow."""
        if not (INT32_MIN <= x <= INT32_MAX):
            raise MonthIndexOverflowError(f"K value {x!r} does not fit a 32-bit signed integer")
        return cls(math.trunc(x))

    def to_real(self) -> float:
        return float(self.value)

    def __float__(self) -> float:
        return self.to_real()

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Union["JulianMonthIndex", int]) -> "JulianMonthIndex":
        if isinstance(other, JulianMonthIndex):
            return JulianMonthIndex(self.value + other.value)
        if isinstance(other, int):
            return JulianMonthIndex(self.value + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union["JulianMonthIndex", int]) -> "JulianMonthIndex":
        if isinstance(other, JulianMonthIndex):
            return JulianMonthIndex(self.value - other.value)
        if isinstance(other, int):
            return JulianMonthIndex(self.value - other)
        return NotImplemented
