"""
lichta.engines.intercalation
----------------------------
Month-11 anchoring and leap-month detection.

Month 11 is the lunar month containing the winter solstice; the interval
between two consecutive month-11 boundaries holds 12 or 13 lunations. In a
13-lunation interval the leap month is the first one that contains no
principal solar term, i.e. it starts in the same 30-degree segment as the
month after it.
"""

from __future__ import annotations

import math

from lichta.core.time import year_end_jdn
from lichta.engines.astro.new_moon import get_new_moon_day
from lichta.engines.astro.solar import SOLAR_LONGITUDE_SEGMENT, get_sun_longitude, solar_segment
from lichta.engines.month_index import JulianMonthIndex

# Segment index of the Sun (270 deg) once month 11 has already begun
SOLAR_LONGITUDE_THRESHOLD = 9
MAX_LEAP_SCAN = 13
NO_LEAP_MONTH = 14


def get_lunar_month_11(year: int, timezone: float) -> int:
    """
    JDN of the first day of lunar month 11 for Gregorian `year`.

    Starts from the lunation covering December 31 and steps back one
    lunation when the Sun has already reached segment 9 at that new moon.
    """
    jdn = float(year_end_jdn(year))
    k = JulianMonthIndex.from_julian_day(jdn)
    new_moon_day = get_new_moon_day(k, timezone)

    segment = math.trunc(get_sun_longitude(new_moon_day, timezone) / SOLAR_LONGITUDE_SEGMENT)
    if segment >= SOLAR_LONGITUDE_THRESHOLD:
        return get_new_moon_day(k - 1, timezone)
    return new_moon_day


def get_leap_month_offset(a11: int, timezone: float) -> int:
    """
    Offset (in lunations after the month-11 boundary `a11`) of the leap month.

    Returns 14 when no two consecutive months within 13 lunations start in
    the same solar segment.
    """
    k = JulianMonthIndex.from_julian_day(float(a11))
    last_segment = 0
    for i in range(1, MAX_LEAP_SCAN + 1):
        segment = solar_segment(get_new_moon_day(k + i, timezone), timezone)
        if segment == last_segment:
            return i - 1
        last_segment = segment
    return NO_LEAP_MONTH


def is_leap_year13(first_month_11: float, last_month_11: float) -> bool:
    """True when the two month-11 boundaries enclose 13 lunations."""
    return (last_month_11 - first_month_11) > 365
