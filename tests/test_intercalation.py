# tests/test_intercalation.py

from datetime import date

import pytest

from lichta.core.time import to_jdn
from lichta.engines.intercalation import (
    NO_LEAP_MONTH,
    get_leap_month_offset,
    get_lunar_month_11,
    is_leap_year13,
)


def test_month_11_reference_value():
    assert get_lunar_month_11(2024, 7.0) == 2460646
    assert get_lunar_month_11(2024, 7.0) == to_jdn(date(2024, 12, 1))


def test_month_11_steps_back_when_sun_past_270():
    # The lunation covering 2022-12-31 starts 2022-12-23 with the Sun past 270 deg,
    # so month 11 is the previous lunation.
    assert get_lunar_month_11(2022, 7.0) == to_jdn(date(2022, 11, 24))
    assert get_lunar_month_11(2023, 7.0) == to_jdn(date(2023, 12, 13))


def test_leap_month_offset_reference_value():
    a11 = get_lunar_month_11(2022, 7.0)
    assert get_leap_month_offset(a11, 7.0) == 3


def test_leap_month_offset_2025():
    # Leap month 6 of 2025 starts 2025-07-25, eight lunations after 2024-12-01
    a11 = get_lunar_month_11(2024, 7.0)
    assert get_leap_month_offset(a11, 7.0) == 8


@pytest.mark.parametrize("year", [2019, 2022, 2024])
def test_13_month_years(year):
    a11 = get_lunar_month_11(year, 7.0)
    b11 = get_lunar_month_11(year + 1, 7.0)
    assert is_leap_year13(a11, b11)
    assert b11 - a11 in (383, 384, 385)


@pytest.mark.parametrize("year", [2020, 2021, 2023])
def test_12_month_years(year):
    a11 = get_lunar_month_11(year, 7.0)
    b11 = get_lunar_month_11(year + 1, 7.0)
    assert not is_leap_year13(a11, b11)
    assert b11 - a11 in (354, 355)


def test_is_leap_year13_boundary():
    assert not is_leap_year13(0, 365)
    assert is_leap_year13(0, 366)


def test_no_leap_month_sentinel():
    assert NO_LEAP_MONTH == 14
