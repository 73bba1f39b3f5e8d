"""
lichta.engines.lunisolar
------------------------
Gregorian -> Vietnamese lunisolar date conversion, and the calendar engine
built on it.

The day label is counted from the local new-moon day; month labels are
counted from the month-11 boundary preceding the date, shifted by one after
the leap month in 13-lunation years.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from lichta.core.errors import InvalidLunarDateError
from lichta.core.time import from_jdn, to_jdn
from lichta.core.types import DayInfo, EngineId, LunarDate, LunarMonth
from lichta.engines.astro.new_moon import get_new_moon_day
from lichta.engines.astro.solar import solar_term
from lichta.engines.intercalation import get_leap_month_offset, get_lunar_month_11, is_leap_year13
from lichta.engines.month_index import JulianMonthIndex

# Offset used when the next lunation starts after the date
FALLBACK_TIMEZONE = 7.0
DAYS_PER_MONTH_FLOOR = 29.0


def calculate_month_between_julian_days(jd_1: float, jd_2: float) -> int:
    return int((jd_1 - jd_2) / DAYS_PER_MONTH_FLOOR)


def label_month(month_difference: int, leap_offset: Optional[int]) -> Tuple[int, bool]:
    """
    Month number (1..12) and leap flag of the lunation `month_difference`
    months after month 11. `leap_offset` is None in 12-lunation years.
    """
    lunar_leap = False
    lunar_month = month_difference + 11
    if leap_offset is not None and month_difference >= leap_offset:
        lunar_month = month_difference + 10
        if month_difference == leap_offset:
            lunar_leap = True
    if lunar_month > 12:
        lunar_month -= 12
    return lunar_month, lunar_leap


def _convert(d: date, timezone: float, fallback_timezone: float) -> Tuple[LunarDate, Dict[str, Any]]:
    julian_day = float(to_jdn(d))
    k = JulianMonthIndex.from_julian_day(julian_day)

    month_start = get_new_moon_day(k + 1, timezone)
    if month_start > julian_day:
        month_start = get_new_moon_day(k, fallback_timezone)

    first_month_11 = get_lunar_month_11(d.year, timezone)
    last_month_11 = first_month_11
    if first_month_11 >= month_start:
        first_month_11 = get_lunar_month_11(d.year - 1, timezone)
    else:
        last_month_11 = get_lunar_month_11(d.year + 1, timezone)

    lunar_day = int(julian_day - month_start + 1)
    month_difference = calculate_month_between_julian_days(month_start, first_month_11)

    leap13 = is_leap_year13(first_month_11, last_month_11)
    leap_offset = get_leap_month_offset(first_month_11, timezone) if leap13 else None
    lunar_month, lunar_leap = label_month(month_difference, leap_offset)

    lunar_year = d.year
    if lunar_month >= 11 and month_difference < 4:
        lunar_year -= 1

    result = LunarDate(day=lunar_day, month=lunar_month, year=lunar_year, is_leap_month=lunar_leap)
    trace = {
        "jdn": int(julian_day),
        "k": k.value,
        "month_start": month_start,
        "first_month_11": first_month_11,
        "last_month_11": last_month_11,
        "month_difference": month_difference,
        "is_leap_year13": leap13,
        "leap_offset": leap_offset,
    }
    return result, trace


def convert_date_to_lunar(d: date, timezone: float, *, fallback_timezone: float = FALLBACK_TIMEZONE) -> LunarDate:
    """
    Convert a Gregorian date to its lunisolar (day, month, year, leap) label.

    Parameters:
    - `d`: civil date (validated by `datetime.date`).
    - `timezone`: local offset from UTC in hours, fractional allowed.
    - `fallback_timezone`: offset used to locate the month start when the
      following lunation begins after `d` (7.0 unless overridden).
    """
    result, _ = _convert(d, timezone, fallback_timezone)
    return result


@dataclass(frozen=True)
class LunisolarParams:
    timezone: float = 7.0
    fallback_timezone: float = FALLBACK_TIMEZONE


class LunisolarCalendar:
    """
    Calendar engine for one civil timezone.

    `to_lunar` is the direct conversion. The month tables (`lunar_months`,
    `month_bounds`, `to_gregorian`, ...) enumerate the lunations between two
    consecutive month-11 boundaries.
    """
    def __init__(self, id: EngineId, params: LunisolarParams):
        self.id = id
        self.params = params

    @property
    def timezone(self) -> float:
        return self.params.timezone

    def info(self) -> Dict[str, Any]:
        return {
            "family": self.id.family,
            "name": self.id.name,
            "version": self.id.version,
            "timezone": self.params.timezone,
            "fallback_timezone": self.params.fallback_timezone,
        }

    # ---------------------------------------------------------
    # Forward: civil date -> lunar label
    # ---------------------------------------------------------

    def to_lunar(self, d: date) -> LunarDate:
        return convert_date_to_lunar(d, self.timezone, fallback_timezone=self.params.fallback_timezone)

    def explain(self, d: date) -> Dict[str, Any]:
        result, trace = _convert(d, self.timezone, self.params.fallback_timezone)
        out = {"engine": self.info(), "date": d.isoformat()}
        out.update(trace)
        out["result"] = result
        return out

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        if debug:
            dbg = self.explain(d)
            lunar = dbg["result"]
        else:
            dbg = None
            lunar = self.to_lunar(d)
        return DayInfo(
            civil_date=d,
            engine=self.id,
            lunar=lunar,
            solar_term=self.solar_term(d),
            debug=dbg,
        )

    def solar_term(self, d: date) -> int:
        return solar_term(to_jdn(d), self.timezone)

    def month_11(self, year: int) -> int:
        return get_lunar_month_11(year, self.timezone)

    def leap_month_offset(self, a11: int) -> int:
        return get_leap_month_offset(a11, self.timezone)

    # ---------------------------------------------------------
    # Month tables
    # ---------------------------------------------------------

    def lunar_months(self, year: int) -> List[LunarMonth]:
        """
        Lunations from month 11 of lunar year `year - 1` up to (not including)
        month 11 of lunar year `year`.
        """
        tz = self.timezone
        a11 = get_lunar_month_11(year - 1, tz)
        b11 = get_lunar_month_11(year, tz)

        # Collect every new-moon day in [a11, b11] around the truncated index
        k = JulianMonthIndex.from_julian_day(float(a11))
        starts: List[int] = []
        for i in range(-1, 16):
            day = get_new_moon_day(k + i, tz)
            if a11 <= day <= b11:
                starts.append(day)
        starts = sorted(set(starts))

        leap_offset = get_leap_month_offset(a11, tz) if is_leap_year13(a11, b11) else None

        months: List[LunarMonth] = []
        for first, nxt in zip(starts, starts[1:]):
            month_difference = calculate_month_between_julian_days(first, a11)
            lunar_month, lunar_leap = label_month(month_difference, leap_offset)
            lunar_year = year - 1 if (lunar_month >= 11 and month_difference < 4) else year
            months.append(
                LunarMonth(
                    year=lunar_year,
                    month=lunar_month,
                    is_leap_month=lunar_leap,
                    first_jdn=first,
                    length=nxt - first,
                )
            )
        return months

    def _find_month(self, year: int, month: int, is_leap_month: bool) -> LunarMonth:
        # Months 11/12 of `year` follow month 10 and live in the next table
        for span_year in (year, year + 1):
            for m in self.lunar_months(span_year):
                if m.year == year and m.month == month and m.is_leap_month == is_leap_month:
                    return m
        leap_tag = " (leap)" if is_leap_month else ""
        raise InvalidLunarDateError(f"Month {month}{leap_tag} does not exist in lunar year {year}.")

    def leap_month(self, year: int) -> Optional[int]:
        """Label of the leap month of lunar year `year`, or None."""
        for span_year in (year, year + 1):
            for m in self.lunar_months(span_year):
                if m.year == year and m.is_leap_month:
                    return m.month
        return None

    def month_bounds(self, year: int, month: int, *, is_leap_month: bool = False) -> LunarMonth:
        if not 1 <= month <= 12:
            raise InvalidLunarDateError(f"Month must be in 1..12, got {month}.")
        return self._find_month(year, month, is_leap_month)

    def days_in_month(self, year: int, month: int, *, is_leap_month: bool = False) -> int:
        return self.month_bounds(year, month, is_leap_month=is_leap_month).length

    def new_year_day(self, year: int) -> date:
        return from_jdn(self.month_bounds(year, 1).first_jdn)

    # ---------------------------------------------------------
    # Inverse: lunar label -> civil date
    # ---------------------------------------------------------

    def to_gregorian(self, year: int, month: int, day: int, *, is_leap_month: bool = False) -> date:
        """
        Civil date of a lunar label, read from the month-11 anchored tables.

        Inverts `to_lunar` for civil dates from 2000 on, except 20-31 December
        (year label of a month 12 opened after month 11) and the day-0 results
        of the UTC+7 fallback. Before 1999 the negative solar longitude keeps
        month 11 from stepping back, `to_lunar` can give two dates the same
        label, and this returns the one in the table.
        """
        m = self.month_bounds(year, month, is_leap_month=is_leap_month)
        if not 1 <= day <= m.length:
            raise InvalidLunarDateError(
                f"Day {day} is out of range 1..{m.length} for month {month} of lunar year {year}."
            )
        return from_jdn(m.first_jdn + day - 1)
