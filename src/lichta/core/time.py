"""
Civil day <-> Julian Day Number.

JDNs here are integers labelling whole proleptic-Gregorian days (JDN 2451545
is 2000-01-01). `datetime.date` bounds and validates the calendar side, so
years outside 1..9999 raise ValueError.
"""
from __future__ import annotations
from datetime import date

# JDN of date.fromordinal(1) (0001-01-01) minus one
JDN_ORDINAL_OFFSET = 1721425


def to_jdn(d: date) -> int:
    return d.toordinal() + JDN_ORDINAL_OFFSET

def from_jdn(jdn: int) -> date:
    return date.fromordinal(int(jdn) - JDN_ORDINAL_OFFSET)

def year_end_jdn(year: int) -> int:
    """JDN of December 31 of `year`."""
    return to_jdn(date(year, 12, 31))
