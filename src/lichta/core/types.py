from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional

@dataclass(frozen=True)
class EngineId:
    family: Literal["lunisolar", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class LunarDate:
    day: int
    month: int
    year: int
    is_leap_month: bool = False

    def as_tuple(self):
        return (self.day, self.month, self.year, self.is_leap_month)

@dataclass(frozen=True)
class LunarMonth:
    """One lunation as labelled by the calendar; days are local JDNs."""
    year: int
    month: int
    is_leap_month: bool
    first_jdn: int
    length: int

    @property
    def last_jdn(self) -> int:
        return self.first_jdn + self.length - 1

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: EngineId
    lunar: LunarDate
    solar_term: int
    debug: Optional[Dict[str, Any]] = None
