from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, EngineRegistry
from .core.time import from_jdn, to_jdn
from .core.types import DayInfo, LunarDate, LunarMonth
from .engines.astro.new_moon import get_new_moon_day as _get_new_moon_day
from .engines.astro.new_moon import new_moon_aa98 as _new_moon_aa98
from .engines.astro.solar import get_sun_longitude as _get_sun_longitude
from .engines.astro.solar import solar_term as _solar_term
from .engines.factory import make_engine as _make_engine
from .engines.factory import engine_with_timezone, spec_with_timezone
from .engines.month_index import JulianMonthIndex
from .engines.specs import ALL_SPECS, CalendarSpec

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _engine(engine: str, timezone: Optional[float]) -> CalendarEngine:
    if timezone is None:
        return _reg().get(engine)
    return get_calendar(engine, timezone=timezone)

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_calendar(name: str, *, timezone: Optional[float] = None) -> CalendarEngine:
    """
    Engine `name` at another UTC offset. Presets are rebuilt from their spec;
    engines added with `register_engine` are copied with the new timezone.
    """
    if name in ALL_SPECS:
        return _make_engine(spec_with_timezone(name, timezone))
    engine = _reg().get(name)
    return engine if timezone is None else engine_with_timezone(engine, timezone)

def make_engine(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def to_lunar(d: date, *, engine: str = "vietnam", timezone: Optional[float] = None) -> LunarDate:
    return _engine(engine, timezone).to_lunar(d)

def day_info(d: date, *, engine: str = "vietnam", timezone: Optional[float] = None, debug: bool = False) -> DayInfo:
    return _engine(engine, timezone).day_info(d, debug=debug)

def explain(d: date, *, engine: str = "vietnam", timezone: Optional[float] = None) -> Dict[str, Any]:
    return _engine(engine, timezone).explain(d)

def to_gregorian(
    year: int,
    month: int,
    day: int,
    *,
    is_leap_month: bool = False,
    engine: str = "vietnam",
    timezone: Optional[float] = None,
) -> date:
    return _engine(engine, timezone).to_gregorian(year, month, day, is_leap_month=is_leap_month)

def lunar_date_to_gregorian(t: LunarDate, *, engine: str = "vietnam", timezone: Optional[float] = None) -> date:
    return to_gregorian(t.year, t.month, t.day, is_leap_month=t.is_leap_month, engine=engine, timezone=timezone)

# ============================================================
# Month/year-level API
# ============================================================

def lunar_months(year: int, *, engine: str = "vietnam", timezone: Optional[float] = None) -> List[LunarMonth]:
    return _engine(engine, timezone).lunar_months(year)

def leap_month(year: int, *, engine: str = "vietnam", timezone: Optional[float] = None) -> Optional[int]:
    return _engine(engine, timezone).leap_month(year)

def month_bounds(
    year: int,
    month: int,
    *,
    is_leap_month: bool = False,
    engine: str = "vietnam",
    timezone: Optional[float] = None,
    as_date: bool = True,
) -> Dict[str, Any]:
    m = _engine(engine, timezone).month_bounds(year, month, is_leap_month=is_leap_month)
    out = {
        "Y": m.year,
        "M": m.month,
        "is_leap_month": m.is_leap_month,
        "first_jdn": m.first_jdn,
        "last_jdn": m.last_jdn,
        "length": m.length,
    }
    if as_date:
        out["first_date"] = from_jdn(m.first_jdn)
        out["last_date"] = from_jdn(m.last_jdn)
    return out

def days_in_month(
    year: int,
    month: int,
    *,
    is_leap_month: bool = False,
    engine: str = "vietnam",
    timezone: Optional[float] = None,
) -> int:
    return _engine(engine, timezone).days_in_month(year, month, is_leap_month=is_leap_month)

def new_year_day(year: int, *, engine: str = "vietnam", timezone: Optional[float] = None) -> date:
    return _engine(engine, timezone).new_year_day(year)

def first_day_of_month(year: int, month: int, *, is_leap_month: bool = False, engine: str = "vietnam") -> date:
    return month_bounds(year, month, is_leap_month=is_leap_month, engine=engine)["first_date"]

def last_day_of_month(year: int, month: int, *, is_leap_month: bool = False, engine: str = "vietnam") -> date:
    return month_bounds(year, month, is_leap_month=is_leap_month, engine=engine)["last_date"]

# ============================================================
# Astronomical helpers
# ============================================================

def sun_longitude(d: date, timezone: float) -> float:
    """Solar longitude (degrees) at local midnight starting `d`."""
    return _get_sun_longitude(to_jdn(d), timezone)

def solar_term(d: date, timezone: float) -> int:
    return _solar_term(to_jdn(d), timezone)

def new_moon(k: int) -> float:
    """Julian Date (UTC) of the new moon of lunation `k` since 1900."""
    return _new_moon_aa98(JulianMonthIndex(k))

def new_moon_day(k: int, timezone: float) -> date:
    return from_jdn(_get_new_moon_day(JulianMonthIndex(k), timezone))
