"""lichta public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_lunar,
    day_info,
    explain,
    to_gregorian,
    lunar_date_to_gregorian,
    list_engines,
    engine_info,
    get_calendar,
    make_engine,
    register_engine,
    lunar_months,
    leap_month,
    month_bounds,
    days_in_month,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
    sun_longitude,
    solar_term,
    new_moon,
    new_moon_day,
)
from .core.errors import InvalidLunarDateError, LichTaError, MonthIndexOverflowError
from .core.types import DayInfo, LunarDate, LunarMonth
from .engines.lunisolar import convert_date_to_lunar

__all__ = [
    "to_lunar",
    "day_info",
    "explain",
    "to_gregorian",
    "lunar_date_to_gregorian",
    "list_engines",
    "engine_info",
    "get_calendar",
    "make_engine",
    "register_engine",
    "lunar_months",
    "leap_month",
    "month_bounds",
    "days_in_month",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "sun_longitude",
    "solar_term",
    "new_moon",
    "new_moon_day",
    "convert_date_to_lunar",
    "LunarDate",
    "LunarMonth",
    "DayInfo",
    "LichTaError",
    "MonthIndexOverflowError",
    "InvalidLunarDateError",
]
