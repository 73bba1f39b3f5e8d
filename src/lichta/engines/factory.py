"""
lichta.engines.factory
----------------------
Builds live calendar engines from the data-only presets in `specs`.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional

from lichta.engines.lunisolar import LunisolarCalendar, LunisolarParams
from lichta.engines.specs import ALL_SPECS, CalendarSpec


def make_engine(spec: CalendarSpec) -> LunisolarCalendar:
    """The universal entry point."""
    if not isinstance(spec.params, LunisolarParams):
        raise TypeError(f"Unknown params type: {type(spec.params)}")
    return LunisolarCalendar(id=spec.id, params=spec.params)


def spec_with_timezone(name: str, timezone: Optional[float] = None) -> CalendarSpec:
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown engine spec '{name}'")
    spec = ALL_SPECS[name]
    if timezone is not None:
        spec = spec.tweak(timezone=float(timezone))
        spec = replace(spec, id=replace(spec.id, family="custom"))
    return spec


def engine_with_timezone(engine: LunisolarCalendar, timezone: float) -> LunisolarCalendar:
    """Copy of a built engine at another UTC offset (e.g. one added with `register_engine`)."""
    if not isinstance(engine, LunisolarCalendar):
        raise TypeError(f"Cannot change the timezone of {type(engine).__name__}")
    return LunisolarCalendar(
        id=replace(engine.id, family="custom"),
        params=replace(engine.params, timezone=float(timezone)),
    )
