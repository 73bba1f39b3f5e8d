from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

from .types import DayInfo, LunarDate, LunarMonth


class CalendarEngine(Protocol):
    """What the functional API needs from a calendar engine."""
    def info(self) -> Dict[str, Any]: ...
    def to_lunar(self, d: date) -> LunarDate: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...
    def explain(self, d: date) -> Dict[str, Any]: ...
    def to_gregorian(self, year: int, month: int, day: int, *, is_leap_month: bool = False) -> date: ...
    def lunar_months(self, year: int) -> List[LunarMonth]: ...
    def leap_month(self, year: int) -> Optional[int]: ...
    def month_bounds(self, year: int, month: int, *, is_leap_month: bool = False) -> LunarMonth: ...
    def days_in_month(self, year: int, month: int, *, is_leap_month: bool = False) -> int: ...
    def new_year_day(self, year: int) -> date: ...


@dataclass
class EngineRegistry:
    """Named engines; names are unique and case-sensitive."""
    engines: Dict[str, CalendarEngine] = field(default_factory=dict)

    def __contains__(self, name: str) -> bool:
        return name in self.engines

    def get(self, name: str) -> CalendarEngine:
        try:
            return self.engines[name]
        except KeyError:
            raise KeyError(f"No calendar engine named '{name}'. Known engines: {self.list()}") from None

    def list(self) -> List[str]:
        return sorted(self.engines)

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if name in self.engines and not overwrite:
            raise KeyError(f"Calendar engine '{name}' is already registered (pass overwrite=True to replace it).")
        self.engines[name] = engine

    def unregister(self, name: str) -> CalendarEngine:
        if name not in self.engines:
            raise KeyError(f"No calendar engine named '{name}'.")
        return self.engines.pop(name)
