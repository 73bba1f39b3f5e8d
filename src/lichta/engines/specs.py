"""
lichta.engines.specs
--------------------
Named calendar presets. Pure data: engines are built from these by
`lichta.engines.factory.make_engine`.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Dict

from lichta.core.types import EngineId
from lichta.engines.lunisolar import LunisolarParams


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a lunisolar calendar engine."""
    id: EngineId
    params: LunisolarParams
    meta: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def like(name: str) -> "CalendarSpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, params=replace(self.params, **kwargs))


VIETNAM = CalendarSpec(
    id=EngineId(family="lunisolar", name="vietnam", version="1"),
    params=LunisolarParams(timezone=7.0),
    meta={"description": "Vietnamese calendar (Indochina Time, UTC+7)"},
)

CHINA = CalendarSpec(
    id=EngineId(family="lunisolar", name="china", version="1"),
    params=LunisolarParams(timezone=8.0),
    meta={"description": "Chinese calendar (China Standard Time, UTC+8)"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "vietnam": VIETNAM,
    "china": CHINA,
}
