from __future__ import annotations

from lichta.core.engine import EngineRegistry
from lichta.engines.factory import make_engine
from lichta.engines.specs import ALL_SPECS


def build_registry() -> EngineRegistry:
    """One engine per named preset, registered under the preset name."""
    reg = EngineRegistry()
    for name, spec in ALL_SPECS.items():
        reg.register(name, make_engine(spec))
    return reg
