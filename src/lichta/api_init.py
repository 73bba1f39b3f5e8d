"""Builds the preset engines once, when `lichta` is first imported."""
from ._bootstrap import build_registry
from .api import set_registry

set_registry(build_registry())
