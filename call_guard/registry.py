"""Registry utilities for analysis mode strategies."""

from typing import Dict, Iterable, Type

import importlib

from .domain.models import AnalysisMode
from .domain.strategy import ModeStrategy

STRATEGY_REGISTRY: Dict[AnalysisMode, Type[ModeStrategy]] = {}


def register_strategy(mode: AnalysisMode, cls: Type[ModeStrategy]) -> None:
    """Register a strategy class for a given mode."""
    STRATEGY_REGISTRY[mode] = cls


def get_strategy_class(mode: AnalysisMode | str) -> Type[ModeStrategy]:
    """Retrieve the strategy class for a mode."""
    return STRATEGY_REGISTRY[AnalysisMode.parse(mode)]


def list_strategies() -> Iterable[AnalysisMode]:
    """Return modes of all registered strategies."""
    return STRATEGY_REGISTRY.keys()


def load_strategy_module(module_path: str) -> None:
    """Import a module to register replacement strategies."""
    importlib.import_module(module_path)


def register_default_strategies() -> None:
    """Register built-in strategies."""
    from .strategies import SmartStrategy, AggressiveStrategy, PermissiveStrategy

    register_strategy(AnalysisMode.SMART, SmartStrategy)
    register_strategy(AnalysisMode.AGGRESSIVE, AggressiveStrategy)
    register_strategy(AnalysisMode.PERMISSIVE, PermissiveStrategy)
