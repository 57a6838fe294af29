from .smart import SmartStrategy
from .aggressive import AggressiveStrategy
from .permissive import PermissiveStrategy
from ..domain.models import AnalysisMode
from ..registry import register_strategy

register_strategy(AnalysisMode.SMART, SmartStrategy)
register_strategy(AnalysisMode.AGGRESSIVE, AggressiveStrategy)
register_strategy(AnalysisMode.PERMISSIVE, PermissiveStrategy)

__all__ = [
    "SmartStrategy",
    "AggressiveStrategy",
    "PermissiveStrategy",
]
