from .domain.models import (
    AnalysisMode,
    BlockReason,
    CallStatus,
    ThreatType,
    Verdict,
    detect_threat_type,
)
from .domain.strategy import ModeStrategy
from .reference_lists import ReferenceLists, DEFAULT_KNOWN_SPAM, DEFAULT_HIGH_RISK
from .registry import (
    register_strategy,
    get_strategy_class,
    STRATEGY_REGISTRY,
)
from .strategies import (  # noqa: F401
    SmartStrategy,
    AggressiveStrategy,
    PermissiveStrategy,
)
from .engine import ClassificationEngine, classify
from .screener import CallScreener
from .logging_config import configure_logging

__all__ = [
    "AnalysisMode",
    "BlockReason",
    "CallStatus",
    "ThreatType",
    "Verdict",
    "detect_threat_type",
    "ModeStrategy",
    "ReferenceLists",
    "DEFAULT_KNOWN_SPAM",
    "DEFAULT_HIGH_RISK",
    "register_strategy",
    "get_strategy_class",
    "STRATEGY_REGISTRY",
    "SmartStrategy",
    "AggressiveStrategy",
    "PermissiveStrategy",
    "ClassificationEngine",
    "classify",
    "CallScreener",
    "configure_logging",
]
