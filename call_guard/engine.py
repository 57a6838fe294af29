"""Call classification engine."""

import logging
from typing import Dict, Optional

# Ensure strategies are registered
from . import strategies  # noqa: F401
from .domain.digits import extract_digits
from .domain.models import ALLOW, AnalysisMode, Verdict
from .domain.strategy import ModeStrategy
from .reference_lists import ReferenceLists
from .registry import get_strategy_class

logger = logging.getLogger(__name__)


class ClassificationEngine:
    """Classify phone numbers as threats using per-mode rule lists.

    The engine holds no mutable state: the reference lists are frozen and
    strategies are built once per engine, so ``classify`` may be called from
    several threads at once.

    Without ``reference_lists`` the engine uses the built-in lists only;
    ``get_default_engine`` and ``classify`` build theirs from settings, so
    ``CALL_GUARD_*`` list overrides apply there and not here.
    """

    def __init__(self, reference_lists: Optional[ReferenceLists] = None) -> None:
        self.reference_lists = reference_lists or ReferenceLists()
        self._strategies: Dict[AnalysisMode, ModeStrategy] = {
            mode: get_strategy_class(mode)(self.reference_lists) for mode in AnalysisMode
        }

    def classify(self, number: str, mode: AnalysisMode | str = AnalysisMode.SMART) -> Verdict:
        """Return the verdict for ``number`` under ``mode``.

        Any string is accepted; characters other than digits are ignored by
        the digit-based rules.
        """
        mode = AnalysisMode.parse(mode)
        if number is None:
            number = ""
        elif not isinstance(number, str):
            number = str(number)

        reason = self._strategies[mode].evaluate(number, extract_digits(number))
        verdict = ALLOW if reason is None else Verdict(blocked=True, reason=reason)
        outcome = reason.value if reason else "allow"
        logger.debug(
            "%s [%s] → %s",
            number,
            mode.value,
            outcome,
            extra={"phone_number": number, "mode": mode, "reason": outcome},
        )
        return verdict


_default_engine: Optional[ClassificationEngine] = None


def get_default_engine() -> ClassificationEngine:
    """Return a shared engine built from the current settings."""
    global _default_engine
    if _default_engine is None:
        from .config import settings

        _default_engine = ClassificationEngine(ReferenceLists.from_settings(settings))
    return _default_engine


def classify(number: str, mode: AnalysisMode | str = AnalysisMode.SMART) -> Verdict:
    """Classify ``number`` with the default engine."""
    return get_default_engine().classify(number, mode)
