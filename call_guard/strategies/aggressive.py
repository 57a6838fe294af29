from typing import Sequence

from ..domain.digits import has_repeated_pair, has_sequential_run
from ..domain.models import BlockReason
from ..domain.strategy import Rule
from .smart import SmartStrategy

MASS_DIALING_PREFIX = "+7900"
DOMESTIC_PREFIXES = ("+7", "+1")
SEQUENCE_RUN = 7
PAIR_REPEATS = 4


class AggressiveStrategy(SmartStrategy):
    """Smart rules followed by stricter checks."""

    def rules(self) -> Sequence[Rule]:
        return [
            *super().rules(),
            (lambda n, d: has_sequential_run(d, SEQUENCE_RUN), BlockReason.SEQUENTIAL_NUMBER),
            (lambda n, d: n.startswith(MASS_DIALING_PREFIX), BlockReason.MASS_DIALING),
            (
                lambda n, d: n.startswith("+") and not n.startswith(DOMESTIC_PREFIXES),
                BlockReason.INTERNATIONAL_SCAM,
            ),
            (lambda n, d: has_repeated_pair(d, PAIR_REPEATS), BlockReason.SUSPICIOUS_PATTERN),
        ]
