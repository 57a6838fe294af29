from typing import Sequence

from ..domain.digits import has_repeat_run
from ..domain.models import BlockReason
from ..domain.strategy import ModeStrategy, Rule
from .smart import is_short

MIN_DIGITS = 5
REPEAT_RUN = 9


class PermissiveStrategy(ModeStrategy):
    """Blocks only obvious threats. Does not reuse the smart rules."""

    def rules(self) -> Sequence[Rule]:
        return [
            (lambda n, d: n in self.reference_lists.high_risk, BlockReason.KNOWN_SPAM),
            (lambda n, d: has_repeat_run(d, REPEAT_RUN), BlockReason.REPEATING_DIGITS),
            (lambda n, d: is_short(d, MIN_DIGITS), BlockReason.SHORT_NUMBER),
        ]
