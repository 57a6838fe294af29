from typing import Sequence

from ..domain.digits import has_repeat_run
from ..domain.models import BlockReason
from ..domain.strategy import ModeStrategy, Rule

SUSPICIOUS_SUBSTRINGS = ("0000", "1111", "999")
PRIVATE_SENTINELS = ("unknown", "private")
HIDE_CALLER_ID_CODE = "#31#"
MIN_DIGITS = 7
REPEAT_RUN = 7


def is_short(digits: str, min_digits: int) -> bool:
    """Fewer than ``min_digits`` digits; inputs without any digit never count."""
    return 0 < len(digits) < min_digits


def is_private(number: str) -> bool:
    return number in PRIVATE_SENTINELS or HIDE_CALLER_ID_CODE in number


class SmartStrategy(ModeStrategy):
    """Balanced rule set."""

    def rules(self) -> Sequence[Rule]:
        return [
            (lambda n, d: has_repeat_run(d, REPEAT_RUN), BlockReason.REPEATING_DIGITS),
            (lambda n, d: is_short(d, MIN_DIGITS), BlockReason.SHORT_NUMBER),
            (
                lambda n, d: any(s in n for s in SUSPICIOUS_SUBSTRINGS),
                BlockReason.SUSPICIOUS_PATTERN,
            ),
            (lambda n, d: n in self.reference_lists.known_spam, BlockReason.KNOWN_SPAM),
            (lambda n, d: is_private(n), BlockReason.PRIVATE_NUMBER),
            (
                lambda n, d: n.startswith("+1") and "555" in n,
                BlockReason.INTERNATIONAL_SCAM,
            ),
        ]
