from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence, Tuple

from .models import BlockReason
from ..reference_lists import ReferenceLists

Predicate = Callable[[str, str], bool]
Rule = Tuple[Predicate, BlockReason]


class ModeStrategy(ABC):
    """Ordered rule list evaluated for one analysis mode."""

    def __init__(self, reference_lists: ReferenceLists) -> None:
        self.reference_lists = reference_lists

    @abstractmethod
    def rules(self) -> Sequence[Rule]:
        """Return ``(predicate, reason)`` pairs in evaluation order."""

    def evaluate(self, number: str, digits: str) -> Optional[BlockReason]:
        """Return the reason of the first matching rule, or ``None``."""
        for predicate, reason in self.rules():
            if predicate(number, digits):
                return reason
        return None
