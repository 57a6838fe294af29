"""Static reference number lists consulted by the classification rules."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet, Iterable

from .exceptions import ReferenceListError
from .utils import read_phone_list

if TYPE_CHECKING:  # pragma: no cover
    from .config import Settings

logger = logging.getLogger(__name__)

DEFAULT_KNOWN_SPAM: FrozenSet[str] = frozenset({
    "+79991111111",
    "+79031112233",
    "+79051111111",
    "+79998887766",
    "+74951230000",
    "+79001234567",
    "+79069876543",
    "+79025556677",
    "+79034445566",
    "+79017778899",
})

DEFAULT_HIGH_RISK: FrozenSet[str] = frozenset({
    "+79991111111",
    "+712345",
    "+79031112233",
})


@dataclass(frozen=True)
class ReferenceLists:
    """Known-spam and high-risk numbers, matched by exact string."""

    known_spam: FrozenSet[str] = DEFAULT_KNOWN_SPAM
    high_risk: FrozenSet[str] = DEFAULT_HIGH_RISK

    @classmethod
    def from_iterables(
        cls, known_spam: Iterable[str], high_risk: Iterable[str]
    ) -> "ReferenceLists":
        return cls(known_spam=frozenset(known_spam), high_risk=frozenset(high_risk))

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ReferenceLists":
        """Build lists from configuration, falling back to the defaults."""
        known = _load(settings.known_spam_file, settings.known_spam_numbers, DEFAULT_KNOWN_SPAM)
        high = _load(settings.high_risk_file, settings.high_risk_numbers, DEFAULT_HIGH_RISK)
        return cls.from_iterables(known, high)


def _load(path: str | None, inline: list[str], default: FrozenSet[str]) -> Iterable[str]:
    if path:
        try:
            numbers = read_phone_list(Path(path))
        except OSError as exc:
            raise ReferenceListError(f"Cannot read reference list {path}: {exc}") from exc
        logger.info("Loaded %d reference numbers from %s", len(numbers), path)
        return numbers
    return inline or default
