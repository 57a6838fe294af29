from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..exceptions import UnknownModeError


class AnalysisMode(str, Enum):
    """Analysis strategies selectable for classification."""

    SMART = "smart"
    AGGRESSIVE = "aggressive"
    PERMISSIVE = "permissive"

    @property
    def display_name(self) -> str:
        return _MODE_INFO[self][0]

    @property
    def description(self) -> str:
        return _MODE_INFO[self][1]

    @classmethod
    def parse(cls, value: "str | AnalysisMode") -> "AnalysisMode":
        """Return the mode matching ``value`` case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in cls)
            raise UnknownModeError(
                f"Unknown analysis mode: {value!r}. Must be one of: {choices}"
            ) from exc


_MODE_INFO = {
    AnalysisMode.SMART: ("Smart", "Balance between protection and convenience"),
    AnalysisMode.AGGRESSIVE: ("Aggressive", "Blocks everything suspicious"),
    AnalysisMode.PERMISSIVE: ("Permissive", "Blocks only obvious threats"),
}


class ThreatType(str, Enum):
    """Display category of a detected threat."""

    SPAM = "Spam"
    FRAUD = "Fraud"
    SUSPICIOUS_PATTERN = "Suspicious pattern"
    BLACKLIST = "Blacklist"
    INTERNATIONAL = "International spam"
    ANONYMOUS = "Anonymous call"

    @property
    def display_name(self) -> str:
        return self.value


class BlockReason(str, Enum):
    """Why a number was blocked."""

    REPEATING_DIGITS = "repeating_digits"
    SHORT_NUMBER = "short_number"
    SUSPICIOUS_PATTERN = "suspicious_pattern"
    KNOWN_SPAM = "known_spam"
    PRIVATE_NUMBER = "private_number"
    INTERNATIONAL_SCAM = "international_scam"
    SEQUENTIAL_NUMBER = "sequential_number"
    MASS_DIALING = "mass_dialing"

    @property
    def display_name(self) -> str:
        return _REASON_INFO[self][0]

    @property
    def description(self) -> str:
        return _REASON_INFO[self][1]


_REASON_INFO = {
    BlockReason.REPEATING_DIGITS: ("Repeating digits", "Number is made of the same digit"),
    BlockReason.SHORT_NUMBER: ("Short number", "Fewer than 7 digits"),
    BlockReason.SUSPICIOUS_PATTERN: ("Suspicious pattern", "Contains 0000, 1111, 999"),
    BlockReason.KNOWN_SPAM: ("Known spam", "On the blacklist"),
    BlockReason.PRIVATE_NUMBER: ("Private number", "Hidden or anonymous caller"),
    BlockReason.INTERNATIONAL_SCAM: ("International spam", "Suspicious international number"),
    BlockReason.SEQUENTIAL_NUMBER: ("Sequence", "Digits in ascending or descending order"),
    BlockReason.MASS_DIALING: ("Mass dialing", "Number used for mass calling"),
}

_THREAT_TYPES = {
    BlockReason.REPEATING_DIGITS: ThreatType.SUSPICIOUS_PATTERN,
    BlockReason.SEQUENTIAL_NUMBER: ThreatType.SUSPICIOUS_PATTERN,
    BlockReason.SHORT_NUMBER: ThreatType.FRAUD,
    BlockReason.KNOWN_SPAM: ThreatType.BLACKLIST,
    BlockReason.MASS_DIALING: ThreatType.BLACKLIST,
    BlockReason.PRIVATE_NUMBER: ThreatType.ANONYMOUS,
    BlockReason.INTERNATIONAL_SCAM: ThreatType.INTERNATIONAL,
    BlockReason.SUSPICIOUS_PATTERN: ThreatType.SPAM,
}


def detect_threat_type(reason: Optional[BlockReason]) -> ThreatType:
    """Map a block reason to its display category (``SPAM`` when absent)."""
    if reason is None:
        return ThreatType.SPAM
    return _THREAT_TYPES[reason]


class CallStatus(str, Enum):
    """Outcome of a screened call."""

    BLOCKED = "blocked"
    ALLOWED = "allowed"


@dataclass(frozen=True)
class Verdict:
    """Result of classifying a phone number."""

    blocked: bool
    reason: Optional[BlockReason] = None

    @property
    def threat_type(self) -> ThreatType:
        return detect_threat_type(self.reason)


ALLOW = Verdict(blocked=False)


@dataclass
class CallRecord:
    """A screened incoming call."""
    phone_number: str
    status: CallStatus
    timestamp: datetime
    contact_name: Optional[str] = None
    block_reason: Optional[BlockReason] = None


@dataclass
class ThreatAlert:
    """A blocked call reported as a threat."""
    phone_number: str
    threat_type: ThreatType
    block_reason: BlockReason
    timestamp: datetime


@dataclass(frozen=True)
class TestScenario:
    """Scripted call with the expected screening outcome."""

    __test__ = False

    id: int
    phone_number: str
    description: str
    category: str
    expected_reason: Optional[BlockReason]
    details: str
    difficulty: int

    @property
    def expects_block(self) -> bool:
        return self.expected_reason is not None


@dataclass
class TestResult:
    """Outcome of running a :class:`TestScenario`."""

    __test__ = False

    scenario_id: int
    phone_number: str
    description: str
    category: str
    mode: AnalysisMode
    expected_block: bool
    status: CallStatus
    block_reason: Optional[BlockReason]
    success: bool
    details: str
    timestamp: datetime
