import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from call_guard.domain.models import AnalysisMode, BlockReason, ThreatType  # noqa: E402
from call_guard.engine import ClassificationEngine  # noqa: E402
from call_guard.reference_lists import ReferenceLists  # noqa: E402
from call_guard.scenarios import TEST_SCENARIOS  # noqa: E402

SMART = AnalysisMode.SMART
AGGRESSIVE = AnalysisMode.AGGRESSIVE
PERMISSIVE = AnalysisMode.PERMISSIVE

ODD_INPUTS = [
    "",
    "   ",
    "abc",
    "+",
    "#31#",
    "+7 (916) 123-45-67",
    "\x00\n\t",
    "٣٤٥٦٧٨٩١٢",
    "+" * 100,
    "9" * 1000,
    "12" * 50,
]


@pytest.fixture
def engine() -> ClassificationEngine:
    return ClassificationEngine()


@pytest.mark.parametrize(
    "number, mode, reason",
    [
        ("+79991111111", SMART, BlockReason.REPEATING_DIGITS),
        ("+712345", SMART, BlockReason.SHORT_NUMBER),
        ("+74951230000", SMART, BlockReason.SUSPICIOUS_PATTERN),
        ("unknown", SMART, BlockReason.PRIVATE_NUMBER),
        ("private", SMART, BlockReason.PRIVATE_NUMBER),
        ("#31#+79161234567", SMART, BlockReason.PRIVATE_NUMBER),
        ("+79031112233", SMART, BlockReason.KNOWN_SPAM),
        ("+15551234567", SMART, BlockReason.INTERNATIONAL_SCAM),
        ("+79161234567", AGGRESSIVE, BlockReason.SEQUENTIAL_NUMBER),
        ("+79169876543", AGGRESSIVE, BlockReason.SEQUENTIAL_NUMBER),
        ("+7 (916) 123-45-67", AGGRESSIVE, BlockReason.SEQUENTIAL_NUMBER),
        ("+79005551234", AGGRESSIVE, BlockReason.MASS_DIALING),
        ("+442071838750", AGGRESSIVE, BlockReason.INTERNATIONAL_SCAM),
        ("+74953434343412", AGGRESSIVE, BlockReason.SUSPICIOUS_PATTERN),
        ("+712345", PERMISSIVE, BlockReason.KNOWN_SPAM),
        ("+79991111111", PERMISSIVE, BlockReason.KNOWN_SPAM),
        ("+72222222222", PERMISSIVE, BlockReason.REPEATING_DIGITS),
        ("+7123", PERMISSIVE, BlockReason.SHORT_NUMBER),
    ],
)
def test_blocked(engine, number, mode, reason):
    verdict = engine.classify(number, mode)
    assert verdict.blocked
    assert verdict.reason is reason


@pytest.mark.parametrize(
    "number, mode",
    [
        ("+441234567890", SMART),
        ("+79161234567", SMART),
        ("+7 (916) 123-45-67", SMART),
        ("+442071838750", SMART),
        ("+78002000600", AGGRESSIVE),
        ("+74957775533", AGGRESSIVE),
        ("+74952123456", AGGRESSIVE),
        ("+79161111111", PERMISSIVE),
        ("+74951230000", PERMISSIVE),
        ("unknown", PERMISSIVE),
        ("", SMART),
        ("", AGGRESSIVE),
        ("", PERMISSIVE),
    ],
)
def test_allowed(engine, number, mode):
    verdict = engine.classify(number, mode)
    assert not verdict.blocked
    assert verdict.reason is None


def test_short_number_checked_before_pattern(engine):
    # 5 digits and contains "0000"
    assert engine.classify("+70000", SMART).reason is BlockReason.SHORT_NUMBER


def test_repeating_checked_before_known_spam(engine):
    assert engine.classify("+79991111111", SMART).reason is BlockReason.REPEATING_DIGITS


def test_mode_accepts_names(engine):
    assert engine.classify("+79161234567", "Aggressive").reason is BlockReason.SEQUENTIAL_NUMBER


@pytest.mark.parametrize("mode", list(AnalysisMode))
def test_total_and_deterministic(engine, mode):
    for number in ODD_INPUTS:
        first = engine.classify(number, mode)
        assert first == engine.classify(number, mode)
        assert first.blocked == (first.reason is not None)


def test_non_string_input_does_not_raise(engine):
    assert not engine.classify(None, SMART).blocked
    assert engine.classify(123, SMART).reason is BlockReason.SHORT_NUMBER


def test_aggressive_extends_smart(engine):
    numbers = [s.phone_number for s in TEST_SCENARIOS] + ODD_INPUTS
    for number in numbers:
        smart = engine.classify(number, SMART)
        if smart.blocked:
            assert engine.classify(number, AGGRESSIVE) == smart


def test_injected_reference_lists():
    lists = ReferenceLists.from_iterables({"+74957775533"}, {"+74957775533"})
    engine = ClassificationEngine(lists)
    assert engine.classify("+74957775533", SMART).reason is BlockReason.KNOWN_SPAM
    assert engine.classify("+74957775533", PERMISSIVE).reason is BlockReason.KNOWN_SPAM
    assert not engine.classify("+79031112233", SMART).blocked


def test_verdict_threat_type(engine):
    assert engine.classify("unknown", SMART).threat_type is ThreatType.ANONYMOUS
    assert engine.classify("+441234567890", SMART).threat_type is ThreatType.SPAM


@pytest.mark.parametrize(
    "number, mode, reason",
    [
        ("+712345", SMART, BlockReason.SHORT_NUMBER),
        ("+7123456", SMART, None),
        ("+7555555", SMART, None),
        ("+75555555", SMART, BlockReason.REPEATING_DIGITS),
        ("+7" + "2" * 8, PERMISSIVE, None),
        ("+7" + "2" * 9, PERMISSIVE, BlockReason.REPEATING_DIGITS),
        ("+7123", PERMISSIVE, BlockReason.SHORT_NUMBER),
        ("+71234", PERMISSIVE, None),
    ],
)
def test_thresholds(engine, number, mode, reason):
    assert engine.classify(number, mode).reason is reason
