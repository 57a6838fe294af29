"""Scripted calls used to exercise the screening rules end to end."""

from typing import List

from .domain.models import BlockReason, TestScenario
from .exceptions import UnknownCategoryError


TEST_SCENARIOS: List[TestScenario] = [
    TestScenario(1, "+79161234567", "Personal number", "Normal", None, "Ordinary Russian mobile", 1),
    TestScenario(2, "+74957775533", "Moscow number", "Normal", None, "Moscow landline", 1),
    TestScenario(3, "+78002000600", "Support line", "Normal", None, "Toll-free number", 1),
    TestScenario(4, "+74952123456", "Business number", "Normal", None, "Corporate number", 1),

    TestScenario(5, "+79991111111", "Repeating ones", "Obvious spam", BlockReason.REPEATING_DIGITS, "7 repeating ones", 1),
    TestScenario(6, "+72222222222", "Repeating twos", "Obvious spam", BlockReason.REPEATING_DIGITS, "Repeating twos", 1),
    TestScenario(7, "+712345", "Short number", "Obvious spam", BlockReason.SHORT_NUMBER, "Only 6 digits", 1),
    TestScenario(8, "+74951230000", "Zero pattern", "Obvious spam", BlockReason.SUSPICIOUS_PATTERN, "Known spam number", 1),

    TestScenario(9, "+74950000000", "Many zeros", "Suspicious", BlockReason.SUSPICIOUS_PATTERN, "Pattern 0000", 2),
    TestScenario(10, "+79161111111", "Many ones", "Suspicious", BlockReason.SUSPICIOUS_PATTERN, "Pattern 1111", 2),
    TestScenario(11, "+79039999999", "Many nines", "Suspicious", BlockReason.SUSPICIOUS_PATTERN, "Pattern 999", 2),
    TestScenario(12, "+79034445566", "Repeated pairs", "Suspicious", BlockReason.SUSPICIOUS_PATTERN, "Repeating digit pairs", 2),

    TestScenario(13, "+79031112233", "Blacklisted", "Known spam", BlockReason.KNOWN_SPAM, "Number on the blacklist", 2),
    TestScenario(14, "+79051111111", "Spam campaign", "Known spam", BlockReason.KNOWN_SPAM, "Mass mailing", 2),
    TestScenario(15, "+79025556677", "Advertising", "Known spam", BlockReason.KNOWN_SPAM, "Advertising calls", 2),

    TestScenario(16, "unknown", "Hidden number", "Anonymous", BlockReason.PRIVATE_NUMBER, "Hidden number", 3),
    TestScenario(17, "#31#+79161234567", "Hidden call", "Anonymous", BlockReason.PRIVATE_NUMBER, "Dialled with #31#", 3),

    TestScenario(18, "+15551234567", "US number", "International", None, "Number from the USA", 2),
    TestScenario(19, "+15555555555", "Suspicious US", "International", BlockReason.INTERNATIONAL_SCAM, "Suspicious US number", 2),
    TestScenario(20, "+441234567890", "United Kingdom", "International", None, "Number from the UK", 2),

    TestScenario(21, "+79161234567", "Sequence", "Pattern", BlockReason.SEQUENTIAL_NUMBER, "Digits in order 1234567", 3),
    TestScenario(22, "+79169876543", "Reverse sequence", "Pattern", BlockReason.SEQUENTIAL_NUMBER, "Digits in reverse order", 3),

    TestScenario(23, "+79001234567", "Mass dialing", "Mass dialing", BlockReason.MASS_DIALING, "Range used for mass calls", 2),
    TestScenario(24, "+79017778899", "Call centre", "Mass dialing", BlockReason.MASS_DIALING, "Call centre number", 2),
]


def list_categories() -> List[str]:
    """Return scenario categories in catalogue order."""
    seen: List[str] = []
    for scenario in TEST_SCENARIOS:
        if scenario.category not in seen:
            seen.append(scenario.category)
    return seen


def scenarios_by_category(category: str) -> List[TestScenario]:
    if category not in list_categories():
        raise UnknownCategoryError(
            f"Unknown category: {category}. Must be one of: {', '.join(list_categories())}"
        )
    return [s for s in TEST_SCENARIOS if s.category == category]


def scenarios_by_difficulty(difficulty: int) -> List[TestScenario]:
    return [s for s in TEST_SCENARIOS if s.difficulty == difficulty]
