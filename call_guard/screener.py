"""Screening state: protection toggle, call log, threats and test results."""

import logging
import threading
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from .domain.models import (
    AnalysisMode,
    CallRecord,
    CallStatus,
    TestResult,
    TestScenario,
    ThreatAlert,
)
from .engine import ClassificationEngine
from .scenarios import TEST_SCENARIOS, scenarios_by_category, scenarios_by_difficulty

logger = logging.getLogger(__name__)


class CallScreener:
    """Apply the classification engine to incoming calls and keep history.

    Lists are kept newest first and truncated to their limits.
    """

    def __init__(
        self,
        engine: ClassificationEngine,
        *,
        mode: AnalysisMode = AnalysisMode.SMART,
        protection_active: bool = True,
        recent_calls_limit: int = 10,
        threats_limit: int = 5,
        test_results_limit: int = 15,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.engine = engine
        self.mode = mode
        self.protection_active = protection_active
        self.recent_calls: List[CallRecord] = []
        self.threats: List[ThreatAlert] = []
        self.test_results: List[TestResult] = []
        self.blocked_count = 0
        self._recent_calls_limit = recent_calls_limit
        self._threats_limit = threats_limit
        self._test_results_limit = test_results_limit
        self._clock = clock
        self._lock = threading.Lock()

    def toggle_protection(self) -> bool:
        with self._lock:
            self.protection_active = not self.protection_active
            active = self.protection_active
        logger.info("Protection %s", "enabled" if active else "disabled")
        return active

    def set_mode(self, mode: AnalysisMode | str) -> AnalysisMode:
        mode = AnalysisMode.parse(mode)
        with self._lock:
            self.mode = mode
        logger.info("Analysis mode set to %s", mode.value)
        return mode

    def _settings_snapshot(self) -> Tuple[AnalysisMode, bool]:
        with self._lock:
            return self.mode, self.protection_active

    def screen_call(self, number: str, contact_name: Optional[str] = None) -> CallRecord:
        """Classify an incoming call and record the outcome."""
        mode, protection_active = self._settings_snapshot()
        return self._screen(number, contact_name, mode, protection_active)

    def _screen(
        self,
        number: str,
        contact_name: Optional[str],
        mode: AnalysisMode,
        protection_active: bool,
    ) -> CallRecord:
        verdict = self.engine.classify(number, mode)
        now = self._clock()
        blocked = verdict.blocked and protection_active
        record = CallRecord(
            phone_number=number,
            status=CallStatus.BLOCKED if blocked else CallStatus.ALLOWED,
            timestamp=now,
            contact_name=contact_name,
            block_reason=verdict.reason,
        )
        with self._lock:
            self.recent_calls = [record] + self.recent_calls[: self._recent_calls_limit - 1]

            if blocked and verdict.reason is not None:
                self.blocked_count += 1
                alert = ThreatAlert(
                    phone_number=number,
                    threat_type=verdict.threat_type,
                    block_reason=verdict.reason,
                    timestamp=now,
                )
                self.threats = [alert] + self.threats[: self._threats_limit - 1]
        logger.info(
            "%s [%s] → %s",
            number,
            mode.value,
            record.status.value,
            extra={"phone_number": number, "mode": mode, "reason": verdict.reason},
        )
        return record

    def run_scenario(self, scenario: TestScenario) -> TestResult:
        """Screen a scenario's number and judge the block/allow outcome.

        Mode and protection are read once and the result is judged with
        the same values the call was screened with.
        """
        mode, protection_active = self._settings_snapshot()
        record = self._screen(
            scenario.phone_number, scenario.description, mode, protection_active
        )
        blocked = record.status is CallStatus.BLOCKED
        if not protection_active:
            success = not blocked
        elif scenario.expects_block:
            success = blocked
        else:
            success = record.block_reason is None

        result = TestResult(
            scenario_id=scenario.id,
            phone_number=scenario.phone_number,
            description=scenario.description,
            category=scenario.category,
            mode=mode,
            expected_block=scenario.expects_block,
            status=record.status,
            block_reason=record.block_reason,
            success=success,
            details=scenario.details,
            timestamp=record.timestamp,
        )
        with self._lock:
            self.test_results = [result] + self.test_results[: self._test_results_limit - 1]
        if not success:
            logger.warning(
                "Scenario %d (%s) failed in %s mode: got %s",
                scenario.id,
                scenario.phone_number,
                mode.value,
                record.status.value,
            )
        return result

    def run_scenarios(self, scenarios: Iterable[TestScenario]) -> List[TestResult]:
        return [self.run_scenario(s) for s in scenarios]

    def run_category(self, category: str) -> List[TestResult]:
        return self.run_scenarios(scenarios_by_category(category))

    def run_difficulty(self, difficulty: int) -> List[TestResult]:
        return self.run_scenarios(scenarios_by_difficulty(difficulty))

    def run_all(self) -> List[TestResult]:
        """Run the whole catalogue after clearing previous results."""
        with self._lock:
            self.test_results = []
        return self.run_scenarios(TEST_SCENARIOS)
