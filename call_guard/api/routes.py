import logging
from typing import List

from fastapi import APIRouter, Depends
from prometheus_client import Counter

from call_guard.config import settings
from call_guard.dependencies import get_engine, get_screener
from call_guard.domain.models import AnalysisMode
from call_guard.engine import ClassificationEngine
from call_guard.screener import CallScreener
from .schemas import (
    CallRecordOut,
    ClassifyRequest,
    ClassifyResponse,
    ModeInfo,
    ModeRequest,
    ScenarioResultOut,
    ScenarioRunRequest,
    ScenarioRunResponse,
    ScreenRequest,
    StateResponse,
    ThreatAlertOut,
    VerdictResult,
)

logger = logging.getLogger(__name__)

CLASSIFICATIONS_TOTAL = Counter(
    "call_guard_classifications_total",
    "Total number of classified phone numbers",
    ["mode", "reason"],
)

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/modes", response_model=List[ModeInfo])
def list_modes() -> List[ModeInfo]:
    return [
        ModeInfo(mode=m, name=m.display_name, description=m.description)
        for m in AnalysisMode
    ]


@router.post("/classify", response_model=ClassifyResponse)
def classify_numbers(
    request: ClassifyRequest,
    engine: ClassificationEngine = Depends(get_engine),
) -> ClassifyResponse:
    mode = request.mode or settings.default_mode
    results = []
    for number in request.numbers:
        verdict = engine.classify(number, mode)
        CLASSIFICATIONS_TOTAL.labels(
            mode=mode.value,
            reason=verdict.reason.value if verdict.reason else "allow",
        ).inc()
        results.append(
            VerdictResult(
                phone_number=number,
                blocked=verdict.blocked,
                reason=verdict.reason,
                reason_name=verdict.reason.display_name if verdict.reason else None,
                threat_type=verdict.threat_type if verdict.blocked else None,
            )
        )
    logger.info("Classified %d numbers in %s mode", len(results), mode.value)
    return ClassifyResponse(mode=mode, results=results)


def _state(screener: CallScreener) -> StateResponse:
    return StateResponse(
        protection_active=screener.protection_active,
        mode=screener.mode,
        blocked_count=screener.blocked_count,
        recent_calls=[CallRecordOut.model_validate(c) for c in screener.recent_calls],
        threats=[ThreatAlertOut.model_validate(t) for t in screener.threats],
    )


@router.get("/state", response_model=StateResponse)
def get_state(screener: CallScreener = Depends(get_screener)) -> StateResponse:
    return _state(screener)


@router.post("/screen", response_model=CallRecordOut)
def screen_call(
    request: ScreenRequest,
    screener: CallScreener = Depends(get_screener),
) -> CallRecordOut:
    record = screener.screen_call(request.number, request.contact_name)
    return CallRecordOut.model_validate(record)


@router.post("/protection", response_model=StateResponse)
def toggle_protection(screener: CallScreener = Depends(get_screener)) -> StateResponse:
    screener.toggle_protection()
    return _state(screener)


@router.post("/mode", response_model=StateResponse)
def set_mode(
    request: ModeRequest,
    screener: CallScreener = Depends(get_screener),
) -> StateResponse:
    screener.set_mode(request.mode)
    return _state(screener)


@router.post("/scenarios/run", response_model=ScenarioRunResponse)
def run_scenarios(
    request: ScenarioRunRequest,
    screener: CallScreener = Depends(get_screener),
) -> ScenarioRunResponse:
    if request.category:
        results = screener.run_category(request.category)
    elif request.difficulty:
        results = screener.run_difficulty(request.difficulty)
    else:
        results = screener.run_all()
    return ScenarioRunResponse(
        passed=sum(r.success for r in results),
        total=len(results),
        results=[ScenarioResultOut.model_validate(r) for r in results],
    )
