from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from call_guard.domain.models import (
    AnalysisMode,
    BlockReason,
    CallStatus,
    ThreatType,
)


class ClassifyRequest(BaseModel):
    numbers: List[str] = Field(..., min_length=1, max_length=1000)
    mode: Optional[AnalysisMode] = None  # server default when omitted


class VerdictResult(BaseModel):
    phone_number: str
    blocked: bool
    reason: Optional[BlockReason] = None
    reason_name: Optional[str] = None
    threat_type: Optional[ThreatType] = None

    model_config = ConfigDict(use_enum_values=True)


class ClassifyResponse(BaseModel):
    mode: AnalysisMode
    results: List[VerdictResult]

    model_config = ConfigDict(use_enum_values=True)


class ModeInfo(BaseModel):
    mode: AnalysisMode
    name: str
    description: str

    model_config = ConfigDict(use_enum_values=True)


class ScreenRequest(BaseModel):
    number: str
    contact_name: Optional[str] = None


class ModeRequest(BaseModel):
    mode: AnalysisMode


class CallRecordOut(BaseModel):
    phone_number: str
    status: CallStatus
    timestamp: datetime
    contact_name: Optional[str] = None
    block_reason: Optional[BlockReason] = None

    model_config = ConfigDict(use_enum_values=True, from_attributes=True)


class ThreatAlertOut(BaseModel):
    phone_number: str
    threat_type: ThreatType
    block_reason: BlockReason
    timestamp: datetime

    model_config = ConfigDict(use_enum_values=True, from_attributes=True)


class StateResponse(BaseModel):
    protection_active: bool
    mode: AnalysisMode
    blocked_count: int
    recent_calls: List[CallRecordOut]
    threats: List[ThreatAlertOut]

    model_config = ConfigDict(use_enum_values=True)


class ScenarioRunRequest(BaseModel):
    category: Optional[str] = None
    difficulty: Optional[int] = Field(None, ge=1, le=3)


class ScenarioResultOut(BaseModel):
    scenario_id: int
    phone_number: str
    description: str
    category: str
    mode: AnalysisMode
    expected_block: bool
    status: CallStatus
    block_reason: Optional[BlockReason] = None
    success: bool
    details: str

    model_config = ConfigDict(use_enum_values=True, from_attributes=True)


class ScenarioRunResponse(BaseModel):
    passed: int
    total: int
    results: List[ScenarioResultOut]
