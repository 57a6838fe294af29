"""Project configuration loaded from environment variables."""

from typing import Annotated, Any, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .domain.models import AnalysisMode


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(env_prefix="CALL_GUARD_", case_sensitive=False)

    default_mode: AnalysisMode = AnalysisMode.SMART
    known_spam_numbers: Annotated[List[str], NoDecode] = []
    high_risk_numbers: Annotated[List[str], NoDecode] = []
    known_spam_file: str | None = None
    high_risk_file: str | None = None
    strategy_modules: Annotated[List[str], NoDecode] = []
    recent_calls_limit: int = 10
    threats_limit: int = 5
    test_results_limit: int = 15
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    log_file: str | None = None
    log_json: bool = False
    log_max_bytes: int = 1048576
    log_backup_count: int = 3

    @field_validator(
        "known_spam_numbers",
        "high_risk_numbers",
        "strategy_modules",
        mode="before",
    )
    @classmethod
    def _split_csv(cls, v: Any) -> List[str]:
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return list(v) if v else []

    @field_validator("default_mode", mode="before")
    @classmethod
    def _parse_mode(cls, v: Any) -> AnalysisMode:
        return AnalysisMode.parse(v)


try:
    settings = Settings()
except Exception as exc:  # ValidationError or others
    raise RuntimeError(f"Invalid call-guard configuration: {exc}") from exc
