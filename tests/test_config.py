from pathlib import Path

import pytest
from pydantic import ValidationError

from call_guard.config import Settings
from call_guard.domain.models import AnalysisMode
from call_guard.exceptions import ReferenceListError
from call_guard.reference_lists import DEFAULT_HIGH_RISK, DEFAULT_KNOWN_SPAM, ReferenceLists


def test_settings_defaults(monkeypatch):
    for name in ("CALL_GUARD_DEFAULT_MODE", "CALL_GUARD_KNOWN_SPAM_NUMBERS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.default_mode is AnalysisMode.SMART
    assert settings.known_spam_numbers == []
    assert settings.recent_calls_limit == 10


def test_settings_env(monkeypatch):
    monkeypatch.setenv("CALL_GUARD_DEFAULT_MODE", "Aggressive")
    monkeypatch.setenv("CALL_GUARD_KNOWN_SPAM_NUMBERS", "+111, +222,")
    monkeypatch.setenv("CALL_GUARD_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.default_mode is AnalysisMode.AGGRESSIVE
    assert settings.known_spam_numbers == ["+111", "+222"]
    assert settings.log_level == "DEBUG"


def test_settings_invalid_mode(monkeypatch):
    monkeypatch.setenv("CALL_GUARD_DEFAULT_MODE", "paranoid")
    with pytest.raises(ValidationError):
        Settings()


def test_reference_lists_defaults():
    lists = ReferenceLists.from_settings(Settings(known_spam_numbers=[], high_risk_numbers=[]))
    assert lists.known_spam == DEFAULT_KNOWN_SPAM
    assert lists.high_risk == DEFAULT_HIGH_RISK


def test_reference_lists_inline_and_file(tmp_path: Path):
    file = tmp_path / "high.txt"
    file.write_text("+700\n\n +701 \n", encoding="utf-8")
    lists = ReferenceLists.from_settings(
        Settings(known_spam_numbers=["+111"], high_risk_file=str(file))
    )
    assert lists.known_spam == frozenset({"+111"})
    assert lists.high_risk == frozenset({"+700", "+701"})


def test_reference_list_missing_file(tmp_path: Path):
    with pytest.raises(ReferenceListError):
        ReferenceLists.from_settings(Settings(known_spam_file=str(tmp_path / "nope.txt")))


def test_settings_strategy_modules(monkeypatch):
    monkeypatch.setenv("CALL_GUARD_STRATEGY_MODULES", "pkg.rules,other.rules")
    assert Settings().strategy_modules == ["pkg.rules", "other.rules"]
