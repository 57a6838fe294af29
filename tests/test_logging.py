import io
import json
import logging

from call_guard.domain.models import AnalysisMode, BlockReason
from call_guard.engine import ClassificationEngine
from call_guard.logging_config import JsonFormatter, configure_logging
from call_guard.screener import CallScreener


def test_json_formatter():
    fmt = JsonFormatter()
    record = fmt.format(
        logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="hello %s",
            args=("world",),
            exc_info=None,
        )
    )
    data = json.loads(record)
    assert data["message"] == "hello world"
    assert data["level"] == "INFO"


def test_configure_logging_keeps_existing_handlers(monkeypatch):
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    configure_logging(level="DEBUG", json_format=True)
    assert root.handlers == [handler]


def test_json_formatter_includes_screening_context():
    record = logging.makeLogRecord(
        {
            "name": "call_guard.screener",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "screened",
            "phone_number": "+712345",
            "mode": AnalysisMode.PERMISSIVE,
            "reason": BlockReason.KNOWN_SPAM,
        }
    )
    data = json.loads(JsonFormatter().format(record))
    assert data["phone_number"] == "+712345"
    assert data["mode"] == "permissive"
    assert data["reason"] == "known_spam"


def test_screener_logs_carry_mode():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    screener_logger = logging.getLogger("call_guard.screener")
    screener_logger.addHandler(handler)
    old_level = screener_logger.level
    screener_logger.setLevel(logging.INFO)
    try:
        CallScreener(ClassificationEngine(), mode=AnalysisMode.AGGRESSIVE).screen_call("+79161234567")
    finally:
        screener_logger.removeHandler(handler)
        screener_logger.setLevel(old_level)
    data = json.loads(stream.getvalue().splitlines()[-1])
    assert data["mode"] == "aggressive"
    assert data["reason"] == "sequential_number"
