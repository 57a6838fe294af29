from fastapi import FastAPI, Request

from .config import settings
from .engine import ClassificationEngine
from .reference_lists import ReferenceLists
from .screener import CallScreener


def init_app(app: FastAPI) -> None:
    """Create and store shared dependencies on the application."""
    engine = ClassificationEngine(ReferenceLists.from_settings(settings))
    app.state.engine = engine
    app.state.screener = CallScreener(
        engine,
        mode=settings.default_mode,
        recent_calls_limit=settings.recent_calls_limit,
        threats_limit=settings.threats_limit,
        test_results_limit=settings.test_results_limit,
    )


def get_engine(request: Request) -> ClassificationEngine:
    return request.app.state.engine


def get_screener(request: Request) -> CallScreener:
    return request.app.state.screener
