from fastapi import FastAPI

from call_guard.bootstrap import initialize
from call_guard.dependencies import init_app
from call_guard.domain.models import AnalysisMode, BlockReason
from call_guard.exceptions import ReferenceListError, UnknownCategoryError, UnknownModeError

from .routes import router
from .errors import bad_request_handler, exception_middleware, reference_list_error_handler
from .schemas import ClassifyResponse, VerdictResult

initialize()

app = FastAPI(title="Call Guard API", version="1.0")
init_app(app)

app.include_router(router)

app.add_exception_handler(UnknownModeError, bad_request_handler)
app.add_exception_handler(UnknownCategoryError, bad_request_handler)
app.add_exception_handler(ReferenceListError, reference_list_error_handler)
app.middleware("http")(exception_middleware)

__all__ = [
    "app",
    "AnalysisMode",
    "BlockReason",
    "ClassifyResponse",
    "VerdictResult",
]
