import logging

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from call_guard.exceptions import ReferenceListError, UnknownCategoryError, UnknownModeError

logger = logging.getLogger(__name__)


def bad_request_handler(request: Request, exc: UnknownModeError | UnknownCategoryError):
    logger.warning("Rejected request to %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def reference_list_error_handler(request: Request, exc: ReferenceListError):
    logger.error("Reference list error: %s", exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


async def exception_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled exception")
        raise HTTPException(status_code=500, detail="Internal server error") from exc
