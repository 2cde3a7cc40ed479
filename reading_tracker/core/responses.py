"""
Standardized API response envelopes
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .exceptions import ReadingTrackerException

logger = logging.getLogger(__name__)


def success_response(**fields: Any) -> Dict[str, Any]:
    """Helper function to create success response"""
    return {"ok": True, **fields}


def error_response(error: str, **context: Any) -> Dict[str, Any]:
    """Helper function to create error response"""
    return {"ok": False, "error": error, **context}


async def reading_tracker_exception_handler(request: Request, exc: ReadingTrackerException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, **exc.details),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=error_response("Invalid request body or parameters"),
    )


def api_relative_path(path: str) -> str:
    """Strip the API prefix so paths read as they do inside the API"""
    prefix = settings.API_PREFIX.rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        return path[len(prefix):] or "/"
    return path


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched routes and unsupported methods share the same envelope
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content=error_response("Not found", path=api_relative_path(request.url.path), method=request.method),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing handlers to the application"""
    app.add_exception_handler(ReadingTrackerException, reading_tracker_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
