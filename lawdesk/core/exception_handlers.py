"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error body has the
shape {"error": message} (plus "field" when a single input is at fault).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lawdesk.core.config import get_settings
from lawdesk.domain.exceptions import LawdeskException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "CONFLICT": 400,
    "AUTHENTICATION_ERROR": 401,
    "INVALID_TOKEN": 403,
    "RESOURCE_NOT_FOUND": 404,
    "DOCUMENT_STORE_ERROR": 500,
}

_INTERNAL_ERROR = "Internal server error"


def _lawdesk_exception_handler(request: Request, exc: LawdeskException) -> JSONResponse:
    """Return JSON from LawdeskException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
        return JSONResponse(status_code=status, content={"error": _INTERNAL_ERROR})
    return JSONResponse(status_code=status, content=exc.to_dict())


def _error_field(loc: tuple[Any, ...]) -> str | None:
    """Client-facing field path from a pydantic error location (drops body/query prefix)."""
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or None


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 describing the first invalid field."""
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"error": "Invalid request"})
    first = errors[0]
    if first.get("type") == "json_invalid":
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})
    field = _error_field(tuple(first.get("loc", ())))
    message = first.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    content: dict[str, Any] = {"error": f"{field}: {message}" if field else message}
    if field:
        content["field"] = field
    return JSONResponse(status_code=400, content=content)


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (unknown route, wrong method)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail = str(exc) if get_settings().debug else _INTERNAL_ERROR
    return JSONResponse(status_code=500, content={"error": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: LawdeskException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(LawdeskException, _lawdesk_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
