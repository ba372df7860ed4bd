"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON responses with one envelope:
{"timestamp", "error", "message", "details"}.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tenant_users.core.config import get_settings
from tenant_users.domain.exceptions import UserServiceException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "TENANT_REQUIRED": 400,
    "RESOURCE_NOT_FOUND": 404,
    "USER_ALREADY_EXISTS": 409,
}


def error_body(error: str, message: Any, details: Any = None) -> dict[str, Any]:
    """Build the JSON error envelope shared by every handler."""
    return {
        "timestamp": datetime.now(UTC).isoformat(),
        "error": error,
        "message": message,
        "details": details if details is not None else {},
    }


def _user_service_exception_handler(
    request: Request, exc: UserServiceException
) -> JSONResponse:
    """Return JSON from UserServiceException.to_dict() with its mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    body = exc.to_dict()
    return JSONResponse(
        status_code=status,
        content=error_body(body["error"], body["message"], body["details"]),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with field violations built from pydantic errors."""
    violations = [
        {
            "field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(
            error_body(
                "VALIDATION_ERROR",
                "Request validation failed",
                {"violations": violations},
            )
        ),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body("HTTP_ERROR", exc.detail),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=error_body("INTERNAL_ERROR", detail),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: UserServiceException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(UserServiceException, _user_service_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
