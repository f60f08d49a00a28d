"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error leaves the app in
the callable-protocol envelope {"error": {"status", "message", "details"?}}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.enums import CallableStatus
from app.domain.exceptions import ProvisioningException

logger = logging.getLogger(__name__)


def _status_code_for(error_code: str) -> int:
    try:
        return CallableStatus(error_code).http_status
    except ValueError:
        return 500


def _provisioning_exception_handler(
    request: Request, exc: ProvisioningException
) -> JSONResponse:
    """Return the error envelope with the status code paired to exc.error_code."""
    return JSONResponse(
        status_code=_status_code_for(exc.error_code),
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are INVALID_ARGUMENT (400)."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "status": CallableStatus.INVALID_ARGUMENT.value,
                "message": "Request validation failed",
                "details": {"errors": errors},
            }
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the error envelope for Starlette HTTP exceptions (404, 405, ...)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"status": "HTTP_ERROR", "message": exc.detail}},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500 INTERNAL; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": {"status": CallableStatus.INTERNAL.value, "message": detail}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: ProvisioningException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(ProvisioningException, _provisioning_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
