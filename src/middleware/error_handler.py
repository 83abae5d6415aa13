from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..contacts.errors import ContactError

logger = logging.getLogger(__name__)


def contact_error_handler(request: Request, exc: ContactError) -> JSONResponse:
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
    )
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]
    logger.warning(f"{request.method} {request.url.path} -> 400: invalid request body")
    return JSONResponse({"message": "Invalid request body", "errors": errors}, status_code=400)


def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the traceback, hide the details from the client."""
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
    )
    return JSONResponse({"message": "Internal server error"}, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContactError, contact_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, error_handler)
