"""FastAPI adapter – FastAPIExceptionMapper.

Every error response has the body ``{"error": "<message>"}``.

Mappings
--------
``RequestValidationError`` → 400 (malformed body or path id)
``ValidationError``        → 400
``NotFoundError``          → 404
``UnauthorizedError``      → 401
anything else              → 500 ``"Internal server error"``
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from radioking.kernel.errors import BaseError, NotFoundError, UnauthorizedError, ValidationError
from radioking.kernel.messaging import MessagingError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_ID_MESSAGE = "Invalid playlist ID format"
INVALID_JSON_MESSAGE = "Invalid JSON payload"
VALIDATION_FAILED_MESSAGE = "Validation failed"


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def _request_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        return INVALID_ID_MESSAGE
    if any(err.get("type") == "json_invalid" for err in errors):
        return INVALID_JSON_MESSAGE
    return VALIDATION_FAILED_MESSAGE


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app."""

    def __init__(self) -> None:
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (UnauthorizedError, 401),
        ]

    def register(self, app: FastAPI) -> None:
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._make_handler(status))

        app.add_exception_handler(RequestValidationError, self._handle_request_validation)  # type: ignore[arg-type]
        # BaseError and MessagingError are caught before the server-error
        # middleware; the bare Exception handler is the last resort.
        for exc_type in (BaseError, MessagingError, Exception):
            app.add_exception_handler(exc_type, self._handle_internal)

    @staticmethod
    def _make_handler(status: int) -> Callable[[Request, Any], JSONResponse]:
        def handler(request: Request, exc: Any) -> JSONResponse:
            logger.info(
                "http.request_rejected method=%s path=%s status=%d error=%s",
                request.method,
                request.url.path,
                status,
                exc.to_dict(),
            )
            return JSONResponse(status_code=status, content=error_body(exc.message))

        return handler

    @staticmethod
    def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _request_validation_message(exc)
        logger.info(
            "http.invalid_request method=%s path=%s error=%s details=%s",
            request.method,
            request.url.path,
            message,
            exc.errors(),
        )
        return JSONResponse(status_code=400, content=error_body(message))

    @staticmethod
    def _handle_internal(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "http.internal_error method=%s path=%s exc=%r",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=error_body(INTERNAL_ERROR_MESSAGE))


__all__ = ["FastAPIExceptionMapper", "error_body"]
