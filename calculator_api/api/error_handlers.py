"""Error Handlers — global exception handlers mapping every fault to the error envelope.

Invariants:
    - CalculatorError → its own status code and fixed message
    - StarletteHTTPException (404 unknown route, 405 wrong method) → same envelope
    - Exception (catch-all) → 500 envelope
    - All three go through normalize_error(); include_stack is fixed at registration

Design Decisions:
    - Layered handlers: domain, HTTP, catch-all
    - include_stack passed in by create_app() from Settings, never read ambiently
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calculator_api.core.errors import CalculatorError
from calculator_api.core.normalize_error import normalize_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, include_stack: bool = False) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_calculator_error_handler(app, include_stack)
    _register_http_error_handler(app, include_stack)
    _register_generic_error_handler(app, include_stack)


def error_response(fault: BaseException, include_stack: bool) -> JSONResponse:
    """Normalize a fault and wrap it in a JSONResponse."""
    status_code, envelope = normalize_error(fault, include_stack=include_stack)
    headers = getattr(fault, "headers", None)
    return JSONResponse(
        status_code=status_code, content=envelope, headers=headers,
    )


def _register_calculator_error_handler(app: FastAPI, include_stack: bool) -> None:
    """Register calculator domain error handler."""

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        logger.warning(
            f"CalculatorError: {exc.message}",
            extra={**exc.log_context(), "path": request.url.path},
        )
        return error_response(exc, include_stack)


def _register_http_error_handler(app: FastAPI, include_stack: bool) -> None:
    """Register handler for routing-level HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"status_code": exc.status_code, "path": request.url.path},
        )
        return error_response(exc, include_stack)


def _register_generic_error_handler(app: FastAPI, include_stack: bool) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return error_response(exc, include_stack)
