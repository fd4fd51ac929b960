"""Error Handlers — global exception handlers for the Parity API.

Invariants:
    - ParityApiError → RFC 7807 problem with error code
    - RequestValidationError → 400 problem with field-level `errors`
    - Starlette HTTPException (404, 405, ...) → problem with the same status
    - Exception (catch-all) → 500 problem, never leaks internal details

Design Decisions:
    - Framework exceptions are converted into ParityApiError subclasses first,
      so one function owns logging and serialization
    - Extracted from main.py so create_app stays a thin bootstrap
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from parity_api.api.problem_response import problem_response
from parity_api.core.errors import (
    HttpError, InternalServiceError, ParityApiError, RequestValidationFailed,
)
from parity_api.schemas.problem import ProblemDetails

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_parity_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_parity_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ParityApiError)
    async def parity_error_handler(request: Request, exc: ParityApiError):
        return _render(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors (e.g. non-integer path ids)."""
        return _render(request, RequestValidationFailed(
            _build_field_errors(exc),
        ))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle routing errors raised by Starlette (404, 405)."""
        message = exc.detail if isinstance(exc.detail, str) else None
        return _render(
            request, HttpError(exc.status_code, message), exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return _render(request, InternalServiceError(), log=False)


def _render(
    request: Request,
    exc: ParityApiError,
    headers: dict[str, str] | None = None,
    log: bool = True,
):
    if log:
        level = logging.WARNING if exc.is_client_error else logging.ERROR
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "status_code": exc.http_status,
                "path": request.url.path,
                "method": request.method,
            },
        )
    problem = ProblemDetails(**exc.to_problem_fields(request.url.path))
    return problem_response(problem, headers)


def _build_field_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
