"""Error Hierarchy — typed, categorized exceptions for transport-level failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; server errors (500-level) are critical
    - to_problem_fields() produces the RFC 7807 members; schemas/ builds the model
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ParityApiError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Identifier parity is NOT an error: evaluate_id returns a Problem value instead
"""

from enum import Enum
from http import HTTPStatus
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PROTOCOL = "protocol"
    INTERNAL = "internal"


def status_phrase(http_status: int) -> str:
    """Reason phrase for a status code ('Error' for unregistered codes)."""
    try:
        return HTTPStatus(http_status).phrase
    except ValueError:
        return "Error"


class ParityApiError(Exception):
    """Base exception for all Parity API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        extensions: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.extensions = extensions or {}

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500

    def to_problem_fields(self, instance: str | None = None) -> dict:
        """RFC 7807 members plus `code` and any extension members."""
        return {
            "type": "about:blank",
            "title": status_phrase(self.http_status),
            "status": self.http_status,
            "detail": self.message,
            "instance": instance,
            "code": self.code,
            **self.extensions,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(ParityApiError):
    """Path, query or body parameters failed to parse."""
    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400,
            {"errors": errors},
        )
        self.errors = errors


class HttpError(ParityApiError):
    """Routing or protocol failure reported by the framework (404, 405, ...)."""
    def __init__(self, http_status: int, message: str | None = None):
        phrase = status_phrase(http_status)
        category = (
            ErrorCategory.RESOURCE_NOT_FOUND if http_status == 404
            else ErrorCategory.PROTOCOL
        )
        super().__init__(
            message or phrase,
            phrase.upper().replace(" ", "_").replace("-", "_"),
            category,
            ErrorSeverity.WARNING if http_status < 500 else ErrorSeverity.CRITICAL,
            http_status,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalServiceError(ParityApiError):
    """Unexpected failure — message is fixed so internals never leak."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
