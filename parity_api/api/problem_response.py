"""Problem Responses — maps validation results and errors to HTTP responses.

Invariants:
    - Ok → 200 with the message as a JSON string
    - Problem → INVALID_ID_STATUS with an application/problem+json body
    - All problem bodies go through problem_response (single serialization path)
"""

from fastapi import status
from fastapi.responses import JSONResponse

from parity_api.core.validation_result import Ok, ValidationResult
from parity_api.schemas.problem import PROBLEM_MEDIA_TYPE, ProblemDetails

INVALID_ID_STATUS: int = status.HTTP_400_BAD_REQUEST
BAD_REQUEST_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"


def problem_response(
    problem: ProblemDetails, headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Serialize a ProblemDetails with the RFC 7807 media type."""
    return JSONResponse(
        status_code=problem.status or status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def to_http_response(
    result: ValidationResult, instance: str | None = None,
) -> JSONResponse:
    """Map a ValidationResult to its transport shape."""
    if isinstance(result, Ok):
        return JSONResponse(status_code=status.HTTP_200_OK, content=result.message)
    return problem_response(ProblemDetails(
        type=BAD_REQUEST_TYPE,
        title="Bad Request",
        status=INVALID_ID_STATUS,
        detail=result.detail,
        instance=instance,
    ))
