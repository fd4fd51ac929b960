"""Minimal Identifier Route — GET /minimal-dus/{id} parity check.

Invariants:
    - `id` must be an optionally signed run of digits (surrounding whitespace
      allowed); floats, exponents and underscores fail validation with 400
    - Parse failures go through the RequestValidationError handler and never
      reach evaluate_id
    - Route holds no logic: evaluate_id decides, to_http_response maps
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Request
from fastapi.responses import JSONResponse

from parity_api.api.problem_response import to_http_response
from parity_api.core.evaluate_id import evaluate_id
from parity_api.core.validation_result import is_ok
from parity_api.schemas.problem import ProblemDetails

logger = logging.getLogger(__name__)
router = APIRouter(tags=["minimal"])

# Lax int parsing would accept "4.0" and "4_0"
INTEGER_SEGMENT_PATTERN = r"^\s*[+-]?\d+\s*$"


@router.get(
    "/minimal-dus/{id}",
    response_model=str,
    responses={400: {"model": ProblemDetails, "description": "Invalid Id"}},
)
async def validate_minimal_id(
    id: Annotated[str, Path(pattern=INTEGER_SEGMENT_PATTERN)],
    request: Request,
) -> JSONResponse:
    """Return "Valid ID" for even identifiers, a problem response for odd ones."""
    identifier = int(id)
    result = evaluate_id(identifier)
    logger.debug(
        "Evaluated identifier",
        extra={
            "identifier": identifier,
            "outcome": "ok" if is_ok(result) else "problem",
        },
    )
    return to_http_response(result, instance=request.url.path)
