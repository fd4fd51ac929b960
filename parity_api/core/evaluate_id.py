"""Identifier Parity Check — accepts even identifiers, rejects odd ones.

Invariants:
    - evaluate_id is PURE: no IO, no logging, no hidden state
    - Zero and negative even numbers are valid; sign never changes parity
    - Message strings are the single source of truth for the wire payloads
"""

from parity_api.core.validation_result import Ok, Problem, ValidationResult


VALID_ID_MESSAGE: str = "Valid ID"
INVALID_ID_DETAIL: str = "Invalid Id"


def evaluate_id(id: int) -> ValidationResult:
    """Return Ok for even identifiers, Problem for odd ones."""
    # Python's % is floored; -3 % 2 == 1, so parity holds for negatives too
    if id % 2 == 0:
        return Ok(VALID_ID_MESSAGE)
    return Problem(INVALID_ID_DETAIL)
