"""Validation Result — two-variant sum type returned by identifier checks.

Invariants:
    - A result is exactly one of Ok or Problem, never both
    - Both variants are immutable (frozen dataclasses)
    - Mapping to HTTP status codes happens at the API boundary, not here

Design Decisions:
    - Sum type over raise/except: invalid identifiers are an expected outcome,
      not an exceptional one (ADR: no exceptions for control flow)
"""

from dataclasses import dataclass

@dataclass(frozen=True)
class Ok:
    """Identifier accepted."""
    message: str


@dataclass(frozen=True)
class Problem:
    """Identifier rejected — detail becomes the problem response `detail`."""
    detail: str


ValidationResult = Ok | Problem


def is_ok(result: ValidationResult) -> bool:
    return isinstance(result, Ok)
