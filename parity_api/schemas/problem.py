"""Problem Details Schema — RFC 7807 response body.

Invariants:
    - `type` defaults to "about:blank" when no specific problem type applies
    - Extension members (e.g. `code`, `errors`) are allowed and serialized as-is
    - Serialized without null members, media type application/problem+json
"""

from pydantic import BaseModel, ConfigDict


PROBLEM_MEDIA_TYPE = "application/problem+json"


class ProblemDetails(BaseModel):
    """Model of the RFC 7807 Problem response schema."""

    model_config = ConfigDict(extra="allow")

    type: str = "about:blank"
    title: str
    status: int | None = None
    detail: str | None = None
    instance: str | None = None
