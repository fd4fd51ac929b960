"""Health Schemas — liveness probe response."""

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    service: str
    version: str
    environment: str
