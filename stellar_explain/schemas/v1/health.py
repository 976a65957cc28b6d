"""Health check schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    network: str | None = None
    version: str | None = None


class ReadyResponse(BaseModel):
    status: str
    horizon_reachable: bool = False
