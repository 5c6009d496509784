"""Health Schemas — response contract of the liveness probe."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness payload — always status OK."""
    status: Literal["OK"] = "OK"
    message: str
    timestamp: str
    uptime: float = Field(ge=0)
