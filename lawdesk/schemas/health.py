"""Health check API schemas."""

from pydantic import BaseModel, Field

from lawdesk.schemas.common import UtcDatetime


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="OK", description="Service status")
    timestamp: UtcDatetime = Field(..., description="Server time (UTC)")
