"""Health check API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (200 when the search backend answers, else 503)."""

    status: str = Field(default="ok", description="ok | error")
    message: str
    elasticsearch: str = Field(..., description="connected | disconnected")
    timestamp: datetime
