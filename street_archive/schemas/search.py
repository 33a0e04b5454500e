"""Search and delete API schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class StreetHitResponse(BaseModel):
    """Single search hit: record id and its returned fields (keyed by field name)."""

    id: str
    fields: dict[str, str] = Field(
        ..., description="שם ראשי, תואר, שם מישני, סוג, קוד, שכונה"
    )


class SearchResponse(BaseModel):
    """Search response. mode is the mode actually applied."""

    hits: list[StreetHitResponse]
    total: int = Field(..., ge=0, description="Total matches (hits are capped at 100)")
    mode: Literal["free", "exact", "full"]


class DeleteResponse(BaseModel):
    """Soft delete confirmation."""

    success: bool = True
    message: str
    id: str


class ErrorResponse(BaseModel):
    """Error body returned by all exception handlers."""

    error: str
    code: str
    details: dict | None = None
