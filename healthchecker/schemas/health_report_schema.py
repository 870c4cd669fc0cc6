"""Health report request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from healthchecker.schemas.common import EntityId


class HealthReportCreateRequest(BaseModel):
    """New health report."""

    user_id: EntityId
    date: str = Field(..., min_length=1, max_length=64)
    type: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=8000)


class HealthReportUpdateRequest(BaseModel):
    """Partial health report update; omitted fields stay unchanged."""

    date: str | None = Field(default=None, min_length=1, max_length=64)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=8000)


class HealthReportResponse(BaseModel):
    """Stored health report."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    user_id: int
    date: str
    type: str
    description: str
    created_at: datetime
    updated_at: datetime
