"""Health check schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str


class ReadyResponse(BaseModel):
    status: str
    storage: bool = False
    dependencies: dict[str, bool] = Field(default_factory=dict)
