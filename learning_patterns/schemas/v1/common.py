"""Shared request/response schemas."""

from pydantic import BaseModel, ConfigDict


class CamelModel(BaseModel):
    """Accepts both the camelCase wire names and the Python field names."""

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    detail: str
    errors: dict | None = None


class SaveResultsResponse(CamelModel):
    message: str
    assessmentId: str
    userId: str
