"""Question bank schemas."""

from pydantic import BaseModel


class QuestionsSavedResponse(BaseModel):
    message: str
    count: int
