"""Profile schemas."""

from typing import Any

from pydantic import BaseModel


class ProfileUpdateResponse(BaseModel):
    message: str
    profile: dict[str, Any]


class ProfileRecommendationsResponse(BaseModel):
    studyTechniques: list[str]
    environmentalFactors: list[str]
    resourceTypes: list[str]
    generalTips: list[str]
