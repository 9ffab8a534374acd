"""Cognitive assessment schemas."""

from typing import Any

from pydantic import Field

from learning_patterns.schemas.v1.common import CamelModel


class CognitiveCalculateRequest(CamelModel):
    answers: Any = None
    responses: Any = None
    behavior_data: Any = Field(default=None, alias="behaviorData")
    assessment_type: str | None = Field(default=None, alias="assessmentType")


class CognitiveSaveRequest(CamelModel):
    results: Any = None
    total_time: Any = Field(default=None, alias="totalTime")
    user_id: str | None = Field(default=None, alias="userId")


class CompareRequest(CamelModel):
    assessment_id_1: str = Field(alias="assessmentId1")
    assessment_id_2: str = Field(alias="assessmentId2")
