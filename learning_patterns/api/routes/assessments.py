"""Learning-pattern assessment routes."""

import logging
from typing import Any

from fastapi import APIRouter

from learning_patterns.core.dependencies import Storage
from learning_patterns.schemas.v1.assessments import CalculateResultsRequest, SaveResultsRequest
from learning_patterns.schemas.v1.common import ErrorResponse, SaveResultsResponse
from learning_patterns.services.assessment_service import AssessmentService

router = APIRouter(prefix="/assessments", tags=["assessments"])
logger = logging.getLogger(__name__)


@router.post("/calculate-results", responses={400: {"model": ErrorResponse}})
async def calculate_results(request: CalculateResultsRequest, storage: Storage) -> dict[str, Any]:
    """Score questionnaire answers with the requested algorithm."""
    service = AssessmentService(storage)
    return await service.calculate_results(
        answers=request.answers,
        algorithm=request.algorithm,
        behavior_data=request.behavior_data,
    )


@router.post("/save-results", response_model=SaveResultsResponse)
async def save_results(request: SaveResultsRequest, storage: Storage):
    """Persist results and update the user's learning profile."""
    service = AssessmentService(storage)
    return await service.save_results(
        results=request.results,
        timestamp=request.timestamp,
        user_id=request.user_id,
    )


@router.get("/user/{user_id}")
async def list_user_assessments(user_id: str, storage: Storage) -> list[dict[str, Any]]:
    """All stored assessments for a user, newest first."""
    service = AssessmentService(storage)
    return await service.list_user_assessments(user_id)


@router.get("/{assessment_id}", responses={404: {"model": ErrorResponse}})
async def get_assessment(assessment_id: str, storage: Storage) -> dict[str, Any]:
    service = AssessmentService(storage)
    return await service.get_assessment(assessment_id)
