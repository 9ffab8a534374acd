"""Cognitive assessment routes."""

from typing import Any

from fastapi import APIRouter

from learning_patterns.core.dependencies import Storage
from learning_patterns.schemas.v1.cognitive import (
    CognitiveCalculateRequest,
    CognitiveSaveRequest,
    CompareRequest,
)
from learning_patterns.schemas.v1.common import ErrorResponse, SaveResultsResponse
from learning_patterns.services.cognitive_service import CognitiveService

router = APIRouter(prefix="/cognitive-assessment", tags=["cognitive-assessment"])


@router.get("/questions", responses={404: {"model": ErrorResponse}})
async def get_questions(storage: Storage) -> Any:
    service = CognitiveService(storage)
    return await service.get_questions()


@router.post("/calculate-results", responses={400: {"model": ErrorResponse}})
async def calculate_results(request: CognitiveCalculateRequest, storage: Storage) -> dict[str, Any]:
    """Score a cognitive assessment from answers or scenario responses."""
    service = CognitiveService(storage)
    return await service.calculate_results(
        answers=request.answers,
        responses=request.responses,
        behavior_data=request.behavior_data,
        assessment_type=request.assessment_type,
    )


@router.post("/save-results", response_model=SaveResultsResponse)
async def save_results(request: CognitiveSaveRequest, storage: Storage):
    service = CognitiveService(storage)
    return await service.save_results(
        results=request.results,
        total_time=request.total_time,
        user_id=request.user_id,
    )


@router.get("/assessment/{assessment_id}", responses={404: {"model": ErrorResponse}})
async def get_assessment(assessment_id: str, storage: Storage) -> dict[str, Any]:
    service = CognitiveService(storage)
    return await service.get_assessment(assessment_id)


@router.get("/user/{user_id}")
async def list_user_assessments(user_id: str, storage: Storage) -> list[dict[str, Any]]:
    service = CognitiveService(storage)
    return await service.list_user_assessments(user_id)


@router.get("/profile/{user_id}", responses={404: {"model": ErrorResponse}})
async def get_profile(user_id: str, storage: Storage) -> dict[str, Any]:
    service = CognitiveService(storage)
    return await service.get_profile(user_id)


@router.get("/recommendations/{user_id}", responses={404: {"model": ErrorResponse}})
async def get_recommendations(user_id: str, storage: Storage) -> dict[str, Any]:
    """Detailed recommendations from the user's latest cognitive result."""
    service = CognitiveService(storage)
    return await service.get_recommendations(user_id)


@router.post("/compare", responses={404: {"model": ErrorResponse}})
async def compare_assessments(request: CompareRequest, storage: Storage) -> dict[str, Any]:
    service = CognitiveService(storage)
    return await service.compare(request.assessment_id_1, request.assessment_id_2)


@router.get("/dimensions/explanations")
async def get_dimension_explanations(storage: Storage) -> dict[str, Any]:
    service = CognitiveService(storage)
    return service.get_dimension_explanations()
