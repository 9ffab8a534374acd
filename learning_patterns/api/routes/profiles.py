"""Learning profile routes."""

from typing import Any

from fastapi import APIRouter, Body

from learning_patterns.core.dependencies import Storage
from learning_patterns.schemas.v1.common import ErrorResponse
from learning_patterns.schemas.v1.profiles import (
    ProfileRecommendationsResponse,
    ProfileUpdateResponse,
)
from learning_patterns.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/{user_id}", responses={404: {"model": ErrorResponse}})
async def get_profile(user_id: str, storage: Storage) -> dict[str, Any]:
    service = ProfileService(storage)
    return await service.get_profile(user_id)


@router.put("/{user_id}", response_model=ProfileUpdateResponse)
async def update_profile(
    user_id: str,
    storage: Storage,
    changes: dict[str, Any] = Body(...),
):
    """Shallow-merge the body into the stored profile."""
    service = ProfileService(storage)
    return await service.update_profile(user_id, changes)


@router.get(
    "/{user_id}/recommendations",
    response_model=ProfileRecommendationsResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_recommendations(user_id: str, storage: Storage):
    service = ProfileService(storage)
    return await service.get_recommendations(user_id)


@router.get("/{user_id}/learning-history", responses={404: {"model": ErrorResponse}})
async def get_learning_history(user_id: str, storage: Storage) -> list[Any]:
    service = ProfileService(storage)
    return await service.get_learning_history(user_id)
