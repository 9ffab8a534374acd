"""Questionnaire routes."""

from typing import Any

from fastapi import APIRouter, Body

from learning_patterns.core.dependencies import Storage
from learning_patterns.schemas.v1.questions import QuestionsSavedResponse
from learning_patterns.services.question_service import QuestionService

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("")
async def get_questions(storage: Storage) -> Any:
    """Question bank, seeded with defaults on first read."""
    service = QuestionService(storage)
    return await service.get_questions()


@router.post("", response_model=QuestionsSavedResponse)
async def save_questions(storage: Storage, questions: Any = Body(...)):
    service = QuestionService(storage)
    return await service.save_questions(questions)


@router.get("/categories")
async def get_categories(storage: Storage) -> Any:
    service = QuestionService(storage)
    return await service.get_categories()
