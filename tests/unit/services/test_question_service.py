"""Unit tests for the questionnaire service."""

import pytest

from learning_patterns.core.errors import ValidationError
from learning_patterns.services.question_service import (
    QuestionService,
    default_categories,
    default_questions,
)


def test_default_questions_shape():
    questions = default_questions()
    assert len(questions) == 5
    first = questions[0]
    assert first["category"] == "information_processing"
    assert [option["pattern"] for option in first["options"]] == [
        "visual",
        "auditory",
        "kinesthetic",
        "social",
    ]
    assert [option["id"] for option in first["options"]] == ["a", "b", "c", "d"]


@pytest.mark.asyncio
async def test_questions_seeded_on_first_read(storage):
    service = QuestionService(storage)

    questions = await service.get_questions()

    assert questions == default_questions()
    assert await storage.questions.read("questions") == questions


@pytest.mark.asyncio
async def test_stored_questions_win_over_defaults(storage):
    service = QuestionService(storage)
    saved = await service.save_questions([{"id": 1, "question": "Custom?"}])

    assert saved == {"message": "Questions saved successfully", "count": 1}
    assert await service.get_questions() == [{"id": 1, "question": "Custom?"}]


@pytest.mark.asyncio
async def test_save_questions_requires_list(storage):
    with pytest.raises(ValidationError) as exc_info:
        await QuestionService(storage).save_questions({"id": 1})
    assert exc_info.value.message == "Questions must be a list"


@pytest.mark.asyncio
async def test_categories_seeded_on_first_read(storage):
    categories = await QuestionService(storage).get_categories()
    assert categories == default_categories()
    assert categories[1]["name"] == "Memory Retention"
