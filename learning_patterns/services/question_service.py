"""Question service - the questionnaire bank and its section catalogue.

Both documents are seeded with built-in defaults the first time they are read.
"""

from __future__ import annotations

from typing import Any

import structlog

from learning_patterns.core.errors import ValidationError
from learning_patterns.core.storage import StorageContext
from learning_patterns.persistence.question_repository import QuestionRepository

logger = structlog.get_logger(__name__)

OPTION_PATTERNS = ("visual", "auditory", "kinesthetic", "social")
OPTION_IDS = ("a", "b", "c", "d")

# (id, category, prompt, option texts in visual/auditory/kinesthetic/social order)
DEFAULT_QUESTIONS: tuple[tuple[int, str, str, tuple[str, str, str, str]], ...] = (
    (
        1,
        "information_processing",
        "When learning new information, I prefer to:",
        (
            "Read about it in detail",
            "Listen to explanations",
            "Try it hands-on",
            "Discuss it with others",
        ),
    ),
    (
        2,
        "memory_retention",
        "I remember information best when:",
        (
            "I can see it written or drawn",
            "I hear it explained",
            "I practice it repeatedly",
            "I teach it to someone else",
        ),
    ),
    (
        3,
        "problem_solving",
        "When solving problems, I tend to:",
        (
            "Draw diagrams or charts",
            "Talk through the problem",
            "Work through examples",
            "Brainstorm with others",
        ),
    ),
    (
        4,
        "study_environment",
        "My ideal study environment is:",
        (
            "Quiet with good lighting and organized materials",
            "With background music or recorded lectures",
            "Where I can move around and use tools",
            "In a group study setting",
        ),
    ),
    (
        5,
        "instruction_preference",
        "I prefer instructions that are:",
        (
            "Written step-by-step with illustrations",
            "Explained verbally",
            "Demonstrated while I follow along",
            "Discussed in a group setting",
        ),
    ),
)

DEFAULT_CATEGORIES: tuple[tuple[str, str, str], ...] = (
    (
        "information_processing",
        "Information Processing",
        "How you prefer to receive and process new information",
    ),
    (
        "memory_retention",
        "Memory Retention",
        "Methods that help you best remember information",
    ),
    (
        "problem_solving",
        "Problem Solving",
        "Your approach to tackling problems and challenges",
    ),
    (
        "study_environment",
        "Study Environment",
        "Environmental factors that optimize your learning",
    ),
    (
        "instruction_preference",
        "Instruction Preference",
        "How you prefer to receive instructions and guidance",
    ),
)


def default_questions() -> list[dict[str, Any]]:
    return [
        {
            "id": question_id,
            "category": category,
            "question": prompt,
            "options": [
                {"id": option_id, "text": text, "pattern": pattern, "weight": 1}
                for option_id, text, pattern in zip(OPTION_IDS, texts, OPTION_PATTERNS, strict=True)
            ],
        }
        for question_id, category, prompt, texts in DEFAULT_QUESTIONS
    ]


def default_categories() -> list[dict[str, str]]:
    return [
        {"id": category_id, "name": name, "description": description}
        for category_id, name, description in DEFAULT_CATEGORIES
    ]


class QuestionService:
    """Service for the learning-pattern questionnaire."""

    def __init__(self, storage: StorageContext):
        self._question_repo = QuestionRepository(storage.questions)

    async def get_questions(self) -> Any:
        questions = await self._question_repo.get_questions()
        if questions is None:
            questions = await self._question_repo.save_questions(default_questions())
            logger.info("Seeded default questions", count=len(questions))
        return questions

    async def save_questions(self, questions: Any) -> dict[str, Any]:
        if not isinstance(questions, list):
            raise ValidationError("Questions must be a list")
        await self._question_repo.save_questions(questions)
        logger.info("Questions saved", count=len(questions))
        return {"message": "Questions saved successfully", "count": len(questions)}

    async def get_categories(self) -> Any:
        categories = await self._question_repo.get_categories()
        if categories is None:
            categories = await self._question_repo.save_categories(default_categories())
            logger.info("Seeded default categories", count=len(categories))
        return categories
