"""Question repository - question banks, section catalogue and section weights."""

from __future__ import annotations

from typing import Any

from learning_patterns.persistence.json_store import JsonFileStore

QUESTIONS_DOCUMENT = "questions"
CATEGORIES_DOCUMENT = "categories"
CATEGORY_WEIGHTS_DOCUMENT = "question-categories"
COGNITIVE_QUESTIONS_DOCUMENT = "cognitive-questions"


class QuestionRepository:
    """Fixed-name documents in the questions directory."""

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def get_questions(self) -> Any | None:
        return await self.store.read(QUESTIONS_DOCUMENT)

    async def save_questions(self, questions: Any) -> Any:
        await self.store.write(QUESTIONS_DOCUMENT, questions)
        return questions

    async def get_categories(self) -> Any | None:
        return await self.store.read(CATEGORIES_DOCUMENT)

    async def save_categories(self, categories: Any) -> Any:
        await self.store.write(CATEGORIES_DOCUMENT, categories)
        return categories

    async def get_category_weights(self) -> Any | None:
        """Weighted-scoring section weights, as ``[{id, weight}, ...]``."""
        return await self.store.read(CATEGORY_WEIGHTS_DOCUMENT)

    async def get_cognitive_questions(self) -> Any | None:
        return await self.store.read(COGNITIVE_QUESTIONS_DOCUMENT)
