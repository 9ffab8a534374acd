"""Cognitive repository - cognitive assessments and cognitive profiles."""

from __future__ import annotations

from typing import Any

from learning_patterns.persistence.assessment_repository import list_user_documents
from learning_patterns.persistence.json_store import JsonFileStore

COGNITIVE_ASSESSMENT_PREFIX = "cognitive_assessment_"
COGNITIVE_PROFILE_PREFIX = "cognitive_profile_"


class CognitiveRepository:
    """CRUD for ``cognitive_assessment_<id>`` and ``cognitive_profile_<userId>`` documents."""

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def create_assessment(self, assessment: dict[str, Any]) -> dict[str, Any]:
        await self.store.write(f"{COGNITIVE_ASSESSMENT_PREFIX}{assessment['id']}", assessment)
        return assessment

    async def get_assessment(self, assessment_id: str) -> dict[str, Any] | None:
        return await self.store.read(f"{COGNITIVE_ASSESSMENT_PREFIX}{assessment_id}")

    async def delete_assessment(self, assessment_id: str) -> None:
        await self.store.delete(f"{COGNITIVE_ASSESSMENT_PREFIX}{assessment_id}")

    async def list_for_user(self, user_id: str) -> list[dict[str, Any]]:
        return await list_user_documents(self.store, COGNITIVE_ASSESSMENT_PREFIX, user_id)

    def profile_lock(self, user_id: str):
        return self.store.lock(f"{COGNITIVE_PROFILE_PREFIX}{user_id}")

    async def get_profile(self, user_id: str) -> dict[str, Any] | None:
        return await self.store.read(f"{COGNITIVE_PROFILE_PREFIX}{user_id}")

    async def save_profile(self, profile: dict[str, Any]) -> dict[str, Any]:
        await self.store.write(f"{COGNITIVE_PROFILE_PREFIX}{profile['userId']}", profile)
        return profile
