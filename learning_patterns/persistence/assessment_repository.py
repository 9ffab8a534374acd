"""Assessment repository - learning-pattern assessments and user profiles.

Both document kinds share one directory: ``assessment_<id>.json`` and
``profile_<userId>.json``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from learning_patterns.persistence.json_store import JsonFileStore
from learning_patterns.utils.payload import as_dict

ASSESSMENT_PREFIX = "assessment_"
PROFILE_PREFIX = "profile_"


def timestamp_sort_key(document: dict[str, Any]) -> datetime:
    """Parse a stored ISO timestamp as naive UTC; unparseable values sort oldest."""
    raw = document.get("timestamp")
    if isinstance(raw, str):
        try:
            parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(UTC).replace(tzinfo=None)
        except (ValueError, OverflowError):
            return datetime.min
        return parsed
    return datetime.min


async def list_user_documents(
    store: JsonFileStore,
    prefix: str,
    user_id: str,
) -> list[dict[str, Any]]:
    """Every document under prefix owned by user_id, newest first."""
    documents: list[dict[str, Any]] = []
    for name in await store.list_names(prefix):
        document = as_dict(await store.read(name))
        if document.get("userId") == user_id:
            documents.append(document)
    documents.sort(key=timestamp_sort_key, reverse=True)
    return documents


class AssessmentRepository:
    """CRUD for stored learning-pattern assessments."""

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def create(self, assessment: dict[str, Any]) -> dict[str, Any]:
        await self.store.write(f"{ASSESSMENT_PREFIX}{assessment['id']}", assessment)
        return assessment

    async def get(self, assessment_id: str) -> dict[str, Any] | None:
        return await self.store.read(f"{ASSESSMENT_PREFIX}{assessment_id}")

    async def delete(self, assessment_id: str) -> None:
        await self.store.delete(f"{ASSESSMENT_PREFIX}{assessment_id}")

    async def list_for_user(self, user_id: str) -> list[dict[str, Any]]:
        return await list_user_documents(self.store, ASSESSMENT_PREFIX, user_id)


class ProfileRepository:
    """Read and replace per-user learning profiles."""

    def __init__(self, store: JsonFileStore):
        self.store = store

    def lock(self, user_id: str):
        return self.store.lock(f"{PROFILE_PREFIX}{user_id}")

    async def get(self, user_id: str) -> dict[str, Any] | None:
        return await self.store.read(f"{PROFILE_PREFIX}{user_id}")

    async def save(self, profile: dict[str, Any]) -> dict[str, Any]:
        await self.store.write(f"{PROFILE_PREFIX}{profile['userId']}", profile)
        return profile
