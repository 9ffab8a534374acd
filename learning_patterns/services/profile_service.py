"""Profile service - read and merge learning profiles."""

from typing import Any

import structlog

from learning_patterns.core.errors import NotFoundError
from learning_patterns.core.storage import StorageContext
from learning_patterns.core.tracing import bind_user
from learning_patterns.persistence.assessment_repository import ProfileRepository
from learning_patterns.persistence.json_store import validate_identifier
from learning_patterns.scoring.learning_insights import profile_recommendations
from learning_patterns.utils.clock import utc_now_iso

logger = structlog.get_logger(__name__)


class ProfileService:
    """Service for learning profiles."""

    def __init__(self, storage: StorageContext):
        self._profile_repo = ProfileRepository(storage.profiles)

    async def get_profile(self, user_id: str) -> dict[str, Any]:
        validate_identifier(user_id, "userId")
        profile = await self._profile_repo.get(user_id)
        if profile is None:
            raise NotFoundError("Profile not found", details={"user_id": user_id})
        return profile

    async def update_profile(self, user_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Shallow-merge changes into the stored profile, creating it when absent."""
        validate_identifier(user_id, "userId")
        bind_user(user_id)
        async with self._profile_repo.lock(user_id):
            profile = await self._profile_repo.get(user_id) or {}
            profile = {**profile, **changes}
            profile["userId"] = user_id
            profile["lastUpdated"] = utc_now_iso()
            await self._profile_repo.save(profile)

        logger.info("Profile updated", user_id=user_id, fields=sorted(changes))
        return {"message": "Profile updated successfully", "profile": profile}

    async def get_recommendations(self, user_id: str) -> dict[str, list[str]]:
        return profile_recommendations(await self.get_profile(user_id))

    async def get_learning_history(self, user_id: str) -> list[Any]:
        profile = await self.get_profile(user_id)
        history = profile.get("assessmentHistory")
        return history if isinstance(history, list) else []
