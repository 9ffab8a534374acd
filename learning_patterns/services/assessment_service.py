"""Assessment service - score learning-pattern answers and store the results."""

from __future__ import annotations

import time
import uuid
from collections.abc import Mapping
from typing import Any

import structlog

from learning_patterns.core.config import Settings, get_settings
from learning_patterns.core.errors import NotFoundError, ValidationError
from learning_patterns.core.metrics import (
    pattern_results_saved_total,
    pattern_scoring_latency_seconds,
    pattern_scoring_requests_total,
)
from learning_patterns.core.storage import StorageContext
from learning_patterns.core.tracing import bind_user
from learning_patterns.persistence.assessment_repository import (
    AssessmentRepository,
    ProfileRepository,
)
from learning_patterns.persistence.json_store import validate_identifier
from learning_patterns.persistence.question_repository import QuestionRepository
from learning_patterns.scoring.answers import (
    coerce_number,
    normalize_answers,
    parse_behavior_signals,
)
from learning_patterns.scoring.learning_insights import dominant_from_results
from learning_patterns.scoring.learning_strategies import (
    ScoringAlgorithm,
    ScoringOptions,
    calculate_learning_patterns,
)
from learning_patterns.scoring.learning_tables import DEFAULT_QUESTION_CATEGORY_WEIGHTS
from learning_patterns.utils.clock import utc_now_iso

logger = structlog.get_logger(__name__)

ANONYMOUS_USER = "anonymous"


def parse_category_weights(document: Any) -> dict[str, float]:
    """Section weights from a stored ``[{id, weight}, ...]`` list.

    Falls back to the built-in table when nothing usable is stored.
    """
    weights: dict[str, float] = {}
    if isinstance(document, list):
        for entry in document:
            if not isinstance(entry, Mapping):
                continue
            category_id = entry.get("id")
            weight = coerce_number(entry.get("weight"))
            if isinstance(category_id, str) and weight is not None:
                weights[category_id] = weight
    return weights or dict(DEFAULT_QUESTION_CATEGORY_WEIGHTS)


def resolve_user_id(user_id: str | None) -> str:
    return validate_identifier(user_id, "userId") if user_id else ANONYMOUS_USER


def next_assessment_count(current: Any) -> int:
    """Increment a stored count; anything non-numeric or negative restarts at zero."""
    return int(max(coerce_number(current) or 0, 0)) + 1


class AssessmentService:
    """Learning-pattern scoring and assessment persistence."""

    def __init__(self, storage: StorageContext, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._assessment_repo = AssessmentRepository(storage.profiles)
        self._profile_repo = ProfileRepository(storage.profiles)
        self._question_repo = QuestionRepository(storage.questions)

    async def calculate_results(
        self,
        answers: Any,
        algorithm: str | None = None,
        behavior_data: Any = None,
    ) -> dict[str, Any]:
        """Score raw answers with the requested (or configured) algorithm."""
        if not isinstance(answers, list):
            raise ValidationError("Invalid answers format")

        scoring_config = self._settings.scoring
        selected = ScoringAlgorithm.from_flag(
            algorithm,
            default=ScoringAlgorithm.from_flag(scoring_config.default_algorithm),
        )

        category_weights = None
        if selected is not ScoringAlgorithm.BASIC:
            category_weights = parse_category_weights(await self._question_repo.get_category_weights())

        options = ScoringOptions(
            behavior=parse_behavior_signals(behavior_data),
            question_category_weights=category_weights,
            secondary_threshold=scoring_config.secondary_threshold,
            recommendation_limit=scoring_config.recommendation_limit,
        )

        start_time = time.perf_counter()
        status = "success"
        try:
            result = calculate_learning_patterns(normalize_answers(answers), selected, options)
            return result.to_dict()
        except Exception:
            status = "error"
            raise
        finally:
            pattern_scoring_requests_total.labels(algorithm=selected.value, status=status).inc()
            pattern_scoring_latency_seconds.labels(algorithm=selected.value).observe(
                time.perf_counter() - start_time
            )
            logger.info(
                "Learning patterns scored",
                algorithm=selected.value,
                answer_count=len(answers),
                status=status,
            )

    async def save_results(
        self,
        results: Any,
        timestamp: str | None = None,
        user_id: str | None = None,
    ) -> dict[str, Any]:
        """Store an assessment and fold it into the owner's profile."""
        current_user = resolve_user_id(user_id)
        bind_user(current_user)
        assessment = {
            "id": str(uuid.uuid4()),
            "userId": current_user,
            "results": results,
            "timestamp": timestamp or utc_now_iso(),
            "completed": True,
        }
        await self._assessment_repo.create(assessment)
        try:
            await self._update_profile(current_user, assessment)
        except Exception:
            logger.warning("Profile update failed, removing assessment", assessment_id=assessment["id"])
            await self._assessment_repo.delete(assessment["id"])
            raise

        pattern_results_saved_total.labels(kind="learning").inc()
        logger.info("Assessment saved", assessment_id=assessment["id"], user_id=current_user)
        return {
            "message": "Results saved successfully",
            "assessmentId": assessment["id"],
            "userId": current_user,
        }

    async def get_assessment(self, assessment_id: str) -> dict[str, Any]:
        validate_identifier(assessment_id, "assessmentId")
        assessment = await self._assessment_repo.get(assessment_id)
        if assessment is None:
            raise NotFoundError("Assessment not found", details={"assessment_id": assessment_id})
        return assessment

    async def list_user_assessments(self, user_id: str) -> list[dict[str, Any]]:
        validate_identifier(user_id, "userId")
        return await self._assessment_repo.list_for_user(user_id)

    async def _update_profile(self, user_id: str, assessment: dict[str, Any]) -> None:
        async with self._profile_repo.lock(user_id):
            profile = await self._profile_repo.get(user_id) or {}
            dominant = dominant_from_results(assessment["results"])

            profile["userId"] = user_id
            profile["lastAssessment"] = assessment["timestamp"]
            profile["assessmentCount"] = next_assessment_count(profile.get("assessmentCount"))
            profile["latestResults"] = assessment["results"]
            profile["dominantPattern"] = dominant

            history = profile.get("assessmentHistory")
            if not isinstance(history, list):
                history = []
            history.append(
                {
                    "assessmentId": assessment["id"],
                    "timestamp": assessment["timestamp"],
                    "dominantPattern": dominant,
                }
            )
            profile["assessmentHistory"] = history
            await self._profile_repo.save(profile)
