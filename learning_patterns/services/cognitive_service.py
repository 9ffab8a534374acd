"""Cognitive service - score, store and compare cognitive assessments."""

from __future__ import annotations

import time
import uuid
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
from learning_patterns.persistence.cognitive_repository import CognitiveRepository
from learning_patterns.persistence.json_store import validate_identifier
from learning_patterns.persistence.question_repository import QuestionRepository
from learning_patterns.scoring.answers import coerce_number, normalize_answers, parse_behavior_signals
from learning_patterns.scoring.cognitive_core import (
    calculate_cognitive_results,
    process_scenario_assessment,
)
from learning_patterns.scoring.cognitive_recommendations import (
    UNKNOWN_TYPE,
    compare_cognitive_assessments,
    dimension_explanations,
    generate_detailed_recommendations,
    generate_personalized_recommendations,
)
from learning_patterns.scoring.cognitive_tables import COGNITIVE_ALGORITHM
from learning_patterns.scoring.models import plain_number
from learning_patterns.services.assessment_service import next_assessment_count, resolve_user_id
from learning_patterns.utils.clock import utc_now_iso
from learning_patterns.utils.payload import as_dict

logger = structlog.get_logger(__name__)

SCENARIO_ASSESSMENT = "scenario"
RECORD_VERSION = "2.0"


class CognitiveService:
    """Cognitive assessment scoring, persistence and profile upkeep."""

    def __init__(self, storage: StorageContext, settings: Settings | None = None):
        self._settings = settings or get_settings()
        self._cognitive_repo = CognitiveRepository(storage.cognitive)
        self._question_repo = QuestionRepository(storage.questions)

    async def get_questions(self) -> Any:
        questions = await self._question_repo.get_cognitive_questions()
        if questions is None:
            raise NotFoundError("Cognitive questions not found")
        return questions

    async def calculate_results(
        self,
        answers: Any = None,
        responses: Any = None,
        behavior_data: Any = None,
        assessment_type: str | None = None,
    ) -> dict[str, Any]:
        """Score scenario responses or plain answers, then attach recommendations."""
        scenario = assessment_type == SCENARIO_ASSESSMENT and responses is not None
        if scenario and not isinstance(responses, list):
            raise ValidationError("Invalid responses format for scenario assessment")
        if not scenario and not isinstance(answers, list):
            raise ValidationError("Invalid answers format")

        scoring_config = self._settings.scoring
        behavior = parse_behavior_signals(behavior_data)
        start_time = time.perf_counter()
        status = "success"
        try:
            if scenario:
                result = process_scenario_assessment(
                    responses,
                    behavior,
                    secondary_threshold=scoring_config.secondary_threshold,
                )
            else:
                result = calculate_cognitive_results(
                    normalize_answers(answers),
                    behavior,
                    secondary_threshold=scoring_config.secondary_threshold,
                )
            payload = result.to_dict()
            payload["personalizedRecommendations"] = generate_personalized_recommendations(
                payload, scoring_config.recommendation_limit
            )
            return payload
        except Exception:
            status = "error"
            raise
        finally:
            pattern_scoring_requests_total.labels(algorithm=COGNITIVE_ALGORITHM, status=status).inc()
            pattern_scoring_latency_seconds.labels(algorithm=COGNITIVE_ALGORITHM).observe(
                time.perf_counter() - start_time
            )
            logger.info(
                "Cognitive assessment scored",
                mode=SCENARIO_ASSESSMENT if scenario else "answers",
                status=status,
            )

    async def save_results(
        self,
        results: Any,
        total_time: Any = None,
        user_id: str | None = None,
    ) -> dict[str, Any]:
        current_user = resolve_user_id(user_id)
        bind_user(current_user)
        assessment = {
            "id": str(uuid.uuid4()),
            "userId": current_user,
            "results": results,
            "totalTime": total_time,
            "timestamp": utc_now_iso(),
            "version": RECORD_VERSION,
            "type": "cognitive",
        }
        await self._cognitive_repo.create_assessment(assessment)
        try:
            await self._update_profile(current_user, assessment)
        except Exception:
            logger.warning(
                "Cognitive profile update failed, removing assessment", assessment_id=assessment["id"]
            )
            await self._cognitive_repo.delete_assessment(assessment["id"])
            raise

        pattern_results_saved_total.labels(kind="cognitive").inc()
        logger.info("Cognitive assessment saved", assessment_id=assessment["id"], user_id=current_user)
        return {
            "message": "Cognitive assessment results saved successfully",
            "assessmentId": assessment["id"],
            "userId": current_user,
        }

    async def get_assessment(self, assessment_id: str) -> dict[str, Any]:
        validate_identifier(assessment_id, "assessmentId")
        assessment = await self._cognitive_repo.get_assessment(assessment_id)
        if assessment is None:
            raise NotFoundError("Cognitive assessment not found", details={"assessment_id": assessment_id})
        return assessment

    async def list_user_assessments(self, user_id: str) -> list[dict[str, Any]]:
        validate_identifier(user_id, "userId")
        return await self._cognitive_repo.list_for_user(user_id)

    async def get_profile(self, user_id: str) -> dict[str, Any]:
        validate_identifier(user_id, "userId")
        profile = await self._cognitive_repo.get_profile(user_id)
        if profile is None:
            raise NotFoundError("Cognitive profile not found", details={"user_id": user_id})
        return profile

    async def get_recommendations(self, user_id: str) -> dict[str, Any]:
        profile = await self.get_profile(user_id)
        return generate_detailed_recommendations(
            as_dict(profile.get("latestResults")),
            self._settings.scoring.recommendation_limit,
        )

    async def compare(self, first_id: str, second_id: str) -> dict[str, Any]:
        validate_identifier(first_id, "assessmentId1")
        validate_identifier(second_id, "assessmentId2")
        first = await self._cognitive_repo.get_assessment(first_id)
        second = await self._cognitive_repo.get_assessment(second_id)
        if first is None or second is None:
            raise NotFoundError(
                "One or both assessments not found",
                details={"assessment_ids": [first_id, second_id]},
            )
        return compare_cognitive_assessments(
            as_dict(first.get("results")),
            as_dict(second.get("results")),
        )

    def get_dimension_explanations(self) -> dict[str, Any]:
        return dimension_explanations()

    async def _update_profile(self, user_id: str, assessment: dict[str, Any]) -> None:
        results = as_dict(assessment["results"])
        cognitive_type = as_dict(results.get("overallProfile")).get("type") or UNKNOWN_TYPE
        confidence = plain_number(
            coerce_number(as_dict(results.get("cognitiveFingerprint")).get("confidence")) or 0
        )
        history_limit = self._settings.scoring.cognitive_history_limit

        async with self._cognitive_repo.profile_lock(user_id):
            profile = await self._cognitive_repo.get_profile(user_id) or {}
            profile["userId"] = user_id
            profile["lastAssessment"] = assessment["timestamp"]
            profile["assessmentCount"] = next_assessment_count(profile.get("assessmentCount"))
            profile["latestResults"] = assessment["results"]
            profile["cognitiveType"] = cognitive_type

            history = profile.get("assessmentHistory")
            if not isinstance(history, list):
                history = []
            history.append(
                {
                    "assessmentId": assessment["id"],
                    "timestamp": assessment["timestamp"],
                    "cognitiveType": cognitive_type,
                    "confidence": confidence,
                }
            )
            profile["assessmentHistory"] = history[-history_limit:]
            await self._cognitive_repo.save_profile(profile)
