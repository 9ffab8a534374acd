"""Learning-pattern scoring strategies - basic, weighted and advanced.

This module contains ZERO I/O. Each strategy turns normalised answers into an
immutable LearningPatternResult; the strategy is picked by ScoringAlgorithm.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Protocol

from learning_patterns.scoring.interactions import compute_pattern_interactions
from learning_patterns.scoring.learning_insights import (
    AdaptabilityScore,
    LearningEfficiency,
    PatternRecommendations,
    calculate_adaptability,
    calculate_learning_efficiency,
    generate_detailed_recommendations,
)
from learning_patterns.scoring.learning_tables import (
    BASIC_STRENGTH_BANDS,
    GENERAL_QUESTION_CATEGORY,
    LEARNING_PATTERNS,
    LONG_DESCRIPTIONS,
    MINIMAL_STRENGTH,
    QUESTION_CATEGORY_BY_POSITION,
    SHORT_DESCRIPTIONS,
    UNKNOWN_PATTERN_DESCRIPTION,
    WEIGHTED_STRENGTH_BANDS,
)
from learning_patterns.scoring.models import AnswerRecord, BehaviorSignals, ScoringResult
from learning_patterns.scoring.tally import (
    DEFAULT_SECONDARY_THRESHOLD,
    round_half_up,
    score_categories,
)
from learning_patterns.utils.clock import to_iso

STRONG_DOMINANT_SCORE = 60
SIGNIFICANT_SECONDARY_SCORE = 40


class ScoringAlgorithm(StrEnum):
    BASIC = "basic"
    WEIGHTED = "weighted"
    ADVANCED = "advanced"

    @classmethod
    def from_flag(cls, value: Any, default: ScoringAlgorithm | None = None) -> ScoringAlgorithm:
        """Resolve a request flag; unknown or missing flags fall back to weighted."""
        fallback = default or cls.WEIGHTED
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return fallback
        try:
            return cls(value.strip().lower())
        except ValueError:
            return fallback


@dataclass(frozen=True)
class ScoringOptions:
    """Per-call knobs shared by every strategy.

    ``question_category_weights`` maps questionnaire sections to weights; when
    None every section weighs 1.0.
    """

    behavior: BehaviorSignals | None = None
    question_category_weights: Mapping[str, float] | None = None
    secondary_threshold: int = DEFAULT_SECONDARY_THRESHOLD
    recommendation_limit: int = 5
    now: datetime | None = None


@dataclass(frozen=True)
class PatternSummary:
    count: int
    score: int
    description: str
    strength: str
    normalized_score: int | None = None
    confidence: int | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"count": self.count, "score": self.score}
        if self.normalized_score is not None:
            payload["normalizedScore"] = self.normalized_score
        payload["description"] = self.description
        payload["strength"] = self.strength
        if self.confidence is not None:
            payload["confidence"] = self.confidence
        return payload


@dataclass(frozen=True)
class PatternSlot:
    pattern: str | None
    score: int
    strength: str
    confidence: int | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "pattern": self.pattern,
            "score": self.score,
            "strength": self.strength,
        }
        if self.confidence is not None:
            payload["confidence"] = self.confidence
        return payload


@dataclass(frozen=True)
class LearningProfile:
    type: str
    description: str
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "description": self.description,
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class LearningPatternResult:
    """Wire-ready output of one learning-pattern scoring run."""

    algorithm: ScoringAlgorithm
    scoring: ScoringResult
    results: Mapping[str, PatternSummary]
    total_questions: int
    dominant_pattern: PatternSlot
    secondary_pattern: PatternSlot | None = None
    learning_profile: LearningProfile | None = None
    learning_efficiency: LearningEfficiency | None = None
    adaptability: AdaptabilityScore | None = None
    recommendations: PatternRecommendations | None = None

    @property
    def scores(self) -> dict[str, int]:
        return {pattern: summary.score for pattern, summary in self.results.items()}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "results": {pattern: summary.to_dict() for pattern, summary in self.results.items()},
            "totalQuestions": self.total_questions,
            "dominantPattern": self.dominant_pattern.to_dict(),
        }
        if self.algorithm != ScoringAlgorithm.BASIC:
            payload["secondaryPattern"] = (
                self.secondary_pattern.to_dict() if self.secondary_pattern else None
            )
        if self.learning_profile is not None:
            payload["learningProfile"] = self.learning_profile.to_dict()
        payload["algorithm"] = self.algorithm.value
        payload["timestamp"] = to_iso(self.scoring.timestamp)
        if self.scoring.interactions is not None:
            payload["patternInteractions"] = {
                key: interaction.to_dict() for key, interaction in self.scoring.interactions.items()
            }
        if self.learning_efficiency is not None:
            payload["learningEfficiency"] = self.learning_efficiency.to_dict()
        if self.adaptability is not None:
            payload["adaptabilityScore"] = self.adaptability.to_dict()
        if self.recommendations is not None:
            payload["recommendations"] = self.recommendations.to_dict()
        return payload


def strength_label(score: float, bands: Sequence[tuple[int, str]]) -> str:
    for threshold, label in bands:
        if score >= threshold:
            return label
    return MINIMAL_STRENGTH


def question_category(position: int) -> str:
    return QUESTION_CATEGORY_BY_POSITION.get(position, GENERAL_QUESTION_CATEGORY)


def question_weight(position: int, weights: Mapping[str, float] | None) -> float:
    if not weights:
        return 1.0
    weight = weights.get(question_category(position), 1.0)
    if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight <= 0:
        return 1.0
    return float(weight)


def valid_answers(answers: Sequence[AnswerRecord]) -> tuple[AnswerRecord, ...]:
    return tuple(answer for answer in answers if answer.category in LEARNING_PATTERNS)


class ScoringStrategy(Protocol):
    algorithm: ScoringAlgorithm

    def score(
        self, answers: Sequence[AnswerRecord], options: ScoringOptions
    ) -> LearningPatternResult: ...


class BasicScoring:
    """Count-based percentages with short descriptions and strength labels."""

    algorithm = ScoringAlgorithm.BASIC

    def score(
        self, answers: Sequence[AnswerRecord], options: ScoringOptions
    ) -> LearningPatternResult:
        scoring = score_categories(
            answers,
            LEARNING_PATTERNS,
            base_weight=lambda _answer: 1.0,
            use_response_time=False,
            secondary_threshold=options.secondary_threshold,
            now=options.now,
        )

        results = {
            pattern: PatternSummary(
                count=tally.count,
                score=tally.percentage_score,
                description=SHORT_DESCRIPTIONS.get(pattern, UNKNOWN_PATTERN_DESCRIPTION),
                strength=strength_label(tally.percentage_score, BASIC_STRENGTH_BANDS),
            )
            for pattern, tally in scoring.categories.items()
        }

        dominant_tally = scoring.tally(scoring.dominant)
        dominant_score = dominant_tally.percentage_score if dominant_tally else 0
        return LearningPatternResult(
            algorithm=self.algorithm,
            scoring=scoring,
            results=MappingProxyType(results),
            total_questions=scoring.total_count,
            dominant_pattern=PatternSlot(
                pattern=scoring.dominant,
                score=dominant_score,
                strength=strength_label(dominant_score, BASIC_STRENGTH_BANDS),
            ),
        )


class WeightedScoring:
    """Question-section weighting, behavioural adjustment, confidence and a profile label."""

    algorithm = ScoringAlgorithm.WEIGHTED

    def score(
        self, answers: Sequence[AnswerRecord], options: ScoringOptions
    ) -> LearningPatternResult:
        weights = options.question_category_weights
        scoring = score_categories(
            answers,
            LEARNING_PATTERNS,
            base_weight=lambda answer: question_weight(answer.position, weights) * answer.weight,
            behavior=options.behavior,
            secondary_threshold=options.secondary_threshold,
            now=options.now,
        )

        total = scoring.total_count
        results = {
            pattern: PatternSummary(
                count=tally.count,
                score=tally.percentage_score,
                normalized_score=round_half_up(100 * tally.count / total) if total else 0,
                description=LONG_DESCRIPTIONS.get(pattern, UNKNOWN_PATTERN_DESCRIPTION),
                strength=strength_label(tally.percentage_score, WEIGHTED_STRENGTH_BANDS),
                confidence=tally.confidence,
            )
            for pattern, tally in scoring.categories.items()
        }

        dominant = self._slot(scoring, scoring.dominant) or PatternSlot(
            pattern=None, score=0, strength=MINIMAL_STRENGTH, confidence=0
        )
        secondary = self._slot(scoring, scoring.secondary)

        return LearningPatternResult(
            algorithm=self.algorithm,
            scoring=scoring,
            results=MappingProxyType(results),
            total_questions=total,
            dominant_pattern=dominant,
            secondary_pattern=secondary,
            learning_profile=build_learning_profile(dominant, secondary),
        )

    @staticmethod
    def _slot(scoring: ScoringResult, pattern: str | None) -> PatternSlot | None:
        tally = scoring.tally(pattern)
        if tally is None:
            return None
        return PatternSlot(
            pattern=pattern,
            score=tally.percentage_score,
            strength=strength_label(tally.percentage_score, WEIGHTED_STRENGTH_BANDS),
            confidence=tally.confidence,
        )


class AdvancedScoring(WeightedScoring):
    """Weighted scoring plus interactions, efficiency, adaptability and recommendations."""

    algorithm = ScoringAlgorithm.ADVANCED

    def score(
        self, answers: Sequence[AnswerRecord], options: ScoringOptions
    ) -> LearningPatternResult:
        weighted = super().score(answers, options)
        scores = weighted.scores
        interactions = compute_pattern_interactions(scores, LEARNING_PATTERNS)

        return LearningPatternResult(
            algorithm=self.algorithm,
            scoring=weighted.scoring.with_interactions(interactions),
            results=weighted.results,
            total_questions=weighted.total_questions,
            dominant_pattern=weighted.dominant_pattern,
            secondary_pattern=weighted.secondary_pattern,
            learning_profile=weighted.learning_profile,
            learning_efficiency=calculate_learning_efficiency(scores.values()),
            adaptability=calculate_adaptability(valid_answers(answers), len(LEARNING_PATTERNS)),
            recommendations=generate_detailed_recommendations(
                scores,
                has_dominant=weighted.scoring.dominant is not None,
                limit=options.recommendation_limit,
            ),
        )


def build_learning_profile(dominant: PatternSlot, secondary: PatternSlot | None) -> LearningProfile:
    if dominant.pattern is not None and dominant.score >= STRONG_DOMINANT_SCORE:
        if secondary is not None and secondary.score >= SIGNIFICANT_SECONDARY_SCORE:
            return LearningProfile(
                type=f"{dominant.pattern}-{secondary.pattern}",
                description=(
                    f"You have a strong {dominant.pattern} learning preference with significant "
                    f"{secondary.pattern} tendencies. This combination suggests you learn best "
                    "when multiple approaches are used together."
                ),
            )
        return LearningProfile(
            type=dominant.pattern,
            description=(
                f"You have a clear {dominant.pattern} learning preference. Your learning is most "
                "effective when information is presented in ways that align with this pattern."
            ),
        )
    return LearningProfile(
        type="balanced",
        description=(
            "You show a balanced learning profile across multiple patterns. You may benefit "
            "from using a variety of learning approaches depending on the context and material."
        ),
    )


STRATEGIES: Mapping[ScoringAlgorithm, ScoringStrategy] = MappingProxyType(
    {
        ScoringAlgorithm.BASIC: BasicScoring(),
        ScoringAlgorithm.WEIGHTED: WeightedScoring(),
        ScoringAlgorithm.ADVANCED: AdvancedScoring(),
    }
)


def calculate_learning_patterns(
    answers: Sequence[AnswerRecord],
    algorithm: ScoringAlgorithm | str | None = None,
    options: ScoringOptions | None = None,
) -> LearningPatternResult:
    """Score answers with the selected strategy, weighted when the flag is unknown."""
    strategy = STRATEGIES[ScoringAlgorithm.from_flag(algorithm)]
    return strategy.score(answers, options or ScoringOptions())
