"""Cognitive fingerprint core - PURE functions for the five-dimension variant.

This module contains ZERO I/O. Answers are remapped onto cognitive patterns,
tallied per dimension with the shared tally core, then assembled into a
fingerprint, learning pathways, dimension interactions and an overall profile.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from itertools import combinations
from types import MappingProxyType
from typing import Any

from learning_patterns.scoring.answers import normalize_scenario_responses
from learning_patterns.scoring.cognitive_tables import (
    COGNITIVE_ALGORITHM,
    COGNITIVE_DIMENSIONS,
    COGNITIVE_PATTERN_SYNERGY,
    COMPLEMENTARY_PATTERNS,
    DEFAULT_DIMENSION_PATTERNS,
    DEFAULT_PROFILE_TYPE,
    PATHWAY_RECOMMENDATIONS,
    PATTERN_DESCRIPTIONS,
    PROFILE_TYPES,
    SCENARIO_PATTERN_MAP,
    STYLE_DESCRIPTIONS,
    STYLE_FALLBACK,
    STYLE_PREFIX,
    UNKNOWN_COGNITIVE_PATTERN,
)
from learning_patterns.scoring.interactions import lookup_pair
from learning_patterns.scoring.learning_tables import DEFAULT_SYNERGY
from learning_patterns.scoring.models import AnswerRecord, BehaviorSignals, ScoringResult
from learning_patterns.scoring.tally import (
    DEFAULT_SECONDARY_THRESHOLD,
    round_half_up,
    score_categories,
)
from learning_patterns.utils.clock import to_iso, utc_now
from learning_patterns.utils.sequences import unique_in_order

GROWTH_CONFIDENCE_THRESHOLD = 60
ADAPTABILITY_SECONDARY_FACTOR = 0.5
ADAPTABILITY_DIVERSITY_BONUS = 5


@dataclass(frozen=True)
class PatternMapping:
    """Where a submitted pattern landed and whether the fallback was used."""

    pattern: str
    defaulted: bool


@dataclass(frozen=True)
class DefaultedPattern:
    dimension: str
    submitted: str
    mapped_to: str
    position: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension,
            "pattern": self.submitted,
            "mappedTo": self.mapped_to,
            "position": self.position,
        }


@dataclass(frozen=True)
class DimensionScore:
    dimension: str
    scoring: ScoringResult

    @property
    def confidence(self) -> int:
        """Confidence of the leading pattern, 0 when nothing scored."""
        tally = self.scoring.tally(self.scoring.dominant)
        return tally.confidence if tally is not None else 0

    @property
    def top_pattern(self) -> str:
        """Leading pattern, first in enumeration order when nothing scored."""
        return self.scoring.dominant or COGNITIVE_DIMENSIONS[self.dimension][0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "patterns": {
                pattern: {
                    "count": tally.count,
                    "accumulatedWeight": round(tally.accumulated_weight, 4),
                    "behaviorWeight": round(tally.behavior_weight, 4),
                    "finalScore": tally.percentage_score,
                }
                for pattern, tally in self.scoring.categories.items()
            },
            "totalCount": self.scoring.total_count,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class PatternPlacement:
    pattern: str
    score: int
    description: str
    confidence: int | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "pattern": self.pattern,
            "score": self.score,
            "description": self.description,
        }
        if self.confidence is not None:
            payload["confidence"] = self.confidence
        return payload


@dataclass(frozen=True)
class CognitiveFingerprint:
    primary: Mapping[str, PatternPlacement]
    secondary: Mapping[str, PatternPlacement]
    behavior_profile: Mapping[str, str]
    cognitive_style: str
    adaptability_index: int
    processing_speed: str
    confidence: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": {key: value.to_dict() for key, value in self.primary.items()},
            "secondary": {key: value.to_dict() for key, value in self.secondary.items()},
            "behaviorProfile": dict(self.behavior_profile),
            "cognitiveStyle": self.cognitive_style,
            "adaptabilityIndex": self.adaptability_index,
            "processingSpeed": self.processing_speed,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class DevelopmentPathway:
    dimension: str
    pattern: str
    reason: str
    activities: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension,
            "pattern": self.pattern,
            "reason": self.reason,
            "activities": list(self.activities),
        }


@dataclass(frozen=True)
class LearningPathways:
    optimal: tuple[str, ...]
    alternative: tuple[str, ...]
    development: tuple[DevelopmentPathway, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "optimal": list(self.optimal),
            "alternative": list(self.alternative),
            "development": [item.to_dict() for item in self.development],
        }


@dataclass(frozen=True)
class DimensionInteraction:
    synergy: int
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"synergy": self.synergy, "recommendations": list(self.recommendations)}


@dataclass(frozen=True)
class OverallProfile:
    type: str
    description: str
    strengths: tuple[str, ...]
    growth_areas: tuple[str, ...]
    optimal_conditions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "description": self.description,
            "strengths": list(self.strengths),
            "growthAreas": list(self.growth_areas),
            "optimalConditions": list(self.optimal_conditions),
        }


@dataclass(frozen=True)
class CognitiveResult:
    dimensions: Mapping[str, DimensionScore]
    fingerprint: CognitiveFingerprint
    pathways: LearningPathways
    interactions: Mapping[str, DimensionInteraction]
    behavior_analysis: Mapping[str, str]
    overall_profile: OverallProfile
    defaulted_patterns: tuple[DefaultedPattern, ...]
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimensions": {key: value.to_dict() for key, value in self.dimensions.items()},
            "cognitiveFingerprint": self.fingerprint.to_dict(),
            "learningPathways": self.pathways.to_dict(),
            "dimensionInteractions": {
                key: value.to_dict() for key, value in self.interactions.items()
            },
            "behaviorAnalysis": dict(self.behavior_analysis),
            "overallProfile": self.overall_profile.to_dict(),
            "defaultedPatterns": [item.to_dict() for item in self.defaulted_patterns],
            "algorithm": COGNITIVE_ALGORITHM,
            "timestamp": to_iso(self.timestamp),
        }


def map_to_cognitive_pattern(dimension: str, submitted: str) -> PatternMapping | None:
    """Resolve a submitted pattern within a dimension.

    Native pattern names pass through, scenario patterns go through the
    scenario table, anything else takes the dimension's default pattern.
    Returns None for an unknown dimension.
    """
    patterns = COGNITIVE_DIMENSIONS.get(dimension)
    if patterns is None:
        return None
    if submitted in patterns:
        return PatternMapping(submitted, defaulted=False)
    mapped = SCENARIO_PATTERN_MAP.get(dimension, {}).get(submitted)
    if mapped is not None:
        return PatternMapping(mapped, defaulted=False)
    return PatternMapping(DEFAULT_DIMENSION_PATTERNS[dimension], defaulted=True)


def group_by_dimension(
    answers: Iterable[AnswerRecord],
) -> tuple[dict[str, list[AnswerRecord]], tuple[DefaultedPattern, ...]]:
    """Remap answers onto cognitive patterns, grouped by dimension."""
    grouped: dict[str, list[AnswerRecord]] = {dimension: [] for dimension in COGNITIVE_DIMENSIONS}
    defaulted: list[DefaultedPattern] = []
    for answer in answers:
        if answer.dimension is None:
            continue
        mapping = map_to_cognitive_pattern(answer.dimension, answer.category)
        if mapping is None:
            continue
        if mapping.defaulted:
            defaulted.append(
                DefaultedPattern(
                    dimension=answer.dimension,
                    submitted=answer.category,
                    mapped_to=mapping.pattern,
                    position=answer.position,
                )
            )
        grouped[answer.dimension].append(
            AnswerRecord(
                category=mapping.pattern,
                weight=answer.weight,
                response_time_ms=answer.response_time_ms,
                dimension=answer.dimension,
                position=answer.position,
            )
        )
    return grouped, tuple(defaulted)


def pattern_description(dimension: str, pattern: str) -> str:
    return PATTERN_DESCRIPTIONS.get(dimension, {}).get(pattern, UNKNOWN_COGNITIVE_PATTERN)


def _above(value: float | None, threshold: float) -> bool:
    return value is not None and value > threshold


def _below(value: float | None, threshold: float) -> bool:
    return value is not None and value < threshold


def analyze_behavior(behavior: BehaviorSignals | None) -> dict[str, str]:
    """Qualitative reading of the behavioural signals, empty without them."""
    if behavior is None:
        return {}

    if _above(behavior.change_frequency, 0.4):
        decision = "Deliberative - tends to reconsider and refine choices"
    elif _below(behavior.change_frequency, 0.1):
        decision = "Decisive - commits quickly to initial choices"
    else:
        decision = "Balanced - thoughtful but not overly hesitant"

    if _below(behavior.average_response_time, 5000):
        processing = "Rapid processor - quick to form judgments"
    elif _above(behavior.average_response_time, 15000):
        processing = "Deep processor - takes time for thorough consideration"
    else:
        processing = "Moderate processor - balanced thinking pace"

    if _above(behavior.attention_stability, 90):
        attention = "Highly focused - maintains steady attention"
    elif _below(behavior.attention_stability, 70):
        attention = "Variable attention - may benefit from engagement strategies"
    else:
        attention = "Stable attention - good focus with minor fluctuations"

    if _above(behavior.hesitation_index, 3):
        load = "High cognitive load - may benefit from simplified presentations"
    elif _below(behavior.hesitation_index, 1):
        load = "Low cognitive load - can handle complex information well"
    else:
        load = "Moderate cognitive load - balanced processing capacity"

    return {
        "decisionMaking": decision,
        "processingStyle": processing,
        "attentionPattern": attention,
        "cognitiveLoad": load,
    }


def processing_speed(behavior: BehaviorSignals) -> str:
    if _below(behavior.average_response_time, 4000):
        return "Fast processor"
    if _above(behavior.average_response_time, 12000):
        return "Reflective processor"
    return "Moderate processor"


def adaptability_index(
    primary: Mapping[str, PatternPlacement],
    secondary: Mapping[str, PatternPlacement],
) -> int:
    """Strong secondary patterns and varied primary patterns both read as adaptable."""
    score = sum(placement.score * ADAPTABILITY_SECONDARY_FACTOR for placement in secondary.values())
    score += len({placement.pattern for placement in primary.values()}) * ADAPTABILITY_DIVERSITY_BONUS
    return min(100, round_half_up(score))


def _matches(patterns: set[str], pair: tuple[str, str]) -> bool:
    return pair[0] in patterns and pair[1] in patterns


def cognitive_style(primary: Mapping[str, PatternPlacement]) -> str:
    patterns = {placement.pattern for placement in primary.values()}
    for pair, description in STYLE_DESCRIPTIONS:
        if _matches(patterns, pair):
            return STYLE_PREFIX + description
    return STYLE_PREFIX + STYLE_FALLBACK


def build_fingerprint(
    dimensions: Mapping[str, DimensionScore],
    behavior: BehaviorSignals | None,
) -> CognitiveFingerprint:
    primary: dict[str, PatternPlacement] = {}
    secondary: dict[str, PatternPlacement] = {}
    for dimension, score in dimensions.items():
        result = score.scoring
        leader = result.tally(result.dominant)
        if leader is None:
            continue
        primary[dimension] = PatternPlacement(
            pattern=leader.category,
            score=leader.percentage_score,
            description=pattern_description(dimension, leader.category),
            confidence=score.confidence,
        )
        runner_up = result.tally(result.secondary)
        if runner_up is not None:
            secondary[dimension] = PatternPlacement(
                pattern=runner_up.category,
                score=runner_up.percentage_score,
                description=pattern_description(dimension, runner_up.category),
            )

    confidences = [placement.confidence or 0 for placement in primary.values()]
    return CognitiveFingerprint(
        primary=MappingProxyType(primary),
        secondary=MappingProxyType(secondary),
        behavior_profile=MappingProxyType(analyze_behavior(behavior)),
        cognitive_style=cognitive_style(primary),
        adaptability_index=adaptability_index(primary, secondary) if behavior else 0,
        processing_speed=processing_speed(behavior) if behavior else "",
        confidence=round_half_up(sum(confidences) / len(confidences)) if confidences else 0,
    )


def pathway_recommendations(dimension: str, pattern: str) -> tuple[str, ...]:
    return PATHWAY_RECOMMENDATIONS.get(dimension, {}).get(pattern, ())


def build_learning_pathways(fingerprint: CognitiveFingerprint) -> LearningPathways:
    optimal = [
        item
        for dimension, placement in fingerprint.primary.items()
        for item in pathway_recommendations(dimension, placement.pattern)
    ]
    alternative = [
        item
        for dimension, placement in fingerprint.secondary.items()
        for item in pathway_recommendations(dimension, placement.pattern)
    ]
    development = tuple(
        DevelopmentPathway(
            dimension=dimension,
            pattern=complement,
            reason=f"Develop {complement} to complement your {placement.pattern} strength",
            activities=pathway_recommendations(dimension, complement),
        )
        for dimension, placement in fingerprint.primary.items()
        for complement in COMPLEMENTARY_PATTERNS.get(dimension, {}).get(placement.pattern, ())
    )
    return LearningPathways(
        optimal=unique_in_order(optimal),
        alternative=unique_in_order(alternative),
        development=development,
    )


def dimension_synergy(first_pattern: str, second_pattern: str) -> int:
    base = lookup_pair(COGNITIVE_PATTERN_SYNERGY, first_pattern, second_pattern, DEFAULT_SYNERGY)
    return round_half_up(100 * float(base))


def build_dimension_interactions(
    dimensions: Mapping[str, DimensionScore],
) -> dict[str, DimensionInteraction]:
    interactions: dict[str, DimensionInteraction] = {}
    for first, second in combinations(dimensions, 2):
        interactions[f"{first}_{second}"] = DimensionInteraction(
            synergy=dimension_synergy(
                dimensions[first].top_pattern, dimensions[second].top_pattern
            ),
            recommendations=(
                f"Combine {first} and {second} approaches for enhanced learning",
                f"Balance your {first} preferences with {second} strategies",
            ),
        )
    return interactions


def build_overall_profile(fingerprint: CognitiveFingerprint) -> OverallProfile:
    patterns = {placement.pattern for placement in fingerprint.primary.values()}
    profile_type = next(
        (name for pair, name in PROFILE_TYPES if _matches(patterns, pair)),
        DEFAULT_PROFILE_TYPE,
    )
    return OverallProfile(
        type=profile_type,
        description=fingerprint.cognitive_style,
        strengths=tuple(placement.description for placement in fingerprint.primary.values()),
        growth_areas=tuple(
            f"Develop stronger preferences in {dimension} dimension"
            for dimension, placement in fingerprint.primary.items()
            if (placement.confidence or 0) < GROWTH_CONFIDENCE_THRESHOLD
        ),
    )


def calculate_cognitive_results(
    answers: Sequence[AnswerRecord],
    behavior: BehaviorSignals | None = None,
    *,
    secondary_threshold: int = DEFAULT_SECONDARY_THRESHOLD,
    now: datetime | None = None,
) -> CognitiveResult:
    """Score cognitive answers across all five dimensions.

    Args:
        answers: Normalised answers carrying a dimension; others are ignored
        behavior: Optional behavioural signals
        secondary_threshold: Minimum score for a secondary pattern per dimension
        now: Result timestamp, defaults to the current UTC time

    Returns:
        CognitiveResult with fingerprint, pathways, interactions and profile
    """
    timestamp = now or utc_now()
    grouped, defaulted = group_by_dimension(answers)

    dimensions = {
        dimension: DimensionScore(
            dimension=dimension,
            scoring=score_categories(
                grouped[dimension],
                patterns,
                behavior=behavior,
                secondary_threshold=secondary_threshold,
                now=timestamp,
            ),
        )
        for dimension, patterns in COGNITIVE_DIMENSIONS.items()
    }

    fingerprint = build_fingerprint(dimensions, behavior)
    return CognitiveResult(
        dimensions=MappingProxyType(dimensions),
        fingerprint=fingerprint,
        pathways=build_learning_pathways(fingerprint),
        interactions=MappingProxyType(build_dimension_interactions(dimensions)),
        behavior_analysis=MappingProxyType(analyze_behavior(behavior)),
        overall_profile=build_overall_profile(fingerprint),
        defaulted_patterns=defaulted,
        timestamp=timestamp,
    )


def process_scenario_assessment(
    responses: Any,
    behavior: BehaviorSignals | None = None,
    *,
    secondary_threshold: int = DEFAULT_SECONDARY_THRESHOLD,
    now: datetime | None = None,
) -> CognitiveResult:
    """Score scenario responses by resolving each selected option first."""
    return calculate_cognitive_results(
        normalize_scenario_responses(responses),
        behavior,
        secondary_threshold=secondary_threshold,
        now=now,
    )
