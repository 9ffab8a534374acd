"""Derived insights for learning-pattern results - PURE functions.

This module contains ZERO I/O. Efficiency, adaptability, recommendation
assembly, result comparison and stored-profile recommendations.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from learning_patterns.scoring.learning_tables import (
    ADAPTABILITY_BANDS,
    ADAPTABILITY_FALLBACK,
    EFFICIENCY_BANDS,
    EFFICIENCY_FALLBACK,
    ENVIRONMENT_RECOMMENDATIONS,
    GENERAL_STUDY_TIPS,
    PRIMARY_RECOMMENDATIONS,
    PROFILE_RECOMMENDATION_SCORE,
    PROFILE_RECOMMENDATIONS,
    SECONDARY_RECOMMENDATION_TEMPLATE,
    SOCIAL_RECOMMENDATIONS,
    TECHNOLOGY_RECOMMENDATIONS,
)
from learning_patterns.scoring.models import AnswerRecord, plain_number
from learning_patterns.scoring.tally import confidence_for, round_half_up, second_highest
from learning_patterns.utils.payload import as_dict, score_of
from learning_patterns.utils.sequences import unique_in_order

SECONDARY_RECOMMENDATION_SCORE = 30


@dataclass(frozen=True)
class LearningEfficiency:
    overall: int
    dominance_strength: int
    pattern_balance: int
    consistency: int
    interpretation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall": self.overall,
            "dominanceStrength": self.dominance_strength,
            "patternBalance": self.pattern_balance,
            "consistency": self.consistency,
            "interpretation": self.interpretation,
        }


@dataclass(frozen=True)
class AdaptabilityScore:
    score: int
    interpretation: str
    flexibility: int
    consistency: int
    diversity: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "interpretation": self.interpretation,
            "factors": {
                "flexibility": self.flexibility,
                "consistency": self.consistency,
                "diversity": self.diversity,
            },
        }


@dataclass(frozen=True)
class PatternRecommendations:
    primary: tuple[str, ...] = ()
    secondary: tuple[str, ...] = ()
    environmental: tuple[str, ...] = ()
    technological: tuple[str, ...] = ()
    social: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "primary": list(self.primary),
            "secondary": list(self.secondary),
            "environmental": list(self.environmental),
            "technological": list(self.technological),
            "social": list(self.social),
        }


def _band(value: float, bands: Sequence[tuple[int, str]], fallback: str) -> str:
    for threshold, label in bands:
        if value >= threshold:
            return label
    return fallback


def _population_variance(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((value - mean) ** 2 for value in values) / len(values)


def calculate_learning_efficiency(scores: Iterable[float]) -> LearningEfficiency:
    """Blend dominance (0.4), balance (0.3) and spread (0.3).

    Balance is 100 minus the population variance and can go negative for
    strongly skewed profiles.
    """
    values = list(scores)
    if not values:
        return LearningEfficiency(0, 0, 0, 0, _band(0, EFFICIENCY_BANDS, EFFICIENCY_FALLBACK))

    dominance = max(values)
    balance = 100 - _population_variance(values)
    consistency = 100 - (max(values) - min(values))
    efficiency = dominance * 0.4 + balance * 0.3 + consistency * 0.3

    return LearningEfficiency(
        overall=round_half_up(efficiency),
        dominance_strength=round_half_up(dominance),
        pattern_balance=round_half_up(balance),
        consistency=round_half_up(consistency),
        interpretation=_band(efficiency, EFFICIENCY_BANDS, EFFICIENCY_FALLBACK),
    )


def calculate_adaptability(answers: Sequence[AnswerRecord], pattern_count: int) -> AdaptabilityScore:
    """How readily the respondent moves between patterns across consecutive answers."""
    total = len(answers)
    if total == 0:
        return AdaptabilityScore(0, _band(0, ADAPTABILITY_BANDS, ADAPTABILITY_FALLBACK), 0, 0, 0)

    switches = sum(
        1 for previous, current in zip(answers, answers[1:]) if previous.category != current.category
    )
    flexibility = min(100.0, switches / max(1, total - 1) * 100)

    counts = Counter(answer.category for answer in answers)
    consistency = max(counts.values()) / total * 100
    diversity = len(counts) / max(1, pattern_count) * 100

    adaptability = flexibility * 0.4 + (100 - consistency) * 0.3 + diversity * 0.3
    return AdaptabilityScore(
        score=round_half_up(adaptability),
        interpretation=_band(adaptability, ADAPTABILITY_BANDS, ADAPTABILITY_FALLBACK),
        flexibility=round_half_up(flexibility),
        consistency=round_half_up(consistency),
        diversity=round_half_up(diversity),
    )


def social_recommendations(social_score: float) -> tuple[str, ...]:
    for threshold, recommendations in SOCIAL_RECOMMENDATIONS:
        if social_score >= threshold:
            return recommendations
    return SOCIAL_RECOMMENDATIONS[-1][1]


def generate_detailed_recommendations(
    scores: Mapping[str, float],
    has_dominant: bool = True,
    limit: int = 5,
) -> PatternRecommendations:
    """Assemble recommendation lists for the two strongest patterns.

    Every list is de-duplicated and capped at ``limit``; all lists are empty
    when no pattern scored.
    """
    if not has_dominant or not scores:
        return PatternRecommendations()

    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    primary, _ = ranked[0]
    secondary, secondary_score = ranked[1] if len(ranked) > 1 else (None, 0)

    secondary_recs: tuple[str, ...] = ()
    if secondary is not None and secondary_score >= SECONDARY_RECOMMENDATION_SCORE:
        secondary_recs = (SECONDARY_RECOMMENDATION_TEMPLATE.format(pattern=secondary),)

    def _pair(table: Mapping[str, tuple[str, ...]]) -> tuple[str, ...]:
        return unique_in_order(
            [*table.get(primary, ()), *table.get(secondary or "", ())], limit
        )

    return PatternRecommendations(
        primary=unique_in_order(PRIMARY_RECOMMENDATIONS.get(primary, ()), limit),
        secondary=unique_in_order(secondary_recs, limit),
        environmental=_pair(ENVIRONMENT_RECOMMENDATIONS),
        technological=_pair(TECHNOLOGY_RECOMMENDATIONS),
        social=unique_in_order(social_recommendations(scores.get("social", 0)), limit),
    )


def extract_pattern_results(payload: Any) -> dict[str, Any]:
    """Per-category map from either a full result or the map itself."""
    data = as_dict(payload)
    nested = data.get("results")
    if isinstance(nested, dict):
        return nested
    return data


def dominant_from_results(results: Any) -> str | None:
    """Highest-scoring stored category; None when nothing scored above 0."""
    dominant: str | None = None
    best: float = 0
    for pattern, entry in extract_pattern_results(results).items():
        score = score_of(entry)
        if score > best:
            best = score
            dominant = pattern
    return dominant


def compare_results(previous: Any, current: Any) -> dict[str, Any]:
    """Per-category score change between two results and an overall stability."""
    before = extract_pattern_results(previous)
    after = extract_pattern_results(current)

    changes: dict[str, dict[str, Any]] = {}
    for pattern, entry in after.items():
        if pattern not in before:
            continue
        change = score_of(entry) - score_of(before[pattern])
        if change > 0:
            direction = "increased"
        elif change < 0:
            direction = "decreased"
        else:
            direction = "stable"
        changes[pattern] = {
            "change": plain_number(change),
            "direction": direction,
            "magnitude": plain_number(abs(change)),
        }

    total_change = sum(item["magnitude"] for item in changes.values())
    return {
        "changes": changes,
        "trends": {},
        "stability": plain_number(max(0, 100 - total_change / 4)),
        "recommendations": [],
    }


def calculate_confidence(results: Any) -> int:
    """Overall confidence of a stored result, using its top score."""
    scores = [score_of(entry) for entry in extract_pattern_results(results).values()]
    if not scores:
        return 0
    return confidence_for(max(scores), second_highest(scores))


def profile_recommendations(profile: Mapping[str, Any]) -> dict[str, list[str]]:
    """Recommendations for a stored learning profile.

    A pattern contributes when it is the profile's dominant pattern or its
    latest score is above 60.
    """
    dominant = profile.get("dominantPattern")
    latest = extract_pattern_results(profile.get("latestResults"))

    recommendations: dict[str, list[str]] = {
        "studyTechniques": [],
        "environmentalFactors": [],
        "resourceTypes": [],
        "generalTips": [],
    }
    for pattern, sections in PROFILE_RECOMMENDATIONS.items():
        entry = as_dict(latest.get(pattern))
        if dominant != pattern and score_of(entry) <= PROFILE_RECOMMENDATION_SCORE:
            continue
        for section, items in sections.items():
            recommendations[section].extend(items)

    recommendations["generalTips"] = list(GENERAL_STUDY_TIPS)
    return recommendations
