"""Cognitive recommendation assembly - PURE functions over stored result payloads.

This module contains ZERO I/O. Functions accept the wire shape produced by
``CognitiveResult.to_dict()`` so they work equally on fresh results and on
results read back from storage.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from learning_patterns.scoring.answers import coerce_number
from learning_patterns.scoring.cognitive_tables import (
    COLLABORATION_STRATEGIES,
    DIMENSION_EXPLANATIONS,
    LEARNING_ENVIRONMENTS,
    RECOMMENDATION_EXPLANATIONS,
    SKILL_DEVELOPMENT,
    STUDY_TECHNIQUES,
    TECHNOLOGICAL_TOOLS,
    TIME_MANAGEMENT,
)
from learning_patterns.utils.payload import as_dict
from learning_patterns.scoring.models import plain_number
from learning_patterns.utils.sequences import unique_in_order

UNKNOWN_TYPE = "Unknown"

RECOMMENDATION_SECTIONS = (
    "studyTechniques",
    "learningEnvironments",
    "technologicalTools",
    "collaborationStrategies",
    "timeManagement",
    "skillDevelopment",
)


def _primary_patterns(results: Mapping[str, Any]) -> dict[str, str]:
    primary = as_dict(as_dict(results.get("cognitiveFingerprint")).get("primary"))
    patterns: dict[str, str] = {}
    for dimension, placement in primary.items():
        pattern = as_dict(placement).get("pattern")
        if isinstance(pattern, str):
            patterns[dimension] = pattern
    return patterns


def _by_dimension(
    table: Mapping[str, Mapping[str, tuple[str, ...]]],
    primary: Mapping[str, str],
) -> list[str]:
    return [
        item
        for dimension, pattern in primary.items()
        for item in table.get(dimension, {}).get(pattern, ())
    ]


def skill_development(behavior_profile: Mapping[str, Any]) -> list[str]:
    skills: list[str] = []
    for field, rules in SKILL_DEVELOPMENT:
        reading = behavior_profile.get(field)
        if not isinstance(reading, str):
            continue
        for keyword, recommendations in rules:
            if keyword in reading:
                skills.extend(recommendations)
                break
    return skills


def generate_personalized_recommendations(
    results: Mapping[str, Any],
    limit: int = 5,
) -> dict[str, list[str]]:
    """Six recommendation lists from a cognitive result, each de-duplicated and capped."""
    primary = _primary_patterns(results)
    behavior_profile = as_dict(as_dict(results.get("cognitiveFingerprint")).get("behaviorProfile"))

    sections: dict[str, list[str]] = {
        "studyTechniques": _by_dimension(STUDY_TECHNIQUES, primary),
        "learningEnvironments": _by_dimension(LEARNING_ENVIRONMENTS, primary),
        "technologicalTools": _by_dimension(TECHNOLOGICAL_TOOLS, primary),
        "collaborationStrategies": list(COLLABORATION_STRATEGIES.get(primary.get("ecosystem", ""), ())),
        "timeManagement": list(TIME_MANAGEMENT.get(primary.get("temporal", ""), ())),
        "skillDevelopment": skill_development(behavior_profile),
    }
    return {name: list(unique_in_order(sections[name], limit)) for name in RECOMMENDATION_SECTIONS}


def generate_detailed_recommendations(
    results: Mapping[str, Any],
    limit: int = 5,
) -> dict[str, Any]:
    """Personalised recommendations plus why each section was chosen."""
    recommendations: dict[str, Any] = dict(generate_personalized_recommendations(results, limit))
    recommendations["explanations"] = dict(RECOMMENDATION_EXPLANATIONS)
    return recommendations


def stored_confidence(entry: Mapping[str, Any]) -> int | float:
    """Confidence read back from storage; malformed values count as 0."""
    return plain_number(coerce_number(entry.get("confidence")) or 0)


def compare_cognitive_assessments(
    first: Mapping[str, Any],
    second: Mapping[str, Any],
) -> dict[str, Any]:
    """How the overall type and each dimension's primary pattern moved between two results."""
    type_before = as_dict(first.get("overallProfile")).get("type") or UNKNOWN_TYPE
    type_after = as_dict(second.get("overallProfile")).get("type") or UNKNOWN_TYPE
    changed = type_before != type_after

    primary_before = as_dict(as_dict(first.get("cognitiveFingerprint")).get("primary"))
    primary_after = as_dict(as_dict(second.get("cognitiveFingerprint")).get("primary"))

    dimension_changes: dict[str, Any] = {}
    for dimension in as_dict(first.get("dimensions")):
        before = as_dict(primary_before.get(dimension))
        after = as_dict(primary_after.get(dimension))
        if not before or not after:
            continue
        confidence_before = stored_confidence(before)
        confidence_after = stored_confidence(after)
        dimension_changes[dimension] = {
            "pattern": {
                "from": before.get("pattern"),
                "to": after.get("pattern"),
                "changed": before.get("pattern") != after.get("pattern"),
            },
            "confidence": {
                "from": confidence_before,
                "to": confidence_after,
                "change": plain_number(confidence_after - confidence_before),
            },
        }

    if changed:
        evolution = (
            f"You've evolved from a {type_before} to a {type_after}, "
            "showing growth in your cognitive approach."
        )
    else:
        evolution = (
            f"You've maintained your {type_before} cognitive style, "
            "showing consistency in your approach."
        )

    return {
        "overallChange": {"from": type_before, "to": type_after, "changed": changed},
        "dimensionChanges": dimension_changes,
        "cognitiveEvolution": evolution,
        "recommendations": [],
    }


def dimension_explanations() -> dict[str, Any]:
    """Fresh copy of the dimension explanation table."""
    return {
        dimension: {
            "name": entry["name"],
            "description": entry["description"],
            "patterns": dict(entry["patterns"]),
        }
        for dimension, entry in DIMENSION_EXPLANATIONS.items()
    }
