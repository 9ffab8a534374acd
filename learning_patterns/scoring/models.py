"""Immutable value types shared by every scoring variant.

This module contains ZERO I/O. Everything here is produced fresh per scoring run.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any

from learning_patterns.utils.clock import to_iso


def plain_number(value: float) -> int | float:
    """Integral floats serialise as ints."""
    return int(value) if float(value).is_integer() else value


@dataclass(frozen=True)
class AnswerRecord:
    """One respondent answer, normalised once at the request boundary.

    Attributes:
        category: Bucket the answer votes for (``visual``, ``smooth_flowing``, ...)
        weight: Positive relative weight of the vote
        response_time_ms: Time taken to answer, when captured
        dimension: Cognitive dimension the answer belongs to, cognitive variant only
        position: 1-based index of the answer in the submitted list
    """

    category: str
    weight: float = 1.0
    response_time_ms: int | None = None
    dimension: str | None = None
    position: int = 0


@dataclass(frozen=True)
class BehaviorSignals:
    """Respondent-level behavioural metadata captured by the client."""

    average_response_time: float | None = None
    hesitation_index: float | None = None
    change_frequency: float | None = None
    attention_stability: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "averageResponseTime": self.average_response_time,
            "hesitationIndex": self.hesitation_index,
            "changeFrequency": self.change_frequency,
            "attentionStability": self.attention_stability,
        }


@dataclass(frozen=True)
class CategoryTally:
    """Per-category accumulation for a single scoring run."""

    category: str
    count: int
    accumulated_weight: float
    behavior_weight: float
    percentage_score: int
    confidence: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "accumulatedWeight": round(self.accumulated_weight, 4),
            "behaviorWeight": round(self.behavior_weight, 4),
            "score": self.percentage_score,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class PairInteraction:
    """How two categories combine."""

    compatibility: float
    synergy: int
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "compatibility": plain_number(self.compatibility),
            "synergy": self.synergy,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class ScoringResult:
    """Raw outcome of tallying one enumeration of categories.

    Attributes:
        categories: Category key to tally, in enumeration order
        dominant: Highest scoring category, None when every score is 0
        secondary: Runner-up, None when it scores below the threshold
        interactions: Pairwise interactions, advanced mode only
        timestamp: When the result was produced
    """

    categories: Mapping[str, CategoryTally]
    dominant: str | None
    secondary: str | None
    timestamp: datetime
    interactions: Mapping[str, PairInteraction] | None = None

    @property
    def scores(self) -> dict[str, int]:
        return {key: tally.percentage_score for key, tally in self.categories.items()}

    @property
    def total_count(self) -> int:
        return sum(tally.count for tally in self.categories.values())

    def tally(self, category: str | None) -> CategoryTally | None:
        if category is None:
            return None
        return self.categories.get(category)

    def with_interactions(self, interactions: Mapping[str, PairInteraction]) -> ScoringResult:
        return ScoringResult(
            categories=self.categories,
            dominant=self.dominant,
            secondary=self.secondary,
            timestamp=self.timestamp,
            interactions=MappingProxyType(dict(interactions)),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "categories": {key: tally.to_dict() for key, tally in self.categories.items()},
            "dominant": self.dominant,
            "secondary": self.secondary,
            "timestamp": to_iso(self.timestamp),
        }
        if self.interactions is not None:
            payload["interactions"] = {
                key: interaction.to_dict() for key, interaction in self.interactions.items()
            }
        return payload
