"""Tally core - PURE functions for accumulation, percentages and confidence.

This module contains ZERO I/O. Pure functions operating on AnswerRecord tuples.
Every scoring variant, learning-pattern and cognitive alike, funnels through
``score_categories``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime
from types import MappingProxyType

from learning_patterns.scoring.models import (
    AnswerRecord,
    BehaviorSignals,
    CategoryTally,
    ScoringResult,
)
from learning_patterns.utils.clock import utc_now

DEFAULT_SECONDARY_THRESHOLD = 20

FAST_RESPONSE_RATIO = 0.7
SLOW_RESPONSE_RATIO = 1.5
FAST_RESPONSE_BOOST = 1.2
SLOW_RESPONSE_PENALTY = 0.9
HESITATION_THRESHOLD = 2
HESITATION_PENALTY = 0.95
CHANGE_FREQUENCY_THRESHOLD = 0.3
CHANGE_FREQUENCY_PENALTY = 0.9

WeightFn = Callable[[AnswerRecord], float]


def round_half_up(value: float) -> int:
    """Round .5 away from negative infinity, never to even."""
    return math.floor(value + 0.5)


def time_adjustment(response_time_ms: int | None) -> float:
    """Scale an answer by how long the respondent took.

    Under 2s reads as impulsive, over 30s as uncertain, 3-15s as considered.
    A zero or missing time means no timing was captured.
    """
    if not response_time_ms:
        return 1.0
    if response_time_ms < 2000:
        return 0.8
    if response_time_ms > 30000:
        return 0.7
    if 3000 <= response_time_ms <= 15000:
        return 1.1
    return 1.0


def behavior_adjustments(
    records: Iterable[AnswerRecord],
    categories: Sequence[str],
    behavior: BehaviorSignals | None,
) -> dict[str, float]:
    """Per-category multiplicative adjustment from behavioural signals.

    Every timed answer compounds onto its category's adjustment, so a category
    answered quickly three times is boosted three times.
    """
    adjustments = dict.fromkeys(categories, 1.0)
    if behavior is None:
        return adjustments

    average = behavior.average_response_time
    if average:
        for record in records:
            if record.category not in adjustments or not record.response_time_ms:
                continue
            if record.response_time_ms < average * FAST_RESPONSE_RATIO:
                adjustments[record.category] *= FAST_RESPONSE_BOOST
            elif record.response_time_ms > average * SLOW_RESPONSE_RATIO:
                adjustments[record.category] *= SLOW_RESPONSE_PENALTY

    if behavior.hesitation_index is not None and behavior.hesitation_index > HESITATION_THRESHOLD:
        for category in adjustments:
            adjustments[category] *= HESITATION_PENALTY

    if (
        behavior.change_frequency is not None
        and behavior.change_frequency > CHANGE_FREQUENCY_THRESHOLD
    ):
        for category in adjustments:
            adjustments[category] *= CHANGE_FREQUENCY_PENALTY

    return adjustments


def accumulate(
    records: Iterable[AnswerRecord],
    categories: Sequence[str],
    *,
    base_weight: WeightFn | None = None,
    adjustments: Mapping[str, float] | None = None,
    use_response_time: bool = True,
) -> dict[str, tuple[int, float]]:
    """Sum ``(count, accumulated_weight)`` per category, skipping unknown categories."""
    totals = {category: (0, 0.0) for category in categories}
    for record in records:
        if record.category not in totals:
            continue
        weight = base_weight(record) if base_weight is not None else record.weight
        if adjustments is not None:
            weight *= adjustments.get(record.category, 1.0)
        if use_response_time:
            weight *= time_adjustment(record.response_time_ms)
        count, accumulated = totals[record.category]
        totals[record.category] = (count + 1, accumulated + weight)
    return totals


def derive_percentages(accumulated: Mapping[str, float]) -> dict[str, int]:
    total = sum(accumulated.values())
    if total <= 0:
        return dict.fromkeys(accumulated, 0)
    return {key: round_half_up(100 * value / total) for key, value in accumulated.items()}


def second_highest(scores: Iterable[int]) -> int:
    ordered = sorted(scores, reverse=True)
    return ordered[1] if len(ordered) > 1 else 0


def confidence_for(score: float, runner_up: float) -> int:
    """Separation from the runner-up weighted 0.6, absolute score weighted 0.4.

    Only meaningful for the top slots; lower categories go negative.
    """
    return round_half_up(0.6 * (score - runner_up) + 0.4 * score)


def select_dominant(scores: Mapping[str, int]) -> str | None:
    """Highest score wins, first in enumeration order on ties, None when all zero."""
    dominant: str | None = None
    best = 0
    for category, score in scores.items():
        if score > best:
            best = score
            dominant = category
    return dominant


def select_secondary(
    scores: Mapping[str, int],
    dominant: str | None,
    threshold: int = DEFAULT_SECONDARY_THRESHOLD,
) -> str | None:
    if dominant is None:
        return None
    secondary: str | None = None
    best = 0
    for category, score in scores.items():
        if category != dominant and score > best:
            best = score
            secondary = category
    if secondary is None or best < threshold:
        return None
    return secondary


def score_categories(
    records: Iterable[AnswerRecord],
    categories: Sequence[str],
    *,
    base_weight: WeightFn | None = None,
    behavior: BehaviorSignals | None = None,
    use_response_time: bool = True,
    secondary_threshold: int = DEFAULT_SECONDARY_THRESHOLD,
    now: datetime | None = None,
) -> ScoringResult:
    """Tally records over one category enumeration.

    Args:
        records: Normalised answers; unknown categories are ignored
        categories: The active enumeration, also the tie-break order
        base_weight: Per-record base weight, defaults to the record's own weight
        behavior: Optional behavioural signals
        use_response_time: Apply the per-answer response-time adjustment
        secondary_threshold: Minimum score for a secondary category
        now: Result timestamp, defaults to the current UTC time

    Returns:
        ScoringResult with one CategoryTally per category
    """
    records = tuple(records)
    adjustments = behavior_adjustments(records, categories, behavior)
    totals = accumulate(
        records,
        categories,
        base_weight=base_weight,
        adjustments=adjustments,
        use_response_time=use_response_time,
    )

    percentages = derive_percentages({key: total[1] for key, total in totals.items()})
    runner_up = second_highest(percentages.values())

    tallies = {
        category: CategoryTally(
            category=category,
            count=totals[category][0],
            accumulated_weight=totals[category][1],
            behavior_weight=adjustments[category],
            percentage_score=percentages[category],
            confidence=confidence_for(percentages[category], runner_up),
        )
        for category in categories
    }

    dominant = select_dominant(percentages)
    return ScoringResult(
        categories=MappingProxyType(tallies),
        dominant=dominant,
        secondary=select_secondary(percentages, dominant, secondary_threshold),
        timestamp=now or utc_now(),
    )
