"""Boundary normalisation of raw answer payloads into AnswerRecord values.

Clients send answers in several shapes (``pattern`` or ``category``,
``dimension`` or ``hidden_dimension``, ``responseTime`` or ``responseTimeMs``).
They are folded into one record type here so the scoring code never branches
on field presence. Malformed entries are skipped, never raised.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from learning_patterns.scoring.models import AnswerRecord, BehaviorSignals
from learning_patterns.utils.payload import as_dict, as_list, first_present

CATEGORY_KEYS = ("pattern", "category")
DIMENSION_KEYS = ("dimension", "hidden_dimension")
RESPONSE_TIME_KEYS = ("responseTime", "responseTimeMs", "response_time_ms")


def coerce_number(value: Any) -> float | None:
    """Return value as a finite float, or None for anything non-numeric."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def coerce_weight(value: Any) -> float:
    """Non-numeric, zero or negative weights fall back to 1.0."""
    number = coerce_number(value)
    if number is None or number <= 0:
        return 1.0
    return number


def coerce_response_time(value: Any) -> int | None:
    number = coerce_number(value)
    if number is None or number < 0:
        return None
    return int(number)


def normalize_answer(raw: Any, position: int) -> AnswerRecord | None:
    """Normalise a single raw answer, returning None when it carries no category."""
    if not isinstance(raw, Mapping):
        return None

    category = first_present(raw, CATEGORY_KEYS)
    if not isinstance(category, str) or not category:
        return None

    dimension = first_present(raw, DIMENSION_KEYS)
    return AnswerRecord(
        category=category,
        weight=coerce_weight(raw.get("weight")),
        response_time_ms=coerce_response_time(first_present(raw, RESPONSE_TIME_KEYS)),
        dimension=dimension if isinstance(dimension, str) and dimension else None,
        position=position,
    )


def normalize_answers(raw_answers: Any) -> tuple[AnswerRecord, ...]:
    """Normalise an ordered answer list.

    Positions are 1-based indexes into the submitted list, skipped entries
    included, so question-position weighting lines up with the questionnaire.
    """
    records: list[AnswerRecord] = []
    for index, raw in enumerate(as_list(raw_answers)):
        record = normalize_answer(raw, index + 1)
        if record is not None:
            records.append(record)
    return tuple(records)


def normalize_scenario_responses(raw_responses: Any) -> tuple[AnswerRecord, ...]:
    """Convert scenario responses into cognitive answers.

    Each response names the option it selected; the option carries the hidden
    dimension, pattern and weight. Responses whose option cannot be resolved
    are skipped.
    """
    records: list[AnswerRecord] = []
    for index, raw in enumerate(as_list(raw_responses)):
        response = as_dict(raw)
        selected = response.get("selectedOption")
        question = as_dict(response.get("questionData"))
        if not selected or not question:
            continue

        option = next(
            (
                candidate
                for candidate in as_list(question.get("options"))
                if isinstance(candidate, Mapping) and candidate.get("id") == selected
            ),
            None,
        )
        if option is None:
            continue

        record = normalize_answer(
            {
                "pattern": option.get("pattern"),
                "hidden_dimension": option.get("hidden_dimension"),
                "weight": option.get("weight"),
                "responseTime": response.get("responseTime"),
            },
            index + 1,
        )
        if record is not None:
            records.append(record)
    return tuple(records)


def parse_behavior_signals(raw_behavior: Any) -> BehaviorSignals | None:
    """Read ``behaviorData.patterns``; None when no behavioural data was sent."""
    patterns = as_dict(as_dict(raw_behavior).get("patterns"))
    if not patterns:
        return None
    return BehaviorSignals(
        average_response_time=coerce_number(patterns.get("averageResponseTime")),
        hesitation_index=coerce_number(patterns.get("hesitationIndex")),
        change_frequency=coerce_number(patterns.get("changeFrequency")),
        attention_stability=coerce_number(patterns.get("attentionStability")),
    )
