"""Unit tests for the shared tally core."""

import pytest

from learning_patterns.scoring.models import AnswerRecord, BehaviorSignals
from learning_patterns.scoring.tally import (
    accumulate,
    behavior_adjustments,
    confidence_for,
    derive_percentages,
    round_half_up,
    score_categories,
    select_dominant,
    select_secondary,
    time_adjustment,
)

CATEGORIES = ("visual", "auditory", "kinesthetic", "social")


def test_round_half_up_never_rounds_to_even():
    assert round_half_up(2.5) == 3
    assert round_half_up(62.5) == 63
    assert round_half_up(66.66) == 67
    assert round_half_up(-28.75) == -29


@pytest.mark.parametrize(
    ("response_time", "expected"),
    [
        (None, 1.0),
        (0, 1.0),
        (1500, 0.8),
        (2500, 1.0),
        (3000, 1.1),
        (15000, 1.1),
        (20000, 1.0),
        (31000, 0.7),
    ],
)
def test_time_adjustment_bands(response_time, expected):
    assert time_adjustment(response_time) == expected


def test_behavior_adjustments_without_signals_are_neutral():
    records = [AnswerRecord("visual", response_time_ms=100)]
    assert behavior_adjustments(records, CATEGORIES, None) == dict.fromkeys(CATEGORIES, 1.0)


def test_behavior_adjustments_fast_and_slow_answers():
    records = [
        AnswerRecord("visual", response_time_ms=1000),
        AnswerRecord("visual", response_time_ms=2000),
        AnswerRecord("auditory", response_time_ms=9000),
        AnswerRecord("social", response_time_ms=None),
    ]
    behavior = BehaviorSignals(average_response_time=4000)
    adjustments = behavior_adjustments(records, CATEGORIES, behavior)
    assert adjustments["visual"] == pytest.approx(1.44)
    assert adjustments["auditory"] == pytest.approx(0.9)
    assert adjustments["kinesthetic"] == 1.0
    assert adjustments["social"] == 1.0


def test_behavior_adjustments_hesitation_and_change_penalties_apply_globally():
    behavior = BehaviorSignals(hesitation_index=3, change_frequency=0.5)
    adjustments = behavior_adjustments([], CATEGORIES, behavior)
    for category in CATEGORIES:
        assert adjustments[category] == pytest.approx(0.95 * 0.9)


def test_accumulate_skips_unknown_categories():
    records = [AnswerRecord("visual", weight=2), AnswerRecord("olfactory"), AnswerRecord("social")]
    totals = accumulate(records, CATEGORIES, use_response_time=False)
    assert totals["visual"] == (1, 2.0)
    assert totals["social"] == (1, 1.0)
    assert "olfactory" not in totals


def test_derive_percentages_all_zero():
    assert derive_percentages({"a": 0.0, "b": 0.0}) == {"a": 0, "b": 0}


def test_confidence_formula():
    assert confidence_for(67, 33) == 47
    assert confidence_for(100, 0) == 100


def test_select_dominant_prefers_first_on_ties():
    assert select_dominant({"visual": 50, "auditory": 50}) == "visual"
    assert select_dominant({"visual": 0, "auditory": 0}) is None


def test_select_secondary_threshold_is_inclusive():
    scores = {"visual": 80, "auditory": 20, "social": 0}
    assert select_secondary(scores, "visual") == "auditory"
    assert select_secondary({"visual": 81, "auditory": 19}, "visual") is None
    assert select_secondary(scores, None) is None


def test_score_categories_empty_input(fixed_now):
    result = score_categories([], CATEGORIES, now=fixed_now)
    assert result.scores == dict.fromkeys(CATEGORIES, 0)
    assert result.dominant is None
    assert result.secondary is None
    assert result.total_count == 0
    assert result.timestamp == fixed_now


def test_score_categories_is_deterministic(fixed_now):
    records = [
        AnswerRecord("visual", weight=1.5, response_time_ms=5000),
        AnswerRecord("auditory", response_time_ms=1200),
        AnswerRecord("social", weight=3),
    ]
    behavior = BehaviorSignals(average_response_time=3000, hesitation_index=2.5)
    first = score_categories(records, CATEGORIES, behavior=behavior, now=fixed_now)
    second = score_categories(records, CATEGORIES, behavior=behavior, now=fixed_now)
    assert first.to_dict() == second.to_dict()


def test_score_categories_percentages_are_normalised():
    records = [AnswerRecord(category) for category in ("visual", "auditory", "social")]
    scores = score_categories(records, CATEGORIES).scores
    assert all(0 <= score <= 100 for score in scores.values())
    assert abs(sum(scores.values()) - 100) <= len(CATEGORIES) - 1
