"""Unit tests for the learning-pattern scoring strategies."""

import pytest

from learning_patterns.scoring.answers import normalize_answers
from learning_patterns.scoring.learning_strategies import (
    ScoringAlgorithm,
    ScoringOptions,
    calculate_learning_patterns,
    question_category,
    question_weight,
)
from learning_patterns.scoring.learning_tables import DEFAULT_QUESTION_CATEGORY_WEIGHTS


def _answers(*patterns):
    return normalize_answers([{"pattern": pattern} for pattern in patterns])


@pytest.mark.parametrize(
    ("flag", "expected"),
    [
        ("basic", ScoringAlgorithm.BASIC),
        (" Advanced ", ScoringAlgorithm.ADVANCED),
        ("quantum", ScoringAlgorithm.WEIGHTED),
        (None, ScoringAlgorithm.WEIGHTED),
        (7, ScoringAlgorithm.WEIGHTED),
    ],
)
def test_algorithm_flag_resolution(flag, expected):
    assert ScoringAlgorithm.from_flag(flag) is expected


def test_question_category_by_position():
    assert question_category(1) == "information_processing"
    assert question_category(10) == "comprehension"
    assert question_category(11) == "general"


def test_question_weight_uniform_without_table():
    assert question_weight(2, None) == 1.0
    assert question_weight(2, DEFAULT_QUESTION_CATEGORY_WEIGHTS) == 1.2
    assert question_weight(42, DEFAULT_QUESTION_CATEGORY_WEIGHTS) == 1.0


def test_basic_counts_answers():
    result = calculate_learning_patterns(
        _answers("visual", "visual", "auditory", "kinesthetic"), "basic"
    )
    assert result.scores == {"visual": 50, "auditory": 25, "kinesthetic": 25, "social": 0}
    assert result.dominant_pattern.pattern == "visual"
    assert result.dominant_pattern.score == 50
    assert result.dominant_pattern.strength == "Moderate"
    assert result.total_questions == 4

    payload = result.to_dict()
    assert payload["algorithm"] == "basic"
    assert "secondaryPattern" not in payload
    assert payload["results"]["social"]["strength"] == "Minimal"


def test_basic_ignores_weights_and_timing():
    answers = normalize_answers(
        [
            {"pattern": "visual", "weight": 5, "responseTime": 1000},
            {"pattern": "social", "weight": 1, "responseTime": 5000},
        ]
    )
    result = calculate_learning_patterns(answers, ScoringAlgorithm.BASIC)
    assert result.scores["visual"] == result.scores["social"] == 50


@pytest.mark.parametrize("algorithm", ["basic", "weighted", "advanced"])
def test_empty_input_yields_zero_scores(algorithm):
    result = calculate_learning_patterns((), algorithm)
    assert set(result.scores.values()) == {0}
    assert result.dominant_pattern.pattern is None
    assert result.total_questions == 0
    payload = result.to_dict()
    assert payload["dominantPattern"]["pattern"] is None
    assert payload["totalQuestions"] == 0


def test_weighted_uses_answer_weight_with_uniform_sections():
    answers = normalize_answers([{"pattern": "visual", "weight": 2}, {"pattern": "auditory", "weight": 1}])
    result = calculate_learning_patterns(answers, "weighted")

    assert result.scores["visual"] == 67
    assert result.scores["auditory"] == 33
    assert result.dominant_pattern.pattern == "visual"
    assert result.dominant_pattern.strength == "Strong"
    assert result.secondary_pattern.pattern == "auditory"
    assert result.secondary_pattern.score == 33
    assert result.results["visual"].normalized_score == 50
    assert result.results["visual"].confidence == 47
    assert result.learning_profile.type == "visual"


def test_weighted_applies_section_weights():
    answers = normalize_answers([{"pattern": "visual", "weight": 2}, {"pattern": "auditory", "weight": 1}])
    options = ScoringOptions(question_category_weights=DEFAULT_QUESTION_CATEGORY_WEIGHTS)
    result = calculate_learning_patterns(answers, "weighted", options)
    assert result.scores["visual"] == 63
    assert result.scores["auditory"] == 38


def test_weighted_profile_labels():
    mixed = calculate_learning_patterns(_answers(*["visual"] * 5, *["social"] * 5), "weighted")
    assert mixed.learning_profile.type == "balanced"

    strong = calculate_learning_patterns(_answers(*["visual"] * 7, *["social"] * 3), "weighted")
    assert strong.learning_profile.type == "visual"

    combined = calculate_learning_patterns(
        _answers(*["visual"] * 3, "social", "social"), "weighted"
    )
    assert combined.scores == {"visual": 60, "auditory": 0, "kinesthetic": 0, "social": 40}
    assert combined.learning_profile.type == "visual-social"


def test_weighted_secondary_below_threshold_is_omitted():
    result = calculate_learning_patterns(_answers(*["visual"] * 9, "auditory"), "weighted")
    assert result.scores["auditory"] == 10
    assert result.secondary_pattern is None
    assert result.to_dict()["secondaryPattern"] is None


def test_dominant_never_below_secondary():
    result = calculate_learning_patterns(
        _answers("social", "auditory", "social", "kinesthetic", "auditory"), "weighted"
    )
    assert result.dominant_pattern.score >= result.secondary_pattern.score


def test_advanced_adds_insights():
    result = calculate_learning_patterns(
        _answers("visual", "visual", "auditory", "kinesthetic"), "advanced"
    )
    payload = result.to_dict()

    assert payload["algorithm"] == "advanced"
    assert len(payload["patternInteractions"]) == 6
    assert set(payload["learningEfficiency"]) == {
        "overall",
        "dominanceStrength",
        "patternBalance",
        "consistency",
        "interpretation",
    }
    assert payload["adaptabilityScore"]["factors"] == {
        "flexibility": 67,
        "consistency": 50,
        "diversity": 75,
    }
    assert payload["adaptabilityScore"]["score"] == 64

    for items in payload["recommendations"].values():
        assert len(items) <= 5
        assert len(items) == len(set(items))
    assert payload["recommendations"]["primary"][0] == (
        "Use mind maps and concept diagrams for complex topics"
    )


def test_advanced_recommendations_empty_without_dominant():
    payload = calculate_learning_patterns((), "advanced").to_dict()
    assert payload["recommendations"] == {
        "primary": [],
        "secondary": [],
        "environmental": [],
        "technological": [],
        "social": [],
    }


def test_results_are_deterministic_apart_from_timestamp(sample_answers):
    answers = normalize_answers(sample_answers)
    first = calculate_learning_patterns(answers, "advanced").to_dict()
    second = calculate_learning_patterns(answers, "advanced").to_dict()
    first.pop("timestamp")
    second.pop("timestamp")
    assert first == second
