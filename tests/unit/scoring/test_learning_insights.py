"""Unit tests for learning-pattern insights and stored-result helpers."""

from learning_patterns.scoring.learning_insights import (
    calculate_confidence,
    calculate_learning_efficiency,
    compare_results,
    dominant_from_results,
    generate_detailed_recommendations,
    profile_recommendations,
)
from learning_patterns.scoring.learning_tables import EFFICIENCY_FALLBACK, GENERAL_STUDY_TIPS


def test_learning_efficiency_for_even_profile():
    efficiency = calculate_learning_efficiency([25, 25, 25, 25])
    assert efficiency.overall == 70
    assert efficiency.pattern_balance == 100
    assert efficiency.consistency == 100
    assert efficiency.interpretation == "Good learning efficiency with some adaptability"


def test_learning_efficiency_can_go_negative():
    efficiency = calculate_learning_efficiency([50, 25, 25, 0])
    assert efficiency.overall == -29
    assert efficiency.pattern_balance == -212
    assert efficiency.interpretation == EFFICIENCY_FALLBACK


def test_detailed_recommendations_are_deduped_and_capped():
    recs = generate_detailed_recommendations(
        {"visual": 50, "auditory": 35, "kinesthetic": 15, "social": 0}
    )
    assert len(recs.primary) == 4
    assert recs.secondary == (
        "Incorporate auditory elements to complement your primary learning style",
    )
    assert len(recs.environmental) == 5
    assert recs.environmental[0] == "Well-lit, organized workspace"
    assert recs.social == (
        "Focus on independent study methods",
        "Use social learning sparingly",
    )


def test_detailed_recommendations_respect_limit():
    recs = generate_detailed_recommendations({"social": 70, "visual": 30}, limit=2)
    assert recs.primary == ("Form or join study groups", "Participate in class discussions and forums")
    assert recs.social == (
        "Actively seek group learning opportunities",
        "Consider becoming a peer tutor",
    )


def test_dominant_from_results_accepts_full_result_or_map():
    per_category = {"visual": {"score": 30}, "social": {"score": 45}}
    assert dominant_from_results(per_category) == "social"
    assert dominant_from_results({"results": per_category}) == "social"
    assert dominant_from_results({"visual": {"score": 0}}) is None
    assert dominant_from_results(None) is None


def test_compare_results():
    previous = {"results": {"visual": {"score": 50}, "auditory": {"score": 30}}}
    current = {
        "visual": {"score": 60},
        "auditory": {"score": 30},
        "social": {"score": 10},
    }
    comparison = compare_results(previous, current)
    assert comparison["changes"] == {
        "visual": {"change": 10, "direction": "increased", "magnitude": 10},
        "auditory": {"change": 0, "direction": "stable", "magnitude": 0},
    }
    assert comparison["stability"] == 97.5
    assert comparison["trends"] == {}
    assert comparison["recommendations"] == []


def test_calculate_confidence():
    assert calculate_confidence({"visual": {"score": 60}, "auditory": {"score": 30}}) == 42
    assert calculate_confidence({}) == 0


def test_profile_recommendations_include_dominant_and_strong_patterns():
    profile = {
        "dominantPattern": "visual",
        "latestResults": {
            "results": {
                "visual": {"score": 55},
                "kinesthetic": {"score": 65},
                "social": {"score": 60},
            }
        },
    }
    recs = profile_recommendations(profile)
    assert "Use mind maps and diagrams to organize information" in recs["studyTechniques"]
    assert "Take breaks to move around while studying" in recs["studyTechniques"]
    assert "Form study groups" not in recs["studyTechniques"]
    assert recs["generalTips"] == list(GENERAL_STUDY_TIPS)


def test_profile_recommendations_for_empty_profile():
    recs = profile_recommendations({})
    assert recs["studyTechniques"] == []
    assert recs["generalTips"] == list(GENERAL_STUDY_TIPS)
