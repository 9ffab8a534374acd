"""Unit tests for cognitive recommendation assembly and comparison."""

from learning_patterns.scoring.answers import normalize_answers
from learning_patterns.scoring.cognitive_core import calculate_cognitive_results
from learning_patterns.scoring.cognitive_recommendations import (
    RECOMMENDATION_SECTIONS,
    compare_cognitive_assessments,
    dimension_explanations,
    generate_detailed_recommendations,
    generate_personalized_recommendations,
    skill_development,
)
from learning_patterns.scoring.cognitive_tables import COGNITIVE_DIMENSIONS
from learning_patterns.scoring.models import BehaviorSignals


def _payload(behavior=None):
    answers = normalize_answers(
        [
            {"dimension": "texture", "pattern": "smooth_flowing"},
            {"dimension": "temporal", "pattern": "tidal_steady"},
            {"dimension": "ecosystem", "pattern": "garden_organic"},
            {"dimension": "temperature", "pattern": "cool_logical"},
            {"dimension": "spatial", "pattern": "modular"},
        ]
    )
    return calculate_cognitive_results(answers, behavior).to_dict()


def test_personalized_recommendations_sections():
    recs = generate_personalized_recommendations(_payload())
    assert list(recs) == list(RECOMMENDATION_SECTIONS)
    for items in recs.values():
        assert len(items) <= 5
        assert len(items) == len(set(items))
    assert recs["studyTechniques"][0] == "Use sequential learning modules with clear progressions"
    assert recs["timeManagement"] == [
        "Maintain consistent daily study schedules",
        "Use regular, predictable time blocks",
        "Build sustainable long-term habits",
    ]
    assert recs["collaborationStrategies"][0] == (
        "Participate in organic, discussion-based study groups"
    )
    assert recs["skillDevelopment"] == []


def test_skill_development_from_behavior_profile():
    behavior = BehaviorSignals(average_response_time=3000, change_frequency=0.05)
    recs = generate_personalized_recommendations(_payload(behavior))
    assert recs["skillDevelopment"] == [
        "Develop reflection and consideration skills",
        "Practice analyzing multiple perspectives",
        "Develop deep processing techniques",
        "Practice patience and thorough analysis",
    ]


def test_skill_development_ignores_unmatched_readings():
    assert skill_development({"decisionMaking": "Balanced - thoughtful"}) == []


def test_personalized_recommendations_on_empty_payload():
    recs = generate_personalized_recommendations({})
    assert all(items == [] for items in recs.values())


def test_detailed_recommendations_add_explanations():
    recs = generate_detailed_recommendations(_payload(), limit=2)
    assert len(recs["studyTechniques"]) == 2
    assert set(recs["explanations"]) == set(RECOMMENDATION_SECTIONS)


def test_compare_cognitive_assessments():
    first = {
        "dimensions": {"texture": {}, "spatial": {}},
        "overallProfile": {"type": "Flow State Learner"},
        "cognitiveFingerprint": {
            "primary": {"texture": {"pattern": "smooth_flowing", "confidence": 40}}
        },
    }
    second = {
        "overallProfile": {"type": "Creative Explorer"},
        "cognitiveFingerprint": {
            "primary": {"texture": {"pattern": "clay_moldable", "confidence": 70}}
        },
    }
    comparison = compare_cognitive_assessments(first, second)
    assert comparison["overallChange"] == {
        "from": "Flow State Learner",
        "to": "Creative Explorer",
        "changed": True,
    }
    assert comparison["dimensionChanges"] == {
        "texture": {
            "pattern": {"from": "smooth_flowing", "to": "clay_moldable", "changed": True},
            "confidence": {"from": 40, "to": 70, "change": 30},
        }
    }
    assert comparison["cognitiveEvolution"].startswith(
        "You've evolved from a Flow State Learner to a Creative Explorer"
    )


def test_compare_unchanged_assessments():
    payload = _payload()
    comparison = compare_cognitive_assessments(payload, payload)
    assert comparison["overallChange"]["changed"] is False
    assert comparison["cognitiveEvolution"].startswith("You've maintained your")
    assert all(not change["pattern"]["changed"] for change in comparison["dimensionChanges"].values())


def test_compare_missing_types_reads_unknown():
    comparison = compare_cognitive_assessments({}, {})
    assert comparison["overallChange"] == {"from": "Unknown", "to": "Unknown", "changed": False}


def test_compare_tolerates_malformed_stored_confidence():
    first = {
        "dimensions": {"texture": {}, "temporal": {}},
        "cognitiveFingerprint": {
            "primary": {
                "texture": {"pattern": "smooth_flowing", "confidence": "70"},
                "temporal": {"pattern": "tidal_steady", "confidence": None},
            }
        },
    }
    second = {
        "cognitiveFingerprint": {
            "primary": {
                "texture": {"pattern": "smooth_flowing", "confidence": "70"},
                "temporal": {"pattern": "tidal_steady", "confidence": 55.5},
            }
        },
    }
    changes = compare_cognitive_assessments(first, second)["dimensionChanges"]
    assert changes["texture"]["confidence"] == {"from": 0, "to": 0, "change": 0}
    assert changes["temporal"]["confidence"] == {"from": 0, "to": 55.5, "change": 55.5}


def test_dimension_explanations_cover_every_dimension():
    explanations = dimension_explanations()
    assert set(explanations) == set(COGNITIVE_DIMENSIONS)
    assert explanations["texture"]["name"] == "Information Texture"
    explanations["texture"]["name"] = "changed"
    assert dimension_explanations()["texture"]["name"] == "Information Texture"
