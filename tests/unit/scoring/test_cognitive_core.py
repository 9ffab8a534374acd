"""Unit tests for the cognitive fingerprint core."""

import pytest

from learning_patterns.scoring.answers import normalize_answers
from learning_patterns.scoring.cognitive_core import (
    analyze_behavior,
    calculate_cognitive_results,
    dimension_synergy,
    map_to_cognitive_pattern,
    process_scenario_assessment,
    processing_speed,
)
from learning_patterns.scoring.cognitive_tables import COGNITIVE_DIMENSIONS
from learning_patterns.scoring.models import BehaviorSignals


def _cognitive(*pairs):
    return normalize_answers([{"dimension": dimension, "pattern": pattern} for dimension, pattern in pairs])


@pytest.fixture
def flow_state_answers():
    return _cognitive(
        ("texture", "smooth_flowing"),
        ("texture", "smooth_flowing"),
        ("texture", "rough_grippable"),
        ("temporal", "tidal_steady"),
    )


def test_map_to_cognitive_pattern():
    native = map_to_cognitive_pattern("texture", "clay_moldable")
    assert native.pattern == "clay_moldable"
    assert native.defaulted is False

    scenario = map_to_cognitive_pattern("temperature", "high_intensity")
    assert scenario.pattern == "hot_urgent"
    assert scenario.defaulted is False

    fallback = map_to_cognitive_pattern("spatial", "mystery")
    assert fallback.pattern == "foundation_up"
    assert fallback.defaulted is True

    assert map_to_cognitive_pattern("colour", "red") is None


def test_dimension_scores(flow_state_answers, fixed_now):
    result = calculate_cognitive_results(flow_state_answers, now=fixed_now)
    texture = result.dimensions["texture"]
    assert texture.scoring.scores == {
        "smooth_flowing": 67,
        "rough_grippable": 33,
        "sand_shifting": 0,
        "clay_moldable": 0,
    }
    assert texture.confidence == 47
    assert result.dimensions["temporal"].confidence == 100
    assert result.dimensions["spatial"].scoring.total_count == 0
    assert result.dimensions["spatial"].confidence == 0


def test_fingerprint_and_profile(flow_state_answers, fixed_now):
    payload = calculate_cognitive_results(flow_state_answers, now=fixed_now).to_dict()
    fingerprint = payload["cognitiveFingerprint"]

    assert set(fingerprint["primary"]) == {"texture", "temporal"}
    assert fingerprint["primary"]["texture"]["pattern"] == "smooth_flowing"
    assert fingerprint["secondary"]["texture"]["pattern"] == "rough_grippable"
    assert fingerprint["confidence"] == 74
    assert fingerprint["cognitiveStyle"].startswith("Your cognitive style is characterized by consistent")
    assert fingerprint["adaptabilityIndex"] == 0
    assert fingerprint["processingSpeed"] == ""
    assert fingerprint["behaviorProfile"] == {}

    profile = payload["overallProfile"]
    assert profile["type"] == "Flow State Learner"
    assert profile["growthAreas"] == ["Develop stronger preferences in texture dimension"]
    assert payload["algorithm"] == "cognitive_multi_dimensional_advanced"
    assert payload["timestamp"] == "2026-03-14T09:30:00.000Z"


def test_dimension_interactions(flow_state_answers):
    interactions = calculate_cognitive_results(flow_state_answers).interactions
    assert len(interactions) == 10
    assert interactions["texture_temporal"].synergy == 90
    assert interactions["texture_temperature"].synergy == 50


def test_dimension_synergy_is_symmetric():
    assert dimension_synergy("tidal_steady", "smooth_flowing") == 90
    assert dimension_synergy("smooth_flowing", "tidal_steady") == 90


def test_learning_pathways_are_deduplicated(flow_state_answers):
    pathways = calculate_cognitive_results(flow_state_answers).pathways
    assert pathways.optimal
    assert len(pathways.optimal) == len(set(pathways.optimal))
    assert {item.dimension for item in pathways.development} <= {"texture", "temporal"}


def test_defaulted_patterns_are_reported():
    answers = _cognitive(("spatial", "mystery"), ("texture", "fluid_expression"), ("colour", "red"))
    result = calculate_cognitive_results(answers)
    assert [item.to_dict() for item in result.defaulted_patterns] == [
        {"dimension": "spatial", "pattern": "mystery", "mappedTo": "foundation_up", "position": 1}
    ]
    assert result.dimensions["texture"].scoring.dominant == "smooth_flowing"
    assert result.dimensions["spatial"].scoring.dominant == "foundation_up"


def test_answers_without_dimension_are_ignored():
    result = calculate_cognitive_results(normalize_answers([{"pattern": "smooth_flowing"}]))
    assert all(score.scoring.total_count == 0 for score in result.dimensions.values())
    assert result.fingerprint.primary == {}
    assert result.overall_profile.type == "Adaptive Thinker"


def test_empty_cognitive_input():
    payload = calculate_cognitive_results(()).to_dict()
    assert set(payload["dimensions"]) == set(COGNITIVE_DIMENSIONS)
    assert payload["cognitiveFingerprint"]["confidence"] == 0
    assert payload["learningPathways"] == {"optimal": [], "alternative": [], "development": []}


def test_behavior_analysis():
    behavior = BehaviorSignals(
        average_response_time=3000,
        hesitation_index=0.5,
        change_frequency=0.05,
        attention_stability=95,
    )
    analysis = analyze_behavior(behavior)
    assert analysis["decisionMaking"].startswith("Decisive")
    assert analysis["processingStyle"].startswith("Rapid processor")
    assert analysis["attentionPattern"].startswith("Highly focused")
    assert analysis["cognitiveLoad"].startswith("Low cognitive load")
    assert processing_speed(behavior) == "Fast processor"
    assert processing_speed(BehaviorSignals(average_response_time=13000)) == "Reflective processor"


def test_behavior_fills_fingerprint(flow_state_answers):
    behavior = BehaviorSignals(average_response_time=8000)
    fingerprint = calculate_cognitive_results(flow_state_answers, behavior).fingerprint
    assert fingerprint.processing_speed == "Moderate processor"
    # secondary texture 33 * 0.5 plus two distinct primary patterns * 5
    assert fingerprint.adaptability_index == 27


def test_intensity_processor_profile():
    answers = _cognitive(("temporal", "lightning_burst"), ("temperature", "hot_urgent"))
    assert calculate_cognitive_results(answers).overall_profile.type == "Intensity Processor"


def test_process_scenario_assessment():
    responses = [
        {
            "selectedOption": "a",
            "responseTime": 5000,
            "questionData": {
                "options": [
                    {"id": "a", "pattern": "lightning_burst", "hidden_dimension": "temporal"},
                ]
            },
        },
        {
            "selectedOption": "b",
            "questionData": {
                "options": [
                    {"id": "b", "pattern": "energy_motivation", "hidden_dimension": "temperature"},
                ]
            },
        },
    ]
    result = process_scenario_assessment(responses)
    assert result.dimensions["temperature"].scoring.dominant == "hot_urgent"
    assert result.overall_profile.type == "Intensity Processor"
