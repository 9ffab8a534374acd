"""Pattern scoring engine.

Pure, deterministic scoring of learning-pattern and cognitive questionnaires.
"""

from learning_patterns.scoring.answers import (
    normalize_answers,
    normalize_scenario_responses,
    parse_behavior_signals,
)
from learning_patterns.scoring.cognitive_core import (
    CognitiveResult,
    calculate_cognitive_results,
    process_scenario_assessment,
)
from learning_patterns.scoring.cognitive_recommendations import (
    compare_cognitive_assessments,
    dimension_explanations,
    generate_detailed_recommendations,
    generate_personalized_recommendations,
)
from learning_patterns.scoring.learning_insights import (
    calculate_confidence,
    compare_results,
    dominant_from_results,
    profile_recommendations,
)
from learning_patterns.scoring.learning_strategies import (
    LearningPatternResult,
    ScoringAlgorithm,
    ScoringOptions,
    calculate_learning_patterns,
)
from learning_patterns.scoring.models import (
    AnswerRecord,
    BehaviorSignals,
    CategoryTally,
    PairInteraction,
    ScoringResult,
)

__all__ = [
    "AnswerRecord",
    "BehaviorSignals",
    "CategoryTally",
    "CognitiveResult",
    "LearningPatternResult",
    "PairInteraction",
    "ScoringAlgorithm",
    "ScoringOptions",
    "ScoringResult",
    "calculate_cognitive_results",
    "calculate_confidence",
    "calculate_learning_patterns",
    "compare_cognitive_assessments",
    "compare_results",
    "dimension_explanations",
    "dominant_from_results",
    "generate_detailed_recommendations",
    "generate_personalized_recommendations",
    "normalize_answers",
    "normalize_scenario_responses",
    "parse_behavior_signals",
    "process_scenario_assessment",
    "profile_recommendations",
]
