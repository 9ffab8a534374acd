"""Pairwise interaction core - PURE functions for compatibility and synergy.

This module contains ZERO I/O. Unknown pairs never fail; they fall back to
the default affinity.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import combinations

from learning_patterns.scoring.learning_tables import (
    BALANCED_APPROACH_TEMPLATE,
    COMBINED_APPROACHES,
    COMPLEMENTARY_APPROACH_TEMPLATE,
    DEFAULT_SYNERGY,
    GENERIC_COMBINED_APPROACH,
    PATTERN_SYNERGY,
)
from learning_patterns.scoring.models import PairInteraction
from learning_patterns.scoring.tally import round_half_up

COMBINED_SCORE_THRESHOLD = 50
BALANCED_GAP_THRESHOLD = 20


def pair_key(first: str, second: str) -> str:
    return f"{first}_{second}"


def lookup_pair(
    table: Mapping[str, float | str],
    first: str,
    second: str,
    default: float | str | None = None,
) -> float | str | None:
    """Look a pair up in either order."""
    forward = table.get(pair_key(first, second))
    if forward is not None:
        return forward
    backward = table.get(pair_key(second, first))
    if backward is not None:
        return backward
    return default


def compatibility(score_a: float, score_b: float) -> float:
    return max(0.0, min(100.0, 100 - abs(score_a - score_b) * 0.5))


def synergy(
    first: str,
    second: str,
    score_a: float,
    score_b: float,
    table: Mapping[str, float] = PATTERN_SYNERGY,
) -> int:
    """Affinity of the pair scaled by how strongly both are expressed."""
    base = lookup_pair(table, first, second, DEFAULT_SYNERGY)
    return round_half_up(float(base) * (score_a + score_b))


def interaction_recommendation(first: str, second: str, score_a: float, score_b: float) -> str:
    if score_a > COMBINED_SCORE_THRESHOLD and score_b > COMBINED_SCORE_THRESHOLD:
        return str(lookup_pair(COMBINED_APPROACHES, first, second, GENERIC_COMBINED_APPROACH))
    if abs(score_a - score_b) < BALANCED_GAP_THRESHOLD:
        return BALANCED_APPROACH_TEMPLATE.format(first=first, second=second)
    stronger, weaker = (first, second) if score_a >= score_b else (second, first)
    return COMPLEMENTARY_APPROACH_TEMPLATE.format(stronger=stronger, weaker=weaker)


def compute_pattern_interactions(
    scores: Mapping[str, float],
    categories: Sequence[str],
) -> dict[str, PairInteraction]:
    """Interaction for every unordered pair, keyed ``a_b`` in enumeration order."""
    interactions: dict[str, PairInteraction] = {}
    for first, second in combinations(categories, 2):
        score_a = scores.get(first, 0)
        score_b = scores.get(second, 0)
        interactions[pair_key(first, second)] = PairInteraction(
            compatibility=compatibility(score_a, score_b),
            synergy=synergy(first, second, score_a, score_b),
            recommendation=interaction_recommendation(first, second, score_a, score_b),
        )
    return interactions
