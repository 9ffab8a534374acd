"""Helpers for reading loosely-shaped JSON payloads and stored records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def as_dict(value: Any) -> dict[str, Any]:
    """Return value when it is a dict; otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    """Return value when it is a list or tuple; otherwise an empty list."""
    if isinstance(value, tuple):
        return list(value)
    return value if isinstance(value, list) else []


def first_present(value: Mapping[str, Any], keys: Iterable[str]) -> Any:
    """Return the first non-None entry among keys."""
    for key in keys:
        found = value.get(key)
        if found is not None:
            return found
    return None


def score_of(entry: Any) -> float:
    """Numeric ``score`` of a stored per-category entry, 0 when absent."""
    score = as_dict(entry).get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return 0
    return score
