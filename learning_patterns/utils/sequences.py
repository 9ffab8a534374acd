"""Ordering helpers for recommendation lists."""

from __future__ import annotations

from collections.abc import Iterable


def unique_in_order(items: Iterable[str], limit: int | None = None) -> tuple[str, ...]:
    """Drop repeats keeping first occurrence, then truncate to limit."""
    seen: dict[str, None] = dict.fromkeys(items)
    unique = tuple(seen)
    if limit is not None:
        return unique[:limit]
    return unique
