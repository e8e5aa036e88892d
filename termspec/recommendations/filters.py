#!/usr/bin/env python3
from typing import Optional

from ..config import Config
from ..model import FilterStrategy


def effective_strategy(strategy: FilterStrategy) -> FilterStrategy:
    if strategy is FilterStrategy.DEFAULT:
        try:
            return FilterStrategy(Config.DEFAULT_FILTER_STRATEGY)
        except ValueError:
            return FilterStrategy.PREFIX
    return strategy


def fuzzy_match(candidate: str, query: str) -> bool:
    if not query:
        return True

    candidate_lower = candidate.lower()
    query_lower = query.lower()

    candidate_idx = 0
    for char in query_lower:
        while (
            candidate_idx < len(candidate_lower)
            and candidate_lower[candidate_idx] != char
        ):
            candidate_idx += 1
        if candidate_idx >= len(candidate_lower):
            return False
        candidate_idx += 1

    return True


def matches(candidate: str, partial: Optional[str], strategy: FilterStrategy) -> bool:
    """True when ``candidate`` survives filtering against the typed text."""
    if not partial:
        return True
    if effective_strategy(strategy) is FilterStrategy.FUZZY:
        return fuzzy_match(candidate, partial)
    return candidate.startswith(partial)
