#!/usr/bin/env python3
from typing import List, Optional, Sequence

from ..model import Arg, FilterStrategy, ProcessedToken, SuggestionType, TermSuggestion
from .filters import matches


def suggestion_recommendations(
    arg: Arg,
    partial: Optional[str],
    strategy: FilterStrategy,
    accepted_tokens: Sequence[ProcessedToken] = (),
) -> List[TermSuggestion]:
    return [
        TermSuggestion(item.name, SuggestionType.ARG, item.description)
        for item in arg.suggestions
        if matches(item.name, partial, strategy)
    ]
