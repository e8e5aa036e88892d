from .filters import effective_strategy, fuzzy_match, matches
from .generators import generator_recommendations
from .suggestions import suggestion_recommendations
from .templates import template_recommendations

# Candidate sources queried, in order, for the value of an active arg.
ARG_SOURCES = (
    generator_recommendations,
    suggestion_recommendations,
    template_recommendations,
)

__all__ = [
    "ARG_SOURCES",
    "effective_strategy",
    "fuzzy_match",
    "generator_recommendations",
    "matches",
    "suggestion_recommendations",
    "template_recommendations",
]
