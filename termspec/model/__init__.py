from .grammar import (
    Arg,
    FilterStrategy,
    Generator,
    Option,
    StaticSuggestion,
    Subcommand,
    Template,
    arg,
    option,
    subcommand,
)
from .suggestions import (
    ProcessedToken,
    Suggestion,
    SuggestionType,
    TermSuggestion,
    TermSuggestions,
)

__all__ = [
    "Arg",
    "FilterStrategy",
    "Generator",
    "Option",
    "ProcessedToken",
    "StaticSuggestion",
    "Subcommand",
    "Suggestion",
    "SuggestionType",
    "Template",
    "TermSuggestion",
    "TermSuggestions",
    "arg",
    "option",
    "subcommand",
]
