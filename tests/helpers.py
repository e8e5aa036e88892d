"""Small assertion helpers shared by the test modules."""

from termspec.model import TermSuggestions


def names(result):
    """Names in a resolve() triple, a TermSuggestions or a plain suggestion list."""
    if isinstance(result, tuple):
        suggestions = result[0]
    elif isinstance(result, TermSuggestions):
        suggestions = result.suggestions
    else:
        suggestions = result
    return [suggestion.name for suggestion in suggestions]
