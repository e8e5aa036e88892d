from .cache import CachedResult, SuggestionCache
from .dispatch import CandidateDispatcher
from .engine import SuggestionEngine
from .resolver import TokenResolver
from .tokenizer import CommandToken, parse_command

__all__ = [
    "CachedResult",
    "CandidateDispatcher",
    "CommandToken",
    "SuggestionCache",
    "SuggestionEngine",
    "TokenResolver",
    "parse_command",
]
