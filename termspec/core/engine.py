#!/usr/bin/env python3
import logging
from typing import List, Optional, Tuple

from ..config import Config
from ..model import Suggestion, TermSuggestions
from ..specs import SpecRegistry, default_registry
from .cache import CachedResult, SuggestionCache
from .dispatch import CandidateDispatcher
from .resolver import TokenResolver
from .tokenizer import parse_command

logger = logging.getLogger(__name__)


class SuggestionEngine:
    """Line in, display-ready suggestions out.

    The registry and the cache are injected; by default the engine gets the
    built-in registry and a private cache.
    """

    def __init__(
        self,
        registry: Optional[SpecRegistry] = None,
        cache: Optional[SuggestionCache] = None,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.cache = cache if cache is not None else SuggestionCache()
        self.dispatcher = CandidateDispatcher(root_names=self.registry.root_suggestions)
        self.resolver = TokenResolver(self.dispatcher, lookup_root=self.registry.lookup)

    def load_suggestions(self, command: str) -> Tuple[TermSuggestions, int]:
        tokens = parse_command(command)
        if not tokens:
            return TermSuggestions(), 0

        last = tokens[-1]
        char_count = 0 if last.complete else last.raw_length

        root = tokens[0]
        if not root.complete:
            return TermSuggestions(suggestions=self.registry.root_suggestions(root.token)), char_count

        spec = self.registry.lookup(root.token)
        if spec is None:
            logger.debug("no spec known for %r", root.token)
            return TermSuggestions(), char_count

        return self.resolver.resolve(tokens[1:], spec), char_count

    def _compute(self, command: str) -> CachedResult:
        term_suggestions, char_count = self.load_suggestions(command)
        suggestions = [
            Suggestion(
                name=suggestion.name,
                name_prefix=Config.get_icon(suggestion.type.value),
                description=suggestion.description,
            )
            for suggestion in term_suggestions.suggestions
        ]
        return CachedResult(
            command=command,
            suggestions=suggestions,
            argument_description=term_suggestions.argument_description,
            char_count=char_count,
        )

    def resolve(self, command: str) -> Tuple[List[Suggestion], str, int]:
        entry = self.cache.get_or_compute(command, self._compute)
        return entry.suggestions, entry.argument_description, entry.char_count
