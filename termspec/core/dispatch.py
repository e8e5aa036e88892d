#!/usr/bin/env python3
"""Turn a position in the grammar into a concrete candidate list."""
from typing import Iterable, List, Optional, Sequence

from ..model import (
    Arg,
    FilterStrategy,
    Option,
    ProcessedToken,
    Subcommand,
    SuggestionType,
    TermSuggestion,
    TermSuggestions,
)
from ..recommendations import ARG_SOURCES, matches
from .lookup import longest_alias


def _matching_name(names: Sequence[str], partial: Optional[str], strategy: FilterStrategy) -> str:
    return longest_alias([name for name in names if matches(name, partial, strategy)])


def subcommand_recommendations(
    spec: Subcommand, partial: Optional[str], strategy: FilterStrategy
) -> List[TermSuggestion]:
    suggestions = []
    for child in spec.subcommands:
        if child.is_hidden:
            continue
        name = _matching_name(child.name, partial, strategy)
        if name:
            suggestions.append(
                TermSuggestion(name, SuggestionType.SUBCOMMAND, child.description)
            )
    return suggestions


def option_recommendations(
    options: Iterable[Option],
    accepted_tokens: Sequence[ProcessedToken],
    partial: Optional[str],
    strategy: FilterStrategy,
) -> List[TermSuggestion]:
    used = {token.token for token in accepted_tokens}
    suggestions = []
    for candidate in options:
        if candidate.is_hidden or used.intersection(candidate.name):
            continue
        name = _matching_name(candidate.name, partial, strategy)
        if name:
            suggestions.append(
                TermSuggestion(name, SuggestionType.OPTION, candidate.description)
            )
    return suggestions


def arg_recommendations(
    active_arg: Arg,
    partial: Optional[str],
    strategy: FilterStrategy,
    accepted_tokens: Sequence[ProcessedToken],
) -> List[TermSuggestion]:
    suggestions = []
    for source in ARG_SOURCES:
        suggestions.extend(source(active_arg, partial, strategy, accepted_tokens))
    return suggestions


def remove_duplicates(
    suggestions: Iterable[TermSuggestion], accepted_tokens: Sequence[ProcessedToken]
) -> List[TermSuggestion]:
    seen = {token.token for token in accepted_tokens}
    unique = []
    for suggestion in suggestions:
        if suggestion.name in seen:
            continue
        seen.add(suggestion.name)
        unique.append(suggestion)
    return unique


class CandidateDispatcher:
    """Queries the candidate sources for the active grammar position.

    ``root_names`` is called with the partial token and a filter strategy
    when a command arg is being typed, so nested command names can be
    offered alongside the arg's own candidates.
    """

    def __init__(self, root_names=None):
        self.root_names = root_names

    def arg_candidates(
        self,
        active_arg: Arg,
        partial: Optional[str],
        strategy: FilterStrategy,
        accepted_tokens: Sequence[ProcessedToken],
    ) -> List[TermSuggestion]:
        suggestions = arg_recommendations(active_arg, partial, strategy, accepted_tokens)
        if active_arg.is_command and self.root_names is not None:
            suggestions.extend(self.root_names(partial, strategy))
        return suggestions

    def subcommand_driven(
        self,
        spec: Subcommand,
        persistent_options: Sequence[Option],
        partial: Optional[str],
        args_depleted: bool,
        args_from_subcommand: bool,
        accepted_tokens: Sequence[ProcessedToken],
    ) -> TermSuggestions:
        if args_depleted and args_from_subcommand:
            return TermSuggestions()

        suggestions: List[TermSuggestion] = []
        strategy = spec.filter_strategy
        if spec.args:
            suggestions.extend(
                self.arg_candidates(spec.args[0], partial, strategy, accepted_tokens)
            )
        if not args_from_subcommand:
            suggestions.extend(subcommand_recommendations(spec, partial, strategy))
            suggestions.extend(
                option_recommendations(
                    tuple(spec.options) + tuple(persistent_options),
                    accepted_tokens,
                    partial,
                    strategy,
                )
            )

        return TermSuggestions(suggestions=remove_duplicates(suggestions, accepted_tokens))

    def arg_driven(
        self,
        args: Sequence[Arg],
        spec: Subcommand,
        persistent_options: Sequence[Option],
        partial: Optional[str],
        accepted_tokens: Sequence[ProcessedToken],
        variadic_bound: bool,
    ) -> TermSuggestions:
        active_arg = args[0]
        strategy = active_arg.filter_strategy

        suggestions = self.arg_candidates(active_arg, partial, strategy, accepted_tokens)

        if active_arg.is_optional and not (active_arg.is_variadic and variadic_bound):
            suggestions.extend(subcommand_recommendations(spec, partial, strategy))
            suggestions.extend(
                option_recommendations(
                    tuple(spec.options) + tuple(persistent_options),
                    accepted_tokens,
                    partial,
                    strategy,
                )
            )

        suggestions = remove_duplicates(suggestions, accepted_tokens)
        return TermSuggestions(
            suggestions=suggestions,
            argument_description="" if suggestions else active_arg.name,
        )
