#!/usr/bin/env python3
"""Walk typed tokens against a command grammar.

``handle_subcommand``, ``handle_option`` and ``handle_arg`` call each other
until the tokens run out or the token under the cursor is reached, at which
point the dispatcher produces the candidates. Accepted tokens and inherited
persistent options are passed down as tuples, so sibling calls never share
a mutable list.
"""
import logging
from typing import Optional, Sequence, Tuple

from ..model import Arg, Option, ProcessedToken, Subcommand, TermSuggestions
from .dispatch import CandidateDispatcher
from .lookup import (
    all_optional,
    find_option,
    find_subcommand,
    is_persistent_token,
    merge_persistent_options,
    persistent_tokens,
)
from .tokenizer import CommandToken

logger = logging.getLogger(__name__)

Tokens = Sequence[CommandToken]
Accepted = Tuple[ProcessedToken, ...]
Persistent = Tuple[Option, ...]


def _partial(tokens: Tokens) -> Tuple[bool, Optional[str]]:
    """(stop, partial): stop when nothing is left or the head is still being typed."""
    if not tokens:
        return True, None
    if not tokens[0].complete:
        return True, tokens[0].token
    return False, None


class TokenResolver:
    def __init__(self, dispatcher: CandidateDispatcher, lookup_root=None):
        self.dispatcher = dispatcher
        self.lookup_root = lookup_root

    def resolve(self, tokens: Tokens, spec: Subcommand) -> TermSuggestions:
        """Resolve the tokens that follow the root command name."""
        return self.handle_subcommand(tokens, spec, (), False, False, ())

    def handle_subcommand(
        self,
        tokens: Tokens,
        spec: Subcommand,
        persistent_options: Persistent,
        args_depleted: bool,
        args_from_subcommand: bool,
        accepted_tokens: Accepted,
    ) -> TermSuggestions:
        stop, partial = _partial(tokens)
        if stop:
            return self.dispatcher.subcommand_driven(
                spec,
                persistent_options,
                partial,
                args_depleted,
                args_from_subcommand,
                accepted_tokens,
            )

        persistent_options = merge_persistent_options(persistent_options, spec.options)
        active = tokens[0]
        if active.is_option:
            found = find_option(active.token, spec.options + persistent_options)
            if found is not None:
                return self.handle_option(
                    tokens, found, spec, persistent_options, accepted_tokens
                )
            return TermSuggestions()

        child = find_subcommand(active.token, spec)
        if child is not None:
            return self.handle_subcommand(
                tokens[1:],
                child,
                persistent_options,
                False,
                False,
                persistent_tokens(accepted_tokens),
            )

        if not spec.args:
            return TermSuggestions()

        return self.handle_arg(
            tokens, spec.args, spec, persistent_options, accepted_tokens, False, False
        )

    def handle_option(
        self,
        tokens: Tokens,
        option: Option,
        spec: Subcommand,
        persistent_options: Persistent,
        accepted_tokens: Accepted,
    ) -> TermSuggestions:
        if not tokens:
            logger.error("invalid state reached, option with no tokens")
            return TermSuggestions()

        active = tokens[0]
        accepted_tokens = accepted_tokens + (
            ProcessedToken(
                active.token, is_persistent_token(active.token, persistent_options)
            ),
        )
        if not option.args:
            return self.handle_subcommand(
                tokens[1:], spec, persistent_options, False, False, accepted_tokens
            )
        return self.handle_arg(
            tokens[1:], option.args, spec, persistent_options, accepted_tokens, True, False
        )

    def handle_arg(
        self,
        tokens: Tokens,
        args: Sequence[Arg],
        spec: Subcommand,
        persistent_options: Persistent,
        accepted_tokens: Accepted,
        from_option: bool,
        from_variadic: bool,
    ) -> TermSuggestions:
        if not args:
            return self.handle_subcommand(
                tokens, spec, persistent_options, True, not from_option, accepted_tokens
            )

        stop, partial = _partial(tokens)
        if stop:
            return self.dispatcher.arg_driven(
                args, spec, persistent_options, partial, accepted_tokens, from_variadic
            )

        active = tokens[0]
        if all_optional(args):
            if active.is_option:
                found = find_option(active.token, spec.options + persistent_options)
                if found is not None:
                    return self.handle_option(
                        tokens, found, spec, persistent_options, accepted_tokens
                    )
                return TermSuggestions()
            child = find_subcommand(active.token, spec)
            if child is not None:
                return self.handle_subcommand(
                    tokens[1:],
                    child,
                    persistent_options,
                    False,
                    False,
                    persistent_tokens(accepted_tokens),
                )

        active_arg = args[0]
        accepted_tokens = accepted_tokens + (ProcessedToken(active.token, False),)
        if active_arg.is_variadic:
            return self.handle_arg(
                tokens[1:],
                args,
                spec,
                persistent_options,
                accepted_tokens,
                from_option,
                True,
            )
        if active_arg.is_command:
            return self.handle_command(tokens, spec, persistent_options)
        return self.handle_arg(
            tokens[1:],
            args[1:],
            spec,
            persistent_options,
            accepted_tokens,
            from_option,
            False,
        )

    def handle_command(
        self, tokens: Tokens, spec: Subcommand, persistent_options: Persistent
    ) -> TermSuggestions:
        """Restart resolution at a nested command (``sudo git ...``).

        ``tokens[0]`` names the nested command. Nothing is suggested until a
        token follows it.
        """
        if len(tokens) <= 1:
            return TermSuggestions()

        name = tokens[0].token
        nested = self.lookup_root(name) if self.lookup_root is not None else None
        if nested is not None:
            return self.handle_subcommand(tokens[1:], nested, (), False, False, ())

        child = find_subcommand(name, spec)
        if child is not None:
            return self.handle_subcommand(
                tokens[1:], child, persistent_options, False, False, ()
            )
        return TermSuggestions()
