#!/usr/bin/env python3
from typing import Iterable, Optional, Sequence, Tuple

from ..model import Arg, Option, ProcessedToken, Subcommand


def find_option(token: str, options: Iterable[Option]) -> Optional[Option]:
    for candidate in options:
        if token in candidate.name:
            return candidate
    return None


def find_subcommand(token: str, spec: Subcommand) -> Optional[Subcommand]:
    for candidate in spec.subcommands:
        if token in candidate.name:
            return candidate
    return None


def all_optional(args: Sequence[Arg]) -> bool:
    return all(item.is_optional for item in args)


def longest_alias(names: Sequence[str]) -> str:
    longest = ""
    for name in names:
        if len(name) > len(longest):
            longest = name
    return longest


def shortest_alias(names: Sequence[str]) -> str:
    if not names:
        return ""
    shortest = names[0]
    for name in names:
        if len(name) < len(shortest):
            shortest = name
    return shortest


def persistent_tokens(tokens: Sequence[ProcessedToken]) -> Tuple[ProcessedToken, ...]:
    return tuple(token for token in tokens if token.persist)


def merge_persistent_options(
    existing: Sequence[Option], incoming: Sequence[Option]
) -> Tuple[Option, ...]:
    """
    Return ``existing`` plus every persistent option of ``incoming`` that
    brings at least one alias not already known. First seen wins.
    """
    known = {name for known_option in existing for name in known_option.name}
    merged = list(existing)
    for candidate in incoming:
        if not candidate.is_persistent:
            continue
        if any(name not in known for name in candidate.name):
            merged.append(candidate)
            known.update(candidate.name)
    return tuple(merged)


def is_persistent_token(token: str, persistent_options: Iterable[Option]) -> bool:
    return find_option(token, persistent_options) is not None
