#!/usr/bin/env python3
"""Grammar nodes describing a command's subcommand/option/argument tree.

Nodes are frozen once built and are shared between resolutions.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union


class FilterStrategy(str, Enum):
    DEFAULT = "default"
    PREFIX = "prefix"
    FUZZY = "fuzzy"


class Template(str, Enum):
    FILEPATHS = "filepaths"
    FOLDERS = "folders"


@dataclass(frozen=True)
class StaticSuggestion:
    name: str
    description: str = ""


@dataclass(frozen=True)
class Generator:
    """Dynamic candidate source.

    ``script`` is an argv list (or a shell string) whose output is split on
    ``split_on``; ``function`` is called with the accepted tokens instead.
    ``post_process`` turns the raw script output into suggestions.
    """

    script: Optional[Union[str, Tuple[str, ...]]] = None
    function: Optional[Callable[[Sequence[str]], List[Any]]] = None
    post_process: Optional[Callable[[str], List[Any]]] = None
    split_on: str = "\n"
    timeout: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.script is None and self.function is None


@dataclass(frozen=True)
class Arg:
    name: str = ""
    description: str = ""
    is_optional: bool = False
    is_variadic: bool = False
    is_command: bool = False
    suggestions: Tuple[StaticSuggestion, ...] = ()
    generator: Optional[Generator] = None
    templates: Tuple[Template, ...] = ()
    filter_strategy: FilterStrategy = FilterStrategy.DEFAULT


@dataclass(frozen=True)
class Option:
    name: Tuple[str, ...]
    description: str = ""
    args: Tuple[Arg, ...] = ()
    is_persistent: bool = False
    is_hidden: bool = False


@dataclass(frozen=True)
class Subcommand:
    name: Tuple[str, ...]
    description: str = ""
    subcommands: Tuple["Subcommand", ...] = ()
    options: Tuple[Option, ...] = ()
    args: Tuple[Arg, ...] = ()
    filter_strategy: FilterStrategy = FilterStrategy.DEFAULT
    is_hidden: bool = False


def as_names(value: Union[str, Sequence[str]]) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def option(
    name: Union[str, Sequence[str]],
    description: str = "",
    args: Sequence[Arg] = (),
    *,
    persistent: bool = False,
    hidden: bool = False,
) -> Option:
    return Option(
        name=as_names(name),
        description=description,
        args=tuple(args),
        is_persistent=persistent,
        is_hidden=hidden,
    )


def subcommand(
    name: Union[str, Sequence[str]],
    description: str = "",
    *,
    subcommands: Sequence[Subcommand] = (),
    options: Sequence[Option] = (),
    args: Sequence[Arg] = (),
    filter_strategy: FilterStrategy = FilterStrategy.DEFAULT,
    hidden: bool = False,
) -> Subcommand:
    return Subcommand(
        name=as_names(name),
        description=description,
        subcommands=tuple(subcommands),
        options=tuple(options),
        args=tuple(args),
        filter_strategy=filter_strategy,
        is_hidden=hidden,
    )


def arg(
    name: str = "",
    description: str = "",
    *,
    optional: bool = False,
    variadic: bool = False,
    command: bool = False,
    suggestions: Sequence[Union[str, StaticSuggestion]] = (),
    generator: Optional[Generator] = None,
    templates: Sequence[Template] = (),
    filter_strategy: FilterStrategy = FilterStrategy.DEFAULT,
) -> Arg:
    return Arg(
        name=name,
        description=description,
        is_optional=optional,
        is_variadic=variadic,
        is_command=command,
        suggestions=tuple(
            StaticSuggestion(item) if isinstance(item, str) else item
            for item in suggestions
        ),
        generator=generator,
        templates=tuple(templates),
        filter_strategy=filter_strategy,
    )
