#!/usr/bin/env python3
"""Build grammar nodes from plain data (decoded JSON).

Keys are accepted in snake_case or camelCase, so grammars exported from
other completion engines load without rewriting.
"""
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..errors import SpecLoadError
from .grammar import (
    Arg,
    FilterStrategy,
    Generator,
    Option,
    StaticSuggestion,
    Subcommand,
    Template,
)


def _get(data: Dict[str, Any], key: str, default=None):
    if key in data:
        return data[key]
    parts = key.split("_")
    camel = parts[0] + "".join(part.title() for part in parts[1:])
    return data.get(camel, default)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _names(data: Dict[str, Any], kind: str) -> Tuple[str, ...]:
    names = _as_list(data.get("name"))
    if not names or not all(isinstance(name, str) and name for name in names):
        raise SpecLoadError(f"{kind} requires a non-empty name")
    return tuple(names)


def _filter_strategy(value: Any) -> FilterStrategy:
    if value is None:
        return FilterStrategy.DEFAULT
    try:
        return FilterStrategy(str(value).lower())
    except ValueError:
        raise SpecLoadError(f"unknown filter strategy {value!r}")


def _suggestions(values: Sequence[Any]) -> Tuple[StaticSuggestion, ...]:
    suggestions = []
    for value in values:
        if isinstance(value, str):
            suggestions.append(StaticSuggestion(value))
        elif isinstance(value, dict):
            for name in _as_list(value.get("name")):
                suggestions.append(
                    StaticSuggestion(str(name), value.get("description", ""))
                )
        else:
            raise SpecLoadError(f"invalid suggestion {value!r}")
    return tuple(suggestions)


def _templates(value: Any) -> Tuple[Template, ...]:
    templates = []
    for item in _as_list(value):
        try:
            templates.append(Template(str(item).lower()))
        except ValueError:
            raise SpecLoadError(f"unknown template {item!r}")
    return tuple(templates)


def _generator(value: Any) -> Optional[Generator]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise SpecLoadError("generator must be an object")
    script = value.get("script")
    if isinstance(script, list):
        script = tuple(str(part) for part in script)
    elif script is not None and not isinstance(script, str):
        raise SpecLoadError("generator script must be a string or a list")
    timeout = value.get("timeout")
    return Generator(
        script=script,
        split_on=_get(value, "split_on", "\n"),
        timeout=float(timeout) if timeout is not None else None,
    )


def load_arg(data: Dict[str, Any]) -> Arg:
    if not isinstance(data, dict):
        raise SpecLoadError("arg must be an object")
    return Arg(
        name=str(data.get("name", "")),
        description=data.get("description", ""),
        is_optional=bool(_get(data, "is_optional", False)),
        is_variadic=bool(_get(data, "is_variadic", False)),
        is_command=bool(_get(data, "is_command", False)),
        suggestions=_suggestions(_as_list(data.get("suggestions"))),
        generator=_generator(data.get("generator")),
        templates=_templates(data.get("template", data.get("templates"))),
        filter_strategy=_filter_strategy(_get(data, "filter_strategy")),
    )


def _load_args(value: Any) -> Tuple[Arg, ...]:
    args = tuple(load_arg(item) for item in _as_list(value))
    for position, item in enumerate(args[:-1]):
        if item.is_command:
            raise SpecLoadError(
                f"arg {item.name or position!r} is a command arg but not the last arg"
            )
    return args


def load_option(data: Dict[str, Any]) -> Option:
    if not isinstance(data, dict):
        raise SpecLoadError("option must be an object")
    return Option(
        name=_names(data, "option"),
        description=data.get("description", ""),
        args=_load_args(data.get("args")),
        is_persistent=bool(_get(data, "is_persistent", False)),
        is_hidden=bool(_get(data, "is_hidden", False)),
    )


def load_subcommand(data: Dict[str, Any]) -> Subcommand:
    if not isinstance(data, dict):
        raise SpecLoadError("subcommand must be an object")
    return Subcommand(
        name=_names(data, "subcommand"),
        description=data.get("description", ""),
        subcommands=tuple(load_subcommand(item) for item in _as_list(data.get("subcommands"))),
        options=tuple(load_option(item) for item in _as_list(data.get("options"))),
        args=_load_args(data.get("args")),
        filter_strategy=_filter_strategy(_get(data, "filter_strategy")),
        is_hidden=bool(_get(data, "is_hidden", False)),
    )


def load_spec(data: Any, source: str = "") -> Subcommand:
    try:
        return load_subcommand(data)
    except SpecLoadError as error:
        raise SpecLoadError(str(error), source) from error
