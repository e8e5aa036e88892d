#!/usr/bin/env python3
import logging
import subprocess
from typing import Any, Iterable, List, Optional, Sequence

import psutil

from ..config import Config
from ..model import (
    Arg,
    FilterStrategy,
    Generator,
    ProcessedToken,
    SuggestionType,
    TermSuggestion,
)
from .filters import matches

logger = logging.getLogger(__name__)


def _to_suggestion(item: Any) -> Optional[TermSuggestion]:
    if isinstance(item, TermSuggestion):
        return item
    if isinstance(item, str):
        name = item.strip()
        return TermSuggestion(name, SuggestionType.ARG) if name else None
    if isinstance(item, (tuple, list)) and item:
        description = str(item[1]) if len(item) > 1 else ""
        return TermSuggestion(str(item[0]), SuggestionType.ARG, description)
    if isinstance(item, dict) and item.get("name"):
        return TermSuggestion(
            str(item["name"]), SuggestionType.ARG, str(item.get("description", ""))
        )
    return None


def _normalize(items: Iterable[Any]) -> List[TermSuggestion]:
    suggestions = []
    for item in items:
        suggestion = _to_suggestion(item)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions


def run_script(generator: Generator) -> Optional[str]:
    timeout = generator.timeout or Config.GENERATOR_TIMEOUT
    script = generator.script
    try:
        result = subprocess.run(
            script if isinstance(script, str) else list(script),
            capture_output=True,
            text=True,
            timeout=timeout,
            shell=isinstance(script, str),
        )
    except (OSError, subprocess.SubprocessError) as error:
        logger.debug("generator script %r failed: %s", script, error)
        return None

    if result.returncode != 0:
        logger.debug("generator script %r exited with %d", script, result.returncode)
        return None
    return result.stdout


def generate(generator: Generator, accepted_tokens: Sequence[ProcessedToken] = ()) -> List[TermSuggestion]:
    if generator.function is not None:
        try:
            return _normalize(generator.function([token.token for token in accepted_tokens]))
        except Exception as error:
            logger.debug("generator function failed: %s", error)
            return []

    if generator.script is None:
        return []

    output = run_script(generator)
    if output is None:
        return []

    if generator.post_process is not None:
        try:
            return _normalize(generator.post_process(output))
        except Exception as error:
            logger.debug("generator post-processing failed: %s", error)
            return []

    return _normalize(output.split(generator.split_on or "\n"))


def generator_recommendations(
    arg: Arg,
    partial: Optional[str],
    strategy: FilterStrategy,
    accepted_tokens: Sequence[ProcessedToken] = (),
) -> List[TermSuggestion]:
    if arg.generator is None or arg.generator.is_empty:
        return []
    return [
        suggestion
        for suggestion in generate(arg.generator, accepted_tokens)
        if matches(suggestion.name, partial, strategy)
    ]


def list_processes(_accepted: Sequence[str] = ()) -> List[TermSuggestion]:
    suggestions = []
    for proc in psutil.process_iter(["pid", "name"]):
        info = proc.info
        suggestions.append(
            TermSuggestion(str(info["pid"]), SuggestionType.ARG, info.get("name") or "")
        )
    return suggestions


def list_process_names(_accepted: Sequence[str] = ()) -> List[TermSuggestion]:
    names = set()
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name")
        if name:
            names.add(name)
    return [TermSuggestion(name, SuggestionType.ARG, "process") for name in sorted(names)]


def _parse_git_branches(output: str) -> List[TermSuggestion]:
    branches = []
    for line in output.splitlines():
        name = line.strip().lstrip("* ").strip()
        if name and not name.startswith("("):
            branches.append(TermSuggestion(name, SuggestionType.ARG, "branch"))
    return branches


PROCESSES = Generator(function=list_processes)
PROCESS_NAMES = Generator(function=list_process_names)
GIT_BRANCHES = Generator(
    script=("git", "branch", "--no-color"), post_process=_parse_git_branches
)
