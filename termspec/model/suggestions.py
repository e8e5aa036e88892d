#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SuggestionType(str, Enum):
    SUBCOMMAND = "subcommand"
    OPTION = "option"
    ARG = "arg"
    FILE = "file"
    FOLDER = "folder"
    SPECIAL = "special"
    MIXED = "mixed"
    DEFAULT = "default"


@dataclass(frozen=True)
class TermSuggestion:
    name: str
    type: SuggestionType = SuggestionType.DEFAULT
    description: str = ""


@dataclass
class TermSuggestions:
    suggestions: List[TermSuggestion] = field(default_factory=list)
    argument_description: str = ""


@dataclass(frozen=True)
class ProcessedToken:
    """A token consumed during resolution; ``persist`` survives descent."""

    token: str
    persist: bool = False


@dataclass(frozen=True)
class Suggestion:
    """Display-ready candidate handed to the host UI."""

    name: str
    name_prefix: str = ""
    description: str = ""
