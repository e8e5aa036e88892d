#!/usr/bin/env python3
from typing import Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from .core import SuggestionEngine


class SpecCompleter(Completer):
    """prompt_toolkit completer backed by the grammar engine."""

    def __init__(self, engine: Optional[SuggestionEngine] = None):
        self.engine = engine or SuggestionEngine()
        self._argument_description = ""

    def get_completions(self, document: Document, complete_event):
        text = document.text_before_cursor
        suggestions, argument_description, char_count = self.engine.resolve(text)
        self._argument_description = argument_description

        for suggestion in suggestions:
            display = suggestion.name
            if suggestion.name_prefix:
                display = f"{suggestion.name_prefix} {suggestion.name}"
            yield Completion(
                suggestion.name,
                start_position=-char_count,
                display=display,
                display_meta=suggestion.description or None,
            )

    def argument_hint(self) -> str:
        return self._argument_description


def create_completer(engine: Optional[SuggestionEngine] = None) -> SpecCompleter:
    return SpecCompleter(engine)
