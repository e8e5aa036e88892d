#!/usr/bin/env python3
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console

from .completion import SpecCompleter
from .config import Config
from .core import SuggestionEngine
from .ui import UIManager


class Playground:
    """Interactive prompt that completes command lines without running them."""

    def __init__(
        self,
        engine: Optional[SuggestionEngine] = None,
        console: Optional[Console] = None,
    ):
        self.engine = engine or SuggestionEngine()
        self.console = console or Console()
        self.ui = UIManager(self.console)
        self.completer = SpecCompleter(self.engine)
        self.session = PromptSession(history=InMemoryHistory())

    def _get_prompt(self):
        return HTML(f"<prompt_symbol>{Config.PROMPT_SYMBOL}</prompt_symbol> ")

    def _get_toolbar(self):
        hint = self.completer.argument_hint()
        if hint:
            return f" expects: {hint}"
        return None

    def handle_line(self, line: str) -> None:
        suggestions, argument_description, char_count = self.engine.resolve(line)
        self.ui.display_suggestions(line, suggestions, argument_description, char_count)

    def run(self) -> None:
        self.ui.show_welcome(self.engine.registry.specs())

        while True:
            try:
                line = self.session.prompt(
                    self._get_prompt,
                    completer=self.completer,
                    complete_while_typing=Config.COMPLETION_AUTO_POPUP,
                    bottom_toolbar=self._get_toolbar,
                    placeholder=HTML(Config.PROMPT_PLACEHOLDER),
                    style=self.ui.get_style(),
                )
            except (EOFError, KeyboardInterrupt):
                self.ui.display_goodbye()
                break

            if line.strip() in ("exit", "quit"):
                self.ui.display_goodbye()
                break
            if not line.strip():
                continue
            self.handle_line(line)
