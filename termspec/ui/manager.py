#!/usr/bin/env python3
import json
from typing import Sequence

from prompt_toolkit.styles import Style, merge_styles
from prompt_toolkit.styles.defaults import default_ui_style
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import Config
from ..core.lookup import shortest_alias
from ..model import Subcommand, Suggestion
from .theme import PanelTheme


class UIManager:
    def __init__(self, console: Console) -> None:
        self.console = console

    def get_style(self) -> Style:
        custom_style = Style.from_dict(Config.COMPLETION_STYLES)
        return merge_styles([default_ui_style(), custom_style])

    def show_welcome(self, specs: Sequence[Subcommand]) -> None:
        spec_names = sorted(shortest_alias(spec.name) for spec in specs)
        lines = [
            f"termspec {__version__} playground",
            "",
            "Type a command line and press Tab to see suggestions.",
            "Enter shows the resolved candidates; Ctrl+D exits.",
            "",
            f"Known commands: {', '.join(spec_names) if spec_names else '(none)'}",
        ]
        self.console.print(PanelTheme.build("\n".join(lines), style="info", fit=True))
        self.console.print()

    def build_suggestion_table(self, suggestions: Sequence[Suggestion]) -> Table:
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("", no_wrap=True)
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Description", style="white")

        for suggestion in suggestions:
            table.add_row(suggestion.name_prefix, suggestion.name, suggestion.description)
        return table

    def display_suggestions(
        self,
        command: str,
        suggestions: Sequence[Suggestion],
        argument_description: str,
        char_count: int,
    ) -> None:
        title = f"{command!r}  (replace {char_count} chars)"
        if suggestions:
            self.console.print(
                PanelTheme.build(
                    self.build_suggestion_table(suggestions), title=title, style="info"
                )
            )
            return

        if argument_description:
            body = Text.assemble(("expects: ", "dim"), (argument_description, "bold yellow"))
        else:
            body = Text("no suggestions", style="dim")
        self.console.print(PanelTheme.build(body, title=title, style="warning", fit=True))

    def display_json(
        self,
        command: str,
        suggestions: Sequence[Suggestion],
        argument_description: str,
        char_count: int,
    ) -> None:
        payload = {
            "command": command,
            "suggestions": [
                {
                    "name": suggestion.name,
                    "name_prefix": suggestion.name_prefix,
                    "description": suggestion.description,
                }
                for suggestion in suggestions
            ],
            "argument_description": argument_description,
            "char_count": char_count,
        }
        self.console.print_json(json.dumps(payload, ensure_ascii=False))

    def display_specs(self, specs: Sequence[Subcommand]) -> None:
        if not specs:
            self.console.print(
                PanelTheme.build("[yellow]No specs registered[/yellow]", style="warning")
            )
            return

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Command", style="cyan", no_wrap=True)
        table.add_column("Aliases", style="dim")
        table.add_column("Description", style="white")

        for spec in sorted(specs, key=lambda item: shortest_alias(item.name)):
            command = shortest_alias(spec.name)
            aliases = ", ".join(name for name in spec.name if name != command)
            table.add_row(command, aliases, spec.description)
        self.console.print(
            PanelTheme.build(table, title="Known commands", style="info", fit=True)
        )

    def display_goodbye(self) -> None:
        self.console.print("[yellow]Goodbye![/yellow]")
