#!/usr/bin/env python3
"""Exception types raised while loading command grammars.

Resolution itself never raises for user input; these only surface at the
loading boundary, where the registry catches them and skips the grammar.
"""


class TermspecError(Exception):
    """Base class for termspec errors."""


class SpecLoadError(TermspecError):
    def __init__(self, message: str, source: str = "") -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
