#!/usr/bin/env python3
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..model import Suggestion


@dataclass(frozen=True)
class CachedResult:
    command: str
    suggestions: List[Suggestion] = field(default_factory=list)
    argument_description: str = ""
    char_count: int = 0


class SuggestionCache:
    """Single-slot memo of the last resolved line.

    The slot is read and written under a lock so one cache can be shared by
    evaluators running on different threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entry: Optional[CachedResult] = None

    def get(self, command: str) -> Optional[CachedResult]:
        with self._lock:
            if self._entry is not None and self._entry.command == command:
                return self._entry
            return None

    def put(self, entry: CachedResult) -> None:
        with self._lock:
            self._entry = entry

    def get_or_compute(
        self, command: str, compute: Callable[[str], CachedResult]
    ) -> CachedResult:
        cached = self.get(command)
        if cached is not None:
            return cached
        entry = compute(command)
        self.put(entry)
        return entry

    def clear(self) -> None:
        with self._lock:
            self._entry = None
