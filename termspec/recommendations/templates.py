#!/usr/bin/env python3
import os
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import Config
from ..model import (
    Arg,
    FilterStrategy,
    ProcessedToken,
    SuggestionType,
    Template,
    TermSuggestion,
)
from .filters import matches


def format_size(size_bytes: int) -> str:
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    size = float(size_bytes)

    while size >= 1024.0 and i < len(size_names) - 1:
        size /= 1024.0
        i += 1

    if i == 0:
        return f"{int(size)} {size_names[i]}"
    return f"{size:.1f} {size_names[i]}"


Listing = Tuple[List[str], List[str], Dict[str, str]]


class PathScanner:
    """Directory listings cached per path, rescanned when the mtime changes."""

    def __init__(self):
        self._cache: Dict[str, Tuple[float, Listing]] = {}

    def _get_mtime(self, path: str) -> float:
        try:
            return os.path.getmtime(path)
        except OSError:
            return 0

    def scan_directory(self, path: str) -> Listing:
        mtime = self._get_mtime(path)
        cached = self._cache.get(path)
        if cached is not None and cached[0] == mtime:
            return cached[1]

        files = []
        directories = []
        meta_dict = {}

        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    try:
                        if entry.is_dir():
                            directories.append(entry.name)
                            meta_dict[entry.name] = "Directory"
                        else:
                            files.append(entry.name)
                            meta_dict[entry.name] = format_size(
                                entry.stat().st_size
                            )
                    except OSError:
                        continue
        except (PermissionError, FileNotFoundError, NotADirectoryError):
            pass

        result = (sorted(files), sorted(directories), meta_dict)
        self._cache[path] = (mtime, result)
        return result


_scanner = PathScanner()


def split_partial_path(partial: Optional[str]) -> Tuple[str, str]:
    """Split typed text into its directory part (kept verbatim) and basename."""
    if not partial:
        return "", ""
    head, sep, tail = partial.rpartition("/")
    if not sep:
        return "", partial
    return head + sep, tail


def _target_directory(dir_part: str, cwd: Optional[str]) -> str:
    base = cwd or os.getcwd()
    if not dir_part:
        return base
    return os.path.join(base, os.path.expanduser(dir_part))


def template_recommendations(
    arg: Arg,
    partial: Optional[str],
    strategy: FilterStrategy,
    accepted_tokens: Sequence[ProcessedToken] = (),
    cwd: Optional[str] = None,
    scanner: Optional[PathScanner] = None,
) -> List[TermSuggestion]:
    if not arg.templates:
        return []

    scanner = scanner or _scanner
    dir_part, base = split_partial_path(partial)
    files, directories, meta_dict = scanner.scan_directory(
        _target_directory(dir_part, cwd)
    )
    include_hidden = Config.SHOW_HIDDEN_FILES or base.startswith(".")

    include_files = Template.FILEPATHS in arg.templates
    suggestions = []
    for name in directories:
        if not include_hidden and name.startswith("."):
            continue
        if matches(name, base, strategy):
            suggestions.append(
                TermSuggestion(
                    f"{dir_part}{name}/", SuggestionType.FOLDER, meta_dict.get(name, "")
                )
            )
    if include_files:
        for name in files:
            if not include_hidden and name.startswith("."):
                continue
            if matches(name, base, strategy):
                suggestions.append(
                    TermSuggestion(
                        f"{dir_part}{name}", SuggestionType.FILE, meta_dict.get(name, "")
                    )
                )
    return suggestions
