#!/usr/bin/env python3
import json
import logging
import os
from pathlib import Path


def _default_config_dir() -> Path:
    env_dir = os.getenv("TERMSPEC_CONFIG_DIR")
    if env_dir:
        return Path(os.path.expanduser(env_dir))
    return Path.home() / ".termspec"


class Config:
    # Logging
    LOG_LEVEL = "WARNING"
    LOG_TO_FILE = True

    # Candidate matching
    DEFAULT_FILTER_STRATEGY = "prefix"
    GENERATOR_TIMEOUT = 1.0
    SHOW_HIDDEN_FILES = False

    # Extra directories scanned for *.json grammars, after SPECS_DIR.
    EXTRA_SPEC_DIRS = []

    SUGGESTION_ICONS = {
        "subcommand": "📦",
        "option": "🔗",
        "arg": "💲",
        "file": "📄",
        "folder": "📁",
        "special": "⭐",
        "mixed": "🔀",
        "default": "📀",
    }

    PROMPT_SYMBOL = "❯"
    PROMPT_PLACEHOLDER = '<style color="#888888">type a command, Tab to complete</style>'
    COMPLETION_AUTO_POPUP = True

    COMPLETION_STYLES = {
        "completion.menu": "#0a0a0a",
        "scrollbar.background": "bg:#0a7e98 bold",
        "completion-menu.completion": "bg:#0a0a0a fg:#aaaaaa bold",
        "completion-menu.completion.current": "bg:#888888 fg:#0a0a0a bold",
        "completion-menu.meta.completion": "bg:#0a0a0a fg:#aaaaaa",
        "completion-menu.meta.completion.current": "bg:#888888",
        "prompt_symbol": "#f2d5cf bold",
        "bottom-toolbar": "#737994",
    }

    PANEL_STYLES = {
        "default": {
            "border_style": "#888888",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
        "info": {
            "border_style": "#8caaee",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
        "warning": {
            "border_style": "#e5c890",
            "padding": (0, 1),
            "title_align": "left",
            "expand": False,
        },
    }

    CONFIG_DIR = _default_config_dir()
    CONFIG_JSON_FILE = CONFIG_DIR / "config.json"
    LOG_FILE = CONFIG_DIR / "termspec.log"
    SPECS_DIR = CONFIG_DIR / "specs"

    @classmethod
    def set_config_dir(cls, path) -> None:
        cls.CONFIG_DIR = Path(path)
        cls.CONFIG_JSON_FILE = cls.CONFIG_DIR / "config.json"
        cls.LOG_FILE = cls.CONFIG_DIR / "termspec.log"
        cls.SPECS_DIR = cls.CONFIG_DIR / "specs"

    @classmethod
    def ensure_directories(cls):
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        cls.SPECS_DIR.mkdir(exist_ok=True)

        if not cls.CONFIG_JSON_FILE.exists():
            cls._write_default_json_config()

    @classmethod
    def get_log_level(cls) -> int:
        env_value = os.getenv("TERMSPEC_LOG_LEVEL")
        value = (env_value or cls.LOG_LEVEL or "WARNING").strip().upper()
        level = logging.getLevelName(value)
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def get_icon(cls, category: str) -> str:
        return cls.SUGGESTION_ICONS.get(category, cls.SUGGESTION_ICONS.get("default", ""))

    @classmethod
    def spec_dirs(cls) -> list:
        dirs = [cls.SPECS_DIR]
        for entry in cls.EXTRA_SPEC_DIRS:
            dirs.append(Path(os.path.expanduser(str(entry))))
        return dirs

    @classmethod
    def _load_json_config(cls) -> bool:
        if not cls.CONFIG_JSON_FILE.exists():
            return False

        try:
            with cls.CONFIG_JSON_FILE.open("r", encoding="utf-8") as f:
                config_data = json.load(f)
        except (json.JSONDecodeError, OSError):
            return False

        if not isinstance(config_data, dict):
            return False

        def get_nested(data, *keys, default=None):
            current = data
            for key in keys:
                if isinstance(current, dict) and key in current:
                    current = current[key]
                else:
                    return default
            return current

        log_level = get_nested(config_data, "general", "log_level", default=cls.LOG_LEVEL)
        if isinstance(log_level, str):
            cls.LOG_LEVEL = log_level
        cls.LOG_TO_FILE = bool(
            get_nested(config_data, "general", "log_to_file", default=cls.LOG_TO_FILE)
        )

        filter_strategy = get_nested(
            config_data,
            "completion",
            "default_filter_strategy",
            default=cls.DEFAULT_FILTER_STRATEGY,
        )
        if filter_strategy in ("prefix", "fuzzy"):
            cls.DEFAULT_FILTER_STRATEGY = filter_strategy

        generator_timeout = get_nested(
            config_data, "completion", "generator_timeout", default=cls.GENERATOR_TIMEOUT
        )
        if isinstance(generator_timeout, (int, float)) and generator_timeout > 0:
            cls.GENERATOR_TIMEOUT = float(generator_timeout)

        cls.SHOW_HIDDEN_FILES = bool(
            get_nested(
                config_data, "completion", "show_hidden_files", default=cls.SHOW_HIDDEN_FILES
            )
        )

        extra_spec_dirs = get_nested(
            config_data, "completion", "extra_spec_dirs", default=cls.EXTRA_SPEC_DIRS
        )
        if isinstance(extra_spec_dirs, list):
            cls.EXTRA_SPEC_DIRS = extra_spec_dirs

        suggestion_icons = get_nested(config_data, "ui", "suggestion_icons")
        if isinstance(suggestion_icons, dict):
            cls.SUGGESTION_ICONS.update(suggestion_icons)

        completion_styles = get_nested(config_data, "ui", "completion_styles")
        if isinstance(completion_styles, dict):
            cls.COMPLETION_STYLES.update(completion_styles)

        panel_styles = get_nested(config_data, "ui", "panel_styles")
        if isinstance(panel_styles, dict):
            for name, style in panel_styles.items():
                if isinstance(style, dict):
                    cls.PANEL_STYLES[name] = style

        cls.PROMPT_SYMBOL = get_nested(
            config_data, "ui", "prompt_symbol", default=cls.PROMPT_SYMBOL
        )
        cls.COMPLETION_AUTO_POPUP = bool(
            get_nested(
                config_data, "ui", "completion_auto_popup", default=cls.COMPLETION_AUTO_POPUP
            )
        )

        return True

    @classmethod
    def _write_default_json_config(cls) -> None:
        config_data = {
            "general": {
                "log_level": cls.LOG_LEVEL,
                "log_to_file": cls.LOG_TO_FILE,
            },
            "completion": {
                "default_filter_strategy": cls.DEFAULT_FILTER_STRATEGY,
                "generator_timeout": cls.GENERATOR_TIMEOUT,
                "show_hidden_files": cls.SHOW_HIDDEN_FILES,
                "extra_spec_dirs": cls.EXTRA_SPEC_DIRS,
            },
            "ui": {
                "prompt_symbol": cls.PROMPT_SYMBOL,
                "completion_auto_popup": cls.COMPLETION_AUTO_POPUP,
                "suggestion_icons": cls.SUGGESTION_ICONS,
            },
        }

        try:
            with cls.CONFIG_JSON_FILE.open("w", encoding="utf-8") as f:
                json.dump(config_data, f, indent=2, ensure_ascii=False)
        except OSError:
            pass

    @classmethod
    def _load_external_config(cls) -> None:
        # Missing or malformed files leave the class defaults in place.
        cls._load_json_config()

    @classmethod
    def reload(cls) -> bool:
        try:
            cls.ensure_directories()
            return cls._load_json_config()
        except OSError:
            return False


Config._load_external_config()
