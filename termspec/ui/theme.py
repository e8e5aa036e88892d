#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Any, Dict, Optional

from rich.panel import Panel
from rich.text import Text

from ..config import Config


@dataclass(frozen=True)
class PanelStyle:
    border_style: str
    padding: Optional[tuple] = (0, 1)
    title_align: str = "left"
    expand: bool = False


class PanelTheme:
    @staticmethod
    def get_style(name: str) -> PanelStyle:
        theme = Config.PANEL_STYLES.get(name, Config.PANEL_STYLES["default"])
        default_theme = Config.PANEL_STYLES["default"]

        padding = theme.get("padding", default_theme.get("padding"))
        if isinstance(padding, list):
            padding = tuple(padding)

        return PanelStyle(
            border_style=theme.get(
                "border_style", default_theme.get("border_style", "#888888")
            ),
            padding=padding,
            title_align=theme.get(
                "title_align", default_theme.get("title_align", "left")
            ),
            expand=theme.get("expand", default_theme.get("expand", False)),
        )

    @staticmethod
    def build(
        renderable: Any,
        title: str = "",
        style: str = "default",
        *,
        fit: bool = False,
        **overrides: Any,
    ) -> Panel:
        panel_style = PanelTheme.get_style(style)

        panel_kwargs: Dict[str, Any] = {
            "border_style": panel_style.border_style,
            "title_align": panel_style.title_align,
            "expand": panel_style.expand,
        }
        if panel_style.padding is not None:
            panel_kwargs["padding"] = panel_style.padding
        panel_kwargs.update(overrides)

        title_value = Text(title) if title else None
        if fit:
            panel_kwargs.pop("expand", None)
            return Panel.fit(renderable, title=title_value, **panel_kwargs)

        return Panel(renderable, title=title_value, **panel_kwargs)
