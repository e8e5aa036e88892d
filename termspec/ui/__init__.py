from .manager import UIManager
from .theme import PanelTheme

__all__ = ["PanelTheme", "UIManager"]
