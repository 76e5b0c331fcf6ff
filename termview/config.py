# termview/config.py
"""
Toolkit configuration.

Plain dataclasses passed explicitly to the Application and views.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from termview.ui.style import BorderStyle


@dataclass
class KeyBindings:
    """Key names the Application maps to navigation commands."""
    next_view: str = "Tab"
    previous_view: str = "Shift+Tab"
    next_top: str = "Ctrl+Tab"
    previous_top: str = "Ctrl+Shift+Tab"


@dataclass
class ToolkitConfig:
    screen_width: int = 80
    screen_height: int = 25
    default_border_style: BorderStyle = BorderStyle.SINGLE
    overlapped: bool = False
    tab_width: int = 4
    log_level: str = "WARNING"
    keys: KeyBindings = field(default_factory=KeyBindings)


DEFAULT_CONFIG = ToolkitConfig()
