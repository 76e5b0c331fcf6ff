"""
termview - terminal UI composition core.

View tree, adornments, text layout and keyboard focus navigation over a
character-cell surface.
"""

__version__ = "0.1.0"

# ui first: config depends on ui.style
from termview.ui import *  # noqa: F401,F403
from termview.config import ToolkitConfig, KeyBindings, DEFAULT_CONFIG
