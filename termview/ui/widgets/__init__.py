"""
Built-in Widgets

- Label: Text sized to its content
- Button: Focusable bracketed caption
- Window: Bordered, titled top-level container
"""

from termview.ui.widgets.label import Label
from termview.ui.widgets.button import Button
from termview.ui.widgets.window import Window

__all__ = [
    "Label",
    "Button",
    "Window",
]
