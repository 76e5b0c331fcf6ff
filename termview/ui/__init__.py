"""
UI System

Character-cell view tree with adornments, text layout and keyboard focus.

Components:
- geometry: Point, Size, Rect
- style: Colors, color schemes, border styles, thickness
- draw: Surface interface and the numpy-backed CellSurface
- line_canvas: Box-drawing line compositing
- text: TextFormatter and word wrapping
- view: Base view class and tree
- frame: Margin/border/padding adornments
- navigation: Focus movement commands
- window_manager: Overlapped window stack
- application: Surface, navigation state, key mapping, redraw
- widgets/: Concrete views

Example usage:

    from termview.ui import Application, Window, Label, Button, Rect

    app = Application()
    win = Window(title="Demo", frame=Rect(0, 0, 40, 10))
    win.add(Label("Name:", x=1, y=1), Button("OK", x=1, y=3))
    app.begin(win)
    app.process_key("Tab")
    app.refresh()
    print(app.surface)
"""

from termview.ui.geometry import Point, Size, Rect
from termview.ui.style import (
    Color, Attribute, ColorScheme, DEFAULT_SCHEME, DIALOG_SCHEME,
    BorderStyle, Thickness,
)
from termview.ui.draw import Surface, CellSurface
from termview.ui.line_canvas import LineCanvas, StraightLine, Orientation
from termview.ui.text import TextFormatter, Alignment, TextDirection, word_wrap
from termview.ui.view import (
    View, NavigationDirection, SizePolicy,
    InvalidOperationError, UnsupportedOperationError,
)
from termview.ui.frame import Frame
from termview.ui.window_manager import OverlappedStack
from termview.ui.navigation import (
    FocusNavigator, NavigationContext,
    deepest_focused, advance_with_wrap,
)
from termview.ui.application import Application
from termview.ui.widgets import Label, Button, Window

__all__ = [
    # Geometry
    "Point", "Size", "Rect",
    # Style
    "Color", "Attribute", "ColorScheme", "DEFAULT_SCHEME", "DIALOG_SCHEME",
    "BorderStyle", "Thickness",
    # Draw
    "Surface", "CellSurface",
    "LineCanvas", "StraightLine", "Orientation",
    # Text
    "TextFormatter", "Alignment", "TextDirection", "word_wrap",
    # View
    "View", "NavigationDirection", "SizePolicy",
    "InvalidOperationError", "UnsupportedOperationError",
    "Frame",
    # Navigation
    "FocusNavigator", "NavigationContext",
    "deepest_focused", "advance_with_wrap",
    "OverlappedStack",
    "Application",
    # Widgets
    "Label", "Button", "Window",
]
