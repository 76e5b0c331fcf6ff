"""
Window Widget

Bordered, titled top-level container.
"""

from __future__ import annotations

from termview.config import DEFAULT_CONFIG
from termview.ui.geometry import Rect
from termview.ui.style import BorderStyle, ColorScheme, Thickness
from termview.ui.view import View


class Window(View):
    """
    Top-level container with a border and a title on the top edge.

    A modal window keeps keyboard navigation inside itself while it runs.
    """

    def __init__(
        self,
        title: str = "",
        frame: Rect = None,
        border_style: BorderStyle = None,
        padding: int = 0,
        modal: bool = False,
        color_scheme: ColorScheme = None,
    ):
        super().__init__(frame=frame, title=title, can_focus=True, color_scheme=color_scheme)
        self.modal = modal
        self.border_style = border_style if border_style is not None else DEFAULT_CONFIG.default_border_style
        if padding:
            self.padding.thickness = Thickness.all(padding)
