"""
Label Widget

Text display sized to its text.
"""

from __future__ import annotations

from termview.ui.geometry import Rect
from termview.ui.style import ColorScheme
from termview.ui.view import SizePolicy, View


class Label(View):
    """
    Non-focusable text.

    Width and height follow the text unless fixed sizes are requested.
    """

    def __init__(
        self,
        text: str = "",
        x: int = 0,
        y: int = 0,
        width: int = None,
        height: int = None,
        color_scheme: ColorScheme = None,
    ):
        super().__init__(
            frame=Rect(x, y, width or 0, height or 0),
            width_policy=SizePolicy.ABSOLUTE if width is not None else SizePolicy.TEXT,
            height_policy=SizePolicy.ABSOLUTE if height is not None else SizePolicy.TEXT,
            color_scheme=color_scheme,
        )
        self.text = text
