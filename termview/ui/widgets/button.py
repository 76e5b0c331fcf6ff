"""
Button Widget

Focusable text button drawn as "[ text ]".
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from termview.ui.geometry import Rect
from termview.ui.view import SizePolicy, View

logger = logging.getLogger(__name__)


class Button(View):
    """
    Focusable button.

    Features:
    - Bracketed caption, sized to fit
    - Default-button marker
    - on_click callback fired by press()
    """

    def __init__(
        self,
        text: str = "",
        x: int = 0,
        y: int = 0,
        on_click: Callable[[Button], None] = None,
        is_default: bool = False,
    ):
        self._is_default = is_default
        self.on_click = on_click
        super().__init__(
            frame=Rect(x, y, 0, 0),
            can_focus=True,
            width_policy=SizePolicy.TEXT,
            height_policy=SizePolicy.TEXT,
        )
        self.text = text

    @property
    def is_default(self) -> bool:
        return self._is_default

    @is_default.setter
    def is_default(self, value: bool):
        self._is_default = value
        self.update_text_formatter_text()
        self.on_resize_needed()

    def update_text_formatter_text(self):
        if self._is_default:
            self.text_formatter.text = f"[< {self.text} >]"
        else:
            self.text_formatter.text = f"[ {self.text} ]"

    def press(self) -> bool:
        """Fire on_click. Disabled buttons ignore presses."""
        if not self.enabled or self.on_click is None:
            return False
        logger.debug(f"Button pressed: {self.text!r}")
        self.on_click(self)
        return True
