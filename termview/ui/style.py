"""
Style System

Flat terminal styles without cascading or selectors.

Design principles:
- No inheritance between styles; color schemes are looked up the view chain
- Immutable after creation (use replace() for variants)
- All measurements in cells
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING

from termview.ui.geometry import Rect

if TYPE_CHECKING:
    from termview.ui.draw import Surface


# =============================================================================
# Color / Attribute
# =============================================================================

class Color(IntEnum):
    """The 16 standard terminal colors."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    GRAY = 7
    DARK_GRAY = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    WHITE = 15


@dataclass(frozen=True)
class Attribute:
    """Foreground/background pair set on the surface before painting."""
    foreground: Color = Color.GRAY
    background: Color = Color.BLACK

    @property
    def code(self) -> int:
        """Packed form stored in surface attribute grids."""
        return int(self.foreground) * 16 + int(self.background)

    @staticmethod
    def from_code(code: int) -> Attribute:
        return Attribute(Color(int(code) // 16), Color(int(code) % 16))


@dataclass(frozen=True)
class ColorScheme:
    """
    Attributes a view paints with.

    normal/focus are used for text, hot_normal/hot_focus for highlighted
    parts (titles, hot keys), disabled when the view is not enabled.
    """
    normal: Attribute = field(default_factory=lambda: Attribute(Color.GRAY, Color.BLUE))
    focus: Attribute = field(default_factory=lambda: Attribute(Color.BLACK, Color.CYAN))
    hot_normal: Attribute = field(default_factory=lambda: Attribute(Color.BRIGHT_YELLOW, Color.BLUE))
    hot_focus: Attribute = field(default_factory=lambda: Attribute(Color.WHITE, Color.CYAN))
    disabled: Attribute = field(default_factory=lambda: Attribute(Color.DARK_GRAY, Color.BLUE))

    def with_normal(self, attribute: Attribute) -> ColorScheme:
        return replace(self, normal=attribute)

    def with_focus(self, attribute: Attribute) -> ColorScheme:
        return replace(self, focus=attribute)


DEFAULT_SCHEME = ColorScheme()

DIALOG_SCHEME = ColorScheme(
    normal=Attribute(Color.BLACK, Color.GRAY),
    focus=Attribute(Color.WHITE, Color.DARK_GRAY),
    hot_normal=Attribute(Color.BLUE, Color.GRAY),
    hot_focus=Attribute(Color.BRIGHT_BLUE, Color.DARK_GRAY),
    disabled=Attribute(Color.DARK_GRAY, Color.GRAY),
)


# =============================================================================
# Border Style
# =============================================================================

class BorderStyle(Enum):
    """Line style used by borders and the line canvas."""
    NONE = auto()
    SINGLE = auto()
    DOUBLE = auto()
    HEAVY = auto()
    ROUNDED = auto()


# =============================================================================
# Thickness (margin, border, padding)
# =============================================================================

@dataclass(frozen=True)
class Thickness:
    """
    Per-edge inset of an adornment.
    Order: left, top, right, bottom.
    """
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @staticmethod
    def all(value: int) -> Thickness:
        """Same value on all sides."""
        return Thickness(value, value, value, value)

    @staticmethod
    def symmetric(horizontal: int = 0, vertical: int = 0) -> Thickness:
        return Thickness(horizontal, vertical, horizontal, vertical)

    @property
    def horizontal(self) -> int:
        """Total horizontal inset."""
        return self.left + self.right

    @property
    def vertical(self) -> int:
        """Total vertical inset."""
        return self.top + self.bottom

    @property
    def is_empty(self) -> bool:
        return self.left == 0 and self.top == 0 and self.right == 0 and self.bottom == 0

    def __add__(self, other: Thickness) -> Thickness:
        return Thickness(
            self.left + other.left,
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
        )

    def get_inner_rect(self, rect: Rect) -> Rect:
        """Rect reduced by this thickness, keeping rect's coordinate space."""
        return rect.inset_by(self)

    def draw(self, surface: Surface, rect: Rect, fill: str = " ") -> Rect:
        """
        Paint the thickness ring of `rect` (screen coordinates) with `fill`.

        Returns the inner rect.
        """
        glyph = fill[:1] or " "
        inner = self.get_inner_rect(rect)
        if self.top > 0:
            surface.fill_rect(Rect(rect.x, rect.y, rect.width, min(self.top, rect.height)), glyph)
        if self.bottom > 0:
            height = min(self.bottom, rect.height)
            surface.fill_rect(Rect(rect.x, rect.bottom - height, rect.width, height), glyph)
        if self.left > 0:
            surface.fill_rect(Rect(rect.x, rect.y, min(self.left, rect.width), rect.height), glyph)
        if self.right > 0:
            width = min(self.right, rect.width)
            surface.fill_rect(Rect(rect.right - width, rect.y, width, rect.height), glyph)
        return inner
