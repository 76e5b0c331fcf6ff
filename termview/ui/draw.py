"""
Draw Surface

The rendering surface views and frames paint on.

Design:
- Surface is the contract: clip, attribute, paint a glyph at a screen cell
- CellSurface keeps the screen in two numpy grids (glyphs, attribute codes)
- Everything is in screen coordinates; views translate before painting
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from termview.ui.geometry import Point, Rect, Size
from termview.ui.style import Attribute


# =============================================================================
# Surface Contract
# =============================================================================

class Surface(ABC):
    """Screen the toolkit paints on."""

    @property
    @abstractmethod
    def size(self) -> Size:
        ...

    @property
    @abstractmethod
    def clip(self) -> Optional[Rect]:
        """Current clip rect in screen coordinates (None = whole screen)."""

    @abstractmethod
    def set_clip(self, rect: Optional[Rect]) -> Optional[Rect]:
        """Replace the clip region. Returns the previous one."""

    @abstractmethod
    def set_attribute(self, attribute: Attribute):
        """Attribute used by subsequent paint calls."""

    @abstractmethod
    def paint(self, point: Point, glyph: str):
        """Put one glyph at a screen cell (ignored outside the clip)."""

    # -------------------------------------------------------------------------
    # Helpers built on paint()
    # -------------------------------------------------------------------------

    def draw_text(self, point: Point, text: str):
        """Paint a run of glyphs left to right."""
        for i, ch in enumerate(text):
            self.paint(Point(point.x + i, point.y), ch)

    def fill_rect(self, rect: Rect, glyph: str = " "):
        for cell in rect.cells():
            self.paint(cell, glyph)


# =============================================================================
# Cell Surface
# =============================================================================

class CellSurface(Surface):
    """
    In-memory screen backed by numpy grids.

    glyphs: (height, width) unicode array
    attributes: (height, width) int16 array of Attribute.code values
    """

    def __init__(self, width: int = 80, height: int = 25, attribute: Attribute = None):
        self._size = Size(width, height)
        self._attribute = attribute or Attribute()
        self.glyphs = np.full((height, width), " ", dtype="<U1")
        self.attributes = np.full((height, width), self._attribute.code, dtype=np.int16)
        self._clip: Optional[Rect] = None

    @property
    def size(self) -> Size:
        return self._size

    @property
    def screen(self) -> Rect:
        return Rect(0, 0, self._size.width, self._size.height)

    @property
    def attribute(self) -> Attribute:
        return self._attribute

    # -------------------------------------------------------------------------
    # Clipping
    # -------------------------------------------------------------------------

    @property
    def clip(self) -> Optional[Rect]:
        return self._clip

    def set_clip(self, rect: Optional[Rect]) -> Optional[Rect]:
        previous = self._clip
        self._clip = rect
        return previous

    def _visible_region(self) -> Optional[Rect]:
        if self._clip is None:
            return self.screen
        return self.screen.intersect(self._clip)

    # -------------------------------------------------------------------------
    # Painting
    # -------------------------------------------------------------------------

    def set_attribute(self, attribute: Attribute):
        self._attribute = attribute

    def paint(self, point: Point, glyph: str):
        region = self._visible_region()
        if region is None or not region.contains(point.x, point.y):
            return
        self.glyphs[point.y, point.x] = glyph[:1] or " "
        self.attributes[point.y, point.x] = self._attribute.code

    def fill_rect(self, rect: Rect, glyph: str = " "):
        region = self._visible_region()
        if region is None:
            return
        target = region.intersect(rect)
        if target is None:
            return
        rows = slice(target.y, target.bottom)
        cols = slice(target.x, target.right)
        self.glyphs[rows, cols] = glyph[:1] or " "
        self.attributes[rows, cols] = self._attribute.code

    def clear(self, attribute: Attribute = None):
        if attribute is not None:
            self._attribute = attribute
        self.glyphs[:, :] = " "
        self.attributes[:, :] = self._attribute.code
        self._clip = None

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def glyph_at(self, point: Point) -> str:
        return str(self.glyphs[point.y, point.x])

    def attribute_at(self, point: Point) -> Attribute:
        return Attribute.from_code(self.attributes[point.y, point.x])

    def row(self, y: int) -> str:
        return "".join(self.glyphs[y].tolist())

    def lines(self) -> List[str]:
        return [self.row(y) for y in range(self._size.height)]

    def __str__(self) -> str:
        return "\n".join(line.rstrip() for line in self.lines())
