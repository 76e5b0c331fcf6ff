"""
Geometry

Integer cell geometry for the view tree.

- Point: a column/row position
- Size: a width/height pair
- Rect: position + size, with inset/intersection helpers

All values are terminal cells. Rects are half-open: a Rect(0, 0, 3, 1)
covers columns 0, 1 and 2 of row 0.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from termview.ui.style import Thickness


# =============================================================================
# Point / Size
# =============================================================================

@dataclass(frozen=True)
class Point:
    """Column/row position."""
    x: int = 0
    y: int = 0

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Width/height pair."""
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


# =============================================================================
# Rect
# =============================================================================

@dataclass(frozen=True)
class Rect:
    """Rectangle with position and size."""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @staticmethod
    def from_parts(location: Point, size: Size) -> Rect:
        return Rect(location.x, location.y, size.width, size.height)

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, px: int, py: int) -> bool:
        return self.x <= px < self.right and self.y <= py < self.bottom

    def contains_point(self, point: Point) -> bool:
        return self.contains(point.x, point.y)

    def offset(self, dx: int, dy: int) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def with_location(self, location: Point) -> Rect:
        return Rect(location.x, location.y, self.width, self.height)

    def with_size(self, size: Size) -> Rect:
        return Rect(self.x, self.y, size.width, size.height)

    def inset(self, left: int, top: int, right: int, bottom: int) -> Rect:
        """Return new rect inset by the given amounts (size clamped at zero)."""
        return Rect(
            x=self.x + left,
            y=self.y + top,
            width=max(0, self.width - left - right),
            height=max(0, self.height - top - bottom),
        )

    def inset_by(self, thickness: Thickness) -> Rect:
        """Return new rect inset by a Thickness."""
        return self.inset(thickness.left, thickness.top, thickness.right, thickness.bottom)

    def intersect(self, other: Rect) -> Optional[Rect]:
        """Intersection of two rects, or None if they do not overlap."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        r = min(self.right, other.right)
        b = min(self.bottom, other.bottom)
        if r <= x or b <= y:
            return None
        return Rect(x, y, r - x, b - y)

    def union(self, other: Rect) -> Rect:
        """Smallest rect covering both."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return Rect(x, y, max(self.right, other.right) - x, max(self.bottom, other.bottom) - y)

    def cells(self) -> Iterator[Point]:
        """Iterate every cell, row-major."""
        for row in range(self.y, self.bottom):
            for col in range(self.x, self.right):
                yield Point(col, row)
