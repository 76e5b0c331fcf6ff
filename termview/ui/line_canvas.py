"""
Line Canvas

Composites horizontal/vertical line segments into box-drawing glyphs.

Each cell a segment passes through records which neighbours the line
continues into (N/S/E/W). Once all segments are added, the set of
directions per cell picks the glyph, so crossing and touching lines come
out as corners, tees and crosses instead of overwriting each other.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, FrozenSet, List, Optional, Set

from termview.ui.geometry import Point, Rect
from termview.ui.style import BorderStyle


class Orientation(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()


@dataclass(frozen=True)
class StraightLine:
    """
    Segment from `start` spanning `length` cells past it.

    length is the offset to the end cell, so a length of 4 covers 5 cells.
    Negative lengths extend left/up.
    """
    start: Point
    length: int
    orientation: Orientation
    style: BorderStyle = BorderStyle.SINGLE

    @property
    def end(self) -> Point:
        if self.orientation == Orientation.HORIZONTAL:
            return Point(self.start.x + self.length, self.start.y)
        return Point(self.start.x, self.start.y + self.length)


# =============================================================================
# Glyph Tables
# =============================================================================

def _glyph_table(h, v, tl, tr, bl, br, tee_down, tee_up, tee_right, tee_left, cross):
    f = frozenset
    return {
        f("EW"): h, f("E"): h, f("W"): h,
        f("NS"): v, f("N"): v, f("S"): v,
        f("ES"): tl, f("WS"): tr, f("EN"): bl, f("WN"): br,
        f("EWS"): tee_down, f("EWN"): tee_up,
        f("NSE"): tee_right, f("NSW"): tee_left,
        f("NSEW"): cross,
    }


GLYPHS: Dict[BorderStyle, Dict[FrozenSet[str], str]] = {
    BorderStyle.SINGLE: _glyph_table("─", "│", "┌", "┐", "└", "┘", "┬", "┴", "├", "┤", "┼"),
    BorderStyle.DOUBLE: _glyph_table("═", "║", "╔", "╗", "╚", "╝", "╦", "╩", "╠", "╣", "╬"),
    BorderStyle.HEAVY: _glyph_table("━", "┃", "┏", "┓", "┗", "┛", "┳", "┻", "┣", "┫", "╋"),
    BorderStyle.ROUNDED: _glyph_table("─", "│", "╭", "╮", "╰", "╯", "┬", "┴", "├", "┤", "┼"),
}


# =============================================================================
# Canvas
# =============================================================================

class _Cell:
    __slots__ = ("directions", "style", "orientation")

    def __init__(self, style: BorderStyle, orientation: Orientation):
        self.directions: Set[str] = set()
        self.style = style
        self.orientation = orientation


class LineCanvas:
    """Collects line segments and renders them to (position -> glyph)."""

    def __init__(self):
        self._lines: List[StraightLine] = []

    @property
    def lines(self) -> List[StraightLine]:
        return list(self._lines)

    def add_line(
        self,
        start: Point,
        length: int,
        orientation: Orientation,
        style: BorderStyle = BorderStyle.SINGLE,
    ):
        """Add a segment. Lines with BorderStyle.NONE are ignored."""
        if style == BorderStyle.NONE:
            return
        self._lines.append(StraightLine(start, length, orientation, style))

    def clear(self):
        self._lines.clear()

    def generate_image(self, bounds: Optional[Rect] = None) -> Dict[Point, str]:
        """
        Resolve all segments into glyphs.

        Only cells inside `bounds` are returned when bounds is given.
        """
        cells: Dict[Point, _Cell] = {}

        for line in self._lines:
            if line.orientation == Orientation.HORIZONTAL:
                lo = min(line.start.x, line.end.x)
                hi = max(line.start.x, line.end.x)
                for x in range(lo, hi + 1):
                    cell = self._cell(cells, Point(x, line.start.y), line)
                    if x < hi:
                        cell.directions.add("E")
                    if x > lo:
                        cell.directions.add("W")
            else:
                lo = min(line.start.y, line.end.y)
                hi = max(line.start.y, line.end.y)
                for y in range(lo, hi + 1):
                    cell = self._cell(cells, Point(line.start.x, y), line)
                    if y < hi:
                        cell.directions.add("S")
                    if y > lo:
                        cell.directions.add("N")

        image: Dict[Point, str] = {}
        for point, cell in cells.items():
            if bounds is not None and not bounds.contains_point(point):
                continue
            image[point] = self._resolve(cell)
        return image

    @staticmethod
    def _cell(cells: Dict[Point, _Cell], point: Point, line: StraightLine) -> _Cell:
        cell = cells.get(point)
        if cell is None:
            cell = _Cell(line.style, line.orientation)
            cells[point] = cell
        return cell

    @staticmethod
    def _resolve(cell: _Cell) -> str:
        table = GLYPHS[cell.style]
        if not cell.directions:
            key = "EW" if cell.orientation == Orientation.HORIZONTAL else "NS"
            return table[frozenset(key)]
        return table[frozenset(cell.directions)]
