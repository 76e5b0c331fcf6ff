"""
Text Formatting

Lays out a view's text into glyph rows for a target size.

- TextFormatter: text + alignment + direction + wrap policy, cached rows
- word_wrap: whitespace-boundary wrapping used by the formatter
- Alignment / TextDirection enums

Directions name the major (reading) axis first. For vertical directions
each formatted "line" is a column.
"""

from __future__ import annotations
import re
from enum import Enum, auto
from typing import List, Tuple, TYPE_CHECKING

from termview.ui.geometry import Point, Rect, Size

if TYPE_CHECKING:
    from termview.ui.draw import Surface
    from termview.ui.style import Attribute


_TOKENS = re.compile(r"\s+|\S+")


# =============================================================================
# Enums
# =============================================================================

class Alignment(Enum):
    START = auto()
    END = auto()
    CENTER = auto()
    FILL = auto()   # justified


class TextDirection(Enum):
    LEFT_RIGHT_TOP_BOTTOM = auto()
    RIGHT_LEFT_TOP_BOTTOM = auto()
    LEFT_RIGHT_BOTTOM_TOP = auto()
    RIGHT_LEFT_BOTTOM_TOP = auto()
    TOP_BOTTOM_LEFT_RIGHT = auto()
    TOP_BOTTOM_RIGHT_LEFT = auto()
    BOTTOM_TOP_LEFT_RIGHT = auto()
    BOTTOM_TOP_RIGHT_LEFT = auto()


_HORIZONTAL = {
    TextDirection.LEFT_RIGHT_TOP_BOTTOM,
    TextDirection.RIGHT_LEFT_TOP_BOTTOM,
    TextDirection.LEFT_RIGHT_BOTTOM_TOP,
    TextDirection.RIGHT_LEFT_BOTTOM_TOP,
}

_LEFT_TO_RIGHT = {
    TextDirection.LEFT_RIGHT_TOP_BOTTOM,
    TextDirection.LEFT_RIGHT_BOTTOM_TOP,
    TextDirection.TOP_BOTTOM_LEFT_RIGHT,
    TextDirection.BOTTOM_TOP_LEFT_RIGHT,
}

_TOP_TO_BOTTOM = {
    TextDirection.LEFT_RIGHT_TOP_BOTTOM,
    TextDirection.RIGHT_LEFT_TOP_BOTTOM,
    TextDirection.TOP_BOTTOM_LEFT_RIGHT,
    TextDirection.TOP_BOTTOM_RIGHT_LEFT,
}


# =============================================================================
# Wrapping
# =============================================================================

def word_wrap(
    text: str,
    width: int,
    preserve_trailing_spaces: bool = False,
    tab_width: int = 4,
) -> List[str]:
    """
    Wrap one paragraph at whitespace boundaries.

    Words longer than `width` are split. Unless preserve_trailing_spaces is
    set, whitespace at a wrap point is dropped, so wrapped lines never end
    in spaces; the final line keeps whatever trailing whitespace fits.
    """
    if width <= 0:
        return []
    text = text.expandtabs(tab_width)
    if not text:
        return [""]

    lines: List[str] = []
    line = ""
    pending = ""

    for token in _TOKENS.findall(text):
        if token.isspace():
            if preserve_trailing_spaces:
                for ch in token:
                    if len(line) == width:
                        lines.append(line)
                        line = ""
                    line += ch
            else:
                pending += token
            continue

        # Leading whitespace of the paragraph is kept, gaps at wrap points are not
        gap = pending if (line or not lines) else ""
        pending = ""
        if len(line) + len(gap) + len(token) <= width:
            line += gap + token
            continue

        if line:
            lines.append(line)
            line = ""
        while len(token) > width:
            lines.append(token[:width])
            token = token[width:]
        line = token

    if pending and len(line) + len(pending) <= width:
        line += pending
    lines.append(line)
    return lines


def justify(line: str, width: int) -> str:
    """Spread words so the line fills `width`."""
    words = line.split()
    if len(words) < 2:
        return line
    spaces = width - sum(len(w) for w in words)
    if spaces < len(words) - 1:
        return line
    base, extra = divmod(spaces, len(words) - 1)
    out = ""
    for i, word in enumerate(words[:-1]):
        out += word + " " * (base + (1 if i < extra else 0))
    return out + words[-1]


def _align(line: str, length: int, alignment: Alignment) -> Tuple[int, str]:
    """Offset along the major axis and the (possibly clipped) text."""
    line = line[:length]
    free = length - len(line)
    if alignment == Alignment.END:
        return free, line
    if alignment == Alignment.CENTER:
        return free // 2, line
    if alignment == Alignment.FILL:
        return 0, justify(line, length)
    return 0, line


def _block_offset(count: int, length: int, alignment: Alignment) -> int:
    free = max(0, length - count)
    if alignment == Alignment.END:
        return free
    if alignment == Alignment.CENTER:
        return free // 2
    return 0


# =============================================================================
# Text Formatter
# =============================================================================

class TextFormatter:
    """
    Formats text for a target size.

    Every mutator sets needs_format; format() re-runs layout only when it
    is set. Measuring through format_and_get_size() does not touch the
    cached rows.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._alignment = Alignment.START
        self._vertical_alignment = Alignment.START
        self._direction = TextDirection.LEFT_RIGHT_TOP_BOTTOM
        self._word_wrap = True
        self._preserve_trailing_spaces = False
        self._tab_width = 4
        self._size = Size()
        self._lines: List[str] = []
        self.needs_format = True

    # -------------------------------------------------------------------------
    # Direction helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def is_horizontal_direction(direction: TextDirection) -> bool:
        return direction in _HORIZONTAL

    @staticmethod
    def is_vertical_direction(direction: TextDirection) -> bool:
        return direction not in _HORIZONTAL

    @staticmethod
    def is_left_to_right(direction: TextDirection) -> bool:
        return direction in _LEFT_TO_RIGHT

    @staticmethod
    def is_top_to_bottom(direction: TextDirection) -> bool:
        return direction in _TOP_TO_BOTTOM

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        value = value or ""
        if value != self._text:
            self._text = value
            self.needs_format = True

    @property
    def alignment(self) -> Alignment:
        return self._alignment

    @alignment.setter
    def alignment(self, value: Alignment):
        self._alignment = value
        self.needs_format = True

    @property
    def vertical_alignment(self) -> Alignment:
        return self._vertical_alignment

    @vertical_alignment.setter
    def vertical_alignment(self, value: Alignment):
        self._vertical_alignment = value
        self.needs_format = True

    @property
    def direction(self) -> TextDirection:
        return self._direction

    @direction.setter
    def direction(self, value: TextDirection):
        self._direction = value
        self.needs_format = True

    @property
    def word_wrap(self) -> bool:
        return self._word_wrap

    @word_wrap.setter
    def word_wrap(self, value: bool):
        self._word_wrap = value
        self.needs_format = True

    @property
    def preserve_trailing_spaces(self) -> bool:
        return self._preserve_trailing_spaces

    @preserve_trailing_spaces.setter
    def preserve_trailing_spaces(self, value: bool):
        self._preserve_trailing_spaces = value
        self.needs_format = True

    @property
    def tab_width(self) -> int:
        return self._tab_width

    @tab_width.setter
    def tab_width(self, value: int):
        self._tab_width = max(0, value)
        self.needs_format = True

    @property
    def size(self) -> Size:
        """Target size rows are formatted for."""
        return self._size

    @size.setter
    def size(self, value: Size):
        if value != self._size:
            self._size = value
            self.needs_format = True

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self) -> List[str]:
        """Rows (columns for vertical directions) for the current size."""
        if self.needs_format:
            self._lines = self._format_lines(self._size)
            self.needs_format = False
        return list(self._lines)

    def format_and_get_size(self, constraint: Size) -> Size:
        """Size the text occupies when laid out within `constraint`."""
        if not self._text:
            return Size(0, 0)
        lines = self._format_lines(constraint)
        if not lines:
            return Size(0, 0)
        longest = max(len(line) for line in lines)
        if self.is_horizontal_direction(self._direction):
            return Size(longest, len(lines))
        return Size(len(lines), longest)

    def _format_lines(self, size: Size) -> List[str]:
        if self.is_horizontal_direction(self._direction):
            major, minor = size.width, size.height
        else:
            major, minor = size.height, size.width
        if major <= 0 or minor <= 0:
            return []

        lines: List[str] = []
        for paragraph in self._text.replace("\r\n", "\n").split("\n"):
            if self._word_wrap:
                lines.extend(word_wrap(
                    paragraph, major, self._preserve_trailing_spaces, self._tab_width,
                ))
            else:
                lines.append(paragraph.expandtabs(self._tab_width)[:major])
            if len(lines) >= minor:
                break
        return lines[:minor]

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def draw(self, surface: Surface, rect: Rect, attribute: Attribute):
        """Paint the formatted text inside `rect` (screen coordinates)."""
        lines = self.format()
        if not lines or rect.is_empty:
            return

        horizontal = self.is_horizontal_direction(self._direction)
        if horizontal:
            major_len, minor_len = rect.width, rect.height
            major_align, minor_align = self._alignment, self._vertical_alignment
            reverse_chars = not self.is_left_to_right(self._direction)
            reverse_lines = not self.is_top_to_bottom(self._direction)
        else:
            major_len, minor_len = rect.height, rect.width
            major_align, minor_align = self._vertical_alignment, self._alignment
            reverse_chars = not self.is_top_to_bottom(self._direction)
            reverse_lines = not self.is_left_to_right(self._direction)

        lines = lines[:minor_len]
        if reverse_lines:
            lines.reverse()
        first = _block_offset(len(lines), minor_len, minor_align)

        surface.set_attribute(attribute)
        for i, line in enumerate(lines):
            start, text = _align(line, major_len, major_align)
            if reverse_chars:
                text = text[::-1]
                start = major_len - start - len(text)
            minor = first + i
            for k, ch in enumerate(text):
                if horizontal:
                    surface.paint(Point(rect.x + start + k, rect.y + minor), ch)
                else:
                    surface.paint(Point(rect.x + minor, rect.y + start + k), ch)
