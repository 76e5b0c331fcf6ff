"""
Frame - Adornment layer around a view.

Margin, border and padding are Frames. A Frame belongs to its parent view
but is never one of its subviews: it has no superview and its frame is
relative to the parent's frame rather than the parent's content area.
"""

from __future__ import annotations
from typing import Callable, Optional, TYPE_CHECKING
from weakref import ref

from termview.ui.geometry import Point, Rect
from termview.ui.line_canvas import LineCanvas, Orientation
from termview.ui.style import BorderStyle, Thickness
from termview.ui.view import InvalidOperationError, UnsupportedOperationError, View

if TYPE_CHECKING:
    from termview.ui.draw import Surface


class Frame(View):
    """
    A thickness ring around a parent view, optionally with a border line
    and a title on its top edge.
    """

    def __init__(
        self,
        parent: View = None,
        name: str = "",
        thickness: Thickness = None,
        border_style: BorderStyle = BorderStyle.NONE,
        title: str = "",
        fill: str = " ",
    ):
        self._parent_ref = ref(parent) if parent is not None else None
        self.name = name
        self._thickness = thickness or Thickness()
        self._border_style = border_style
        self.fill = fill
        super().__init__(title=title)

    def _create_adornments(self):
        # Adornments are not adorned themselves
        pass

    def _attach_to(self, superview: View):
        raise UnsupportedOperationError("A Frame cannot be added as a subview.")

    def _upward(self) -> Optional[View]:
        return self.parent

    # -------------------------------------------------------------------------
    # Ownership
    # -------------------------------------------------------------------------

    @property
    def parent(self) -> Optional[View]:
        """The view this frame adorns."""
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: Optional[View]):
        self._parent_ref = ref(value) if value is not None else None

    @property
    def superview(self) -> Optional[View]:
        return None

    @superview.setter
    def superview(self, value: Optional[View]):
        raise UnsupportedOperationError("A Frame has no superview; set parent instead.")

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    @property
    def thickness(self) -> Thickness:
        return self._thickness

    @thickness.setter
    def thickness(self, value: Thickness):
        if value == self._thickness:
            return
        self._thickness = value
        parent = self.parent
        if parent is not None:
            parent._on_adornment_changed()
        else:
            self.set_needs_display()

    @property
    def border_style(self) -> BorderStyle:
        return self._border_style

    @border_style.setter
    def border_style(self, value: BorderStyle):
        self._border_style = value
        self.set_needs_display()

    @property
    def bounds(self) -> Rect:
        """Area left inside the thickness ring."""
        return Rect(
            0, 0,
            max(0, self._frame.width - self._thickness.horizontal),
            max(0, self._frame.height - self._thickness.vertical),
        )

    @bounds.setter
    def bounds(self, value: Rect):
        raise InvalidOperationError("Bounds of a Frame is derived from its thickness.")

    def view_to_screen(self, point: Point) -> Point:
        # Frame coordinates are relative to the parent's frame, not its content
        local = Point(point.x + self._frame.x, point.y + self._frame.y)
        parent = self.parent
        if parent is None:
            return local
        return parent.view_to_screen(local)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, surface: Surface, canvas_factory: Callable[[], LineCanvas] = LineCanvas):
        """Paint the thickness ring, border lines and title, clipped to this frame."""
        screen = self.frame_to_screen()
        if screen.is_empty:
            return

        parent = self.parent
        owner = parent if parent is not None else self

        previous_clip = surface.clip
        clip = screen if previous_clip is None else previous_clip.intersect(screen)
        if clip is None:
            return
        surface.set_clip(clip)
        try:
            surface.set_attribute(owner.get_normal_color())
            self._thickness.draw(surface, screen, self.fill)

            if self._border_style == BorderStyle.NONE:
                return

            canvas = canvas_factory()
            self._add_border_lines(canvas, screen)
            for point, glyph in canvas.generate_image(screen).items():
                surface.paint(point, glyph)

            title = self.title or (parent.title if parent is not None else "")
            if title and screen.width > 2:
                if owner.has_focus:
                    surface.set_attribute(owner.get_hot_normal_color())
                else:
                    surface.set_attribute(owner.get_normal_color())
                surface.draw_text(Point(screen.x + 1, screen.y), title[:screen.width - 2])
        finally:
            surface.set_clip(previous_clip)

    def _add_border_lines(self, canvas: LineCanvas, rect: Rect):
        style = self._border_style
        canvas.add_line(rect.location, rect.width - 1, Orientation.HORIZONTAL, style)
        canvas.add_line(rect.location, rect.height - 1, Orientation.VERTICAL, style)
        canvas.add_line(Point(rect.x, rect.bottom - 1), rect.width - 1, Orientation.HORIZONTAL, style)
        canvas.add_line(Point(rect.right - 1, rect.y), rect.height - 1, Orientation.VERTICAL, style)

    def __repr__(self) -> str:
        return f"Frame({self.name!r}, frame={self._frame}, thickness={self._thickness})"
