"""
View Base Class

Core view tree with:
- Geometry (frame, derived bounds, screen coordinate transforms)
- Adornments (margin, border, padding frames)
- Focus primitives used by the navigation engine
- Text formatting and size-to-text negotiation
- Dirty-region tracking for the redraw pass
"""

from __future__ import annotations
import logging
from enum import Enum, auto
from typing import Iterable, List, Optional, TYPE_CHECKING
from weakref import ref

from termview.config import DEFAULT_CONFIG
from termview.core.signal import (
    SignalEmitter,
    SIGNAL_TEXT_CHANGED, SIGNAL_FOCUS_ENTER, SIGNAL_FOCUS_LEAVE,
    SIGNAL_RESIZE_NEEDED, SIGNAL_NEEDS_DISPLAY,
    SIGNAL_SUBVIEW_ADDED, SIGNAL_SUBVIEW_REMOVED,
)
from termview.ui.geometry import Point, Rect, Size
from termview.ui.style import (
    Attribute, BorderStyle, ColorScheme, DEFAULT_SCHEME, Thickness,
)
from termview.ui.text import Alignment, TextDirection, TextFormatter

if TYPE_CHECKING:
    from termview.ui.draw import Surface
    from termview.ui.frame import Frame

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================

class InvalidOperationError(RuntimeError):
    """Programming error: the operation makes no sense for this object."""


class UnsupportedOperationError(InvalidOperationError, NotImplementedError):
    """The object does not support this operation at all."""


# =============================================================================
# Enums
# =============================================================================

class NavigationDirection(Enum):
    FORWARD = auto()
    BACKWARD = auto()


class SizePolicy(Enum):
    """How a view dimension is determined."""
    ABSOLUTE = auto()   # taken from the frame
    TEXT = auto()       # measured from the text


# =============================================================================
# View
# =============================================================================

class View(SignalEmitter):
    """
    Base class for all views.

    Tree structure:
    - superview: weak back-reference, never used for lifetime
    - subviews: owned, ordered
    - tab_indexes: ordered subset of subviews eligible for keyboard focus

    The frame is relative to the superview's content area (its bounds).
    """

    def __init__(
        self,
        frame: Rect = None,
        text: str = "",
        title: str = "",
        can_focus: bool = False,
        width_policy: SizePolicy = SizePolicy.ABSOLUTE,
        height_policy: SizePolicy = SizePolicy.ABSOLUTE,
        color_scheme: ColorScheme = None,
    ):
        # Geometry
        self._frame = frame or Rect()
        self._content_size: Optional[Size] = None
        self._screen_size: Optional[Size] = None

        # Tree
        self._superview_ref = None
        self._subviews: List[View] = []
        self._tab_indexes: List[View] = []

        # Focus
        self._has_focus = False
        self._focused: Optional[View] = None
        self._can_focus = can_focus
        self._tab_stop = True
        self._focus_direction = NavigationDirection.FORWARD
        self.modal = False

        # State
        self._visible = True
        self._enabled = True
        self._title = title
        self._color_scheme = color_scheme

        # Redraw
        self._needs_display: Optional[Rect] = None
        self._subview_needs_display = False

        # Adornments
        self.margin: Optional[Frame] = None
        self.border: Optional[Frame] = None
        self.padding: Optional[Frame] = None
        self._create_adornments()
        self._layout_adornments()

        # Text
        self._text = ""
        self._width_policy = width_policy
        self._height_policy = height_policy
        self.text_formatter = TextFormatter()
        if text:
            self.text = text
        else:
            self.resolve_content_size()

        self.set_needs_display()

    # -------------------------------------------------------------------------
    # Adornments
    # -------------------------------------------------------------------------

    def _create_adornments(self):
        from termview.ui.frame import Frame

        self.margin = Frame(parent=self, name="Margin")
        self.border = Frame(parent=self, name="Border")
        self.padding = Frame(parent=self, name="Padding")

    def adornments(self) -> List[Frame]:
        """Attached frames, outermost first."""
        return [a for a in (self.margin, self.border, self.padding) if a is not None]

    def _layout_adornments(self):
        """Nest the adornment frames inside this view's frame."""
        rect = Rect(0, 0, self._frame.width, self._frame.height)
        for adornment in self.adornments():
            adornment._frame = rect
            rect = adornment.thickness.get_inner_rect(rect)

    def _on_adornment_changed(self):
        self._layout_adornments()
        if self._has_text_policy():
            self.on_resize_needed()
        else:
            self.resolve_content_size()
            self.set_needs_display()

    @property
    def adornment_thickness(self) -> Thickness:
        """Sum of the thickness of every attached adornment."""
        total = Thickness()
        for adornment in self.adornments():
            total = total + adornment.thickness
        return total

    @property
    def content_offset(self) -> Point:
        """Offset of the content area (bounds origin) inside the frame."""
        total = self.adornment_thickness
        return Point(total.left, total.top)

    @property
    def border_style(self) -> BorderStyle:
        return self.border.border_style if self.border is not None else BorderStyle.NONE

    @border_style.setter
    def border_style(self, value: BorderStyle):
        if self.border is None:
            return
        self.border.border_style = value
        self.border.thickness = Thickness.all(0 if value == BorderStyle.NONE else 1)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    @property
    def frame(self) -> Rect:
        """Position and size in the superview's content coordinates."""
        return self._frame

    @frame.setter
    def frame(self, value: Rect):
        if value == self._frame:
            return
        old = self._frame
        self._frame = value
        self._layout_adornments()
        self.resolve_content_size()
        sv = self.superview
        if sv is not None:
            offset = sv.content_offset
            sv.set_needs_display(old.offset(offset.x, offset.y))
        self.set_needs_display()

    @property
    def bounds(self) -> Rect:
        """Content area. Origin is always (0, 0)."""
        total = self.adornment_thickness
        return Rect(
            0, 0,
            max(0, self._frame.width - total.horizontal),
            max(0, self._frame.height - total.vertical),
        )

    @bounds.setter
    def bounds(self, value: Rect):
        raise InvalidOperationError("Bounds is derived from the frame and adornments; set frame instead.")

    @property
    def content_size(self) -> Size:
        if self._content_size is not None:
            return self._content_size
        return self.bounds.size

    @content_size.setter
    def content_size(self, value: Optional[Size]):
        self._content_size = value
        self.resolve_content_size()
        self.set_needs_display()

    @property
    def screen_size(self) -> Size:
        """Size of the hosting screen, inherited up the view chain."""
        if self._screen_size is not None:
            return self._screen_size
        up = self._upward()
        if up is not None:
            return up.screen_size
        return Size(DEFAULT_CONFIG.screen_width, DEFAULT_CONFIG.screen_height)

    @screen_size.setter
    def screen_size(self, value: Optional[Size]):
        self._screen_size = value
        if self._has_text_policy():
            self.on_resize_needed()

    def view_to_screen(self, point: Point) -> Point:
        """Convert a frame-relative point to screen coordinates."""
        x = point.x + self._frame.x
        y = point.y + self._frame.y
        sv = self.superview
        if sv is None:
            return Point(x, y)
        return sv.bounds_to_screen(Point(x, y))

    def bounds_to_screen(self, point: Point) -> Point:
        """Convert a content-relative point to screen coordinates."""
        offset = self.content_offset
        return self.view_to_screen(Point(point.x + offset.x, point.y + offset.y))

    def screen_to_view(self, point: Point) -> Point:
        origin = self.view_to_screen(Point(0, 0))
        return Point(point.x - origin.x, point.y - origin.y)

    def frame_to_screen(self) -> Rect:
        """This view's frame in screen coordinates."""
        return Rect.from_parts(self.view_to_screen(Point(0, 0)), self._frame.size)

    def bounds_rect_to_screen(self) -> Rect:
        """This view's content area in screen coordinates."""
        return Rect.from_parts(self.bounds_to_screen(Point(0, 0)), self.bounds.size)

    # -------------------------------------------------------------------------
    # Tree Management
    # -------------------------------------------------------------------------

    @property
    def superview(self) -> Optional[View]:
        return self._superview_ref() if self._superview_ref is not None else None

    @superview.setter
    def superview(self, value: Optional[View]):
        current = self.superview
        if value is current:
            return
        if current is not None:
            current.remove(self)
        if value is not None:
            value.add(self)

    def _upward(self) -> Optional[View]:
        """Next node when walking towards the root (superview for views)."""
        return self.superview

    @property
    def subviews(self) -> List[View]:
        return list(self._subviews)

    def add(self, *views: View):
        """Add subviews. A view already under another superview is moved."""
        for view in views:
            if view is None:
                continue
            if view is self or view.is_ancestor_of(self):
                raise ValueError(f"Cannot add {view!r} to its own descendant {self!r}")
            current = view.superview
            if current is self:
                continue
            if current is not None:
                current.remove(view)
            view._attach_to(self)
            self._subviews.append(view)
            if view.can_focus:
                self._tab_indexes.append(view)
                if not self._can_focus:
                    self.can_focus = True
            self.emit(SIGNAL_SUBVIEW_ADDED, self, view)
            view.set_needs_display()

    def _attach_to(self, superview: View):
        self._superview_ref = ref(superview)

    def remove(self, view: View):
        """Remove a subview. It loses focus and its superview link."""
        if view not in self._subviews:
            return
        if view._has_focus:
            view._set_has_focus(False)
        if self._focused is view:
            self._focused = None
        self._subviews.remove(view)
        if view in self._tab_indexes:
            self._tab_indexes.remove(view)
        view._superview_ref = None
        offset = self.content_offset
        self.set_needs_display(view.frame.offset(offset.x, offset.y))
        self.emit(SIGNAL_SUBVIEW_REMOVED, self, view)

    def remove_all(self):
        for view in list(self._subviews):
            self.remove(view)

    def get_root(self) -> View:
        """Get the root of the view tree."""
        v = self
        while v.superview is not None:
            v = v.superview
        return v

    def is_ancestor_of(self, view: View) -> bool:
        v = view.superview
        while v is not None:
            if v is self:
                return True
            v = v.superview
        return False

    # -------------------------------------------------------------------------
    # Tab Order
    # -------------------------------------------------------------------------

    @property
    def tab_indexes(self) -> List[View]:
        return list(self._tab_indexes)

    @tab_indexes.setter
    def tab_indexes(self, views: Iterable[View]):
        views = list(views)
        for view in views:
            if view.superview is not self:
                raise ValueError(f"{view!r} is not a subview of {self!r}")
        self._tab_indexes = views

    @property
    def tab_index(self) -> int:
        """Position in the superview's tab order (-1 when not a member)."""
        sv = self.superview
        if sv is None or self not in sv._tab_indexes:
            return -1
        return sv._tab_indexes.index(self)

    @tab_index.setter
    def tab_index(self, value: int):
        sv = self.superview
        if sv is None:
            return
        if self in sv._tab_indexes:
            sv._tab_indexes.remove(self)
        sv._tab_indexes.insert(max(0, min(value, len(sv._tab_indexes))), self)

    @property
    def tab_stop(self) -> bool:
        return self._tab_stop

    @tab_stop.setter
    def tab_stop(self, value: bool):
        self._tab_stop = value

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def can_focus(self) -> bool:
        return self._can_focus

    @can_focus.setter
    def can_focus(self, value: bool):
        if value == self._can_focus:
            return
        self._can_focus = value
        sv = self.superview
        if value:
            if sv is not None:
                if self not in sv._tab_indexes:
                    sv._tab_indexes.append(self)
                if not sv.can_focus:
                    sv.can_focus = True
        elif self._has_focus:
            self.clear_focus()
            if sv is not None and sv.has_focus:
                sv.ensure_focus()

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool):
        if value == self._visible:
            return
        self._visible = value
        if not value and self._has_focus:
            sv = self.superview
            self.clear_focus()
            if sv is not None and sv.has_focus:
                sv.ensure_focus()
        sv = self.superview
        if sv is not None:
            offset = sv.content_offset
            sv.set_needs_display(self._frame.offset(offset.x, offset.y))
        self.set_needs_display()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        if value == self._enabled:
            return
        self._enabled = value
        if not value and self._has_focus:
            sv = self.superview
            self.clear_focus()
            if sv is not None and sv.has_focus:
                sv.ensure_focus()
        self.set_needs_display()

    def can_be_visible(self) -> bool:
        """Visible along the whole chain up to the root."""
        v = self
        while v is not None:
            if not v._visible:
                return False
            v = v._upward()
        return True

    def can_be_focused(self) -> bool:
        return self._can_focus and self._visible and self._enabled

    def _is_tab_eligible(self) -> bool:
        return self._tab_stop and self.can_be_focused()

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str):
        self._title = value or ""
        self.set_needs_display()

    # -------------------------------------------------------------------------
    # Focus
    # -------------------------------------------------------------------------

    @property
    def has_focus(self) -> bool:
        return self._has_focus

    @property
    def focused(self) -> Optional[View]:
        """Subview currently holding focus."""
        return self._focused

    @property
    def most_focused(self) -> Optional[View]:
        """Deepest view along the focused chain below this one."""
        view = self._focused
        if view is None:
            return None
        while view._focused is not None:
            view = view._focused
        return view

    def _set_has_focus(self, value: bool, other: Optional[View] = None):
        # Unfocusing clears the whole chain below first
        if not value and self._focused is not None:
            focused = self._focused
            self._focused = None
            focused._set_has_focus(False, other)
        if self._has_focus != value:
            self._has_focus = value
            self.emit(SIGNAL_FOCUS_ENTER if value else SIGNAL_FOCUS_LEAVE, self, other)

    def clear_focus(self):
        """Drop focus from this view and everything below it."""
        sv = self.superview
        if sv is not None and sv._focused is self:
            sv._focused = None
        self._set_has_focus(False)

    def set_focus(self):
        """Focus this view, focusing every ancestor on the way up."""
        if not self.can_be_focused():
            return
        sv = self.superview
        if sv is None:
            if not self._has_focus:
                self._set_has_focus(True)
            self.ensure_focus()
            return
        sv._set_focused_child(self)

    def _set_focused_child(self, view: View):
        if view.superview is not self:
            raise ValueError(f"{view!r} is not a subview of {self!r}")
        if self._focused is view and view._has_focus:
            self._send_focus_up()
            return
        previous = self._focused
        if previous is not None:
            previous._set_has_focus(False, view)
        self._focused = view
        view._set_has_focus(True, previous)
        view.ensure_focus()
        self._send_focus_up()

    def _send_focus_up(self):
        sv = self.superview
        if sv is not None:
            sv._set_focused_child(self)
        elif not self._has_focus:
            self._set_has_focus(True)

    def ensure_focus(self):
        """Focus a subview if none is focused yet, honoring the last direction."""
        if self._focused is None and self._tab_indexes:
            if self._focus_direction == NavigationDirection.FORWARD:
                self.focus_first()
            else:
                self.focus_last()

    def focus_first(self):
        """Focus the first eligible view in tab order."""
        if not self.can_be_visible():
            return
        for view in self._tab_indexes:
            if view._is_tab_eligible():
                self._set_focused_child(view)
                return

    def focus_last(self):
        """Focus the last eligible view in tab order (and its last descendant)."""
        if not self.can_be_visible():
            return
        for view in reversed(self._tab_indexes):
            if view._is_tab_eligible():
                view.focus_last()
                self._set_focused_child(view)
                return

    def advance_focus(self, direction: NavigationDirection) -> bool:
        """
        Move focus to the next/previous eligible view.

        The focused subview gets the first chance to advance inside itself.
        When no view is left in `direction`, focus is removed from the
        focused subview, `focused` becomes None and False is returned; a
        following call then starts again from the first/last view.
        """
        if not self.can_be_visible():
            return False
        self._focus_direction = direction
        if not self._tab_indexes:
            return False

        forward = direction == NavigationDirection.FORWARD
        if self._focused is None:
            if forward:
                self.focus_first()
            else:
                self.focus_last()
            return self._focused is not None

        order = self._tab_indexes if forward else list(reversed(self._tab_indexes))
        focused_found = False
        for view in order:
            if view._has_focus:
                if view.advance_focus(direction):
                    return True
                focused_found = True
                continue
            if focused_found and view._is_tab_eligible():
                if forward:
                    view.focus_first()
                else:
                    view.focus_last()
                self._set_focused_child(view)
                return True

        if self._focused is not None:
            self._focused._set_has_focus(False, self)
            self._focused = None
        return False

    # -------------------------------------------------------------------------
    # Colors
    # -------------------------------------------------------------------------

    @property
    def color_scheme(self) -> ColorScheme:
        if self._color_scheme is not None:
            return self._color_scheme
        up = self._upward()
        if up is not None:
            return up.color_scheme
        return DEFAULT_SCHEME

    @color_scheme.setter
    def color_scheme(self, value: Optional[ColorScheme]):
        self._color_scheme = value
        self.set_needs_display()

    def get_normal_color(self) -> Attribute:
        scheme = self.color_scheme
        return scheme.normal if self._enabled else scheme.disabled

    def get_focus_color(self) -> Attribute:
        scheme = self.color_scheme
        return scheme.focus if self._enabled else scheme.disabled

    def get_hot_normal_color(self) -> Attribute:
        scheme = self.color_scheme
        return scheme.hot_normal if self._enabled else scheme.disabled

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        old = self._text
        self._text = value or ""
        self.update_text_formatter_text()
        self.on_resize_needed()
        self.emit(SIGNAL_TEXT_CHANGED, self, old, self._text)

    def update_text_formatter_text(self):
        """Push the text into the formatter. Subclasses may decorate it."""
        self.text_formatter.text = self._text

    @property
    def text_alignment(self) -> Alignment:
        return self.text_formatter.alignment

    @text_alignment.setter
    def text_alignment(self, value: Alignment):
        self.text_formatter.alignment = value
        self.update_text_formatter_text()
        self.on_resize_needed()

    @property
    def vertical_text_alignment(self) -> Alignment:
        return self.text_formatter.vertical_alignment

    @vertical_text_alignment.setter
    def vertical_text_alignment(self, value: Alignment):
        self.text_formatter.vertical_alignment = value
        self.set_needs_display()

    @property
    def text_direction(self) -> TextDirection:
        return self.text_formatter.direction

    @text_direction.setter
    def text_direction(self, value: TextDirection):
        old = self.text_formatter.direction
        axis_flipped = (
            TextFormatter.is_horizontal_direction(old)
            != TextFormatter.is_horizontal_direction(value)
        )
        self.text_formatter.direction = value
        self.update_text_formatter_text()
        if axis_flipped:
            self.on_resize_needed()
        else:
            self.resolve_content_size()
        self.set_needs_display()

    @property
    def preserve_trailing_spaces(self) -> bool:
        return self.text_formatter.preserve_trailing_spaces

    @preserve_trailing_spaces.setter
    def preserve_trailing_spaces(self, value: bool):
        if self.text_formatter.preserve_trailing_spaces != value:
            self.text_formatter.preserve_trailing_spaces = value
            self.text_formatter.needs_format = True

    @property
    def word_wrap(self) -> bool:
        return self.text_formatter.word_wrap

    @word_wrap.setter
    def word_wrap(self, value: bool):
        self.text_formatter.word_wrap = value
        self.on_resize_needed()

    # -------------------------------------------------------------------------
    # Sizing
    # -------------------------------------------------------------------------

    @property
    def width_policy(self) -> SizePolicy:
        return self._width_policy

    @width_policy.setter
    def width_policy(self, value: SizePolicy):
        self._width_policy = value
        self.on_resize_needed()

    @property
    def height_policy(self) -> SizePolicy:
        return self._height_policy

    @height_policy.setter
    def height_policy(self, value: SizePolicy):
        self._height_policy = value
        self.on_resize_needed()

    def _has_text_policy(self) -> bool:
        return self._width_policy == SizePolicy.TEXT or self._height_policy == SizePolicy.TEXT

    def resolve_content_size(self) -> Size:
        """
        Negotiate the content size with the text formatter.

        Axes not governed by SizePolicy.TEXT keep their current content
        size. Text-governed axes are measured in two fixed phases: height
        first, against the fixed width or else the screen width; then
        width, against the screen width and the resolved height. The
        result becomes the formatter's target size.
        """
        self.update_text_formatter_text()
        size = self.content_size

        width_text = self._width_policy == SizePolicy.TEXT
        height_text = self._height_policy == SizePolicy.TEXT
        if width_text or height_text:
            screen = self.screen_size
            width = 0 if width_text else size.width
            height = 0 if height_text else size.height

            if height_text:
                probe_width = screen.width if width_text else width
                height = self.text_formatter.format_and_get_size(
                    Size(probe_width, screen.height)
                ).height

            if width_text:
                width = self.text_formatter.format_and_get_size(
                    Size(screen.width, height)
                ).width

            size = Size(width, height)

        self.text_formatter.size = size
        return size

    def on_resize_needed(self):
        """Re-measure; text-governed axes resize the frame to fit."""
        size = self.resolve_content_size()
        if self._has_text_policy():
            total = self.adornment_thickness
            width = size.width + total.horizontal if self._width_policy == SizePolicy.TEXT else self._frame.width
            height = size.height + total.vertical if self._height_policy == SizePolicy.TEXT else self._frame.height
            self.frame = Rect(self._frame.x, self._frame.y, width, height)
        self.set_needs_display()
        self.emit(SIGNAL_RESIZE_NEEDED, self)

    # -------------------------------------------------------------------------
    # Redraw Tracking
    # -------------------------------------------------------------------------

    @property
    def needs_display(self) -> bool:
        return self._needs_display is not None

    @property
    def needs_display_region(self) -> Optional[Rect]:
        """Dirty region in frame-relative coordinates."""
        return self._needs_display

    @property
    def subview_needs_display(self) -> bool:
        return self._subview_needs_display

    def set_needs_display(self, region: Rect = None):
        """Mark `region` (frame-relative, default: whole frame) for redraw."""
        if region is None:
            region = Rect(0, 0, self._frame.width, self._frame.height)
        if self._needs_display is None:
            self._needs_display = region
        else:
            self._needs_display = self._needs_display.union(region)
        up = self._upward()
        if up is not None:
            up._set_subview_needs_display()
        self.emit(SIGNAL_NEEDS_DISPLAY, self, region)

    def _set_subview_needs_display(self):
        v = self
        while v is not None and not v._subview_needs_display:
            v._subview_needs_display = True
            v = v._upward()

    def clear_needs_display(self):
        self._needs_display = None
        self._subview_needs_display = False

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def draw(self, surface: Surface, force: bool = False):
        """
        Redraw this view where needed, then its subviews.

        A view that redraws itself forces its subviews to redraw since its
        content fill covers them.
        """
        if not self._visible:
            return

        redraw_self = force or self._needs_display is not None
        if redraw_self:
            previous_clip = surface.clip
            screen = self.frame_to_screen()
            clip = screen if previous_clip is None else previous_clip.intersect(screen)
            if clip is not None:
                for adornment in self.adornments():
                    surface.set_clip(clip)
                    adornment.render(surface)
                content = self.bounds_rect_to_screen().intersect(clip)
                if content is not None:
                    surface.set_clip(content)
                    self.draw_content(surface, content)
            surface.set_clip(previous_clip)

        for view in self._subviews:
            if redraw_self or view.needs_display or view.subview_needs_display:
                view.draw(surface, force=redraw_self)

        self.clear_needs_display()

    def draw_content(self, surface: Surface, rect: Rect):
        """Clear the content area and paint the text."""
        attribute = self.get_focus_color() if self._has_focus else self.get_normal_color()
        surface.set_attribute(attribute)
        surface.fill_rect(rect, " ")
        if self._text:
            self.text_formatter.draw(surface, self.bounds_rect_to_screen(), attribute)

    # -------------------------------------------------------------------------
    # Debug
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        name = self.__class__.__name__
        label = self._title or self._text
        if label:
            return f"{name}({label!r}, frame={self._frame})"
        return f"{name}(frame={self._frame}, subviews={len(self._subviews)})"

    def describe_tree(self, indent: int = 0) -> List[str]:
        """One line per view, focus marked with '*'."""
        prefix = "  " * indent
        mark = "*" if self._has_focus else " "
        lines = [f"{prefix}{mark}{self!r}"]
        for view in self._subviews:
            lines.extend(view.describe_tree(indent + 1))
        return lines
