import gc

import pytest

from termview.core.signal import SIGNAL_FOCUS_ENTER, SIGNAL_FOCUS_LEAVE, SIGNAL_TEXT_CHANGED
from termview.ui.geometry import Point, Rect, Size
from termview.ui.style import BorderStyle, DIALOG_SCHEME, Thickness
from termview.ui.text import Alignment, TextDirection
from termview.ui.view import (
    InvalidOperationError, NavigationDirection, SizePolicy, View,
)

FORWARD = NavigationDirection.FORWARD
BACKWARD = NavigationDirection.BACKWARD


# -----------------------------------------------------------------------------
# Bounds
# -----------------------------------------------------------------------------

def test_bounds_equals_frame_size_without_adornments():
    v = View(Rect(3, 4, 10, 5))

    assert v.bounds == Rect(0, 0, 10, 5)


def test_bounds_with_border_thickness():
    v = View(Rect(0, 0, 10, 5))
    v.border.thickness = Thickness.all(1)

    assert v.bounds == Rect(0, 0, 8, 3)


def test_bounds_sums_all_adornments():
    v = View(Rect(0, 0, 20, 10))
    v.margin.thickness = Thickness(1, 0, 1, 0)
    v.border.thickness = Thickness.all(1)
    v.padding.thickness = Thickness(0, 1, 0, 1)

    assert v.bounds == Rect(0, 0, 16, 6)
    assert v.content_offset == Point(2, 2)


def test_bounds_clamped_at_zero():
    v = View(Rect(0, 0, 2, 2))
    v.border.thickness = Thickness.all(3)

    assert v.bounds == Rect(0, 0, 0, 0)


def test_bounds_setter_raises():
    v = View(Rect(0, 0, 10, 5))

    with pytest.raises(InvalidOperationError):
        v.bounds = Rect(0, 0, 1, 1)


def test_adornment_frames_nest():
    v = View(Rect(0, 0, 10, 5))
    v.margin.thickness = Thickness.all(1)
    v.border.thickness = Thickness.all(1)

    assert v.margin.frame == Rect(0, 0, 10, 5)
    assert v.border.frame == Rect(1, 1, 8, 3)
    assert v.padding.frame == Rect(2, 2, 6, 1)


def test_border_style_sets_thickness():
    v = View(Rect(0, 0, 10, 5))
    v.border_style = BorderStyle.DOUBLE

    assert v.border.thickness == Thickness.all(1)
    assert v.bounds == Rect(0, 0, 8, 3)

    v.border_style = BorderStyle.NONE
    assert v.bounds == Rect(0, 0, 10, 5)


# -----------------------------------------------------------------------------
# Coordinates
# -----------------------------------------------------------------------------

def make_nested():
    root = View(Rect(0, 0, 80, 25))
    child = View(Rect(5, 3, 20, 10))
    grand = View(Rect(2, 1, 5, 5))
    root.add(child)
    child.add(grand)
    return root, child, grand


def test_view_to_screen_nested():
    root, child, grand = make_nested()

    assert grand.view_to_screen(Point(0, 0)) == Point(7, 4)
    assert grand.view_to_screen(Point(1, 1)) == Point(8, 5)
    assert grand.frame_to_screen() == Rect(7, 4, 5, 5)


def test_view_to_screen_includes_content_offset():
    root, child, grand = make_nested()
    child.border_style = BorderStyle.SINGLE

    assert grand.view_to_screen(Point(0, 0)) == Point(8, 5)
    assert child.bounds_to_screen(Point(0, 0)) == Point(6, 4)
    assert child.bounds_rect_to_screen() == Rect(6, 4, 18, 8)


def test_screen_to_view_inverts_view_to_screen():
    root, child, grand = make_nested()
    child.border_style = BorderStyle.SINGLE
    screen = grand.view_to_screen(Point(3, 2))

    assert grand.screen_to_view(screen) == Point(3, 2)


def test_frame_change_moves_screen_position():
    root, child, grand = make_nested()
    child.frame = Rect(0, 0, 20, 10)

    assert grand.view_to_screen(Point(0, 0)) == Point(2, 1)


# -----------------------------------------------------------------------------
# Tree
# -----------------------------------------------------------------------------

def test_add_links_superview_and_tab_indexes():
    root = View()
    a = View(can_focus=True)
    b = View()
    root.add(a, b)

    assert a.superview is root
    assert root.subviews == [a, b]
    assert root.tab_indexes == [a]
    # A focusable child makes the container focusable
    assert root.can_focus


def test_add_moves_view_between_superviews():
    p1, p2, a = View(), View(), View(can_focus=True)
    p1.add(a)
    p2.add(a)

    assert a.superview is p2
    assert a not in p1.subviews
    assert a not in p1.tab_indexes
    assert p2.subviews == [a]


def test_add_same_view_twice_keeps_one_entry():
    root, a = View(), View()
    root.add(a)
    root.add(a)

    assert root.subviews == [a]


def test_add_cycle_raises():
    parent, child = View(), View()
    parent.add(child)

    with pytest.raises(ValueError):
        child.add(parent)
    with pytest.raises(ValueError):
        parent.add(parent)


def test_superview_setter_reparents():
    p1, a = View(), View()
    a.superview = p1
    assert a in p1.subviews

    a.superview = None
    assert a not in p1.subviews
    assert a.superview is None


def test_can_focus_propagates_to_ancestors():
    root, box, leaf = View(), View(), View(can_focus=True)
    root.add(box)
    box.add(leaf)

    assert box.can_focus
    assert root.can_focus
    assert root.tab_indexes == [box]


def test_remove_clears_focus_chain():
    root, box, leaf = View(), View(), View(can_focus=True)
    root.add(box)
    box.add(leaf)
    leaf.set_focus()
    assert root.has_focus and box.has_focus and leaf.has_focus

    root.remove(box)

    assert not box.has_focus
    assert not leaf.has_focus
    assert root.focused is None
    assert box.superview is None
    assert box not in root.tab_indexes


def test_remove_all():
    root = View()
    root.add(View(), View(can_focus=True))
    root.remove_all()

    assert root.subviews == []
    assert root.tab_indexes == []


def test_get_root():
    root, child, grand = make_nested()

    assert grand.get_root() is root
    assert root.get_root() is root


def test_superview_reference_is_weak():
    root, child, grand = make_nested()
    del root
    gc.collect()

    assert child.superview is None


def test_tab_index_reorders():
    root = View()
    a, b, c = View(can_focus=True), View(can_focus=True), View(can_focus=True)
    root.add(a, b, c)
    c.tab_index = 0

    assert root.tab_indexes == [c, a, b]
    assert a.tab_index == 1
    assert View().tab_index == -1


def test_tab_indexes_setter_validates_membership():
    root = View()
    a = View(can_focus=True)
    root.add(a)

    with pytest.raises(ValueError):
        root.tab_indexes = [a, View()]


# -----------------------------------------------------------------------------
# Focus
# -----------------------------------------------------------------------------

def make_row(count=3):
    root = View(Rect(0, 0, 40, 5))
    views = [View(Rect(i * 5, 0, 4, 1), can_focus=True) for i in range(count)]
    root.add(*views)
    return root, views


def test_set_focus_ignored_when_not_focusable():
    root = View()
    leaf = View()
    root.add(leaf)
    leaf.set_focus()

    assert not leaf.has_focus
    assert not root.has_focus


def test_set_focused_child_rejects_non_subview():
    root, views = make_row()

    with pytest.raises(ValueError):
        root._set_focused_child(View(can_focus=True))


def test_focus_signals():
    root, (a, b, c) = make_row()
    events = []
    a.connect(SIGNAL_FOCUS_ENTER, lambda view, other: events.append(("enter", view)))
    a.connect(SIGNAL_FOCUS_LEAVE, lambda view, other: events.append(("leave", view, other)))

    a.set_focus()
    b.set_focus()

    assert events == [("enter", a), ("leave", a, b)]


def test_advance_focus_walks_tab_order_then_fails():
    root, (a, b, c) = make_row()
    root.focus_first()
    assert root.focused is a

    assert root.advance_focus(FORWARD)
    assert root.focused is b
    assert root.advance_focus(FORWARD)
    assert root.focused is c

    # Nothing left: focus is dropped from the children
    assert not root.advance_focus(FORWARD)
    assert root.focused is None
    assert not c.has_focus
    assert root.has_focus

    # Next call starts over
    assert root.advance_focus(FORWARD)
    assert root.focused is a


def test_advance_backward_enters_container_at_its_last_view():
    root = View()
    box = View()
    x, y = View(can_focus=True), View(can_focus=True)
    box.add(x, y)
    a = View(can_focus=True)
    root.add(box, a)
    a.set_focus()

    assert root.advance_focus(BACKWARD)
    assert root.most_focused is y
    assert not a.has_focus
    assert box.has_focus


def test_disabled_hidden_and_non_tab_stop_views_are_skipped():
    root, views = make_row(5)
    views[1].enabled = False
    views[2].visible = False
    views[3].tab_stop = False
    views[0].set_focus()

    assert root.advance_focus(FORWARD)
    assert root.focused is views[4]


def test_hiding_focused_view_moves_focus():
    root, (a, b, c) = make_row()
    a.set_focus()
    a.visible = False

    assert not a.has_focus
    assert root.focused is b


def test_focus_last():
    root, (a, b, c) = make_row()
    root.focus_last()

    assert root.focused is c
    assert root.has_focus


# -----------------------------------------------------------------------------
# Colors
# -----------------------------------------------------------------------------

def test_color_scheme_is_inherited():
    root, child, grand = make_nested()
    root.color_scheme = DIALOG_SCHEME

    assert grand.color_scheme is DIALOG_SCHEME
    assert grand.get_normal_color() == DIALOG_SCHEME.normal
    assert grand.get_focus_color() == DIALOG_SCHEME.focus
    assert root.border.color_scheme is DIALOG_SCHEME


def test_disabled_view_uses_disabled_color():
    v = View()
    v.enabled = False

    assert v.get_normal_color() == v.color_scheme.disabled
    assert v.get_hot_normal_color() == v.color_scheme.disabled


# -----------------------------------------------------------------------------
# Redraw tracking
# -----------------------------------------------------------------------------

def test_set_needs_display_flags_ancestors():
    root, child, grand = make_nested()
    for v in (root, child, grand):
        v.clear_needs_display()

    grand.set_needs_display(Rect(1, 1, 2, 2))

    assert grand.needs_display_region == Rect(1, 1, 2, 2)
    assert child.subview_needs_display
    assert root.subview_needs_display
    assert not root.needs_display


def test_needs_display_regions_accumulate():
    v = View(Rect(0, 0, 10, 10))
    v.clear_needs_display()
    v.set_needs_display(Rect(0, 0, 2, 2))
    v.set_needs_display(Rect(5, 5, 1, 1))

    assert v.needs_display_region == Rect(0, 0, 6, 6)

    v.clear_needs_display()
    assert not v.needs_display


# -----------------------------------------------------------------------------
# Text and sizing
# -----------------------------------------------------------------------------

def test_text_setter_always_notifies():
    v = View()
    events = []
    v.connect(SIGNAL_TEXT_CHANGED, lambda view, old, new: events.append((old, new)))
    v.text = "a"
    v.text = "a"

    assert events == [("", "a"), ("a", "a")]


def test_text_policy_sizes_frame_to_text():
    v = View(width_policy=SizePolicy.TEXT, height_policy=SizePolicy.TEXT)
    v.text = "hello world"

    assert v.frame == Rect(0, 0, 11, 1)

    v.border_style = BorderStyle.SINGLE
    assert v.frame == Rect(0, 0, 13, 3)
    assert v.bounds == Rect(0, 0, 11, 1)


def test_fixed_width_text_height():
    v = View(Rect(0, 0, 5, 0), height_policy=SizePolicy.TEXT)
    v.text = "hello world"

    assert v.frame == Rect(0, 0, 5, 2)
    assert v.text_formatter.format() == ["hello", "world"]


def test_absolute_policy_keeps_frame():
    v = View(Rect(0, 0, 4, 1))
    v.text = "hello world"

    assert v.frame == Rect(0, 0, 4, 1)
    assert v.resolve_content_size() == Size(4, 1)


def test_resolve_content_size_is_idempotent():
    v = View(width_policy=SizePolicy.TEXT, height_policy=SizePolicy.TEXT)
    v.text = "some words that wrap\nand a second paragraph"
    first = v.resolve_content_size()
    second = v.resolve_content_size()

    assert first == second
    assert v.text_formatter.size == first


def test_screen_size_bounds_measurement():
    root = View(Rect(0, 0, 20, 5))
    root.screen_size = Size(20, 5)
    child = View(width_policy=SizePolicy.TEXT, height_policy=SizePolicy.TEXT)
    root.add(child)
    child.text = "aaaa bbbb cccc dddd eeee"

    assert child.screen_size == Size(20, 5)
    assert child.frame == Rect(0, 0, 19, 2)


def test_direction_axis_flip_resizes():
    v = View(width_policy=SizePolicy.TEXT, height_policy=SizePolicy.TEXT)
    v.text = "abc"
    assert v.frame.size == Size(3, 1)

    v.text_direction = TextDirection.TOP_BOTTOM_LEFT_RIGHT
    assert v.frame.size == Size(1, 3)


def test_alignment_reaches_formatter():
    v = View(Rect(0, 0, 10, 1))
    v.text_alignment = Alignment.CENTER
    v.vertical_text_alignment = Alignment.END

    assert v.text_formatter.alignment == Alignment.CENTER
    assert v.text_formatter.vertical_alignment == Alignment.END


def test_describe_tree_marks_focus():
    root, (a, b, c) = make_row()
    a.set_focus()
    lines = root.describe_tree()

    assert len(lines) == 4
    assert lines[0].startswith("*View(")
    assert lines[1].startswith("  *View(")
    assert lines[2].startswith("   View(")
