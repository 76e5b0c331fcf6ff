from termview.ui.draw import CellSurface
from termview.ui.geometry import Rect
from termview.ui.style import Attribute, Color, ColorScheme, Thickness


def test_attribute_code_roundtrip():
    attr = Attribute(Color.BRIGHT_YELLOW, Color.BLUE)

    assert attr.code == 11 * 16 + 4
    assert Attribute.from_code(attr.code) == attr


def test_scheme_variants():
    scheme = ColorScheme()
    red = Attribute(Color.RED, Color.BLACK)

    assert scheme.with_normal(red).normal == red
    assert scheme.with_focus(red).focus == red
    # Original untouched
    assert scheme.normal != red


def test_thickness_totals():
    t = Thickness(1, 2, 3, 4)

    assert t.horizontal == 4
    assert t.vertical == 6
    assert Thickness().is_empty
    assert t + Thickness.all(1) == Thickness(2, 3, 4, 5)
    assert Thickness.symmetric(2, 1) == Thickness(2, 1, 2, 1)


def test_thickness_draw_fills_ring_only():
    surface = CellSurface(6, 4)
    inner = Thickness.all(1).draw(surface, Rect(0, 0, 6, 4), "#")

    assert inner == Rect(1, 1, 4, 2)
    assert surface.lines() == [
        "######",
        "#    #",
        "#    #",
        "######",
    ]
