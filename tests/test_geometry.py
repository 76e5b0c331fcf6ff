from termview.ui.geometry import Point, Rect, Size
from termview.ui.style import Thickness


def test_rect_edges():
    r = Rect(2, 3, 10, 5)

    assert r.right == 12
    assert r.bottom == 8
    assert r.location == Point(2, 3)
    assert r.size == Size(10, 5)


def test_contains_is_half_open():
    r = Rect(0, 0, 4, 2)

    assert r.contains(0, 0)
    assert r.contains(3, 1)
    assert not r.contains(4, 1)
    assert not r.contains(0, 2)
    assert r.contains_point(Point(1, 1))


def test_intersect():
    a = Rect(0, 0, 10, 10)

    assert a.intersect(Rect(5, 5, 10, 10)) == Rect(5, 5, 5, 5)
    # Touching edges do not overlap
    assert a.intersect(Rect(10, 0, 5, 5)) is None


def test_union_ignores_empty():
    a = Rect(1, 1, 2, 2)

    assert a.union(Rect()) == a
    assert Rect().union(a) == a
    assert a.union(Rect(5, 5, 1, 1)) == Rect(1, 1, 5, 5)


def test_inset_clamps_at_zero():
    assert Rect(0, 0, 10, 5).inset_by(Thickness.all(1)) == Rect(1, 1, 8, 3)
    assert Rect(0, 0, 2, 2).inset_by(Thickness.all(3)) == Rect(3, 3, 0, 0)


def test_offset_and_with_size():
    r = Rect(1, 2, 3, 4)

    assert r.offset(2, -1) == Rect(3, 1, 3, 4)
    assert r.with_size(Size(5, 5)) == Rect(1, 2, 5, 5)
    assert r.with_location(Point(0, 0)) == Rect(0, 0, 3, 4)


def test_cells_row_major():
    assert list(Rect(0, 0, 2, 2).cells()) == [
        Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1),
    ]
