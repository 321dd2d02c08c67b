from tombs.geometry import Rect


def test_from_size_and_center():
    r = Rect.from_size(2, 3, 6, 8)
    assert (r.x1, r.y1, r.x2, r.y2) == (2, 3, 8, 11)
    assert r.center == (5, 7)


def test_interior_excludes_walls():
    r = Rect.from_size(0, 0, 4, 3)
    cells = set(r.interior())
    assert cells == {(1, 1), (2, 1), (3, 1), (1, 2), (2, 2), (3, 2)}
    assert r.interior_area == len(cells)
    assert r.contains_interior(1, 1)
    assert not r.contains_interior(0, 1)


def test_intersection_is_inclusive():
    a = Rect.from_size(0, 0, 5, 5)
    touching = Rect.from_size(5, 0, 5, 5)  # shares the x=5 wall
    apart = Rect.from_size(6, 0, 5, 5)
    assert a.intersects(touching) and touching.intersects(a)
    assert not a.intersects(apart)
    assert not apart.intersects(a)


def test_intersection_needs_both_axes():
    a = Rect.from_size(0, 0, 5, 5)
    same_columns_other_rows = Rect.from_size(0, 10, 5, 5)
    assert not a.intersects(same_columns_other_rows)
