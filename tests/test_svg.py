"""Tests for trigeom/svg.py formatting helpers."""
from trigeom.svg import arc_path_d, points_attr, W, H
from trigeom.types import ArcSpec
from trigeom.geometry import angle_arc_path_at


def test_page_is_square():
    assert W == H == 800


def test_arc_path_d():
    d = arc_path_d(ArcSpec((10, 0), (0, 10), 10))
    assert d == "M 10.00 0.00 A 10.00 10.00 0 0 1 0.00 10.00"


def test_arc_path_d_from_geometry():
    arc = angle_arc_path_at((100, 100), (200, 100), (100, 200), 20)
    assert arc_path_d(arc).startswith("M 120.00 100.00 A 20.00 20.00 0 0 1 ")


def test_points_attr():
    assert points_attr([(0, 0), (1.25, 2), (3, 4.04)]) == "0.0,0.0 1.2,2.0 3.0,4.0"
