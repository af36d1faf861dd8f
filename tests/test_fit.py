"""Tests for trigeom/fit.py box fitting."""
import numpy as np
import pytest
from trigeom.fit import make_box_transform, fit_to_box, fit_triangle
from trigeom.geometry import GeometryError, distance
from trigeom.types import Triangle, FitResult


class TestFitToBox:
    def test_default_triangle(self, default_tri):
        res = fit_to_box(list(default_tri))
        assert isinstance(res, FitResult)
        # bounding box 600 x 550 -> width limits the scale
        assert abs(res.scale - 736 / 600) < 1e-12
        assert res.mapped[0] == pytest.approx((32.0, 32.0))
        assert res.mapped[1][0] == pytest.approx(768.0)

    def test_preserves_proportions(self, default_tri):
        res = fit_to_box(list(default_tri), size=500, padding=10)
        a, b, c = default_tri
        A, B, C = res.mapped
        assert distance(A, B) / distance(B, C) == pytest.approx(distance(a, b) / distance(b, c))
        assert distance(A, B) == pytest.approx(distance(a, b) * res.scale)

    def test_height_limited(self):
        res = fit_to_box([(0, 0), (10, 40)], size=100, padding=0)
        assert res.scale == pytest.approx(2.5)
        assert res.mapped[1] == pytest.approx((25.0, 100.0))

    @pytest.mark.parametrize("seed", range(8))
    def test_output_inside_padded_box(self, seed):
        rng = np.random.default_rng(seed)
        pts = [(float(x), float(y)) for x, y in rng.uniform(-1e4, 1e4, size=(6, 2))]
        res = fit_to_box(pts, size=800, padding=32)
        for x, y in res.mapped:
            assert 32 - 1e-9 <= x <= 768 + 1e-9
            assert 32 - 1e-9 <= y <= 768 + 1e-9

    def test_zero_width_floored_to_one(self):
        res = fit_to_box([(5, 0), (5, 10), (5, 20)])
        assert res.scale == pytest.approx(36.8)   # min(736/1, 736/20)
        assert all(x == 32 for x, _ in res.mapped)
        assert res.mapped[2][1] == pytest.approx(768.0)

    def test_single_point(self):
        res = fit_to_box([(3, 4)], size=100, padding=10)
        assert res.scale == 80
        assert res.mapped == [(10, 10)]

    def test_empty_raises(self):
        with pytest.raises(GeometryError, match="empty"):
            fit_to_box([])

    def test_does_not_mutate_input(self):
        pts = [(0.0, 0.0), (2.0, 1.0)]
        fit_to_box(pts)
        assert pts == [(0.0, 0.0), (2.0, 1.0)]


def test_make_box_transform_closure():
    to_box, scale = make_box_transform([(10, 10), (20, 30)], size=120, padding=10)
    assert scale == 5
    assert to_box(10, 10) == (10, 10)
    assert to_box(15, 20) == (35, 60)


def test_fit_triangle(right_tri):
    fitted, scale = fit_triangle(right_tri)
    assert isinstance(fitted, Triangle)
    assert scale == pytest.approx(736 / 400)
    assert fitted.a == pytest.approx((32.0, 32.0))
