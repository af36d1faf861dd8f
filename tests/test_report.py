"""Tests for display/report.py — display report and validation."""
import math
import pytest
from trigeom.geometry import GeometryError, triangle_area, distance
from trigeom.fit import fit_to_box
from trigeom.types import Triangle
from display.report import (
    VertexAngle, DisplayReport,
    validate_triangle, resolve_triangle, side_role, arc_radius_for, heron_area,
    compute_report, format_length, formula_lines,
)


def _inside(p, tri):
    """Point strictly inside triangle (sign test on the three edges)."""
    def cross(o, a, b): return (a[0]-o[0])*(b[1]-o[1]) - (a[1]-o[1])*(b[0]-o[0])
    a, b, c = tri
    s = [cross(a, b, p), cross(b, c, p), cross(c, a, p)]
    return all(v > 0 for v in s) or all(v < 0 for v in s)


class TestValidateTriangle:
    def test_accepts_default(self, default_tri):
        validate_triangle(default_tri)

    def test_rejects_non_finite(self):
        with pytest.raises(GeometryError, match="valid numbers"):
            validate_triangle(Triangle((0, 0), (math.nan, 1), (3, 3)))

    def test_rejects_collinear(self):
        with pytest.raises(GeometryError, match="straight line"):
            validate_triangle(Triangle((0, 0), (1, 1), (2, 2)))

    def test_non_finite_checked_first(self):
        with pytest.raises(GeometryError, match="valid numbers"):
            validate_triangle(Triangle((0, 0), (0, 0), (math.inf, 0)))


class TestResolveTriangle:
    def test_full_query(self, default_tri):
        tri = resolve_triangle("?a=0,0&b=4,0&c=0,3", default_tri)
        assert tri == Triangle((0.0, 0.0), (4.0, 0.0), (0.0, 3.0))

    def test_missing_keys_use_fallback(self, default_tri):
        tri = resolve_triangle("?b=1,2&c=oops", default_tri)
        assert tri.a == default_tri.a
        assert tri.b == (1.0, 2.0)
        assert tri.c == default_tri.c

    def test_empty_query(self, default_tri):
        assert resolve_triangle("", default_tri) == default_tri


class TestHelpers:
    @pytest.mark.parametrize("length, expected", [
        (10.0, "longest"), (3.0, "shortest"), (5.0, "middle"),
    ])
    def test_side_role(self, length, expected):
        assert side_role(length, 10.0, 3.0) == expected

    def test_side_role_all_equal_is_longest(self):
        assert side_role(4.0, 4.0, 4.0) == "longest"

    @pytest.mark.parametrize("shortest, expected", [
        (10, 14.0), (100, 18.0), (1000, 38.0),
    ])
    def test_arc_radius_for(self, shortest, expected):
        assert arc_radius_for(shortest) == pytest.approx(expected)

    def test_heron_area(self):
        assert heron_area(3, 4, 5) == pytest.approx(6.0)
        assert heron_area(1, 2, 3) == 0.0

    def test_format_length(self):
        assert format_length(100, "px") == "100.00 px"
        assert format_length(100, "u") == "2.00 u"

    def test_format_length_unknown_unit(self):
        with pytest.raises(KeyError):
            format_length(1, "mm")


class TestComputeReport:
    def test_returns_named_tuple(self, default_report):
        assert isinstance(default_report, DisplayReport)
        assert all(isinstance(v, VertexAngle) for v in default_report.vertices)
        assert [v.label for v in default_report.vertices] == ["A", "B", "C"]

    def test_fitted_matches_box_fit(self, default_tri, default_report):
        res = fit_to_box(list(default_tri))
        assert list(default_report.fitted) == res.mapped
        assert default_report.scale == res.scale

    def test_sides(self, default_report):
        A, B, C = default_report.fitted
        assert default_report.sides["a"] == pytest.approx(distance(B, C))
        assert default_report.sides["b"] == pytest.approx(distance(C, A))
        assert default_report.sides["c"] == pytest.approx(distance(A, B))

    def test_roles(self, default_report):
        # CA (b) is longest, AB (c) middle, BC (a) shortest
        assert default_report.roles == {"AB": "middle", "BC": "shortest", "CA": "longest"}

    def test_perimeter_and_area(self, default_report):
        s = default_report.sides
        assert default_report.perimeter == pytest.approx(s["a"] + s["b"] + s["c"])
        assert default_report.semi_perimeter == pytest.approx(default_report.perimeter / 2)
        assert default_report.area == pytest.approx(triangle_area(*default_report.fitted), rel=1e-9)

    def test_angles_sum_to_pi(self, default_report):
        assert sum(v.angle for v in default_report.vertices) == pytest.approx(math.pi)

    def test_arcs_present_and_on_radius(self, default_report):
        r = default_report.arc_radius
        assert r == pytest.approx(38.0)
        for v in default_report.vertices:
            assert v.arc is not None
            assert distance(v.vertex, v.arc.start) == pytest.approx(r)

    def test_angle_labels_inside(self, default_report):
        for v in default_report.vertices:
            assert _inside(v.label_pos, default_report.fitted)
            assert distance(v.vertex, v.label_pos) == pytest.approx(default_report.arc_radius + 18)

    def test_centroid_inside(self, default_report):
        assert _inside(default_report.centroid, default_report.fitted)

    def test_classification(self, default_report, right_report):
        assert default_report.side_kind == "Scalene"
        assert default_report.angle_kind == "Acute"
        assert right_report.angle_kind == "Right"
        assert right_report.vertices[0].angle == pytest.approx(math.pi / 2)

    def test_isosceles_obtuse(self):
        rep = compute_report(Triangle((0, 0), (10, 0), (5, 1)))
        assert rep.side_kind == "Isosceles"
        assert rep.angle_kind == "Obtuse"

    def test_rejects_collinear(self):
        with pytest.raises(GeometryError):
            compute_report(Triangle((0, 5), (3, 5), (9, 5)))


class TestFormulaLines:
    def test_three_formulas(self, default_report):
        lines = formula_lines(default_report, "px")
        assert len(lines) == 3
        assert lines[0].startswith("p = a + b + c = ")
        assert "\\sqrt{s(s-a)(s-b)(s-c)}" in lines[1]
        assert lines[2].startswith("G\\;=")

    def test_units_scale_values(self, right_report):
        # right_report sides are 552, 736, 920 display units
        px = formula_lines(right_report, "px")[0]
        u = formula_lines(right_report, "u")[0]
        assert px.endswith("= 2208.00\\,px")
        assert u.endswith("= 44.16\\,u")

    def test_area_scales_squared(self, right_report):
        # area 552 * 736 / 2 = 203136 px^2 -> 81.25 u^2
        assert "= 81.25\\,u^{2}" in formula_lines(right_report, "u")[1]
