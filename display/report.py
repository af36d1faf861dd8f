"""Display report: fitted triangle plus every measurement the display shows."""
import math
from typing import NamedTuple

from trigeom.types import Point, Triangle, ArcSpec, SideKind, AngleKind
from trigeom.constants import BOX_SIZE, BOX_PADDING, LENGTH_EPS
from trigeom.geometry import (
    GeometryError,
    angle_at_vertex, angle_arc_path_at, angle_bisector_point,
    centroid_of, distance, is_finite_point, is_non_collinear,
    side_type, angle_type, parse_display_query,
)
from trigeom.fit import fit_triangle
from display.constants import (
    UNIT_OPTIONS, ARC_RADIUS_MIN, ARC_RADIUS_MAX, ARC_RADIUS_FRACTION, ANGLE_LABEL_GAP,
)


class VertexAngle(NamedTuple):
    """Interior angle at one vertex with its arc and label position."""
    label: str
    vertex: Point
    angle: float             # radians
    arc: ArcSpec | None
    label_pos: Point


class DisplayReport(NamedTuple):
    """Everything derived from one input triangle, in display-box units."""
    fitted: Triangle
    scale: float
    sides: dict[str, float]      # a = BC, b = CA, c = AB
    roles: dict[str, str]        # AB/BC/CA -> longest/middle/shortest
    perimeter: float
    semi_perimeter: float
    area: float                  # Heron
    centroid: Point
    vertices: list[VertexAngle]
    side_kind: SideKind
    angle_kind: AngleKind
    arc_radius: float


# ============================================================
# Validation & input resolution
# ============================================================
def validate_triangle(tri: Triangle) -> None:
    """Raise GeometryError unless tri has finite, non-collinear vertices."""
    if not all(is_finite_point(p) for p in tri):
        raise GeometryError("All coordinates must be valid numbers.")
    if not is_non_collinear(*tri):
        raise GeometryError("The three points lie on a straight line.")


def resolve_triangle(query: str, fallback: Triangle) -> Triangle:
    """Triangle from a display query, taking each missing vertex from *fallback*."""
    parsed = parse_display_query(query)
    return Triangle(*(p if p is not None else f for p, f in zip(parsed, fallback)))


# ============================================================
# Measurements
# ============================================================
def side_role(length: float, longest: float, shortest: float, eps: float = LENGTH_EPS) -> str:
    if abs(length - longest) < eps:
        return "longest"
    if abs(length - shortest) < eps:
        return "shortest"
    return "middle"


def arc_radius_for(shortest: float) -> float:
    return max(ARC_RADIUS_MIN, min(ARC_RADIUS_MAX, shortest * ARC_RADIUS_FRACTION))


def heron_area(a: float, b: float, c: float) -> float:
    s = (a + b + c) / 2
    return math.sqrt(max(0.0, s * (s-a) * (s-b) * (s-c)))


def compute_report(tri: Triangle, size: float = BOX_SIZE, padding: float = BOX_PADDING) -> DisplayReport:
    """Validate tri, fit it into the display box, and measure the fitted copy."""
    validate_triangle(tri)
    fitted, scale = fit_triangle(tri, size, padding)
    A, B, C = fitted

    sides = {"a": distance(B, C), "b": distance(C, A), "c": distance(A, B)}
    longest = max(sides.values()); shortest = min(sides.values())
    roles = {
        "AB": side_role(sides["c"], longest, shortest),
        "BC": side_role(sides["a"], longest, shortest),
        "CA": side_role(sides["b"], longest, shortest),
    }

    arc_r = arc_radius_for(shortest)
    vertices = []
    for label, v, n1, n2 in (("A", A, B, C), ("B", B, C, A), ("C", C, A, B)):
        vertices.append(VertexAngle(
            label=label, vertex=v,
            angle=angle_at_vertex(v, n1, n2),
            arc=angle_arc_path_at(v, n1, n2, arc_r),
            label_pos=angle_bisector_point(v, n1, n2, arc_r + ANGLE_LABEL_GAP),
        ))

    perimeter = sides["a"] + sides["b"] + sides["c"]
    return DisplayReport(
        fitted=fitted, scale=scale, sides=sides, roles=roles,
        perimeter=perimeter, semi_perimeter=perimeter / 2,
        area=heron_area(sides["a"], sides["b"], sides["c"]),
        centroid=centroid_of(A, B, C), vertices=vertices,
        side_kind=side_type(sides["a"], sides["b"], sides["c"]),
        angle_kind=angle_type(sides["a"], sides["b"], sides["c"]),
        arc_radius=arc_r,
    )


# ============================================================
# Formatting
# ============================================================
def format_length(value: float, unit: str) -> str:
    """Length in the chosen unit with 2 decimals, e.g. '12.00 u'."""
    opt = UNIT_OPTIONS[unit]
    return f"{value * opt.scale:.2f} {opt.symbol}"


def formula_lines(report: DisplayReport, unit: str) -> list[str]:
    """Perimeter, Heron area and centroid formulas as LaTeX strings."""
    opt = UNIT_OPTIONS[unit]
    def f(v): return f"{v * opt.scale:.2f}"
    a, b, c = report.sides["a"], report.sides["b"], report.sides["c"]
    s = report.semi_perimeter
    gx, gy = report.centroid
    return [
        f"p = a + b + c = {f(a)} + {f(b)} + {f(c)}\\,{opt.symbol} = {f(report.perimeter)}\\,{opt.symbol}",
        f"s = \\frac{{a+b+c}}{{2}} = {f(s)},\\quad A = \\sqrt{{s(s-a)(s-b)(s-c)}} = {report.area * opt.scale**2:.2f}\\,{opt.symbol}^{{2}}",
        f"G\\;=\\;\\left(\\frac{{x_A + x_B + x_C}}{{3}},\\;\\frac{{y_A + y_B + y_C}}{{3}}\\right)\\;=\\;({gx:.2f},\\;{gy:.2f})",
    ]
