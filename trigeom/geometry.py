"""Pure triangle geometry: angles, arcs, area, classification, query encoding."""
import logging
import math
from urllib.parse import parse_qs

import numpy as np

from .types import Point, Triangle, PartialTriangle, ArcSpec, SideKind, AngleKind
from .constants import (
    DEFAULT_POINTS, COLLINEAR_EPS, LENGTH_EPS, ARC_MIN_SWEEP,
    RANDOM_WIDTH, RANDOM_HEIGHT, RANDOM_MARGIN, RANDOM_MIN_SIDE, RANDOM_MAX_TRIES,
)

log = logging.getLogger(__name__)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Vector Helpers
# ============================================================
def _vector_between(p: Point, q: Point) -> Point:
    return (q[0]-p[0], q[1]-p[1])

def _vector_length(v: Point) -> float:
    return math.hypot(v[0], v[1])

def _dot(u: Point, v: Point) -> float:
    return u[0]*v[0] + u[1]*v[1]

def _normalized(v: Point) -> Point:
    """Unit vector along v; a zero vector is returned unchanged."""
    Ln = _vector_length(v) or 1.0
    return (v[0]/Ln, v[1]/Ln)

def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi

rad_to_deg = to_degrees

# ============================================================
# Angles
# ============================================================
def angle_at_vertex(vertex: Point, n1: Point, n2: Point) -> float:
    """Interior angle (radians, 0..pi) between vertex->n1 and vertex->n2.

    The cosine is clamped to [-1, 1] so rounding cannot push acos out of domain.
    Undefined when either neighbour coincides with the vertex.
    """
    u = _vector_between(vertex, n1); v = _vector_between(vertex, n2)
    cos_t = _dot(u, v) / (_vector_length(u) * _vector_length(v))
    return math.acos(max(-1.0, min(1.0, cos_t)))

angle_at = angle_at_vertex

def angle_arc_path_at(vertex: Point, n1: Point, n2: Point, radius: float) -> ArcSpec | None:
    """Arc of the given radius around vertex spanning the angle n1-vertex-n2.

    Start and end are ordered so the sweep is positive (clockwise on screen,
    where y points down). Returns None when the sweep is below ARC_MIN_SWEEP.
    """
    u = _vector_between(vertex, n1); v = _vector_between(vertex, n2)
    start = math.atan2(u[1], u[0]); end = math.atan2(v[1], v[0])
    sweep = end - start
    while sweep <= -math.pi: sweep += 2*math.pi
    while sweep > math.pi: sweep -= 2*math.pi
    if sweep < 0:
        start, end = end, start
        sweep = -sweep
    if sweep < ARC_MIN_SWEEP:
        return None
    return ArcSpec(
        start=(vertex[0]+radius*math.cos(start), vertex[1]+radius*math.sin(start)),
        end=(vertex[0]+radius*math.cos(end), vertex[1]+radius*math.sin(end)),
        radius=radius,
    )

def angle_bisector_point(vertex: Point, n1: Point, n2: Point, distance: float) -> Point:
    """Point at *distance* from vertex along the internal angle bisector.

    Anti-parallel neighbours (a straight angle) have no bisector direction;
    the zero sum is left unnormalised and the vertex itself comes back.
    """
    d1 = _normalized(_vector_between(vertex, n1))
    d2 = _normalized(_vector_between(vertex, n2))
    b = _normalized((d1[0]+d2[0], d1[1]+d2[1]))
    return (vertex[0]+b[0]*distance, vertex[1]+b[1]*distance)

# ============================================================
# Measurements
# ============================================================
def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Triangle area via the shoelace formula. Works for either winding order."""
    twice = a[0]*(b[1]-c[1]) + b[0]*(c[1]-a[1]) + c[0]*(a[1]-b[1])
    return abs(twice)/2

def is_non_collinear(a: Point, b: Point, c: Point, epsilon: float = COLLINEAR_EPS) -> bool:
    return triangle_area(a, b, c) > epsilon

def centroid_of(a: Point, b: Point, c: Point) -> Point:
    return ((a[0]+b[0]+c[0])/3, (a[1]+b[1]+c[1])/3)

centroid = centroid_of

def distance(p: Point, q: Point) -> float:
    return math.hypot(q[0]-p[0], q[1]-p[1])

def midpoint(p: Point, q: Point) -> Point:
    return ((p[0]+q[0])/2, (p[1]+q[1])/2)

def is_finite_point(p: Point) -> bool:
    """True when both coordinates are finite numbers (no NaN, no infinity)."""
    return math.isfinite(p[0]) and math.isfinite(p[1])

# ============================================================
# Classification
# ============================================================
def side_type(len_a: float, len_b: float, len_c: float, eps: float = LENGTH_EPS) -> SideKind:
    def eq(x, y): return abs(x-y) < eps
    if eq(len_a, len_b) and eq(len_b, len_c):
        return "Equilateral"
    if eq(len_a, len_b) or eq(len_b, len_c) or eq(len_c, len_a):
        return "Isosceles"
    return "Scalene"

def angle_type(len_a: float, len_b: float, len_c: float, eps: float = LENGTH_EPS) -> AngleKind:
    """Classify by angles from side lengths (Pythagorean comparison on the longest side).

    Assumes the lengths satisfy the triangle inequality.
    """
    s1, s2, L = sorted((len_a, len_b, len_c))
    lhs = L*L; rhs = s1*s1 + s2*s2
    if abs(lhs-rhs) < eps:
        return "Right"
    return "Acute" if lhs < rhs else "Obtuse"

# ============================================================
# Random Triangles
# ============================================================
def random_triangle_in_box(
    width: float = RANDOM_WIDTH, height: float = RANDOM_HEIGHT,
    margin: float = RANDOM_MARGIN, min_side: float = RANDOM_MIN_SIDE,
    max_tries: int = RANDOM_MAX_TRIES, rng: np.random.Generator | None = None,
) -> Triangle:
    """Rejection-sample a triangle inside [margin, width-margin] x [margin, height-margin].

    A draw is accepted when every side exceeds *min_side* and the points are
    not collinear. After *max_tries* rejected draws DEFAULT_POINTS is returned.
    """
    if rng is None:
        rng = np.random.default_rng()
    for _ in range(max_tries):
        xs = rng.uniform(margin, width-margin, size=3)
        ys = rng.uniform(margin, height-margin, size=3)
        a, b, c = ((float(x), float(y)) for x, y in zip(xs, ys))
        ok_sides = distance(a, b) > min_side and distance(b, c) > min_side and distance(c, a) > min_side
        if ok_sides and is_non_collinear(a, b, c):
            return Triangle(a, b, c)
    log.debug("No acceptable triangle after %d tries; using default", max_tries)
    return DEFAULT_POINTS

# ============================================================
# Query-String Encoding
# ============================================================
def _fmt_coord(v: float) -> str:
    """Shortest round-trip text for a coordinate; integral values drop the '.0'.

    Exponents are written without '+', which form decoding would turn into a space.
    """
    if float(v).is_integer() and abs(v) < 1e16:
        return str(int(v))
    return repr(float(v)).replace("e+", "e")

def parse_number(token: str) -> float:
    """float(token), except digit-group underscores ('1_000') are rejected."""
    if "_" in token:
        raise ValueError(f"could not convert string to float: {token!r}")
    return float(token)

def build_display_query(a: Point, b: Point, c: Point) -> str:
    """Serialize three points as '?a=x,y&b=x,y&c=x,y'."""
    def enc(p): return f"{_fmt_coord(p[0])},{_fmt_coord(p[1])}"
    return f"?a={enc(a)}&b={enc(b)}&c={enc(c)}"

def parse_display_query(text: str) -> PartialTriangle:
    """Inverse of build_display_query. Missing or malformed keys come back as None."""
    qs = parse_qs(text[1:] if text.startswith("?") else text, keep_blank_values=True)

    def parse_point(key: str) -> Point | None:
        raw = qs.get(key, [""])[0]
        tokens = raw.split(",")
        if len(tokens) != 2:
            return None
        try:
            p = (parse_number(tokens[0]), parse_number(tokens[1]))
        except ValueError:
            return None
        return p if is_finite_point(p) else None

    return PartialTriangle(a=parse_point("a"), b=parse_point("b"), c=parse_point("c"))
