"""SVG page constants and formatting of core geometry for the display box."""
from .types import Point, ArcSpec
from .constants import BOX_SIZE

# Square logical canvas; renderers scale it with viewBox
W, H = BOX_SIZE, BOX_SIZE


def arc_path_d(arc: ArcSpec) -> str:
    """SVG path data for a positive-sweep circular arc, e.g. 'M x0 y0 A r r 0 0 1 x1 y1'."""
    (x0, y0), (x1, y1), r = arc.start, arc.end, arc.radius
    return f"M {x0:.2f} {y0:.2f} A {r:.2f} {r:.2f} 0 0 1 {x1:.2f} {y1:.2f}"


def points_attr(points: list[Point]) -> str:
    """Value for a polygon/polyline 'points' attribute."""
    return " ".join(f"{x:.1f},{y:.1f}" for x, y in points)
