"""Triangle geometry core: types, pure geometry, box fitting, and SVG formatting."""

from .types import Point, Triangle, PartialTriangle, ArcSpec, FitResult, SideKind, AngleKind
from .constants import DEFAULT_POINTS
from .geometry import (
    GeometryError,
    to_degrees, rad_to_deg,
    angle_at_vertex, angle_at, angle_arc_path_at, angle_bisector_point,
    triangle_area, is_non_collinear, centroid_of, centroid, distance, midpoint,
    is_finite_point, side_type, angle_type,
    random_triangle_in_box, build_display_query, parse_display_query, parse_number,
)
from .fit import make_box_transform, fit_to_box, fit_triangle
from .svg import arc_path_d, points_attr, W, H
