"""Uniform scale-and-translate of arbitrary points into a padded square box."""
from typing import Callable, Sequence

from .types import Point, Triangle, FitResult
from .constants import BOX_SIZE, BOX_PADDING
from .geometry import GeometryError


def make_box_transform(
    points: Sequence[Point], size: float = BOX_SIZE, padding: float = BOX_PADDING,
) -> tuple[Callable[[float, float], Point], float]:
    """Create to_box closure mapping the points' bounding box into the square.

    Zero-extent axes are floored to 1 before dividing.
    """
    if not points:
        raise GeometryError("Cannot fit an empty point set")
    xs = [p[0] for p in points]; ys = [p[1] for p in points]
    min_x, min_y = min(xs), min(ys)
    width = max(1, max(xs) - min_x)
    height = max(1, max(ys) - min_y)
    scale = min((size - 2*padding) / width, (size - 2*padding) / height)
    def to_box(x: float, y: float) -> Point:
        return ((x - min_x)*scale + padding, (y - min_y)*scale + padding)
    return to_box, scale


def fit_to_box(points: Sequence[Point], size: float = BOX_SIZE, padding: float = BOX_PADDING) -> FitResult:
    """Fit points into a size x size square with *padding* on every side, keeping proportions."""
    to_box, scale = make_box_transform(points, size, padding)
    return FitResult(mapped=[to_box(*p) for p in points], scale=scale)


def fit_triangle(tri: Triangle, size: float = BOX_SIZE, padding: float = BOX_PADDING) -> tuple[Triangle, float]:
    fitted = fit_to_box(list(tri), size, padding)
    return Triangle(*fitted.mapped), fitted.scale
