"""Shared type definitions for the triangle geometry core."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

class Triangle(NamedTuple):
    a: Point; b: Point; c: Point

class PartialTriangle(NamedTuple):
    a: Point | None; b: Point | None; c: Point | None

class ArcSpec(NamedTuple):
    start: Point; end: Point
    radius: float

class FitResult(NamedTuple):
    mapped: list[Point]
    scale: float

SideKind = Literal["Equilateral", "Isosceles", "Scalene"]
AngleKind = Literal["Right", "Acute", "Obtuse"]
