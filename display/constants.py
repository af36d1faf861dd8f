"""Lookup tables and drawing constants for the triangle display.

Lengths are in display-box units unless noted.
"""
from typing import NamedTuple


class UnitOption(NamedTuple):
    label: str; symbol: str
    scale: float      # display-box units -> chosen unit


# Unit symbol -> option
UNIT_OPTIONS: dict[str, UnitOption] = {
    "px": UnitOption("Pixels", "px", 1.0),
    "u": UnitOption("Units", "u", 0.02),
}
DEFAULT_UNIT = "px"

# Side role -> stroke colour
ROLE_COLORS: dict[str, str] = {
    "longest": "#ef4444",   # red
    "middle": "#3b82f6",    # blue
    "shortest": "#22c55e",  # green
}
ROLE_ORDER = ("longest", "middle", "shortest")

# Language -> classification kind -> label
TYPE_LABELS: dict[str, dict[str, str]] = {
    "en": {
        "Equilateral": "Equilateral triangle",
        "Isosceles": "Isosceles triangle",
        "Scalene": "Scalene triangle",
        "Right": "Right triangle",
        "Acute": "Acute triangle",
        "Obtuse": "Obtuse triangle",
    },
    "he": {
        "Equilateral": "משולש שווה־צלעות",
        "Isosceles": "משולש שווה־שוקיים",
        "Scalene": "משולש שונה־צלעות",
        "Right": "משולש ישר־זווית",
        "Acute": "משולש חד־זווית",
        "Obtuse": "משולש קהה־זווית",
    },
}
DEFAULT_LANG = "en"

# Angle arcs: radius follows the shortest side, clamped
ARC_RADIUS_MIN = 14.0
ARC_RADIUS_MAX = 38.0
ARC_RADIUS_FRACTION = 0.18
ANGLE_LABEL_GAP = 18.0            # label distance beyond the arc radius

# Colours
BACKGROUND_FILL = "#f8fafc"
INTERIOR_FILL = "#e8f1ff"
ARC_STROKE = "#0ea5e9"
VERTEX_FILL = "#1e3a8a"
CENTROID_FILL = "#ef4444"
LABEL_FILL = "#0f172a"

SIDE_WIDTH = 3
