"""Named constants for the triangle geometry core.

Coordinates are in display units (SVG user units, y pointing down).
"""
from .types import Triangle

# Fallback triangle for absent state and random-generator exhaustion
DEFAULT_POINTS = Triangle(a=(100.0, 100.0), b=(700.0, 120.0), c=(420.0, 650.0))

# Tolerances
COLLINEAR_EPS = 1e-6              # minimum area of a real triangle
LENGTH_EPS = 1e-6                 # side-length equality for classification
ARC_MIN_SWEEP = 1e-3              # radians; smaller sweeps draw no arc

# Display box
BOX_SIZE = 800
BOX_PADDING = 32

# Random triangle generator
RANDOM_WIDTH = 800
RANDOM_HEIGHT = 800
RANDOM_MARGIN = 60
RANDOM_MIN_SIDE = 80
RANDOM_MAX_TRIES = 200
