"""Triangle display: measurement report, SVG rendering, and triangle store."""

from .report import (
    VertexAngle, DisplayReport,
    validate_triangle, resolve_triangle, side_role, arc_radius_for, heron_area,
    compute_report, format_length, formula_lines,
)
from .gen_display_svg import render_display_svg
from .store import (
    HISTORY_LIMIT, TriangleStore, MemoryStore, JsonFileStore,
    push_history, default_store_path,
)
from .logging_config import setup_logging
