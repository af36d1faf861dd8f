"""Generate the triangle display SVG from a DisplayReport.

Side lines are coloured by role (longest red, middle blue, shortest green),
angles get an arc and a degree label on the bisector, and the centroid is G.
"""
import datetime
from html import escape

from trigeom.types import Point
from trigeom.geometry import midpoint, to_degrees
from trigeom.svg import arc_path_d, points_attr, W, H
from display.report import DisplayReport, VertexAngle, format_length
from display.constants import (
    ROLE_COLORS, ROLE_ORDER, TYPE_LABELS, DEFAULT_UNIT, DEFAULT_LANG,
    BACKGROUND_FILL, INTERIOR_FILL, ARC_STROKE, VERTEX_FILL, CENTROID_FILL,
    LABEL_FILL, SIDE_WIDTH,
)

# ============================================================
# SVG Helpers
# ============================================================

def side_line(out, p: Point, q: Point, color: str):
    out.append(f'<line x1="{p[0]:.1f}" y1="{p[1]:.1f}" x2="{q[0]:.1f}" y2="{q[1]:.1f}"'
               f' stroke="{color}" stroke-width="{SIDE_WIDTH}" stroke-linecap="round"/>')

def side_label(out, p: Point, q: Point, text: str, color: str):
    """Length label just above the side midpoint, coloured like the side."""
    m = midpoint(p, q)
    out.append(f'<text x="{m[0]:.1f}" y="{m[1]:.1f}" dy="-6" text-anchor="middle"'
               f' font-family="Arial" font-size="14" font-weight="600" fill="{color}">{escape(text)}</text>')

def angle_mark(out, va: VertexAngle):
    """Arc (when the angle is wide enough), vertex dot, vertex letter and degree label."""
    if va.arc is not None:
        out.append(f'<path d="{arc_path_d(va.arc)}" stroke="{ARC_STROKE}" stroke-width="3" fill="none"/>')
    x, y = va.vertex
    out.append(f'<circle cx="{x:.1f}" cy="{y:.1f}" r="5" fill="{VERTEX_FILL}"/>')
    out.append(f'<text x="{x+8:.1f}" y="{y-8:.1f}" font-family="Arial" font-size="12"'
               f' fill="{LABEL_FILL}">{va.label}</text>')
    lx, ly = va.label_pos
    out.append(f'<text x="{lx:.1f}" y="{ly:.1f}" text-anchor="middle" dominant-baseline="middle"'
               f' font-family="Arial" font-size="14" fill="{LABEL_FILL}">{to_degrees(va.angle):.1f}&#176;</text>')

def centroid_mark(out, g: Point):
    out.append(f'<circle cx="{g[0]:.1f}" cy="{g[1]:.1f}" r="4" fill="{CENTROID_FILL}"/>')
    out.append(f'<text x="{g[0]+6:.1f}" y="{g[1]-6:.1f}" font-family="Arial" font-size="12"'
               f' fill="{LABEL_FILL}">G</text>')

def legend(out, x: float, y: float):
    """Role colour swatches in a row."""
    for role in ROLE_ORDER:
        out.append(f'<rect x="{x:.1f}" y="{y:.1f}" width="14" height="14" rx="4"'
                   f' fill="{ROLE_COLORS[role]}" stroke="rgba(0,0,0,0.1)"/>')
        out.append(f'<text x="{x+20:.1f}" y="{y+11:.1f}" font-family="Arial" font-size="12"'
                   f' fill="{LABEL_FILL}">{role}</text>')
        x += 90

# ============================================================
# Renderer
# ============================================================

def render_display_svg(report: DisplayReport, unit: str = DEFAULT_UNIT, lang: str = DEFAULT_LANG) -> str:
    """Full SVG document for one report, lengths shown in *unit*, type labels in *lang*."""
    A, B, C = report.fitted
    labels = TYPE_LABELS[lang]
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {W} {H}"'
           f' preserveAspectRatio="xMidYMid meet">']
    out.append(f'<rect x="0" y="0" width="{W}" height="{H}" fill="{BACKGROUND_FILL}"/>')

    # Interior fill, then sides on top
    out.append(f'<polygon points="{points_attr([A, B, C])}" fill="{INTERIOR_FILL}" stroke="none"/>')
    for (p, q), key, length in (((A, B), "AB", report.sides["c"]),
                                ((B, C), "BC", report.sides["a"]),
                                ((C, A), "CA", report.sides["b"])):
        color = ROLE_COLORS[report.roles[key]]
        side_line(out, p, q, color)
        side_label(out, p, q, format_length(length, unit), color)

    for va in report.vertices:
        angle_mark(out, va)
    centroid_mark(out, report.centroid)

    # Classification badges (top corner on the reading side) and legend (bottom-left)
    bx, anchor = (W - 12, "end") if lang == "he" else (12, "start")
    for i, kind in enumerate((report.side_kind, report.angle_kind)):
        out.append(f'<text x="{bx}" y="{20 + 16*i}" text-anchor="{anchor}" font-family="Arial"'
                   f' font-size="13" font-weight="bold" fill="{LABEL_FILL}">{escape(labels[kind])}</text>')
    legend(out, 12, H - 40)

    _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    out.append(f'<text x="{W/2}" y="{H-4}" text-anchor="middle" font-family="Arial" font-size="9"'
               f' fill="#999">Generated {_now}</text>')
    out.append('</svg>')
    return "\n".join(out)
