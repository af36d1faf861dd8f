"""Render a triangle display SVG and print its measurements.

Subcommands:
  show     triangle from --a/--b/--c, a display query, the stored last triangle,
           or the default triangle (first available wins per vertex)
  random   rejection-sampled random triangle
  history  list recently shown triangles
"""
import argparse
import logging
import os
import sys

import numpy as np

from trigeom.types import Point, Triangle
from trigeom.constants import DEFAULT_POINTS
from trigeom.geometry import GeometryError, build_display_query, parse_number, random_triangle_in_box, to_degrees
from display.constants import UNIT_OPTIONS, TYPE_LABELS, DEFAULT_UNIT, DEFAULT_LANG
from display.report import DisplayReport, compute_report, resolve_triangle, format_length, formula_lines
from display.gen_display_svg import render_display_svg
from display.store import TriangleStore, JsonFileStore, default_store_path
from display.logging_config import setup_logging

log = logging.getLogger("gen_triangle")

_DEFAULT_OUT = "triangle.svg"


def parse_point_arg(text: str) -> Point:
    """'x,y' -> (x, y); used as an argparse type."""
    tokens = text.split(",")
    if len(tokens) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")
    try:
        return (parse_number(tokens[0]), parse_number(tokens[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number pair: {text!r}") from None


def print_summary(tri: Triangle, report: DisplayReport, unit: str, lang: str, svg_path: str) -> None:
    labels = TYPE_LABELS[lang]
    print(f"Display written to {svg_path}")
    print(f"Query: {build_display_query(*tri)}")
    print(f"Type:  {labels[report.side_kind]}, {labels[report.angle_kind]}")
    print(f"Scale: {report.scale:.4f}")
    print()
    for name, side in (("a (BC)", "a"), ("b (CA)", "b"), ("c (AB)", "c")):
        print(f"  {name:<7s} {format_length(report.sides[side], unit):>14s}")
    for va in report.vertices:
        print(f"  angle {va.label}  {to_degrees(va.angle):8.2f}°")
    print()
    for line in formula_lines(report, unit):
        print(f"  {line}")


def _render(tri: Triangle, args, store: TriangleStore) -> int:
    """Validate, write the SVG, remember and print the summary.

    GeometryError and OSError propagate; nothing is stored unless the SVG was written.
    """
    report = compute_report(tri)
    with open(args.out, "w", encoding="utf-8") as f:
        f.write(render_display_svg(report, args.units, args.lang))
    store.save(tri)
    log.info("Wrote %s", args.out)
    print_summary(tri, report, args.units, args.lang, args.out)
    return 0


# ============================================================
# Subcommands
# ============================================================

def cmd_show(args, store: TriangleStore) -> int:
    base = store.load() or DEFAULT_POINTS
    if args.query:
        base = resolve_triangle(args.query, base)
    tri = Triangle(args.a or base.a, args.b or base.b, args.c or base.c)
    return _render(tri, args, store)


def cmd_random(args, store: TriangleStore) -> int:
    rng = np.random.default_rng(args.seed)
    tri = random_triangle_in_box(rng=rng)
    if tri == DEFAULT_POINTS:
        log.info("Random generation fell back to the default triangle")
    return _render(tri, args, store)


def cmd_history(args, store: TriangleStore) -> int:
    items = store.history()
    if not items:
        print("No recent triangles.")
        return 0
    for i, tri in enumerate(items, 1):
        (ax, ay), (bx, by), (cx, cy) = tri
        print(f"{i}. A({ax:g},{ay:g}) B({bx:g},{by:g}) C({cx:g},{cy:g})  {build_display_query(*tri)}")
    return 0


# ============================================================
# Main entry point
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gen-triangle", description="Triangle display generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--store", default=None,
                        help="store file (default $TRIGEOM_STORE or ~/.trigeom/store.json)")
    sub = parser.add_subparsers(dest="command", required=True)

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--units", choices=sorted(UNIT_OPTIONS), default=DEFAULT_UNIT)
    output.add_argument("--lang", choices=sorted(TYPE_LABELS), default=DEFAULT_LANG)
    output.add_argument("--out", default=_DEFAULT_OUT, help="SVG output path")

    show = sub.add_parser("show", parents=[output], help="render a given triangle")
    show.add_argument("--query", help="display query, e.g. '?a=0,0&b=4,0&c=0,3'")
    for key in ("a", "b", "c"):
        show.add_argument(f"--{key}", type=parse_point_arg, metavar="X,Y", help=f"vertex {key.upper()}")
    show.set_defaults(func=cmd_show)

    rnd = sub.add_parser("random", parents=[output], help="render a random triangle")
    rnd.add_argument("--seed", type=int, default=None)
    rnd.set_defaults(func=cmd_random)

    hist = sub.add_parser("history", help="list recent triangles")
    hist.set_defaults(func=cmd_history)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    store = JsonFileStore(args.store or default_store_path())
    log.debug("Using store %s", os.fspath(store.path))
    try:
        return args.func(args, store)
    except GeometryError as e:
        log.debug("Rejected input: %s", e)
        parser.error(str(e))
    except OSError as e:
        log.debug("I/O failure: %s", e)
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
