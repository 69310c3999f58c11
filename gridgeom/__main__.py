import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from gridgeom import (
    GeometryError,
    LinePoint,
    PlotNode,
    WindowOrientation,
    determine_center,
    ellipse_points,
    point_in_triangle,
    rasterize,
    build_plot_list,
    triangle_area,
    triangle_centroid,
)

logger = logging.getLogger(__name__)

_ORIENTATIONS = {
    "up-left": WindowOrientation.UP_LEFT,
    "up-right": WindowOrientation.UP_RIGHT,
    "lower-left": WindowOrientation.LOWER_LEFT,
    "lower-right": WindowOrientation.LOWER_RIGHT,
}


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _nodes_as_json(nodes: List[PlotNode]) -> str:
    return json.dumps(
        [{"x": node.x, "y": node.y, "glyph": node.glyph, "state": node.state} for node in nodes]
    )


def _run_ellipse(args: argparse.Namespace) -> int:
    orientation = _ORIENTATIONS[args.orientation]
    center_x, center_y = determine_center(args.width, args.height, orientation)
    logger.info("Window %dx%d centered at (%d, %d)", args.width, args.height, center_x, center_y)

    points = rasterize(args.a, args.b)
    logger.info("Rasterized %d coordinate pair(s)", len(points) // 2)

    if args.relative:
        for point in ellipse_points(points):
            print(f"({point.x:.6f}, {point.y:.6f})")
        return 0

    nodes = build_plot_list(points, len(points), center_x, center_y)
    if args.json:
        print(_nodes_as_json(nodes))
    else:
        for node in nodes:
            print(f"{node.glyph} ({node.x}, {node.y})")
    return 0


def _run_triangle(args: argparse.Namespace) -> int:
    ax, ay, bx, by, cx, cy = args.coords
    a, b, c = LinePoint(ax, ay), LinePoint(bx, by), LinePoint(cx, cy)

    area = triangle_area(a, b, c)
    if area is None:
        print("Area: undefined (degenerate triangle)")
        return 1
    centroid = triangle_centroid(a, b, c)
    print(f"Area: {area:.6f}")
    print(f"Centroid: ({centroid.x}, {centroid.y})")

    if args.point:
        px, py = args.point
        inside = point_in_triangle(a, b, c, (px, py), args.precision)
        print(f"Point ({px}, {py}) inside: {inside}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Precision-aware grid geometry")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ellipse_parser = subparsers.add_parser("ellipse", help="Rasterize an ellipse into plot nodes")
    ellipse_parser.add_argument("a", type=float, help="Semi-axis along x")
    ellipse_parser.add_argument("b", type=float, help="Semi-axis along y")
    ellipse_parser.add_argument("--width", type=int, default=80, help="Window width (default: 80)")
    ellipse_parser.add_argument("--height", type=int, default=24, help="Window height (default: 24)")
    ellipse_parser.add_argument(
        "--orientation",
        choices=sorted(_ORIENTATIONS),
        default="up-left",
        help="Center to favour when a dimension is even (default: up-left)",
    )
    ellipse_parser.add_argument(
        "--relative",
        action="store_true",
        help="Print the center-relative coordinates instead of plot nodes",
    )
    ellipse_parser.add_argument("--json", action="store_true", help="Emit plot nodes as JSON")

    triangle_parser = subparsers.add_parser("triangle", help="Area and centroid of a triangle")
    triangle_parser.add_argument(
        "coords", type=int, nargs=6, metavar="N", help="AX AY BX BY CX CY"
    )
    triangle_parser.add_argument(
        "--point", type=int, nargs=2, metavar=("X", "Y"), help="Test whether a point lies inside"
    )
    triangle_parser.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Decimal places used by the inside test (default: 6)",
    )

    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        if args.command == "ellipse":
            return _run_ellipse(args)
        return _run_triangle(args)
    except GeometryError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 2


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
