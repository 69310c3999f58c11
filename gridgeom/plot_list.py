"""Translate rasterized points into absolute window plot nodes.

Window coordinates put ``(0, 0)`` in the upper left corner, so moving
"up" in Cartesian space means moving to a smaller row index.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .config import get_geometry_config
from .diagnostics import report
from .ellipse import rasterize
from .errors import GeometryError, InvalidArgumentError
from .logging_utils import apply_debug_logging
from .rounding import round_double
from .types import PlotNode, WindowOrientation

logger = logging.getLogger(__name__)

_COMPONENT = "plot_list"

MIN_WINDOW_DIMENSION = 3


def determine_center(
    width: int, height: int, orientation: object = WindowOrientation.UP_LEFT
) -> Tuple[int, int]:
    """Return the ``(x, y)`` center cell of a ``width`` by ``height`` window.

    Even dimensions have no exact middle; ``orientation`` picks the
    neighbouring cell.  Unknown orientations fall back to ``UP_LEFT``.
    """

    if width < MIN_WINDOW_DIMENSION:
        report(_COMPONENT, "determine_center", f"invalid width {width!r}")
        raise InvalidArgumentError(f"width must be at least {MIN_WINDOW_DIMENSION}")
    if height < MIN_WINDOW_DIMENSION:
        report(_COMPONENT, "determine_center", f"invalid height {height!r}")
        raise InvalidArgumentError(f"height must be at least {MIN_WINDOW_DIMENSION}")

    if not isinstance(orientation, WindowOrientation):
        orientation = WindowOrientation.UP_LEFT

    real_width = width
    if not width & 1:
        if orientation in (WindowOrientation.UP_RIGHT, WindowOrientation.LOWER_RIGHT):
            real_width = width + 1
        else:
            real_width = width - 1

    real_height = height
    if not height & 1:
        if orientation in (WindowOrientation.LOWER_LEFT, WindowOrientation.LOWER_RIGHT):
            real_height = height + 1
        else:
            real_height = height - 1

    return (real_width - 1) // 2 + 1, (real_height - 1) // 2 + 1


def translate_plot_point(
    rel_x: int, rel_y: int, center_x: int, center_y: int
) -> Tuple[int, int]:
    """Convert a center-relative point into absolute window coordinates."""

    if center_x < 1 or center_y < 1:
        report(_COMPONENT, "translate_plot_point", "invalid center coordinates")
        raise InvalidArgumentError(f"center ({center_x}, {center_y}) must be positive")
    abs_x = center_x + rel_x
    abs_y = center_y - rel_y
    if abs_x < 0 or abs_y < 0:
        report(_COMPONENT, "translate_plot_point", "invalid relative coordinates")
        raise InvalidArgumentError(
            f"({rel_x}, {rel_y}) falls outside the window around ({center_x}, {center_y})"
        )
    return abs_x, abs_y


def build_plot_list(
    relative_points: Sequence[float],
    num_points: Optional[int],
    center_x: int,
    center_y: int,
) -> List[PlotNode]:
    """Build the ordered plot nodes for a flat buffer of relative pairs.

    ``num_points`` counts doubles, not pairs; ``None`` uses the length of
    ``relative_points``.  Each coordinate is rounded up before translation.
    No nodes are returned unless every pair translates.
    """

    if relative_points is None or len(relative_points) == 0:
        report(_COMPONENT, "build_plot_list", "no relative points")
        raise InvalidArgumentError("relative_points must not be empty")
    if num_points is None:
        num_points = len(relative_points)
    if num_points < 2 or num_points % 2 or num_points > len(relative_points):
        report(_COMPONENT, "build_plot_list", f"invalid num_points {num_points!r}")
        raise InvalidArgumentError(
            f"num_points must be even, at least 2 and at most {len(relative_points)}"
        )
    if center_x < 0:
        report(_COMPONENT, "build_plot_list", f"invalid center_x {center_x!r}")
        raise InvalidArgumentError("center_x must not be negative")
    if center_y < 0:
        report(_COMPONENT, "build_plot_list", f"invalid center_y {center_y!r}")
        raise InvalidArgumentError("center_y must not be negative")

    config = get_geometry_config()
    nodes: List[PlotNode] = []
    try:
        for index in range(1, num_points, 2):
            rel_x = round_double(float(relative_points[index - 1]), config.plot_rounding)
            rel_y = round_double(float(relative_points[index]), config.plot_rounding)
            abs_x, abs_y = translate_plot_point(rel_x, rel_y, center_x, center_y)
            nodes.append(PlotNode(abs_x, abs_y, config.plot_glyph, config.plot_state))
    except GeometryError as exc:
        nodes.clear()
        report(_COMPONENT, "build_plot_list", f"pair {index // 2} failed: {exc}")
        raise

    logger.debug("Built %d plot node(s) around (%d, %d)", len(nodes), center_x, center_y)
    return nodes


def plot_ellipse(
    a: float,
    b: float,
    width: int,
    height: int,
    orientation: object = WindowOrientation.UP_LEFT,
) -> List[PlotNode]:
    """Rasterize an ellipse centered in a ``width`` by ``height`` window."""

    center_x, center_y = determine_center(width, height, orientation)
    points = rasterize(a, b)
    return build_plot_list(points, len(points), center_x, center_y)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "MIN_WINDOW_DIMENSION",
    "determine_center",
    "translate_plot_point",
    "build_plot_list",
    "plot_ellipse",
]
