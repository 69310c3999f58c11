"""Ellipse, line and triangle solvers built on the comparison engine.

Line and triangle helpers accept :class:`~gridgeom.types.LinePoint`
instances or plain ``(x, y)`` integer tuples.  Results that are undefined
for the given input (vertical slopes, degenerate triangles, horizontal
lines solved for x) are returned as ``None`` rather than a numeric
sentinel.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from . import compare
from .config import get_geometry_config
from .diagnostics import report
from .errors import DegenerateGeometryError, InvalidArgumentError
from .logging_utils import apply_debug_logging
from .precision import DBL_PRECISION
from .rounding import round_double
from .types import LinePoint, PointLike, RoundingDirective

logger = logging.getLogger(__name__)

_COMPONENT = "geometry"


def _xy(point: PointLike) -> Tuple[int, int]:
    if isinstance(point, LinePoint):
        return point.x, point.y
    x, y = point
    return x, y


def _check_semi_axes(operation: str, a: float, b: float, precision: int) -> None:
    if compare.equal(a, 0.0, precision):
        report(_COMPONENT, operation, "a is zero")
        raise InvalidArgumentError("semi-axis a must be non-zero")
    if compare.equal(b, 0.0, precision):
        report(_COMPONENT, operation, "b is zero")
        raise InvalidArgumentError("semi-axis b must be non-zero")


# ---------------------------------------------------------------------------
# Ellipse
# ---------------------------------------------------------------------------


def ellipse_x(a: float, b: float, y: float) -> float:
    """Solve ``x²/a² + y²/b² = 1`` for ``|x|``.

    ``x = (a / b) * sqrt(b² - y²)``; only the non-negative root is returned.
    """

    precision = get_geometry_config().default_precision
    _check_semi_axes("ellipse_x", a, b, precision)
    if compare.greater(abs(y), abs(b), precision):
        report(_COMPONENT, "ellipse_x", f"y={y!r} lies outside semi-axis b={b!r}")
        raise InvalidArgumentError(f"|y| must not exceed |b| ({y!r} > {b!r})")

    radicand = max(b * b - y * y, 0.0)
    return abs(a * math.sqrt(radicand) / b)


def ellipse_y(a: float, b: float, x: float) -> float:
    """Solve ``x²/a² + y²/b² = 1`` for ``|y|``.

    ``y = (b / a) * sqrt(a² - x²)``; only the non-negative root is returned.
    """

    precision = get_geometry_config().default_precision
    _check_semi_axes("ellipse_y", a, b, precision)
    if compare.greater(abs(x), abs(a), precision):
        report(_COMPONENT, "ellipse_y", f"x={x!r} lies outside semi-axis a={a!r}")
        raise InvalidArgumentError(f"|x| must not exceed |a| ({x!r} > {a!r})")

    radicand = max(a * a - x * x, 0.0)
    return abs(b * math.sqrt(radicand) / a)


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


def point_distance(p1: PointLike, p2: PointLike) -> float:
    x1, y1 = _xy(p1)
    x2, y2 = _xy(p2)
    if x1 == x2 and y1 == y2:
        return 0.0
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def point_slope(p1: PointLike, p2: PointLike) -> Optional[float]:
    """Return the slope through ``p1`` and ``p2``, or ``None`` when undefined."""

    x1, y1 = _xy(p1)
    x2, y2 = _xy(p2)
    if x2 == x1:
        return None
    return (y2 - y1) / (x2 - x1)


def verify_slope(p1: PointLike, p2: PointLike, slope: float, precision: int) -> bool:
    """Check that ``p1`` and ``p2`` form ``slope`` within ``precision``.

    A recomputed slope that is undefined or zero counts as a solver failure.
    """

    calculated = point_slope(p1, p2)
    if calculated is None or compare.equal(0.0, calculated, DBL_PRECISION):
        report(_COMPONENT, "verify_slope", f"no usable slope between {_xy(p1)} and {_xy(p2)}")
        return False
    return compare.equal(calculated, slope, precision)


def midpoint(
    p1: PointLike, p2: PointLike, directive: RoundingDirective = RoundingDirective.NEAREST
) -> LinePoint:
    """Return the rounded midpoint of ``p1`` and ``p2``.

    Half of each coordinate delta is rounded per ``directive`` and added to
    the smaller of the two coordinates.  ``dist`` on the result holds half
    the distance between the points.
    """

    if p1 is p2:
        report(_COMPONENT, "midpoint", "duplicate points do not have a midpoint")
        raise DegenerateGeometryError("midpoint needs two distinct points")
    x1, y1 = _xy(p1)
    x2, y2 = _xy(p2)
    if x1 == x2 and y1 == y2:
        report(_COMPONENT, "midpoint", "duplicate coordinates do not have a midpoint")
        raise DegenerateGeometryError(f"points share coordinates ({x1}, {y1})")

    distance = point_distance((x1, y1), (x2, y2))
    mid_x = round_double(0.5 * abs(x2 - x1), directive) + min(x1, x2)
    mid_y = round_double(0.5 * abs(y2 - y1), directive) + min(y1, y2)
    return LinePoint(mid_x, mid_y, distance / 2)


# ---------------------------------------------------------------------------
# Triangles
# ---------------------------------------------------------------------------


def triangle_centroid(
    p1: PointLike,
    p2: PointLike,
    p3: PointLike,
    directive: RoundingDirective = RoundingDirective.NEAREST,
) -> LinePoint:
    if p1 is p2 or p1 is p3 or p2 is p3:
        report(_COMPONENT, "triangle_centroid", "duplicate points can not form a triangle")
        raise DegenerateGeometryError("centroid needs three distinct points")
    a, b, c = _xy(p1), _xy(p2), _xy(p3)
    if a == b or a == c or b == c:
        report(_COMPONENT, "triangle_centroid", "duplicate coordinates are not a triangle")
        raise DegenerateGeometryError(f"points {a}, {b}, {c} repeat a coordinate")

    centroid_x = (a[0] + b[0] + c[0]) / 3
    centroid_y = (a[1] + b[1] + c[1]) / 3
    centroid = LinePoint(round_double(centroid_x, directive), round_double(centroid_y, directive))
    logger.debug("Triangle centroid == (%d, %d)", centroid.x, centroid.y)
    return centroid


def triangle_area(a: PointLike, b: PointLike, c: PointLike) -> Optional[float]:
    """Area of triangle ``abc`` by Heron's formula.

    Returns ``None`` for duplicate coordinates, or when all three points
    share an x or share a y.
    """

    ax, ay = _xy(a)
    bx, by = _xy(b)
    cx, cy = _xy(c)
    if (ax, ay) == (bx, by) or (ax, ay) == (cx, cy) or (bx, by) == (cx, cy):
        report(_COMPONENT, "triangle_area", "duplicate coordinates are not a triangle")
        return None
    if (ax == bx and ax == cx) or (ay == by and ay == cy):
        report(_COMPONENT, "triangle_area", "line coordinates are not a triangle")
        return None

    len_ab = point_distance((ax, ay), (bx, by))
    len_bc = point_distance((bx, by), (cx, cy))
    len_ca = point_distance((cx, cy), (ax, ay))
    semiperimeter = (len_ab + len_bc + len_ca) / 2

    if any(compare.equal(semiperimeter, side, DBL_PRECISION) for side in (len_ab, len_bc, len_ca)):
        logger.debug("Points %s, %s and %s form a line", (ax, ay), (bx, by), (cx, cy))

    product = semiperimeter * (
        (semiperimeter - len_ab) * (semiperimeter - len_bc) * (semiperimeter - len_ca)
    )
    return math.sqrt(max(product, 0.0))


def point_in_triangle(
    a: PointLike, b: PointLike, c: PointLike, point: PointLike, precision: int
) -> bool:
    """Return ``True`` when ``point`` lies inside triangle ``abc``.

    The triangle is split into three sub-triangles that share ``point``; the
    point is inside when every sub-area exists, none is negative and their
    sum matches the total area within ``precision``.  Points on an
    axis-aligned edge produce a degenerate sub-triangle and count as outside.
    That includes the rounded centroid of a thin triangle: for
    ``(0, 0), (6, 0), (3, 1)`` it rounds to ``(3, 0)`` on the base and is
    reported outside.
    """

    sub_areas = (
        ("A B point", triangle_area(a, b, point)),
        ("B C point", triangle_area(b, c, point)),
        ("C A point", triangle_area(c, a, point)),
    )
    total = triangle_area(a, b, c)

    for label, area in sub_areas + (("A B C", total),):
        if area is None or compare.less(area, 0.0, precision):
            report(_COMPONENT, "point_in_triangle", f"triangle_area failed on triangle {label}")
            return False

    return compare.equal(total, sum(area for _, area in sub_areas), precision)


# ---------------------------------------------------------------------------
# Point-slope form
# ---------------------------------------------------------------------------


def solve_for_x(
    known: PointLike,
    target_y: int,
    slope: float,
    directive: RoundingDirective = RoundingDirective.NEAREST,
) -> Optional[int]:
    """Solve ``y - y1 = m (x - x1)`` for ``x`` at ``target_y``.

    A slope of zero has no unique ``x`` and yields ``None``.
    """

    known_x, known_y = _xy(known)
    if not compare.not_equal(slope, 0.0, DBL_PRECISION):
        report(_COMPONENT, "solve_for_x", "a horizontal line has no unique x")
        return None
    return round_double((target_y - known_y) / slope + known_x, directive)


def solve_for_y(
    known: PointLike,
    target_x: int,
    slope: float,
    directive: RoundingDirective = RoundingDirective.NEAREST,
) -> int:
    """Solve ``y - y1 = m (x - x1)`` for ``y`` at ``target_x``."""

    known_x, known_y = _xy(known)
    return round_double(slope * (target_x - known_x) + known_y, directive)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "ellipse_x",
    "ellipse_y",
    "point_distance",
    "point_slope",
    "verify_slope",
    "midpoint",
    "triangle_centroid",
    "triangle_area",
    "point_in_triangle",
    "solve_for_x",
    "solve_for_y",
]
