"""Rasterize an ellipse boundary into whole-number steps.

The result is a flat ``float64`` buffer of ``x, y`` pairs relative to the
ellipse center.  The major axis is stepped one unit at a time:

* x major: ``(-a, 0)`` up through ``(0, b)`` to ``(a, 0)``, then back along
  the lower half, finishing at ``x = -a + 1``.
* y major: ``(0, -b)`` up through ``(a, 0)`` to ``(0, b)``, then back along
  the left half, finishing at ``y = -b + 1``.

The far vertex is emitted exactly once and the starting vertex is not
repeated, so a semi-axis of ``n`` yields ``4 * n`` pairs.  Fractional
semi-axes are truncated to whole numbers before stepping, which means the
true vertices of such ellipses are never emitted.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

import numpy as np

from . import compare
from .config import get_geometry_config
from .diagnostics import report
from .errors import GeometryError, InvalidArgumentError, ResourceExhaustionError
from .geometry import ellipse_x, ellipse_y
from .logging_utils import apply_debug_logging
from .types import CartesianPoint

logger = logging.getLogger(__name__)

_COMPONENT = "ellipse"


def _allocate(num_values: int, attempts: int) -> np.ndarray:
    last_error = None
    for attempt in range(1, max(attempts, 1) + 1):
        try:
            return np.zeros(num_values, dtype=np.float64)
        except MemoryError as exc:
            last_error = exc
            logger.debug("Allocation attempt %d of %d failed", attempt, attempts)
    report(_COMPONENT, "rasterize", f"unable to allocate {num_values} doubles")
    raise ResourceExhaustionError(f"unable to allocate {num_values} doubles") from last_error


def _sweep(major: int) -> Iterator[Tuple[int, float]]:
    """Yield ``(major coordinate, reflection)`` for each pair in order."""

    for index in range(4 * major):
        if index <= 2 * major:
            yield -major + index, 1.0
        else:
            yield 3 * major - index, -1.0


def rasterize(a: float, b: float) -> np.ndarray:
    """Return the boundary of the ellipse with semi-axes ``a`` and ``b``.

    The length of the returned buffer is ``8 * major`` where ``major`` is the
    whole-number part of the larger semi-axis.
    """

    config = get_geometry_config()
    precision = config.default_precision

    if compare.equal(a, 0.0, precision):
        report(_COMPONENT, "rasterize", "a is zero")
        raise InvalidArgumentError("semi-axis a must be non-zero")
    if compare.equal(b, 0.0, precision):
        report(_COMPONENT, "rasterize", "b is zero")
        raise InvalidArgumentError("semi-axis b must be non-zero")

    a_abs = abs(a)
    b_abs = abs(b)
    choose_x = not compare.less(a_abs, b_abs, precision)
    major = int(a_abs if choose_x else b_abs)

    # four quadrants, two doubles per coordinate pair
    num_values = major * 4 * 2
    if num_values < 8 or num_values % 4:
        report(_COMPONENT, "rasterize", f"number of points miscalculated: {num_values}")
        raise InvalidArgumentError(
            f"semi-axes ({a!r}, {b!r}) are too small to rasterize"
        )

    buffer = _allocate(num_values, config.max_allocation_attempts)
    try:
        for index, (step, reflection) in enumerate(_sweep(major)):
            if choose_x:
                buffer[2 * index] = step
                buffer[2 * index + 1] = reflection * ellipse_y(a_abs, b_abs, step)
            else:
                buffer[2 * index] = reflection * ellipse_x(a_abs, b_abs, step)
                buffer[2 * index + 1] = step
    except GeometryError as exc:
        buffer.fill(0.0)
        del buffer
        report(_COMPONENT, "rasterize", f"coordinate calculation failed: {exc}")
        raise

    logger.debug(
        "Rasterized ellipse a=%s b=%s along %s axis into %d pairs",
        a,
        b,
        "x" if choose_x else "y",
        num_values // 2,
    )
    return buffer


def ellipse_pairs(buffer: np.ndarray) -> np.ndarray:
    """View a flat rasterizer buffer as an ``(n, 2)`` array of pairs."""

    flat = np.asarray(buffer, dtype=np.float64)
    if flat.ndim != 1 or flat.size % 2:
        report(_COMPONENT, "ellipse_pairs", f"buffer of shape {flat.shape} is not flat and even")
        raise InvalidArgumentError("point buffer must be flat with an even length")
    return flat.reshape(-1, 2)


def ellipse_points(buffer: np.ndarray) -> List[CartesianPoint]:
    return [CartesianPoint(float(x), float(y)) for x, y in ellipse_pairs(buffer)]


apply_debug_logging(globals(), logger=logger)


__all__ = ["rasterize", "ellipse_pairs", "ellipse_points"]
