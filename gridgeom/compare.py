"""Precision-masked comparisons between doubles.

``equal`` and ``greater`` test their operands against an additive mask,
while ``less`` truncates both operands to ``precision`` decimal places and
compares the results.  The two mechanisms do not agree at every boundary
value; callers relying on ``less(x, y) == greater(y, x)`` near the mask
should not.
"""

from __future__ import annotations

import logging

from .diagnostics import report
from .errors import GeometryError
from .logging_utils import apply_debug_logging
from .precision import precision_mask, truncate

logger = logging.getLogger(__name__)

_COMPONENT = "compare"


def _mask_for(operation: str, precision: int) -> float:
    """Return the mask for ``precision`` or ``0.0`` after reporting a failure."""

    if precision < 1:
        report(_COMPONENT, operation, f"invalid precision {precision!r}")
        return 0.0
    try:
        return precision_mask(precision)
    except GeometryError as exc:
        report(_COMPONENT, operation, f"precision_mask failed: {exc}")
        return 0.0


def greater(x: float, y: float, precision: int) -> bool:
    """``x > y`` with the ordering surviving a shift by the mask either way."""

    mask = _mask_for("greater", precision)
    if not mask:
        return False
    return x > y and (x + mask) > (y + mask) and (x - mask) > (y - mask)


def less(x: float, y: float, precision: int) -> bool:
    """``x < y`` after truncating both to ``precision`` decimal places."""

    mask = _mask_for("less", precision)
    if not mask:
        return False
    try:
        return truncate(x, precision) < truncate(y, precision)
    except GeometryError as exc:
        report(_COMPONENT, "less", f"truncate failed: {exc}")
        return False


def equal(x: float, y: float, precision: int) -> bool:
    """``x`` lies strictly within the mask of ``y`` on both sides.

    Identical values are always equal; the mask alone cannot show that once
    it falls below the spacing of doubles near ``x``.
    """

    mask = _mask_for("equal", precision)
    if not mask:
        return False
    if x == y:
        return True
    return (x + mask) > y and (x - mask) < y and x < (y + mask) and x > (y - mask)


def not_equal(x: float, y: float, precision: int) -> bool:
    return not equal(x, y, precision)


def greater_equal(x: float, y: float, precision: int) -> bool:
    return equal(x, y, precision) or greater(x, y, precision)


def less_equal(x: float, y: float, precision: int) -> bool:
    return equal(x, y, precision) or less(x, y, precision)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "greater",
    "less",
    "equal",
    "not_equal",
    "greater_equal",
    "less_equal",
]
