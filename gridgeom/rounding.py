"""Directional rounding of doubles to integers.

The rounding mode used by :func:`round_double` for ``NEAREST`` and
``TOWARD_ZERO`` lives in the numeric environment, which for Python is the
active :mod:`decimal` context.  :func:`rounding_mode` installs a mode for the
duration of a block and always restores the previous one.

The guard takes no lock.  Code that shares one decimal context between
threads must serialise its calls to :func:`round_double` itself.
"""

from __future__ import annotations

import decimal
import logging
import math
from contextlib import contextmanager
from typing import Iterator, Optional

import numpy as np

from .diagnostics import report
from .errors import NumericRangeError
from .logging_utils import apply_debug_logging
from .types import RoundingDirective

logger = logging.getLogger(__name__)

_COMPONENT = "rounding"

_INT_RANGE = np.iinfo(np.intc)
INT_MIN = int(_INT_RANGE.min)
INT_MAX = int(_INT_RANGE.max)

# UP and DOWN are handled with ceil()/floor() and never touch the environment.
_ENVIRONMENT_MODES = {
    RoundingDirective.NEAREST: decimal.ROUND_HALF_UP,
    RoundingDirective.TOWARD_ZERO: decimal.ROUND_DOWN,
}


def current_rounding_mode() -> str:
    """Return the rounding mode installed in the numeric environment."""

    return decimal.getcontext().rounding


@contextmanager
def rounding_mode(directive: object) -> Iterator[str]:
    """Install the environment mode for ``directive`` for the enclosed block.

    Directives without an environment mode (including unknown values) leave
    the current mode in place.  The previous mode is restored on every exit
    path.
    """

    context = decimal.getcontext()
    previous = context.rounding
    mode: Optional[str] = None
    if isinstance(directive, RoundingDirective):
        mode = _ENVIRONMENT_MODES.get(directive)
    if mode is not None:
        context.rounding = mode
    try:
        yield context.rounding
    finally:
        context.rounding = previous


def _to_integral(value: float, mode: Optional[str] = None) -> int:
    return int(decimal.Decimal(value).to_integral_value(rounding=mode))


def round_double(value: float, directive: object = RoundingDirective.NEAREST) -> int:
    """Round ``value`` to an ``int`` according to ``directive``.

    ``UP`` and ``DOWN`` apply ``ceil``/``floor`` and then round to nearest.
    Unrecognised directives round with whatever mode the environment
    currently holds.  Under the default ``decimal`` context that is
    ``ROUND_HALF_EVEN``, so ``round_double(2.5, None)`` gives 2 where
    ``NEAREST`` gives 3.
    """

    if math.isnan(value):
        report(_COMPONENT, "round_double", "value is not a number")
        raise NumericRangeError("cannot round NaN to an integer")
    if value > INT_MAX:
        report(_COMPONENT, "round_double", f"int overflow for {value!r}")
        raise NumericRangeError(f"{value!r} exceeds the integer range")
    if value < INT_MIN:
        report(_COMPONENT, "round_double", f"int underflow for {value!r}")
        raise NumericRangeError(f"{value!r} is below the integer range")

    if directive is RoundingDirective.UP:
        return _to_integral(math.ceil(value), decimal.ROUND_HALF_UP)
    if directive is RoundingDirective.DOWN:
        return _to_integral(math.floor(value), decimal.ROUND_HALF_UP)

    with rounding_mode(directive):
        return _to_integral(value)


apply_debug_logging(globals(), logger=logger, skip={"rounding_mode"})


__all__ = [
    "INT_MIN",
    "INT_MAX",
    "current_rounding_mode",
    "rounding_mode",
    "round_double",
]
