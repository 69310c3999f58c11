"""Machine precision discovery and precision masks.

The number of reliable decimal digits is measured once per process and
cached.  Every precision-aware comparison converts its requested decimal
precision into a *mask* (``10 ** -n``) through :func:`precision_mask`.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

import numpy as np

from .diagnostics import report
from .errors import InvalidArgumentError, PrecisionUnavailableError
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

DBL_PRECISION = 15
# Largest number of decimal places a 64-bit double can meaningfully carry.
MAX_DECIMAL_DIGITS = 1074

_COMPONENT = "precision"

_MACHINE_PRECISION: Optional[int] = None
_MACHINE_PRECISION_LOCK = threading.Lock()


def _measure_calculation_digits() -> int:
    one = 1.0
    epsilon = 1.0
    counter = 0
    while one + epsilon != one and counter <= MAX_DECIMAL_DIGITS:
        counter += 1
        epsilon = epsilon / 10.0
    return counter


def _measure_storage_digits() -> int:
    one = np.float64(1.0)
    epsilon = np.float64(1.0)
    stored = np.zeros(1, dtype=np.float64)
    counter = 0
    while counter <= MAX_DECIMAL_DIGITS:
        stored[0] = one + epsilon
        if stored[0] == one:
            break
        counter += 1
        epsilon = epsilon / np.float64(10.0)
    return counter


def _measure_machine_precision() -> int:
    calculation = _measure_calculation_digits()
    storage = _measure_storage_digits()
    logger.debug(
        "%d digits accuracy in calculations, %d digits accuracy in storage",
        calculation,
        storage,
    )
    digits = min(calculation, storage)
    if digits > MAX_DECIMAL_DIGITS:
        return 0
    return digits


def machine_precision() -> int:
    """Return the number of decimal digits this machine reliably resolves.

    The probe runs once; later calls return the cached value.
    """

    global _MACHINE_PRECISION
    cached = _MACHINE_PRECISION
    if cached is not None:
        return cached
    with _MACHINE_PRECISION_LOCK:
        if _MACHINE_PRECISION is None:
            digits = _measure_machine_precision()
            if digits < 1:
                report(_COMPONENT, "machine_precision", "unable to measure machine precision")
                raise PrecisionUnavailableError("unable to measure machine precision")
            logger.info("Machine precision established at %d decimal digits", digits)
            _MACHINE_PRECISION = digits
        return _MACHINE_PRECISION


def precision_mask(requested: int) -> float:
    """Convert ``requested`` decimal places into a comparison threshold.

    Requests above :func:`machine_precision` are clamped to it.  The mask is
    built by repeated multiplication so that it carries the same binary
    representation regardless of the platform's ``pow``.
    """

    max_precision = machine_precision()
    if requested < 1:
        report(_COMPONENT, "precision_mask", f"invalid precision {requested!r}")
        raise InvalidArgumentError(f"precision must be at least 1, got {requested!r}")
    effective = min(int(requested), max_precision)

    mask = 1.0
    for _ in range(effective):
        mask *= 0.1
    return mask


def truncate(value: float, digits: int) -> float:
    """Keep ``digits`` decimal places of ``value`` via a textual round trip.

    ``digits == 0`` returns ``value`` untouched.
    """

    if digits == 0:
        return value
    if digits < 0 or digits > MAX_DECIMAL_DIGITS:
        report(_COMPONENT, "truncate", f"invalid number of digits {digits!r}")
        raise InvalidArgumentError(
            f"digits must be within [0, {MAX_DECIMAL_DIGITS}], got {digits!r}"
        )
    return float("%.*f" % (digits, value))


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "DBL_PRECISION",
    "MAX_DECIMAL_DIGITS",
    "machine_precision",
    "precision_mask",
    "truncate",
]
