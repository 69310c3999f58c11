"""Fire-and-forget diagnostic sink.

Every validation or computation failure inside gridgeom is recorded here
before the failure is surfaced to the caller.  Recording never alters the
caller's control flow: :func:`report` always returns ``None`` and never
raises.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[str, str, str], None]

_SINK: Optional[DiagnosticSink] = None


def set_diagnostic_sink(sink: Optional[DiagnosticSink]) -> Optional[DiagnosticSink]:
    """Install ``sink`` as the extra receiver of diagnostics.

    Returns the previously installed sink so callers can restore it.
    Passing ``None`` removes the current sink.
    """

    global _SINK
    previous = _SINK
    _SINK = sink
    return previous


def get_diagnostic_sink() -> Optional[DiagnosticSink]:
    return _SINK


def report(component: str, operation: str, message: str) -> None:
    """Record a failure of ``component.operation``."""

    logger.warning("%s.%s: %s", component, operation, message)
    sink = _SINK
    if sink is None:
        return
    try:
        sink(component, operation, message)
    except Exception:
        logger.exception("Diagnostic sink failed for %s.%s", component, operation)


__all__ = [
    "DiagnosticSink",
    "set_diagnostic_sink",
    "get_diagnostic_sink",
    "report",
]
