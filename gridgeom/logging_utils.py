from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8


def _summarize_buffer(value: np.ndarray, max_items: int) -> str:
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
    size = int(value.size)
    if size == 0:
        return parts[0]
    if size <= max_items:
        parts.append(f"values={_repr.repr(value.tolist())}")
    else:
        parts.append(f"min={float(value.min()):.6g}")
        parts.append(f"max={float(value.max()):.6g}")
    return ", ".join(parts)


def _safe_repr(value: Any, *, max_items: int = 6, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        return _summarize_buffer(value, max_items)

    if isinstance(value, list) and len(value) > max_items:
        # Plot lists get long quickly; keep the head and the size.
        head = ", ".join(_safe_repr(item) for item in value[:max_items])
        return f"[{head}, ...] (len={len(value)})"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={"
            + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
            + "}"
        )
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG entry/exit records for a call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Exception in %s", qualname, exc_info=True)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module-level functions of ``namespace`` with DEBUG tracing.

    Private helpers (leading underscore) and anything imported from another
    module are left alone.
    """

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)


__all__ = ["debug_log_call", "apply_debug_logging"]
