from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

from .model import GraphModel

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxstring = 80
_repr.maxlist = 10
_repr.maxtuple = 10


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    if isinstance(value, np.ndarray):
        summary = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        if 0 < value.size <= max_items:
            summary += f", values={_repr.repr(value.tolist())}"
        return summary

    if isinstance(value, GraphModel):
        return (
            f"GraphModel(vertices={len(value.vertices)}, edges={len(value.edges)}, "
            f"flags={value.flags})"
        )

    if isinstance(value, (list, tuple)) and len(value) > max_items:
        head = ", ".join(_safe_repr(item) for item in value[:max_items])
        return f"[{head}, ... ({len(value)} items)]"

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
    """Return a decorator that emits DEBUG logs for entry, exit and failure of a call."""

    def decorator(func: F) -> F:
        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("%s failed: %s: %s", qualname, type(exc).__name__, exc)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        return cast(F, wrapper)

    return decorator
