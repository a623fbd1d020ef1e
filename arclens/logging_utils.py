"""DEBUG call tracing for the clustering and layout functions."""

from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, MutableMapping, Sequence, TypeVar, cast

import numpy as np

from .reactive import Cell, Point

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10
_repr.maxtuple = 10

MAX_ITEMS = 5
MAX_LENGTH = 400


def _describe_array(value: np.ndarray) -> str:
    text = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    if value.size == 0:
        return text
    if value.size <= MAX_ITEMS:
        return f"{text}, values={_repr.repr(value.tolist())}"
    return f"{text}, min={float(value.min()):.6g}, max={float(value.max()):.6g}"


def _describe(value: Any) -> str:
    if isinstance(value, np.ndarray):
        return _describe_array(value)
    if isinstance(value, Point):
        return f"Point({value.x:.6g}, {value.y:.6g})"
    if isinstance(value, Cell):
        return f"{type(value).__name__}({_describe(value.value)})"
    if isinstance(value, (list, tuple)):
        # clusters are lists of points; nested lists stay short
        shown = [_describe(item) for item in value[:MAX_ITEMS]]
        if len(value) > MAX_ITEMS:
            shown.append(f"... {len(value) - MAX_ITEMS} more")
        body = ", ".join(shown)
        return f"({body})" if isinstance(value, tuple) else f"[{body}]"

    try:
        text = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - broken __repr__ on caller objects
        text = f"<repr-error {exc!r}>"
    if len(text) > MAX_LENGTH:
        return text[:MAX_LENGTH] + "... (truncated)"
    return text


def _describe_call(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    parts = [_describe(arg) for arg in args]
    parts.extend(f"{key}={_describe(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def debug_log_call(logger: logging.Logger) -> Callable[[F], F]:
    """Log entry arguments, the result and any exception of the decorated function at DEBUG."""

    def decorator(func: F) -> F:
        qualname = func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            tracing = logger.isEnabledFor(logging.DEBUG)
            if tracing:
                logger.debug("Entering %s(%s)", qualname, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if tracing:
                    logger.debug("%s raised", qualname, exc_info=True)
                raise
            if tracing:
                logger.debug("Exiting %s -> %s", qualname, _describe(result))
            return result

        return cast(F, wrapper)

    return decorator


def apply_debug_logging(namespace: MutableMapping[str, Any], *, logger: logging.Logger) -> None:
    """Wrap the public functions defined in a module's ``globals()`` with :func:`debug_log_call`.

    Call it after the functions are defined and before anything (a registry,
    an alias) captures references to them.
    """

    module_name = namespace["__name__"]
    trace = debug_log_call(logger)
    for name, value in list(namespace.items()):
        if name.startswith("_"):
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = trace(value)


__all__ = ["apply_debug_logging", "debug_log_call"]
