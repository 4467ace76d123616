from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar, cast

from .point import Point
from .polygon import Polygon
from .vect import Vect

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120


def _describe(value: Any) -> str:
    """Short rendering of a call argument or result for DEBUG lines."""

    if isinstance(value, Polygon):
        return f"Polygon(n={len(value)}, orientation={value.orientation})"
    if isinstance(value, (Point, Vect)):
        return f"{type(value).__name__}({value.x:g}, {value.y:g})"
    if isinstance(value, tuple) and value and all(isinstance(item, float) for item in value):
        return f"key(len={len(value)})"
    return _repr.repr(value)


def _describe_call(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    rendered = [_describe(arg) for arg in args]
    rendered.extend(f"{key}={_describe(value)}" for key, value in kwargs.items())
    return ", ".join(rendered)


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Log entry, result and failure of the wrapped geometry operation at DEBUG."""

    def decorator(func: F) -> F:
        label = name or func.__name__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("%s(%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("%s failed", label)
                raise
            logger.debug("%s -> %s", label, _describe(result))
            return result

        return cast(F, wrapper)

    return decorator


__all__ = ["debug_log_call"]
