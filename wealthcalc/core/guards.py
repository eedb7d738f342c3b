"""Boundary helpers that keep non-finite numbers and arithmetic errors inside the engine."""

from __future__ import annotations

import functools
import logging
import math
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def finite_or_zero(value: float) -> float:
    """Coerce NaN and +/-inf to 0.0."""
    value = float(value)
    return value if math.isfinite(value) else 0.0


def to_currency(value: float) -> int:
    """Round to whole currency units, half away from zero."""
    value = finite_or_zero(value)
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def neutral_on_error(fallback: Callable[[], T]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Wrap a public calculator so malformed input resolves to ``fallback()``.

    Overflowing powers, inflation of -100% and similar inputs raise
    ArithmeticError/ValueError deep in the arithmetic; callers get the
    calculator's zero result instead.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except (ArithmeticError, ValueError) as exc:
                logger.warning("%s fell back to a neutral result: %s", func.__name__, exc)
                return fallback()

        return wrapper

    return decorator
