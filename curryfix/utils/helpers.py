"""Utility helpers for curryfix."""

import inspect
import time
from typing import Any, Callable, Optional, Tuple


def positional_arity(func: Callable) -> Optional[Tuple[int, Optional[int]]]:
    """
    Return ``(minimum, maximum)`` positional argument counts for ``func``.

    ``maximum`` is ``None`` when the function takes ``*args``. Returns
    ``None`` when the signature cannot be introspected (some builtins and
    C extensions). Required keyword-only parameters make any positional
    call fail, so they yield ``(0, -1)``.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    minimum = 0
    maximum = 0
    variadic = False
    for param in sig.parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            maximum += 1
            if param.default is param.empty:
                minimum += 1
        elif param.kind == param.VAR_POSITIONAL:
            variadic = True
        elif param.kind == param.KEYWORD_ONLY and param.default is param.empty:
            return (0, -1)
    return (minimum, None if variadic else maximum)


def accepts_positional(func: Callable, count: int) -> Optional[bool]:
    """Whether ``func`` can be called with exactly ``count`` positionals.

    ``None`` means the answer is unknown.
    """
    bounds = positional_arity(func)
    if bounds is None:
        return None
    minimum, maximum = bounds
    if maximum == -1:
        return False
    return minimum <= count and (maximum is None or count <= maximum)


def describe_callable(func: Any) -> str:
    """Short human-readable name for a callable, used in messages and reprs."""
    name = getattr(func, '__qualname__', None) or getattr(func, '__name__', None)
    return name if name else repr(func)


class Timer:
    """High-resolution timer for benchmarking."""

    def __init__(self):
        self.start_ns = 0
        self.end_ns = 0

    def __enter__(self):
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc):
        self.end_ns = time.perf_counter_ns()

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns

    @property
    def elapsed_us(self) -> float:
        return self.elapsed_ns / 1000.0


def format_ns(ns: float) -> str:
    """Format nanoseconds into a human-readable string."""
    if ns < 1_000:
        return f"{ns:.0f} ns"
    elif ns < 1_000_000:
        return f"{ns / 1_000:.1f} µs"
    elif ns < 1_000_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    else:
        return f"{ns / 1_000_000_000:.3f} s"
