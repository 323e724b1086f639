"""Shared helpers: signature introspection and timing."""

from curryfix.utils.helpers import (
    Timer,
    accepts_positional,
    describe_callable,
    format_ns,
    positional_arity,
)

__all__ = [
    'Timer',
    'accepts_positional',
    'describe_callable',
    'format_ns',
    'positional_arity',
]
