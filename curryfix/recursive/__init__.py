"""
Anonymous Recursion
===================

Fixed-point combinators built on self-application: recursive functions
without named self-reference.
"""

from curryfix.recursive.fixed_point import (
    FixedPoint,
    Rec,
    fix,
    self_app,
    self_apply,
)

__all__ = [
    'FixedPoint',
    'Rec',
    'fix',
    'self_app',
    'self_apply',
]
