"""
Currying
========

Conversion between n-ary functions and chains of n unary functions.
"""

from curryfix.currying.curry_transform import (
    CurriedChain,
    CurryTransform,
    curry,
    uncurry,
)

__all__ = [
    'CurriedChain',
    'CurryTransform',
    'curry',
    'uncurry',
]
