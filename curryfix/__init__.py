"""
curryfix: Currying and Anonymous Recursion for Python
=====================================================

Two small functional building blocks:

    - currying: convert an n-ary function into a chain of n unary calls
      and back, with typed errors when the arity contract is broken
    - recursive: fixed-point combinators that build recursive functions
      from bodies that never refer to themselves by name

Usage:
    >>> from curryfix import curry, uncurry, self_app
    >>> add3 = curry(3, lambda a, b, c: a + b + c)
    >>> add3(1)(2)(3)
    6
    >>> uncurry(3, add3)(1, 2, 3)
    6
    >>> fact = self_app(lambda rec: lambda n: 1 if n == 0 else n * rec()(n - 1))
    >>> fact(5)
    120
"""

__version__ = "1.0.0"

from curryfix.errors import (
    ArityError,
    ArityExceeded,
    ArityMismatch,
    TooManyArguments,
)
from curryfix.currying import CurriedChain, CurryTransform, curry, uncurry
from curryfix.recursive import FixedPoint, Rec, fix, self_app, self_apply

__all__ = [
    'ArityError',
    'ArityExceeded',
    'ArityMismatch',
    'TooManyArguments',
    'CurriedChain',
    'CurryTransform',
    'curry',
    'uncurry',
    'FixedPoint',
    'Rec',
    'fix',
    'self_app',
    'self_apply',
]
