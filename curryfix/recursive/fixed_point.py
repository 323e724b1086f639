"""
Fixed-Point Combinator
======================

Anonymous recursion through self-application.

Theoretical Foundation:
    A recursive definition  f = λn. ... f(n-1) ...  names itself. Remove
    the name by abstracting over it:

        body = λself. λn. ... self()(n-1) ...

    and look for the fixed point  f = body(λ. f).  Self-application finds
    it without ever binding ``f``:

        core = λrec. body(λ. rec(rec))
        f    = core(core)

    Every ``self()`` inside ``body`` evaluates ``rec(rec)`` = ``core(core)``
    again, which is the same function ``f``. The thunk keeps evaluation
    lazy: under strict evaluation ``body(rec(rec))`` would unroll forever
    before the first call.

    Typing the self-referential value needs a recursive type,

        Rec[A] = (Rec[A]) -> A

    expressed here as a ``Protocol`` with a single ``__call__``.

Termination is the body's job. Nothing here limits depth; a body without
a base case ends in ``RecursionError``.
"""

import logging
from typing import Any, Callable, Dict, Protocol, TypeVar

from curryfix.utils.helpers import describe_callable

A = TypeVar('A')
A_co = TypeVar('A_co', covariant=True)
logger = logging.getLogger(__name__)


class Rec(Protocol[A_co]):
    """A function that, given itself, produces an ``A``."""

    def __call__(self, rec: 'Rec[A_co]') -> A_co: ...


class FixedPoint:
    """
    Builds recursive functions from recursion-parameterized bodies.

    Usage:
        >>> fp = FixedPoint()
        >>> fact = fp.self_app(lambda rec: lambda n: 1 if n == 0 else n * rec()(n - 1))
        >>> fact(5)
        120
        >>> fp.stats['constructions']
        1
    """

    def __init__(self, enable_logging: bool = False):
        self.stats: Dict[str, int] = {'constructions': 0}

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def self_app(self, body: Callable[[Callable[[], A]], A]) -> A:
        """
        Return the fixed point of ``body``.

        ``body`` receives a zero-argument accessor; calling it yields the
        recursive function being defined.
        """
        if not callable(body):
            raise TypeError(f"Expected callable, got {type(body).__name__}")

        def core(rec: Rec[A]) -> A:
            return body(lambda: rec(rec))

        logger.debug("self_app: constructing fixed point of %s", describe_callable(body))
        self.stats['constructions'] += 1
        return core(core)

    def self_apply(self, rec: Rec[A]) -> A:
        """
        Apply a raw self-referential function to itself: ``rec(rec)``.

        For bodies written in the explicit style, where recursion is
        spelled ``rec(rec)(...)`` inside the body:

            def ack(rec):
                return lambda m, n: n + 1 if m == 0 else ...rec(rec)(m - 1, 1)...

            self_apply(ack)(3, 4)
        """
        if not callable(rec):
            raise TypeError(f"Expected callable, got {type(rec).__name__}")
        return rec(rec)

    def fix(self, body: Callable[[Any], A]) -> A:
        """
        Eta-expanded fixed point: ``body`` receives a callable standing in
        for the function itself, so recursion reads ``self(n - 1)``.
        """
        if not callable(body):
            raise TypeError(f"Expected callable, got {type(body).__name__}")

        def unthunked(accessor: Callable[[], A]) -> A:
            return body(lambda *args, **kwargs: accessor()(*args, **kwargs))

        return self.self_app(unthunked)


_default_fixed_point = FixedPoint()


def self_app(body: Callable[[Callable[[], A]], A]) -> A:
    """
    Anonymous recursion via self-application.

    Usage:
        from curryfix import self_app

        fact = self_app(lambda rec: lambda n: 1 if n == 0 else n * rec()(n - 1))
        fact(5)   # 120
    """
    return _default_fixed_point.self_app(body)


def self_apply(rec: Rec[A]) -> A:
    """``rec(rec)`` for bodies that recurse through explicit self-application."""
    return _default_fixed_point.self_apply(rec)


def fix(body: Callable[[Any], A]) -> A:
    """
    Fixed point with a direct self reference.

    Usage:
        from curryfix import fix

        fact = fix(lambda self: lambda n: 1 if n == 0 else n * self(n - 1))
    """
    return _default_fixed_point.fix(body)
