"""
Demonstrations
==============

Worked examples for the two techniques, each a plain call site of the
public API:

  - accumulator Fibonacci in uncurried, hand-curried and curry()-built
    forms, plus round-trips through uncurry()
  - factorial and max-of-naturals built with self_app()
  - factorial and Ackermann written in the explicit ``rec(rec)`` style and
    closed with self_apply()

Run ``python -m curryfix.demos`` to print every example.
"""

import sys
from typing import Callable, Iterator, Tuple

from curryfix.currying import curry, uncurry
from curryfix.recursive import self_app, self_apply


# ---------- Fibonacci ----------

def fib_internal(count: int, fib_last_last: int, fib_last: int) -> int:
    """Fibonacci with two accumulators; ``fib_internal(n, 0, 1)`` is F(n+1)."""
    if count == 0:
        return fib_last
    return fib_internal(count - 1, fib_last, fib_last_last + fib_last)


def fib_internal_c(count: int) -> Callable[[int], Callable[[int], int]]:
    """Hand-curried ``fib_internal``."""
    return lambda fib_last_last: lambda fib_last: (
        fib_last if count == 0
        else fib_internal_c(count - 1)(fib_last)(fib_last_last + fib_last)
    )


def fib_internal_cc(count: int) -> Callable[[int], Callable[[int], int]]:
    """Hand-curried, choosing the base case as soon as ``count`` is known."""
    if count == 0:
        return lambda _: lambda fib_last: fib_last
    return lambda fib_last_last: lambda fib_last: (
        fib_internal_cc(count - 1)(fib_last)(fib_last_last + fib_last)
    )


def fibonacci(n: int) -> int:
    return fib_internal(n, 0, 1)


# ---------- Anonymous recursion ----------

factorial = self_app(lambda rec: lambda n: 1 if n == 0 else n * rec()(n - 1))

max_nat = self_app(
    lambda rec: lambda m, n: (
        n if m == 0
        else m if n == 0
        else 1 + rec()(m - 1, n - 1)
    )
)


def raw_factorial(rec):
    """Factorial body that recurses by applying ``rec`` to itself."""
    return lambda n: 1 if n == 0 else n * rec(rec)(n - 1)


def ack(rec):
    """Ackermann body; the first parameter is the self-application handle."""
    def a(m: int, n: int) -> int:
        if m == 0:
            return n + 1
        if n == 0:
            return rec(rec)(m - 1, 1)
        return rec(rec)(m - 1, rec(rec)(m, n - 1))
    return a


# ---------- Runner ----------

def demo_lines() -> Iterator[Tuple[str, object]]:
    """Yield ``(label, value)`` for every example."""
    for c in range(2, 6):
        yield f"fib_internal({c}, 0, 1)", fib_internal(c, 0, 1)
    for c in range(6):
        yield f"fib_internal_c({c})(0)(1)", fib_internal_c(c)(0)(1)
    for c in range(6):
        yield f"fib_internal_cc({c})(0)(1)", fib_internal_cc(c)(0)(1)
    for c in range(6):
        yield f"curry(3, fib_internal)({c})(0)(1)", curry(3, fib_internal)(c)(0)(1)
    for c in range(2, 6):
        yield f"uncurry(3, fib_internal_c)({c}, 0, 1)", uncurry(3, fib_internal_c)(c, 0, 1)
    for c in range(2, 6):
        yield (
            f"uncurry(3, curry(3, fib_internal))({c}, 0, 1)",
            uncurry(3, curry(3, fib_internal))(c, 0, 1),
        )
    yield "self_apply(raw_factorial)(5)", self_apply(raw_factorial)(5)
    yield "factorial(5)", factorial(5)
    yield "max_nat(10, 6)", max_nat(10, 6)
    yield "self_apply(ack)(3, 4)", self_apply(ack)(3, 4)


def main(out=None) -> int:
    out = out or sys.stdout
    for label, value in demo_lines():
        print(f"{label:<45} {value}", file=out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
