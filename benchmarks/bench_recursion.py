"""
╔════════════════════════════════════════════════════════════════════════════╗
║  curryfix Benchmark Suite                                                  ║
║                                                                            ║
║  Benchmarks:                                                               ║
║   1. Named recursion vs self_app vs fix vs explicit self_apply              ║
║   2. curry() chain cost by arity vs direct calls                            ║
║   3. Deepest factorial reachable before RecursionError                      ║
╚════════════════════════════════════════════════════════════════════════════╝
"""

import os
import statistics
import sys

# Ensure curryfix is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from curryfix import curry, fix, self_app, self_apply, uncurry
from curryfix.demos import raw_factorial
from curryfix.utils.helpers import Timer, format_ns


# ═══════════════════════════════════════════════════════════════════
#  Benchmark Targets
# ═══════════════════════════════════════════════════════════════════

def named_factorial(n):
    return 1 if n == 0 else n * named_factorial(n - 1)


accessor_factorial = self_app(lambda rec: lambda n: 1 if n == 0 else n * rec()(n - 1))
direct_factorial = fix(lambda self: lambda n: 1 if n == 0 else n * self(n - 1))
explicit_factorial = self_apply(raw_factorial)


def add(*args):
    return sum(args)


# ═══════════════════════════════════════════════════════════════════
#  Timing Utilities
# ═══════════════════════════════════════════════════════════════════

def time_call(func, iterations=2000):
    """Median time of one ``func()`` call over 5 rounds, in ns."""
    rounds = []
    for _ in range(5):
        with Timer() as t:
            for _ in range(iterations):
                func()
        rounds.append(t.elapsed_ns / iterations)
    return statistics.median(rounds)


def max_depth(func, limit=100_000):
    """Largest n for which func(n) returns, found by doubling then bisecting."""
    lo, hi = 0, 1
    while hi <= limit:
        try:
            func(hi)
        except RecursionError:
            break
        lo, hi = hi, hi * 2
    while lo + 1 < hi:
        mid = (lo + hi) // 2
        try:
            func(mid)
            lo = mid
        except RecursionError:
            hi = mid
    return lo


def run_benchmarks():
    print("=" * 72)
    print("  curryfix BENCHMARKS")
    print("=" * 72)
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 1: Recursion styles
    # ─────────────────────────────────────────────────────────
    print("  [1] factorial(50) by recursion style")
    styles = [
        ("named", named_factorial),
        ("self_app", accessor_factorial),
        ("fix", direct_factorial),
        ("self_apply", explicit_factorial),
    ]
    baseline = time_call(lambda: named_factorial(50))
    for name, func in styles:
        ns = time_call(lambda: func(50))
        print(f"  {name:<14} {format_ns(ns):>12} {ns / baseline:>8.2f}x")
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 2: Curry chain cost
    # ─────────────────────────────────────────────────────────
    print("  [2] curry/uncurry overhead by arity")
    for arity in (1, 2, 4, 8):
        args = tuple(range(arity))
        chain = curry(arity, add)
        flat = uncurry(arity, chain)

        def feed(chain=chain, args=args):
            result = chain
            for a in args:
                result = result(a)
            return result

        direct = time_call(lambda: add(*args))
        chained = time_call(feed)
        round_trip = time_call(lambda: flat(*args))
        print(
            f"  arity={arity:<3} direct {format_ns(direct):>10}"
            f"  chain {format_ns(chained):>10}  uncurry {format_ns(round_trip):>10}"
        )
    print()

    # ─────────────────────────────────────────────────────────
    #  Benchmark 3: Stack depth
    # ─────────────────────────────────────────────────────────
    print(f"  [3] deepest factorial (recursion limit {sys.getrecursionlimit()})")
    for name, func in styles:
        print(f"  {name:<14} {max_depth(func):>8}")
    print()
    print("=" * 72)


if __name__ == "__main__":
    run_benchmarks()
