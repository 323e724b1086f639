"""
Curry Transform
===============

Mechanical conversion between the two ways of passing ``n`` arguments:

    uncurried:  f(a, b, c)
    curried:    g(a)(b)(c)

``curry(n, f)`` builds the curried form of an ``n``-ary function and
``uncurry(n, g)`` flattens an ``n``-level curried function back into one
that takes ``n`` positional arguments. The two are exact inverses:

    uncurry(n, curry(n, f))(*args) == f(*args)

Argument collection
-------------------
Calling the head of a chain (the object ``curry`` returns) allocates a
fresh buffer of ``n`` slots with a cursor. Each link writes one argument
at the cursor and advances it; the link that fills the last slot calls
``f`` with the buffer spread positionally.

Every link remembers its own position in the buffer. Slots below the
cursor are never rewritten, so a link whose position still equals the
cursor extends the buffer in place. A link called again after its chain
has moved on copies its prefix into a new buffer first. Partly applied
links can therefore be reused and branched freely, and independent calls
of the same head never see each other's arguments.

Supplying more arguments in one call than the chain has slots left raises
``ArityExceeded`` rather than silently overrunning or ignoring them.
"""

import functools
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from curryfix.errors import ArityExceeded, ArityMismatch, TooManyArguments
from curryfix.utils.helpers import accepts_positional, describe_callable, positional_arity

R = TypeVar('R')
logger = logging.getLogger(__name__)

_EMPTY = object()


@dataclass
class _CurryState:
    """Argument buffer shared by the links of one chain."""
    arity: int
    buffer: List[Any]
    cursor: int = 0

    @classmethod
    def starting_with(cls, arity: int, prefix: Sequence[Any]) -> '_CurryState':
        buffer = list(prefix) + [_EMPTY] * (arity - len(prefix))
        return cls(arity, buffer, len(prefix))


class CurriedChain(Generic[R]):
    """
    One unary link in a curried call chain.

    The head of a chain has no state of its own; every call to it starts a
    new buffer. Links further down are bound to the buffer of the chain
    that produced them, at the position they were created.

    Usage:
        >>> add3 = curry(3, lambda a, b, c: a + b + c)
        >>> add3(1)(2)(3)
        6
        >>> step = add3(10)
        >>> step
        <CurriedChain <lambda> 1/3>
        >>> step(1)(1), step(2)(2)
        (12, 14)
    """

    __slots__ = ('arity', 'func', '_state', '_position')

    def __init__(
        self,
        arity: int,
        func: Callable[..., R],
        state: Optional[_CurryState] = None,
        position: int = 0,
    ):
        self.arity = arity
        self.func = func
        self._state = state
        self._position = position

    def __call__(self, *args: Any) -> Any:
        if len(args) != 1:
            supplied = self._position + len(args)
            if supplied > self.arity:
                logger.debug(
                    "Over-application of %s: %d argument(s) for %d slot(s)",
                    describe_callable(self.func), supplied, self.arity,
                )
                raise ArityExceeded(
                    self.arity,
                    supplied,
                    f"curried chain for {describe_callable(self.func)} "
                    f"has {self.remaining} slot(s) left",
                )
            raise TypeError(
                f"curried link takes exactly one argument ({len(args)} given)"
            )

        state = self._state
        if state is None or state.cursor != self._position:
            if state is not None:
                logger.debug(
                    "Branching chain for %s at position %d",
                    describe_callable(self.func), self._position,
                )
            state = _CurryState.starting_with(self.arity, self.collected)

        state.buffer[state.cursor] = args[0]
        state.cursor += 1

        if state.cursor == self.arity:
            logger.debug("Chain for %s complete, invoking", describe_callable(self.func))
            return self.func(*state.buffer)
        return CurriedChain(self.arity, self.func, state, state.cursor)

    @property
    def collected(self) -> Tuple[Any, ...]:
        """Arguments this link has been given so far."""
        if self._state is None:
            return ()
        return tuple(self._state.buffer[:self._position])

    @property
    def remaining(self) -> int:
        """Arguments still needed before the wrapped function runs."""
        return self.arity - self._position

    def __repr__(self):
        return (
            f"<CurriedChain {describe_callable(self.func)} "
            f"{self._position}/{self.arity}>"
        )


class CurryTransform:
    """
    Curry / uncurry engine with optional signature checking.

    When ``check_signatures`` is on, ``curry`` compares the declared arity
    against what ``inspect.signature`` reports and raises ``ArityMismatch``
    up front. Callables without an introspectable signature are accepted
    unchecked and counted in ``stats['signature_checks_skipped']``.

    Usage:
        >>> transform = CurryTransform()
        >>> g = transform.curry(2, pow)
        >>> g(2)(10)
        1024
        >>> transform.uncurry(2, g)(3, 2)
        9
    """

    CHECK_SIGNATURES = True

    def __init__(self, check_signatures: Optional[bool] = None, enable_logging: bool = False):
        self.check_signatures = (
            self.CHECK_SIGNATURES if check_signatures is None else check_signatures
        )
        self.stats: Dict[str, int] = {
            'curried': 0,
            'uncurried': 0,
            'signature_checks_skipped': 0,
        }

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def curry(self, arity: int, func: Callable[..., R]) -> Any:
        """
        Convert an ``arity``-ary function into a chain of unary calls.

        With ``arity == 0`` there is nothing to collect, so ``func`` is
        called right away and its result returned.
        """
        _validate_arity(arity)
        if not callable(func):
            raise TypeError(f"Expected callable, got {type(func).__name__}")
        self._check_signature(arity, func)
        self.stats['curried'] += 1

        if arity == 0:
            logger.debug("curry(0, %s): invoking immediately", describe_callable(func))
            return func()

        logger.debug("curry(%d, %s)", arity, describe_callable(func))
        return CurriedChain(arity, func)

    def uncurry(self, arity: int, curried: Any) -> Callable[..., Any]:
        """
        Convert an ``arity``-level curried function into one taking
        ``arity`` positional arguments.

        ``uncurry(0, value)`` returns a no-argument function yielding
        ``value``, which is what ``curry(0, f)`` produced.
        """
        _validate_arity(arity)
        if arity > 0 and not callable(curried):
            raise TypeError(f"Expected callable, got {type(curried).__name__}")
        if (self.check_signatures and isinstance(curried, CurriedChain)
                and curried.remaining != arity):
            raise ArityMismatch(
                arity,
                curried.remaining,
                f"{curried!r} has {curried.remaining} curry level(s) left",
            )
        self.stats['uncurried'] += 1
        name = describe_callable(curried)

        def uncurried(*args):
            if len(args) > arity:
                raise ArityExceeded(arity, len(args), f"uncurried {name}")
            if len(args) < arity:
                raise ArityMismatch(arity, len(args), f"uncurried {name}")

            result = curried
            for level, arg in enumerate(args):
                if not callable(result):
                    logger.debug(
                        "uncurry(%d, %s): ran out of curry levels after %d",
                        arity, name, level,
                    )
                    raise TooManyArguments(
                        arity,
                        level + 1,
                        f"{name} has only {level} curry level(s), "
                        f"got non-callable {type(result).__name__}",
                    )
                result = result(arg)
            return result

        if callable(curried):
            functools.update_wrapper(uncurried, curried, updated=())
        # Takes precedence over __wrapped__ in inspect.signature.
        uncurried.__signature__ = inspect.Signature([
            inspect.Parameter(f'arg{i}', inspect.Parameter.POSITIONAL_ONLY)
            for i in range(arity)
        ])
        uncurried.arity = arity
        return uncurried

    def _check_signature(self, arity: int, func: Callable) -> None:
        if not self.check_signatures:
            return
        ok = accepts_positional(func, arity)
        if ok is None:
            self.stats['signature_checks_skipped'] += 1
            return
        if not ok:
            minimum, maximum = positional_arity(func)
            actual = minimum if maximum in (None, -1) else maximum
            raise ArityMismatch(
                arity,
                actual,
                f"{describe_callable(func)} cannot take {arity} positional argument(s)",
            )


def _validate_arity(arity: int) -> None:
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise TypeError(f"arity must be an int, got {type(arity).__name__}")
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")


_default_transform = CurryTransform()


def curry(arity: int, func: Callable[..., R]) -> Any:
    """
    Curry ``func`` over ``arity`` positional arguments.

    Usage:
        from curryfix import curry

        fib = curry(3, fib_internal)
        fib(5)(0)(1)
    """
    return _default_transform.curry(arity, func)


def uncurry(arity: int, curried: Any) -> Callable[..., Any]:
    """
    Flatten an ``arity``-level curried function.

    Usage:
        from curryfix import uncurry

        uncurry(3, fib_internal_c)(5, 0, 1)
    """
    return _default_transform.uncurry(arity, curried)
