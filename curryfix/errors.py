"""
Arity Errors
============

Typed errors raised when a declared arity and the arguments actually
supplied disagree.

All of them derive from ``TypeError``, which is what Python itself raises
for a call with the wrong number of arguments, so ``except TypeError``
keeps working for callers that do not care about the distinction.

Hierarchy:
    ArityError
      ├── ArityMismatch      declared arity != parameter count / too few args
      └── ArityExceeded      more arguments or chain calls than allowed
            └── TooManyArguments   uncurry ran out of curry levels
"""

from typing import Optional


class ArityError(TypeError):
    """Base class for argument-count contract violations."""

    def __init__(self, expected: int, supplied: int, detail: Optional[str] = None):
        self.expected = expected
        self.supplied = supplied
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        msg = f"expected {self.expected} argument(s), got {self.supplied}"
        if self.detail:
            msg = f"{msg}: {self.detail}"
        return msg


class ArityMismatch(ArityError):
    """Declared arity does not match the function's parameter count."""


class ArityExceeded(ArityError):
    """More arguments supplied than the declared arity permits."""


class TooManyArguments(ArityExceeded):
    """A curried function ran out of levels before all arguments were fed."""
