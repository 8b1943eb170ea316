"""
Operator syntax over a EuclideanRing instance.

`EuclideanOps(value, algebra)` gives infix call sites: `//` forwards to
quot, `%` to mod and `divmod()` to quotmod. A plain int on the right is
first injected with the algebra's `from_int`. The module-level functions
forward to an explicit algebra or, when none is given, to the default
registry's instance for the type of the left operand.

Nothing here adds semantics of its own.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Tuple, TypeVar

from .capabilities import EuclideanRing
from .registry import resolve_for

T = TypeVar("T")


def _algebra(a: Any, algebra: Optional[EuclideanRing]) -> EuclideanRing:
    return algebra if algebra is not None else resolve_for(a, EuclideanRing)


class EuclideanOps(Generic[T]):
    """Infix wrapper: EuclideanOps(a, ev) // b == ev.quot(a, b)."""

    __slots__ = ("value", "algebra")

    def __init__(self, value: T, algebra: Optional[EuclideanRing] = None):
        self.value = value
        self.algebra = _algebra(value, algebra)

    def _rhs(self, rhs: Any) -> T:
        if isinstance(rhs, EuclideanOps):
            return rhs.value
        if isinstance(rhs, int) and not isinstance(rhs, bool):
            return self.algebra.from_int(rhs)
        return rhs

    def __floordiv__(self, rhs: Any) -> T:
        return self.algebra.quot(self.value, self._rhs(rhs))

    def __mod__(self, rhs: Any) -> T:
        return self.algebra.mod(self.value, self._rhs(rhs))

    def __divmod__(self, rhs: Any) -> Tuple[T, T]:
        return self.algebra.quotmod(self.value, self._rhs(rhs))

    def __repr__(self) -> str:
        return f"EuclideanOps({self.value!r}, {self.algebra!r})"


def syntax(algebra: EuclideanRing):
    """Return a wrapper factory bound to `algebra`: ops = syntax(ev); ops(a) // b."""
    def wrap(value):
        return EuclideanOps(value, algebra)
    return wrap


def quot(a: T, b: T, algebra: Optional[EuclideanRing] = None) -> T:
    return _algebra(a, algebra).quot(a, b)


def mod(a: T, b: T, algebra: Optional[EuclideanRing] = None) -> T:
    return _algebra(a, algebra).mod(a, b)


def quotmod(a: T, b: T, algebra: Optional[EuclideanRing] = None) -> Tuple[T, T]:
    return _algebra(a, algebra).quotmod(a, b)


def gcd(a: T, b: T, algebra: Optional[EuclideanRing] = None) -> T:
    return _algebra(a, algebra).gcd(a, b)


def lcm(a: T, b: T, algebra: Optional[EuclideanRing] = None) -> T:
    return _algebra(a, algebra).lcm(a, b)


__all__ = [
    "EuclideanOps",
    "syntax",
    "quot",
    "mod",
    "quotmod",
    "gcd",
    "lcm",
]
