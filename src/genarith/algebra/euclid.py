"""
Generalized Euclidean algorithm and the default derived operations.

The helpers take the algebra instance as an explicit argument so that any
instance may call them, wrap them, or bypass them with its own policy:

- `euclid(ev, a, b)`: gcd via repeated `mod`, valid whenever equality to
  zero is decidable and `mod` strictly shrinks toward zero.
- `unit_floor_gcd(a, b, ...)`: the policy for approximate domains (binary
  floats, Decimal, Rational, Complex). Below the representable unit there is
  no meaningful common factor, so the result degrades to the multiplicative
  identity. The check order (a, then b == 0, then b) is part of the contract:
  it decides which degenerate result callers observe.
- `default_quotmod`, `default_lcm`: the derived operations.

Both gcd loops run in constant stack space regardless of the number of
division steps.
"""

from __future__ import annotations

from typing import Callable, Tuple, TypeVar

T = TypeVar("T")

# Debug printing control
DEBUG_EUCLID = False

def _dbg(msg: str) -> None:
    if DEBUG_EUCLID:
        print(msg)


def euclid(ev, a: T, b: T) -> T:
    """gcd(a, b) = a if b == 0 else gcd(b, a mod b), as a loop."""
    steps = 0
    while not ev.is_zero(b):
        a, b = b, ev.mod(a, b)
        steps += 1
    _dbg(f"euclid: done in {steps} steps -> {a!r}")
    return a


def unit_floor_gcd(
    a: T,
    b: T,
    *,
    below_one: Callable[[T], bool],
    is_zero: Callable[[T], bool],
    mod: Callable[[T, T], T],
    one: T,
) -> T:
    """Euclid that stops at the unit: returns `one` once either operand drops below it.

    Callers pass magnitudes where the domain has them; the predicates are the
    domain's own ordering against its identity element.
    """
    steps = 0
    while True:
        if below_one(a):
            _dbg(f"unit_floor_gcd: a below one after {steps} steps")
            return one
        if is_zero(b):
            _dbg(f"unit_floor_gcd: b == 0 after {steps} steps -> {a!r}")
            return a
        if below_one(b):
            _dbg(f"unit_floor_gcd: b below one after {steps} steps")
            return one
        a, b = b, mod(a, b)
        steps += 1


def default_quotmod(ev, a: T, b: T) -> Tuple[T, T]:
    return ev.quot(a, b), ev.mod(a, b)


def default_lcm(ev, a: T, b: T) -> T:
    """lcm(a, b) = quot(a, gcd(a, b)) * b.

    gcd(0, 0) == 0, so lcm(0, 0) inherits the domain's zero-division behaviour.
    """
    return ev.times(ev.quot(a, ev.gcd(a, b)), b)


__all__ = [
    "euclid",
    "unit_floor_gcd",
    "default_quotmod",
    "default_lcm",
]
