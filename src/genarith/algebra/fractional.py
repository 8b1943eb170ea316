"""
Exact and lazily-evaluated fields: Rational and Real.

- RationalAlgebra: quot/mod are the Rational's own truncating division and
  matching remainder. gcd uses the unit-floor policy on |a|, |b|, compared
  against one with `compare_to_one`, and tests b == 0 with `signum`.
- RealAlgebra: quot/mod forward to Real's truncated division (`//`) and
  remainder (`%`). gcd is the default Euclid: termination relies on the
  Real's own convergence, i.e. on mod reaching a value that compares equal
  to zero at REAL_COMPARE_BITS.
"""

from __future__ import annotations

from typing import Tuple

from ..core.rational import Rational
from ..core.real import Real
from .capabilities import Fractional
from .euclid import unit_floor_gcd


class RationalAlgebra(Fractional):
    def zero(self) -> Rational:
        return Rational.zero()

    def one(self) -> Rational:
        return Rational.one()

    def from_int(self, n: int) -> Rational:
        return Rational(int(n))

    def plus(self, a: Rational, b: Rational) -> Rational:
        return a + b

    def minus(self, a: Rational, b: Rational) -> Rational:
        return a - b

    def times(self, a: Rational, b: Rational) -> Rational:
        return a * b

    def negate(self, a: Rational) -> Rational:
        return -a

    def div(self, a: Rational, b: Rational) -> Rational:
        return a / b

    def reciprocal(self, a: Rational) -> Rational:
        return a.reciprocal()

    def pow(self, a: Rational, n: int) -> Rational:
        if n < 0:
            raise ValueError(f"RationalAlgebra.pow expects n >= 0, got {n}")
        return a ** n

    def is_zero(self, a: Rational) -> bool:
        return a.is_zero()

    # EuclideanRing
    def quot(self, a: Rational, b: Rational) -> Rational:
        return a.quot(b)

    def mod(self, a: Rational, b: Rational) -> Rational:
        return a % b

    def quotmod(self, a: Rational, b: Rational) -> Tuple[Rational, Rational]:
        return divmod(a, b)

    def gcd(self, a: Rational, b: Rational) -> Rational:
        return unit_floor_gcd(
            abs(a),
            abs(b),
            below_one=lambda x: x.compare_to_one() < 0,
            is_zero=lambda x: x.signum() == 0,
            mod=self.mod,
            one=Rational.one(),
        )

    # Order / Signed
    def compare(self, a: Rational, b: Rational) -> int:
        return a.compare(b)

    def abs(self, a: Rational) -> Rational:
        return abs(a)

    def signum(self, a: Rational) -> int:
        return a.signum()

    # Fractional
    def floor(self, a: Rational) -> Rational:
        return a.floor()

    def ceil(self, a: Rational) -> Rational:
        return a.ceil()

    def round(self, a: Rational) -> Rational:
        return a.round()

    def trunc(self, a: Rational) -> Rational:
        return a.trunc()

    def to_float(self, a: Rational) -> float:
        return float(a)

    def __repr__(self) -> str:
        return "RationalAlgebra()"


class RealAlgebra(Fractional):
    def zero(self) -> Real:
        return Real.zero()

    def one(self) -> Real:
        return Real.one()

    def from_int(self, n: int) -> Real:
        return Real.from_int(n)

    def plus(self, a: Real, b: Real) -> Real:
        return a + b

    def minus(self, a: Real, b: Real) -> Real:
        return a - b

    def times(self, a: Real, b: Real) -> Real:
        return a * b

    def negate(self, a: Real) -> Real:
        return -a

    def div(self, a: Real, b: Real) -> Real:
        return a / b

    def reciprocal(self, a: Real) -> Real:
        return a.reciprocal()

    def is_zero(self, a: Real) -> bool:
        return a.is_zero()

    # EuclideanRing (gcd inherited: plain Euclid)
    def quot(self, a: Real, b: Real) -> Real:
        return a // b

    def mod(self, a: Real, b: Real) -> Real:
        return a % b

    # Order / Signed
    def compare(self, a: Real, b: Real) -> int:
        return a.compare(b)

    def abs(self, a: Real) -> Real:
        return abs(a)

    def signum(self, a: Real) -> int:
        return a.signum()

    # Fractional
    def floor(self, a: Real) -> Real:
        return a.floor()

    def ceil(self, a: Real) -> Real:
        return a.ceil()

    def round(self, a: Real) -> Real:
        return a.round()

    def trunc(self, a: Real) -> Real:
        return a.trunc()

    def to_float(self, a: Real) -> float:
        return float(a)

    def sqrt(self, a: Real) -> Real:
        return a.sqrt()

    def __repr__(self) -> str:
        return "RealAlgebra()"


__all__ = [
    "RationalAlgebra",
    "RealAlgebra",
]
