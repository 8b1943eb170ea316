"""
Complex[T] as a Field, for any scalar algebra that is Fractional and Trig.

quot is the Gaussian-integer quotient of `Complex.quot` and mod its
remainder; quotmod computes the quotient once. gcd mirrors the unit-floor
policy of the scalar domains, on magnitudes measured with the scalar order:
one if |a| < 1, a if b == 0, one if |b| < 1, otherwise continue with
(b, a % b). Unlike the real-valued domains the operands are not replaced by
their magnitudes first.
"""

from __future__ import annotations

from typing import Tuple

from ..core.complex import Complex
from .capabilities import Field, Fractional, Trig
from .euclid import unit_floor_gcd


class ComplexAlgebra(Field):
    """Field of Complex values whose components live in `scalar`."""

    def __init__(self, scalar):
        if not (isinstance(scalar, Fractional) and isinstance(scalar, Trig)):
            raise TypeError(f"Complex needs a Fractional + Trig scalar algebra, got {scalar!r}")
        self.scalar = scalar

    def _c(self, re, im) -> Complex:
        return Complex(re, im, self.scalar)

    def of(self, re, im=None) -> Complex:
        return Complex.of(re, im, self.scalar)

    def zero(self) -> Complex:
        z = self.scalar.zero()
        return self._c(z, z)

    def one(self) -> Complex:
        return self._c(self.scalar.one(), self.scalar.zero())

    def from_int(self, n: int) -> Complex:
        return self._c(self.scalar.from_int(n), self.scalar.zero())

    def plus(self, a: Complex, b: Complex) -> Complex:
        return a + b

    def minus(self, a: Complex, b: Complex) -> Complex:
        return a - b

    def times(self, a: Complex, b: Complex) -> Complex:
        return a * b

    def negate(self, a: Complex) -> Complex:
        return -a

    def div(self, a: Complex, b: Complex) -> Complex:
        return a / b

    def reciprocal(self, a: Complex) -> Complex:
        return a.reciprocal()

    def is_zero(self, a: Complex) -> bool:
        return a.is_zero()

    # EuclideanRing
    def quot(self, a: Complex, b: Complex) -> Complex:
        return a.quot(b)

    def mod(self, a: Complex, b: Complex) -> Complex:
        return a % b

    def quotmod(self, a: Complex, b: Complex) -> Tuple[Complex, Complex]:
        return divmod(a, b)

    def gcd(self, a: Complex, b: Complex) -> Complex:
        f = self.scalar
        one = f.one()
        return unit_floor_gcd(
            a,
            b,
            below_one=lambda z: f.lt(z.abs(), one),
            is_zero=lambda z: z.is_zero(),
            mod=self.mod,
            one=self.one(),
        )

    def __repr__(self) -> str:
        return f"ComplexAlgebra({self.scalar!r})"


__all__ = [
    "ComplexAlgebra",
]
