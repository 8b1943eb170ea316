"""
Complex numbers over any scalar type T with a Fractional + Trig algebra.

- The scalar algebra travels with the value (`algebra`, excluded from
  equality and hashing); when omitted it is resolved from the default
  registry by the type of the real part.
- `//` is the Gaussian-integer quotient: the exact quotient with each
  component rounded to the nearest whole value (ties to even). The matching
  remainder `a - (a // b) * b` then satisfies |r| <= |b| / sqrt(2), which is
  what lets the Euclidean algorithm make progress over complex values.
- Division by a zero Complex is not guarded: the scalar type's own
  zero-division behaviour surfaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Tuple, TypeVar

T = TypeVar("T")


def _default_algebra(x):
    # Deferred: the registry imports this module.
    from ..algebra.registry import default_registry
    from ..algebra.capabilities import Fractional

    return default_registry().resolve(type(x), Fractional)


@dataclass(frozen=True)
class Complex(Generic[T]):
    """Complex value real + imag*i over a scalar type T."""
    real: T
    imag: T
    algebra: Any = field(default=None, compare=False, repr=False, hash=False)

    def __post_init__(self):
        if self.algebra is None:
            object.__setattr__(self, "algebra", _default_algebra(self.real))

    # ------------- constructors -------------

    @classmethod
    def of(cls, real: T, imag: T = None, algebra: Any = None) -> "Complex[T]":
        if algebra is None:
            algebra = _default_algebra(real)
        if imag is None:
            imag = algebra.zero()
        return cls(real, imag, algebra)

    @classmethod
    def from_polar(cls, magnitude: T, angle: T, algebra: Any = None) -> "Complex[T]":
        if algebra is None:
            algebra = _default_algebra(magnitude)
        return cls(
            magnitude * algebra.cos(angle),
            magnitude * algebra.sin(angle),
            algebra,
        )

    def _make(self, real: T, imag: T) -> "Complex[T]":
        return Complex(real, imag, self.algebra)

    def _lift(self, x):
        if isinstance(x, Complex):
            return x
        if isinstance(x, bool):
            return NotImplemented
        if isinstance(x, int):
            return self._make(self.algebra.from_int(x), self.algebra.zero())
        if isinstance(x, type(self.real)):
            return self._make(x, self.algebra.zero())
        return NotImplemented

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        z = self.algebra.zero()
        return self.real == z and self.imag == z

    def is_real(self) -> bool:
        return self.imag == self.algebra.zero()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other: object) -> bool:
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        return self.real == o.real and self.imag == o.imag

    def __hash__(self) -> int:
        if self.is_real():
            return hash(self.real)
        return hash((self.real, self.imag))

    # ------------- magnitude / angle -------------

    def norm(self) -> T:
        """Squared magnitude real**2 + imag**2."""
        return self.real * self.real + self.imag * self.imag

    def abs(self) -> T:
        return self.algebra.sqrt(self.norm())

    def __abs__(self) -> T:
        return self.abs()

    def arg(self) -> T:
        return self.algebra.atan2(self.imag, self.real)

    def polar(self) -> Tuple[T, T]:
        return self.abs(), self.arg()

    def conjugate(self) -> "Complex[T]":
        return self._make(self.real, -self.imag)

    # ------------- arithmetic -------------

    def __neg__(self) -> "Complex[T]":
        return self._make(-self.real, -self.imag)

    def __pos__(self) -> "Complex[T]":
        return self

    def __add__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        return self._make(self.real + o.real, self.imag + o.imag)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        return self._make(self.real - o.real, self.imag - o.imag)

    def __rsub__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        return o - self

    def __mul__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        a, b, c, d = self.real, self.imag, o.real, o.imag
        return self._make(a * c - b * d, a * d + b * c)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        a, b, c, d = self.real, self.imag, o.real, o.imag
        # Smith's algorithm: scale by the larger divisor component.
        if abs(c) >= abs(d):
            r = d / c
            den = c + d * r
            return self._make((a + b * r) / den, (b - a * r) / den)
        r = c / d
        den = c * r + d
        return self._make((a * r + b) / den, (b * r - a) / den)

    def __rtruediv__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        return o / self

    def reciprocal(self) -> "Complex[T]":
        return self._make(self.algebra.one(), self.algebra.zero()) / self

    def quot(self, other) -> "Complex[T]":
        """Gaussian-integer quotient: nearest whole components of self / other."""
        q = self / other
        return self._make(self.algebra.round(q.real), self.algebra.round(q.imag))

    def __floordiv__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        return self.quot(o)

    def __mod__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        return self - self.quot(o) * o

    def __divmod__(self, other):
        o = self._lift(other)
        if o is NotImplemented:
            return NotImplemented
        q = self.quot(o)
        return q, self - q * o

    def __pow__(self, k: int) -> "Complex[T]":
        if not isinstance(k, int):
            return NotImplemented
        if k < 0:
            return self.reciprocal() ** (-k)
        result = self._make(self.algebra.one(), self.algebra.zero())
        base = self
        while k:
            if k & 1:
                result = result * base
            base = base * base
            k >>= 1
        return result

    # ------------- display -------------

    def __str__(self) -> str:
        return f"({self.real} + {self.imag}i)"


__all__ = [
    "Complex",
]
