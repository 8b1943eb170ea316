"""
Exact rational numbers: numerator/denominator pairs of arbitrary-precision ints.

- Canonical form: lowest terms, denominator > 0, zero is (0, 1).
- Canonicalisation happens on every construction (including the plain
  dataclass constructor), so gcd(|numerator|, denominator) == 1 always holds.
- A zero denominator is never constructed: ZeroDivisionError is raised, the
  same as for the built-in numeric types.
- `//` is the truncating quotient (rounds toward zero) and `%` the matching
  remainder, so a == (a // b) * b + a % b and the remainder carries the
  dividend's sign.

Decimal/Fraction bridges exist for I/O and interop; all arithmetic stays in
the integer domain.
"""

from __future__ import annotations

import math
import operator
import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Tuple, Union

from .exc import ParseError


# ----------------------------
# Integer helpers (centralised)
# ----------------------------

def _normalize(n: int, d: int) -> Tuple[int, int]:
    """Reduce n/d to lowest terms with a positive denominator."""
    if d == 0:
        raise ZeroDivisionError(f"Rational({n}, 0)")
    if n == 0:
        return 0, 1
    if d < 0:
        n, d = -n, -d
    g = math.gcd(n, d)
    if g != 1:
        n //= g
        d //= g
    return n, d


def _trunc_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero (b != 0)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


_RATIONAL_RE = re.compile(r"^\s*([+-]?\d+)\s*(?:/\s*([+-]?\d+)\s*)?$")


# ----------------------------
# Rational
# ----------------------------

@dataclass(frozen=True)
class Rational:
    """Exact fraction numerator/denominator in lowest terms."""
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        n, d = _normalize(operator.index(self.numerator), operator.index(self.denominator))
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)

    @classmethod
    def _raw(cls, n: int, d: int) -> "Rational":
        # Caller guarantees (n, d) is already canonical.
        r = object.__new__(cls)
        object.__setattr__(r, "numerator", n)
        object.__setattr__(r, "denominator", d)
        return r

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "Rational":
        return Rational._raw(0, 1)

    @staticmethod
    def one() -> "Rational":
        return Rational._raw(1, 1)

    @classmethod
    def of(cls, n: int, d: int = 1) -> "Rational":
        return cls(n, d)

    @classmethod
    def from_fraction(cls, f: Fraction) -> "Rational":
        return cls._raw(f.numerator, f.denominator)

    @classmethod
    def from_decimal(cls, x: Decimal) -> "Rational":
        """Exact conversion from a finite Decimal."""
        if x.is_nan() or x.is_infinite():
            raise ValueError(f"cannot convert {x} to Rational")
        n, d = x.as_integer_ratio()
        return cls._raw(n, d)

    @classmethod
    def from_float(cls, x: float) -> "Rational":
        """Exact conversion from a finite float (no rounding to short decimals)."""
        if not math.isfinite(x):
            raise ValueError(f"cannot convert {x} to Rational")
        n, d = float(x).as_integer_ratio()
        return cls._raw(n, d)

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse 'n', 'n/d' or a decimal literal such as '-1.25' or '3e-2'."""
        m = _RATIONAL_RE.match(text)
        if m is not None:
            n = int(m.group(1))
            d = int(m.group(2)) if m.group(2) is not None else 1
            if d == 0:
                raise ParseError(f"zero denominator in {text!r}")
            return cls(n, d)
        try:
            dec = Decimal(text.strip())
        except ArithmeticError as e:
            raise ParseError(f"not a rational literal: {text!r}") from e
        if not dec.is_finite():
            raise ParseError(f"not a finite rational literal: {text!r}")
        return cls.from_decimal(dec)

    # ------------- conversions -------------

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def as_integer_ratio(self) -> Tuple[int, int]:
        return self.numerator, self.denominator

    def to_decimal(self) -> Decimal:
        """Decimal value under the ambient context (rounded), for display/interop."""
        return Decimal(self.numerator) / Decimal(self.denominator)

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __int__(self) -> int:
        return _trunc_div(self.numerator, self.denominator)

    def __bool__(self) -> bool:
        return self.numerator != 0

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_one(self) -> bool:
        return self.numerator == 1 and self.denominator == 1

    def is_whole(self) -> bool:
        return self.denominator == 1

    def signum(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)

    def compare_to_one(self) -> int:
        """Sign of (self - 1) without building the difference."""
        n, d = self.numerator, self.denominator
        return (n > d) - (n < d)

    # ------------- comparisons (integer domain) -------------

    def _cmp_core(self, other: "Rational") -> int:
        lhs = self.numerator * other.denominator
        rhs = other.numerator * self.denominator
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self.numerator == o.numerator and self.denominator == o.denominator

    def __hash__(self) -> int:
        # Equal values hash alike across int / Fraction / Rational.
        return hash(Fraction(self.numerator, self.denominator))

    def __lt__(self, other: "Rational") -> bool:
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._cmp_core(o) < 0

    def __le__(self, other: "Rational") -> bool:
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._cmp_core(o) <= 0

    def __gt__(self, other: "Rational") -> bool:
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._cmp_core(o) > 0

    def __ge__(self, other: "Rational") -> bool:
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self._cmp_core(o) >= 0

    def compare(self, other: "Rational") -> int:
        return self._cmp_core(_coerce_strict(other))

    # ------------- arithmetic (integer domain) -------------

    def __neg__(self) -> "Rational":
        return Rational._raw(-self.numerator, self.denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        if self.numerator >= 0:
            return self
        return Rational._raw(-self.numerator, self.denominator)

    def _add(self, o: "Rational", sign: int) -> "Rational":
        n1, d1 = self.numerator, self.denominator
        n2, d2 = o.numerator * sign, o.denominator
        if d1 == d2:
            return Rational(n1 + n2, d1)
        # Knuth's trick keeps intermediates small.
        g = math.gcd(d1, d2)
        if g == 1:
            return Rational._raw(n1 * d2 + n2 * d1, d1 * d2)
        s = d1 // g
        t = n1 * (d2 // g) + n2 * s
        g2 = math.gcd(t, g)
        if g2 == 1:
            return Rational._raw(t, s * d2)
        return Rational._raw(t // g2, s * (d2 // g2))

    def __add__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        r = self._add(o, +1)
        return Rational.zero() if r.numerator == 0 else r

    __radd__ = __add__

    def __sub__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        r = self._add(o, -1)
        return Rational.zero() if r.numerator == 0 else r

    def __rsub__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return o - self

    def __mul__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        if self.numerator == 0 or o.numerator == 0:
            return Rational.zero()
        g1 = math.gcd(self.numerator, o.denominator)
        g2 = math.gcd(o.numerator, self.denominator)
        n = (self.numerator // g1) * (o.numerator // g2)
        d = (self.denominator // g2) * (o.denominator // g1)
        return Rational._raw(n, d)

    __rmul__ = __mul__

    def reciprocal(self) -> "Rational":
        if self.numerator == 0:
            raise ZeroDivisionError("reciprocal of zero Rational")
        if self.numerator < 0:
            return Rational._raw(-self.denominator, -self.numerator)
        return Rational._raw(self.denominator, self.numerator)

    def __truediv__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self * o.reciprocal()

    def __rtruediv__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return o * self.reciprocal()

    def quot(self, other: "Rational") -> "Rational":
        """Truncating quotient: the whole part of self / other, rounded toward zero."""
        o = _coerce_strict(other)
        if o.numerator == 0:
            raise ZeroDivisionError("Rational quotient by zero")
        q = _trunc_div(self.numerator * o.denominator, self.denominator * o.numerator)
        return Rational._raw(q, 1)

    def __floordiv__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self.quot(o)

    def __rfloordiv__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return o.quot(self)

    def __mod__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return self - self.quot(o) * o

    def __rmod__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        return o % self

    def __divmod__(self, other):
        o = _coerce(other)
        if o is NotImplemented:
            return NotImplemented
        q = self.quot(o)
        return q, self - q * o

    def __pow__(self, k):
        if not isinstance(k, int):
            return NotImplemented
        if k >= 0:
            return Rational._raw(self.numerator ** k, self.denominator ** k)
        return self.reciprocal() ** (-k)

    # ------------- rounding -------------

    def floor(self) -> "Rational":
        return Rational._raw(self.numerator // self.denominator, 1)

    def ceil(self) -> "Rational":
        return Rational._raw(-(-self.numerator // self.denominator), 1)

    def trunc(self) -> "Rational":
        return Rational._raw(_trunc_div(self.numerator, self.denominator), 1)

    def round(self) -> "Rational":
        """Nearest whole value, ties to even."""
        return Rational._raw(round(self.as_fraction()), 1)

    def __floor__(self) -> int:
        return self.numerator // self.denominator

    def __ceil__(self) -> int:
        return -(-self.numerator // self.denominator)

    def __trunc__(self) -> int:
        return _trunc_div(self.numerator, self.denominator)

    def __round__(self, ndigits=None):
        if ndigits is None:
            return round(self.as_fraction())
        return Rational.from_fraction(round(self.as_fraction(), ndigits))

    def limit_denominator(self, max_denominator: int = 1_000_000) -> "Rational":
        """Closest Rational with denominator at most max_denominator."""
        return Rational.from_fraction(self.as_fraction().limit_denominator(max_denominator))

    # ------------- display -------------

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


RationalLike = Union[Rational, int, Fraction]


def _coerce(x):
    if isinstance(x, Rational):
        return x
    if isinstance(x, bool):
        return NotImplemented
    if isinstance(x, int):
        return Rational._raw(x, 1)
    if isinstance(x, Fraction):
        return Rational._raw(x.numerator, x.denominator)
    return NotImplemented


def _coerce_strict(x) -> Rational:
    o = _coerce(x)
    if o is NotImplemented:
        raise TypeError(f"expected Rational, int or Fraction, got {type(x).__name__}")
    return o


__all__ = [
    "Rational",
    "RationalLike",
]
