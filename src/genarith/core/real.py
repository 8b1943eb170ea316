"""
Lazily evaluated real numbers.

A Real is an approximation function `approx(p) -> n` where n is an integer
with |n / 2**p - x| <= 1 / 2**p. Results are memoised per precision, and
composite values (sums, products, quotients) only evaluate their operands
when a precision is requested.

Notes:
- Comparison, equality and sign tests are decided at REAL_COMPARE_BITS:
  two values within 2**(1 - REAL_COMPARE_BITS) of each other compare equal,
  and whole-number rounding snaps to an integer within that tolerance.
- `//` is the truncated division (rounds toward zero) and `%` the matching
  remainder, a - (a // b) * b. Both are decided at REAL_COMPARE_BITS.
- Division searches for the divisor's leading bit up to REAL_MAX_BITS; a
  divisor with no nonzero bit below that bound raises ZeroDivisionError.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import Callable, Dict, Optional, Union

from . import constants
from .rational import Rational

# Debug printing control
DEBUG_REAL = False

def _dbg(msg: str) -> None:
    if DEBUG_REAL:
        print(msg)


# ----------------------------
# Integer rounding helpers
# ----------------------------

def _round_div(a: int, b: int) -> int:
    """Round a/b to nearest integer; ties go away from zero. b must be > 0."""
    if b <= 0:
        raise ValueError("_round_div expects b > 0")
    if a >= 0:
        return (a + (b // 2)) // b
    return -((-a + (b // 2)) // b)


def _shift_round(n: int, k: int) -> int:
    """Round n / 2**k to nearest for k >= 0."""
    if k == 0:
        return n
    return _round_div(n, 1 << k)


# ----------------------------
# Real
# ----------------------------

class Real:
    """Computable real number backed by a memoised approximation function."""

    __slots__ = ("_approx", "_memo")

    def __init__(self, approx: Callable[[int], int]):
        self._approx = approx
        self._memo: Dict[int, int] = {}

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "Real":
        return _ZERO

    @staticmethod
    def one() -> "Real":
        return _ONE

    @classmethod
    def from_int(cls, n: int) -> "Real":
        n = int(n)
        return cls(lambda p: n << p)

    @classmethod
    def from_rational(cls, r: Rational) -> "Real":
        n, d = r.numerator, r.denominator
        if d == 1:
            return cls.from_int(n)
        return cls(lambda p: _round_div(n << p, d))

    @classmethod
    def from_fraction(cls, f: Fraction) -> "Real":
        return cls.from_rational(Rational.from_fraction(f))

    @classmethod
    def from_decimal(cls, x: Decimal) -> "Real":
        return cls.from_rational(Rational.from_decimal(x))

    @classmethod
    def from_float(cls, x: float) -> "Real":
        return cls.from_rational(Rational.from_float(x))

    @classmethod
    def of(cls, x: "RealLike") -> "Real":
        """Lift an int, Rational, Fraction, Decimal or float into a Real."""
        if isinstance(x, Real):
            return x
        if isinstance(x, bool):
            raise TypeError("bool is not a Real operand")
        if isinstance(x, int):
            return cls.from_int(x)
        if isinstance(x, Rational):
            return cls.from_rational(x)
        if isinstance(x, Fraction):
            return cls.from_fraction(x)
        if isinstance(x, Decimal):
            return cls.from_decimal(x)
        if isinstance(x, float):
            return cls.from_float(x)
        raise TypeError(f"cannot convert {type(x).__name__} to Real")

    # ------------- approximation -------------

    def approx(self, p: int) -> int:
        """Integer n with |n / 2**p - self| <= 2**-p (p >= 0)."""
        if p < 0:
            raise ValueError("precision must be >= 0")
        n = self._memo.get(p)
        if n is None:
            n = self._approx(p)
            self._memo[p] = n
        return n

    def _leading_bits(self) -> int:
        """Smallest k (power-of-two probe) with |approx(k)| >= 4."""
        k = 0
        limit = constants.REAL_MAX_BITS
        while True:
            if abs(self.approx(k)) >= 4:
                _dbg(f"real: leading bits found at k={k}")
                return k
            if k >= limit:
                raise ZeroDivisionError(
                    f"Real has no nonzero bits within {limit} bits of precision"
                )
            k = min(max(2 * k, 8), limit)

    # ------------- conversions -------------

    def to_rational(self, bits: Optional[int] = None) -> Rational:
        """Dyadic Rational within 2**-bits of self."""
        if bits is None:
            bits = constants.REAL_COMPARE_BITS
        return Rational(self.approx(bits), 1 << bits)

    def to_decimal(self, places: int = 20) -> Decimal:
        """Decimal rounded to `places` fractional digits (exact integer scaling)."""
        p = math.ceil(places * math.log2(10)) + 4
        n = _round_div(self.approx(p) * 10 ** places, 1 << p)
        digits = tuple(int(c) for c in str(abs(n)))
        return Decimal((int(n < 0), digits, -places))

    def __float__(self) -> float:
        p = 80
        n = self.approx(p)
        # Small magnitudes need more bits to fill a 53-bit mantissa.
        while abs(n) < (1 << 60) and p < constants.REAL_MAX_BITS:
            p = min(2 * p, constants.REAL_MAX_BITS)
            n = self.approx(p)
        return float(Fraction(n, 1 << p))

    def __int__(self) -> int:
        return int(self.trunc_int())

    # ------------- sign / comparison -------------

    def signum(self) -> int:
        # |n| <= 1 at REAL_COMPARE_BITS is indistinguishable from zero.
        n = self.approx(constants.REAL_COMPARE_BITS)
        if abs(n) <= 1:
            return 0
        return 1 if n > 0 else -1

    def is_zero(self) -> bool:
        return self.signum() == 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def compare(self, other: "RealLike") -> int:
        return (self - Real.of(other)).signum()

    def __eq__(self, other: object) -> bool:
        try:
            o = Real.of(other)
        except TypeError:
            return NotImplemented
        return self.compare(o) == 0

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    # Equality is tolerance based; Real values are deliberately unhashable.
    __hash__ = None

    def __lt__(self, other: "RealLike") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "RealLike") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "RealLike") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "RealLike") -> bool:
        return self.compare(other) >= 0

    # ------------- arithmetic -------------

    def __neg__(self) -> "Real":
        x = self
        return Real(lambda p: -x.approx(p))

    def __pos__(self) -> "Real":
        return self

    def __abs__(self) -> "Real":
        x = self
        return Real(lambda p: abs(x.approx(p)))

    def __add__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        x = self
        return Real(lambda p: _shift_round(x.approx(p + 2) + y.approx(p + 2), 2))

    __radd__ = __add__

    def __sub__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return self + (-y)

    def __rsub__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return y + (-self)

    def __mul__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        x = self

        def approx(p: int) -> int:
            # |x| < mx and |y| < my; pick s so the cross error stays under 1/2 ulp.
            mx = abs(x.approx(0)) + 2
            my = abs(y.approx(0)) + 2
            s = p + (2 * (mx + my)).bit_length()
            return _shift_round(x.approx(s) * y.approx(s), 2 * s - p)

        return Real(approx)

    __rmul__ = __mul__

    def reciprocal(self) -> "Real":
        x = self

        def approx(p: int) -> int:
            k = x._leading_bits()
            s = p + 2 * k + 4
            a = x.approx(s)
            num = 1 << (p + s)
            if a < 0:
                return -_round_div(num, -a)
            return _round_div(num, a)

        return Real(approx)

    def __truediv__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return self * y.reciprocal()

    def __rtruediv__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return y * self.reciprocal()

    def __pow__(self, k: int) -> "Real":
        if not isinstance(k, int):
            return NotImplemented
        if k < 0:
            return self.reciprocal() ** (-k)
        result = _ONE
        base = self
        while k:
            if k & 1:
                result = result * base
            base = base * base
            k >>= 1
        return result

    def sqrt(self) -> "Real":
        """Square root; negative inputs raise ValueError when evaluated."""
        x = self

        def approx(p: int) -> int:
            n = x.approx(2 * p + 2)
            if n < -1:
                raise ValueError("square root of a negative Real")
            return _shift_round(math.isqrt(max(n, 0)), 1)

        return Real(approx)

    # ------------- whole-number rounding (decided at REAL_COMPARE_BITS) -------------

    def _whole_part(self):
        """Return (n, bits, m): the approximation and, if n lies within one ulp
        of a whole number m, that m (else None)."""
        bits = constants.REAL_COMPARE_BITS
        n = self.approx(bits)
        m = _shift_round(n, bits)
        if abs(n - (m << bits)) <= 1:
            return n, bits, m
        return n, bits, None

    def floor_int(self) -> int:
        n, bits, m = self._whole_part()
        return m if m is not None else n >> bits

    def ceil_int(self) -> int:
        n, bits, m = self._whole_part()
        return m if m is not None else -((-n) >> bits)

    def trunc_int(self) -> int:
        n, bits, m = self._whole_part()
        if m is not None:
            return m
        q = abs(n) >> bits
        return q if n >= 0 else -q

    def round_int(self) -> int:
        """Nearest integer, ties to even."""
        n, bits, m = self._whole_part()
        return m if m is not None else round(Fraction(n, 1 << bits))

    def floor(self) -> "Real":
        return Real.from_int(self.floor_int())

    def ceil(self) -> "Real":
        return Real.from_int(self.ceil_int())

    def trunc(self) -> "Real":
        return Real.from_int(self.trunc_int())

    def round(self) -> "Real":
        return Real.from_int(self.round_int())

    def __floor__(self) -> int:
        return self.floor_int()

    def __ceil__(self) -> int:
        return self.ceil_int()

    def __trunc__(self) -> int:
        return self.trunc_int()

    def __round__(self, ndigits=None):
        if ndigits is None:
            return self.round_int()
        return Real.from_decimal(self.to_decimal(ndigits))

    # ------------- truncated division -------------

    def quot(self, other: "RealLike") -> "Real":
        """Truncated quotient (/~): self / other rounded toward zero."""
        return (self / Real.of(other)).trunc()

    def __floordiv__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return self.quot(y)

    def __rfloordiv__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return y.quot(self)

    def __mod__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return self - self.quot(y) * y

    def __rmod__(self, other: "RealLike") -> "Real":
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        return y % self

    def __divmod__(self, other: "RealLike"):
        try:
            y = Real.of(other)
        except TypeError:
            return NotImplemented
        q = self.quot(y)
        return q, self - q * y

    # ------------- display -------------

    def __str__(self) -> str:
        return format(self.to_decimal(20).normalize(), "f")

    def __repr__(self) -> str:
        return f"Real({self})"


RealLike = Union[Real, int, Rational, Fraction, Decimal, float]

_ZERO = Real(lambda p: 0)
_ONE = Real(lambda p: 1 << p)


__all__ = [
    "Real",
    "RealLike",
]
