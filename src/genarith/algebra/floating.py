"""
Approximate-domain algebras: binary floats and arbitrary-precision Decimal.

quot/mod:
- binary floats: mod = fmod(a, b) (truncated remainder, sign of a),
  quot = (a - fmod(a, b)) / b, an integral float rounded toward zero.
- Decimal: quot = a // b (truncating divide_int), mod = a % b (truncated
  remainder), both under the instance's context.

gcd is not the textbook Euclid here: on |a|, |b| it returns one as soon as
either operand is below one, and `a` when b == 0. Below the unit there is
no common factor to find: gcd(0.5, 3.0) == 1.0.
gcd on inf or nan does not terminate: the remainder is nan and no check fires.

Division by zero is whatever the representation does: ZeroDivisionError for
float, inf/nan (with a numpy RuntimeWarning) for numpy.float32, and the
context's DivisionByZero / InvalidOperation signal for Decimal.
"""

from __future__ import annotations

import math
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    getcontext,
)
from typing import Optional, Tuple

import numpy as np

from .capabilities import Fractional, Trig
from .euclid import unit_floor_gcd


# ----------------------------
# Binary floating point
# ----------------------------

class Float64Algebra(Fractional, Trig):
    """Python float (IEEE-754 binary64)."""

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def from_int(self, n: int) -> float:
        return float(n)

    def plus(self, a: float, b: float) -> float:
        return a + b

    def minus(self, a: float, b: float) -> float:
        return a - b

    def times(self, a: float, b: float) -> float:
        return a * b

    def negate(self, a: float) -> float:
        return -a

    def div(self, a: float, b: float) -> float:
        return a / b

    # EuclideanRing
    def quot(self, a: float, b: float) -> float:
        return (a - self.mod(a, b)) / b

    def mod(self, a: float, b: float) -> float:
        if b == 0.0:
            raise ZeroDivisionError("float modulo")
        return math.fmod(a, b)

    def gcd(self, a: float, b: float) -> float:
        return unit_floor_gcd(
            abs(a),
            abs(b),
            below_one=lambda x: x < 1.0,
            is_zero=lambda x: x == 0.0,
            mod=self.mod,
            one=1.0,
        )

    # Order / Signed
    def compare(self, a: float, b: float) -> int:
        return (a > b) - (a < b)

    def abs(self, a: float) -> float:
        return abs(a)

    def signum(self, a: float) -> int:
        return (a > 0.0) - (a < 0.0)

    # Fractional
    def floor(self, a: float) -> float:
        return float(math.floor(a))

    def ceil(self, a: float) -> float:
        return float(math.ceil(a))

    def round(self, a: float) -> float:
        return float(round(a))

    def trunc(self, a: float) -> float:
        return float(math.trunc(a))

    def to_float(self, a: float) -> float:
        return a

    # Trig
    def sqrt(self, a: float) -> float:
        return math.sqrt(a)

    def atan2(self, y: float, x: float) -> float:
        return math.atan2(y, x)

    def sin(self, a: float) -> float:
        return math.sin(a)

    def cos(self, a: float) -> float:
        return math.cos(a)

    def exp(self, a: float) -> float:
        return math.exp(a)

    def log(self, a: float) -> float:
        return math.log(a)

    def pi(self) -> float:
        return math.pi

    def __repr__(self) -> str:
        return "Float64Algebra()"


class Float32Algebra(Fractional, Trig):
    """numpy.float32 (IEEE-754 binary32); every result is a numpy.float32."""

    _one = np.float32(1.0)
    _zero = np.float32(0.0)

    def zero(self) -> np.float32:
        return self._zero

    def one(self) -> np.float32:
        return self._one

    def from_int(self, n: int) -> np.float32:
        return np.float32(n)

    def plus(self, a, b) -> np.float32:
        return np.float32(a + b)

    def minus(self, a, b) -> np.float32:
        return np.float32(a - b)

    def times(self, a, b) -> np.float32:
        return np.float32(a * b)

    def negate(self, a) -> np.float32:
        return np.float32(-a)

    def div(self, a, b) -> np.float32:
        return np.float32(np.float32(a) / np.float32(b))

    # EuclideanRing
    def quot(self, a, b) -> np.float32:
        a, b = np.float32(a), np.float32(b)
        return np.float32((a - np.fmod(a, b)) / b)

    def mod(self, a, b) -> np.float32:
        return np.float32(np.fmod(np.float32(a), np.float32(b)))

    def gcd(self, a, b) -> np.float32:
        return unit_floor_gcd(
            np.float32(abs(a)),
            np.float32(abs(b)),
            below_one=lambda x: x < self._one,
            is_zero=lambda x: x == self._zero,
            mod=self.mod,
            one=self._one,
        )

    # Order / Signed
    def compare(self, a, b) -> int:
        return int(a > b) - int(a < b)

    def abs(self, a) -> np.float32:
        return np.float32(abs(a))

    def signum(self, a) -> int:
        return int(a > 0) - int(a < 0)

    # Fractional
    def floor(self, a) -> np.float32:
        return np.float32(np.floor(a))

    def ceil(self, a) -> np.float32:
        return np.float32(np.ceil(a))

    def round(self, a) -> np.float32:
        # np.rint rounds half to even.
        return np.float32(np.rint(a))

    def trunc(self, a) -> np.float32:
        return np.float32(np.trunc(a))

    def to_float(self, a) -> float:
        return float(a)

    # Trig
    def sqrt(self, a) -> np.float32:
        return np.float32(np.sqrt(np.float32(a)))

    def atan2(self, y, x) -> np.float32:
        return np.float32(np.arctan2(np.float32(y), np.float32(x)))

    def sin(self, a) -> np.float32:
        return np.float32(np.sin(np.float32(a)))

    def cos(self, a) -> np.float32:
        return np.float32(np.cos(np.float32(a)))

    def exp(self, a) -> np.float32:
        return np.float32(np.exp(np.float32(a)))

    def log(self, a) -> np.float32:
        return np.float32(np.log(np.float32(a)))

    def pi(self) -> np.float32:
        return np.float32(np.pi)

    def __repr__(self) -> str:
        return "Float32Algebra()"


# ----------------------------
# Arbitrary-precision decimal
# ----------------------------

def _decimal_pi(ctx: Context) -> Decimal:
    """pi to the context's precision (series from the decimal module docs)."""
    work = Context(prec=ctx.prec + 2)
    three = Decimal(3)
    lasts, t, s, n, na, d, da = 0, three, three, 1, 0, 0, 24
    while s != lasts:
        lasts = s
        n, na = n + na, na + 8
        d, da = d + da, da + 32
        t = work.divide(work.multiply(t, n), d)
        s = work.add(s, t)
    return ctx.plus(s)


class BigDecimalAlgebra(Fractional, Trig):
    """decimal.Decimal under an injected Context (default: the ambient one).

    sqrt/exp/log are computed by the decimal module at full precision;
    atan2/sin/cos go through binary floats and are only double-precision
    accurate.
    """

    def __init__(self, context: Optional[Context] = None):
        self.context = context

    def _ctx(self) -> Context:
        return self.context if self.context is not None else getcontext()

    def zero(self) -> Decimal:
        return Decimal(0)

    def one(self) -> Decimal:
        return Decimal(1)

    def from_int(self, n: int) -> Decimal:
        return Decimal(int(n))

    def plus(self, a: Decimal, b: Decimal) -> Decimal:
        return self._ctx().add(a, b)

    def minus(self, a: Decimal, b: Decimal) -> Decimal:
        return self._ctx().subtract(a, b)

    def times(self, a: Decimal, b: Decimal) -> Decimal:
        return self._ctx().multiply(a, b)

    def negate(self, a: Decimal) -> Decimal:
        return self._ctx().minus(a)

    def div(self, a: Decimal, b: Decimal) -> Decimal:
        return self._ctx().divide(a, b)

    def is_zero(self, a: Decimal) -> bool:
        return a.is_zero()

    # EuclideanRing
    def quot(self, a: Decimal, b: Decimal) -> Decimal:
        return self._ctx().divide_int(a, b)

    def mod(self, a: Decimal, b: Decimal) -> Decimal:
        return self._ctx().remainder(a, b)

    def quotmod(self, a: Decimal, b: Decimal) -> Tuple[Decimal, Decimal]:
        return self._ctx().divmod(a, b)

    def gcd(self, a: Decimal, b: Decimal) -> Decimal:
        one = self.one()
        return unit_floor_gcd(
            a.copy_abs(),
            b.copy_abs(),
            below_one=lambda x: x < one,
            is_zero=lambda x: self.signum(x) == 0,
            mod=self.mod,
            one=one,
        )

    # Order / Signed
    def compare(self, a: Decimal, b: Decimal) -> int:
        return int(a.compare(b))

    def abs(self, a: Decimal) -> Decimal:
        return a.copy_abs()

    def signum(self, a: Decimal) -> int:
        if a.is_zero():
            return 0
        return -1 if a.is_signed() else 1

    # Fractional
    def floor(self, a: Decimal) -> Decimal:
        return a.to_integral_value(rounding=ROUND_FLOOR)

    def ceil(self, a: Decimal) -> Decimal:
        return a.to_integral_value(rounding=ROUND_CEILING)

    def round(self, a: Decimal) -> Decimal:
        return a.to_integral_value(rounding=ROUND_HALF_EVEN)

    def trunc(self, a: Decimal) -> Decimal:
        return a.to_integral_value(rounding=ROUND_DOWN)

    def to_float(self, a: Decimal) -> float:
        return float(a)

    # Trig
    def sqrt(self, a: Decimal) -> Decimal:
        return self._ctx().sqrt(a)

    def atan2(self, y: Decimal, x: Decimal) -> Decimal:
        return self._ctx().plus(Decimal(math.atan2(float(y), float(x))))

    def sin(self, a: Decimal) -> Decimal:
        return self._ctx().plus(Decimal(math.sin(float(a))))

    def cos(self, a: Decimal) -> Decimal:
        return self._ctx().plus(Decimal(math.cos(float(a))))

    def exp(self, a: Decimal) -> Decimal:
        return self._ctx().exp(a)

    def log(self, a: Decimal) -> Decimal:
        return self._ctx().ln(a)

    def pi(self) -> Decimal:
        return _decimal_pi(self._ctx())

    def __repr__(self) -> str:
        if self.context is None:
            return "BigDecimalAlgebra()"
        return f"BigDecimalAlgebra(prec={self.context.prec})"


__all__ = [
    "Float64Algebra",
    "Float32Algebra",
    "BigDecimalAlgebra",
]
