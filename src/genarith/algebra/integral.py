"""
Integer algebras: native fixed-width ints and arbitrary-precision int.

- Int32Algebra / Int64Algebra operate on numpy.int32 / numpy.int64 values
  with two's complement wrap-around. Arithmetic is carried out on Python ints
  and wrapped back to the width, so no numpy overflow warnings are emitted.
- quot/mod are floor division and remainder (Python semantics), so
  a == quot(a, b) * b + mod(a, b) and the remainder takes the divisor's sign.
- gcd runs Euclid on the magnitudes at arbitrary precision and casts the
  result back; the one value that does not fit, gcd(MIN, 0) or gcd(MIN, MIN),
  wraps to MIN.
- Division by zero raises ZeroDivisionError, as for Python ints.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from ..core.constants import INT32_BITS, INT64_BITS
from .capabilities import EuclideanRing, Order, Signed


def wrap_int(n: int, bits: int) -> int:
    """Two's complement wrap of n into a signed `bits`-wide integer."""
    mask = (1 << bits) - 1
    n &= mask
    if n >> (bits - 1):
        return n - (1 << bits)
    return n


# ----------------------------
# Fixed-width native integers
# ----------------------------

class _FixedWidthIntAlgebra(EuclideanRing, Order, Signed):
    """Shared implementation for the numpy fixed-width signed integers."""

    bits: int
    dtype: type

    def _box(self, n: int):
        return self.dtype(wrap_int(n, self.bits))

    # Ring
    def zero(self):
        return self.dtype(0)

    def one(self):
        return self.dtype(1)

    def from_int(self, n: int):
        return self._box(int(n))

    def plus(self, a, b):
        return self._box(int(a) + int(b))

    def minus(self, a, b):
        return self._box(int(a) - int(b))

    def times(self, a, b):
        return self._box(int(a) * int(b))

    def negate(self, a):
        return self._box(-int(a))

    def is_zero(self, a) -> bool:
        return int(a) == 0

    # EuclideanRing
    def quot(self, a, b):
        return self._box(int(a) // int(b))

    def mod(self, a, b):
        return self._box(int(a) % int(b))

    def quotmod(self, a, b) -> Tuple:
        q, r = divmod(int(a), int(b))
        return self._box(q), self._box(r)

    def gcd(self, a, b):
        return self._box(math.gcd(int(a), int(b)))

    # Order / Signed
    def compare(self, a, b) -> int:
        x, y = int(a), int(b)
        return (x > y) - (x < y)

    def abs(self, a):
        return self._box(abs(int(a)))

    def signum(self, a) -> int:
        x = int(a)
        return (x > 0) - (x < 0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Int32Algebra(_FixedWidthIntAlgebra):
    bits = INT32_BITS
    dtype = np.int32


class Int64Algebra(_FixedWidthIntAlgebra):
    bits = INT64_BITS
    dtype = np.int64


# ----------------------------
# Arbitrary-precision integers
# ----------------------------

class BigIntAlgebra(EuclideanRing, Order, Signed):
    """Python int; gcd forwards to math.gcd (always non-negative)."""

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def from_int(self, n: int) -> int:
        return int(n)

    def plus(self, a: int, b: int) -> int:
        return a + b

    def minus(self, a: int, b: int) -> int:
        return a - b

    def times(self, a: int, b: int) -> int:
        return a * b

    def negate(self, a: int) -> int:
        return -a

    def pow(self, a: int, n: int) -> int:
        if n < 0:
            raise ValueError(f"BigIntAlgebra.pow expects n >= 0, got {n}")
        return a ** n

    def quot(self, a: int, b: int) -> int:
        return a // b

    def mod(self, a: int, b: int) -> int:
        return a % b

    def quotmod(self, a: int, b: int) -> Tuple[int, int]:
        return divmod(a, b)

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def compare(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def abs(self, a: int) -> int:
        return abs(a)

    def signum(self, a: int) -> int:
        return (a > 0) - (a < 0)

    def __repr__(self) -> str:
        return "BigIntAlgebra()"


__all__ = [
    "wrap_int",
    "Int32Algebra",
    "Int64Algebra",
    "BigIntAlgebra",
]
