"""
Capability hierarchy: Semigroup -> Monoid -> Group -> Ring -> EuclideanRing -> Field.

Each capability is a stateless behaviour table bound to one concrete value
type. Instances are built once (at import of `genarith.algebra`) and never
mutated. Operations take and return plain values of that type, so algorithms
written against a capability never box their operands.

Derived operations delegate to the helper functions in `euclid`, which any
instance may call directly or bypass with its own policy.

Companion capabilities used by the algorithms:
- Eq / Order: decidable equality and a total order (`compare` -> -1, 0, 1).
- Signed: absolute value and sign.
- Fractional: a Field with an Order plus whole-number rounding.
- Trig: square root and the transcendental functions Complex needs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Optional, Tuple, TypeVar

from . import euclid as _euclid

T = TypeVar("T")
K = TypeVar("K")


# ---------------------------------------------------------------------------
# Equality and ordering
# ---------------------------------------------------------------------------

class Eq(ABC, Generic[T]):
    """Decidable equality. Defaults to the type's own `==`."""

    def eqv(self, a: T, b: T) -> bool:
        return a == b

    def neqv(self, a: T, b: T) -> bool:
        return not self.eqv(a, b)


class Order(Eq[T]):
    """Total order over T."""

    @abstractmethod
    def compare(self, a: T, b: T) -> int:
        """Negative, zero or positive as a <, ==, > b."""

    def eqv(self, a: T, b: T) -> bool:
        return self.compare(a, b) == 0

    def lt(self, a: T, b: T) -> bool:
        return self.compare(a, b) < 0

    def lteqv(self, a: T, b: T) -> bool:
        return self.compare(a, b) <= 0

    def gt(self, a: T, b: T) -> bool:
        return self.compare(a, b) > 0

    def gteqv(self, a: T, b: T) -> bool:
        return self.compare(a, b) >= 0

    def min(self, a: T, b: T) -> T:
        return b if self.compare(b, a) < 0 else a

    def max(self, a: T, b: T) -> T:
        return b if self.compare(b, a) > 0 else a

    def reverse(self) -> "Order[T]":
        return _ReversedOrder(self)

    @staticmethod
    def by(key: Callable[[T], K], order: Optional["Order[K]"] = None) -> "Order[T]":
        """Order values of T by comparing key(value) under `order`."""
        return _KeyOrder(key, order if order is not None else NATURAL_ORDER)


class NaturalOrder(Order[T]):
    """Order derived from the type's own `<` and `>`."""

    def compare(self, a: T, b: T) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def __repr__(self) -> str:
        return "NaturalOrder()"


class _ReversedOrder(Order[T]):
    def __init__(self, inner: Order[T]):
        self.inner = inner

    def compare(self, a: T, b: T) -> int:
        return self.inner.compare(b, a)

    def reverse(self) -> Order[T]:
        return self.inner


class _KeyOrder(Order[T]):
    def __init__(self, key: Callable[[T], K], order: Order[K]):
        self.key = key
        self.order = order

    def compare(self, a: T, b: T) -> int:
        return self.order.compare(self.key(a), self.key(b))


NATURAL_ORDER: Order = NaturalOrder()


class Signed(ABC, Generic[T]):
    @abstractmethod
    def abs(self, a: T) -> T: ...

    @abstractmethod
    def signum(self, a: T) -> int: ...


# ---------------------------------------------------------------------------
# Additive structure
# ---------------------------------------------------------------------------

class Semigroup(ABC, Generic[T]):
    """Associative binary combine."""

    @abstractmethod
    def combine(self, a: T, b: T) -> T: ...

    def combine_n(self, a: T, n: int) -> T:
        """a combined with itself n times (n >= 1), by repeated doubling."""
        if n < 1:
            raise ValueError(f"combine_n expects n >= 1, got {n}")
        result = None
        base = a
        while n:
            if n & 1:
                result = base if result is None else self.combine(result, base)
            n >>= 1
            if n:
                base = self.combine(base, base)
        return result


class Monoid(Semigroup[T]):
    """Semigroup with identity: combine(empty(), a) == a."""

    @abstractmethod
    def empty(self) -> T: ...

    def is_empty(self, a: T) -> bool:
        return a == self.empty()

    def combine_all(self, values: Iterable[T]) -> T:
        acc = self.empty()
        for v in values:
            acc = self.combine(acc, v)
        return acc


class Group(Monoid[T]):
    """Monoid with inverses: combine(a, inverse(a)) == empty()."""

    @abstractmethod
    def inverse(self, a: T) -> T: ...

    def remove(self, a: T, b: T) -> T:
        return self.combine(a, self.inverse(b))


# ---------------------------------------------------------------------------
# Rings
# ---------------------------------------------------------------------------

class Ring(Group[T]):
    """Additive group (plus, zero, negate) with multiplication (times, one).

    The Group view is the additive one: combine = plus, empty = zero,
    inverse = negate.
    """

    @abstractmethod
    def zero(self) -> T: ...

    @abstractmethod
    def one(self) -> T: ...

    @abstractmethod
    def plus(self, a: T, b: T) -> T: ...

    @abstractmethod
    def times(self, a: T, b: T) -> T: ...

    @abstractmethod
    def negate(self, a: T) -> T: ...

    def minus(self, a: T, b: T) -> T:
        return self.plus(a, self.negate(b))

    def from_int(self, n: int) -> T:
        """Inject an integer literal by double-and-add over `one`."""
        if n == 0:
            return self.zero()
        if n < 0:
            return self.negate(self.from_int(-n))
        return self.combine_n(self.one(), n)

    # Additive group view
    def combine(self, a: T, b: T) -> T:
        return self.plus(a, b)

    def empty(self) -> T:
        return self.zero()

    def inverse(self, a: T) -> T:
        return self.negate(a)

    def is_zero(self, a: T) -> bool:
        return a == self.zero()

    def is_one(self, a: T) -> bool:
        return a == self.one()

    def pow(self, a: T, n: int) -> T:
        """a**n for n >= 0 by repeated squaring."""
        if n < 0:
            raise ValueError(f"Ring.pow expects n >= 0, got {n}")
        result = self.one()
        base = a
        while n:
            if n & 1:
                result = self.times(result, base)
            n >>= 1
            if n:
                base = self.times(base, base)
        return result

    def sum(self, values: Iterable[T]) -> T:
        return self.combine_all(values)

    def product(self, values: Iterable[T]) -> T:
        acc = self.one()
        for v in values:
            acc = self.times(acc, v)
        return acc


class EuclideanRing(Ring[T]):
    """Ring with quotient/remainder division and a derived gcd/lcm.

    Law: a == plus(times(quot(a, b), b), mod(a, b)) whenever b != zero
    (exactly for exact domains, up to rounding for approximate ones).
    """

    @abstractmethod
    def quot(self, a: T, b: T) -> T: ...

    @abstractmethod
    def mod(self, a: T, b: T) -> T: ...

    def quotmod(self, a: T, b: T) -> Tuple[T, T]:
        return _euclid.default_quotmod(self, a, b)

    def gcd(self, a: T, b: T) -> T:
        return _euclid.euclid(self, a, b)

    def lcm(self, a: T, b: T) -> T:
        return _euclid.default_lcm(self, a, b)


class Field(EuclideanRing[T]):
    """Euclidean ring where every nonzero element has a multiplicative inverse."""

    @abstractmethod
    def div(self, a: T, b: T) -> T: ...

    def reciprocal(self, a: T) -> T:
        return self.div(self.one(), a)


class Fractional(Field[T], Order[T], Signed[T]):
    """Ordered field with whole-number rounding (the scalar side of Complex)."""

    @abstractmethod
    def floor(self, a: T) -> T: ...

    @abstractmethod
    def ceil(self, a: T) -> T: ...

    @abstractmethod
    def round(self, a: T) -> T:
        """Nearest whole value, ties to even."""

    @abstractmethod
    def trunc(self, a: T) -> T: ...

    @abstractmethod
    def to_float(self, a: T) -> float: ...


class Trig(ABC, Generic[T]):
    @abstractmethod
    def sqrt(self, a: T) -> T: ...

    @abstractmethod
    def atan2(self, y: T, x: T) -> T: ...

    @abstractmethod
    def sin(self, a: T) -> T: ...

    @abstractmethod
    def cos(self, a: T) -> T: ...

    @abstractmethod
    def exp(self, a: T) -> T: ...

    @abstractmethod
    def log(self, a: T) -> T: ...

    @abstractmethod
    def pi(self) -> T: ...


__all__ = [
    "Eq",
    "Order",
    "NaturalOrder",
    "NATURAL_ORDER",
    "Signed",
    "Semigroup",
    "Monoid",
    "Group",
    "Ring",
    "EuclideanRing",
    "Field",
    "Fractional",
    "Trig",
]
