"""
Capability registry: exactly one canonical algebra instance per value type.

Keys are value types (`int`, `float`, `numpy.float32`, `Decimal`, ...) or,
for Complex, the pair `(Complex, component_type)`. The default registry is
populated once, frozen, and read-only afterwards, so lookups need no
locking. A second instance for the same key, or any registration after
freeze(), is refused.

Algorithms never require the registry: every operation also accepts the
algebra explicitly.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterator, Optional, Tuple

import numpy as np

from ..core.complex import Complex
from ..core.exc import DuplicateInstanceError, MissingInstanceError, RegistryFrozenError
from ..core.rational import Rational
from ..core.real import Real
from .capabilities import EuclideanRing
from .complex import ComplexAlgebra
from .floating import BigDecimalAlgebra, Float32Algebra, Float64Algebra
from .fractional import RationalAlgebra, RealAlgebra
from .integral import BigIntAlgebra, Int32Algebra, Int64Algebra

# Debug printing control
DEBUG_REGISTRY = False

def _dbg(msg: str) -> None:
    if DEBUG_REGISTRY:
        print(msg)


class CapabilityRegistry:
    """Write-once mapping from registry key to algebra instance."""

    def __init__(self, name: str = "registry"):
        self.name = name
        self._instances: Dict[Hashable, Any] = {}
        self._frozen = False

    # ------------- building -------------

    def register(self, key: Hashable, instance: Any) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"{self.name} is frozen; cannot register {key!r}")
        existing = self._instances.get(key)
        if existing is not None and existing is not instance:
            raise DuplicateInstanceError(key, existing, instance)
        _dbg(f"registry[{self.name}]: {key!r} -> {instance!r}")
        self._instances[key] = instance

    def freeze(self) -> "CapabilityRegistry":
        if not self._frozen:
            self._instances = MappingProxyType(dict(self._instances))
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------- lookup -------------

    def resolve(self, key: Hashable, capability: Optional[type] = None) -> Any:
        """Instance for `key`, optionally checked to provide `capability`."""
        instance = self._instances.get(key)
        if instance is None:
            raise MissingInstanceError(key, capability)
        if capability is not None and not isinstance(instance, capability):
            raise MissingInstanceError(key, capability)
        return instance

    def resolve_for(self, value: Any, capability: Optional[type] = None) -> Any:
        """Instance for the type of `value` (Complex keyed by its component type)."""
        return self.resolve(key_of(value), capability)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._instances

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)

    def items(self):
        return self._instances.items()

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"CapabilityRegistry({self.name!r}, {len(self)} keys, {state})"


def key_of(value: Any) -> Hashable:
    if isinstance(value, Complex):
        return (Complex, type(value.real))
    return type(value)


def complex_key(component: type) -> Tuple[type, type]:
    return (Complex, component)


# ----------------------------
# Default registry
# ----------------------------

INT32 = Int32Algebra()
INT64 = Int64Algebra()
BIGINT = BigIntAlgebra()
FLOAT32 = Float32Algebra()
FLOAT64 = Float64Algebra()
BIGDECIMAL = BigDecimalAlgebra()
RATIONAL = RationalAlgebra()
REAL = RealAlgebra()
COMPLEX_FLOAT64 = ComplexAlgebra(FLOAT64)
COMPLEX_FLOAT32 = ComplexAlgebra(FLOAT32)
COMPLEX_BIGDECIMAL = ComplexAlgebra(BIGDECIMAL)


def _build_default_registry() -> CapabilityRegistry:
    reg = CapabilityRegistry("default")
    reg.register(np.int32, INT32)
    reg.register(np.int64, INT64)
    reg.register(int, BIGINT)
    reg.register(np.float32, FLOAT32)
    reg.register(float, FLOAT64)
    reg.register(np.float64, FLOAT64)
    reg.register(Decimal, BIGDECIMAL)
    reg.register(Rational, RATIONAL)
    reg.register(Real, REAL)
    reg.register(complex_key(float), COMPLEX_FLOAT64)
    reg.register(complex_key(np.float64), COMPLEX_FLOAT64)
    reg.register(complex_key(np.float32), COMPLEX_FLOAT32)
    reg.register(complex_key(Decimal), COMPLEX_BIGDECIMAL)
    return reg.freeze()


_DEFAULT = _build_default_registry()


def default_registry() -> CapabilityRegistry:
    return _DEFAULT


def resolve(key: Hashable, capability: Optional[type] = EuclideanRing) -> Any:
    """Look up `key` in the default registry (EuclideanRing by default)."""
    return _DEFAULT.resolve(key, capability)


def resolve_for(value: Any, capability: Optional[type] = EuclideanRing) -> Any:
    return _DEFAULT.resolve_for(value, capability)


__all__ = [
    "CapabilityRegistry",
    "key_of",
    "complex_key",
    "default_registry",
    "resolve",
    "resolve_for",
    "INT32",
    "INT64",
    "BIGINT",
    "FLOAT32",
    "FLOAT64",
    "BIGDECIMAL",
    "RATIONAL",
    "REAL",
    "COMPLEX_FLOAT64",
    "COMPLEX_FLOAT32",
    "COMPLEX_BIGDECIMAL",
]
