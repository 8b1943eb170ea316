import pytest
from decimal import Decimal

import numpy as np

from genarith.algebra import (
    CapabilityRegistry,
    EuclideanRing,
    Fractional,
    BigIntAlgebra,
    INT32,
    INT64,
    BIGINT,
    FLOAT32,
    FLOAT64,
    BIGDECIMAL,
    RATIONAL,
    REAL,
    COMPLEX_FLOAT64,
    COMPLEX_BIGDECIMAL,
    complex_key,
    default_registry,
    key_of,
    resolve,
    resolve_for,
)
from genarith.core import (
    Complex,
    Rational,
    Real,
    DuplicateInstanceError,
    MissingInstanceError,
    RegistryFrozenError,
)


# -----------------------------
# Default registry
# -----------------------------

@pytest.mark.parametrize(
    "key,expected",
    [
        (np.int32, INT32),
        (np.int64, INT64),
        (int, BIGINT),
        (np.float32, FLOAT32),
        (float, FLOAT64),
        (np.float64, FLOAT64),
        (Decimal, BIGDECIMAL),
        (Rational, RATIONAL),
        (Real, REAL),
        (complex_key(float), COMPLEX_FLOAT64),
        (complex_key(Decimal), COMPLEX_BIGDECIMAL),
    ],
)
def test_default_registry_has_one_instance_per_type(key, expected):
    print(f"[registry-default] {key!r} -> expect {expected!r}")
    assert resolve(key) is expected
    assert default_registry().resolve(key) is expected


def test_default_registry_is_frozen():
    print("[registry-frozen] registering into the default registry -> expect RegistryFrozenError")
    reg = default_registry()
    assert reg.frozen
    with pytest.raises(RegistryFrozenError):
        reg.register(str, BIGINT)


def test_resolve_for_values():
    print("[registry-resolve_for] value -> instance by type (Complex by component type)")
    assert resolve_for(3) is BIGINT
    assert resolve_for(np.int32(3)) is INT32
    assert resolve_for(Rational(1, 2)) is RATIONAL
    assert resolve_for(Complex(1.0, 2.0)) is COMPLEX_FLOAT64
    assert key_of(Complex(1.0, 2.0)) == (Complex, float)


def test_missing_instance_and_missing_capability():
    print("[registry-missing] str -> MissingInstanceError; int as Fractional -> MissingInstanceError")
    with pytest.raises(MissingInstanceError) as ei:
        resolve(str)
    assert ei.value.key is str
    # also a LookupError
    with pytest.raises(LookupError):
        resolve(bytes)
    with pytest.raises(MissingInstanceError):
        resolve(int, Fractional)
    assert resolve(float, Fractional) is FLOAT64


# -----------------------------
# Building a registry
# -----------------------------

def test_registry_refuses_second_instance_for_same_key():
    print("[registry-duplicate] second distinct instance for int -> expect DuplicateInstanceError")
    reg = CapabilityRegistry("test")
    reg.register(int, BIGINT)
    reg.register(int, BIGINT)  # same instance again is a no-op
    with pytest.raises(DuplicateInstanceError) as ei:
        reg.register(int, BigIntAlgebra())
    assert ei.value.existing is BIGINT
    assert len(reg) == 1
    assert int in reg


def test_registry_freeze_is_final():
    print("[registry-freeze] freeze() then register -> expect RegistryFrozenError; lookups still work")
    reg = CapabilityRegistry("test")
    reg.register(float, FLOAT64)
    assert reg.freeze() is reg
    assert reg.frozen
    with pytest.raises(RegistryFrozenError):
        reg.register(int, BIGINT)
    assert reg.resolve(float, EuclideanRing) is FLOAT64
    assert list(reg) == [float]
    assert dict(reg.items()) == {float: FLOAT64}
    print("repr ->", repr(reg))
    assert repr(reg) == "CapabilityRegistry('test', 1 keys, frozen)"
