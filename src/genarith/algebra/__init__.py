"""
genarith Algebra
================

Capability hierarchy, per-type instances, the generalized Euclidean
algorithm, the default (frozen) capability registry and the operator-syntax
layer.
"""

# Capability hierarchy and companions
from .capabilities import (
    Eq,
    Order,
    NaturalOrder,
    NATURAL_ORDER,
    Signed,
    Semigroup,
    Monoid,
    Group,
    Ring,
    EuclideanRing,
    Field,
    Fractional,
    Trig,
)

# Euclid helpers
from .euclid import (
    euclid,
    unit_floor_gcd,
    default_quotmod,
    default_lcm,
)

# Instances
from .integral import Int32Algebra, Int64Algebra, BigIntAlgebra, wrap_int
from .floating import Float32Algebra, Float64Algebra, BigDecimalAlgebra
from .fractional import RationalAlgebra, RealAlgebra
from .complex import ComplexAlgebra

# Registry and canonical instances
from .registry import (
    CapabilityRegistry,
    key_of,
    complex_key,
    default_registry,
    resolve,
    resolve_for,
    INT32,
    INT64,
    BIGINT,
    FLOAT32,
    FLOAT64,
    BIGDECIMAL,
    RATIONAL,
    REAL,
    COMPLEX_FLOAT64,
    COMPLEX_FLOAT32,
    COMPLEX_BIGDECIMAL,
)

# Operator syntax
from .ops import EuclideanOps, syntax, quot, mod, quotmod, gcd, lcm

__all__ = [
    # capabilities
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
    # euclid
    "euclid",
    "unit_floor_gcd",
    "default_quotmod",
    "default_lcm",
    # instances
    "Int32Algebra",
    "Int64Algebra",
    "BigIntAlgebra",
    "wrap_int",
    "Float32Algebra",
    "Float64Algebra",
    "BigDecimalAlgebra",
    "RationalAlgebra",
    "RealAlgebra",
    "ComplexAlgebra",
    # registry
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
    # syntax
    "EuclideanOps",
    "syntax",
    "quot",
    "mod",
    "quotmod",
    "gcd",
    "lcm",
]
