"""
Top-level API for genarith.

Generic numeric algebra over many number representations:
  - capability hierarchy (Ring -> EuclideanRing -> Field) with one canonical
    instance per value type, held in a frozen default registry
  - generalized Euclidean gcd / lcm, including the unit-floor policy of the
    approximate domains
  - comparator-driven in-place sorting and k-th element selection

Value types (Rational, Real, Complex) live in `genarith.core`; instances and
the registry in `genarith.algebra`.
"""

from __future__ import annotations

# Value types
from .core import (
    Rational,
    Real,
    Complex,
    AlgebraError,
    MissingInstanceError,
    DuplicateInstanceError,
    RegistryFrozenError,
    RangeError,
    ParseError,
)

# Capabilities, instances, registry, syntax
from .algebra import (
    Order,
    NATURAL_ORDER,
    Ring,
    EuclideanRing,
    Field,
    Fractional,
    default_registry,
    resolve,
    resolve_for,
    EuclideanOps,
    syntax,
    quot,
    mod,
    quotmod,
    gcd,
    lcm,
)

# Algorithms
from .sorting import insertion_sort, merge_sort, quick_sort, sort, is_sorted
from .selection import quick_select, linear_select, select, median

__all__ = [
    # value types
    "Rational",
    "Real",
    "Complex",
    # errors
    "AlgebraError",
    "MissingInstanceError",
    "DuplicateInstanceError",
    "RegistryFrozenError",
    "RangeError",
    "ParseError",
    # algebra
    "Order",
    "NATURAL_ORDER",
    "Ring",
    "EuclideanRing",
    "Field",
    "Fractional",
    "default_registry",
    "resolve",
    "resolve_for",
    "EuclideanOps",
    "syntax",
    "quot",
    "mod",
    "quotmod",
    "gcd",
    "lcm",
    # sorting / selection
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "sort",
    "is_sorted",
    "quick_select",
    "linear_select",
    "select",
    "median",
]
