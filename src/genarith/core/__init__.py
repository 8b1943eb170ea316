"""
genarith Core
=============

Value types and shared plumbing used by the algebra instances and the
sorting / selection algorithms:

- Rational: exact normalised fraction of two Python ints.
- Real: lazily evaluated computable real.
- Complex: complex value over any Fractional + Trig scalar.

Decimal helpers in `fmt` exist only for display.
"""

# NOTE:
#   Nothing in `core` imports `genarith.algebra` at module load. Complex
#   resolves its scalar algebra from the registry on first construction only.

# Tunables (read at call time by the algorithms)
from .constants import (
    INT32_BITS,
    INT64_BITS,
    INT32_MIN,
    INT32_MAX,
    INT64_MIN,
    INT64_MAX,
    QUICKSORT_THRESHOLD,
    MERGESORT_THRESHOLD,
    SELECT_THRESHOLD,
    MEDIAN_GROUP_SIZE,
    REAL_COMPARE_BITS,
    REAL_MAX_BITS,
    DEFAULT_DECIMAL_PRECISION,
)

# Errors
from .exc import (
    AlgebraError,
    MissingInstanceError,
    DuplicateInstanceError,
    RegistryFrozenError,
    RangeError,
    ParseError,
)

# Value types
from .rational import Rational
from .real import Real
from .complex import Complex

# Formatting helpers (display only)
from .fmt import (
    fmt_dec,
    rational_to_decimal,
    real_to_decimal,
    fmt_rational,
    fmt_complex,
)

__all__ = [
    # constants
    "INT32_BITS",
    "INT64_BITS",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "QUICKSORT_THRESHOLD",
    "MERGESORT_THRESHOLD",
    "SELECT_THRESHOLD",
    "MEDIAN_GROUP_SIZE",
    "REAL_COMPARE_BITS",
    "REAL_MAX_BITS",
    "DEFAULT_DECIMAL_PRECISION",
    # errors
    "AlgebraError",
    "MissingInstanceError",
    "DuplicateInstanceError",
    "RegistryFrozenError",
    "RangeError",
    "ParseError",
    # value types
    "Rational",
    "Real",
    "Complex",
    # fmt
    "fmt_dec",
    "rational_to_decimal",
    "real_to_decimal",
    "fmt_rational",
    "fmt_complex",
]
