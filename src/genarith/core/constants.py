"""
genarith Core Constants
=======================

Module-level tunables shared by the algebra instances and by the sorting and
selection algorithms. Values are read at call time, so tests may monkeypatch
them on this module.
"""

# ---------------------------------------------------------------------------
# Native integer widths (two's complement wrap-around)
# ---------------------------------------------------------------------------

INT32_BITS: int = 32
INT64_BITS: int = 64

INT32_MIN: int = -(1 << (INT32_BITS - 1))
INT32_MAX: int = (1 << (INT32_BITS - 1)) - 1
INT64_MIN: int = -(1 << (INT64_BITS - 1))
INT64_MAX: int = (1 << (INT64_BITS - 1)) - 1


# ---------------------------------------------------------------------------
# Sorting / selection thresholds
# ---------------------------------------------------------------------------

#: Ranges shorter than this are handed to insertion sort by quick_sort.
QUICKSORT_THRESHOLD: int = 16

#: Runs shorter than this are handed to insertion sort by merge_sort.
MERGESORT_THRESHOLD: int = 8

#: Ranges shorter than this are finished by insertion sort during selection.
SELECT_THRESHOLD: int = 8

#: Group width used by the median-of-medians pivot in linear_select.
MEDIAN_GROUP_SIZE: int = 5


# ---------------------------------------------------------------------------
# Lazily-evaluated reals
# ---------------------------------------------------------------------------

#: Binary precision used when comparing two Real values (and when testing
#: a Real against zero).
REAL_COMPARE_BITS: int = 128

#: Upper bound on the precision probed when searching for the leading bit
#: of a Real (reciprocal / division). Values with no nonzero bit below this
#: bound are treated as zero.
REAL_MAX_BITS: int = 4096


# ---------------------------------------------------------------------------
# Decimal
# ---------------------------------------------------------------------------

#: Precision of the Decimal context used by the formatting helpers. The
#: Decimal algebra itself uses the ambient context unless one is injected.
DEFAULT_DECIMAL_PRECISION: int = 28


__all__ = [
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
]
