"""
k-th order statistic selection, in place.

`quick_select(data, k, order=None, start=0, end=None)` and
`linear_select(...)` rearrange data[start:end] so that data[k] holds the
element that sorting would put there, everything at an index below k
compares <= it and everything above compares >= it. The rest of the range
is otherwise unordered. Both return data[k].

- quick_select: median-of-three pivot, average linear time, quadratic on
  adversarial input.
- linear_select: median-of-medians pivot over groups of MEDIAN_GROUP_SIZE,
  worst-case linear.

Ranges shorter than SELECT_THRESHOLD are finished with insertion sort.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional, Sequence

from .algebra.capabilities import Order
from .core import constants
from .core.exc import RangeError
from .sorting import (
    Compare,
    _check_range,
    _compare_fn,
    _insertion,
    _median_of_three,
    _partition_around,
    _swap,
)

# Debug printing control
DEBUG_SELECTION = False

def _dbg(msg: str) -> None:
    if DEBUG_SELECTION:
        print(msg)


def _check_k(k: int, lo: int, hi: int) -> None:
    if not (lo <= k < hi):
        raise RangeError(f"k={k} outside range [{lo}, {hi})")


# ----------------------------
# Quickselect
# ----------------------------

def quick_select(data: MutableSequence, k: int, order: Optional[Order] = None,
                 start: int = 0, end: Optional[int] = None) -> Any:
    lo, hi = _check_range(data, start, end)
    _check_k(k, lo, hi)
    cmp = _compare_fn(order)
    cutoff = max(constants.SELECT_THRESHOLD, 3)
    while hi - lo >= cutoff:
        m = _median_of_three(data, cmp, lo, hi)
        p = _partition_around(data, cmp, lo, hi, m)
        _dbg(f"quick_select: [{lo}, {hi}) pivot at {p}, k={k}")
        if k == p:
            return data[k]
        if k < p:
            hi = p
        else:
            lo = p + 1
    _insertion(data, cmp, lo, hi)
    return data[k]


select = quick_select


# ----------------------------
# Median of medians
# ----------------------------

def _linear(data: MutableSequence, cmp: Compare, lo: int, hi: int, k: int) -> None:
    cutoff = max(constants.SELECT_THRESHOLD, 3)
    group = max(constants.MEDIAN_GROUP_SIZE, 3)
    while hi - lo >= cutoff:
        # Sort each group and gather its (lower) median at the front.
        m = lo
        for g0 in range(lo, hi, group):
            g1 = min(g0 + group, hi)
            _insertion(data, cmp, g0, g1)
            _swap(data, m, g0 + (g1 - g0 - 1) // 2)
            m += 1
        pm = lo + (m - lo - 1) // 2
        _linear(data, cmp, lo, m, pm)
        p = _partition_around(data, cmp, lo, hi, pm)
        _dbg(f"linear_select: [{lo}, {hi}) {m - lo} medians, pivot at {p}, k={k}")
        if k == p:
            return
        if k < p:
            hi = p
        else:
            lo = p + 1
    _insertion(data, cmp, lo, hi)


def linear_select(data: MutableSequence, k: int, order: Optional[Order] = None,
                  start: int = 0, end: Optional[int] = None) -> Any:
    lo, hi = _check_range(data, start, end)
    _check_k(k, lo, hi)
    _linear(data, _compare_fn(order), lo, hi, k)
    return data[k]


def median(data: Sequence, order: Optional[Order] = None) -> Any:
    """Lower median of `data`; the input is copied, never reordered."""
    buf = list(data)
    if not buf:
        raise RangeError("median of an empty sequence")
    return select(buf, (len(buf) - 1) // 2, order)


__all__ = [
    "quick_select",
    "linear_select",
    "select",
    "median",
]
