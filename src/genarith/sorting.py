"""
In-place comparison sorts over an Order capability.

All entry points take `(data, order=None, start=0, end=None)` and sort the
half-open range data[start:end] in place. `data` is any random-access
mutable sequence (list, numpy array, ...); `order` defaults to the natural
ordering of the element type.

- insertion_sort: O(n^2), stable. Base case of the other two.
- quick_sort: average O(n log n), not stable. Median-of-three pivot, Hoare
  style partition, recursion on the smaller side only (O(log n) stack).
- merge_sort: O(n log n), stable. Top-down, one temporary buffer for the
  whole call.

Thresholds are read from `core.constants` on every call.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional, Tuple

from .algebra.capabilities import NATURAL_ORDER, Order
from .core import constants
from .core.exc import RangeError

# Debug printing control
DEBUG_SORTING = False

def _dbg(msg: str) -> None:
    if DEBUG_SORTING:
        print(msg)


Compare = Callable[[Any, Any], int]


# ---------------------------------------------------------------------------
# Shared helpers (also used by selection)
# ---------------------------------------------------------------------------

def _compare_fn(order: Optional[Order]) -> Compare:
    return (order if order is not None else NATURAL_ORDER).compare


def _check_range(data: MutableSequence, start: int, end: Optional[int]) -> Tuple[int, int]:
    n = len(data)
    if end is None:
        end = n
    if start < 0 or end > n or start > end:
        raise RangeError(f"invalid range [{start}, {end}) for sequence of length {n}")
    return start, end


def _swap(data: MutableSequence, i: int, j: int) -> None:
    if i != j:
        data[i], data[j] = data[j], data[i]


def _insertion(data: MutableSequence, cmp: Compare, lo: int, hi: int) -> None:
    for i in range(lo + 1, hi):
        x = data[i]
        j = i - 1
        # Strict > keeps equal elements in their original order.
        while j >= lo and cmp(data[j], x) > 0:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = x


def _median_of_three(data: MutableSequence, cmp: Compare, lo: int, hi: int) -> int:
    """Order data[lo], data[mid], data[hi-1] in place and return mid."""
    mid = lo + (hi - lo) // 2
    last = hi - 1
    if cmp(data[mid], data[lo]) < 0:
        _swap(data, lo, mid)
    if cmp(data[last], data[mid]) < 0:
        _swap(data, mid, last)
        if cmp(data[mid], data[lo]) < 0:
            _swap(data, lo, mid)
    return mid


def _partition_around(data: MutableSequence, cmp: Compare, lo: int, hi: int, m: int) -> int:
    """Partition data[lo:hi] around the element at index m.

    Returns the pivot's final index p: data[lo:p] <= pivot <= data[p+1:hi].
    Both scans stop on elements equal to the pivot, so runs of equal keys are
    split evenly between the two sides.
    """
    last = hi - 1
    _swap(data, m, last)
    pivot = data[last]
    i, j = lo - 1, last
    while True:
        i += 1
        while cmp(data[i], pivot) < 0:
            i += 1
        j -= 1
        while j > lo and cmp(pivot, data[j]) < 0:
            j -= 1
        if i >= j:
            break
        _swap(data, i, j)
    _swap(data, i, last)
    return i


# ---------------------------------------------------------------------------
# Public sorts
# ---------------------------------------------------------------------------

def insertion_sort(data: MutableSequence, order: Optional[Order] = None,
                   start: int = 0, end: Optional[int] = None) -> None:
    lo, hi = _check_range(data, start, end)
    _insertion(data, _compare_fn(order), lo, hi)


def _quick(data: MutableSequence, cmp: Compare, lo: int, hi: int) -> None:
    cutoff = max(constants.QUICKSORT_THRESHOLD, 3)
    while hi - lo >= cutoff:
        m = _median_of_three(data, cmp, lo, hi)
        p = _partition_around(data, cmp, lo, hi, m)
        _dbg(f"quick_sort: [{lo}, {hi}) pivot at {p}")
        if p - lo < hi - p - 1:
            _quick(data, cmp, lo, p)
            lo = p + 1
        else:
            _quick(data, cmp, p + 1, hi)
            hi = p
    _insertion(data, cmp, lo, hi)


def quick_sort(data: MutableSequence, order: Optional[Order] = None,
               start: int = 0, end: Optional[int] = None) -> None:
    lo, hi = _check_range(data, start, end)
    _quick(data, _compare_fn(order), lo, hi)


def _merge_sort(data: MutableSequence, cmp: Compare, lo: int, hi: int, buf: list) -> None:
    if hi - lo < max(constants.MERGESORT_THRESHOLD, 2):
        _insertion(data, cmp, lo, hi)
        return
    mid = lo + (hi - lo) // 2
    _merge_sort(data, cmp, lo, mid, buf)
    _merge_sort(data, cmp, mid, hi, buf)
    if cmp(data[mid - 1], data[mid]) <= 0:
        return  # already in order

    n = mid - lo
    for t in range(n):
        buf[t] = data[lo + t]
    i, j, w = 0, mid, lo
    while i < n and j < hi:
        # Take from the right run only when strictly smaller (stability).
        if cmp(data[j], buf[i]) < 0:
            data[w] = data[j]
            j += 1
        else:
            data[w] = buf[i]
            i += 1
        w += 1
    while i < n:
        data[w] = buf[i]
        i += 1
        w += 1


def merge_sort(data: MutableSequence, order: Optional[Order] = None,
               start: int = 0, end: Optional[int] = None) -> None:
    lo, hi = _check_range(data, start, end)
    if hi - lo < 2:
        return
    buf = [None] * (hi - lo)
    _merge_sort(data, _compare_fn(order), lo, hi, buf)


sort = quick_sort


def is_sorted(data: MutableSequence, order: Optional[Order] = None,
              start: int = 0, end: Optional[int] = None) -> bool:
    """True if data[start:end] is non-decreasing under `order`."""
    lo, hi = _check_range(data, start, end)
    cmp = _compare_fn(order)
    for i in range(lo + 1, hi):
        if cmp(data[i - 1], data[i]) > 0:
            return False
    return True


__all__ = [
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "sort",
    "is_sorted",
]
