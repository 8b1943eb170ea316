from __future__ import annotations

from hypothesis import given, strategies as st

from genarith.algebra import Order
from genarith.sorting import insertion_sort, merge_sort, quick_sort, is_sorted
from genarith.selection import quick_select, linear_select


int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200)
keyed_lists = st.lists(st.integers(min_value=0, max_value=5), max_size=120)
BY_KEY = Order.by(lambda rec: rec[0])


@given(xs=int_lists)
def test_all_sorts_produce_sorted_permutation(xs):
    for algo in (insertion_sort, merge_sort, quick_sort):
        buf = list(xs)
        algo(buf)
        assert buf == sorted(xs)
        assert is_sorted(buf)


@given(keys=keyed_lists)
def test_merge_and_insertion_are_stable(keys):
    recs = [(k, i) for i, k in enumerate(keys)]
    expected = sorted(recs, key=lambda rec: rec[0])
    for algo in (insertion_sort, merge_sort):
        buf = list(recs)
        algo(buf, BY_KEY)
        assert buf == expected


@given(data=st.data())
def test_selection_kth_order_statistic(data):
    xs = data.draw(st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=150))
    k = data.draw(st.integers(min_value=0, max_value=len(xs) - 1))
    ordered = sorted(xs)
    for algo in (quick_select, linear_select):
        buf = list(xs)
        got = algo(buf, k)
        assert got == ordered[k]
        assert all(x <= buf[k] for x in buf[:k])
        assert all(x >= buf[k] for x in buf[k + 1:])
        assert sorted(buf) == ordered
