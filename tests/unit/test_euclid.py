import pytest
from decimal import Decimal

import numpy as np

from genarith.algebra import (
    INT32,
    INT64,
    BIGINT,
    FLOAT32,
    FLOAT64,
    BIGDECIMAL,
    RATIONAL,
    REAL,
    COMPLEX_FLOAT64,
    euclid,
    unit_floor_gcd,
)
from genarith.core import Complex, Rational, Real
from genarith.core.constants import INT32_MAX, INT32_MIN, INT64_MIN


# -----------------------------
# Exact integer domains
# -----------------------------

def test_integer_gcd_lcm_concrete(integer_algebra):
    ev = integer_algebra
    print(f"[int-gcd] {ev!r}: gcd(48, 18) = 6, lcm(4, 6) = 12")
    a, b = ev.from_int(48), ev.from_int(18)
    g = ev.gcd(a, b)
    print("gcd ->", g)
    assert g == 6
    assert type(g) is type(a)
    assert ev.lcm(ev.from_int(4), ev.from_int(6)) == 12
    assert ev.gcd(ev.from_int(-48), ev.from_int(18)) == 6
    assert ev.gcd(ev.zero(), ev.zero()) == 0
    assert ev.gcd(ev.from_int(7), ev.zero()) == 7


@pytest.mark.parametrize(
    "a,b,q,r",
    [
        (7, 2, 3, 1),
        (-7, 2, -4, 1),
        (7, -2, -4, -1),
        (-7, -2, 3, -1),
    ],
)
def test_integer_quot_mod_floor_semantics(integer_algebra, a, b, q, r):
    ev = integer_algebra
    print(f"[int-quotmod] {a} quot {b} -> expect ({q}, {r})")
    x, y = ev.from_int(a), ev.from_int(b)
    assert ev.quot(x, y) == q
    assert ev.mod(x, y) == r
    assert ev.quotmod(x, y) == (q, r)
    assert ev.plus(ev.times(ev.quot(x, y), y), ev.mod(x, y)) == x


def test_integer_division_by_zero_raises(integer_algebra):
    ev = integer_algebra
    print(f"[int-div-zero] {ev!r}: quot(1, 0) -> expect ZeroDivisionError")
    with pytest.raises(ZeroDivisionError):
        ev.quot(ev.one(), ev.zero())
    with pytest.raises(ZeroDivisionError):
        ev.mod(ev.one(), ev.zero())


def test_fixed_width_wraps_like_twos_complement():
    print("[int32-wrap] MAX + 1 == MIN; MIN // -1 == MIN; gcd(MIN, 0) == MIN")
    top = INT32.from_int(INT32_MAX)
    low = INT32.from_int(INT32_MIN)
    assert INT32.plus(top, INT32.one()) == INT32_MIN
    assert INT32.quot(low, INT32.from_int(-1)) == INT32_MIN
    assert INT32.gcd(low, INT32.zero()) == INT32_MIN
    assert INT64.gcd(INT64.from_int(INT64_MIN), INT64.zero()) == INT64_MIN
    assert isinstance(INT32.plus(top, top), np.int32)


def test_bigint_gcd_is_non_negative():
    print("[bigint-gcd-sign] gcd(-12, -18) = 6; lcm(-4, 6) = quot(-4, 2) * 6 = -12")
    assert BIGINT.gcd(-12, -18) == 6
    assert BIGINT.lcm(-4, 6) == -12


def test_generic_euclid_runs_in_constant_stack():
    print("[euclid-loop] consecutive Fibonacci numbers F(3001), F(3000) -> gcd 1")
    a, b = 0, 1
    for _ in range(3000):
        a, b = b, a + b
    assert euclid(BIGINT, b, a) == 1


# -----------------------------
# Unit-floor domains (float, Decimal, Rational)
# -----------------------------

def test_unit_floor_gcd_rules(unit_floor_algebra):
    ev = unit_floor_algebra
    one, zero = ev.one(), ev.zero()
    half = ev.div(one, ev.from_int(2))
    three = ev.from_int(3)
    six = ev.from_int(6)
    print(f"[unit-floor] {ev!r}: gcd(1/2, 3) = 1, gcd(3, 1/2) = 1, gcd(6, 0) = 6, gcd(0, 0) = 1")
    assert ev.gcd(half, three) == one
    assert ev.gcd(three, half) == one
    assert ev.gcd(six, zero) == six
    assert ev.gcd(ev.negate(six), zero) == six
    assert ev.gcd(zero, zero) == one
    assert ev.gcd(half, zero) == one


def test_unit_floor_gcd_whole_values(unit_floor_algebra):
    ev = unit_floor_algebra
    print(f"[unit-floor-whole] {ev!r}: gcd(12, 18) = 6")
    g = ev.gcd(ev.from_int(12), ev.from_int(18))
    assert g == ev.from_int(6)


def test_float_gcd_of_half_multiples():
    print("[float-gcd] gcd(7.5, 2.5) = 2.5 (2.5 >= 1 divides 7.5 exactly)")
    assert FLOAT64.gcd(7.5, 2.5) == 2.5
    assert BIGDECIMAL.gcd(Decimal("7.5"), Decimal("2.5")) == Decimal("2.5")
    assert RATIONAL.gcd(Rational(15, 2), Rational(5, 2)) == Rational(5, 2)


def test_float32_results_stay_float32():
    print("[float32-type] gcd / quot / mod return numpy.float32")
    g = FLOAT32.gcd(np.float32(12), np.float32(18))
    assert isinstance(g, np.float32)
    assert g == np.float32(6)
    assert isinstance(FLOAT32.quot(np.float32(7), np.float32(2)), np.float32)


def test_float_quot_mod_truncate_like_fmod():
    print("[float-quotmod] 7.0 quot 2.0 = 3.0, -7.0 quot 2.0 = -3.0 (mod = -1.0, sign of the dividend)")
    assert FLOAT64.quot(7.0, 2.0) == 3.0
    assert FLOAT64.mod(7.0, 2.0) == 1.0
    assert FLOAT64.quot(-7.0, 2.0) == -3.0
    assert FLOAT64.mod(-7.0, 2.0) == -1.0
    assert FLOAT64.quotmod(-7.0, 2.0) == (-3.0, -1.0)
    assert FLOAT64.quotmod(7.0, -2.0) == (-3.0, 1.0)
    assert FLOAT32.quotmod(np.float32(-7), np.float32(2)) == (np.float32(-3), np.float32(-1))


@pytest.mark.parametrize("ev,a,b", [
    (FLOAT64, -7.0, 2.0),
    (FLOAT32, np.float32(-7), np.float32(2)),
    (BIGDECIMAL, Decimal(-7), Decimal(2)),
    (RATIONAL, Rational(-7), Rational(2)),
])
def test_fractional_domains_agree_on_truncated_quot(ev, a, b):
    print(f"[quot-agree] {ev!r}: quot(-7, 2) -> expect -3")
    assert ev.quot(a, b) == ev.from_int(-3)
    assert ev.mod(a, b) == ev.from_int(-1)


def test_float_mod_by_zero_raises():
    print("[float-div-zero] mod(1.0, 0.0) -> expect ZeroDivisionError")
    with pytest.raises(ZeroDivisionError):
        FLOAT64.mod(1.0, 0.0)
    with pytest.raises(ZeroDivisionError):
        FLOAT64.quot(1.0, 0.0)


def test_decimal_quot_mod_truncate():
    print("[decimal-quotmod] -7 quot 2 = -3, mod = -1")
    assert BIGDECIMAL.quot(Decimal(-7), Decimal(2)) == Decimal(-3)
    assert BIGDECIMAL.mod(Decimal(-7), Decimal(2)) == Decimal(-1)
    assert BIGDECIMAL.quotmod(Decimal(7), Decimal(2)) == (Decimal(3), Decimal(1))


def test_rational_gcd_and_lcm():
    print("[rational-gcd] gcd(6, 4) = 2, lcm(4, 6) = 12")
    assert RATIONAL.gcd(Rational(6), Rational(4)) == Rational(2)
    assert RATIONAL.lcm(Rational(4), Rational(6)) == Rational(12)


def test_unit_floor_check_order():
    print("[unit-floor-order] a is checked before b == 0")
    calls = []

    def below_one(x):
        calls.append(("below_one", x))
        return x < 1

    def is_zero(x):
        calls.append(("is_zero", x))
        return x == 0

    assert unit_floor_gcd(0.5, 0.0, below_one=below_one, is_zero=is_zero, mod=lambda a, b: a % b, one=1.0) == 1.0
    assert calls == [("below_one", 0.5)]


# -----------------------------
# Real and Complex
# -----------------------------

def test_real_gcd_of_whole_values():
    print("[real-gcd] gcd(6, 4) = 2, gcd(6, 3) = 3")
    assert REAL.gcd(Real.from_int(6), Real.from_int(4)) == 2
    assert REAL.gcd(Real.from_int(6), Real.from_int(3)) == 3


def test_complex_gcd_reaches_associate_of_common_factor():
    print("[complex-gcd] gcd(5, 3+4i) -> -2-1i (norm 5)")
    g = COMPLEX_FLOAT64.gcd(Complex(5.0, 0.0), Complex(3.0, 4.0))
    print("gcd ->", g)
    assert g == Complex(-2.0, -1.0)
    assert g.norm() == 5.0


def test_complex_gcd_unit_floor():
    print("[complex-gcd-floor] |a| < 1 -> one; b == 0 -> a")
    one = COMPLEX_FLOAT64.one()
    assert COMPLEX_FLOAT64.gcd(Complex(0.5, 0.5), Complex(3.0, 0.0)) == one
    assert COMPLEX_FLOAT64.gcd(Complex(3.0, 4.0), COMPLEX_FLOAT64.zero()) == Complex(3.0, 4.0)
    assert COMPLEX_FLOAT64.gcd(Complex(3.0, 4.0), Complex(0.0, 0.5)) == one
