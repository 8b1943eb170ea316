import pytest
from decimal import Decimal
from fractions import Fraction

from genarith.core import Real, Rational, real_to_decimal


def _r(n, d=1) -> Real:
    return Real.of(Rational(n, d))


# -----------------------------
# Approximation contract
# -----------------------------

def test_real_approx_is_memoised():
    print("[real-memo] approx(10) twice -> approximation function called once")
    calls = []

    def approx(p):
        calls.append(p)
        return 3 << p

    x = Real(approx)
    assert x.approx(10) == 3 << 10
    assert x.approx(10) == 3 << 10
    print("calls ->", calls)
    assert calls == [10]


def test_real_negative_precision_rejected():
    print("[real-precision] approx(-1) -> expect ValueError")
    with pytest.raises(ValueError):
        Real.one().approx(-1)


def test_real_one_third_to_decimal():
    print("[real-third] 1/3 at 20 places -> expect 0.33333333333333333333")
    third = Real.one() / 3
    dec = third.to_decimal(20)
    print("to_decimal ->", dec)
    assert dec == Decimal("0.33333333333333333333")
    assert real_to_decimal(third, 5) == Decimal("0.33333")


def test_real_to_decimal_keeps_every_digit_of_wide_values():
    print("[real-wide] 10**40 + 1 at 0 places -> expect all 41 digits")
    big = Real.from_int(10**40 + 1)
    dec = big.to_decimal(0)
    print("to_decimal ->", dec)
    assert dec == Decimal(10**40 + 1)
    assert str(dec) == str(10**40 + 1)
    assert Real.from_int(-(10**40 + 1)).to_decimal(2) == Decimal("-10000000000000000000000000000000000000001.00")


def test_real_lifts_builtin_numbers():
    print("[real-of] int, Rational, Fraction, Decimal, float all lift")
    assert Real.of(6) == 6
    assert Real.of(Fraction(1, 4)) == Rational(1, 4)
    assert Real.of(Decimal("2.5")) == Rational(5, 2)
    assert Real.of(0.75) == Rational(3, 4)
    with pytest.raises(TypeError):
        Real.of("1")


# -----------------------------
# Arithmetic and comparison
# -----------------------------

def test_real_field_operations_round_trip():
    print("[real-field] (1/3)*3 == 1, 1/7 + 6/7 == 1, 2**10 == 1024")
    assert (Real.one() / 3) * 3 == 1
    assert _r(1, 7) + _r(6, 7) == 1
    assert Real.from_int(2) ** 10 == 1024
    assert Real.from_int(2) ** -2 == Rational(1, 4)
    assert -Real.from_int(5) < 0
    assert abs(Real.from_int(-5)) == 5


def test_real_sqrt_two():
    print("[real-sqrt] sqrt(2)**2 == 2 and float(sqrt(2)) ~ 1.41421356")
    s = Real.from_int(2).sqrt()
    assert s * s == 2
    assert float(s) == pytest.approx(1.4142135623730951, rel=1e-15)
    with pytest.raises(ValueError):
        Real.from_int(-4).sqrt().approx(8)


def test_real_is_not_hashable():
    print("[real-hash] tolerance-based equality -> unhashable")
    with pytest.raises(TypeError):
        hash(Real.one())


def test_real_reciprocal_of_zero_raises_on_evaluation():
    print("[real-recip-zero] 1/0 evaluates -> expect ZeroDivisionError")
    inv = Real.zero().reciprocal()
    with pytest.raises(ZeroDivisionError):
        inv.approx(8)


# -----------------------------
# Whole-number rounding / division
# -----------------------------

def test_real_rounding_of_half_values():
    print("[real-round] -7/2: floor -4, ceil -3, trunc -3, round -4")
    x = _r(-7, 2)
    assert x.floor_int() == -4
    assert x.ceil_int() == -3
    assert x.trunc_int() == -3
    assert x.round_int() == -4
    assert _r(5, 2).round_int() == 2
    assert int(_r(9, 4)) == 2


def test_real_rounding_snaps_to_nearby_whole_numbers():
    print("[real-snap] 6 * (1/3) truncates to 2 even if approximated slightly below")
    x = Real.from_int(6) * Real.from_int(3).reciprocal()
    assert x.trunc_int() == 2
    assert x.floor_int() == 2
    assert x.ceil_int() == 2


@pytest.mark.parametrize(
    "a,b,q,r",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (6, 3, 2, 0),
    ],
)
def test_real_truncated_division(a, b, q, r):
    print(f"[real-quot] {a} /~ {b} -> expect ({q}, {r})")
    x, y = Real.from_int(a), Real.from_int(b)
    assert x // y == q
    assert x % y == r
    got_q, got_r = divmod(x, y)
    assert got_q == q and got_r == r


def test_real_display():
    print("[real-str] str(5/2) -> '2.5'")
    assert str(_r(5, 2)) == "2.5"
    assert repr(Real.from_int(3)) == "Real(3)"
