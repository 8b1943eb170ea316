"""
Formatting helpers (non-core arithmetic).

Decimal here is only for display: logs, test output and reprs. Conversions
run under a local context at DEFAULT_DECIMAL_PRECISION so that callers'
ambient decimal settings are never touched.
"""

from decimal import Context, Decimal

from .constants import DEFAULT_DECIMAL_PRECISION
from .complex import Complex
from .rational import Rational
from .real import Real

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


def _ctx() -> Context:
    return Context(prec=DEFAULT_DECIMAL_PRECISION)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')        -> '1.000000000000000000E+0'
      Decimal('1e-9')     -> '1.000000000000000000E-9'
      Decimal('123456')   -> '1.234560000000000000E+5'
    """
    return format(x, f".{places}E")


def rational_to_decimal(r: Rational) -> Decimal:
    """Decimal value of a Rational at DEFAULT_DECIMAL_PRECISION digits."""
    _dbg(f"rational_to_decimal: n={r.numerator}, d={r.denominator}")
    return _ctx().divide(Decimal(r.numerator), Decimal(r.denominator))


def real_to_decimal(x: Real, places: int = 20) -> Decimal:
    """Decimal value of a Real rounded to `places` fractional digits."""
    if places < 0:
        raise ValueError("places must be >= 0")
    return x.to_decimal(places)


def fmt_rational(r: Rational, places: int = 18) -> str:
    """'n/d (≈ d.ddd…E±x)', or just 'n' for whole values."""
    if r.is_whole():
        return str(r.numerator)
    return f"{r.numerator}/{r.denominator} (≈ {fmt_dec(rational_to_decimal(r), places)})"


def fmt_complex(z: Complex) -> str:
    """'a+bi' / 'a-bi' with the scalar's own string form."""
    re, im = z.real, z.imag
    if im < z.algebra.zero():
        return f"{re}-{-im}i"
    return f"{re}+{im}i"


__all__ = [
    "fmt_dec",
    "rational_to_decimal",
    "real_to_decimal",
    "fmt_rational",
    "fmt_complex",
]
