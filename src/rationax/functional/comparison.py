# ruff: noqa: F811
from plum import dispatch

from rationax.core.fraction import Fraction
from rationax.core.typing import IntegerLike
from rationax.core.utils import wrap_int


def _compare(x: Fraction, y: Fraction) -> int:
    """Three-way comparison through cross multiplication in the storage width of x. No floats involved,
    but large numerators and denominators can overflow silently."""
    lhs = wrap_int(x.numerator * y.denominator, x.config)
    rhs = wrap_int(y.numerator * x.denominator, x.config)
    return (lhs > rhs) - (lhs < rhs)


def _as_fraction(x: IntegerLike, other: Fraction) -> Fraction:
    return Fraction(int(x), config=other.config)


## Equality ###########################
@dispatch
def eq(x: Fraction, y: Fraction) -> bool:
    # canonical pairs are unique, so no cross multiplication is needed
    return x.numerator == y.numerator and x.denominator == y.denominator


@dispatch
def eq(x: Fraction, y: IntegerLike) -> bool:
    return eq(x, _as_fraction(y, x))


@dispatch
def eq(x: IntegerLike, y: Fraction) -> bool:
    return eq(y, x)


def ne(x: Fraction | IntegerLike, y: Fraction | IntegerLike) -> bool:
    return not eq(x, y)


## Ordering ###########################
@dispatch
def lt(x: Fraction, y: Fraction) -> bool:
    return _compare(x, y) < 0


@dispatch
def lt(x: Fraction, y: IntegerLike) -> bool:
    return lt(x, _as_fraction(y, x))


@dispatch
def lt(x: IntegerLike, y: Fraction) -> bool:
    return lt(_as_fraction(x, y), y)


@dispatch
def le(x: Fraction, y: Fraction) -> bool:
    return _compare(x, y) <= 0


@dispatch
def le(x: Fraction, y: IntegerLike) -> bool:
    return le(x, _as_fraction(y, x))


@dispatch
def le(x: IntegerLike, y: Fraction) -> bool:
    return le(_as_fraction(x, y), y)


@dispatch
def gt(x: Fraction, y: Fraction) -> bool:
    return _compare(x, y) > 0


@dispatch
def gt(x: Fraction, y: IntegerLike) -> bool:
    return gt(x, _as_fraction(y, x))


@dispatch
def gt(x: IntegerLike, y: Fraction) -> bool:
    return gt(_as_fraction(x, y), y)


@dispatch
def ge(x: Fraction, y: Fraction) -> bool:
    return _compare(x, y) >= 0


@dispatch
def ge(x: Fraction, y: IntegerLike) -> bool:
    return ge(x, _as_fraction(y, x))


@dispatch
def ge(x: IntegerLike, y: Fraction) -> bool:
    return ge(_as_fraction(x, y), y)
