import math

import pytest

from rationax import INFINITY, ONE, ZERO, Fraction, FractionConfig
from rationax.functional.roots import (
    cb,
    cbrt,
    frexp,
    is_abs_sq,
    is_cb,
    ldexp,
    pow,
    pow_c,
    simplify_cbrt,
    simplify_rt,
    simplify_sqrt,
    sq,
    sqrt,
    sqrt_c,
)
from tests.utils import assert_pair


def test_pow():
    assert_pair(pow(Fraction(7), -2), 1, 49)
    assert_pair(Fraction(2, 3).pow(2), 4, 9)
    assert_pair(Fraction(2) ** 3, 8, 1)
    assert_pair(Fraction(1, 4) ** 0.5, 1, 2)


def test_pow_undefined_returns_input():
    assert pow(ZERO, -1) is ZERO
    assert pow(INFINITY, 2) is INFINITY
    assert_pair(pow(INFINITY, -1), 0, 1)


def test_pow_of_negative_base_is_real_part():
    assert_pair(pow(Fraction(-1, 4), 0.5), 0, 1)
    assert_pair(pow(Fraction(-2), 2), 4, 1)


def test_pow_c():
    # the real part is exp(log(25/49) / 2) * cos(pi / 2), a tiny positive residue which the
    # search walks down to the first 1/k within the error, i.e. about 10^6 mediants
    re, im = pow_c(Fraction(-25, 49), 0.5)
    assert_pair(re, 1, 1000000)
    assert_pair(im, 5, 7)


def test_pow_c_coarse_error():
    cfg = FractionConfig(error_exp=-3)
    re, im = pow_c(Fraction(-25, 49, config=cfg), 0.5)
    # the real part is a rounding residue of cos(pi / 2)
    assert abs(re.to_double()) <= 1e-3
    assert_pair(im, 5, 7)


def test_pow_c_undefined_returns_input_and_zero():
    re, im = pow_c(ZERO, -2)
    assert re is ZERO
    assert_pair(im, 0, 1)
    re, im = Fraction(-1, 0).pow_c(1)
    assert_pair(re, -1, 0)
    assert_pair(im, 0, 1)


def test_sq_cb():
    assert_pair(sq(Fraction(-2, 3)), 4, 9)
    assert_pair(cb(Fraction(-2, 3)), -8, 27)
    assert_pair(Fraction(2, 3).sq(), 4, 9)
    assert_pair(Fraction(2, 3).cb(), 8, 27)
    assert_pair(sq(INFINITY), 1, 0)


def test_sqrt():
    assert_pair(sqrt(Fraction(1, 4)), 1, 2)
    assert_pair(Fraction(49, 9).sqrt(), 7, 3)
    assert_pair(sqrt(Fraction(-1, 4)), 0, 1)
    assert sqrt(INFINITY) is INFINITY
    assert abs(sqrt(Fraction(2)).to_double() - math.sqrt(2)) <= 1e-6


def test_sqrt_c():
    re, im = sqrt_c(Fraction(-1, 4))
    assert_pair(re, 0, 1)
    assert_pair(im, 1, 2)
    re, im = Fraction(9, 4).sqrt_c()
    assert_pair(re, 3, 2)
    assert_pair(im, 0, 1)
    re, im = sqrt_c(INFINITY)
    assert re is INFINITY
    assert_pair(im, 0, 1)


def test_cbrt():
    assert_pair(cbrt(Fraction(8, 27)), 2, 3)
    assert_pair(Fraction(-8, 27).cbrt(), -2, 3)
    assert cbrt(INFINITY) is INFINITY


def test_is_abs_sq():
    assert is_abs_sq(Fraction(4, 9))
    assert is_abs_sq(Fraction(-4, 9))
    assert Fraction(1, 4).is_abs_sq()
    assert not is_abs_sq(Fraction(2, 9))
    assert not is_abs_sq(Fraction(392, 10125))
    assert is_abs_sq(ZERO)
    assert is_abs_sq(INFINITY)


def test_is_cb():
    assert is_cb(Fraction(8, 27))
    assert is_cb(Fraction(-8, 27))
    assert not Fraction(4, 27).is_cb()
    assert not is_cb(Fraction(2))
    assert is_cb(ZERO)
    assert is_cb(INFINITY)


def test_frexp():
    mantissa, exp = frexp(Fraction(48, 7))
    assert_pair(mantissa, 6, 7)
    assert exp == 3
    mantissa, exp = Fraction(1, 4).frexp()
    assert_pair(mantissa, 1, 2)
    assert exp == -1
    mantissa, exp = frexp(Fraction(-3))
    assert_pair(mantissa, -3, 4)
    assert exp == 2
    assert frexp(INFINITY) == (INFINITY, 0)


def test_ldexp():
    assert_pair(ldexp(Fraction(7), -4), 7, 16)
    assert_pair(Fraction(6, 7).ldexp(3), 48, 7)
    assert ldexp(INFINITY, 3) is INFINITY


@pytest.mark.parametrize(
    "f, factor, remainder",
    [
        (Fraction(56, 45), (2, 3), (14, 5)),
        (Fraction(392, 10125), (14, 45), (2, 5)),
        (Fraction(8, 27), (2, 3), (2, 3)),
        (Fraction(1, 4), (1, 2), (1, 1)),
        (Fraction(-25, 49), (5, 7), (-1, 1)),
        (Fraction(2, 3), (1, 1), (2, 3)),
    ],
)
def test_simplify_sqrt(f, factor, remainder):
    fac, rem = simplify_sqrt(f)
    assert_pair(fac, *factor)
    assert_pair(rem, *remainder)
    assert fac * fac * rem == f


@pytest.mark.parametrize(
    "f, factor, remainder",
    [
        (Fraction(392, 10125), (2, 15), (49, 3)),
        (Fraction(8, 27), (2, 3), (1, 1)),
        (Fraction(19208, 10125), (14, 15), (7, 3)),
        (Fraction(-16), (2, 1), (-2, 1)),
        (Fraction(4, 9), (1, 1), (4, 9)),
    ],
)
def test_simplify_cbrt(f, factor, remainder):
    fac, rem = f.simplify_cbrt()
    assert_pair(fac, *factor)
    assert_pair(rem, *remainder)
    assert fac * fac * fac * rem == f


def test_simplify_rt_higher_order():
    fac, rem = simplify_rt(Fraction(48, 625), 4)
    assert_pair(fac, 2, 5)
    assert_pair(rem, 3, 1)


def test_simplify_degenerate():
    fac, rem = simplify_sqrt(ZERO)
    assert fac == ONE
    assert rem is ZERO
    fac, rem = simplify_cbrt(INFINITY)
    assert fac == ONE
    assert rem is INFINITY


def test_str_of_simplified_parts():
    fac, rem = Fraction(-25, 49).simplify_sqrt()
    assert str(fac) == "(5/7)"
    assert str(rem) == "(-1)"
