import operator

import numpy as np
import plum
import pytest

from rationax import INFINITY, ZERO, Fraction, average
from rationax.functional.arithmetic import add, divide, mod, multiply, negative, subtract
from tests.utils import assert_pair, get_binary_function_list_from_op


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        (Fraction(1, 2), Fraction(1, 3), (5, 6)),
        (Fraction(1, 2), 3, (7, 2)),
        (3, Fraction(1, 2), (7, 2)),
        (Fraction(7), 1.5, (17, 2)),
        (1.5, Fraction(7), (17, 2)),
        (Fraction(1, 2), INFINITY, (1, 0)),
        (INFINITY, 2.5, (1, 0)),
    ],
)
def test_add(lhs, rhs, expected):
    assert_pair(lhs + rhs, *expected)
    assert_pair(add(lhs, rhs), *expected)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        (Fraction(1, 2), Fraction(1, 3), (1, 6)),
        (Fraction(1, 2), 1, (-1, 2)),
        (1, Fraction(1, 3), (2, 3)),
        (Fraction(-2, 5), 1.5, (-19, 10)),
        (4, INFINITY, (-1, 0)),
        (Fraction(4), INFINITY, (-1, 0)),
    ],
)
def test_subtract(lhs, rhs, expected):
    assert_pair(lhs - rhs, *expected)
    assert_pair(subtract(lhs, rhs), *expected)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        (Fraction(1, 2), Fraction(2, 3), (1, 3)),
        (Fraction(48, 7), 7, (48, 1)),
        (-2, Fraction(1, 4), (-1, 2)),
        (Fraction(1, 2), 0.5, (1, 4)),
        (INFINITY, 0.5, (1, 0)),
        (INFINITY, ZERO, (0, 0)),
    ],
)
def test_multiply(lhs, rhs, expected):
    assert_pair(lhs * rhs, *expected)
    assert_pair(multiply(lhs, rhs), *expected)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        (Fraction(1, 2), Fraction(1, 4), (2, 1)),
        (Fraction(3, 4), 3, (1, 4)),
        (3, Fraction(3, 4), (4, 1)),
        (Fraction(1, 2), 0.25, (2, 1)),
        (2.0, Fraction(1, 4), (8, 1)),
        (1.0, ZERO, (1, 0)),
        (Fraction(1, 2), 0, (1, 0)),
        (Fraction(-1, 2), ZERO, (-1, 0)),
    ],
)
def test_divide(lhs, rhs, expected):
    assert_pair(lhs / rhs, *expected)
    assert_pair(divide(lhs, rhs), *expected)


def test_divide_float_by_zero_follows_ieee():
    assert_pair(Fraction(1, 2) / 0.0, 1, 0)
    assert_pair(Fraction(-1, 2) / 0.0, -1, 0)
    # nan is approximated by zero
    assert_pair(ZERO / 0.0, 0, 1)


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        (Fraction(48, 7), 5, (13, 7)),
        (Fraction(48, 7), Fraction(3, 2), (6, 7)),
        (Fraction(48, 7), 1.5, (6, 7)),
        (Fraction(-48, 7), 5, (-13, 7)),
        (7, Fraction(3, 2), (1, 1)),
        (Fraction(48, 7), 0, (1, 0)),
        (Fraction(48, 7), ZERO, (1, 0)),
        (5, ZERO, (1, 0)),
        (INFINITY, 3, (1, 0)),
        (Fraction(1, 2), INFINITY, (1, 0)),
    ],
)
def test_mod(lhs, rhs, expected):
    assert_pair(lhs % rhs, *expected)
    assert_pair(mod(lhs, rhs), *expected)


def test_mod_float_lhs():
    assert_pair(7.5 % Fraction(2), 3, 2)
    assert_pair(1.0 % INFINITY, 1, 0)


def test_negative():
    assert_pair(negative(Fraction(1, 3)), -1, 3)
    assert_pair(negative(ZERO), 0, 1)
    assert_pair(negative(INFINITY), -1, 0)


def test_numpy_scalars():
    assert_pair(Fraction(1, 2) + np.int32(1), 3, 2)
    assert_pair(Fraction(1, 4) * np.int64(2), 1, 2)
    assert_pair(Fraction(1, 2) + np.float64(0.25), 3, 4)


def test_identities():
    f = Fraction(48, 7)
    g = Fraction(-25, 49)
    assert f + ZERO == f
    assert f * 1 == f
    assert f - f == ZERO
    assert f + (-f) == ZERO
    assert f / f == 1
    assert f + g == g + f
    assert f * g == g * f
    assert (f + g) - g == f
    assert f * f.inverse() == 1


def test_wraparound():
    big = Fraction(2**62)
    # 2^62 * 4 overflows the 64 bit storage to zero
    assert_pair(big * 4, 0, 1)


@pytest.mark.parametrize(
    "op, fn",
    [
        (operator.add, add),
        (operator.sub, subtract),
        (operator.mul, multiply),
        (operator.truediv, divide),
    ],
)
def test_operator_matches_functional(op, fn):
    x = Fraction(3, 4)
    y = Fraction(-2, 5)
    for op_fn, functional_fn in zip(
        get_binary_function_list_from_op(op),
        get_binary_function_list_from_op(fn),
    ):
        assert op_fn(x, y) == functional_fn(x, y)
        assert op_fn(x, 3) == functional_fn(x, 3)


def test_average():
    assert_pair(average(Fraction(1, 2), Fraction(1, 4), 7), 31, 12)
    assert_pair(average(Fraction(1, 3)), 1, 3)
    assert_pair(average(), 0, 1)


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Fraction(1, 2) + "a"
    with pytest.raises(TypeError):
        "a" * Fraction(1, 2)
    with pytest.raises(plum.NotFoundLookupError):
        add(Fraction(1, 2), "a")
    with pytest.raises(plum.NotFoundLookupError):
        multiply(1, 2)
