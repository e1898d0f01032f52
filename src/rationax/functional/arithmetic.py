# ruff: noqa: F811
import functools

import numpy as np
from plum import dispatch

from rationax.core.config import DEFAULT_CONFIG, FractionConfig
from rationax.core.fraction import Fraction
from rationax.core.typing import FloatLike, IntegerLike
from rationax.core.utils import float_to_int


def _approximate(value: float, config: FractionConfig) -> Fraction:
    return Fraction(float(value), config=config)


def _float_divide(x: float, y: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.divide(x, y))


def _float_mod(x: float, y: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.fmod(x, y))


## Negation ###########################
def negative(x: Fraction) -> Fraction:
    return Fraction(-x.numerator, x.denominator, config=x.config)


## Addition ###########################
@dispatch
def add(x: Fraction, y: Fraction) -> Fraction:
    return Fraction(
        x.numerator * y.denominator + x.denominator * y.numerator,
        x.denominator * y.denominator,
        config=x.config,
    )


@dispatch
def add(x: Fraction, y: IntegerLike) -> Fraction:
    return Fraction(x.numerator + x.denominator * int(y), x.denominator, config=x.config)


@dispatch
def add(x: Fraction, y: FloatLike) -> Fraction:
    # lossy: the sum is computed in floating point and approximated again
    if x.denominator == 0:
        return x
    return _approximate(x.to_double() + float(y), x.config)


@dispatch
def add(x: IntegerLike, y: Fraction) -> Fraction:
    return add(y, x)


@dispatch
def add(x: FloatLike, y: Fraction) -> Fraction:
    return add(y, x)


## Subtraction ###########################
@dispatch
def subtract(x: Fraction, y: Fraction) -> Fraction:
    return add(x, negative(y))


@dispatch
def subtract(x: Fraction, y: IntegerLike) -> Fraction:
    return add(x, -int(y))


@dispatch
def subtract(x: Fraction, y: FloatLike) -> Fraction:
    return add(x, -float(y))


@dispatch
def subtract(x: IntegerLike, y: Fraction) -> Fraction:
    return add(negative(y), x)


@dispatch
def subtract(x: FloatLike, y: Fraction) -> Fraction:
    return add(negative(y), x)


## Multiplication ###########################
@dispatch
def multiply(x: Fraction, y: Fraction) -> Fraction:
    return Fraction(x.numerator * y.numerator, x.denominator * y.denominator, config=x.config)


@dispatch
def multiply(x: Fraction, y: IntegerLike) -> Fraction:
    return Fraction(x.numerator * int(y), x.denominator, config=x.config)


@dispatch
def multiply(x: Fraction, y: FloatLike) -> Fraction:
    if x.denominator == 0:
        return x
    return _approximate(x.to_double() * float(y), x.config)


@dispatch
def multiply(x: IntegerLike, y: Fraction) -> Fraction:
    return multiply(y, x)


@dispatch
def multiply(x: FloatLike, y: Fraction) -> Fraction:
    return multiply(y, x)


## Division ###########################
@dispatch
def divide(x: Fraction, y: Fraction) -> Fraction:
    return Fraction(x.numerator * y.denominator, x.denominator * y.numerator, config=x.config)


@dispatch
def divide(x: Fraction, y: IntegerLike) -> Fraction:
    return Fraction(x.numerator, x.denominator * int(y), config=x.config)


@dispatch
def divide(x: Fraction, y: FloatLike) -> Fraction:
    if x.denominator == 0:
        return x
    return _approximate(_float_divide(x.to_double(), float(y)), x.config)


@dispatch
def divide(x: IntegerLike, y: Fraction) -> Fraction:
    return Fraction(int(x) * y.denominator, y.numerator, config=y.config)


@dispatch
def divide(x: FloatLike, y: Fraction) -> Fraction:
    # dividing by zero returns the sentinel without a floating point detour
    if y.numerator == 0:
        return y.inverse()
    return _approximate(float(x) * y.inverse().to_double(), y.config)


## Modulo ###########################
@dispatch
def mod(x: Fraction, y: Fraction) -> Fraction:
    if y.numerator == 0 or y.denominator == 0 or x.denominator == 0:
        return Fraction.infinity(x.config)
    # float_to_int truncates toward zero
    quotient = float_to_int(divide(x, y).to_double(), x.config)
    return subtract(x, multiply(quotient, y))


@dispatch
def mod(x: Fraction, y: IntegerLike) -> Fraction:
    if x.denominator == 0 or y == 0:
        return Fraction.infinity(x.config)
    quotient = float_to_int(divide(x, y).to_double(), x.config)
    return subtract(x, quotient * int(y))


@dispatch
def mod(x: Fraction, y: FloatLike) -> Fraction:
    # uses the floating point remainder directly
    if x.denominator == 0:
        return x
    return _approximate(_float_mod(x.to_double(), float(y)), x.config)


@dispatch
def mod(x: IntegerLike, y: Fraction) -> Fraction:
    return mod(Fraction(int(x), config=y.config), y)


@dispatch
def mod(x: FloatLike, y: Fraction) -> Fraction:
    if y.denominator == 0:
        return y
    return _approximate(_float_mod(float(x), y.to_double()), y.config)


## Aggregation ###########################
def average(*fractions: Fraction) -> Fraction:
    """
    Arithmetic mean of some fractions, computed exactly. The sum is divided by the number of fractions.

    Returns:
        Fraction: Mean of the fractions, zero if no fraction is given
    """
    if not fractions:
        return Fraction.zero(DEFAULT_CONFIG)
    total = functools.reduce(add, fractions)
    return divide(total, len(fractions))
