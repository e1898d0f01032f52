"""
Powers, roots and binary exponents of fractions.

Apart from the exact operations (sq, cb, the perfect power checks and the root factor extraction),
everything is evaluated in floating point and approximated again by the Stern-Brocot search.
Undefined results do not raise: the input is returned unchanged, and NaN results become zero.
"""

import math

import numpy as np

from rationax.core.fraction import Fraction
from rationax.core.utils import integer_root


def _approximate(value: float, like: Fraction) -> Fraction:
    return Fraction(float(value), config=like.config)


def _signed_integer_root(value: int, root: int) -> int:
    # truncates toward zero for negative values
    if value < 0:
        return -integer_root(-value, root)
    return integer_root(value, root)


def _undefined_power(x: Fraction, exp: float) -> bool:
    return (exp < 0 and x.numerator == 0) or (exp >= 0 and x.denominator == 0)


## Powers ###########################
def pow(x: Fraction, exp: float) -> Fraction:
    """
    Raises a fraction to a real power. Negative bases with a fractional exponent result in zero,
    i.e. the real part of 0 + i * y.

    Args:
        x (Fraction): Base
        exp (float): Exponent

    Returns:
        Fraction: Approximation of x^exp, or x itself if the power is undefined
    """
    if _undefined_power(x, exp):
        return x
    with np.errstate(all="ignore"):
        result = np.power(x.to_double(), float(exp))
    return _approximate(result, x)


def pow_c(x: Fraction, exp: float) -> tuple[Fraction, Fraction]:
    """
    Raises a fraction to a real power in the complex plane.

    Args:
        x (Fraction): Base
        exp (float): Exponent

    Returns:
        tuple[Fraction, Fraction]: Approximations of the real and imaginary part of x^exp.
            If the power is undefined, x and zero are returned.
    """
    if _undefined_power(x, exp):
        return x, Fraction.zero(x.config)
    with np.errstate(all="ignore"):
        result = np.power(np.complex128(x.to_double()), float(exp))
    return _approximate(result.real, x), _approximate(result.imag, x)


def sq(x: Fraction) -> Fraction:
    return x * x


def cb(x: Fraction) -> Fraction:
    return x * x * x


## Roots ###########################
def sqrt(x: Fraction) -> Fraction:
    """Square root of a fraction. The root of a negative fraction is zero (the real part)."""
    if x.denominator == 0:
        return x
    with np.errstate(invalid="ignore"):
        result = np.sqrt(x.to_double())
    return _approximate(result, x)


def sqrt_c(x: Fraction) -> tuple[Fraction, Fraction]:
    """Complex square root of a fraction, returned as approximations of real and imaginary part."""
    if x.denominator == 0:
        return x, Fraction.zero(x.config)
    result = np.sqrt(np.complex128(x.to_double()))
    return _approximate(result.real, x), _approximate(result.imag, x)


def cbrt(x: Fraction) -> Fraction:
    if x.denominator == 0:
        return x
    return _approximate(np.cbrt(x.to_double()), x)


def is_abs_sq(x: Fraction) -> bool:
    """Checks whether the absolute value of a fraction is the square of a fraction."""
    root = Fraction(math.isqrt(abs(x.numerator)), math.isqrt(x.denominator), config=x.config)
    return x.abs() == root * root


def is_cb(x: Fraction) -> bool:
    """Checks whether a fraction is the cube of a fraction."""
    root = Fraction(
        _signed_integer_root(x.numerator, 3),
        _signed_integer_root(x.denominator, 3),
        config=x.config,
    )
    return x == root * root * root


## Binary exponents ###########################
def frexp(x: Fraction) -> tuple[Fraction, int]:
    """
    Decomposes a fraction into a mantissa in (-1, -0.5] or [0.5, 1) and a power of two, as math.frexp does.

    Examples:
        >>> frexp(Fraction(48, 7))
        ((6/7), 3)

    Args:
        x (Fraction): Fraction to decompose

    Returns:
        tuple[Fraction, int]: Approximated mantissa and exponent. The sentinel is returned with exponent zero.
    """
    if x.denominator == 0:
        return x, 0
    mantissa, exp = math.frexp(x.to_double())
    return _approximate(mantissa, x), exp


def ldexp(x: Fraction, exp: int) -> Fraction:
    """Multiplies a fraction by 2^exp in floating point, as math.ldexp does."""
    if x.denominator == 0:
        return x
    with np.errstate(over="ignore"):
        result = np.ldexp(x.to_double(), int(exp))
    return _approximate(result, x)


## Root factor extraction ###########################
def _extract_root_factor(value: int, root: int, like: Fraction) -> tuple[int, Fraction]:
    # largest factor f with f^root dividing value, starting at the integer root of |value|
    factor = integer_root(abs(value), root)
    while factor > 0:
        if value % (factor**root) == 0:
            return factor, Fraction(value, factor**root, config=like.config)
        factor -= 1
    return 1, Fraction(value, config=like.config)


def simplify_rt(x: Fraction, root: int) -> tuple[Fraction, Fraction]:
    """
    Splits a fraction into a factor and a remainder, such that factor^root * remainder == x.
    The factor holds the largest root-th powers dividing numerator and denominator.

    Examples:
        >>> simplify_rt(Fraction(56, 45), 2)  # (2*2*2*7) / (3*3*5)
        ((2/3), (14/5))
        >>> simplify_rt(Fraction(19208, 10125), 3)  # (2*2*2*7*7*7*7) / (3*3*3*3*5*5*5)
        ((14/15), (7/3))

    Args:
        x (Fraction): Fraction to simplify
        root (int): Order of the root, e.g. 2 for square roots

    Returns:
        tuple[Fraction, Fraction]: Factor and remainder. If nothing can be extracted, (1, x) is returned.
    """
    num_factor, num_remain = _extract_root_factor(x.numerator, root, x)
    den_factor, den_remain = _extract_root_factor(x.denominator, root, x)
    if num_factor > 1 or den_factor > 1:
        return Fraction(num_factor, den_factor, config=x.config), num_remain / den_remain
    return Fraction.one(x.config), x


def simplify_sqrt(x: Fraction) -> tuple[Fraction, Fraction]:
    return simplify_rt(x, 2)


def simplify_cbrt(x: Fraction) -> tuple[Fraction, Fraction]:
    return simplify_rt(x, 3)
