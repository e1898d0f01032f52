from __future__ import annotations

import math

from rationax.core.config import FractionConfig


def wrap_int(
    value: int,
    config: FractionConfig,
) -> int:
    """
    Wraps an integer into the storage range of the configured dtype (two's complement),
    which mirrors what fixed-width integer arithmetic does on overflow.

    Args:
        value (int): Arbitrary python integer
        config (FractionConfig): Configuration defining the storage width

    Returns:
        int: Integer in [config.int_min, config.int_max]
    """
    if config.int_min <= value <= config.int_max:
        return value
    half = 1 << (config.bits - 1)
    return ((value + half) % (2 * half)) - half


def float_to_int(
    value: float,
    config: FractionConfig,
) -> int:
    """
    Truncates a float toward zero into the storage range. NaN maps to zero and values outside
    of the range (including infinities) saturate at the range limits.

    Args:
        value (float): Float to convert
        config (FractionConfig): Configuration defining the storage width

    Returns:
        int: Truncated integer
    """
    if math.isnan(value):
        return 0
    if value >= config.int_max:
        return config.int_max
    if value <= config.int_min:
        return config.int_min
    return int(value)


def canonical_pair(
    numerator: int,
    denominator: int,
    config: FractionConfig,
) -> tuple[int, int]:
    """
    Reduces a numerator / denominator pair by their greatest common divisor. The sign ends up
    in the numerator, so the denominator is never negative. A zero denominator collapses to
    (+-1, 0) and (0, 0) is returned unchanged. A denominator of int_min wraps back to int_min
    when its sign moves to the numerator, so it stays negative.

    Args:
        numerator (int): Numerator, wrapped into the storage range first
        denominator (int): Denominator, wrapped into the storage range first
        config (FractionConfig): Configuration defining the storage width

    Returns:
        tuple[int, int]: Canonical numerator and denominator
    """
    num = wrap_int(numerator, config)
    den = wrap_int(denominator, config)
    gcd = math.gcd(num, den)
    if gcd == 0:
        return 0, 0
    signed_gcd = -gcd if den < 0 else gcd
    return wrap_int(num // signed_gcd, config), wrap_int(abs(den) // gcd, config)


def ratio_to_float(
    numerator: int,
    denominator: int,
) -> float:
    """Divides two integers in floating point without raising on a zero denominator."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return float(numerator) / float(denominator)


def integer_root(
    value: int,
    root: int,
) -> int:
    """
    Largest integer r with r^root <= value. The floating point estimate is only used as a start
    and corrected with exact integer checks.

    Args:
        value (int): Non-negative integer
        root (int): Positive root order

    Returns:
        int: Integer root of value
    """
    if value <= 0:
        return 0
    guess = int(math.floor(float(value) ** (1.0 / root)))
    while (guess + 1) ** root <= value:
        guess += 1
    while guess > 0 and guess**root > value:
        guess -= 1
    return guess
