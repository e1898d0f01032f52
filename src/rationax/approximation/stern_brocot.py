"""
Approximation of floats by fractions through a binary search in the Stern-Brocot tree.

Every fraction in lowest terms appears exactly once in the tree, and the mediant of two neighbouring
bounds is the simplest fraction between them. Walking down the tree therefore returns the fraction
with the smallest denominator (along the search path) that lies within the configured error of the target.
"""

from __future__ import annotations

import logging
import math

from rationax.core.config import DEFAULT_CONFIG, FractionConfig
from rationax.core.fraction import Fraction
from rationax.core.utils import canonical_pair, float_to_int, ratio_to_float

logger = logging.getLogger(__name__)


def mediant(
    f1: Fraction,
    f2: Fraction,
) -> Fraction:
    """
    Mediant (a + c) / (b + d) of two fractions a/b and c/d.

    Args:
        f1 (Fraction): First fraction, its configuration is used for the result
        f2 (Fraction): Second fraction

    Returns:
        Fraction: The reduced mediant
    """
    return Fraction(
        f1.numerator + f2.numerator,
        f1.denominator + f2.denominator,
        config=f1.config,
    )


def stern_brocot_pair(
    value: float,
    config: FractionConfig = DEFAULT_CONFIG,
) -> tuple[int, int]:
    """
    Searches the Stern-Brocot tree for a fraction within config.error of value.

    Instead of the tree roots 0/1 and 1/0, the search starts between floor(value) and ceil(value).
    NaN maps to 0/1, which is the real part policy of roots and powers of negative numbers.
    Infinities map to the sentinels 1/0 and -1/0.

    Args:
        value (float): Float to approximate
        config (FractionConfig, optional): Configuration defining error and storage width.

    Returns:
        tuple[int, int]: Canonical numerator and denominator
    """
    if math.isnan(value):
        return 0, 1
    if math.isinf(value):
        return (1, 0) if value > 0 else (-1, 0)

    error = config.error
    low_num, low_den = float_to_int(math.floor(value), config), 1
    high_num, high_den = float_to_int(math.ceil(value), config), 1

    med_num, med_den = low_num, low_den
    for iteration in range(config.max_iterations):
        med_num, med_den = canonical_pair(low_num + high_num, low_den + high_den, config)
        deviation = ratio_to_float(med_num, med_den) - value
        if deviation > error:
            high_num, high_den = med_num, med_den
        elif deviation < -error:
            low_num, low_den = med_num, med_den
        else:
            logger.debug(f"Stern-Brocot approximated {value} by {med_num}/{med_den} after {iteration + 1} steps")
            return med_num, med_den

    logger.warning(
        f"Stern-Brocot search for {value} did not converge within {config.max_iterations} steps, "
        f"returning {med_num}/{med_den}"
    )
    return med_num, med_den


def to_fraction_using_stern_brocot(
    value: float,
    config: FractionConfig = DEFAULT_CONFIG,
) -> Fraction:
    """
    Approximates a float with a fraction by a Stern-Brocot search.

    Examples:
        >>> to_fraction_using_stern_brocot(3.141592654)
        (355/113)

    Args:
        value (float): Float to approximate
        config (FractionConfig, optional): Configuration defining error and storage width.

    Returns:
        Fraction: Fraction within config.error of value
    """
    return Fraction(float(value), config=config)
