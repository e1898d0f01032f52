"""
Continued fraction expansion of floats, and the reconstruction of fractions from the expansion.

The expansion stops once the fractional remainder drops below the configured error, which is a
different criterion than the distance check of the Stern-Brocot search. Both approximators can
therefore disagree on the same input, e.g. 392/10125 is reproduced by the Stern-Brocot search as
35/904, but exactly through the continued fraction.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from rationax.core.config import DEFAULT_CONFIG, FractionConfig
from rationax.core.fraction import Fraction
from rationax.core.typing import IntegerLike
from rationax.core.utils import float_to_int

logger = logging.getLogger(__name__)


def to_continued_fraction(
    value: float,
    config: FractionConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """
    Expands a float into the coefficients [a_0, a_1, ...] of its continued fraction
    a_0 + 1 / (a_1 + 1 / (a_2 + ...)).

    Args:
        value (float): The real number to expand. Negative numbers produce non-positive coefficients.
        config (FractionConfig, optional): Configuration defining the error threshold, the storage dtype
            and the number of terms.

    Returns:
        np.ndarray: Array of length config.cf_max_terms. Coefficients after the expansion terminated are zero.
    """
    ais = np.zeros(config.cf_max_terms, dtype=config.int_dtype)
    residue = float(value)

    for i in range(config.cf_max_terms):
        residue, int_part = math.modf(residue)
        ais[i] = float_to_int(int_part, config)

        if abs(residue) < config.error:
            logger.debug(f"Continued fraction of {value} terminated after {i + 1} terms")
            break
        residue = 1.0 / residue

    return ais


def from_continued_fraction(
    ais: Sequence[IntegerLike] | np.ndarray,
    config: FractionConfig = DEFAULT_CONFIG,
) -> Fraction:
    """
    Evaluates the coefficients [a_0, a_1, ..., a_n] of a continued fraction from the last to the first.
    Zero placeholders at the end of the sequence are skipped.

    Args:
        ais (Sequence[IntegerLike] | np.ndarray): Coefficients of the continued fraction
        config (FractionConfig, optional): Configuration of the resulting fraction.

    Returns:
        Fraction: The value of the continued fraction
    """
    result = Fraction.zero(config)
    for a in reversed(list(ais)):
        if result.numerator == 0:
            result = Fraction(int(a), config=config)
        else:
            result = result.inverse() + int(a)
    return result


def to_fraction_using_continued_fractions(
    value: float,
    config: FractionConfig = DEFAULT_CONFIG,
) -> Fraction:
    """Approximates a float by expanding it into a continued fraction and evaluating the expansion."""
    return from_continued_fraction(to_continued_fraction(value, config), config)


def format_continued_fraction(ais: Sequence[IntegerLike] | np.ndarray) -> str:
    """
    Comma separated coefficients without the trailing zero placeholders. The first coefficient is always kept.

    Examples:
        >>> format_continued_fraction([0, 4, 0, 0])
        '0,4'
    """
    values = [int(a) for a in ais]
    last = len(values)
    while last > 1 and values[last - 1] == 0:
        last -= 1
    return ",".join(str(v) for v in values[:last])
