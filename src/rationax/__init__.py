from rationax.approximation.continued_fraction import (
    format_continued_fraction,
    from_continued_fraction,
    to_continued_fraction,
    to_fraction_using_continued_fractions,
)
from rationax.approximation.stern_brocot import mediant, to_fraction_using_stern_brocot
from rationax.core.config import DEFAULT_CONFIG, FractionConfig
from rationax.core.fraction import INFINITY, ONE, ZERO, Fraction, as_fraction
from rationax.functional.arithmetic import average

__all__ = [
    "Fraction",
    "FractionConfig",
    "DEFAULT_CONFIG",
    "ZERO",
    "ONE",
    "INFINITY",
    "as_fraction",
    "average",
    "mediant",
    "to_fraction_using_stern_brocot",
    "to_continued_fraction",
    "from_continued_fraction",
    "to_fraction_using_continued_fractions",
    "format_continued_fraction",
]
