from __future__ import annotations

from typing import Any

import numpy as np

from rationax.core.config import DEFAULT_CONFIG, FractionConfig
from rationax.core.pytrees import TreeClass, autoinit, field, frozen_field, frozen_private_field
from rationax.core.typing import FloatLike, IntegerLike, ScalarLike
from rationax.core.utils import canonical_pair, ratio_to_float


@autoinit
class Fraction(TreeClass):
    """Rational number stored as a reduced pair of fixed-width integers.

    The sign is carried by the numerator and the denominator is never negative. A zero denominator is
    not an error: ``Fraction(n, 0)`` collapses to the sentinel ``(1/0)`` (or ``(-1/0)``), which
    propagates through arithmetic instead of raising. A float numerator is approximated with the
    Stern-Brocot search of the configuration.

    Examples:
        >>> Fraction(4, -10)
        (-2/5)
        >>> Fraction(3.141592654)
        (355/113)
    """

    numerator: IntegerLike | FloatLike = field(default=0, kind="POS_OR_KW")
    denominator: IntegerLike = field(default=1, kind="POS_OR_KW")
    config: FractionConfig = frozen_field(default=DEFAULT_CONFIG)
    initial_numerator: int = frozen_private_field()
    initial_denominator: int = frozen_private_field()

    def __post_init__(self):
        num, den = self.numerator, self.denominator
        if isinstance(num, bool | np.bool_) or isinstance(den, bool | np.bool_):
            num, den = int(num), int(den)
        if not isinstance(den, IntegerLike):
            raise TypeError(f"Denominator must be an integer, but got {den}")

        if isinstance(num, FloatLike):
            if den != 1:
                raise TypeError(f"Cannot combine float numerator {num} with denominator {den}")
            from rationax.approximation.stern_brocot import stern_brocot_pair

            num, den = stern_brocot_pair(float(num), self.config)
            self.initial_numerator = num
            self.initial_denominator = den
        elif isinstance(num, IntegerLike):
            self.initial_numerator = int(num)
            self.initial_denominator = int(den)
            num, den = canonical_pair(int(num), int(den), self.config)
        else:
            raise TypeError(f"Numerator must be an integer or float, but got {num}")

        self.numerator = num
        self.denominator = den

    @classmethod
    def zero(cls, config: FractionConfig = DEFAULT_CONFIG) -> "Fraction":
        return cls(0, 1, config=config)

    @classmethod
    def one(cls, config: FractionConfig = DEFAULT_CONFIG) -> "Fraction":
        return cls(1, 1, config=config)

    @classmethod
    def infinity(cls, config: FractionConfig = DEFAULT_CONFIG) -> "Fraction":
        return cls(1, 0, config=config)

    def to_double(self) -> float:
        return ratio_to_float(self.numerator, self.denominator)

    def is_int(self) -> bool:
        return self.denominator == 1

    def is_neg(self) -> bool:
        # constructor moves the sign to the numerator
        return self.numerator < 0

    def abs(self) -> "Fraction":
        return Fraction(abs(self.numerator), self.denominator, config=self.config)

    def inverse(self) -> "Fraction":
        return Fraction(self.denominator, self.numerator, config=self.config)

    def reduced(self) -> "Fraction":
        """
        Canonical form of a fraction. Pytree transformations (e.g. ``jax.tree_util.tree_map``) rebuild
        fractions from their leaves without reducing them, so their results have to be reduced again.
        Fractions with non-integer leaves (e.g. tracers) are returned unchanged.

        Examples:
            >>> jax.tree_util.tree_map(lambda x: x * 2, Fraction(1, 3)).reduced()
            (2/3)
        """
        if not isinstance(self.numerator, IntegerLike) or not isinstance(self.denominator, IntegerLike):
            return self
        return Fraction(int(self.numerator), int(self.denominator), config=self.config)

    def increment(self) -> "Fraction":
        """Returns the fraction moved up by one whole unit"""
        return Fraction(self.numerator + self.denominator, self.denominator, config=self.config)

    def decrement(self) -> "Fraction":
        """Returns the fraction moved down by one whole unit"""
        return Fraction(self.numerator - self.denominator, self.denominator, config=self.config)

    def sq(self) -> "Fraction":
        from rationax.functional.roots import sq

        return sq(self)

    def cb(self) -> "Fraction":
        from rationax.functional.roots import cb

        return cb(self)

    def pow(self, exp: float) -> "Fraction":
        from rationax.functional.roots import pow

        return pow(self, exp)

    def pow_c(self, exp: float) -> tuple["Fraction", "Fraction"]:
        from rationax.functional.roots import pow_c

        return pow_c(self, exp)

    def sqrt(self) -> "Fraction":
        from rationax.functional.roots import sqrt

        return sqrt(self)

    def sqrt_c(self) -> tuple["Fraction", "Fraction"]:
        from rationax.functional.roots import sqrt_c

        return sqrt_c(self)

    def cbrt(self) -> "Fraction":
        from rationax.functional.roots import cbrt

        return cbrt(self)

    def is_abs_sq(self) -> bool:
        from rationax.functional.roots import is_abs_sq

        return is_abs_sq(self)

    def is_cb(self) -> bool:
        from rationax.functional.roots import is_cb

        return is_cb(self)

    def frexp(self) -> tuple["Fraction", int]:
        from rationax.functional.roots import frexp

        return frexp(self)

    def ldexp(self, exp: int) -> "Fraction":
        from rationax.functional.roots import ldexp

        return ldexp(self, exp)

    def simplify_rt(self, root: int) -> tuple["Fraction", "Fraction"]:
        from rationax.functional.roots import simplify_rt

        return simplify_rt(self, root)

    def simplify_sqrt(self) -> tuple["Fraction", "Fraction"]:
        from rationax.functional.roots import simplify_sqrt

        return simplify_sqrt(self)

    def simplify_cbrt(self) -> tuple["Fraction", "Fraction"]:
        from rationax.functional.roots import simplify_cbrt

        return simplify_cbrt(self)

    def __str__(self) -> str:
        if self.is_int():
            if self.is_neg():
                return f"({self.numerator})"
            return str(self.numerator)
        return f"({self.numerator}/{self.denominator})"

    def __repr__(self) -> str:
        return str(self)

    def __hash__(self) -> int:
        if self.is_int():
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __float__(self) -> float:
        return self.to_double()

    def __neg__(self) -> "Fraction":
        from rationax.functional.arithmetic import negative

        return negative(self)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        return self.abs()

    def __add__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction | ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import add

        return add(self, other)

    def __radd__(self, other: Any) -> "Fraction":
        if not isinstance(other, ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import add

        return add(other, self)

    def __sub__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction | ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import subtract

        return subtract(self, other)

    def __rsub__(self, other: Any) -> "Fraction":
        if not isinstance(other, ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import subtract

        return subtract(other, self)

    def __mul__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction | ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import multiply

        return multiply(self, other)

    def __rmul__(self, other: Any) -> "Fraction":
        if not isinstance(other, ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import multiply

        return multiply(other, self)

    def __truediv__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction | ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import divide

        return divide(self, other)

    def __rtruediv__(self, other: Any) -> "Fraction":
        if not isinstance(other, ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import divide

        return divide(other, self)

    def __mod__(self, other: Any) -> "Fraction":
        if not isinstance(other, Fraction | ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import mod

        return mod(self, other)

    def __rmod__(self, other: Any) -> "Fraction":
        if not isinstance(other, ScalarLike):
            return NotImplemented
        from rationax.functional.arithmetic import mod

        return mod(other, self)

    def __pow__(self, exp: Any) -> "Fraction":
        if not isinstance(exp, ScalarLike):
            return NotImplemented
        return self.pow(float(exp))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Fraction | IntegerLike):
            return NotImplemented
        from rationax.functional.comparison import eq

        return eq(self, other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Fraction | IntegerLike):
            return NotImplemented
        from rationax.functional.comparison import ne

        return ne(self, other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction | IntegerLike):
            return NotImplemented
        from rationax.functional.comparison import lt

        return lt(self, other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Fraction | IntegerLike):
            return NotImplemented
        from rationax.functional.comparison import le

        return le(self, other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Fraction | IntegerLike):
            return NotImplemented
        from rationax.functional.comparison import gt

        return gt(self, other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Fraction | IntegerLike):
            return NotImplemented
        from rationax.functional.comparison import ge

        return ge(self, other)


def as_fraction(
    value: Fraction | IntegerLike | FloatLike,
    config: FractionConfig = DEFAULT_CONFIG,
) -> Fraction:
    """Converts an integer (exact) or a float (approximated) to a fraction. Fractions are returned unchanged."""
    if isinstance(value, Fraction):
        return value
    return Fraction(value, config=config)


ZERO = Fraction.zero()
ONE = Fraction.one()
INFINITY = Fraction.infinity()
