from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any

import numpy as np

from rationax.core.constants import (
    DEFAULT_CF_MAX_TERMS,
    DEFAULT_ERROR_EXP,
    DEFAULT_INT_DTYPE,
    DEFAULT_MAX_ITERATIONS,
)
from rationax.core.typing import SIGNED_INT_DTYPES


@dataclass(frozen=True)
class FractionConfig:
    """Parameters shared by all fractions of one flavour.

    Args:
        int_dtype (Any, optional): Signed numpy integer dtype used to store numerator and denominator.
            Products are wrapped to its width. Defaults to int64.
        error_exp (int, optional): Approximations of floats are accepted within 10^error_exp. Defaults to -6.
        cf_max_terms (int, optional): Length of a continued fraction expansion. Defaults to 25.
        max_iterations (int, optional): Maximum number of mediants visited by the Stern-Brocot search.
    """

    int_dtype: Any = DEFAULT_INT_DTYPE
    error_exp: int = DEFAULT_ERROR_EXP
    cf_max_terms: int = DEFAULT_CF_MAX_TERMS
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self):
        try:
            dtype = np.dtype(self.int_dtype)
        except TypeError as e:
            raise TypeError(f"int_dtype {self.int_dtype} is not a numpy dtype") from e
        if dtype not in SIGNED_INT_DTYPES:
            raise TypeError(f"int_dtype must be one of {SIGNED_INT_DTYPES}, but got {dtype}")
        object.__setattr__(self, "int_dtype", dtype)

        if isinstance(self.error_exp, bool) or not isinstance(self.error_exp, int | np.integer):
            raise TypeError(f"error_exp must be an integer, but got {self.error_exp}")
        if self.cf_max_terms < 1:
            raise ValueError(f"cf_max_terms must be positive, but got {self.cf_max_terms}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, but got {self.max_iterations}")

    @cached_property
    def bits(self) -> int:
        return np.iinfo(self.int_dtype).bits

    @cached_property
    def int_min(self) -> int:
        return int(np.iinfo(self.int_dtype).min)

    @cached_property
    def int_max(self) -> int:
        return int(np.iinfo(self.int_dtype).max)

    @cached_property
    def error(self) -> float:
        return 10.0 ** float(self.error_exp)


DEFAULT_CONFIG = FractionConfig()
