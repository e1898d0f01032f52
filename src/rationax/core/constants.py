import numpy as np

"""Default storage type of numerator and denominator"""
DEFAULT_INT_DTYPE = np.int64

"""Approximations of floats are accepted once they are within 10^DEFAULT_ERROR_EXP of the target"""
DEFAULT_ERROR_EXP: int = -6

"""Number of terms of a continued fraction expansion"""
DEFAULT_CF_MAX_TERMS: int = 25

"""
Upper bound on the number of mediants visited by the Stern-Brocot search.
Approximating tiny values needs about 10^(-DEFAULT_ERROR_EXP) steps
(1e-17 walks through 1/2, 1/3, ..., 1/1000000), so the cap has to stay
well above that. The cap is also the only bound for finite inputs far outside the
storage range (e.g. 1e30, whose floor and ceil saturate at the same limit): they walk
through all 10_000_000 mediants in Python, which takes many seconds, before the
warning fires. Pass a FractionConfig with a smaller max_iterations for such inputs.
"""
DEFAULT_MAX_ITERATIONS: int = 10_000_000
