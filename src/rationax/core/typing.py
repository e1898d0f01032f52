from __future__ import annotations

from functools import lru_cache
from typing import Any, Tuple, Union

import numpy as np

# Integral operands, stored exactly
IntegerLike = Union[
    int,
    np.integer,
]

# Floating operands, routed through an approximator
FloatLike = Union[
    float,
    np.floating,
]

# Any scalar that can appear next to a fraction in an operation
ScalarLike = Union[
    int,
    np.integer,
    float,
    np.floating,
]


def _numpy_dtype_is_signed_int(dtype: Any) -> bool:
    """
    Return True if dtype exists in this NumPy build and is a signed integer type.
    """
    if dtype is None:
        return False
    try:
        dt = np.dtype(dtype)
    except TypeError:
        return False
    return dt.kind == "i"


@lru_cache(maxsize=1)
def _signed_int_dtypes() -> Tuple[np.dtype, ...]:
    """
    Return the dtypes that can store numerator and denominator.
    """
    candidates = (
        np.int8,
        np.int16,
        np.int32,
        np.int64,
    )

    out: list[np.dtype] = []
    seen: set[np.dtype] = set()
    for candidate in candidates:
        if not _numpy_dtype_is_signed_int(candidate):
            continue
        dt = np.dtype(candidate)
        if dt not in seen:
            seen.add(dt)
            out.append(dt)

    return tuple(out)


# integer data types which can be used as fraction storage
SIGNED_INT_DTYPES = _signed_int_dtypes()
