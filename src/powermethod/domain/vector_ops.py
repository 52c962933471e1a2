# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Elementary vector arithmetic for power iteration.

Vectors are 1-D float64 numpy arrays. Every operation takes an explicit
length n and only touches the first n entries, so callers can pass
scratch buffers that are longer than the active problem.
"""
import math

import numpy as np

from powermethod.domain.errors import InvalidArgumentError, ZeroVectorError


def _check_length(name: str, vec: np.ndarray, n: int) -> None:
    if n < 0:
        raise InvalidArgumentError(f"n must be non-negative, got {n}")
    if len(vec) < n:
        raise InvalidArgumentError(
            f"{name} has length {len(vec)}, need at least {n}"
        )


def inner_product(a: np.ndarray, b: np.ndarray, n: int) -> float:
    """Dot product of the first n entries of a and b."""
    _check_length("a", a, n)
    _check_length("b", b, n)
    return float(np.dot(a[:n], b[:n]))


def vector_norm(src: np.ndarray, n: int) -> float:
    """Euclidean norm of the first n entries of src.

    Entries are divided by the largest magnitude before squaring, so the
    intermediate sum of squares cannot overflow or underflow.
    Returns inf or nan when src holds non-finite entries.
    """
    _check_length("src", src, n)
    if n == 0:
        return 0.0
    scale = float(np.max(np.abs(src[:n])))
    if scale == 0.0 or not math.isfinite(scale):
        return scale
    scaled = src[:n] / scale
    return scale * math.sqrt(inner_product(scaled, scaled, n))


def normalize(dst: np.ndarray, src: np.ndarray, n: int) -> np.ndarray:
    """Write src / ||src|| into dst and return dst.

    dst and src may be the same array.

    Raises:
        ZeroVectorError: If ||src|| is zero or not finite.
    """
    _check_length("dst", dst, n)
    magnitude = vector_norm(src, n)
    if magnitude == 0.0 or not math.isfinite(magnitude):
        raise ZeroVectorError(
            f"cannot normalize vector with magnitude {magnitude}"
        )
    np.divide(src[:n], magnitude, out=dst[:n])
    return dst
