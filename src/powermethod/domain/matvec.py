# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Dense matrix-vector product over a flat row-major buffer."""
import numpy as np

from powermethod.domain.errors import InvalidArgumentError


def multiply(
    dst: np.ndarray,
    a: np.ndarray,
    rows: int,
    cols: int,
    x: np.ndarray,
) -> np.ndarray:
    """Write A @ x into dst[:rows] and return dst.

    Args:
        dst: Output buffer, length >= rows. Only dst[:rows] is written.
        a: Row-major matrix buffer with at least rows * cols entries.
        rows: Number of matrix rows.
        cols: Number of matrix columns.
        x: Input vector, length >= cols.

    Returns:
        dst, for chaining.

    Raises:
        InvalidArgumentError: If a dimension is negative or a buffer is
            too short.
    """
    if rows < 0 or cols < 0:
        raise InvalidArgumentError(
            f"dimensions must be non-negative, got {rows}x{cols}"
        )
    if len(a) < rows * cols:
        raise InvalidArgumentError(
            f"matrix buffer has {len(a)} entries, need {rows * cols}"
        )
    if len(x) < cols:
        raise InvalidArgumentError(f"x has length {len(x)}, need {cols}")
    if len(dst) < rows:
        raise InvalidArgumentError(f"dst has length {len(dst)}, need {rows}")

    matrix = a[:rows * cols].reshape(rows, cols)
    np.matmul(matrix, x[:cols], out=dst[:rows])
    return dst
