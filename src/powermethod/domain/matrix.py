# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Dense square matrix value type.

A DenseMatrix owns a flat row-major float64 buffer that is marked
read-only, so the solver and any reporter can share it without copying.
"""
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from powermethod.domain.errors import InvalidArgumentError


@dataclass(frozen=True, eq=False)
class DenseMatrix:
    """n x n matrix stored row-major in a flat float64 buffer."""
    values: np.ndarray
    n: int

    def __post_init__(self):
        if self.n < 0:
            raise InvalidArgumentError(f"n must be non-negative, got {self.n}")
        values = np.array(self.values, dtype=np.float64).ravel()
        if values.size != self.n * self.n:
            raise InvalidArgumentError(
                f"expected {self.n * self.n} values for a {self.n}x{self.n} "
                f"matrix, got {values.size}"
            )
        values.flags.writeable = False
        object.__setattr__(self, 'values', values)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "DenseMatrix":
        """Build from nested rows, e.g. [[2, 0], [0, 1]]."""
        arr = np.asarray(rows, dtype=np.float64)
        if arr.size == 0:
            return cls(values=np.zeros(0), n=0)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise InvalidArgumentError(
                f"rows must form a square matrix, got shape {arr.shape}"
            )
        return cls(values=arr.ravel(), n=arr.shape[0])

    def rows(self) -> np.ndarray:
        """Read-only (n, n) view of the buffer."""
        return self.values.reshape(self.n, self.n)


def format_matrix(matrix: DenseMatrix) -> str:
    """Render matrix rows with a fixed ' %8.2f' cell layout and a blank trailing line."""
    lines = []
    for row in matrix.rows():
        lines.append("".join(f" {value:8.2f}" for value in row))
    lines.append("")
    return "\n".join(lines) + "\n"
