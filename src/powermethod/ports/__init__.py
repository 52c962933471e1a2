# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for matrix input.

Adapters implement this to read matrices from different storage formats.
"""
from abc import ABC, abstractmethod

from powermethod.domain.matrix import DenseMatrix


class MatrixSource(ABC):
    """Port for loading a dense square matrix."""

    @abstractmethod
    def load_matrix(self, identifier: str) -> DenseMatrix:
        """
        Load the matrix named by identifier.

        Raises:
            MatrixLoadError: If the source cannot produce a valid square
                matrix (not found, not 2-dimensional, not square, I/O
                failure).
        """
        ...
