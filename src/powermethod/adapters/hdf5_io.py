# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
HDF5 matrix I/O adapter.

Reads and writes dense square matrices stored as a 2-D dataset inside an
HDF5 file. The dataset lives at /A/value unless another path is given.
h5py is confined to this adapter.
"""
import logging
import os

import h5py
import numpy as np

from powermethod.domain.errors import MatrixLoadError
from powermethod.domain.matrix import DenseMatrix
from powermethod.ports import MatrixSource

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = "/A/value"


class Hdf5MatrixSource(MatrixSource):
    """Loads a square float matrix from an HDF5 dataset."""

    def __init__(self, dataset_path: str = DEFAULT_DATASET_PATH):
        self.dataset_path = dataset_path

    def load_matrix(self, identifier: str) -> DenseMatrix:
        if not os.path.isfile(identifier):
            raise MatrixLoadError(identifier, "file not found")

        logger.debug("Opening %s (dataset %s)", identifier, self.dataset_path)
        try:
            with h5py.File(identifier, 'r') as h5file:
                values = self._read_square(h5file, identifier)
        except MatrixLoadError:
            raise
        except (OSError, TypeError, ValueError) as e:
            raise MatrixLoadError(identifier, f"I/O failure: {e}") from e

        n = values.shape[0]
        logger.debug("Read %dx%d matrix from %s", n, n, identifier)
        return DenseMatrix(values=values, n=n)

    def _read_square(self, h5file: h5py.File, identifier: str) -> np.ndarray:
        dset = h5file.get(self.dataset_path)
        if dset is None:
            raise MatrixLoadError(
                identifier, f"dataset {self.dataset_path} not found",
            )
        if not isinstance(dset, h5py.Dataset):
            raise MatrixLoadError(
                identifier, f"{self.dataset_path} is not a dataset",
            )
        if dset.ndim != 2:
            raise MatrixLoadError(
                identifier,
                f"expected dataspace to be 2-dimensional but it appears "
                f"to be {dset.ndim}-dimensional",
            )
        rows, cols = dset.shape
        if rows != cols:
            raise MatrixLoadError(
                identifier, f"matrix is not square ({rows}x{cols})",
            )
        return np.asarray(dset[()], dtype=np.float64)


class Hdf5MatrixWriter:
    """Writes a DenseMatrix as a 2-D float64 HDF5 dataset."""

    def __init__(self, dataset_path: str = DEFAULT_DATASET_PATH):
        self.dataset_path = dataset_path

    def write_matrix(self, matrix: DenseMatrix, path: str) -> None:
        # Intermediate groups (e.g. /A) are created by h5py.
        with h5py.File(path, 'w') as h5file:
            h5file.create_dataset(self.dataset_path, data=matrix.rows())
        logger.debug("Wrote %dx%d matrix to %s", matrix.n, matrix.n, path)
