#!/usr/bin/env python3
"""Generate a symmetric test matrix in HDF5 for the power method CLI.

Deterministic (seeded RNG). Builds A = Q diag(λ) Qᵀ with a random
orthogonal Q and a chosen spectrum, so the dominant eigenvalue of the
written matrix is known in advance.

Usage:
    python scripts/generate_matrix.py out.h5 --size 200 --dominant 10.0
"""
import argparse
import sys

import numpy as np

from powermethod.adapters.hdf5_io import DEFAULT_DATASET_PATH, Hdf5MatrixWriter
from powermethod.domain.matrix import DenseMatrix


def symmetric_with_spectrum(eigenvalues: np.ndarray, seed: int) -> np.ndarray:
    """Q diag(eigenvalues) Qᵀ for a seeded random orthogonal Q."""
    rng = np.random.default_rng(seed)
    n = len(eigenvalues)
    q, r = np.linalg.qr(rng.standard_normal((n, n)))
    q = q * np.sign(np.diag(r))
    a = (q * eigenvalues) @ q.T
    return 0.5 * (a + a.T)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('output', help="HDF5 file to write")
    parser.add_argument('--size', '-n', type=int, default=100, help="Matrix dimension (default: 100)")
    parser.add_argument('--dominant', type=float, default=10.0,
                        help="Dominant eigenvalue (default: 10.0)")
    parser.add_argument('--gap', type=float, default=0.5,
                        help="Ratio λ₂/λ₁ of the second to the dominant eigenvalue (default: 0.5)")
    parser.add_argument('--seed', type=int, default=42, help="RNG seed (default: 42)")
    parser.add_argument('--dataset', default=DEFAULT_DATASET_PATH,
                        help=f"Dataset path inside the file (default: {DEFAULT_DATASET_PATH})")
    args = parser.parse_args()

    if args.size < 1:
        print("Error: size must be positive", file=sys.stderr)
        return 1
    if not 0.0 <= args.gap < 1.0:
        print("Error: gap must be in [0, 1)", file=sys.stderr)
        return 1

    rest = np.linspace(args.gap, 0.0, num=max(args.size - 1, 0), endpoint=False)
    spectrum = np.concatenate(([1.0], rest)) * args.dominant
    values = symmetric_with_spectrum(spectrum, args.seed)

    matrix = DenseMatrix(values=values, n=args.size)
    Hdf5MatrixWriter(dataset_path=args.dataset).write_matrix(matrix, args.output)
    print(f"Wrote {args.size}x{args.size} matrix to {args.output} "
          f"(dominant eigenvalue {args.dominant:g})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
