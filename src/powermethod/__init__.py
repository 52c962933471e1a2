"""
Power Method

Dominant eigenvalue and eigenvector of dense square matrices by power
iteration. Includes the vector and matrix-vector primitives the loop is
built on, an HDF5 matrix source, and text/JSON result reporters behind
a small command-line front end.
"""

from powermethod.domain.errors import (
    PowerMethodError,
    InvalidArgumentError,
    ZeroVectorError,
    MatrixLoadError,
)
from powermethod.domain.vector_ops import (
    inner_product,
    vector_norm,
    normalize,
)
from powermethod.domain.matvec import multiply
from powermethod.domain.matrix import (
    DenseMatrix,
    format_matrix,
)
from powermethod.domain.power_iteration import (
    DEFAULT_TOLERANCE,
    DEFAULT_MAX_ITERATIONS,
    SolverState,
    SolverConfig,
    IterationState,
    SolveResult,
    PowerIterationSolver,
    solve,
    solve_matrix,
)
from powermethod.domain.timing import RunTimings

__version__ = "1.0.0"

__all__ = [
    "PowerMethodError",
    "InvalidArgumentError",
    "ZeroVectorError",
    "MatrixLoadError",
    "inner_product",
    "vector_norm",
    "normalize",
    "multiply",
    "DenseMatrix",
    "format_matrix",
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",
    "SolverState",
    "SolverConfig",
    "IterationState",
    "SolveResult",
    "PowerIterationSolver",
    "solve",
    "solve_matrix",
    "RunTimings",
]
