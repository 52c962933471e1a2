# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Power iteration for the dominant eigenvalue of a dense square matrix.

Starting from the normalized all-ones vector x, each pass computes

    y  = A x
    λ₀ = λ
    λ  = xᵀ y          (Rayleigh quotient, x has unit norm)
    x  = y / ||y||

and stops once |λ - λ₀| < tolerance or the iteration cap is reached.
The convergence test is absolute, so for eigenvalues far from unit
magnitude the tolerance is in the matrix's own units.

Hitting the cap is a normal outcome reported through
SolveResult.converged. A zero image vector (e.g. a nilpotent matrix)
raises ZeroVectorError instead of propagating NaN.

The start vector is fixed, so a run is fully deterministic. The flip
side is that a start vector orthogonal to the dominant eigenvector
never picks it up, and tied dominant eigenvalues (±λ, complex pairs)
may oscillate until the cap.

References:
    Golub & Van Loan (2013). Matrix Computations, 4th ed., §7.3.1.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from powermethod.domain.errors import InvalidArgumentError, ZeroVectorError
from powermethod.domain.matrix import DenseMatrix
from powermethod.domain.matvec import multiply
from powermethod.domain.vector_ops import inner_product, normalize

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITERATIONS = 500


class SolverState(Enum):
    RUNNING = "running"
    DONE = "done"


@dataclass(frozen=True)
class SolverConfig:
    """Stopping policy for one solve."""
    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def validate(self) -> None:
        """Raise InvalidArgumentError for a non-positive tolerance or cap."""
        if not self.tolerance > 0:
            raise InvalidArgumentError(
                f"tolerance must be positive, got {self.tolerance}"
            )
        if self.max_iterations <= 0:
            raise InvalidArgumentError(
                f"number of iterations must be positive, got {self.max_iterations}"
            )


@dataclass
class IterationState:
    """Mutable loop state, discarded once the result is built."""
    eigenvalue: float
    previous_eigenvalue: float
    iterations: int = 0
    phase: SolverState = SolverState.RUNNING
    history: list = field(default_factory=list)

    @property
    def delta(self) -> float:
        return abs(self.eigenvalue - self.previous_eigenvalue)


@dataclass(frozen=True, eq=False)
class SolveResult:
    """Outcome of a power-iteration solve.

    eigenvector is a read-only unit vector. history holds the eigenvalue
    estimate after each iteration, so len(history) == iterations.
    state is the terminal SolverState of the loop that produced it.
    """
    eigenvalue: float
    eigenvector: np.ndarray
    iterations: int
    converged: bool
    delta: float
    history: tuple = ()
    state: SolverState = SolverState.DONE


def _check_matrix(a: np.ndarray, n: int) -> None:
    if n <= 0:
        raise InvalidArgumentError(f"matrix dimension must be positive, got {n}")
    if len(a) < n * n:
        raise InvalidArgumentError(
            f"matrix buffer has {len(a)} entries, need {n * n} for {n}x{n}"
        )
    if not np.all(np.isfinite(a[:n * n])):
        raise InvalidArgumentError("matrix contains non-finite values")


class PowerIterationSolver:
    """Runs power iteration under a fixed SolverConfig.

    The solver holds no per-solve state, so one instance can be reused
    for any number of matrices.
    """

    def __init__(self, config: SolverConfig | None = None):
        self.config = config if config is not None else SolverConfig()
        self.config.validate()

    def solve(self, a: np.ndarray, n: int) -> SolveResult:
        """Dominant eigenpair of the n x n row-major matrix a.

        Args:
            a: Row-major buffer with at least n * n float entries.
            n: Matrix dimension.

        Returns:
            SolveResult with the last eigenvalue/eigenvector estimates.

        Raises:
            InvalidArgumentError: If n <= 0, a is too short or not finite.
            ZeroVectorError: If A x vanishes during the iteration.
        """
        a = np.asarray(a, dtype=np.float64).ravel()
        _check_matrix(a, n)
        tolerance = self.config.tolerance
        max_iterations = self.config.max_iterations

        # Scratch buffers live for this call only and are reused every pass.
        x = np.ones(n, dtype=np.float64)
        y = np.empty(n, dtype=np.float64)
        normalize(x, x, n)

        state = IterationState(eigenvalue=0.0, previous_eigenvalue=2.0 * tolerance)
        while state.delta >= tolerance and state.iterations < max_iterations:
            multiply(y, a, n, n, x)
            state.previous_eigenvalue = state.eigenvalue
            state.eigenvalue = inner_product(x, y, n)
            try:
                normalize(x, y, n)
            except ZeroVectorError as e:
                raise ZeroVectorError(
                    f"A x vanished at iteration {state.iterations + 1}; "
                    "the start vector lies in the null space of a power of A",
                    iteration=state.iterations + 1,
                ) from e
            state.iterations += 1
            state.history.append(state.eigenvalue)
            logger.debug(
                "iteration %d: eigenvalue=%.15g delta=%.3e",
                state.iterations, state.eigenvalue, state.delta,
            )
        state.phase = SolverState.DONE

        converged = state.delta < tolerance
        if converged:
            logger.info(
                "Converged to %.15g after %d iterations", state.eigenvalue, state.iterations,
            )
        else:
            logger.warning(
                "No convergence after %d iterations (delta=%.3e, tolerance=%.3e)",
                state.iterations, state.delta, tolerance,
            )

        eigenvector = x.copy()
        eigenvector.flags.writeable = False
        return SolveResult(
            eigenvalue=state.eigenvalue,
            eigenvector=eigenvector,
            iterations=state.iterations,
            converged=converged,
            delta=state.delta,
            history=tuple(state.history),
            state=state.phase,
        )


def solve(
    a: np.ndarray,
    n: int,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SolveResult:
    """Dominant eigenpair of an n x n row-major buffer."""
    config = SolverConfig(tolerance=tolerance, max_iterations=max_iterations)
    return PowerIterationSolver(config).solve(a, n)


def solve_matrix(matrix: DenseMatrix, config: SolverConfig | None = None) -> SolveResult:
    """Dominant eigenpair of a DenseMatrix."""
    return PowerIterationSolver(config).solve(matrix.values, matrix.n)
