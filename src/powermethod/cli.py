# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the dominant-eigenvalue power method.

Usage:
    # Defaults: tolerance 1e-6, at most 500 iterations, dataset /A/value
    powermethod matrix.h5

    # Tighter tolerance and a larger iteration cap
    powermethod matrix.h5 -e 1e-10 -m 5000

    # Matrix stored elsewhere in the file, printed before solving
    powermethod matrix.h5 --dataset /B/value --dump

    # Machine-readable output and solver progress on stderr
    powermethod matrix.h5 --json -vv
"""
import argparse
import logging
import sys
import time

from powermethod.adapters.hdf5_io import DEFAULT_DATASET_PATH, Hdf5MatrixSource
from powermethod.adapters.json_reporter import JsonResultReporter
from powermethod.adapters.text_reporter import TextResultReporter
from powermethod.domain.errors import PowerMethodError
from powermethod.domain.matrix import format_matrix
from powermethod.domain.power_iteration import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    SolveResult,
    SolverConfig,
    solve_matrix,
)
from powermethod.domain.timing import RunTimings
from powermethod.ports import MatrixSource
from powermethod.ports.report import ResultReporter

logger = logging.getLogger(__name__)


def run(
    path: str,
    config: SolverConfig | None = None,
    source: MatrixSource | None = None,
    reporter: ResultReporter | None = None,
    dump: bool = False,
) -> tuple[SolveResult, RunTimings]:
    """
    Load a matrix, solve for its dominant eigenpair and report it.

    Returns:
        (result, timings): the solve result and read/compute wall times.
    """
    if source is None:
        source = Hdf5MatrixSource()
    if reporter is None:
        reporter = TextResultReporter()

    start = time.perf_counter()
    matrix = source.load_matrix(path)
    read_time = time.perf_counter() - start
    logger.info("Loaded %dx%d matrix in %.6f s", matrix.n, matrix.n, read_time)

    if dump:
        sys.stdout.write(format_matrix(matrix))
        sys.stdout.flush()

    start = time.perf_counter()
    result = solve_matrix(matrix, config)
    compute_time = time.perf_counter() - start

    timings = RunTimings(
        read_time_s=read_time,
        compute_time_s=compute_time,
        iterations=result.iterations,
    )
    reporter.report(result, timings)
    return result, timings


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Dominant eigenvalue of a dense square matrix stored in HDF5 (power method)"
    )
    parser.add_argument('filename', help="Path to the HDF5 file holding the matrix")
    parser.add_argument(
        '--tolerance', '-e', type=float, default=DEFAULT_TOLERANCE,
        help=f"Convergence tolerance on |λ - λ_prev| (default: {DEFAULT_TOLERANCE:g})"
    )
    parser.add_argument(
        '--max-iterations', '-m', type=int, default=DEFAULT_MAX_ITERATIONS,
        help=f"Maximum number of iterations (default: {DEFAULT_MAX_ITERATIONS})"
    )
    parser.add_argument(
        '--dataset', default=DEFAULT_DATASET_PATH,
        help=f"Path of the matrix dataset inside the file (default: {DEFAULT_DATASET_PATH})"
    )
    parser.add_argument(
        '--dump', action='store_true', default=False,
        help="Print the matrix before solving"
    )
    parser.add_argument(
        '--json', action='store_true', default=False,
        help="Print the result as JSON instead of text"
    )
    parser.add_argument(
        '--verbose', '-v', action='count', default=0,
        help="Log solver progress to stderr (-v info, -vv every iteration)"
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    reporter = JsonResultReporter() if args.json else TextResultReporter()
    try:
        config = SolverConfig(tolerance=args.tolerance, max_iterations=args.max_iterations)
        config.validate()
        run(
            args.filename,
            config=config,
            source=Hdf5MatrixSource(dataset_path=args.dataset),
            reporter=reporter,
            dump=args.dump,
        )
    except PowerMethodError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
