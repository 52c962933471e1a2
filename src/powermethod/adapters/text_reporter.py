# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Plain-text result reporter.

Prints the eigenvalue, iteration count and the benchmark timing block.
"""
import sys
from typing import TextIO

from powermethod.domain.power_iteration import SolveResult
from powermethod.domain.timing import RunTimings
from powermethod.ports.report import ResultReporter


class TextResultReporter(ResultReporter):
    """Writes a human-readable summary to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def report(self, result: SolveResult, timings: RunTimings) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        out.write(
            f"\nDominant Eigenvalue: {result.eigenvalue:f}\n"
            f"Read Time: {timings.read_time_s:f}\n"
            f"Number Of Iterations: {result.iterations}\n"
            f"Converged: {'yes' if result.converged else 'no'}\n"
            f"Execution Time: {timings.compute_time_s:f}\n"
            f"Number of Processes: {timings.processes}\n"
            f"Total Time: {timings.total_time_s:f}\n"
            f"Number of Processes * Total Time: {timings.process_time_product_s:f}\n"
            f"Time Per Loop: {timings.time_per_iteration_s:f}\n\n"
        )
        out.flush()
