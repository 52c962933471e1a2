# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON result reporter.

Emits one JSON object per solve, for scripting around the CLI.
"""
import json
import sys
from typing import Any, TextIO

from powermethod.domain.power_iteration import SolveResult
from powermethod.domain.timing import RunTimings
from powermethod.ports.report import ResultReporter


def result_to_dict(result: SolveResult, timings: RunTimings) -> dict[str, Any]:
    """Plain-dict form of a result and its timings."""
    return {
        'eigenvalue': result.eigenvalue,
        'eigenvector': result.eigenvector.tolist(),
        'iterations': result.iterations,
        'converged': result.converged,
        'delta': result.delta,
        'read_time_s': timings.read_time_s,
        'compute_time_s': timings.compute_time_s,
        'total_time_s': timings.total_time_s,
        'processes': timings.processes,
        'process_time_product_s': timings.process_time_product_s,
        'time_per_iteration_s': timings.time_per_iteration_s,
    }


class JsonResultReporter(ResultReporter):
    """Writes the result as an indented JSON object."""

    def __init__(self, stream: TextIO | None = None, include_eigenvector: bool = True):
        self._stream = stream
        self.include_eigenvector = include_eigenvector

    def report(self, result: SolveResult, timings: RunTimings) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        data = result_to_dict(result, timings)
        if not self.include_eigenvector:
            del data['eigenvector']
        json.dump(data, out, indent=2, ensure_ascii=False)
        out.write("\n")
        out.flush()
