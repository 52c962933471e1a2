# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Wall-clock diagnostics for one load-and-solve run."""
from dataclasses import dataclass


@dataclass(frozen=True)
class RunTimings:
    """Elapsed seconds for reading the matrix and for the solve.

    processes is always 1; it is kept so reports stay comparable with
    runs of multi-process builds of the same benchmark.
    """
    read_time_s: float
    compute_time_s: float
    iterations: int
    processes: int = 1

    @property
    def total_time_s(self) -> float:
        return self.read_time_s + self.compute_time_s

    @property
    def process_time_product_s(self) -> float:
        return self.processes * self.total_time_s

    @property
    def time_per_iteration_s(self) -> float:
        if self.iterations <= 0:
            return 0.0
        return self.compute_time_s / self.iterations
