# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for rendering solve results.

Adapters implement this to present a SolveResult and its timings
(plain text, JSON, ...).
"""
from abc import ABC, abstractmethod

from powermethod.domain.power_iteration import SolveResult
from powermethod.domain.timing import RunTimings


class ResultReporter(ABC):
    """Port for reporting a finished solve."""

    @abstractmethod
    def report(self, result: SolveResult, timings: RunTimings) -> None:
        """Render the result and its read/compute timings."""
        ...
