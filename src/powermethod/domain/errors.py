# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Exception hierarchy for the power method.

Domain code raises InvalidArgumentError and ZeroVectorError. MatrixLoadError
is raised only by MatrixSource adapters; the solver never catches it.
"""


class PowerMethodError(Exception):
    """Base class for every error raised by powermethod."""


class InvalidArgumentError(PowerMethodError, ValueError):
    """Bad tolerance, iteration cap, dimension or buffer length."""


class ZeroVectorError(PowerMethodError, ArithmeticError):
    """Normalization was attempted on a vector of zero magnitude."""

    def __init__(self, message: str, iteration: int | None = None):
        super().__init__(message)
        self.iteration = iteration


class MatrixLoadError(PowerMethodError, OSError):
    """A matrix source could not produce a valid square matrix."""

    def __init__(self, identifier: str, reason: str):
        super().__init__(f"cannot load matrix from {identifier}: {reason}")
        self.identifier = identifier
        self.reason = reason
