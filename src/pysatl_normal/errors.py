"""
Error Taxonomy
==============

Every invalid argument in PySATL Normal is reported immediately through a
single exception type, :class:`DistributionError`, tagged with an
:class:`ErrorKind`. Callers may catch the whole family (it is a
:class:`ValueError`) or branch on :attr:`DistributionError.kind`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum


class ErrorKind(StrEnum):
    """
    Kinds of contract violations.

    Attributes
    ----------
    INVALID_PROBABILITY
        Probability outside ``[0, 1]`` (or NaN).
    LENGTH_MISMATCH
        Sequence or buffer of the wrong length.
    MALFORMED_PRIOR
        Partial or oversized prior sufficient statistics.
    INVALID_PARAMETER
        Parameter values violating a parametrization constraint.
    DEGENERATE_FIT
        Fitting produced no usable scale (zero weight, zero dispersion).
    UNKNOWN_CHARACTERISTIC
        Characteristic name without an analytical implementation.
    """

    INVALID_PROBABILITY = "invalid_probability"
    LENGTH_MISMATCH = "length_mismatch"
    MALFORMED_PRIOR = "malformed_prior"
    INVALID_PARAMETER = "invalid_parameter"
    DEGENERATE_FIT = "degenerate_fit"
    UNKNOWN_CHARACTERISTIC = "unknown_characteristic"


class DistributionError(ValueError):
    """
    Contract violation raised by distribution operations.

    Parameters
    ----------
    kind : ErrorKind
        Category of the violation.
    message : str
        Human-readable description.
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.name}, {str(self)!r})"


__all__ = [
    "ErrorKind",
    "DistributionError",
]
